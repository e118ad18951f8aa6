"""Path strings addressing values inside a JSON tree.

Paths use dotted field names with bracketed array indices, e.g.
``friends[1].pets``.  The root path is the empty string.
"""

from __future__ import annotations

__all__ = ["ROOT", "display_path", "field_path", "index_path"]

ROOT = ""


def field_path(prefix: str, key: str) -> str:
    return f"{prefix}.{key}" if prefix else key


def index_path(prefix: str, index: int) -> str:
    return f"{prefix}[{index}]"


def display_path(path: str) -> str:
    """Render a path for messages; the root has no name of its own."""
    return path if path else "<root>"
