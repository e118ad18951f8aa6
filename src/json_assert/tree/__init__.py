"""Tree subpackage for the JSON value model.

Re-exports the public API for the tree module:
- ValueKind: StrEnum of the six JSON value kinds
- kind_of: classifies a plain Python value into a ValueKind
- scalars_equal: default leaf equality (numeric by value)
- TreeValidator / validate_tree: reject values that are not JSON
- field_path / index_path: build ``a.b[1]`` style paths
"""

from json_assert.tree.nodes import ValueKind, kind_of, scalars_equal
from json_assert.tree.paths import field_path, index_path
from json_assert.tree.validator import TreeValidator, validate_tree

__all__ = [
    "TreeValidator",
    "ValueKind",
    "field_path",
    "index_path",
    "kind_of",
    "scalars_equal",
    "validate_tree",
]
