"""ComparisonMode and PairingStrategy for comparison configuration.

ComparisonMode is a frozen (immutable) dataclass holding the two orthogonal
strictness flags.  The four conventional modes are the 2x2 product of those
flags and are exported as module-level constants.  PairingStrategy selects
how unordered arrays of composite elements are paired when no unique key
identifies them.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import StrEnum, auto

__all__ = [
    "LENIENT",
    "NON_EXTENSIBLE",
    "STRICT",
    "STRICT_ORDER",
    "ComparisonMode",
    "PairingStrategy",
]


class PairingStrategy(StrEnum):
    """How to pair composite elements of an unordered array.

    - GREEDY:  Repeatedly commit the pair with the fewest failures.
    - OPTIMAL: Minimise the total failure count via the Hungarian algorithm.
    """

    GREEDY = auto()
    OPTIMAL = auto()


@dataclass(frozen=True, slots=True)
class ComparisonMode:
    """Immutable strictness policy.

    Attributes:
        extensible: When True, the actual document may contain object fields
            absent from the expected one, and unordered arrays may contain
            extra elements.  When False, every actual field and element must
            be accounted for.
        strict_order: When True, arrays are compared position by position.
            When False, arrays are compared as unordered collections.

    Object key order is never significant.
    """

    extensible: bool
    strict_order: bool

    def __post_init__(self) -> None:
        if not isinstance(self.extensible, bool):
            msg = f"extensible must be a bool, got {self.extensible!r}"
            raise TypeError(msg)
        if not isinstance(self.strict_order, bool):
            msg = f"strict_order must be a bool, got {self.strict_order!r}"
            raise TypeError(msg)

    @classmethod
    def from_strict(cls, strict: bool) -> ComparisonMode:
        """Map the legacy boolean strictness flag onto a mode.

        ``True`` selects STRICT, ``False`` selects LENIENT.
        """
        return STRICT if strict else LENIENT

    @property
    def name(self) -> str:
        """Conventional name of this mode (e.g. ``"NON_EXTENSIBLE"``)."""
        if self.strict_order:
            return "STRICT_ORDER" if self.extensible else "STRICT"
        return "LENIENT" if self.extensible else "NON_EXTENSIBLE"

    def with_extensible(self, extensible: bool) -> ComparisonMode:
        return replace(self, extensible=extensible)

    def with_strict_order(self, strict_order: bool) -> ComparisonMode:
        return replace(self, strict_order=strict_order)

    def __str__(self) -> str:
        return self.name


STRICT = ComparisonMode(extensible=False, strict_order=True)
LENIENT = ComparisonMode(extensible=True, strict_order=False)
NON_EXTENSIBLE = ComparisonMode(extensible=False, strict_order=False)
STRICT_ORDER = ComparisonMode(extensible=True, strict_order=True)
