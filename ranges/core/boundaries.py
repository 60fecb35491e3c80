from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Dict, Generic, Optional, Tuple

from ranges.core.exceptions import ErrorMessages, UnboundedValueError
from ranges.core.types import Ordering, T


class BoundKind(Enum):
    INCLUDED = auto()
    EXCLUDED = auto()
    UNBOUNDED = auto()


class BoundSide(Enum):
    """Whether a bound is used as the start or the end of its range"""

    START = auto()
    END = auto()


@dataclass(frozen=True)
class Bound(Generic[T]):
    """
    One endpoint of a continuous range: a value tagged as included or
    excluded, or no value at all for an unbounded side.
    """

    kind: BoundKind
    value: Optional[T] = None

    @classmethod
    def included(cls, value: T) -> "Bound[T]":
        return cls(BoundKind.INCLUDED, value)

    @classmethod
    def excluded(cls, value: T) -> "Bound[T]":
        return cls(BoundKind.EXCLUDED, value)

    @classmethod
    def unbounded(cls) -> "Bound[T]":
        return cls(BoundKind.UNBOUNDED)

    @property
    def is_bounded(self) -> bool:
        return self.kind is not BoundKind.UNBOUNDED

    def unwrap(self) -> T:
        """Returns the bound value, failing loudly for an unbounded bound"""
        if not self.is_bounded:
            raise UnboundedValueError(ErrorMessages.UNBOUNDED_VALUE)
        return self.value

    def reversed(self) -> "Bound[T]":
        """Swaps included and excluded; unbounded is kept as-is"""
        if self.kind is BoundKind.INCLUDED:
            return Bound.excluded(self.value)
        if self.kind is BoundKind.EXCLUDED:
            return Bound.included(self.value)
        return self

    def __repr__(self) -> str:
        if self.kind is BoundKind.UNBOUNDED:
            return "Unbounded"
        name = "Included" if self.kind is BoundKind.INCLUDED else "Excluded"
        return f"{name}({self.value!r})"


def compare_values(this: Any, other: Any) -> Optional[Ordering]:
    """
    Three-way comparison of two element values.

    Returns None when the values cannot be ordered, either because no
    comparison holds (NaN) or because the comparison raises a TypeError.
    """
    try:
        if this < other:
            return Ordering.LESS
        if this > other:
            return Ordering.GREATER
        if this == other:
            return Ordering.EQUAL
    except TypeError:
        return None
    return None


_S = BoundSide.START
_E = BoundSide.END
_INC = BoundKind.INCLUDED
_EXC = BoundKind.EXCLUDED

# Tie-break for two bounded endpoints holding equal values.
# An excluded end sits just below the value, an included bound on it and an
# excluded start just above it.
_EQUAL_VALUE_ORDERING: Dict[Tuple[BoundKind, BoundKind, BoundSide, BoundSide], Ordering] = {
    (_INC, _INC, _S, _S): Ordering.EQUAL,
    (_INC, _INC, _E, _E): Ordering.EQUAL,
    (_INC, _INC, _S, _E): Ordering.EQUAL,
    (_INC, _INC, _E, _S): Ordering.EQUAL,

    (_INC, _EXC, _S, _S): Ordering.LESS,
    (_INC, _EXC, _E, _E): Ordering.GREATER,
    (_INC, _EXC, _S, _E): Ordering.GREATER,
    (_INC, _EXC, _E, _S): Ordering.LESS,

    (_EXC, _INC, _S, _S): Ordering.GREATER,
    (_EXC, _INC, _E, _E): Ordering.LESS,
    (_EXC, _INC, _S, _E): Ordering.GREATER,
    (_EXC, _INC, _E, _S): Ordering.LESS,

    (_EXC, _EXC, _S, _S): Ordering.EQUAL,
    (_EXC, _EXC, _E, _E): Ordering.EQUAL,
    (_EXC, _EXC, _S, _E): Ordering.GREATER,
    (_EXC, _EXC, _E, _S): Ordering.LESS,
}

# Unbounded start is -inf, unbounded end is +inf
_UNBOUNDED_ORDERING: Dict[Tuple[BoundSide, BoundSide], Ordering] = {
    (_S, _S): Ordering.EQUAL,
    (_E, _E): Ordering.EQUAL,
    (_S, _E): Ordering.LESS,
    (_E, _S): Ordering.GREATER,
}


def compare_bounds(
        this: Bound,
        this_side: BoundSide,
        other: Bound,
        other_side: BoundSide,
) -> Optional[Ordering]:
    """
    Orders two range endpoints, taking their side into account.

    Returns None when the underlying values are incomparable.
    """
    if not this.is_bounded:
        if not other.is_bounded:
            return _UNBOUNDED_ORDERING[(this_side, other_side)]
        return Ordering.LESS if this_side is BoundSide.START else Ordering.GREATER

    if not other.is_bounded:
        return Ordering.GREATER if other_side is BoundSide.START else Ordering.LESS

    ordering = compare_values(this.value, other.value)
    if ordering is not Ordering.EQUAL:
        return ordering

    return _EQUAL_VALUE_ORDERING[(this.kind, other.kind, this_side, other_side)]
