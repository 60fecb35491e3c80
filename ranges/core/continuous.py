import logging
from enum import Enum, auto
from typing import Any, Dict, Generic, List, Optional, Tuple

from ranges.core.boundaries import Bound, BoundKind, BoundSide, compare_bounds, compare_values
from ranges.core.exceptions import (
    DisjointUnionError,
    ErrorMessages,
    IncomparableBoundsError,
    InvalidRangeError,
    OrderingContractError,
)
from ranges.core.relation import RangesRelation
from ranges.core.types import Ordering, T

logger = logging.getLogger(__name__)


class RangeShape(Enum):
    EMPTY = auto()  # []
    SINGLE = auto()  # value
    INCLUSIVE = auto()  # [start..end]
    EXCLUSIVE = auto()  # (start..end)
    START_EXCLUSIVE = auto()  # (start..end]
    END_EXCLUSIVE = auto()  # [start..end)
    FROM = auto()  # [start..)
    FROM_EXCLUSIVE = auto()  # (start..)
    TO = auto()  # (..end]
    TO_EXCLUSIVE = auto()  # (..end)
    FULL = auto()  # (..)


_INC = BoundKind.INCLUDED
_EXC = BoundKind.EXCLUDED
_UNB = BoundKind.UNBOUNDED

# (start kind, end kind) of every shape that has bounds
_SHAPE_BOUND_KINDS: Dict[RangeShape, Tuple[BoundKind, BoundKind]] = {
    RangeShape.SINGLE: (_INC, _INC),
    RangeShape.INCLUSIVE: (_INC, _INC),
    RangeShape.EXCLUSIVE: (_EXC, _EXC),
    RangeShape.START_EXCLUSIVE: (_EXC, _INC),
    RangeShape.END_EXCLUSIVE: (_INC, _EXC),
    RangeShape.FROM: (_INC, _UNB),
    RangeShape.FROM_EXCLUSIVE: (_EXC, _UNB),
    RangeShape.TO: (_UNB, _INC),
    RangeShape.TO_EXCLUSIVE: (_UNB, _EXC),
    RangeShape.FULL: (_UNB, _UNB),
}

# factory used by from_bounds for each (start kind, end kind) pair
_FACTORY_BY_BOUND_KINDS: Dict[Tuple[BoundKind, BoundKind], str] = {
    (_INC, _INC): "inclusive",
    (_EXC, _EXC): "exclusive",
    (_EXC, _INC): "start_exclusive",
    (_INC, _EXC): "end_exclusive",
    (_INC, _UNB): "from_",
    (_EXC, _UNB): "from_exclusive",
    (_UNB, _INC): "to",
    (_UNB, _EXC): "to_exclusive",
    (_UNB, _UNB): "full",
}

_HALF_OPEN_SHAPES = (
    RangeShape.EXCLUSIVE,
    RangeShape.START_EXCLUSIVE,
    RangeShape.END_EXCLUSIVE,
)

_L = Ordering.LESS
_E = Ordering.EQUAL
_G = Ordering.GREATER

# relation by (start/start, end/end) orderings, once touching and disjoint
# ranges have been ruled out
_RELATION_BY_ORDERINGS: Dict[Tuple[Ordering, Ordering], RangesRelation] = {
    (_E, _L): RangesRelation.STARTS,
    (_E, _G): RangesRelation.IS_STARTED,
    (_G, _E): RangesRelation.FINISHES,
    (_L, _E): RangesRelation.IS_FINISHED,
    (_L, _G): RangesRelation.STRICTLY_CONTAINS,
    (_G, _L): RangesRelation.IS_STRICTLY_CONTAINED,
    (_E, _E): RangesRelation.EQUAL,
}


def _after_start(value: Any, start: Bound) -> bool:
    if start.kind is BoundKind.UNBOUNDED:
        return True
    ordering = compare_values(value, start.value)
    if start.kind is BoundKind.INCLUDED:
        return ordering in (Ordering.GREATER, Ordering.EQUAL)
    return ordering is Ordering.GREATER


def _before_end(value: Any, end: Bound) -> bool:
    if end.kind is BoundKind.UNBOUNDED:
        return True
    ordering = compare_values(value, end.value)
    if end.kind is BoundKind.INCLUDED:
        return ordering in (Ordering.LESS, Ordering.EQUAL)
    return ordering is Ordering.LESS


class ContinuousRange(Generic[T]):
    """
    A single contiguous range of values of an ordered element type.

    The shape tag tells which bounds exist and whether they are included.
    `lower` holds the start value (and the value of a single-value range),
    `upper` holds the end value.

    Building a range through its constructor performs no validation, so a
    contradictory range like `ContinuousRange(RangeShape.INCLUSIVE, 5, 1)` is
    representable. The named factories normalize eagerly, and every query
    re-derives emptiness from the stored values rather than trusting the tag.
    """

    __slots__ = ("shape", "lower", "upper")

    def __init__(
            self,
            shape: RangeShape,
            lower: Optional[T] = None,
            upper: Optional[T] = None,
    ):
        self.shape = shape
        self.lower = lower
        self.upper = upper

    # Constructors
    # ------------

    @classmethod
    def empty(cls) -> "ContinuousRange[T]":
        return cls(RangeShape.EMPTY)

    @classmethod
    def single(cls, value: T) -> "ContinuousRange[T]":
        return cls(RangeShape.SINGLE, value)

    @classmethod
    def inclusive(cls, start: T, end: T) -> "ContinuousRange[T]":
        """`[start..end]`, a single value when both ends are equal"""
        ordering = compare_values(start, end)
        if ordering is Ordering.EQUAL:
            return cls.single(start)
        if ordering is Ordering.GREATER:
            return cls.empty()
        return cls(RangeShape.INCLUSIVE, start, end)

    @classmethod
    def exclusive(cls, start: T, end: T) -> "ContinuousRange[T]":
        return cls._half_open(RangeShape.EXCLUSIVE, start, end)

    @classmethod
    def start_exclusive(cls, start: T, end: T) -> "ContinuousRange[T]":
        return cls._half_open(RangeShape.START_EXCLUSIVE, start, end)

    @classmethod
    def end_exclusive(cls, start: T, end: T) -> "ContinuousRange[T]":
        return cls._half_open(RangeShape.END_EXCLUSIVE, start, end)

    @classmethod
    def _half_open(cls, shape: RangeShape, start: T, end: T) -> "ContinuousRange[T]":
        if compare_values(start, end) in (Ordering.GREATER, Ordering.EQUAL):
            return cls.empty()
        return cls(shape, start, end)

    @classmethod
    def from_(cls, start: T) -> "ContinuousRange[T]":
        """`[start..)`"""
        return cls(RangeShape.FROM, start)

    @classmethod
    def from_exclusive(cls, start: T) -> "ContinuousRange[T]":
        return cls(RangeShape.FROM_EXCLUSIVE, start)

    @classmethod
    def to(cls, end: T) -> "ContinuousRange[T]":
        """`(..end]`"""
        return cls(RangeShape.TO, upper=end)

    @classmethod
    def to_exclusive(cls, end: T) -> "ContinuousRange[T]":
        return cls(RangeShape.TO_EXCLUSIVE, upper=end)

    @classmethod
    def full(cls) -> "ContinuousRange[T]":
        return cls(RangeShape.FULL)

    @classmethod
    def from_bounds(cls, bounds: Tuple[Bound, Bound]) -> "ContinuousRange[T]":
        """Creates a range from a (start, end) pair of bounds"""
        start, end = bounds
        factory = getattr(cls, _FACTORY_BY_BOUND_KINDS[(start.kind, end.kind)])
        values = [bound.value for bound in (start, end) if bound.is_bounded]
        return factory(*values)

    @classmethod
    def from_range(cls, native: range) -> "ContinuousRange[int]":
        """Maps `range(start, stop)` to `[start..stop)`"""
        if native.step != 1:
            raise InvalidRangeError(ErrorMessages.STEPPED_RANGE.format(native.step))
        return cls.end_exclusive(native.start, native.stop)

    @classmethod
    def from_slice(cls, native: slice) -> "ContinuousRange[T]":
        """
        Maps a slice to a half-open range, `None` ends being unbounded:
        `slice(a, b)` is `[a..b)`, `slice(a, None)` is `[a..)`,
        `slice(None, b)` is `(..b)` and `slice(None)` is `(..)`.
        """
        if native.step is not None:
            raise InvalidRangeError(ErrorMessages.STEPPED_RANGE.format(native.step))
        start = Bound.unbounded() if native.start is None else Bound.included(native.start)
        end = Bound.unbounded() if native.stop is None else Bound.excluded(native.stop)
        return cls.from_bounds((start, end))

    @classmethod
    def from_native(cls, native: Any) -> "ContinuousRange[T]":
        """Builds a range from a native Python object"""
        if isinstance(native, ContinuousRange):
            return native.copy()
        if native is None or (isinstance(native, tuple) and not native):
            return cls.empty()
        if native is Ellipsis:
            return cls.full()
        if isinstance(native, range):
            return cls.from_range(native)
        if isinstance(native, slice):
            return cls.from_slice(native)
        raise InvalidRangeError(ErrorMessages.UNSUPPORTED_NATIVE.format(native))

    def copy(self) -> "ContinuousRange[T]":
        return ContinuousRange(self.shape, self.lower, self.upper)

    # Bounds
    # ------

    def range_bounds(self) -> Optional[Tuple[Bound, Bound]]:
        """Returns the (start, end) bounds, or None for an empty range"""
        if self.shape is RangeShape.EMPTY:
            return None
        start_kind, end_kind = _SHAPE_BOUND_KINDS[self.shape]
        end_value = self.lower if self.shape is RangeShape.SINGLE else self.upper
        start = Bound.unbounded() if start_kind is _UNB else Bound(start_kind, self.lower)
        end = Bound.unbounded() if end_kind is _UNB else Bound(end_kind, end_value)
        return start, end

    def start(self) -> Optional[Bound]:
        bounds = self.range_bounds()
        return None if bounds is None else bounds[0]

    def end(self) -> Optional[Bound]:
        bounds = self.range_bounds()
        return None if bounds is None else bounds[1]

    # Queries
    # -------

    def contains(self, value: T) -> bool:
        """Checks if the range contains the provided value"""
        if self.shape is RangeShape.EMPTY:
            return False
        if self.shape is RangeShape.FULL:
            return True
        start, end = self.range_bounds()
        return _after_start(value, start) and _before_end(value, end)

    def __contains__(self, value: T) -> bool:
        return self.contains(value)

    def is_empty(self) -> bool:
        if self.shape is RangeShape.EMPTY:
            return True
        # bounded ranges with inverted bounds are considered empty
        if self.shape is RangeShape.INCLUSIVE:
            return compare_values(self.lower, self.upper) is Ordering.GREATER
        if self.shape in _HALF_OPEN_SHAPES:
            return compare_values(self.lower, self.upper) in (Ordering.GREATER, Ordering.EQUAL)
        return False

    def is_full(self) -> bool:
        return self.shape is RangeShape.FULL

    def compare(self, other: "ContinuousRange[T]") -> Optional[RangesRelation]:
        """
        Classifies the relation between this range and another one.

        Inspired by "Maintaining Knowledge about Temporal Intervals" by James F. Allen
        (Communications of the ACM, November 1983).

        Returns None when the relation is undefined: only one of the ranges is
        empty, or two bound values cannot be ordered.

        Raises:
            OrderingContractError: if the element ordering is not a valid total order
        """
        # Empty ranges have no bounds to compare
        if self.is_empty():
            return RangesRelation.EQUAL if other.is_empty() else None
        if other.is_empty():
            return None

        self_start, self_end = self.range_bounds()
        other_start, other_end = other.range_bounds()

        end_start = compare_bounds(self_end, BoundSide.END, other_start, BoundSide.START)
        if end_start is None:
            return None
        if end_start is Ordering.LESS:
            return RangesRelation.STRICTLY_BEFORE

        start_end = compare_bounds(self_start, BoundSide.START, other_end, BoundSide.END)
        if start_end is None:
            return None
        if start_end is Ordering.GREATER:
            return RangesRelation.STRICTLY_AFTER

        self_span = compare_bounds(self_start, BoundSide.START, self_end, BoundSide.END)
        other_span = compare_bounds(other_start, BoundSide.START, other_end, BoundSide.END)
        if self_span is None or other_span is None:
            return None

        # single values never "meet", they start or finish the other range
        degenerate = Ordering.EQUAL in (self_span, other_span)
        if end_start is Ordering.EQUAL and not degenerate:
            return RangesRelation.MEETS
        if start_end is Ordering.EQUAL and not degenerate:
            return RangesRelation.IS_MET

        start_start = compare_bounds(self_start, BoundSide.START, other_start, BoundSide.START)
        end_end = compare_bounds(self_end, BoundSide.END, other_end, BoundSide.END)
        if start_start is None or end_end is None:
            return None

        if start_start is _L and end_end is _L and end_start is _G:
            return RangesRelation.OVERLAPS
        if start_start is _G and end_end is _G and start_end is _L:
            return RangesRelation.IS_OVERLAPPED

        relation = _RELATION_BY_ORDERINGS.get((start_start, end_end))
        if relation is None:
            message = ErrorMessages.ORDERING_CONTRACT.format(repr(self), repr(other))
            logger.error(message)
            raise OrderingContractError(message)
        return relation

    def intersects(self, other: "ContinuousRange[T]") -> bool:
        # Two empty ranges are 'equal' but they share no value
        if self.is_empty() and other.is_empty():
            return False
        relation = self.compare(other)
        return relation is not None and relation.intersects()

    # Set operations
    # --------------

    def union(self, other: "ContinuousRange[T]") -> Optional["ContinuousRange[T]"]:
        """
        Returns the range covering both ranges, or None when they don't form a
        single continuous range.
        """
        if self.is_empty():
            return other.copy()
        if other.is_empty():
            return self.copy()
        if self.is_full() or other.is_full():
            return ContinuousRange.full()

        relation = self.compare(other)
        if relation is None:
            return None
        if relation is RangesRelation.STRICTLY_BEFORE:
            return _adjacent_union(self, other)
        if relation is RangesRelation.STRICTLY_AFTER:
            return _adjacent_union(other, self)
        if relation in (RangesRelation.MEETS, RangesRelation.OVERLAPS):
            return ContinuousRange.from_bounds((self.start(), other.end()))
        if relation in (RangesRelation.IS_MET, RangesRelation.IS_OVERLAPPED):
            return ContinuousRange.from_bounds((other.start(), self.end()))
        if relation in (
                RangesRelation.STARTS,
                RangesRelation.FINISHES,
                RangesRelation.IS_STRICTLY_CONTAINED,
        ):
            return other.copy()
        return self.copy()

    def intersection(self, other: "ContinuousRange[T]") -> "ContinuousRange[T]":
        if self.is_empty() or other.is_empty():
            return ContinuousRange.empty()
        if self.is_full():
            return other.copy()
        if other.is_full():
            return self.copy()

        relation = self.compare(other)
        if relation is None or relation.disjoint():
            return ContinuousRange.empty()
        if relation is RangesRelation.MEETS:
            return _touching_point(self.end(), other.start())
        if relation is RangesRelation.IS_MET:
            return _touching_point(other.end(), self.start())
        if relation is RangesRelation.OVERLAPS:
            return ContinuousRange.from_bounds((other.start(), self.end()))
        if relation is RangesRelation.IS_OVERLAPPED:
            return ContinuousRange.from_bounds((self.start(), other.end()))
        if relation in (
                RangesRelation.IS_STARTED,
                RangesRelation.IS_FINISHED,
                RangesRelation.STRICTLY_CONTAINS,
        ):
            return other.copy()
        return self.copy()

    def difference(self, other: "ContinuousRange[T]") -> Optional["ContinuousRange[T]"]:
        """
        Returns the values of this range that are not in the other one.

        None means the result can't be expressed as a single continuous range:
        either the other range is strictly contained in this one and splits it
        in two, or the relation between the ranges is undefined.
        """
        if self.is_empty():
            return ContinuousRange.empty()
        if other.is_empty():
            return self.copy()

        relation = self.compare(other)
        if relation is None or relation is RangesRelation.STRICTLY_CONTAINS:
            return None
        if relation.disjoint():
            return self.copy()
        if relation in (
                RangesRelation.EQUAL,
                RangesRelation.STARTS,
                RangesRelation.FINISHES,
                RangesRelation.IS_STRICTLY_CONTAINED,
        ):
            return ContinuousRange.empty()
        if relation is RangesRelation.MEETS:
            return ContinuousRange.from_bounds((self.start(), self.end().reversed()))
        if relation is RangesRelation.IS_MET:
            return ContinuousRange.from_bounds((self.start().reversed(), self.end()))
        if relation in (RangesRelation.OVERLAPS, RangesRelation.IS_FINISHED):
            return ContinuousRange.from_bounds((self.start(), other.start().reversed()))
        # IS_OVERLAPPED, IS_STARTED
        return ContinuousRange.from_bounds((other.end().reversed(), self.end()))

    def split(self, other: "ContinuousRange[T]") -> List["ContinuousRange[T]"]:
        """
        Returns this range minus the other one as a list of 0, 1 or 2
        non-empty continuous ranges, in ascending order.
        """
        if self.is_empty():
            return []
        if other.is_empty():
            return [self.copy()]

        relation = self.compare(other)
        if relation is None:
            raise IncomparableBoundsError(ErrorMessages.INCOMPARABLE_BOUNDS.format(self, other))
        if relation is RangesRelation.STRICTLY_CONTAINS:
            return [
                ContinuousRange.from_bounds((self.start(), other.start().reversed())),
                ContinuousRange.from_bounds((other.end().reversed(), self.end())),
            ]

        remainder = self.difference(other)
        return [] if remainder.is_empty() else [remainder]

    def __or__(self, other: "ContinuousRange[T]") -> "ContinuousRange[T]":
        result = self.union(other)
        if result is None:
            raise DisjointUnionError(ErrorMessages.NOT_CONTIGUOUS.format("Union", self, other))
        return result

    def __and__(self, other: "ContinuousRange[T]") -> "ContinuousRange[T]":
        return self.intersection(other)

    def __sub__(self, other: "ContinuousRange[T]") -> "ContinuousRange[T]":
        result = self.difference(other)
        if result is None:
            raise DisjointUnionError(ErrorMessages.NOT_CONTIGUOUS.format("Difference", self, other))
        return result

    # Normalization
    # -------------

    def simplify_mut(self) -> None:
        """Applies the factories' normalization in place"""
        if self.shape is RangeShape.INCLUSIVE:
            ordering = compare_values(self.lower, self.upper)
            if ordering is Ordering.EQUAL:
                self.shape, self.upper = RangeShape.SINGLE, None
            elif ordering is Ordering.GREATER:
                self._clear()
        elif self.shape in _HALF_OPEN_SHAPES:
            if compare_values(self.lower, self.upper) in (Ordering.GREATER, Ordering.EQUAL):
                self._clear()

    def simplify(self) -> "ContinuousRange[T]":
        simplified = self.copy()
        simplified.simplify_mut()
        return simplified

    def _clear(self) -> None:
        self.shape, self.lower, self.upper = RangeShape.EMPTY, None, None

    # Value semantics
    # ---------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ContinuousRange):
            return NotImplemented
        return (self.shape, self.lower, self.upper) == (other.shape, other.lower, other.upper)

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, ContinuousRange):
            return NotImplemented
        return not self.__eq__(other)

    def __hash__(self) -> int:
        return hash((self.shape, self.lower, self.upper))

    def __repr__(self) -> str:
        if self.shape is RangeShape.EMPTY:
            return "[]"
        if self.shape is RangeShape.FULL:
            return "(..)"
        if self.shape is RangeShape.SINGLE:
            return repr(self.lower)
        start_kind, end_kind = _SHAPE_BOUND_KINDS[self.shape]
        opening = "[" if start_kind is _INC else "("
        closing = "]" if end_kind is _INC else ")"
        start = "" if start_kind is _UNB else repr(self.lower)
        end = "" if end_kind is _UNB else repr(self.upper)
        return f"{opening}{start}..{end}{closing}"


def _adjacent_union(first: ContinuousRange, second: ContinuousRange) -> Optional[ContinuousRange]:
    """
    Joins two disjoint ranges that leave no value between them, like
    `[1..5)` and `[5..10]`. Returns None when there is a gap.
    """
    end, start = first.end(), second.start()
    if not (end.is_bounded and start.is_bounded):
        return None
    if compare_values(end.value, start.value) is not Ordering.EQUAL:
        return None
    if end.kind is start.kind:
        return None
    return ContinuousRange.from_bounds((first.start(), second.end()))


def _touching_point(end: Bound, start: Bound) -> ContinuousRange:
    """The value shared by two ranges meeting on end / start bounds"""
    if end.kind is not BoundKind.INCLUDED or start.kind is not BoundKind.INCLUDED:
        return ContinuousRange.empty()
    return ContinuousRange.single(end.unwrap())
