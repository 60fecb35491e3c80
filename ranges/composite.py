import logging
from functools import cmp_to_key
from typing import Any, Generic, Iterable, Iterator, List, Optional, Tuple

from ranges.core.boundaries import BoundSide, compare_bounds
from ranges.core.continuous import ContinuousRange
from ranges.core.exceptions import ErrorMessages, IncomparableBoundsError
from ranges.core.types import T

logger = logging.getLogger(__name__)


def _compare_starts(range_a: ContinuousRange, range_b: ContinuousRange) -> int:
    ordering = compare_bounds(range_a.start(), BoundSide.START, range_b.start(), BoundSide.START)
    if ordering is None:
        raise IncomparableBoundsError(
            ErrorMessages.INCOMPARABLE_BOUNDS.format(range_a.start(), range_b.start())
        )
    return int(ordering)


def _normalize(items: Iterable[Any]) -> List[ContinuousRange]:
    """
    Flattens the items into sorted, disjoint and non-adjacent continuous
    ranges. Empty items are dropped and a full item absorbs everything.
    """
    flat: List[ContinuousRange] = []
    for item in items:
        if isinstance(item, CompositeRange):
            flat.extend(item._members)
            continue
        if not isinstance(item, ContinuousRange):
            item = ContinuousRange.from_native(item)
        if item.is_empty():
            continue
        if item.is_full():
            return [ContinuousRange.full()]
        flat.append(item.simplify())

    flat.sort(key=cmp_to_key(_compare_starts))

    merged: List[ContinuousRange] = []
    for item in flat:
        if merged:
            joined = merged[-1].union(item)
            if joined is not None:
                logger.debug("Merging %r and %r into %r", merged[-1], item, joined)
                merged[-1] = joined
                continue
        merged.append(item)
    return merged


class CompositeRange(Generic[T]):
    """
    A union of continuous ranges, kept as a sorted tuple of disjoint members.

    Two members never touch: ranges that overlap or leave no value between
    them are merged when the composite is built.
    """

    __slots__ = ("_members",)

    def __init__(self, items: Iterable[Any] = ()):
        self._members: Tuple[ContinuousRange, ...] = tuple(_normalize(items))

    @classmethod
    def composite(cls, *items: Any) -> "CompositeRange[T]":
        return cls(items)

    @property
    def members(self) -> Tuple[ContinuousRange, ...]:
        return tuple(member.copy() for member in self._members)

    def to_continuous(self) -> Optional[ContinuousRange]:
        """The equivalent continuous range, or None if there are gaps"""
        if not self._members:
            return ContinuousRange.empty()
        if len(self._members) == 1:
            return self._members[0].copy()
        return None

    # Queries
    # -------

    def contains(self, value: T) -> bool:
        return any(member.contains(value) for member in self._members)

    def __contains__(self, value: T) -> bool:
        return self.contains(value)

    def is_empty(self) -> bool:
        return not self._members

    def is_full(self) -> bool:
        return len(self._members) == 1 and self._members[0].is_full()

    def intersects(self, other: Any) -> bool:
        return not self.intersection(other).is_empty()

    # Set operations
    # --------------

    def union(self, other: Any) -> "CompositeRange[T]":
        return CompositeRange(self._members + _members_of(other))

    def intersection(self, other: Any) -> "CompositeRange[T]":
        others = _members_of(other)
        return CompositeRange(
            member.intersection(cut) for member in self._members for cut in others
        )

    def difference(self, other: Any) -> "CompositeRange[T]":
        remaining = list(self._members)
        for cut in _members_of(other):
            remaining = [piece for member in remaining for piece in member.split(cut)]
        return CompositeRange(remaining)

    def complement(self) -> "CompositeRange[T]":
        return CompositeRange([ContinuousRange.full()]).difference(self)

    __or__ = union
    __and__ = intersection
    __sub__ = difference

    # Value semantics
    # ---------------

    def __iter__(self) -> Iterator[ContinuousRange]:
        return iter(self.members)

    def __len__(self) -> int:
        return len(self._members)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CompositeRange):
            return NotImplemented
        return self._members == other._members

    def __hash__(self) -> int:
        return hash(self._members)

    def __repr__(self) -> str:
        if not self._members:
            return "[]"
        return "{" + ", ".join(repr(member) for member in self._members) + "}"


def _members_of(other: Any) -> Tuple[ContinuousRange, ...]:
    if isinstance(other, CompositeRange):
        return other._members
    return CompositeRange([other])._members
