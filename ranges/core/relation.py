from enum import Enum, auto


class RangesRelation(Enum):
    """
    Classification of the relationship between two continuous ranges.
    Based on Allen's interval algebra.

    Each member reads as "A <relation> B".
    """

    STRICTLY_BEFORE = auto()  # [A] [B], no shared value
    STRICTLY_AFTER = auto()  # [B] [A], no shared value
    MEETS = auto()  # A ends on the value where B starts
    IS_MET = auto()  # B ends on the value where A starts
    OVERLAPS = auto()  # A starts first and ends inside B
    IS_OVERLAPPED = auto()  # B starts first and ends inside A
    STARTS = auto()  # A and B start together, A ends first
    IS_STARTED = auto()  # A and B start together, B ends first
    STRICTLY_CONTAINS = auto()  # B completely inside A, no shared bound
    IS_STRICTLY_CONTAINED = auto()  # A completely inside B, no shared bound
    FINISHES = auto()  # A and B end together, A starts later
    IS_FINISHED = auto()  # A and B end together, B starts later
    EQUAL = auto()  # A and B are identical

    def intersects(self) -> bool:
        """True for every relation where the two ranges share at least one value"""
        return self not in (RangesRelation.STRICTLY_BEFORE, RangesRelation.STRICTLY_AFTER)

    def disjoint(self) -> bool:
        return not self.intersects()

    def contains(self) -> bool:
        """True when the first range covers all of the second one"""
        return self in (
            RangesRelation.EQUAL,
            RangesRelation.STRICTLY_CONTAINS,
            RangesRelation.IS_STARTED,
            RangesRelation.IS_FINISHED,
        )

    def mirror(self) -> "RangesRelation":
        """The same relationship seen from the second range"""
        return _MIRRORS[self]


_MIRRORS = {
    RangesRelation.STRICTLY_BEFORE: RangesRelation.STRICTLY_AFTER,
    RangesRelation.STRICTLY_AFTER: RangesRelation.STRICTLY_BEFORE,
    RangesRelation.MEETS: RangesRelation.IS_MET,
    RangesRelation.IS_MET: RangesRelation.MEETS,
    RangesRelation.OVERLAPS: RangesRelation.IS_OVERLAPPED,
    RangesRelation.IS_OVERLAPPED: RangesRelation.OVERLAPS,
    RangesRelation.STARTS: RangesRelation.IS_STARTED,
    RangesRelation.IS_STARTED: RangesRelation.STARTS,
    RangesRelation.STRICTLY_CONTAINS: RangesRelation.IS_STRICTLY_CONTAINED,
    RangesRelation.IS_STRICTLY_CONTAINED: RangesRelation.STRICTLY_CONTAINS,
    RangesRelation.FINISHES: RangesRelation.IS_FINISHED,
    RangesRelation.IS_FINISHED: RangesRelation.FINISHES,
    RangesRelation.EQUAL: RangesRelation.EQUAL,
}
