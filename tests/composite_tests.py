import logging

import pytest

from ranges.composite import CompositeRange
from ranges.core.continuous import ContinuousRange, RangeShape
from ranges.core.exceptions import IncomparableBoundsError, InvalidRangeError


class TestNormalization:
    def test_members_are_sorted(self):
        composite = CompositeRange.composite(ContinuousRange.inclusive(5, 10), ContinuousRange.inclusive(0, 3))
        assert composite.members == (ContinuousRange.inclusive(0, 3), ContinuousRange.inclusive(5, 10))

    def test_overlapping_members_are_merged(self):
        composite = CompositeRange.composite(
            ContinuousRange.inclusive(0, 5),
            ContinuousRange.inclusive(3, 10),
            ContinuousRange.single(4),
        )
        assert composite.members == (ContinuousRange.inclusive(0, 10),)

    def test_adjacent_members_are_merged(self):
        composite = CompositeRange.composite(ContinuousRange.end_exclusive(0, 5), ContinuousRange.inclusive(5, 10))
        assert composite.members == (ContinuousRange.inclusive(0, 10),)

    def test_excluded_gap_is_kept(self):
        composite = CompositeRange.composite(ContinuousRange.end_exclusive(0, 5), ContinuousRange.start_exclusive(5, 10))
        assert len(composite) == 2
        assert 5 not in composite

    def test_empty_members_are_dropped(self):
        composite = CompositeRange.composite(
            ContinuousRange.empty(),
            None,
            ContinuousRange.inclusive(1, 2),
        )
        assert composite.members == (ContinuousRange.inclusive(1, 2),)

    def test_contradictory_members_are_simplified(self):
        composite = CompositeRange.composite(
            ContinuousRange(RangeShape.INCLUSIVE, 5, 1),
            ContinuousRange(RangeShape.INCLUSIVE, 3, 3),
        )
        assert composite.members == (ContinuousRange.single(3),)

    def test_full_member_absorbs_everything(self):
        composite = CompositeRange.composite(ContinuousRange.inclusive(1, 2), ContinuousRange.full())
        assert composite.is_full()
        assert composite.members == (ContinuousRange.full(),)

    def test_nested_composites_are_flattened(self):
        inner = CompositeRange.composite(ContinuousRange.inclusive(0, 3))
        composite = CompositeRange.composite(inner, ContinuousRange.inclusive(2, 6))
        assert composite.members == (ContinuousRange.inclusive(0, 6),)

    def test_native_members(self):
        composite = CompositeRange.composite(range(0, 3), slice(5, None))
        assert composite.members == (ContinuousRange.end_exclusive(0, 3), ContinuousRange.from_(5))

    def test_unsupported_member(self):
        with pytest.raises(InvalidRangeError):
            CompositeRange.composite("abc")

    def test_incomparable_members(self):
        with pytest.raises(IncomparableBoundsError):
            CompositeRange.composite(ContinuousRange.inclusive(1, 2), ContinuousRange.inclusive("a", "b"))

    def test_merge_is_logged(self, caplog):
        caplog.set_level(logging.DEBUG, logger="ranges.composite")
        CompositeRange.composite(ContinuousRange.inclusive(0, 5), ContinuousRange.inclusive(3, 10))
        assert "Merging [0..5] and [3..10] into [0..10]" in caplog.text


class TestQueries:
    composite = CompositeRange.composite(ContinuousRange.inclusive(0, 3), ContinuousRange.end_exclusive(5, 10))

    @pytest.mark.parametrize(
        "value, expected",
        [(-1, False), (0, True), (3, True), (4, False), (5, True), (9.5, True), (10, False)],
    )
    def test_contains(self, value, expected):
        assert self.composite.contains(value) is expected
        assert (value in self.composite) is expected

    def test_is_empty(self):
        assert CompositeRange().is_empty()
        assert CompositeRange.composite(ContinuousRange.empty()).is_empty()
        assert not self.composite.is_empty()

    def test_to_continuous(self):
        assert self.composite.to_continuous() is None
        assert CompositeRange().to_continuous() == ContinuousRange.empty()
        assert CompositeRange.composite(range(1, 4)).to_continuous() == ContinuousRange.end_exclusive(1, 4)

    def test_intersects(self):
        assert self.composite.intersects(ContinuousRange.inclusive(3, 4))
        assert not self.composite.intersects(ContinuousRange.exclusive(3, 5))
        assert not self.composite.intersects(CompositeRange())


class TestSetOperations:
    def test_union(self):
        composite = CompositeRange.composite(ContinuousRange.inclusive(0, 3))
        assert composite.union(ContinuousRange.inclusive(5, 10)).members == (
            ContinuousRange.inclusive(0, 3),
            ContinuousRange.inclusive(5, 10),
        )
        assert composite.union(ContinuousRange.inclusive(3, 5)).members == (ContinuousRange.inclusive(0, 5),)

    def test_union_fills_gap(self):
        composite = CompositeRange.composite(ContinuousRange.inclusive(0, 3), ContinuousRange.inclusive(5, 10))
        assert (composite | ContinuousRange.exclusive(3, 5)).members == (ContinuousRange.inclusive(0, 10),)

    def test_intersection(self):
        composite = CompositeRange.composite(ContinuousRange.inclusive(0, 3), ContinuousRange.inclusive(5, 10))
        assert composite.intersection(ContinuousRange.inclusive(2, 6)).members == (
            ContinuousRange.inclusive(2, 3),
            ContinuousRange.inclusive(5, 6),
        )
        assert (composite & ContinuousRange.exclusive(3, 5)).is_empty()

    def test_intersection_of_composites(self):
        first = CompositeRange.composite(ContinuousRange.inclusive(0, 3), ContinuousRange.inclusive(5, 10))
        second = CompositeRange.composite(ContinuousRange.inclusive(3, 6), ContinuousRange.from_(9))
        assert first.intersection(second).members == (
            ContinuousRange.single(3),
            ContinuousRange.inclusive(5, 6),
            ContinuousRange.inclusive(9, 10),
        )

    def test_difference_of_contained_range(self):
        composite = CompositeRange.composite(ContinuousRange.inclusive(0, 10))
        assert composite.difference(ContinuousRange.inclusive(2, 8)).members == (
            ContinuousRange.end_exclusive(0, 2),
            ContinuousRange.start_exclusive(8, 10),
        )

    def test_difference_across_members(self):
        composite = CompositeRange.composite(ContinuousRange.inclusive(0, 3), ContinuousRange.inclusive(5, 10))
        assert (composite - ContinuousRange.inclusive(2, 6)).members == (
            ContinuousRange.end_exclusive(0, 2),
            ContinuousRange.start_exclusive(6, 10),
        )

    def test_complement(self):
        composite = CompositeRange.composite(ContinuousRange.inclusive(0, 3), ContinuousRange.inclusive(5, 10))
        assert composite.complement().members == (
            ContinuousRange.to_exclusive(0),
            ContinuousRange.exclusive(3, 5),
            ContinuousRange.from_exclusive(10),
        )

    def test_complement_of_empty_and_full(self):
        assert CompositeRange().complement().is_full()
        assert CompositeRange.composite(...).complement().is_empty()

    def test_complement_round_trip(self):
        composite = CompositeRange.composite(ContinuousRange.end_exclusive(0, 3), ContinuousRange.from_(5))
        assert composite.complement().complement() == composite


class TestValueSemantics:
    def test_equality_and_hash(self):
        first = CompositeRange.composite(ContinuousRange.inclusive(0, 5), ContinuousRange.inclusive(3, 10))
        second = CompositeRange.composite(ContinuousRange.inclusive(0, 10))
        assert first == second
        assert hash(first) == hash(second)
        assert first != CompositeRange()

    def test_iteration(self):
        composite = CompositeRange.composite(ContinuousRange.inclusive(0, 3), ContinuousRange.from_(5))
        assert list(composite) == [ContinuousRange.inclusive(0, 3), ContinuousRange.from_(5)]
        assert len(composite) == 2

    def test_members_are_copies(self):
        composite = CompositeRange.composite(ContinuousRange.inclusive(0, 3))
        member = composite.members[0]
        member.lower = 1
        assert composite.members == (ContinuousRange.inclusive(0, 3),)

    @pytest.mark.parametrize(
        "composite, expected",
        [
            (CompositeRange(), "[]"),
            (CompositeRange.composite(range(0, 3), ContinuousRange.start_exclusive(4, 10)), "{[0..3), (4..10]}"),
            (CompositeRange.composite(ContinuousRange.single(1)), "{1}"),
        ],
    )
    def test_repr(self, composite, expected):
        assert repr(composite) == expected
