from ranges.core.boundaries import Bound, BoundKind, BoundSide, compare_bounds, compare_values
from ranges.core.continuous import ContinuousRange, RangeShape
from ranges.core.relation import RangesRelation
from ranges.core.types import Ordering
from ranges.composite import CompositeRange
