import logging
from datetime import datetime
from typing import Any, Dict, Optional, Tuple, Union

import numpy as np
from numpy import floating, integer
from pandas import Interval, Series, Timestamp

from ranges.core.boundaries import Bound, BoundKind
from ranges.core.continuous import ContinuousRange
from ranges.core.exceptions import ErrorMessages, InvalidRangeError

logger = logging.getLogger(__name__)

TimestampLike = Union[str, int, float, Timestamp, datetime, None]

_CLOSED_BY_INCLUSION: Dict[Tuple[bool, bool], str] = {
    (True, True): "both",
    (True, False): "left",
    (False, True): "right",
    (False, False): "neither",
}

_BOUND_KINDS_BY_CLOSED: Dict[str, Tuple[BoundKind, BoundKind]] = {
    "both": (BoundKind.INCLUDED, BoundKind.INCLUDED),
    "left": (BoundKind.INCLUDED, BoundKind.EXCLUDED),
    "right": (BoundKind.EXCLUDED, BoundKind.INCLUDED),
    "neither": (BoundKind.EXCLUDED, BoundKind.EXCLUDED),
}


def _is_infinite(value: Any) -> bool:
    return isinstance(value, (float, floating)) and bool(np.isinf(value))


def _unbounded_placeholders(sample: Any) -> Tuple[Any, Any]:
    """Values standing for -inf / +inf next to a bound of the sample's type"""
    if isinstance(sample, datetime):
        logger.warning(
            "Unbounded side of a timestamp range approximated with Timestamp.min/max"
        )
        return Timestamp.min, Timestamp.max
    return -np.inf, np.inf


def to_pandas_interval(continuous: ContinuousRange) -> Interval:
    """
    Converts a continuous range to a pandas.Interval.

    Unbounded sides become infinite endpoints. Empty ranges have no
    equivalent and raise an InvalidRangeError.
    """
    if continuous.is_empty():
        raise InvalidRangeError(ErrorMessages.EMPTY_PANDAS_INTERVAL)

    start, end = continuous.range_bounds()
    sample = start.value if start.is_bounded else end.value
    lowest, highest = _unbounded_placeholders(sample)

    left = start.value if start.is_bounded else lowest
    right = end.value if end.is_bounded else highest
    closed = _CLOSED_BY_INCLUSION[(start.kind is BoundKind.INCLUDED, end.kind is BoundKind.INCLUDED)]
    return Interval(left, right, closed=closed)


def from_pandas_interval(interval: Interval) -> ContinuousRange:
    """Converts a pandas.Interval to a continuous range, infinite endpoints being unbounded"""
    if _is_infinite(interval.left):
        start = Bound.unbounded()
    elif interval.closed_left:
        start = Bound.included(interval.left)
    else:
        start = Bound.excluded(interval.left)

    if _is_infinite(interval.right):
        end = Bound.unbounded()
    elif interval.closed_right:
        end = Bound.included(interval.right)
    else:
        end = Bound.excluded(interval.right)

    return ContinuousRange.from_bounds((start, end))


def coerce_timestamp(value: TimestampLike) -> Optional[Timestamp]:
    """
    Converts a user-provided boundary to a pd.Timestamp.

    Strings are parsed, numbers are seconds since the epoch and None is kept
    as None.
    """
    if value is None:
        return None

    # Handle Timestamp first because pandas.Timestamp is a subclass of datetime
    if isinstance(value, Timestamp):
        timestamp = value
    elif isinstance(value, str):
        timestamp = Timestamp(value)
    elif isinstance(value, (int, float, integer, floating)) and not isinstance(value, bool):
        converted = int(value) if isinstance(value, (int, integer)) else float(value)
        timestamp = Timestamp(converted, unit="s")
    elif isinstance(value, datetime):
        timestamp = Timestamp(value)
    else:
        raise InvalidRangeError(ErrorMessages.UNSUPPORTED_BOUNDARY.format(type(value)))

    if timestamp.value < 0:
        raise InvalidRangeError(ErrorMessages.NEGATIVE_TIMESTAMP)
    return timestamp


def timestamp_range(
        start: TimestampLike,
        end: TimestampLike,
        closed: str = "left",
) -> ContinuousRange:
    """
    Creates a range of timestamps, `closed` using the pandas.Interval
    vocabulary. A None start or end is unbounded.
    """
    if closed not in _BOUND_KINDS_BY_CLOSED:
        raise InvalidRangeError(f"closed must be one of {sorted(_BOUND_KINDS_BY_CLOSED)}, got {closed!r}")
    start_kind, end_kind = _BOUND_KINDS_BY_CLOSED[closed]

    start_ts = coerce_timestamp(start)
    end_ts = coerce_timestamp(end)
    start_bound = Bound.unbounded() if start_ts is None else Bound(start_kind, start_ts)
    end_bound = Bound.unbounded() if end_ts is None else Bound(end_kind, end_ts)
    return ContinuousRange.from_bounds((start_bound, end_bound))


def range_mask(
        continuous: ContinuousRange,
        values: Union[Series, np.ndarray, list],
) -> Union[Series, np.ndarray]:
    """
    Vectorized membership test.

    Returns a boolean array telling which values the range contains, or a
    boolean Series sharing the index of a Series input. Missing values are
    outside of every range that has at least one bound.
    """
    data = values if isinstance(values, Series) else np.asarray(values)

    if continuous.is_empty():
        mask = np.zeros(len(data), dtype=bool)
    else:
        mask = np.ones(len(data), dtype=bool)
        start, end = continuous.range_bounds()
        if start.kind is BoundKind.INCLUDED:
            mask &= np.asarray(data >= start.value, dtype=bool)
        elif start.kind is BoundKind.EXCLUDED:
            mask &= np.asarray(data > start.value, dtype=bool)
        if end.kind is BoundKind.INCLUDED:
            mask &= np.asarray(data <= end.value, dtype=bool)
        elif end.kind is BoundKind.EXCLUDED:
            mask &= np.asarray(data < end.value, dtype=bool)

    if isinstance(values, Series):
        return Series(mask, index=values.index)
    return mask
