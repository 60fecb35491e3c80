from ranges.pandas.interop import (
    coerce_timestamp,
    from_pandas_interval,
    range_mask,
    timestamp_range,
    to_pandas_interval,
)
