class RangeError(Exception):
    """Base exception for range errors"""
    pass

class OrderingContractError(RangeError):
    """Raised when the element ordering is not a valid total order"""
    pass

class UnboundedValueError(RangeError, ValueError):
    """Raised when the value of an unbounded bound is requested"""
    pass

class InvalidRangeError(RangeError, ValueError):
    """Raised when a range cannot be built from the provided input"""
    pass

class DisjointUnionError(RangeError, ValueError):
    """Raised when a result cannot be expressed as one continuous range"""
    pass

class IncomparableBoundsError(RangeError, ValueError):
    """Raised when range bounds cannot be ordered"""
    pass

class ErrorMessages:
    """Centralized error message definitions for consistent error handling"""
    ORDERING_CONTRACT = (
        "Ordering contract isn't correctly implemented.\n"
        "No ordering can be found between {} and {}"
    )
    UNBOUNDED_VALUE = "Unbounded bound has no value"
    UNSUPPORTED_NATIVE = "Cannot build a continuous range from {!r}"
    STEPPED_RANGE = "Only contiguous ranges are supported, got step {}"
    NOT_CONTIGUOUS = "{} of {} and {} is not a single continuous range"
    INCOMPARABLE_BOUNDS = "Cannot order bounds {} and {}"
    EMPTY_PANDAS_INTERVAL = "Empty ranges have no pandas.Interval equivalent"
    NEGATIVE_TIMESTAMP = "Timestamps cannot be negative."
    UNSUPPORTED_BOUNDARY = "Unsupported boundary type: {}"
