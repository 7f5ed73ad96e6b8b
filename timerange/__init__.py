from .range import Bounds, InvalidRangeError, Range, new_range
from .util import EPOCH, MICROSECOND, SECOND, ZERO, InstantLike, coerce_instant

__all__ = [
    "Range",
    "Bounds",
    "InvalidRangeError",
    "new_range",
    "coerce_instant",
    "InstantLike",
    "EPOCH",
    "ZERO",
    "SECOND",
    "MICROSECOND",
]
