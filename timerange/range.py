from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Literal, TypeAlias

from typing_extensions import override

from timerange.util import ZERO, InstantLike, coerce_instant

Bounds: TypeAlias = Literal["[]", "()", "[)", "(]"]


class InvalidRangeError(ValueError):
    """Raised when a range is built with its end before its start."""


@dataclass(frozen=True, kw_only=True)
class Range:
    """An immutable time interval between two instants.

    The raw constructor does not check ordering; ``Range()`` is the
    zero-valued placeholder. Use `new_range` to build a validated range.
    """

    start: datetime = ZERO
    end: datetime = ZERO

    def _empty(self) -> bool:
        return self.start == self.end

    def _interior(self, t: datetime) -> bool:
        if self._empty():
            return False
        return self.start < t < self.end

    def closed_contains(self, t: datetime) -> bool:
        """True if t lies in [start, end]."""
        return t == self.start or self._interior(t) or t == self.end

    def open_contains(self, t: datetime) -> bool:
        """True if t lies in (start, end)."""
        return self._interior(t)

    def left_closed_right_open_contains(self, t: datetime) -> bool:
        """True if t lies in [start, end). Always False for an empty range."""
        return (not self._empty() and t == self.start) or self._interior(t)

    def left_open_right_closed_contains(self, t: datetime) -> bool:
        """True if t lies in (start, end]. Always False for an empty range."""
        return self._interior(t) or (not self._empty() and t == self.end)

    def contains(self, t: datetime, bounds: Bounds = "[]") -> bool:
        """Test membership of t using the boundary convention named by bounds.

        Example:
            >>> r = new_range(EPOCH, EPOCH + SECOND)
            >>> r.contains(EPOCH, "[)")
            True
            >>> r.contains(EPOCH, "()")
            False
        """
        if bounds not in _PREDICATES:
            valid = ", ".join(repr(b) for b in _PREDICATES)
            raise ValueError(f"Invalid bounds {bounds!r}. Valid bounds: {valid}")
        return _PREDICATES[bounds](self, t)

    @property
    def duration(self) -> timedelta:
        return self.end - self.start

    @override
    def __str__(self) -> str:
        """Human-friendly string showing both endpoints."""
        return f"Range({self.start} → {self.end})"


_PREDICATES = {
    "[]": Range.closed_contains,
    "()": Range.open_contains,
    "[)": Range.left_closed_right_open_contains,
    "(]": Range.left_open_right_closed_contains,
}


def new_range(start: InstantLike, end: InstantLike) -> Range:
    """Build a range, rejecting an end that precedes the start.

    Endpoints are coerced with `coerce_instant`, so aware datetimes, dates,
    Unix seconds and ISO-8601 strings are all accepted. Equal endpoints give
    an empty range.

    Raises:
        InvalidRangeError: If end is before start
        TypeError: If an endpoint is unsupported or lacks timezone info
    """
    a = coerce_instant(start, "start")
    b = coerce_instant(end, "end")
    if b < a:
        raise InvalidRangeError(
            f"Range end ({b}) must not be before start ({a}).\n"
            f"Hint: Swap the arguments if they were passed in the wrong order."
        )
    return Range(start=a, end=b)
