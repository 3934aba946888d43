"""Random integers drawn from half-open ranges ``[low, high)``."""

from __future__ import annotations

from .source import random_below

__all__ = [
    "InvalidRangeError",
    "range_int_safe",
    "range_int",
    "range_int64_safe",
    "range_int64",
    "range_uint32",
    "range_uint64",
]

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1
_UINT32_MAX = 2**32 - 1
_UINT64_MAX = 2**64 - 1


class InvalidRangeError(ValueError):
    """Raised when the lower bound of a range exceeds the upper bound."""

    def __init__(self, message: str = "invalid range: min must be less than max") -> None:
        super().__init__(message)


def _check_width(name: str, value: int, lowest: int, highest: int) -> None:
    if not lowest <= value <= highest:
        raise ValueError(f"{name}={value} is outside [{lowest}, {highest}]")


def _draw(low: int, high: int) -> int:
    if low > high:
        raise InvalidRangeError()
    if low == high:
        return low
    return random_below(high - low) + low


def range_int_safe(low: int, high: int) -> int:
    """Return a random integer in ``[low, high)``; ``low`` when they are equal.

    Raises InvalidRangeError if ``low > high``.
    """
    return _draw(low, high)


def range_int(low: int, high: int) -> int:
    """Like range_int_safe, but return 0 for an invalid range."""
    try:
        return range_int_safe(low, high)
    except InvalidRangeError:
        return 0


def range_int64_safe(low: int, high: int) -> int:
    """Return a random signed 64-bit integer in ``[low, high)``.

    Raises InvalidRangeError if ``low > high``.
    """
    _check_width("low", low, _INT64_MIN, _INT64_MAX)
    _check_width("high", high, _INT64_MIN, _INT64_MAX)
    return _draw(low, high)


def range_int64(low: int, high: int) -> int:
    """Like range_int64_safe, but return 0 for an invalid range."""
    try:
        return range_int64_safe(low, high)
    except InvalidRangeError:
        return 0


def range_uint32(low: int, high: int) -> int:
    """Return a random unsigned 32-bit integer in ``[low, high)``, or 0 if ``low > high``."""
    _check_width("low", low, 0, _UINT32_MAX)
    _check_width("high", high, 0, _UINT32_MAX)
    try:
        return _draw(low, high)
    except InvalidRangeError:
        return 0


def range_uint64(low: int, high: int) -> int:
    """Return a random unsigned 64-bit integer in ``[low, high)``, or 0 if ``low > high``."""
    _check_width("low", low, 0, _UINT64_MAX)
    _check_width("high", high, 0, _UINT64_MAX)
    try:
        return _draw(low, high)
    except InvalidRangeError:
        return 0