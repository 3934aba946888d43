"""Random integers shaped like fixed-width machine types."""

from __future__ import annotations

import sys

from .source import random_below

__all__ = [
    "rand_int32",
    "rand_int64",
    "rand_uint32",
    "rand_uint64",
    "rand_int",
    "rand_uint",
]

MAX_INT64 = 2**63 - 1
MAX_UINT64 = 2**64 - 1
MAX_INT = sys.maxsize
MAX_UINT = 2 * sys.maxsize + 1


def _random_uint64() -> int:
    return random_below(MAX_UINT64)


def _random_int64() -> int:
    return random_below(MAX_INT64)


def rand_int32() -> int:
    """Return a random non-negative 32-bit signed integer."""
    return _random_int64() >> 32


def rand_int64() -> int:
    """Return a random integer in ``[0, 2**63 - 1)``."""
    return _random_int64()


def rand_uint32() -> int:
    """Return a random unsigned 32-bit integer."""
    return _random_uint64() >> 32


def rand_uint64() -> int:
    """Return a random integer in ``[0, 2**64 - 1)``."""
    return _random_uint64()


def rand_int() -> int:
    """Return a random non-negative integer that fits the platform's word size."""
    n = _random_int64()
    return n if n <= MAX_INT else n % MAX_INT


def rand_uint() -> int:
    """Return a random unsigned integer that fits the platform's word size."""
    n = _random_uint64()
    return n if n <= MAX_UINT else n % MAX_UINT