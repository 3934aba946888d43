"""Shared randomness source: the OS CSPRNG, with a seeded PRNG as fallback."""

from __future__ import annotations

import random
import secrets
import threading
import time

__all__ = ["random_below", "fallback_random"]

_fallback: random.Random | None = None
_fallback_lock = threading.Lock()


def fallback_random() -> random.Random:
    """Return the shared pseudo-random generator, creating it on first use.

    It is seeded from the current time in nanoseconds and is only used when
    the operating system's secure source cannot be read.
    """
    global _fallback
    if _fallback is None:
        with _fallback_lock:
            if _fallback is None:
                _fallback = random.Random(time.time_ns())
    return _fallback


def random_below(n: int) -> int:
    """Return a uniformly distributed integer in ``[0, n)``.

    The secure source is tried first; if it is unavailable the shared
    pseudo-random generator is used instead.
    """
    if n <= 0:
        raise ValueError(f"upper bound must be positive, got {n}")
    try:
        return secrets.randbelow(n)
    except (OSError, NotImplementedError):
        return fallback_random().randrange(n)