import sys
from collections import Counter
from concurrent.futures import ThreadPoolExecutor
from unittest import mock

import pytest

from tsrand.integers import (
    rand_int,
    rand_int32,
    rand_int64,
    rand_uint,
    rand_uint32,
    rand_uint64,
)

MAX_INT32 = 2**31 - 1
MAX_INT64 = 2**63 - 1
MAX_UINT32 = 2**32 - 1
MAX_UINT64 = 2**64 - 1


@pytest.mark.parametrize(
    "func, upper",
    [
        (rand_int32, MAX_INT32),
        (rand_int64, MAX_INT64),
        (rand_uint32, MAX_UINT32),
        (rand_uint64, MAX_UINT64),
    ],
)
def test_bounds_and_uniqueness(func, upper):
    for _ in range(10000):
        n = func()
        assert 0 <= n < upper

    seen = set()
    duplicates = 0
    for _ in range(1000):
        n = func()
        if n in seen:
            duplicates += 1
        seen.add(n)
    assert duplicates < 10


def test_int_bounds():
    for _ in range(10000):
        n = rand_int()
        assert 0 <= n < sys.maxsize


def test_uint_bounds():
    for _ in range(10000):
        n = rand_uint()
        assert 0 <= n < 2 * sys.maxsize + 1


def test_distribution():
    iterations = 100000
    buckets = 10
    bucket_size = MAX_INT32 // buckets

    values = [rand_int32() for _ in range(iterations)]
    assert len(values) == iterations
    assert all(0 <= v < MAX_INT32 for v in values)

    counts = Counter(min(v // bucket_size, buckets - 1) for v in values)
    assert sorted(counts) == list(range(buckets))

    expected = iterations // buckets
    tolerance = expected // 5
    assert all(abs(counts[b] - expected) <= tolerance for b in range(buckets))


def test_concurrency():
    workers = 100
    iterations = 1000

    def batch(_):
        return [rand_int32() for _ in range(iterations)]

    with ThreadPoolExecutor(max_workers=16) as pool:
        results = [n for chunk in pool.map(batch, range(workers)) for n in chunk]

    assert len(results) == workers * iterations
    assert all(0 <= n < MAX_INT32 for n in results)
    assert len(set(results)) > workers * iterations // 2


def test_fallback_keeps_bounds():
    with mock.patch("secrets.randbelow", side_effect=OSError("unavailable")):
        values = [rand_uint64() for _ in range(200)]
        signed = [rand_int64() for _ in range(200)]
    assert all(0 <= v < MAX_UINT64 for v in values)
    assert all(0 <= v < MAX_INT64 for v in signed)
    assert len(set(values)) > 190