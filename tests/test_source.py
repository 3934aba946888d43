import random
from unittest import mock

import pytest

from tsrand.source import fallback_random, random_below


def test_random_below_stays_in_bounds():
    for bound in (1, 2, 7, 1000, 2**64 - 1):
        for _ in range(200):
            value = random_below(bound)
            assert 0 <= value < bound


def test_random_below_one_is_always_zero():
    assert {random_below(1) for _ in range(50)} == {0}


def test_random_below_covers_small_range():
    seen = {random_below(4) for _ in range(2000)}
    assert seen == {0, 1, 2, 3}


@pytest.mark.parametrize("bound", [0, -1, -100])
def test_random_below_rejects_non_positive(bound):
    with pytest.raises(ValueError):
        random_below(bound)


def test_fallback_random_is_shared():
    first = fallback_random()
    second = fallback_random()
    assert first is second
    assert isinstance(first, random.Random)


def test_fallback_used_when_secure_source_fails():
    with mock.patch("secrets.randbelow", side_effect=OSError("no entropy")):
        values = [random_below(10) for _ in range(500)]
    assert all(0 <= v < 10 for v in values)
    assert len(set(values)) > 1


def test_fallback_handles_not_implemented():
    with mock.patch("secrets.randbelow", side_effect=NotImplementedError):
        value = random_below(2**40)
    assert 0 <= value < 2**40