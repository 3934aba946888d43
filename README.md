# tsrand

Random values for tokens, codes, identifiers and games, drawn from the
operating system's secure random source. If that source cannot be read, a
pseudo-random generator seeded from the current time is used instead, so a
call still returns.

The package has no dependencies beyond the standard library.

## Installation

```
pip install tsrand
```

## Integers

```python
from tsrand.integers import rand_int32, rand_int64, rand_uint32, rand_uint64, rand_int, rand_uint

rand_int32()    # 0 <= n < 2**31
rand_int64()    # 0 <= n < 2**63 - 1
rand_uint32()   # 0 <= n < 2**32
rand_uint64()   # 0 <= n < 2**64 - 1
rand_int()      # non-negative, at most sys.maxsize
rand_uint()     # non-negative, at most 2 * sys.maxsize + 1
```

## Ranges

Every range is half-open: `low` is included, `high` is not. When `low == high`
the value `low` itself is returned.

```python
from tsrand.ranges import (
    InvalidRangeError,
    range_int,
    range_int_safe,
    range_int64,
    range_int64_safe,
    range_uint32,
    range_uint64,
)

range_int(1, 7)            # a die roll, 1..6
range_int64(1000, 9999)    # 1000..9998
range_uint32(10, 50)
range_uint64(100, 1000)

try:
    range_int_safe(100, 50)
except InvalidRangeError as exc:
    print(exc)   # invalid range: min must be less than max
```

`range_int_safe` and `range_int64_safe` raise `InvalidRangeError` (a
`ValueError`) when `low > high`. `range_int`, `range_int64`, `range_uint32`
and `range_uint64` return `0` for such a range instead of raising.

`range_int` accepts any Python integers. The sized variants check their
bounds: `range_int64_safe` and `range_int64` need both bounds to fit a signed
64-bit integer, `range_uint32` an unsigned 32-bit one and `range_uint64` an
unsigned 64-bit one; a bound outside that width raises `ValueError`.

## Strings

```python
from tsrand.text import (
    NORMAL_LETTERS,
    VISIBLE_LETTERS,
    random_string,
    visible_string,
    custom_string,
    alpha_string,
    numeric_string,
    lowercase_string,
    uppercase_string,
    uuid_string,
)

random_string(16)              # characters from NORMAL_LETTERS: digits and ASCII letters
visible_string(8)              # characters from VISIBLE_LETTERS: no 0, O, o, 1, I, l
alpha_string(10)               # ASCII letters only
numeric_string(6)              # a verification code such as "138947"
lowercase_string(8)
uppercase_string(8)
custom_string("0123456789ABCDEF", 16)
custom_string("αβγδεζηθικλμνξοπρστυφχψω", 10)   # any Unicode characters
uuid_string()                  # e.g. "550e8400-e29b-41d4-a716-446655440000"
```

A length of zero or less, or an empty character set, gives an empty string.
Each character is chosen uniformly from the set's code points, so
multi-byte characters in a custom set are never split.

`uuid_string` returns a random (version 4) UUID in lowercase canonical form.
Should that fail it falls back to a time-based (version 1) UUID, and as a
last resort to a string in version-4 layout built from the package's own
random source.

`visible_string` suits codes a person has to read and type back, such as
invitation codes or short link identifiers.

## The random source

`tsrand.source` holds what every generator above draws on:

```python
from tsrand.source import random_below, fallback_random

random_below(10)      # 0 <= n < 10; ValueError if the bound is not positive
fallback_random()     # the shared time-seeded random.Random used as fallback
```

## Command-line tools

A tour of everything the package offers, with tokens, passwords, dice rolls
and order numbers built from it:

```
tsrand-demo
```

A timing run over the integer, range, string and UUID generators:

```
tsrand-benchmark
tsrand-benchmark --iterations 10000
```

`--iterations` sets the calls per integer and UUID measurement (default
100000); string measurements use a tenth of that, and the string-length
series a twentieth. Timings depend on the machine; the numbers printed are
averages per call. `tsrand.benchmark.measure(name, iterations, fn)` can also
be called directly: it prints one timing line and returns the average in
nanoseconds per call.

## Running the tests

```
pip install "tsrand[test]"
pytest
```