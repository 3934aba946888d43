"""Rough timing of the package's generators."""

from __future__ import annotations

import argparse
import time
from collections.abc import Callable, Sequence

from .integers import rand_int32, rand_int64
from .ranges import range_int, range_int64
from .text import numeric_string, random_string, uuid_string, visible_string

__all__ = ["measure", "main"]

_STRING_LENGTHS = (8, 16, 32, 64, 128)


def _format_duration(ns: int) -> str:
    if ns >= 1_000_000_000:
        return f"{ns / 1e9:.3f}s"
    if ns >= 1_000_000:
        return f"{ns / 1e6:.3f}ms"
    if ns >= 1_000:
        return f"{ns / 1e3:.3f}µs"
    return f"{ns}ns"


def measure(name: str, iterations: int, fn: Callable[[], object]) -> float:
    """Call ``fn`` ``iterations`` times, print the timing and return ns per call."""
    if iterations <= 0:
        raise ValueError(f"iterations must be positive, got {iterations}")
    start = time.perf_counter_ns()
    for _ in range(iterations):
        fn()
    elapsed = time.perf_counter_ns() - start
    average = elapsed / iterations
    print(
        f"{name:<25}: {iterations} runs, total {_format_duration(elapsed)}, "
        f"average {average:.2f} ns/op"
    )
    return average


def _positive_int(text: str) -> int:
    value = int(text)
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be positive: {text}")
    return value


def main(argv: Sequence[str] | None = None) -> int:
    """Time every generator and print the results."""
    parser = argparse.ArgumentParser(
        prog="tsrand-benchmark", description="Time the random generators."
    )
    parser.add_argument(
        "--iterations",
        type=_positive_int,
        default=100_000,
        help="calls per integer and UUID measurement (default: 100000)",
    )
    args = parser.parse_args(argv)
    iterations = args.iterations
    string_iterations = max(1, iterations // 10)
    length_iterations = max(1, iterations // 20)

    print("Generator timings")
    print("Results vary from system to system.")
    print()

    print("--- Integers ---")
    measure("rand_int32()", iterations, rand_int32)
    measure("rand_int64()", iterations, rand_int64)
    measure("range_int(0, 1000)", iterations, lambda: range_int(0, 1000))
    measure("range_int64(0, 1000)", iterations, lambda: range_int64(0, 1000))
    print()

    print("--- Strings ---")
    measure("random_string(10)", string_iterations, lambda: random_string(10))
    measure("random_string(50)", string_iterations, lambda: random_string(50))
    measure("visible_string(10)", string_iterations, lambda: visible_string(10))
    measure("numeric_string(10)", string_iterations, lambda: numeric_string(10))
    measure("uuid_string()", iterations, uuid_string)
    print()

    print("--- String length ---")
    for length in _STRING_LENGTHS:
        measure(
            f"random_string({length})",
            length_iterations,
            lambda length=length: random_string(length),
        )
    print()

    print("Timing done.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())