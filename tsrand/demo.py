"""Command-line tour of the package's generators."""

from __future__ import annotations

import argparse
from collections.abc import Callable, Sequence

from .integers import (
    rand_int,
    rand_int32,
    rand_int64,
    rand_uint,
    rand_uint32,
    rand_uint64,
)
from .ranges import (
    InvalidRangeError,
    range_int,
    range_int64,
    range_int_safe,
    range_uint32,
    range_uint64,
)
from .text import (
    alpha_string,
    custom_string,
    lowercase_string,
    numeric_string,
    random_string,
    uppercase_string,
    uuid_string,
    visible_string,
)

__all__ = ["shuffle_parts", "main"]

_COMPLEX_CHARSET = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789!@#$%^&*"
_SPECIAL_CHARSET = "!@#$%^&*"
_CHINESE_CHARSET = "天地玄黄宇宙洪荒日月盈昃辰宿列张寒来暑往秋收冬藏"
_GREEK_CHARSET = "αβγδεζηθικλμνξοπρστυφχψω"
_EMOJI_CHARSET = "😀😁😂🤣😃😄😅😆😉😊😋😎😍😘🥰😗😙😚"
_WEAPONS = ("sword", "axe", "bow", "staff", "dagger")


def shuffle_parts(parts: Sequence[str]) -> list[str]:
    """Return the parts in a random order, made by random pairwise swaps."""
    shuffled = list(parts)
    n = len(shuffled)
    for _ in range(n * 2):
        a = range_int(0, n)
        b = range_int(0, n)
        shuffled[a], shuffled[b] = shuffled[b], shuffled[a]
    return shuffled


def _labelled(title: str, rows: Sequence[tuple[str, object]]) -> list[str]:
    """Build a section: title, aligned label/value rows, blank line."""
    lines = [title]
    lines.extend(f"{label}{value}" for label, value in rows)
    lines.append("")
    return lines


def _basic_integers() -> list[str]:
    values = {
        "rand_int32": rand_int32(),
        "rand_int64": rand_int64(),
        "rand_int": rand_int(),
        "rand_uint32": rand_uint32(),
        "rand_uint64": rand_uint64(),
        "rand_uint": rand_uint(),
    }
    rows = [(f"{name + ':':<13}", value) for name, value in values.items()]
    return _labelled("=== Basic integers ===", rows)


def _ranges() -> list[str]:
    lines = [
        "=== Ranges ===",
        f"range_int(1, 100):       {range_int(1, 100)}",
        f"range_int64(1000, 9999): {range_int64(1000, 9999)}",
        f"range_uint32(10, 50):    {range_uint32(10, 50)}",
        f"range_uint64(100, 1000): {range_uint64(100, 1000)}",
        f"range_int_safe(50, 150): {range_int_safe(50, 150)}",
    ]
    try:
        range_int_safe(100, 50)
    except InvalidRangeError as exc:
        lines.append(f"Expected error (invalid range): {exc}")
    lines.append("")
    return lines


def _basic_strings() -> list[str]:
    lines = [
        "=== Basic strings ===",
        f"random_string(20):  {random_string(20)}",
        f"visible_string(20): {visible_string(20)}",
    ]
    for length in (8, 16, 32):
        pad = " " * (3 if length < 10 else 2)
        lines.append(f"random_string({length}):{pad}{random_string(length)}")
    lines.append(f"uuid_string:        {uuid_string()}")
    lines.append(f"uuid_string:        {uuid_string()}")
    lines.append("")
    return lines


def _advanced_strings() -> list[str]:
    rows = [
        ("alpha_string(15):     ", alpha_string(15)),
        ("numeric_string(10):   ", numeric_string(10)),
        ("lowercase_string(12): ", lowercase_string(12)),
        ("uppercase_string(12): ", uppercase_string(12)),
        ("custom_string(hex, 16):    ", custom_string("0123456789ABCDEF", 16)),
        ("custom_string(binary, 20): ", custom_string("01", 20)),
    ]
    return _labelled("=== Advanced strings ===", rows)


def _visible_advantages() -> list[str]:
    lines = [
        "=== Why visible_string ===",
        "visible_string never uses the easily confused 0, O, I, l, 1",
    ]
    for _ in range(3):
        lines.append(f"random_string:  {random_string(15)}")
        lines.append(f"visible_string: {visible_string(15)}")
        lines.append("")
    return lines


def _passwords() -> list[str]:
    parts = [
        uppercase_string(4),
        lowercase_string(4),
        numeric_string(4),
        custom_string(_SPECIAL_CHARSET, 2),
    ]
    return [
        "=== Password generation ===",
        f"Simple (12):   {random_string(12)}",
        f"Visible (16):  {visible_string(16)}",
        f"Complex (20):  {custom_string(_COMPLEX_CHARSET, 20)}",
        "",
        "--- Layered ---",
        f"Layered (14):  {''.join(shuffle_parts(parts))}",
        "",
    ]


def _tokens() -> list[str]:
    invite = "-".join(uppercase_string(4) for _ in range(2))
    rows = [
        ("API key:           ", f"ak_{lowercase_string(8)}_{random_string(16)}"),
        ("Session token:     ", random_string(32)),
        ("Verification code: ", numeric_string(6)),
        ("Short link id:     ", visible_string(8)),
        ("Invite code:       ", invite),
    ]
    return _labelled("=== Tokens ===", rows)


def _unicode() -> list[str]:
    samples = [
        ("Chinese: ", _CHINESE_CHARSET, 8),
        ("Greek:   ", _GREEK_CHARSET, 10),
        ("Emoji:   ", _EMOJI_CHARSET, 5),
    ]
    rows = [(label, custom_string(charset, length)) for label, charset, length in samples]
    return _labelled("=== Unicode character sets ===", rows)


def _games() -> list[str]:
    lines = ["=== Games ===", "--- Dice ---"]
    for i in range(1, 6):
        first = range_int(1, 7)
        second = range_int(1, 7)
        lines.append(f"Dice {i}: {first} + {second} = {first + second}")
    lines.append("")
    lines.append("--- Equipment ---")
    for _ in range(3):
        weapon = _WEAPONS[range_int(0, len(_WEAPONS))]
        attack = range_int(50, 150)
        durability = range_int(80, 100)
        lines.append(f"Weapon: {weapon}, attack: {attack}, durability: {durability}%")
    lines.append("")
    lines.append("--- Player ids ---")
    for _ in range(3):
        lines.append(f"Player id: P{uppercase_string(2)}{numeric_string(6)}")
    lines.append("")
    return lines


def _business() -> list[str]:
    serial = "-".join((uppercase_string(4), numeric_string(4), uppercase_string(4)))
    rows = [
        ("Order number:   ", f"ORD{numeric_string(8)}{uppercase_string(4)}"),
        ("Transaction id: ", f"TXN_{numeric_string(10)}_{random_string(8)}"),
        ("Coupon code:    ", f"SAVE{uppercase_string(6)}"),
        ("Serial number:  ", serial),
        ("Batch number:   ", f"BATCH_{numeric_string(6)}_{uppercase_string(3)}"),
    ]
    return _labelled("=== Business ===", rows)


_SECTIONS: tuple[Callable[[], list[str]], ...] = (
    _basic_integers,
    _ranges,
    _basic_strings,
    _advanced_strings,
    _visible_advantages,
    _passwords,
    _tokens,
    _unicode,
    _games,
    _business,
)


def main(argv: Sequence[str] | None = None) -> int:
    """Print a tour of every generator in the package."""
    parser = argparse.ArgumentParser(
        prog="tsrand-demo", description="Show what each random generator produces."
    )
    parser.parse_args(argv)

    print("Random generation tour")
    print()
    for section in _SECTIONS:
        for line in section():
            print(line)

    print("All examples done.")
    print()
    print("Tips:")
    print("  - passwords: visible_string avoids confusable characters")
    print("  - API tokens: random_string or custom_string")
    print("  - verification codes: numeric_string")
    print("  - game ids: range_int or combined generators")
    print("  - other scripts: custom_string with any characters")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())