"""Random strings drawn from character sets, and UUID strings."""

from __future__ import annotations

import uuid

from .source import random_below

__all__ = [
    "NORMAL_LETTERS",
    "VISIBLE_LETTERS",
    "random_string",
    "visible_string",
    "custom_string",
    "alpha_string",
    "numeric_string",
    "lowercase_string",
    "uppercase_string",
    "uuid_string",
]

NORMAL_LETTERS = "1234567890abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"
"""All digits and ASCII letters."""

VISIBLE_LETTERS = "23456789abcdefghjkmnpqrstuvwxyzABCDEFGHJKLMNPQRSTUVWXYZ"
"""Digits and letters without the easily confused 0, 1, I, l, O and o."""

_ALPHA = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"
_NUMERIC = "0123456789"
_LOWERCASE = "abcdefghijklmnopqrstuvwxyz"
_UPPERCASE = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
_HEX = "0123456789abcdef"
_VARIANT = "89ab"


def _from_charset(charset: str, length: int) -> str:
    """Return ``length`` characters chosen uniformly from ``charset``.

    An empty charset or a non-positive length gives an empty string.
    """
    if length <= 0 or not charset:
        return ""
    size = len(charset)
    return "".join(charset[random_below(size)] for _ in range(length))


def random_string(length: int) -> str:
    """Return a random alphanumeric string of ``length`` characters."""
    return _from_charset(NORMAL_LETTERS, length)


def visible_string(length: int) -> str:
    """Return a random string of visually distinct characters."""
    return _from_charset(VISIBLE_LETTERS, length)


def custom_string(charset: str, length: int) -> str:
    """Return a random string of characters taken from ``charset``."""
    return _from_charset(charset, length)


def alpha_string(length: int) -> str:
    """Return a random string of ASCII letters."""
    return _from_charset(_ALPHA, length)


def numeric_string(length: int) -> str:
    """Return a random string of decimal digits."""
    return _from_charset(_NUMERIC, length)


def lowercase_string(length: int) -> str:
    """Return a random string of lowercase ASCII letters."""
    return _from_charset(_LOWERCASE, length)


def uppercase_string(length: int) -> str:
    """Return a random string of uppercase ASCII letters."""
    return _from_charset(_UPPERCASE, length)


def _pseudo_uuid() -> str:
    """Build a string in version-4 UUID layout from the package's own source."""
    return "-".join(
        (
            _from_charset(_HEX, 8),
            _from_charset(_HEX, 4),
            "4" + _from_charset(_HEX, 3),
            _from_charset(_VARIANT, 1) + _from_charset(_HEX, 3),
            _from_charset(_HEX, 12),
        )
    )


def uuid_string() -> str:
    """Return a UUID in canonical lowercase form.

    A random (version 4) UUID is preferred; a time-based (version 1) UUID is
    used if that fails, and a locally built string in version-4 layout if
    both fail.
    """
    try:
        return str(uuid.uuid4())
    except (OSError, NotImplementedError):
        pass
    try:
        return str(uuid.uuid1())
    except (OSError, NotImplementedError):
        pass
    return _pseudo_uuid()