"""Case conversion and trimming of text, ASCII letters only."""

from __future__ import annotations

import string

_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)
_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def _text(value: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"expected str, got {type(value).__name__}")
    return value.partition("\0")[0]


def to_upper(text: str) -> str:
    """Return a copy of ``text`` with ASCII letters made upper case."""
    return _text(text).translate(_UPPER)


def to_lower(text: str) -> str:
    """Return a copy of ``text`` with ASCII letters made lower case."""
    return _text(text).translate(_LOWER)


def trim(text: str, trim_chars: str) -> str:
    """Return ``text`` without leading and trailing characters from ``trim_chars``."""
    return _text(text).strip(_text(trim_chars))