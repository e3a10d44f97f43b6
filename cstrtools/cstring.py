"""Operations on NUL-terminated strings.

Every function accepts ``str`` or ``bytes``. A value is read up to its first
NUL (``"\\0"`` or ``b"\\0"``), just as a C string would be. Functions that
locate something return an offset into the text, or ``None`` when nothing
is found.
"""

from __future__ import annotations

from itertools import groupby, islice, zip_longest
from typing import Iterator, Optional, Union

Text = Union[str, bytes]


def _nuls(text: Text, count: int = 1) -> Text:
    """Return ``count`` NUL characters of the same kind as ``text``."""
    unit = "\0" if isinstance(text, str) else b"\0"
    return unit * count


def _cstr(text: Text) -> Text:
    """Return ``text`` cut at its first NUL."""
    if not isinstance(text, (str, bytes)):
        raise TypeError(f"expected str or bytes, got {type(text).__name__}")
    return text.partition(_nuls(text))[0]


def _same_kind(first: Text, second: Text) -> None:
    _cstr(first)
    _cstr(second)
    if type(first) is not type(second):
        raise TypeError("cannot mix str and bytes")


def _check_count(n: int) -> None:
    if n < 0:
        raise ValueError("count must not be negative")


def _codes(text: Text) -> Iterator[int]:
    return iter(text) if isinstance(text, bytes) else map(ord, text)


def _unit(text: Text, ch: Union[int, Text]) -> Text:
    """Turn ``ch`` into a single character of the same kind as ``text``."""
    if isinstance(ch, int):
        return chr(ch) if isinstance(text, str) else bytes([ch & 0xFF])
    if type(ch) is not type(text) or len(ch) != 1:
        raise ValueError("expected a single character of the same kind as the text")
    return ch


def strncat(dest: Text, src: Text, n: int) -> Text:
    """Return ``dest`` followed by at most ``n`` characters of ``src``."""
    _same_kind(dest, src)
    _check_count(n)
    return _cstr(dest) + _cstr(src)[:n]


def strncmp(first: Text, second: Text, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns 0 when they match, otherwise the code difference of the first
    pair of characters that differ.
    """
    _same_kind(first, second)
    _check_count(n)
    pairs = zip_longest(_codes(_cstr(first)), _codes(_cstr(second)), fillvalue=0)
    for a, b in islice(pairs, n):
        if a != b:
            return a - b
        if a == 0:
            break
    return 0


def strncpy(src: Text, n: int) -> Text:
    """Return exactly ``n`` characters: ``src`` cut to ``n``, padded with NULs."""
    _check_count(n)
    copied = _cstr(src)[:n]
    return copied + _nuls(src, n - len(copied))


def strpbrk(text: Text, accept: Text) -> Optional[int]:
    """Return the offset of the first character of ``text`` found in ``accept``."""
    _same_kind(text, accept)
    wanted = set(_cstr(accept))
    return next(
        (pos for pos, ch in enumerate(_cstr(text)) if ch in wanted),
        None,
    )


def strrchr(text: Text, ch: Union[int, Text]) -> Optional[int]:
    """Return the offset of the last occurrence of ``ch`` in ``text``.

    Searching for NUL finds the terminator, at offset ``len(text)``.
    """
    body = _cstr(text)
    unit = _unit(text, ch)
    if unit == _nuls(text):
        return len(body)
    pos = body.rfind(unit)
    return None if pos < 0 else pos


def strstr(haystack: Text, needle: Text) -> Optional[int]:
    """Return the offset of the first occurrence of ``needle`` in ``haystack``."""
    _same_kind(haystack, needle)
    pos = _cstr(haystack).find(_cstr(needle))
    return None if pos < 0 else pos


def strtok(text: Text, delim: Text) -> Iterator[Text]:
    """Yield the non-empty tokens of ``text`` separated by characters of ``delim``."""
    _same_kind(text, delim)
    separators = set(_cstr(delim))
    as_bytes = isinstance(text, bytes)
    for is_separator, group in groupby(_cstr(text), key=lambda c: c in separators):
        if not is_separator:
            yield bytes(group) if as_bytes else "".join(group)