"""Conversion of wide-character strings to multibyte (UTF-8) bytes."""

from __future__ import annotations

from typing import Iterable, Iterator, Optional, Union

WideText = Union[str, Iterable[int]]


def _codes(wcstr: WideText) -> Iterator[int]:
    """Yield code points up to, not including, the first NUL."""
    items = map(ord, wcstr) if isinstance(wcstr, str) else iter(wcstr)
    for code in items:
        if code == 0:
            return
        yield code


def _encode(code: int) -> bytes:
    if code < 0x80:
        return bytes([code & 0xFF])
    if code < 0x800:
        return bytes([((code >> 6) | 0xC0) & 0xFF, (code & 0x3F) | 0x80])
    return bytes(
        [
            ((code >> 12) | 0xE0) & 0xFF,
            ((code >> 6) & 0x3F) | 0x80,
            (code & 0x3F) | 0x80,
        ]
    )


def wcstombs(wcstr: Optional[WideText], count: Optional[int] = None) -> bytes:
    """Encode ``wcstr`` into UTF-8, using up to three bytes per character.

    ``wcstr`` is a ``str`` or an iterable of code points; it ends at its
    first NUL. ``count`` is the size of the output buffer including the
    terminator: a new character is started only while fewer than
    ``count - 1`` bytes have been written, and a character once started is
    written whole. ``None`` for ``wcstr`` gives empty bytes.
    """
    if count is not None and count < 1:
        raise ValueError("count must be at least 1")
    if wcstr is None:
        return b""
    limit = None if count is None else count - 1
    out = bytearray()
    for code in _codes(wcstr):
        if limit is not None and len(out) >= limit:
            break
        out += _encode(code)
    return bytes(out)