"""Concatenate files to standard output, optionally decorating the text."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, List, NamedTuple, Optional, Sequence, Tuple

_PROG = "cat"
_SHORT = "benstvuET"
_LONG = {
    "number-nonblank": "b",
    "number": "n",
    "squeeze-blank": "s",
    "show-tabs": "T",
    "show-nonprinting": "v",
    "help": "help",
}
_TRY = f"Try '{_PROG} --help' for more information.\n"


@dataclass
class CatFlags:
    """Which decorations to apply to the output."""

    number_nonblank: bool = False
    show_ends: bool = False
    number: bool = False
    squeeze_blank: bool = False
    show_tabs: bool = False
    show_nonprinting: bool = False


class _Notice(NamedTuple):
    text: str
    to_stderr: bool = False


def _scan(args: Sequence[str]) -> Iterator[Tuple[str, str, int]]:
    """Yield ``(key, value, next_index)``.

    ``key`` is ``""`` for an operand and ``"?"`` for a bad option, in which
    case ``value`` holds the diagnostic.
    """
    i = 0
    while i < len(args):
        arg = args[i]
        i += 1
        if arg == "--":
            for operand in args[i:]:
                yield "", operand, len(args)
            return
        if arg.startswith("--"):
            name, has_value, _ = arg[2:].partition("=")
            if name in _LONG:
                candidates = [name]
            else:
                candidates = [full for full in _LONG if full.startswith(name)]
            if len(candidates) != 1:
                problem = "ambiguous" if candidates else "unrecognized"
                yield "?", f"{_PROG}: {problem} option '--{name}'", i
            elif has_value:
                yield "?", f"{_PROG}: option '--{candidates[0]}' doesn't allow an argument", i
            else:
                yield _LONG[candidates[0]], "", i
            continue
        if arg.startswith("-") and arg != "-":
            for ch in arg[1:]:
                if ch in _SHORT:
                    yield ch, "", i
                else:
                    yield "?", f"{_PROG}: invalid option -- '{ch}'", i
            continue
        yield "", arg, i


def parse_arguments(argv: Sequence[str]) -> Tuple[CatFlags, List[str], List[_Notice]]:
    """Parse command-line arguments (without the program name).

    Returns the flags, the files to print and the messages to show.
    """
    args = list(argv)
    flags = CatFlags()
    files: List[str] = []
    notices: List[_Notice] = []
    for key, value, next_index in _scan(args):
        match key:
            case "":
                files.append(value)
            case "?":
                notices.append(_Notice(value + "\n", True))
                notices.append(_Notice(_TRY))
            case "help":
                notices.append(_Notice("No help for you.\n"))
                files.extend(args[next_index:])
                break
            case "v":
                flags.show_nonprinting = True
            case "b":
                flags.number_nonblank = True
                flags.number = True
            case "e":
                flags.show_ends = True
                flags.show_nonprinting = True
            case "E":
                flags.show_ends = True
            case "n":
                flags.number = True
            case "s":
                flags.squeeze_blank = True
            case "T":
                flags.show_tabs = True
            case "t":
                flags.show_tabs = True
                flags.show_nonprinting = True
    return flags, files, notices


def cat_bytes(data: bytes, flags: CatFlags) -> bytes:
    """Return ``data`` as it is printed with ``flags``."""
    out = bytearray()
    line_number = 1
    pending_number = not flags.number_nonblank
    at_line_start = True
    newline_run = 0
    for ch in bytes(data):
        skip = False
        if flags.squeeze_blank:
            if newline_run > 1:
                if ch == 10:
                    skip = True
                else:
                    newline_run = 0
            if ch == 10:
                newline_run += 1
        if flags.number and not skip:
            if flags.number_nonblank and at_line_start and ch != 10:
                pending_number = True
                at_line_start = False
            if pending_number:
                pending_number = False
                out += b"%6d\t" % line_number
                line_number += 1
            if ch == 10:
                if flags.number_nonblank:
                    at_line_start = True
                else:
                    pending_number = True
        if flags.show_ends and not skip and ch == 10:
            out += b"$"
        if flags.show_tabs and ch == 9:
            out += b"^I"
            skip = True
        if flags.show_nonprinting and ch not in (9, 10):
            if ch >= 128:
                out += b"M-"
                ch -= 128
            if ch < 32 or ch == 127:
                out += b"^"
                ch = ch + 64 if ch < 32 else ord("?")
        if not skip:
            out.append(ch)
    return bytes(out)


def _write(stream, payload: bytes) -> None:
    stream.flush()
    stream.buffer.write(payload)
    stream.buffer.flush()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command; returns the exit status."""
    args = sys.argv[1:] if argv is None else argv
    flags, files, notices = parse_arguments(args)
    for notice in notices:
        stream = sys.stderr if notice.to_stderr else sys.stdout
        _write(stream, notice.text.encode("utf-8", "surrogateescape"))
    for name in files:
        try:
            data = Path(name).read_bytes()
        except IsADirectoryError:
            data = b""
        except OSError:
            message = f"{_PROG}: {name}: No such file or directory\n"
            _write(sys.stdout, message.encode("utf-8", "surrogateescape"))
            continue
        _write(sys.stdout, cat_bytes(data, flags))
    return 0


if __name__ == "__main__":
    sys.exit(main())