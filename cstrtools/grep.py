"""Search files for lines matching basic regular expressions."""

from __future__ import annotations

import re
import string
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, List, NamedTuple, Optional, Pattern, Sequence, Tuple

_PROG = "grep"
_SHORT = "eflcisvnho"
_WITH_ARG = "ef"
_LONG = {
    "regexp": "e",
    "file": "f",
    "files-with-matches": "l",
    "count": "c",
    "ignore-case": "i",
    "no-messages": "s",
    "invert-match": "v",
    "line-number": "n",
    "no-filename": "h",
    "only-matching": "o",
    "help": "help",
}
_TRY = f"Try '{_PROG} --help' for more information.\n"


@dataclass
class GrepFlags:
    """Options that control matching and output."""

    ignore_case: bool = False
    no_messages: bool = False
    invert_match: bool = False
    line_number: bool = False
    no_filename: bool = False
    only_matching: bool = False
    files_with_matches: bool = False
    count: bool = False


class _Notice(NamedTuple):
    text: str
    to_stderr: bool = False


_CLASSES = {
    "alpha": "a-zA-Z",
    "digit": "0-9",
    "alnum": "0-9a-zA-Z",
    "upper": "A-Z",
    "lower": "a-z",
    "space": " \\t\\n\\r\\f\\v",
    "blank": " \\t",
    "punct": "".join("\\" + c for c in string.punctuation),
    "xdigit": "0-9A-Fa-f",
    "cntrl": "\\x00-\\x1f\\x7f",
    "print": "\\x20-\\x7e",
    "graph": "\\x21-\\x7e",
}
_SET_SPECIAL = "\\[]^&~|"


def _set_char(ch: str) -> str:
    return "\\" + ch if ch in _SET_SPECIAL else ch


def _bracket(pattern: str, start: int) -> Tuple[str, int]:
    """Translate the bracket expression at ``start``; return it and the next index."""
    i = start + 1
    negate = i < len(pattern) and pattern[i] == "^"
    if negate:
        i += 1
    items: List[str] = []
    first = True
    while True:
        if i >= len(pattern):
            raise re.error("unterminated bracket expression")
        ch = pattern[i]
        if ch == "]" and not first:
            i += 1
            break
        first = False
        if ch == "[" and i + 1 < len(pattern) and pattern[i + 1] in ":.=":
            kind = pattern[i + 1]
            end = pattern.find(kind + "]", i + 2)
            if end < 0:
                raise re.error("unterminated character class")
            name = pattern[i + 2 : end]
            i = end + 2
            if kind == ":":
                if name not in _CLASSES:
                    raise re.error(f"invalid character class {name!r}")
                items.append(_CLASSES[name])
            else:
                items.append("".join(map(_set_char, name)))
            continue
        items.append(_set_char(ch))
        i += 1
    body = "".join(items)
    if negate:
        return "[^" + body + "\\n]", i
    return "[" + body + "]", i


_ESCAPES = {
    "(": "(",
    ")": ")",
    "|": "|",
    "{": "{",
    "}": "}",
    "+": "+",
    "?": "?",
    "<": r"\b(?=\w)",
    ">": r"\b(?<=\w)",
    "`": r"\A",
    "'": r"\Z",
    "w": r"\w",
    "W": r"\W",
    "s": r"\s",
    "S": r"\S",
    "b": r"\b",
    "B": r"\B",
}


def _bre_to_python(pattern: str) -> str:
    """Translate a POSIX basic regular expression into Python syntax."""
    out: List[str] = []
    i = 0
    at_start = True
    while i < len(pattern):
        ch = pattern[i]
        if ch == "\\":
            if i + 1 >= len(pattern):
                raise re.error("trailing backslash")
            nxt = pattern[i + 1]
            i += 2
            if nxt in _ESCAPES:
                out.append(_ESCAPES[nxt])
            elif nxt.isdigit() and nxt != "0":
                out.append("\\" + nxt)
            else:
                out.append(re.escape(nxt))
            at_start = nxt in "(|"
            continue
        if ch == "[":
            translated, i = _bracket(pattern, i)
            out.append(translated)
            at_start = False
            continue
        i += 1
        if ch == "^" and at_start:
            out.append("^")
            continue
        if ch == "*":
            out.append(r"\*" if at_start else "*")
        elif ch == "$":
            at_end = i == len(pattern) or pattern.startswith(("\\)", "\\|"), i)
            out.append("$" if at_end else r"\$")
        elif ch == ".":
            out.append(".")
        else:
            out.append(re.escape(ch))
        at_start = False
    return "".join(out)


def _compile(pattern: str, ignore_case: bool) -> Optional[Pattern[str]]:
    options = re.MULTILINE | (re.IGNORECASE if ignore_case else 0)
    try:
        return re.compile(_bre_to_python(pattern), options)
    except re.error:
        return None


def _scan(args: Sequence[str]) -> Iterator[Tuple[str, str, int]]:
    """Yield ``(key, value, next_index)``; key ``""`` is an operand, ``"?"`` an error."""
    i = 0
    while i < len(args):
        arg = args[i]
        i += 1
        if arg == "--":
            for operand in args[i:]:
                yield "", operand, len(args)
            return
        if arg.startswith("--"):
            name, has_value, value = arg[2:].partition("=")
            if name in _LONG:
                candidates = [name]
            else:
                candidates = [full for full in _LONG if full.startswith(name)]
            if len(candidates) != 1:
                problem = "ambiguous" if candidates else "unrecognized"
                yield "?", f"{_PROG}: {problem} option '--{name}'", i
                continue
            full = candidates[0]
            key = _LONG[full]
            if key in _WITH_ARG:
                if not has_value:
                    if i >= len(args):
                        yield "?", f"{_PROG}: option '--{full}' requires an argument", i
                        continue
                    value = args[i]
                    i += 1
            elif has_value:
                yield "?", f"{_PROG}: option '--{full}' doesn't allow an argument", i
                continue
            yield key, value, i
            continue
        if arg.startswith("-") and arg != "-":
            pos = 1
            while pos < len(arg):
                ch = arg[pos]
                pos += 1
                if ch not in _SHORT:
                    yield "?", f"{_PROG}: invalid option -- '{ch}'", i
                elif ch in _WITH_ARG:
                    value = arg[pos:]
                    pos = len(arg)
                    if value:
                        yield ch, value, i
                    elif i < len(args):
                        value = args[i]
                        i += 1
                        yield ch, value, i
                    else:
                        yield "?", f"{_PROG}: option requires an argument -- '{ch}'", i
                else:
                    yield ch, "", i
            continue
        yield "", arg, i


def _read_text(path: str) -> str:
    return Path(path).read_bytes().decode("utf-8", "surrogateescape")


def _pattern_file(path: str) -> List[str]:
    try:
        text = _read_text(path)
    except OSError as exc:
        raise FileNotFoundError(2, "No such file or directory", path) from exc
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def parse_arguments(
    argv: Sequence[str],
) -> Tuple[GrepFlags, List[str], List[str], List[_Notice]]:
    """Parse command-line arguments (without the program name).

    Returns the flags, the patterns, the files to search and the messages
    to show. Raises ``FileNotFoundError`` when a pattern file cannot be read.
    """
    args = list(argv)
    flags = GrepFlags()
    patterns: List[str] = []
    operands: List[str] = []
    notices: List[_Notice] = []
    for key, value, next_index in _scan(args):
        match key:
            case "":
                operands.append(value)
            case "?":
                notices.append(_Notice(value + "\n", True))
                notices.append(_Notice(_TRY))
            case "help":
                notices.append(_Notice("No help for you.\n"))
                operands.extend(args[next_index:])
                break
            case "e":
                patterns.append(value)
            case "f":
                patterns.extend(_pattern_file(value))
            case "l":
                flags.files_with_matches = True
            case "c":
                flags.count = True
            case "i":
                flags.ignore_case = True
            case "s":
                flags.no_messages = True
            case "v":
                flags.invert_match = True
            case "n":
                flags.line_number = True
            case "h":
                flags.no_filename = True
            case "o":
                flags.only_matching = True
    if not patterns and operands:
        patterns.append(operands.pop(0))
    return flags, patterns, operands, notices


def _only_matching(regex: Pattern[str], line: str, prefix: str) -> Iterator[_Notice]:
    rest = line
    while (found := regex.search(rest)) is not None and found.end() > 0:
        yield _Notice(f"{prefix}{found.group()}\n")
        rest = rest[found.end() :]


def search_lines(
    lines: Iterable[str],
    filename: str,
    patterns: Sequence[str],
    flags: GrepFlags,
    file_count: int,
) -> Iterator[_Notice]:
    """Yield the messages produced by searching ``lines`` of one file.

    Each line keeps its trailing newline, if it has one.
    """
    if not patterns:
        yield _Notice("No.\n", True)
        return
    compiled = [_compile(pattern, flags.ignore_case) for pattern in patterns]
    name_prefix = f"{filename}:" if file_count > 1 and not flags.no_filename else ""
    match_count = 0
    for number, line in enumerate(lines, start=1):
        prefix = name_prefix + (f"{number}:" if flags.line_number else "")
        is_match = False
        for regex in compiled:
            if regex is None:
                yield _Notice("Regcomp failure\n", True)
                break
            if regex.search(line) is None:
                continue
            is_match = True
            if flags.invert_match:
                continue
            if flags.only_matching and not flags.files_with_matches and not flags.count:
                yield from _only_matching(regex, line, prefix)
                continue
            break
        if flags.invert_match:
            is_match = not is_match
        if not is_match:
            continue
        match_count += 1
        if flags.files_with_matches:
            yield _Notice(f"{filename}\n")
            break
        if flags.count:
            continue
        if not flags.only_matching:
            yield _Notice(prefix + line)
    if flags.count and not flags.files_with_matches:
        yield _Notice(f"{name_prefix}{match_count}\n")


def _split_lines(text: str) -> List[str]:
    parts = text.split("\n")
    lines = [part + "\n" for part in parts[:-1]]
    if parts[-1]:
        lines.append(parts[-1])
    return lines


def _emit(notice: _Notice) -> None:
    stream = sys.stderr if notice.to_stderr else sys.stdout
    stream.flush()
    stream.buffer.write(notice.text.encode("utf-8", "surrogateescape"))
    stream.buffer.flush()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command; returns the exit status."""
    args = sys.argv[1:] if argv is None else argv
    try:
        flags, patterns, files, notices = parse_arguments(args)
    except FileNotFoundError as exc:
        _emit(_Notice(f"{_PROG}: {exc.filename}: No such file or directory\n", True))
        return 1
    for notice in notices:
        _emit(notice)
    for name in files:
        try:
            text = _read_text(name)
        except IsADirectoryError:
            text = ""
        except OSError:
            if not flags.no_messages:
                _emit(_Notice(f"{_PROG}: {name}: No such file or directory\n", True))
            continue
        for notice in search_lines(_split_lines(text), name, patterns, flags, len(files)):
            _emit(notice)
    return 0


if __name__ == "__main__":
    sys.exit(main())