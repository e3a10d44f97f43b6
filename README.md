# cstrtools

C-flavoured string routines with their edge cases kept, system error
messages, a small UTF-8 encoder for wide-character strings, and two
command-line filters that behave like simple versions of `cat` and `grep`.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Library

### `cstrtools.cstring`

Every function takes `str` or `bytes`, and reads its arguments only up to
the first NUL (`"\0"` or `b"\0"`), as a C string would be read. Two text
arguments must be of the same kind; mixing `str` and `bytes` raises
`TypeError`. A negative count raises `ValueError`. Where a C routine would
return a pointer, these functions return an offset into the text, or
`None` when nothing is found.

- `strncat(dest, src, n)` returns `dest` followed by at most `n` characters of `src`.
- `strncmp(first, second, n)` compares at most `n` characters and returns `0`
  when they match, otherwise the code difference of the first pair that
  differs (a shorter string counts as ending in NUL).
- `strncpy(src, n)` returns exactly `n` characters: `src` cut to `n`, padded
  with NULs.
- `strpbrk(text, accept)` returns the offset of the first character of
  `text` that appears in `accept`.
- `strrchr(text, ch)` returns the offset of the last occurrence of `ch`, given
  as an integer code or a single character. Searching for NUL gives
  `len(text)`, the position of the terminator.
- `strstr(haystack, needle)` returns the offset of the first occurrence of
  `needle`; an empty needle is found at `0`.
- `strtok(text, delim)` is a generator yielding the non-empty tokens of
  `text` separated by any of the characters in `delim`.

```python
from cstrtools.cstring import strtok, strncmp, strstr

list(strtok("Hi, how are you, friend?", ","))  # ['Hi', ' how are you', ' friend?']
strncmp("hello", "heloy", 5)                   # -3
strstr("Hello, world!", "world")               # 7
```

### `cstrtools.textcase`

These take `str` only (anything else raises `TypeError`) and read up to the
first NUL.

- `to_upper(text)` turns only the ASCII letters `a` to `z` into capitals.
- `to_lower(text)` turns only the ASCII letters `A` to `Z` into lower case.
- `trim(text, trim_chars)` removes any of `trim_chars` from both ends of `text`.

### `cstrtools.errors`

`strerror(errnum, platform=None)` returns the message for an error number
from the Linux table (134 entries) or the macOS table (107 entries).
`platform` is `"linux"` or `"darwin"`; by default the running system
decides. Numbers outside the table give `"Unknown error N"` on Linux and
`"Unknown error: N"` on macOS. Any other platform name raises `ValueError`.

```python
from cstrtools.errors import strerror

strerror(2, "linux")    # 'No such file or directory'
strerror(-54, "linux")  # 'Unknown error -54'
```

### `cstrtools.wchar`

`wcstombs(wcstr, count=None)` encodes a `str` or an iterable of code points,
up to its first NUL, into UTF-8 bytes, using one to three bytes per
character. `count` is the size of an output buffer including its
terminator: a new character is started only while fewer than `count - 1`
bytes have been written, and a started character is always written whole.
Without `count` there is no limit. `None` as `wcstr` gives `b""`; a `count`
below 1 raises `ValueError`.

## Commands

Both commands read only the files named on the command line; with no
files they print nothing. Each can also be run as `python -m cstrtools.cat`
or `python -m cstrtools.grep`.

### `cstrtools-cat`

```
cstrtools-cat [-benstuvET] [--number-nonblank] [--number] [--squeeze-blank]
              [--show-tabs] [--show-nonprinting] [--help] FILE...
```

| Option | Effect |
|--------|--------|
| `-n`, `--number` | Number every line. |
| `-b`, `--number-nonblank` | Number only the lines that are not empty. |
| `-s`, `--squeeze-blank` | Squeeze runs of empty lines down to one. |
| `-E` | Mark each line end with `$`. |
| `-T`, `--show-tabs` | Show each tab as `^I`. |
| `-v`, `--show-nonprinting` | Show control and high-bit bytes in `^` and `M-` notation. |
| `-e` | The same as `-E` together with `-v`. |
| `-t` | The same as `-T` together with `-v`. |
| `-u` | Accepted and ignored. |

`--help` prints a one-line message and treats everything after it as file
names. A file that cannot be opened is reported on standard output and
skipped. Long options may be abbreviated. The exit status is always 0.

### `cstrtools-grep`

```
cstrtools-grep [-e PATTERN] [-f FILE] [-ilcvnhos] [PATTERN] FILE...
```

Patterns are POSIX basic regular expressions. Without `-e` or `-f`, the
first operand is the pattern.

| Option | Effect |
|--------|--------|
| `-e`, `--regexp PATTERN` | Add a pattern; may be given more than once. |
| `-f`, `--file FILE` | Add one pattern per line of `FILE`. |
| `-i`, `--ignore-case` | Ignore case. |
| `-v`, `--invert-match` | Select lines that do not match. |
| `-c`, `--count` | Print the number of selected lines. |
| `-l`, `--files-with-matches` | Print only the names of files with a selected line. |
| `-n`, `--line-number` | Prefix each line with its number. |
| `-h`, `--no-filename` | Leave out file names when several files are searched. |
| `-o`, `--only-matching` | Print only the matched parts of each line. |
| `-s`, `--no-messages` | Suppress messages about missing files. |

An unreadable pattern file ends the command with exit status 1; otherwise
the exit status is 0, whether or not anything matched.

The functions behind the commands can be used directly:
`cat.parse_arguments(argv)` and `cat.cat_bytes(data, flags)` with
`cat.CatFlags`, and `grep.parse_arguments(argv)` and
`grep.search_lines(lines, filename, patterns, flags, file_count)` with
`grep.GrepFlags`.

## Limits

The filters do not read standard input, do not search directories
recursively, and do not support extended regular expressions or
fixed-string matching.