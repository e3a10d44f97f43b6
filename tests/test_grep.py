import pytest

from cstrtools.grep import GrepFlags, main, parse_arguments, search_lines

LINES = ["apple pie\n", "banana split\n", "cherry tart\n", "Banana bread"]


def _out(notices):
    return "".join(n.text for n in notices if not n.to_stderr)


def _err(notices):
    return "".join(n.text for n in notices if n.to_stderr)


def _search(patterns, lines=LINES, file_count=1, filename="f", **flags):
    return list(search_lines(lines, filename, patterns, GrepFlags(**flags), file_count))


def test_basic_match():
    assert _out(_search(["an"])) == LINES[1] + LINES[3]


def test_invert_match():
    assert _out(_search(["an"], invert_match=True)) == LINES[0] + LINES[2]


def test_ignore_case():
    assert _out(_search(["BANANA"])) == ""
    assert _out(_search(["BANANA"], ignore_case=True)) == LINES[1] + LINES[3]


def test_count():
    assert _out(_search(["an"], count=True)) == "2\n"


def test_count_with_several_files_gets_prefix():
    single = _out(_search(["an"], count=True))
    assert _out(_search(["an"], count=True, file_count=2)) == "f:" + single
    assert _out(_search(["an"], count=True, file_count=2, no_filename=True)) == single


def test_line_number():
    assert _out(_search(["cherry"], line_number=True)) == "3:" + LINES[2]


def test_files_with_matches():
    assert _out(_search(["a"], files_with_matches=True, filename="x.txt")) == "x.txt\n"
    assert _out(_search(["zzz"], files_with_matches=True)) == ""


def test_files_with_matches_overrides_count():
    out = _out(_search(["a"], files_with_matches=True, count=True, filename="x.txt"))
    assert out == "x.txt\n"


def test_only_matching():
    out = _out(_search(["an"], lines=["banana\n"], only_matching=True))
    assert out.splitlines() == ["an", "an"]


def test_multiple_patterns():
    assert _out(_search(["pie", "tart"])) == LINES[0] + LINES[2]


def test_filename_prefix_for_several_files():
    assert _out(_search(["pie"], file_count=2, filename="f.txt")) == "f.txt:" + LINES[0]
    assert _out(_search(["pie"], file_count=2, no_filename=True)) == LINES[0]


def test_empty_pattern_matches_everything():
    assert _out(_search([""])) == "".join(LINES)


@pytest.mark.parametrize(
    "pattern, lines, expected",
    [
        ("a+", ["aaa\n", "a+b\n"], "a+b\n"),
        ("\\(ab\\)\\{2\\}", ["ab\n", "abab\n"], "abab\n"),
        ("x|y", ["x\n", "x|y\n"], "x|y\n"),
        ("[[:digit:]]", ["abc\n", "a1\n"], "a1\n"),
        ("*a", ["*a\n", "a\n"], "*a\n"),
        ("^b", ["ab\n", "ba\n"], "ba\n"),
        ("b[^x]", ["b\n"], ""),
        ("a$", ["ab\n", "ba\n"], "ba\n"),
    ],
)
def test_basic_regular_expression_syntax(pattern, lines, expected):
    assert _out(_search([pattern], lines=lines)) == expected


def test_bad_pattern_reports_for_each_line():
    notices = _search(["\\(a"])
    assert _err(notices) == "Regcomp failure\n" * len(LINES)
    assert _out(notices) == ""


def test_no_patterns():
    notices = _search([])
    assert _err(notices) == "No.\n"
    assert _out(notices) == ""


def test_parse_first_operand_is_pattern():
    flags, patterns, files, notices = parse_arguments(["-n", "pat", "a", "b"])
    assert flags.line_number
    assert patterns == ["pat"]
    assert files == ["a", "b"]
    assert notices == []


def test_parse_regexp_options():
    _, patterns, files, _ = parse_arguments(["-e", "x", "-ey", "--regexp=z", "file"])
    assert patterns == ["x", "y", "z"]
    assert files == ["file"]


def test_parse_clustered_flags():
    flags, patterns, _, _ = parse_arguments(["-ivc", "p"])
    assert flags.ignore_case and flags.invert_match and flags.count
    assert patterns == ["p"]


def test_parse_pattern_file(tmp_path):
    source = tmp_path / "patterns.txt"
    source.write_text("one\ntwo\n")
    _, patterns, files, _ = parse_arguments(["-f", str(source), "data"])
    assert patterns == ["one", "two"]
    assert files == ["data"]


def test_parse_missing_pattern_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        parse_arguments(["-f", str(tmp_path / "missing")])


def test_parse_missing_argument():
    _, _, _, notices = parse_arguments(["-e"])
    assert [n.to_stderr for n in notices] == [True, False]
    assert "--help" in notices[1].text


def test_parse_help():
    _, _, _, notices = parse_arguments(["--help"])
    assert notices[0].text == "No help for you.\n"


def test_main_searches_files(tmp_path, capsysbinary):
    first = tmp_path / "a.txt"
    second = tmp_path / "b.txt"
    first.write_text("apple\nplum\n")
    second.write_text("pear\n")
    assert main(["apple", str(first), str(second)]) == 0
    assert capsysbinary.readouterr().out == f"{first}:apple\n".encode()


def test_main_missing_file(tmp_path, capsysbinary):
    missing = tmp_path / "nope"
    assert main(["x", str(missing)]) == 0
    assert b"No such file or directory" in capsysbinary.readouterr().err
    assert main(["-s", "x", str(missing)]) == 0
    assert capsysbinary.readouterr().err == b""


def test_main_missing_pattern_file(tmp_path, capsysbinary):
    assert main(["-f", str(tmp_path / "none"), "x"]) == 1
    assert b"No such file or directory" in capsysbinary.readouterr().err