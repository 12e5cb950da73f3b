import pytest

from smartreplace.errors import LineRangeError
from smartreplace.lines import line_offsets, read_numbered, replace_line_range


def test_read_numbered_range():
    assert read_numbered("a\nb\nc", 2, 3) == "2 | b\n3 | c\n"


def test_read_numbered_whole_and_clamped():
    assert read_numbered("a\nb") == "1 | a\n2 | b\n"
    assert read_numbered("a\nb", 0, 10) == "1 | a\n2 | b\n"


def test_read_numbered_hides_carriage_returns():
    assert read_numbered("a\r\nb", 1, 1) == "1 | a\n"


def test_read_numbered_empty_range():
    with pytest.raises(LineRangeError) as exc:
        read_numbered("a\nb", 3, 4)
    assert "2 lines" in str(exc.value)


def test_line_offsets_exclude_terminator():
    assert line_offsets("ab\ncd\nef", 2, 2) == (3, 5)
    assert line_offsets("ab\r\ncd\r\n", 1, 1) == (0, 2)


def test_replace_single_line():
    assert replace_line_range("a\nb\nc\n", 2, 2, "B") == "a\nB\nc\n"


def test_replace_multiple_lines_keeps_final_newline():
    assert replace_line_range("a\nb\nc\n", 1, 3, "X") == "X\n"


def test_replace_keeps_crlf_terminator():
    assert replace_line_range("a\r\nb\r\n", 1, 1, "A") == "A\r\nb\r\n"


def test_replace_in_empty_document():
    assert replace_line_range("", 1, 1, "new") == "new"
    with pytest.raises(LineRangeError):
        replace_line_range("", 2, 2, "new")


@pytest.mark.parametrize("start, end", [(0, 1), (1, 5), (2, 1)])
def test_replace_rejects_bad_ranges(start, end):
    with pytest.raises(LineRangeError):
        replace_line_range("a\nb", start, end, "x")
