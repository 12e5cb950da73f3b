# smartreplace/lines.py
"""
Line-addressed reading and replacement.

Complements the search-based engine: a caller that already knows the 1-based
line numbers (typically from a numbered read) can replace whole lines
without supplying the old text.
"""
from __future__ import annotations

from typing import Optional

from .errors.lines import LineRangeError
from .utils.text import number_lines, split_lines

__all__ = ["read_numbered", "replace_line_range", "line_offsets"]


def _display(line: str) -> str:
    return line[:-1] if line.endswith("\r") else line


def read_numbered(content: str, start_line: Optional[int] = None, end_line: Optional[int] = None) -> str:
    """
    Render `content` as 'N | text' lines. The 1-based inclusive range is clamped
    to the document; a range that is empty after clamping raises LineRangeError.
    """
    lines = split_lines(content)
    first = 0 if start_line is None else max(start_line - 1, 0)
    last = len(lines) - 1 if end_line is None else min(end_line - 1, len(lines) - 1)
    if first > last:
        raise LineRangeError(
            f"Start line {start_line} is after end line {end_line} or out of range "
            f"(the file has {len(lines)} lines)"
        )
    return number_lines([_display(ln) for ln in lines[first:last + 1]], first + 1)


def line_offsets(content: str, start_line: int, end_line: int) -> tuple[int, int]:
    """
    Character offsets spanning lines start_line..end_line (1-based, inclusive).
    The end offset stops before the last line's terminator.
    """
    lines = split_lines(content)
    total = len(lines)
    if start_line < 1 or end_line > total or start_line > end_line:
        raise LineRangeError(
            f"Line range out of bounds. Requested: {start_line}-{end_line}, total lines: {total}"
        )
    start = sum(len(lines[k]) + 1 for k in range(start_line - 1))
    end = start
    for k in range(start_line - 1, end_line):
        end += len(lines[k]) + (1 if k < end_line - 1 else 0)
    if lines[end_line - 1].endswith("\r"):
        end -= 1
    return start, end


def replace_line_range(content: str, start_line: int, end_line: int, new_text: str) -> str:
    """
    Replace lines start_line..end_line (1-based, inclusive) with `new_text`.

    The terminator after the last replaced line is kept. An empty document can
    only be written from line 1, and the result is then `new_text` itself.
    """
    if not content:
        if start_line == 1:
            return new_text
        raise LineRangeError("An empty file must be written starting at line 1")
    start, end = line_offsets(content, start_line, end_line)
    return content[:start] + new_text + content[end:]
