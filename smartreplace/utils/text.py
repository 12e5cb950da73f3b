# smartreplace/utils/text.py
import re
from typing import List, Sequence

_WS_RUN_RE = re.compile(r"\s+")
_LEADING_WS_RE = re.compile(r"^\s*")
_ESCAPE_RE = re.compile(r"\\(n|t|r|'|\"|`|\\|\$)")
_ESCAPES = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "'": "'",
    '"': '"',
    "`": "`",
    "\\": "\\",
    "$": "$",
}


def split_lines(text: str) -> List[str]:
    """
    Split on '\\n' only. A CRLF document keeps its '\\r' at the end of each line,
    so `len(line) + 1` is always the exact distance to the next line start.
    """
    return text.split("\n")


def drop_trailing_empty(lines: List[str]) -> List[str]:
    """Drop the single empty line a trailing newline leaves behind."""
    if lines and lines[-1] == "":
        return lines[:-1]
    return lines


def chomp_cr(text: str) -> str:
    """Drop one trailing '\\r' so a CRLF terminator is never split by a match."""
    return text[:-1] if text.endswith("\r") else text


def extract_block(content: str, lines: Sequence[str], start_line: int, end_line: int) -> str:
    """Return the literal slice of `content` covering lines start_line..end_line inclusive."""
    start = sum(len(lines[k]) + 1 for k in range(start_line))
    end = start
    for k in range(start_line, end_line + 1):
        end += len(lines[k])
        if k < end_line:
            end += 1
    return chomp_cr(content[start:end])


def join_window(lines: Sequence[str], start: int, size: int) -> str:
    return chomp_cr("\n".join(lines[start:start + size]))


def normalize_whitespace(text: str) -> str:
    """Collapse every whitespace run (newlines included) to one space and strip."""
    return _WS_RUN_RE.sub(" ", text).strip()


def remove_indentation(text: str) -> str:
    """
    Remove the common leading indentation from every non-blank line.

    The width is the smallest leading-whitespace run among non-blank lines;
    that many characters are dropped from each non-blank line. Blank lines
    are left as they are.
    """
    lines = split_lines(text)
    non_blank = [ln for ln in lines if ln.strip()]
    if not non_blank:
        return text
    min_indent = min(len(_LEADING_WS_RE.match(ln).group(0)) for ln in non_blank)
    return "\n".join(ln if not ln.strip() else ln[min_indent:] for ln in lines)


def unescape(text: str) -> str:
    """Turn literal escape sequences (\\n, \\t, \\", \\\\ ...) into the characters they denote."""
    return _ESCAPE_RE.sub(lambda m: _ESCAPES[m.group(1)], text)


def number_lines(lines: Sequence[str], first_line_number: int = 1) -> str:
    """Render lines as 'N | text', one per output line, with a trailing newline."""
    return "".join(f"{first_line_number + offset} | {line}\n" for offset, line in enumerate(lines))
