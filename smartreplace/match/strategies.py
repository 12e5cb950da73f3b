# smartreplace/match/strategies.py
"""
Ordered matching strategies, strictest first.

Every strategy is a generator `strategy(content, find)` yielding literal
substrings of `content` it believes `find` refers to. Strategies are pure:
they never touch their inputs and can be re-run any number of times. The
resolver consumes them lazily and stops at the first literal candidate, so
later (more permissive) strategies only run when earlier ones found nothing.
"""
from __future__ import annotations

from typing import Callable, Iterator, List, Tuple

from ..utils.distance import interior_similarity
from ..utils.text import (
    chomp_cr,
    drop_trailing_empty,
    extract_block,
    join_window,
    normalize_whitespace,
    remove_indentation,
    split_lines,
    unescape,
)

__all__ = [
    "Strategy",
    "STRATEGIES",
    "SINGLE_CANDIDATE_SIMILARITY_THRESHOLD",
    "MULTIPLE_CANDIDATES_SIMILARITY_THRESHOLD",
    "CONTEXT_MATCH_RATIO",
    "exact",
    "line_trimmed",
    "block_anchor",
    "whitespace_normalized",
    "indentation_flexible",
    "escape_normalized",
    "trimmed_boundary",
    "context_aware",
    "multi_occurrence",
]

Strategy = Callable[[str, str], Iterator[str]]

# A lone anchor pair is trusted whatever its body looks like; competing pairs
# must earn it.
SINGLE_CANDIDATE_SIMILARITY_THRESHOLD = 0.0
MULTIPLE_CANDIDATES_SIMILARITY_THRESHOLD = 0.3
CONTEXT_MATCH_RATIO = 0.5


def _anchor_pairs(content_lines: List[str], first: str, last: str) -> Iterator[Tuple[int, int]]:
    """
    Yield (start, end) line pairs: a line whose trimmed text equals `first` and the
    nearest line at least two below it whose trimmed text equals `last`.
    """
    for i, line in enumerate(content_lines):
        if line.strip() != first:
            continue
        for j in range(i + 2, len(content_lines)):
            if content_lines[j].strip() == last:
                yield i, j
                break


def exact(content: str, find: str) -> Iterator[str]:
    if find in content:
        yield find


def line_trimmed(content: str, find: str) -> Iterator[str]:
    """Windows whose lines equal the target's lines once surrounding whitespace is stripped."""
    content_lines = split_lines(content)
    search_lines = drop_trailing_empty(split_lines(find))
    if not search_lines:
        return
    wanted = [ln.strip() for ln in search_lines]
    size = len(search_lines)

    for i in range(len(content_lines) - size + 1):
        if all(content_lines[i + j].strip() == wanted[j] for j in range(size)):
            yield extract_block(content, content_lines, i, i + size - 1)


def block_anchor(content: str, find: str) -> Iterator[str]:
    """
    Blocks bounded by the target's first and last lines, ranked by how closely
    the lines in between resemble the target's body (Levenshtein similarity).
    """
    search_lines = split_lines(find)
    if len(search_lines) < 3:
        return
    search_lines = drop_trailing_empty(search_lines)

    content_lines = split_lines(content)
    candidates = list(
        _anchor_pairs(content_lines, search_lines[0].strip(), search_lines[-1].strip())
    )
    if not candidates:
        return

    if len(candidates) == 1:
        start, end = candidates[0]
        score = interior_similarity(content_lines, start, end, search_lines)
        if score >= SINGLE_CANDIDATE_SIMILARITY_THRESHOLD:
            yield extract_block(content, content_lines, start, end)
        return

    best = None
    best_score = -1.0
    for start, end in candidates:
        score = interior_similarity(content_lines, start, end, search_lines)
        if score > best_score:
            best_score = score
            best = (start, end)

    if best is not None and best_score >= MULTIPLE_CANDIDATES_SIMILARITY_THRESHOLD:
        yield extract_block(content, content_lines, best[0], best[1])


def whitespace_normalized(content: str, find: str) -> Iterator[str]:
    """Single lines, then multi-line windows, equal to the target once whitespace runs collapse."""
    normalized_find = normalize_whitespace(find)
    content_lines = split_lines(content)

    for line in content_lines:
        if normalize_whitespace(line) == normalized_find:
            yield chomp_cr(line)

    size = len(split_lines(find))
    if size > 1:
        for i in range(len(content_lines) - size + 1):
            block = join_window(content_lines, i, size)
            if normalize_whitespace(block) == normalized_find:
                yield block


def indentation_flexible(content: str, find: str) -> Iterator[str]:
    """Windows equal to the target after both drop their common indentation."""
    normalized_find = remove_indentation(find)
    content_lines = split_lines(content)
    size = len(split_lines(find))

    for i in range(len(content_lines) - size + 1):
        block = join_window(content_lines, i, size)
        if remove_indentation(block) == normalized_find:
            yield block


def escape_normalized(content: str, find: str) -> Iterator[str]:
    """Targets that arrived with literal escape sequences (\\n, \\", \\\\ ...)."""
    unescaped_find = unescape(find)
    if unescaped_find in content:
        yield unescaped_find

    content_lines = split_lines(content)
    size = len(split_lines(unescaped_find))
    for i in range(len(content_lines) - size + 1):
        block = join_window(content_lines, i, size)
        if unescape(block) == unescaped_find:
            yield block


def trimmed_boundary(content: str, find: str) -> Iterator[str]:
    """Targets carrying stray leading/trailing whitespace."""
    trimmed_find = find.strip()
    if trimmed_find == find:
        return

    if trimmed_find in content:
        yield trimmed_find

    content_lines = split_lines(content)
    size = len(split_lines(find))
    for i in range(len(content_lines) - size + 1):
        block = join_window(content_lines, i, size)
        if block.strip() == trimmed_find:
            yield block


def context_aware(content: str, find: str) -> Iterator[str]:
    """
    Same-height blocks between the target's anchor lines where at least half of
    the non-blank interior lines agree after trimming.
    """
    find_lines = split_lines(find)
    if len(find_lines) < 3:
        return
    find_lines = drop_trailing_empty(find_lines)

    content_lines = split_lines(content)
    for start, end in _anchor_pairs(content_lines, find_lines[0].strip(), find_lines[-1].strip()):
        block_lines = content_lines[start:end + 1]
        if len(block_lines) != len(find_lines):
            continue

        matching = 0
        non_blank = 0
        for k in range(1, len(block_lines) - 1):
            block_line = block_lines[k].strip()
            find_line = find_lines[k].strip()
            if block_line or find_line:
                non_blank += 1
                if block_line == find_line:
                    matching += 1

        if non_blank == 0 or matching / non_blank >= CONTEXT_MATCH_RATIO:
            yield chomp_cr("\n".join(block_lines))


def multi_occurrence(content: str, find: str) -> Iterator[str]:
    """Every non-overlapping literal occurrence, so duplicates surface as ambiguity."""
    if not find:
        return
    start = 0
    while True:
        index = content.find(find, start)
        if index == -1:
            return
        yield find
        start = index + len(find)


STRATEGIES: Tuple[Tuple[str, Strategy], ...] = (
    ("exact", exact),
    ("line_trimmed", line_trimmed),
    ("block_anchor", block_anchor),
    ("whitespace_normalized", whitespace_normalized),
    ("indentation_flexible", indentation_flexible),
    ("escape_normalized", escape_normalized),
    ("trimmed_boundary", trimmed_boundary),
    ("context_aware", context_aware),
    ("multi_occurrence", multi_occurrence),
)
