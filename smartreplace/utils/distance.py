# smartreplace/utils/distance.py
from __future__ import annotations

from typing import List, Sequence


def levenshtein(a: str, b: str) -> int:
    """
    Minimum number of single-character inserts, deletes and substitutions
    turning `a` into `b`. Full DP table, no banding or early exit.
    """
    if not a or not b:
        return max(len(a), len(b))

    matrix: List[List[int]] = [[0] * (len(b) + 1) for _ in range(len(a) + 1)]
    for i in range(len(a) + 1):
        matrix[i][0] = i
    for j in range(len(b) + 1):
        matrix[0][j] = j

    for i in range(1, len(a) + 1):
        for j in range(1, len(b) + 1):
            cost = 0 if a[i - 1] == b[j - 1] else 1
            matrix[i][j] = min(
                matrix[i - 1][j] + 1,
                matrix[i][j - 1] + 1,
                matrix[i - 1][j - 1] + cost,
            )
    return matrix[len(a)][len(b)]


def similarity(a: str, b: str) -> float:
    """1 - distance / longest length, in [0, 1]. Two empty strings are identical."""
    longest = max(len(a), len(b))
    if longest == 0:
        return 1.0
    score = 1.0 - levenshtein(a, b) / longest
    return min(1.0, max(0.0, score))


def interior_similarity(
    document_lines: Sequence[str],
    start_line: int,
    end_line: int,
    search_lines: Sequence[str],
) -> float:
    """
    Mean similarity of the lines strictly between two anchor lines.

    Compares document_lines[start_line + j] with search_lines[j] (both trimmed)
    for every interior offset the two blocks share. Pairs that are empty on
    both sides add nothing but still count towards the divisor. With no
    interior lines to compare the block is taken as a perfect fit.
    """
    actual_size = end_line - start_line + 1
    lines_to_check = min(len(search_lines) - 2, actual_size - 2)
    if lines_to_check <= 0:
        return 1.0

    total = 0.0
    for j in range(1, min(len(search_lines) - 1, actual_size - 1)):
        original = document_lines[start_line + j].strip()
        wanted = search_lines[j].strip()
        if not original and not wanted:
            continue
        total += similarity(original, wanted)
    return total / lines_to_check
