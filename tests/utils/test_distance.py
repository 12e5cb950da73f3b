import pytest

from smartreplace.utils.distance import interior_similarity, levenshtein, similarity


@pytest.mark.parametrize(
    "a, b, expected",
    [
        ("kitten", "sitting", 3),
        ("flaw", "lawn", 2),
        ("", "abc", 3),
        ("abc", "", 3),
        ("", "", 0),
        ("same", "same", 0),
    ],
)
def test_levenshtein_known_distances(a, b, expected):
    assert levenshtein(a, b) == expected


def test_levenshtein_is_symmetric():
    assert levenshtein("return 1", "return 42") == levenshtein("return 42", "return 1")


def test_similarity_of_identical_strings_is_one():
    for s in ["", "x", "    foo();"]:
        assert similarity(s, s) == 1.0


def test_similarity_of_disjoint_strings_is_zero():
    assert similarity("abc", "xyz") == 0.0


def test_similarity_uses_longest_length():
    assert similarity("kitten", "sitting") == pytest.approx(1 - 3 / 7)


def test_interior_similarity_perfect_body():
    lines = ["start", "  foo()", "end"]
    assert interior_similarity(lines, 0, 2, ["start", "foo()", "end"]) == 1.0


def test_interior_similarity_without_interior_lines():
    """Two-line blocks have nothing to compare and count as a perfect fit."""
    assert interior_similarity(["a", "b"], 0, 1, ["a", "b"]) == 1.0


def test_interior_similarity_blank_pairs_still_count_in_divisor():
    doc = ["{", "", "x = 1", "}"]
    search = ["{", "", "x = 1", "}"]
    # The blank pair adds nothing to the sum but is one of the two checked lines.
    assert interior_similarity(doc, 0, 3, search) == pytest.approx(0.5)
