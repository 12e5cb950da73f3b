"""
Direct tests for each matching strategy, independent of the resolver.
"""
import textwrap

from smartreplace.match.strategies import (
    STRATEGIES,
    block_anchor,
    context_aware,
    escape_normalized,
    exact,
    indentation_flexible,
    line_trimmed,
    multi_occurrence,
    trimmed_boundary,
    whitespace_normalized,
)


ROCKETS = textwrap.dedent(
    """\
    if ready:
        launch_rockets()
        notify_team()
    end
    if ready:
        clean_up()
        go_home()
    end
    """
)


def test_pipeline_order_is_strictest_first():
    assert [name for name, _ in STRATEGIES] == [
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


def test_strategies_are_lazy_and_rerunnable():
    content, find = "a b\n", "a   b"
    gen = whitespace_normalized(content, find)
    assert next(gen) == "a b"
    assert list(whitespace_normalized(content, find)) == ["a b"]


# ---------------------------------------------------------------------------
# exact / line_trimmed
# ---------------------------------------------------------------------------


def test_exact():
    assert list(exact("hello world", "world")) == ["world"]
    assert list(exact("hello world", "World")) == []


def test_line_trimmed_yields_document_text_not_target():
    content = "def f():\n    return 1\n"
    assert list(line_trimmed(content, "def f():\n  return 1\n")) == ["def f():\n    return 1"]


def test_line_trimmed_every_window_is_yielded():
    content = "x()\n  x()\n"
    assert list(line_trimmed(content, "x()")) == ["x()", "  x()"]


def test_line_trimmed_empty_target_yields_nothing():
    assert list(line_trimmed("abc", "")) == []


# ---------------------------------------------------------------------------
# block_anchor
# ---------------------------------------------------------------------------


def test_block_anchor_needs_three_lines():
    assert list(block_anchor("a\nb\n", "a\nb")) == []


def test_block_anchor_single_candidate_is_trusted_regardless_of_body():
    content = "start\nxxx\nyyy\nend\n"
    find = "start\ncompletely different\nend"
    assert list(block_anchor(content, find)) == ["start\nxxx\nyyy\nend"]


def test_block_anchor_picks_most_similar_of_several():
    find = "if ready:\n    launch_rocket()\n    notify_teams()\nend"
    assert list(block_anchor(ROCKETS, find)) == [
        "if ready:\n    launch_rockets()\n    notify_team()\nend"
    ]

    find = "if ready:\n    clean_up(x)\n    go_home(x)\nend"
    assert list(block_anchor(ROCKETS, find)) == ["if ready:\n    clean_up()\n    go_home()\nend"]


def test_block_anchor_several_weak_candidates_yield_nothing():
    find = "if ready:\n    zzzzzzzzzzzz\n    qqqqqqqqqqqq\nend"
    assert list(block_anchor(ROCKETS, find)) == []


def test_block_anchor_last_anchor_must_be_two_lines_below():
    # 'end' directly after the first anchor does not close a block.
    content = "begin\nend\nbody\nend\n"
    assert list(block_anchor(content, "begin\nstuff\nend")) == ["begin\nend\nbody\nend"]


# ---------------------------------------------------------------------------
# whitespace_normalized / indentation_flexible
# ---------------------------------------------------------------------------


def test_whitespace_normalized_single_line():
    assert list(whitespace_normalized("x = a b\ny = 2\n", "x = a   b")) == ["x = a b"]


def test_whitespace_normalized_multiline_window():
    content = "call(a,\n     b)\nnext()\n"
    assert list(whitespace_normalized(content, "call(a,\n b)")) == ["call(a,\n     b)"]


def test_indentation_flexible_matches_shifted_block():
    content = "class A:\n    def f(self):\n        return 1\n"
    find = "def f(self):\n    return 1"
    assert list(indentation_flexible(content, find)) == ["    def f(self):\n        return 1"]


def test_indentation_flexible_requires_same_relative_indent():
    content = "class A:\n    def f(self):\n        return 1\n"
    assert list(indentation_flexible(content, "def f(self):\nreturn 1")) == []


# ---------------------------------------------------------------------------
# escape_normalized / trimmed_boundary
# ---------------------------------------------------------------------------


def test_escape_normalized_direct_containment():
    content = 'print("hi")\n'
    assert list(escape_normalized(content, r'print(\"hi\")')) == ['print("hi")', 'print("hi")']


def test_escape_normalized_literal_newline_sequence():
    assert list(escape_normalized("a\nb\n", r"a\nb"))[0] == "a\nb"


def test_trimmed_boundary_only_applies_with_surrounding_whitespace():
    assert list(trimmed_boundary("foo bar", "foo bar")) == []


def test_trimmed_boundary_containment():
    assert list(trimmed_boundary("x foo bar y", "  foo bar ")) == ["foo bar"]


def test_trimmed_boundary_window():
    content = "  foo\n  bar\nbaz"
    assert list(trimmed_boundary(content, "foo\n  bar  ")) == ["foo\n  bar", "  foo\n  bar"]


# ---------------------------------------------------------------------------
# context_aware / multi_occurrence
# ---------------------------------------------------------------------------


def test_context_aware_accepts_half_matching_interior():
    content = "def f():\n    a = 1\n    b = 2\n    c = 3\n    return a\n"
    find = "def f():\n    a = 1\n    b = 20\n    c = 3\n    return a"
    assert list(context_aware(content, find)) == [content.rstrip("\n")]


def test_context_aware_rejects_mostly_different_interior():
    content = "def f():\n    a = 1\n    b = 2\n    c = 3\n    return a\n"
    find = "def f():\n    x = 1\n    y = 2\n    c = 3\n    return a"
    assert list(context_aware(content, find)) == []


def test_context_aware_requires_same_height():
    assert list(context_aware("start\nx\ny\nz\nend", "start\nx\nend")) == []


def test_context_aware_blank_interior_always_accepted():
    assert list(context_aware("{\n\n}", "{\n   \n}")) == ["{\n\n}"]


def test_multi_occurrence_yields_each_literal_hit():
    assert list(multi_occurrence("abab-ab", "ab")) == ["ab", "ab", "ab"]
    assert list(multi_occurrence("aaa", "aa")) == ["aa"]
    assert list(multi_occurrence("abc", "")) == []
