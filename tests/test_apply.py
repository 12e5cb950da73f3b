import pytest

from smartreplace.apply import apply_resolution, replace_every, splice
from smartreplace.errors import AmbiguousError, NotFoundError
from smartreplace.match.resolver import Resolution


def test_splice_preserves_everything_outside_span():
    content = "head\r\nmiddle\r\ntail"
    assert splice(content, 6, "middle", "MID") == "head\r\nMID\r\ntail"


def test_splice_at_boundaries():
    assert splice("abc", 0, "a", "X") == "Xbc"
    assert splice("abc", 2, "c", "") == "ab"


def test_replace_every():
    assert replace_every("a-a-a", "a", "b") == "b-b-b"


def test_apply_resolution_unique():
    res = Resolution("unique", "exact", "two", 4, 7, 1)
    assert apply_resolution("one two three", res, "2") == "one 2 three"


def test_apply_resolution_failures():
    with pytest.raises(NotFoundError):
        apply_resolution("abc", Resolution("not_found"), "x")
    with pytest.raises(AmbiguousError) as exc:
        apply_resolution("aa", Resolution("ambiguous", "exact", "a", 0, 1, 2), "x")
    assert exc.value.count == 2
