"""Tests for remove."""

import pytest

import pyotoolkit as pt


def _is_even(n: int) -> bool:
    return n % 2 == 0


def test_remove_splits() -> None:
    """Test kept and removed halves."""
    kept, removed = pt.remove([1, 2, 3, 4, 5], _is_even)
    assert kept == [1, 3, 5]
    assert removed == [2, 4]


def test_remove_returns_named_fields() -> None:
    """Test the result exposes named fields and compares as a tuple."""
    result = pt.remove([1, 2, 3, 4, 5], _is_even)
    assert isinstance(result, pt.Removed)
    assert result.kept == [1, 3, 5]
    assert result.removed == [2, 4]
    assert result == ([1, 3, 5], [2, 4])


def test_remove_strings() -> None:
    """Test removing even-length strings."""
    kept, removed = pt.remove(["a", "bb", "ccc", "dddd"], lambda s: len(s) % 2 == 0)
    assert kept == ["a", "ccc"]
    assert removed == ["bb", "dddd"]


def test_remove_empty() -> None:
    """Test empty input gives two empty lists."""
    assert pt.remove([], lambda _: True) == ([], [])


def test_remove_all_or_nothing() -> None:
    """Test constant predicates route everything to one side."""
    assert pt.remove([1, 2, 3], lambda _: True) == ([], [1, 2, 3])
    assert pt.remove([1, 2, 3], lambda _: False) == ([1, 2, 3], [])


@pytest.mark.parametrize("data", [[], [4], [3, 1, 4, 1, 5, 9, 2, 6], list(range(15))])
def test_remove_is_a_partition(data: list[int]) -> None:
    """Test both halves add up to the input, each in input order."""
    kept, removed = pt.remove(data, _is_even)
    assert len(kept) + len(removed) == len(data)
    assert kept == [x for x in data if not _is_even(x)]
    assert removed == [x for x in data if _is_even(x)]


def test_remove_calls_predicate_once_per_element() -> None:
    """Test the predicate is evaluated a single time for each element."""
    calls: list[int] = []

    def _tracked(n: int) -> bool:
        calls.append(n)
        return n > 2

    pt.remove(iter([1, 2, 3, 4]), _tracked)
    assert calls == [1, 2, 3, 4]


def test_remove_predicate_error_propagates() -> None:
    """Test an error in the predicate reaches the caller unchanged."""

    def _boom(n: int) -> bool:
        raise KeyError(n)

    with pytest.raises(KeyError):
        pt.remove([1], _boom)


def test_remove_method() -> None:
    """Test the fluent form wraps both halves in a Vec."""
    kept, removed = pt.Iter.from_("abcABC").remove(str.isupper)
    assert isinstance(kept, pt.Vec)
    assert isinstance(removed, pt.Vec)
    assert kept.inner() == ["a", "b", "c"]
    assert removed.inner() == ["A", "B", "C"]


def test_vec_remove_is_the_partition() -> None:
    """Test Vec.remove partitions instead of deleting a value."""
    vec = pt.Vec([1, 2, 3, 4])
    kept, removed = vec.remove(_is_even)
    assert kept.inner() == [1, 3]
    assert removed.inner() == [2, 4]
    assert vec.inner() == [1, 2, 3, 4]
