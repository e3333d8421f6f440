"""Tests for uniq."""

from dataclasses import dataclass

import pytest

import pyotoolkit as pt


@dataclass(frozen=True)
class User:
    """A hashable user record used as test data."""

    id: int
    name: str


def test_uniq_integers() -> None:
    """Test duplicates are dropped in first-occurrence order."""
    assert pt.uniq([1, 2, 3, 4, 5, 1, 2, 3]) == [1, 2, 3, 4, 5]


def test_uniq_first_occurrence_order() -> None:
    """Test the output follows the first occurrence of each element."""
    assert pt.uniq([3, 1, 3, 2, 1]) == [3, 1, 2]


def test_uniq_records() -> None:
    """Test records use their own equality."""
    users = [User(1, "Alice"), User(1, "Alice"), User(2, "Bob")]
    assert pt.uniq(users) == [User(1, "Alice"), User(2, "Bob")]


def test_uniq_keeps_first_object() -> None:
    """Test the retained element is the first input object, not a copy."""
    first = (1, 2)
    second = tuple([1, 2])
    result = pt.uniq([first, second])
    assert result == [(1, 2)]
    assert result[0] is first


def test_uniq_empty() -> None:
    """Test empty input gives an empty list."""
    assert pt.uniq([]) == []


@pytest.mark.parametrize("data", [[], [1], [1, 1, 1], [5, 4, 5, 3, 4, 2, 1, 1], list("banana")])
def test_uniq_properties(data: list[object]) -> None:
    """Test no duplicates, subset of input, and idempotence."""
    result = pt.uniq(data)
    assert len(result) == len(set(result))
    assert all(x in data for x in result)
    assert result == sorted(set(data), key=data.index)
    assert pt.uniq(result) == result


def test_uniq_unhashable_propagates() -> None:
    """Test unhashable elements raise TypeError."""
    with pytest.raises(TypeError):
        pt.uniq([[1], [1]])


def test_uniq_method() -> None:
    """Test the fluent form returns a distinct Vec."""
    result = pt.Iter.from_((1, 2, 3, 4, 5, 1, 2, 3)).uniq()
    assert isinstance(result, pt.Vec)
    assert result.inner() == [1, 2, 3, 4, 5]
    assert result.is_distinct()
