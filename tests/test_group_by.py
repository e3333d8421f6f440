"""Tests for group_by."""

from collections import Counter
from dataclasses import dataclass

import pyotoolkit as pt


@dataclass(frozen=True)
class User:
    """A user record used as test data."""

    id: int
    name: str
    role: str


def _users() -> list[User]:
    return [
        User(1, "Alice", "admin"),
        User(2, "Bob", "user"),
        User(3, "Charlie", "user"),
        User(4, "Dana", "admin"),
        User(5, "Eve", "guest"),
    ]


def test_group_by_parity() -> None:
    """Test grouping integers by remainder."""
    assert pt.group_by([1, 2, 3, 4, 5, 6], lambda n: n % 2) == {
        0: [2, 4, 6],
        1: [1, 3, 5],
    }


def test_group_by_records() -> None:
    """Test grouping records by an attribute keeps input order per group."""
    users = _users()
    result = pt.group_by(users, lambda u: u.role)
    assert result == {
        "admin": [users[0], users[3]],
        "user": [users[1], users[2]],
        "guest": [users[4]],
    }


def test_group_by_strings() -> None:
    """Test grouping strings by length."""
    words = ["one", "two", "three", "four", "five", "six"]
    assert pt.group_by(words, len) == {
        3: ["one", "two", "six"],
        5: ["three"],
        4: ["four", "five"],
    }


def test_group_by_empty() -> None:
    """Test empty input gives an empty mapping."""
    assert pt.group_by([], len) == {}


def test_group_by_single_item() -> None:
    """Test a single item makes a single group."""
    assert pt.group_by([42], lambda n: n % 2) == {0: [42]}


def test_group_by_all_same_key() -> None:
    """Test all items sharing a key end in one group."""
    assert pt.group_by([1, 3, 5, 7, 9], lambda n: n % 2) == {1: [1, 3, 5, 7, 9]}


def test_group_by_is_a_partition() -> None:
    """Test the groups hold exactly the input elements."""
    data = [5, 3, 8, 1, 9, 2, 8, 7]
    groups = pt.group_by(data, lambda n: n % 3)
    flattened = [x for group in groups.values() for x in group]
    assert Counter(flattened) == Counter(data)
    for key, group in groups.items():
        assert group == [x for x in data if x % 3 == key]


def test_group_by_method() -> None:
    """Test the fluent form on a Seq."""
    users = _users()
    result = pt.Seq(tuple(users)).group_by(lambda u: u.role)
    assert isinstance(result, pt.Dict)
    assert result == pt.group_by(users, lambda u: u.role)
    assert result.map_values(len) == {"admin": 2, "user": 2, "guest": 1}
