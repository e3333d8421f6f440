from __future__ import annotations

from collections.abc import MutableSequence
from typing import NamedTuple


class Removed[T](NamedTuple):
    """Represents the two halves produced by a predicate partition.

    See `remove()` for details.
    """

    kept: MutableSequence[T]
    """The elements for which the predicate returned `False`, in input order."""
    removed: MutableSequence[T]
    """The elements for which the predicate returned `True`, in input order."""
