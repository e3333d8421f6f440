"""Free-function form of every collection operation.

Each function here is the single implementation of its operation; the methods of `Iter`, `Seq` and `Vec` delegate to them.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable

import cytoolz as cz
import more_itertools as mit

from ._errors import InvalidArgument
from ._types import Removed


def chunk[T](items: Iterable[T], size: int) -> list[list[T]]:
    """Split an iterable into consecutive chunks of at most `size` items, preserving order.

    The last chunk holds the remainder if the number of items is not a multiple of `size`.

    Args:
        items (Iterable[T]): The input iterable to split.
        size (int): The maximum size of each chunk. Must be greater than 0.

    Returns:
        list[list[T]]: The chunks, in input order.

    Raises:
        InvalidArgument: If `size` is lower than 1. Nothing is consumed from `items` in that case.

    Example:
    ```python
    >>> import pyotoolkit as pt
    >>> pt.chunk([1, 2, 3, 4, 5], 3)
    [[1, 2, 3], [4, 5]]
    >>> pt.chunk([1, 2, 3, 4], 2)
    [[1, 2], [3, 4]]
    >>> pt.chunk([], 3)
    []

    ```
    """
    if size < 1:
        msg = f"size must be greater than 0, got {size}"
        raise InvalidArgument(msg)
    return [list(part) for part in cz.itertoolz.partition_all(size, items)]


def count_by[T, K: Hashable](items: Iterable[T], key: Callable[[T], K]) -> dict[K, int]:
    """Count the items of an iterable by a key function.

    Keys never produced by `key` are absent from the result.

    Args:
        items (Iterable[T]): The items to count.
        key (Callable[[T], K]): Function to compute the key of each item.

    Returns:
        dict[K, int]: Number of items for each key.

    Example:
    ```python
    >>> import pyotoolkit as pt
    >>> parity = pt.count_by([1, 2, 3, 4, 5, 6], lambda n: "even" if n % 2 == 0 else "odd")
    >>> parity == {"odd": 3, "even": 3}
    True
    >>> pt.count_by(["apple", "avocado", "banana", "blueberry"], lambda s: s[0]) == {"a": 2, "b": 2}
    True

    ```
    """
    return cz.recipes.countby(key, items)


def group_by[T, K: Hashable](
    items: Iterable[T], key: Callable[[T], K]
) -> dict[K, list[T]]:
    """Group the items of an iterable by a key function.

    Each group keeps the relative order of its items in the input.

    Args:
        items (Iterable[T]): The items to group.
        key (Callable[[T], K]): Function to compute the key of each item.

    Returns:
        dict[K, list[T]]: The items of each key, as lists.

    Example:
    ```python
    >>> import pyotoolkit as pt
    >>> pt.group_by([1, 2, 3, 4, 5, 6], lambda n: n % 2) == {0: [2, 4, 6], 1: [1, 3, 5]}
    True
    >>> sorted(pt.group_by(["Bob", "Alice", "Dan"], len).items())
    [(3, ['Bob', 'Dan']), (5, ['Alice'])]

    ```
    """
    return cz.itertoolz.groupby(key, items)


def _last[T](_previous: T, current: T) -> T:
    return current


def key_by[T, K: Hashable](items: Iterable[T], key: Callable[[T], K]) -> dict[K, T]:
    """Index the items of an iterable by a key function.

    When several items share a key, the last one wins.

    Args:
        items (Iterable[T]): The items to index.
        key (Callable[[T], K]): Function to compute the key of each item.

    Returns:
        dict[K, T]: The last item seen for each key.

    Example:
    ```python
    >>> import pyotoolkit as pt
    >>> pt.key_by(["Alice", "Bob", "Charlie"], len) == {5: "Alice", 3: "Bob", 7: "Charlie"}
    True
    >>> pt.key_by(["Bob", "Dan"], len)
    {3: 'Dan'}

    ```
    """
    return cz.itertoolz.reduceby(key, _last, items)


def remove[T](items: Iterable[T], predicate: Callable[[T], bool]) -> Removed[T]:
    """Split an iterable into kept and removed items based on a predicate.

    Items for which `predicate` returns `True` are removed, the others are kept.

    The predicate is called exactly once per item.

    Args:
        items (Iterable[T]): The items to split.
        predicate (Callable[[T], bool]): Function deciding whether an item is removed.

    Returns:
        Removed[T]: The kept and removed items, each in input order.

    Example:
    ```python
    >>> import pyotoolkit as pt
    >>> pt.remove([1, 2, 3, 4, 5], lambda n: n % 2 == 0)
    Removed(kept=[1, 3, 5], removed=[2, 4])
    >>> kept, removed = pt.remove(["a", "bb", "ccc", "dddd"], lambda s: len(s) % 2 == 0)
    >>> kept
    ['a', 'ccc']

    ```
    """
    kept, removed = mit.partition(predicate, items)
    return Removed(list(kept), list(removed))


def uniq[T: Hashable](items: Iterable[T]) -> list[T]:
    """Remove duplicate items while preserving the order of first occurrence.

    Equality follows the items own `__eq__` and `__hash__`.

    The returned list holds the very objects of the input, not copies.

    Args:
        items (Iterable[T]): The items to deduplicate.

    Returns:
        list[T]: The first occurrence of each distinct item.

    Example:
    ```python
    >>> import pyotoolkit as pt
    >>> pt.uniq([1, 2, 3, 4, 5, 1, 2, 3])
    [1, 2, 3, 4, 5]
    >>> pt.uniq("mississippi")
    ['m', 'i', 's', 'p']

    ```
    """
    return list(cz.itertoolz.unique(items))
