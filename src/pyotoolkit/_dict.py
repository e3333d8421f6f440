from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Mapping
from typing import TYPE_CHECKING

import cytoolz as cz

from ._core import CommonBase, get_config

if TYPE_CHECKING:
    from ._iter import Iter


class Dict[K, V](CommonBase[dict[K, V]], Mapping[K, V]):
    """Read-only wrapper for Python dictionaries with chainable methods.

    It is the return type of the keyed operations (`count_by`, `group_by` and `key_by`).

    Implement the `Mapping` interface, so it compares equal to any mapping holding the same items.

    Key order follows the underlying `dict` and should not be relied upon; use `sort()` when a stable order is needed.

    Args:
        data (dict[K, V]): The dictionary to wrap.
    """

    __slots__ = ()

    _inner: dict[K, V]

    def __repr__(self) -> str:
        return f"{self.into(lambda d: get_config().dict_repr(d._inner))}"

    def __iter__(self) -> Iterator[K]:
        return self._inner.__iter__()

    def __len__(self) -> int:
        return len(self._inner)

    def __getitem__(self, key: K) -> V:
        return self._inner[key]

    @staticmethod
    def from_[G, I](data: Mapping[G, I] | Iterable[tuple[G, I]]) -> Dict[G, I]:
        """Create a `Dict` from a mapping or an iterable of key-value pairs.

        Args:
            data (Mapping[G, I] | Iterable[tuple[G, I]]): Object convertible into a Dict.

        Returns:
            Dict[G, I]: Instance containing the data from the input.

        Example:
        ```python
        >>> import pyotoolkit as pt
        >>> pt.Dict.from_([("d", "e"), ("f", "g")])
        {'d': 'e', 'f': 'g'}

        ```
        """
        return Dict(dict(data))

    def iter_keys(self) -> Iter[K]:
        """Return an Iter of the dict's keys.

        Returns:
            Iter[K]: An Iter wrapping the dictionary's keys.

        ```python
        >>> import pyotoolkit as pt
        >>> pt.Dict({1: 2}).iter_keys().collect()
        Seq(1)

        ```
        """
        from ._iter import Iter

        return Iter(iter(self._inner.keys()))

    def iter_values(self) -> Iter[V]:
        """Return an Iter of the dict's values.

        Returns:
            Iter[V]: An Iter wrapping the dictionary's values.

        ```python
        >>> import pyotoolkit as pt
        >>> pt.Seq(("a", "bb", "cc")).group_by(len).sort().iter_values().map(len).collect()
        Seq(1, 2)

        ```
        """
        from ._iter import Iter

        return Iter(iter(self._inner.values()))

    def iter_items(self) -> Iter[tuple[K, V]]:
        """Return an Iter of the dict's items.

        Returns:
            Iter[tuple[K, V]]: An Iter wrapping the dictionary's (key, value) pairs.

        ```python
        >>> import pyotoolkit as pt
        >>> pt.Dict({"a": 1, "b": 2}).iter_items().collect()
        Seq(('a', 1), ('b', 2))

        ```
        """
        from ._iter import Iter

        return Iter(iter(self._inner.items()))

    def map_values[T](self, func: Callable[[V], T]) -> Dict[K, T]:
        """Return values transformed by func.

        Args:
            func (Callable[[V], T]): Function to apply to each value in the dictionary.

        Returns:
            Dict[K, T]: Dict with transformed values.

        ```python
        >>> import pyotoolkit as pt
        >>> pt.Seq((1, 2, 3, 4)).group_by(lambda n: n % 2).map_values(sum)
        {0: 6, 1: 4}

        ```
        """
        return Dict(cz.dicttoolz.valmap(func, self._inner))

    def sort(self, *, reverse: bool = False) -> Dict[K, V]:
        """Sort the dictionary by its keys and return a new Dict.

        Args:
            reverse (bool): Whether to sort in descending order. Defaults to False.

        Returns:
            Dict[K, V]: Sorted new Dict.

        ```python
        >>> import pyotoolkit as pt
        >>> pt.Iter.from_(["cc", "a", "bbb"]).key_by(len).sort(reverse=True).iter_keys().collect()
        Seq(3, 2, 1)

        ```
        """
        return Dict(dict(sorted(self._inner.items(), reverse=reverse)))
