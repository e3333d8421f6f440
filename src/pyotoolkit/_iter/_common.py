from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable, Iterator
from typing import TYPE_CHECKING, Concatenate, Self

import cytoolz as cz

from .. import _funcs
from .._core import CommonBase, get_config
from .._types import Removed

if TYPE_CHECKING:
    from .._dict import Dict
    from ._eager import Vec


def convert_data[T](data: Iterable[T] | T, *more_data: T) -> Iterable[T]:
    return data if cz.itertoolz.isiterable(data) else (data, *more_data)


class CommonMethods[T](CommonBase[Iterable[T]]):
    """Methods shared by `Iter`, `Seq` and `Vec`.

    Every collection operation delegates to its free function, then wraps the result.
    """

    _inner: Iterable[T]

    __slots__ = ()

    def __iter__(self) -> Iterator[T]:
        return iter(self._inner)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({get_config().iter_repr(self._inner)})"

    def _vec[**P, U](
        self,
        factory: Callable[Concatenate[Iterable[T], P], list[U]],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> Vec[U]:
        from ._eager import Vec

        def _(data: Iterable[T]) -> Vec[U]:
            return Vec(factory(data, *args, **kwargs))

        return self.into(_)

    def _dict[**P, K, V](
        self,
        factory: Callable[Concatenate[Iterable[T], P], dict[K, V]],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> Dict[K, V]:
        from .._dict import Dict

        def _(data: Iterable[T]) -> Dict[K, V]:
            return Dict(factory(data, *args, **kwargs))

        return self.into(_)

    def eq(self, other: Self) -> bool:
        """Check if two Iterables are equal based on their data.

        Note:
            This will consume any `Iter` instances involved in the comparison (**self** and/or **other**).

        Args:
            other (Self): Another instance of `Iter[T]|Seq[T]|Vec[T]` to compare against.

        Returns:
            bool: True if the underlying data are equal, False otherwise.

        Example:
        ```python
        >>> import pyotoolkit as pt
        >>> pt.Iter.from_((1, 2, 3)).eq(pt.Iter.from_((1, 2, 3)))
        True
        >>> pt.Seq((1, 2, 3)).eq(pt.Vec([1, 2, 3]))
        True
        >>> pt.Seq((1, 2, 3)).eq(pt.Seq((1, 2)))
        False

        ```
        """
        return tuple(self._inner) == tuple(other._inner)

    def ne(self, other: Self) -> bool:
        """Check if two Iterables are not equal based on their data.

        Note:
            This will consume any `Iter` instances involved in the comparison (**self** and/or **other**).

        Args:
            other (Self): Another instance of `Iter[T]|Seq[T]|Vec[T]` to compare against.

        Returns:
            bool: True if the underlying data are not equal, False otherwise.

        Example:
        ```python
        >>> import pyotoolkit as pt
        >>> pt.Seq((1, 2, 3)).ne(pt.Seq((1, 2)))
        True

        ```
        """
        return tuple(self._inner) != tuple(other._inner)

    def chunk(self, size: int) -> Vec[list[T]]:
        """Split the elements into consecutive chunks of at most `size` items.

        See `pyotoolkit.chunk()` for details.

        Args:
            size (int): The maximum size of each chunk. Must be greater than 0.

        Returns:
            Vec[list[T]]: The chunks, in input order.

        Raises:
            InvalidArgument: If `size` is lower than 1.

        Example:
        ```python
        >>> import pyotoolkit as pt
        >>> pt.Seq((1, 2, 3, 4, 5)).chunk(3)
        Vec([1, 2, 3], [4, 5])
        >>> pt.Iter.from_("abcde").chunk(2).inner()
        [['a', 'b'], ['c', 'd'], ['e']]

        ```
        """
        return self._vec(_funcs.chunk, size)

    def count_by[K: Hashable](self, key: Callable[[T], K]) -> Dict[K, int]:
        """Count elements by a key function.

        See `pyotoolkit.count_by()` for details.

        Args:
            key (Callable[[T], K]): Function to compute the key for counting.

        Returns:
            Dict[K, int]: Dict with count of elements for each key.

        Example:
        ```python
        >>> import pyotoolkit as pt
        >>> pt.Iter.from_(["cat", "mouse", "dog"]).count_by(len)
        {3: 2, 5: 1}
        >>> pt.Seq((1, 2, 3, 4, 5)).count_by(lambda n: n % 2 == 0)
        {False: 3, True: 2}

        ```
        """
        return self._dict(_funcs.count_by, key)

    def group_by[K: Hashable](self, key: Callable[[T], K]) -> Dict[K, list[T]]:
        """Group elements by key function and return a Dict result.

        See `pyotoolkit.group_by()` for details.

        Args:
            key (Callable[[T], K]): Function to compute the key for grouping.

        Returns:
            Dict[K, list[T]]: Dict with grouped elements as lists.

        Example:
        ```python
        >>> import pyotoolkit as pt
        >>> names = ["Alice", "Bob", "Charlie", "Dan", "Edith", "Frank"]
        >>> pt.Seq(tuple(names)).group_by(len)
        {3: ['Bob', 'Dan'], 5: ['Alice', 'Edith', 'Frank'], 7: ['Charlie']}
        >>> pt.Iter.from_(range(1, 7)).group_by(lambda n: n % 2)
        {0: [2, 4, 6], 1: [1, 3, 5]}

        ```
        """
        return self._dict(_funcs.group_by, key)

    def key_by[K: Hashable](self, key: Callable[[T], K]) -> Dict[K, T]:
        """Index elements by key function, the last element of each key winning.

        See `pyotoolkit.key_by()` for details.

        Args:
            key (Callable[[T], K]): Function to compute the key of each element.

        Returns:
            Dict[K, T]: The last element seen for each key.

        Example:
        ```python
        >>> import pyotoolkit as pt
        >>> users = [
        ...     {"id": 1, "name": "Alice"},
        ...     {"id": 2, "name": "Bob"},
        ...     {"id": 1, "name": "Alicia"},
        ... ]
        >>> pt.Iter.from_(users).key_by(lambda u: u["id"]).map_values(lambda u: u["name"])
        {1: 'Alicia', 2: 'Bob'}

        ```
        """
        return self._dict(_funcs.key_by, key)

    def remove(self, predicate: Callable[[T], bool]) -> Removed[T]:
        """Split the elements into kept and removed ones based on a predicate.

        See `pyotoolkit.remove()` for details.

        Args:
            predicate (Callable[[T], bool]): Function deciding whether an element is removed.

        Returns:
            Removed[T]: The kept and removed elements, each wrapped in a `Vec`.

        Example:
        ```python
        >>> import pyotoolkit as pt
        >>> kept, removed = pt.Seq((1, 2, 3, 4, 5)).remove(lambda n: n % 2 == 0)
        >>> kept
        Vec(1, 3, 5)
        >>> removed
        Vec(2, 4)

        ```
        """
        from ._eager import Vec

        def _remove(data: Iterable[T]) -> Removed[T]:
            kept, removed = _funcs.remove(data, predicate)
            return Removed(Vec(kept), Vec(removed))

        return self.into(_remove)

    def uniq(self) -> Vec[T]:
        """Remove duplicates while preserving the order of first occurrence.

        See `pyotoolkit.uniq()` for details.

        Returns:
            Vec[T]: The first occurrence of each distinct element.

        Example:
        ```python
        >>> import pyotoolkit as pt
        >>> pt.Iter.from_((1, 2, 3, 4, 5, 1, 2, 3)).uniq()
        Vec(1, 2, 3, 4, 5)

        ```
        """
        return self._vec(_funcs.uniq)
