from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import TYPE_CHECKING, overload

from ._common import CommonMethods, convert_data

if TYPE_CHECKING:
    from ._eager import Seq


class Iter[T](CommonMethods[T]):
    """A wrapper around Python's built-in `Iterators`/`Generators` types, providing chainable collection operations.

    - To instantiate from a lazy `Iterator`/`Generator`, simply pass it to the standard constructor.
    - To instantiate from any `Iterable` (like a list or set), or unpacked values, use the `from_` static method.

    `Iter` instances are single-use; once exhausted, they cannot be reused or reset.

    If you need to reuse the data, collect it into a `Seq` first with `.collect()`.

    Args:
        data (Iterator[T]): An iterator or generator to wrap.
    """

    _inner: Iterator[T]

    __slots__ = ()

    def __init__(self, data: Iterator[T]) -> None:
        self._inner = data

    @overload
    @staticmethod
    def from_[U](data: Iterable[U]) -> Iter[U]: ...
    @overload
    @staticmethod
    def from_[U](data: U, *more_data: U) -> Iter[U]: ...
    @staticmethod
    def from_[U](data: Iterable[U] | U, *more_data: U) -> Iter[U]:
        """Create an iterator from any Iterable, or from unpacked values.

        Args:
            data (Iterable[U] | U): Iterable to convert into an iterator, or a single value.
            *more_data (U): Additional values to include if 'data' is not an Iterable.

        Returns:
            Iter[U]: A new Iter instance containing the provided data.

        Example:
        ```python
        >>> import pyotoolkit as pt
        >>> iterator = pt.Iter.from_((1, 2, 3))
        >>> iterator.collect()
        Seq(1, 2, 3)
        >>> # iterator is now exhausted
        >>> iterator.collect()
        Seq()
        >>> pt.Iter.from_(1, 2, 3).collect()
        Seq(1, 2, 3)

        ```
        """
        return Iter(iter(convert_data(data, *more_data)))

    def map[R](self, func: Callable[[T], R]) -> Iter[R]:
        """Apply a function to each element, lazily.

        Args:
            func (Callable[[T], R]): Function to apply to each element.

        Returns:
            Iter[R]: An iterator of transformed elements.

        Example:
        ```python
        >>> import pyotoolkit as pt
        >>> pt.Iter.from_((1, 2, 3)).map(lambda x: x * 2).collect()
        Seq(2, 4, 6)

        ```
        """
        return Iter(map(func, self._inner))

    def filter(self, predicate: Callable[[T], bool]) -> Iter[T]:
        """Keep the elements for which the predicate is true, lazily.

        Args:
            predicate (Callable[[T], bool]): Function to evaluate each element.

        Returns:
            Iter[T]: An iterator of the matching elements.

        Example:
        ```python
        >>> import pyotoolkit as pt
        >>> pt.Iter.from_(range(6)).filter(lambda x: x % 3 == 0).uniq()
        Vec(0, 3)

        ```
        """
        return Iter(filter(predicate, self._inner))

    def collect(self) -> Seq[T]:
        """Consume the iterator into a `Seq`.

        Returns:
            Seq[T]: An immutable sequence of the remaining elements.
        """
        from ._eager import Seq

        return Seq(tuple(self._inner))
