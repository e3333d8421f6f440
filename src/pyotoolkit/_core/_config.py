from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, replace
from typing import Any

from ._format import dict_repr, iter_repr


@dataclass(slots=True, frozen=True)
class Config:
    """Display settings shared by all wrappers.

    Only `repr` output is affected, never the result of an operation.
    """

    max_items: int = 20
    """Number of items shown before the output is truncated with `...`."""
    depth: int = 3
    """Nesting depth rendered for `Dict` values."""
    width: int = 80
    """Line width used when rendering a `Dict`."""
    compact: bool = True
    """Pack as many items as fit on each line when rendering a `Dict`."""

    def iter_repr(self, v: Iterable[Any]) -> str:
        return iter_repr(v, self.max_items)

    def dict_repr(self, v: Mapping[Any, Any]) -> str:
        return dict_repr(
            v, self.max_items, self.depth, self.width, compact=self.compact
        )


_CONFIG = Config()


def get_config() -> Config:
    """Return the active display configuration.

    Returns:
        Config: The current settings.

    Example:
    ```python
    >>> import pyotoolkit as pt
    >>> pt.get_config().max_items
    20

    ```
    """
    return _CONFIG


def set_config(**changes: Any) -> Config:
    """Replace fields of the active display configuration.

    Args:
        **changes (Any): Field names of `Config` mapped to their new values.

    Returns:
        Config: The new active settings.

    Raises:
        TypeError: If a name is not a field of `Config`.

    Example:
    ```python
    >>> import pyotoolkit as pt
    >>> _ = pt.set_config(max_items=2)
    >>> pt.Seq((1, 2, 3))
    Seq(1, 2, ...)
    >>> _ = pt.set_config(max_items=20)
    >>> pt.Seq((1, 2, 3))
    Seq(1, 2, 3)

    ```
    """
    global _CONFIG  # noqa: PLW0603
    _CONFIG = replace(_CONFIG, **changes)
    return _CONFIG
