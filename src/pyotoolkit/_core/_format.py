from collections.abc import Iterable, Mapping, Sequence
from pprint import pformat
from typing import Any


def dict_repr(
    v: Mapping[Any, Any],
    max_items: int = 20,
    depth: int = 3,
    width: int = 80,
    *,
    compact: bool = True,
) -> str:
    truncated = dict(list(v.items())[:max_items])
    suffix = "..." if len(v) > max_items else ""
    return pformat(truncated, depth=depth, width=width, compact=compact) + suffix


def iter_repr(v: Iterable[Any], max_items: int = 20) -> str:
    # lazy iterators are never consumed for display
    if not isinstance(v, Sequence):
        return repr(v)
    shown = ", ".join(repr(x) for x in v[:max_items])
    return shown + (", ..." if len(v) > max_items else "")
