from ._core import Config, get_config, set_config
from ._dict import Dict
from ._errors import InvalidArgument
from ._funcs import chunk, count_by, group_by, key_by, remove, uniq
from ._iter import Iter, Seq, Vec
from ._types import Removed

__all__ = [
    "Config",
    "Dict",
    "InvalidArgument",
    "Iter",
    "Removed",
    "Seq",
    "Vec",
    "chunk",
    "count_by",
    "get_config",
    "group_by",
    "key_by",
    "remove",
    "set_config",
    "uniq",
]
