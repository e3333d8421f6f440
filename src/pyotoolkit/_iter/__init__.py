from ._common import CommonMethods
from ._eager import Seq, Vec
from ._lazy import Iter

__all__ = ["CommonMethods", "Iter", "Seq", "Vec"]
