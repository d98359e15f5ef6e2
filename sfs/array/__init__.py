from ._shape import Axis, Shape, Strides
from ._iter import IndicesIter, AxisIter
from ._view import View
from ._array import Array
from ._npy import read_npy, write_npy, MAGIC

__all__ = [
    "Axis",
    "Shape",
    "Strides",
    "IndicesIter",
    "AxisIter",
    "View",
    "Array",
    "read_npy",
    "write_npy",
    "MAGIC",
]
