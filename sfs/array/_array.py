from typing import Iterable, Iterator, Optional, Sequence, Union

import numpy as np

from .._errors import ShapeError
from ._iter import AxisIter, IndicesIter
from ._shape import Axis, Shape, Strides
from ._view import View


class Array(object):
    """
    Dense N-dimensional array of float64 stored flat in row-major order.

    Parameters
    ----------
    data : array_like
        Values in row-major order; always copied, so the array owns its buffer
    shape : Shape, int or sequence of int
        Extent of the array; `prod(shape)` must equal the number of values
    """

    def __init__(self, data, shape: Union[Shape, int, Sequence[int]]):
        shape = Shape(shape)
        data = np.array(data, dtype=np.float64).ravel()
        if data.size != shape.elements():
            raise ShapeError(
                f"cannot create array of shape {shape} "
                f"({shape.elements()} elements) from {data.size} values"
            )
        self._data = data
        self._shape = shape
        self._strides = shape.strides()

    @classmethod
    def from_zeros(cls, shape) -> "Array":
        return cls.from_element(0.0, shape)

    @classmethod
    def from_element(cls, element: float, shape) -> "Array":
        shape = Shape(shape)
        return cls(np.full(shape.elements(), element, dtype=np.float64), shape)

    @classmethod
    def from_iter(cls, values: Iterable[float], shape) -> "Array":
        shape = Shape(shape)
        return cls(np.fromiter(values, dtype=np.float64), shape)

    def __repr__(self) -> str:
        return f"Array(shape={self._shape}, data={self._data.tolist()})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, Array):
            return NotImplemented
        return self._shape == other._shape and np.array_equal(self._data, other._data)

    def __iter__(self) -> Iterator[float]:
        return iter(self._data.tolist())

    def __len__(self) -> int:
        return self._data.size

    def __getitem__(self, index) -> float:
        value = self.get(self._normalize_index(index))
        if value is None:
            raise IndexError(f"index {index} out of bounds for shape {self._shape}")
        return value

    def __setitem__(self, index, value: float):
        if not self.set(self._normalize_index(index), value):
            raise IndexError(f"index {index} out of bounds for shape {self._shape}")

    def _normalize_index(self, index) -> tuple:
        if isinstance(index, (int, np.integer)):
            return (int(index),)
        return tuple(index)

    @property
    def dimensions(self) -> int:
        return len(self._shape)

    @property
    def elements(self) -> int:
        return self._data.size

    @property
    def shape(self) -> Shape:
        return self._shape

    @property
    def strides(self) -> Strides:
        return self._strides

    def as_slice(self) -> np.ndarray:
        """Underlying flat buffer; writes go through to the array"""
        return self._data

    def copy(self) -> "Array":
        return Array(self._data, self._shape)

    def get(self, index: Sequence[int]) -> Optional[float]:
        flat = self._shape.flat_index(index, self._strides)
        if flat is None:
            return None
        return float(self._data[flat])

    def set(self, index: Sequence[int], value: float) -> bool:
        """Set the element at `index`, returning False if the index does not fit"""
        flat = self._shape.flat_index(index, self._strides)
        if flat is None:
            return False
        self._data[flat] = value
        return True

    def get_axis(self, axis: Axis, index: int) -> Optional[View]:
        if not 0 <= axis < self.dimensions or not 0 <= index < self._shape[axis]:
            return None
        return self.index_axis(axis, index)

    def index_axis(self, axis: Axis, index: int) -> View:
        """
        View of the sub-array with `axis` fixed at `index`.

        Raises
        ------
        IndexError
            if `axis` or `index` is out of bounds
        """
        if not 0 <= axis < self.dimensions:
            raise IndexError(f"axis {axis} out of bounds for {self.dimensions} dimensions")
        if not 0 <= index < self._shape[axis]:
            raise IndexError(
                f"index {index} out of bounds for axis {axis} of length {self._shape[axis]}"
            )
        return View(
            self._data,
            offset=index * self._strides[axis],
            shape=self._shape.remove_axis(axis),
            strides=self._strides.remove_axis(axis),
        )

    def iter_axis(self, axis: Axis) -> AxisIter:
        return AxisIter(self, axis)

    def iter_indices(self) -> IndicesIter:
        return IndicesIter(self._shape)

    def sum(self, axis: Axis) -> "Array":
        """
        Sum over `axis`, producing an array with that axis removed. Summing a
        one-dimensional array yields a zero-dimensional array with one element.
        """
        if not 0 <= axis < self.dimensions:
            raise IndexError(f"axis {axis} out of bounds for {self.dimensions} dimensions")
        out = Array.from_zeros(self._shape.remove_axis(axis))
        buffer = out.as_slice()
        for view in self.iter_axis(axis):
            buffer += view.numpy().reshape(-1)
        return out

    @classmethod
    def read_npy(cls, source) -> "Array":
        from ._npy import read_npy

        return read_npy(source)

    def write_npy(self, dest):
        from ._npy import write_npy

        write_npy(self, dest)
