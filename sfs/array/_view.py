from typing import Iterator

import numpy as np

from ._iter import IndicesIter
from ._shape import Shape, Strides


class View(object):
    """
    Read-only window into the buffer of an `Array` with one axis fixed.

    A view borrows the buffer of the array it was produced from and never
    copies it. It must not be used after that array is mutated; use
    `to_array` to keep an owned copy.
    """

    def __init__(self, data: np.ndarray, offset: int, shape: Shape, strides: Strides):
        self._data = data
        self._offset = offset
        self._shape = shape
        self._strides = strides

    def __repr__(self) -> str:
        return f"View(shape={self._shape}, offset={self._offset})"

    def __len__(self) -> int:
        return self._shape.elements()

    def __iter__(self) -> Iterator[float]:
        for index in IndicesIter(self._shape):
            flat = self._offset
            for i, stride in zip(index, self._strides):
                flat += i * stride
            yield float(self._data[flat])

    @property
    def dimensions(self) -> int:
        return len(self._shape)

    @property
    def shape(self) -> Shape:
        return self._shape

    def numpy(self) -> np.ndarray:
        """Zero-copy, read-only numpy window with the shape of the view"""
        itemsize = self._data.itemsize
        window = np.lib.stride_tricks.as_strided(
            self._data[self._offset :],
            shape=tuple(self._shape),
            strides=tuple(s * itemsize for s in self._strides),
            writeable=False,
        )
        return window

    def to_array(self):
        """Owned copy of the view"""
        from ._array import Array

        return Array(self.numpy(), self._shape)
