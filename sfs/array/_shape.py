import math
from typing import Iterable, Optional, Sequence, Tuple, Union

import numpy as np

from .._errors import ShapeError

# axes are plain non-negative integers
Axis = int


class Strides(tuple):
    """
    Row-major offset multipliers of a `Shape`, where `strides[i]` is the product
    of all `shape[j]` for `j > i`. Only ever derived from a `Shape`.
    """

    def remove_axis(self, axis: Axis) -> "Strides":
        return Strides(self[:axis] + self[axis + 1 :])


class Shape(tuple):
    """
    Immutable N-dimensional extent.

    Every dimension must be at least 1. A spectrum over `m` diploid individuals
    conventionally has a dimension of size `2m + 1` for that population.
    """

    def __new__(cls, shape: Union[int, Iterable[int]]):
        if isinstance(shape, (int, np.integer)):
            shape = (shape,)
        shape = tuple(int(v) for v in shape)
        if any(v < 1 for v in shape):
            raise ShapeError(
                f"invalid shape {shape}: all dimensions must be positive"
            )
        return super().__new__(cls, shape)

    def __repr__(self) -> str:
        return f"Shape({str(self)})"

    def __str__(self) -> str:
        return "/".join(str(v) for v in self)

    @property
    def dimensions(self) -> int:
        return len(self)

    def elements(self) -> int:
        return math.prod(self)

    def strides(self) -> Strides:
        strides = [1] * len(self)
        for i in range(len(self) - 2, -1, -1):
            strides[i] = strides[i + 1] * self[i + 1]
        return Strides(strides)

    def remove_axis(self, axis: Axis) -> "Shape":
        return Shape(self[:axis] + self[axis + 1 :])

    def flat_index(
        self, index: Sequence[int], strides: Optional[Strides] = None
    ) -> Optional[int]:
        """Flat row-major offset of `index`, or None if `index` does not fit the shape"""
        if len(index) != len(self):
            return None
        if strides is None:
            strides = self.strides()
        flat = 0
        for i, n, stride in zip(index, self, strides):
            if not 0 <= i < n:
                return None
            flat += i * stride
        return flat

    def index_from_flat(self, flat: int) -> Tuple[int, ...]:
        """Inverse of `flat_index`; `flat` is assumed to be in [0, elements())"""
        n = self.elements()
        index = []
        for v in self:
            n //= v
            index.append(flat // n)
            flat %= n
        return tuple(index)

    def index_sum_from_flat(self, flat: int) -> int:
        """Sum of the coordinates of the multi-index at flat offset `flat`"""
        return sum(self.index_from_flat(flat))
