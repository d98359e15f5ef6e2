from typing import Tuple

from ._shape import Axis, Shape


class IndicesIter(object):
    """
    Lazy iterator over every multi-index of a shape in row-major order.

    The last axis is incremented first, carrying into the previous axis on
    overflow. `len()` gives the number of indices not yet produced.
    """

    def __init__(self, shape: Shape):
        self._shape = shape
        self._index = [0] * len(shape)
        self._remaining = shape.elements()

    def __iter__(self) -> "IndicesIter":
        return self

    def __len__(self) -> int:
        return self._remaining

    def __next__(self) -> Tuple[int, ...]:
        if self._remaining == 0:
            raise StopIteration
        current = tuple(self._index)
        self._remaining -= 1

        for axis in range(len(self._shape) - 1, -1, -1):
            self._index[axis] += 1
            if self._index[axis] < self._shape[axis]:
                break
            self._index[axis] = 0

        return current

    @property
    def shape(self) -> Shape:
        return self._shape


class AxisIter(object):
    """Lazy iterator over the views of an array along one axis."""

    def __init__(self, array, axis: Axis):
        assert 0 <= axis < array.dimensions, f"axis {axis} out of bounds"
        self._array = array
        self._axis = axis
        self._position = 0

    def __iter__(self) -> "AxisIter":
        return self

    def __len__(self) -> int:
        return self._array.shape[self._axis] - self._position

    def __next__(self):
        if self._position >= self._array.shape[self._axis]:
            raise StopIteration
        view = self._array.index_axis(self._axis, self._position)
        self._position += 1
        return view
