from typing import Iterable

from ..array import Shape


class Count(list):
    """
    Per-population vector of non-negative integers.

    Used both as a multi-index into a spectrum and as the per-site accumulator
    of derived allele counts (or allele totals) for each population.
    """

    def __init__(self, values: Iterable[int] = ()):
        super().__init__(int(v) for v in values)

    def __repr__(self) -> str:
        return f"Count({list(self)})"

    @property
    def dimensions(self) -> int:
        return len(self)

    @classmethod
    def from_zeros(cls, dimensions: int) -> "Count":
        return cls([0] * dimensions)

    @classmethod
    def from_shape(cls, shape) -> "Count":
        """Largest valid index of `shape`, i.e. each dimension minus one"""
        return cls(v - 1 for v in Shape(shape))

    def into_shape(self) -> Shape:
        """Shape whose largest valid index is this count, i.e. each value plus one"""
        return Shape(v + 1 for v in self)

    def set_zero(self):
        for i in range(len(self)):
            self[i] = 0
