from typing import Iterator, Sequence, Tuple, Union

import numpy as np

from .._errors import MarginalizationError
from ..array import Array, Axis, Shape
from . import _stats
from ._fold import Folded
from ._project import Projection


class Spectrum(object):
    """
    Site spectrum over one or more populations, backed by an `Array`.

    A spectrum is either a `Scs` of site counts or a `Sfs` of site frequencies
    summing to one. Statistics that only make sense for one of the two are only
    defined on that class; use `Scs.into_normalized` to go from counts to
    frequencies.
    """

    def __init__(self, array: Array):
        assert isinstance(array, Array), "spectrum must be created from an Array"
        self._array = array

    @classmethod
    def from_array(cls, array: Array):
        spectrum = cls.__new__(cls)
        Spectrum.__init__(spectrum, array)
        return spectrum

    def __repr__(self) -> str:
        return f"{type(self).__name__}(shape={self.shape}, data={self._array.as_slice().tolist()})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, Spectrum):
            return NotImplemented
        return type(self) is type(other) and self._array == other._array

    def __iter__(self) -> Iterator[float]:
        return iter(self._array)

    def __getitem__(self, index) -> float:
        return self._array[index]

    def __setitem__(self, index, value: float):
        self._array[index] = value

    @property
    def dimensions(self) -> int:
        return self._array.dimensions

    @property
    def elements(self) -> int:
        return self._array.elements

    @property
    def shape(self) -> Shape:
        return self._array.shape

    @property
    def inner(self) -> Array:
        return self._array

    def sum(self) -> float:
        return float(self._array.as_slice().sum())

    def copy(self):
        return type(self).from_array(self._array.copy())

    def normalize(self):
        """Divide every cell by the total, in place. The class is left unchanged."""
        data = self._array.as_slice()
        data /= data.sum()

    def into_normalized(self) -> "Sfs":
        """Normalized copy of the spectrum as a `Sfs`; `self` is left unchanged"""
        sfs = Sfs.from_array(self._array.copy())
        sfs.normalize()
        return sfs

    def iter_frequencies(self) -> Iterator[Tuple[float, ...]]:
        """
        Allele frequency of each cell in row-major order, one value per axis.

        The frequency of index `i` along an axis of size `n` is `i / (n - 1)`,
        and 0 on an axis of size 1.
        """
        shape = self.shape
        for index in self._array.iter_indices():
            yield tuple(i / (n - 1) if n > 1 else 0.0 for i, n in zip(index, shape))

    def marginalize(self, axes: Sequence[Axis]):
        """
        Spectrum with `axes` summed out.

        Parameters
        ----------
        axes : sequence of int
            axes to remove, in any order; at least one axis must remain

        Raises
        ------
        MarginalizationError
            with kind "duplicate_axis", "axis_out_of_bounds" or "too_many_axes"
        """
        axes = [int(axis) for axis in axes]
        dimensions = self.dimensions

        for i, axis in enumerate(axes):
            if axis in axes[i + 1 :]:
                raise MarginalizationError(
                    "duplicate_axis", f"axis {axis} provided more than once", axis=axis
                )
        for axis in axes:
            if not 0 <= axis < dimensions:
                raise MarginalizationError(
                    "axis_out_of_bounds",
                    f"axis {axis} is out of bounds for spectrum with {dimensions} dimensions",
                    axis=axis,
                    dimensions=dimensions,
                )
        if len(axes) >= dimensions:
            raise MarginalizationError(
                "too_many_axes",
                f"cannot marginalize {len(axes)} axes "
                f"from spectrum with {dimensions} dimensions",
                axes=len(axes),
                dimensions=dimensions,
            )

        array = self._array
        # removing an axis shifts every later axis down by one
        for removed, axis in enumerate(sorted(axes)):
            array = array.sum(axis - removed)
        return type(self).from_array(array)

    def fold(self) -> Folded:
        return Folded(self)

    def pi(self) -> float:
        """Average number of pairwise differences. One-dimensional spectra only."""
        return _stats.theta_tajima(self)

    def pi_xy(self) -> float:
        """
        Average number of pairwise differences between two populations, also
        known as Dxy. Two-dimensional spectra only.
        """
        return _stats.pi_xy(self)

    def theta_watterson(self) -> float:
        """Watterson's estimator of theta. One-dimensional spectra only."""
        return _stats.theta_watterson(self)

    def king(self) -> float:
        return _stats.king(self)

    def r0(self) -> float:
        return _stats.r0(self)

    def r1(self) -> float:
        return _stats.r1(self)


class Scs(Spectrum):
    """
    Site count spectrum.

    Parameters
    ----------
    data : array_like
        counts in row-major order
    shape : Shape, int or sequence of int
        shape of the spectrum
    """

    def __init__(self, data, shape):
        super().__init__(Array(data, shape))

    @classmethod
    def from_zeros(cls, shape) -> "Scs":
        return cls.from_array(Array.from_zeros(shape))

    @classmethod
    def from_range(cls, values: range, shape) -> "Scs":
        return cls.from_array(Array.from_iter(values, shape))

    @classmethod
    def from_vec(cls, values: Sequence[float]) -> "Scs":
        """One-dimensional spectrum from `values`"""
        values = list(values)
        return cls(values, len(values))

    def increment(self, index: Sequence[int], weight: float = 1.0):
        self._array[index] = self._array[index] + weight

    def segregating_sites(self) -> float:
        """Number of sites segregating in any population"""
        return _stats.segregating_sites(self)

    def d_tajima(self) -> float:
        return _stats.d_tajima(self)

    def d_fu_li(self) -> float:
        return _stats.d_fu_li(self)

    def project(self, shape: Union[Shape, int, Sequence[int]]) -> "Scs":
        """
        Project the spectrum down to `shape` by hypergeometric down-sampling.

        See Marth (2004) and Gutenkunst (2009). Projecting a finished spectrum
        treats every cell as if all its sites had full data; prefer projecting
        site-wise while creating the spectrum where possible.

        Raises
        ------
        ProjectionError
            if `shape` is not a valid projection of the spectrum's shape
        """
        if isinstance(shape, (int, np.integer)):
            shape = (shape,)
        projection = Projection.from_shapes(self.shape, shape)
        new = Scs.from_zeros(projection.project_to)

        for weight, index in zip(self._array.as_slice(), self._array.iter_indices()):
            if weight == 0.0:
                continue
            projection.project(index).weighted(float(weight)).add_to(new)

        return new


class Sfs(Spectrum):
    """
    Site frequency spectrum, a spectrum normalized to sum to one.

    Create one from counts with `Scs.into_normalized`, or directly from
    frequencies in row-major order.

    Parameters
    ----------
    data : array_like
        frequencies in row-major order
    shape : Shape, int or sequence of int
        shape of the spectrum
    """

    def __init__(self, data, shape):
        super().__init__(Array(data, shape))

    def f2(self) -> float:
        """f2 statistic. Two-dimensional spectra only."""
        return _stats.f2(self)

    def f3(self) -> float:
        """f3(A; B, C) statistic. Three-dimensional spectra only."""
        return _stats.f3(self)

    def f4(self) -> float:
        """f4(A, B; C, D) statistic. Four-dimensional spectra only."""
        return _stats.f4(self)

    def fst(self) -> float:
        """Hudson's Fst. Two-dimensional spectra only."""
        return _stats.fst(self)

    def heterozygosity(self) -> float:
        """Heterozygosity of a single diploid individual, i.e. a spectrum of shape 3."""
        return _stats.heterozygosity(self)
