import numpy as np

from ..array import Array


class Folded(object):
    """
    A folded spectrum.

    Each cell in the "upper" part of the spectrum (coordinate sum below the
    midpoint of the total allele count) holds the sum of itself and its mirror
    cell under allele-count reversal. Cells lying exactly on the midpoint, when
    such a diagonal exists, hold the average of the two. The remaining cells
    are folded away and only get a value when converting back with
    `into_spectrum`.
    """

    def __init__(self, spectrum):
        shape = spectrum.shape
        total_count = sum(shape) - len(shape)
        mid_count = total_count // 2
        has_diagonal = total_count % 2 == 0

        # coordinate sum of every cell in row-major order
        counts = np.indices(tuple(shape)).reshape(len(shape), -1).sum(axis=0)
        src = spectrum.inner.as_slice()
        # the reversed row-major order is the per-axis complement of each index
        rev = src[::-1]

        upper = counts < mid_count
        diagonal = counts == mid_count
        if has_diagonal:
            upper_sum = upper
        else:
            upper_sum = upper | diagonal
            diagonal = np.zeros_like(diagonal)

        # fold into a fresh buffer, never in place
        data = np.zeros(len(src), dtype=np.float64)
        data[upper_sum] = src[upper_sum] + rev[upper_sum]
        data[diagonal] = 0.5 * src[diagonal] + 0.5 * rev[diagonal]

        self._array = Array(data, shape)
        self._folded = counts > mid_count
        self._kind = type(spectrum)

    def __repr__(self) -> str:
        return f"Folded(shape={self.shape})"

    @property
    def shape(self):
        return self._array.shape

    def into_spectrum(self, fill: float = np.nan):
        """
        Spectrum of the same kind as the folded one, with folded cells set to `fill`.

        Parameters
        ----------
        fill : float
            value of the folded-away cells, commonly nan, 0, -1 or inf
        """
        data = np.where(self._folded, fill, self._array.as_slice())
        return self._kind.from_array(Array(data, self.shape))
