"""
Hypergeometric projection of allele counts onto a smaller shape.

`Projection` maps between two fixed shapes and is used to project a whole
spectrum. `PartialProjection` only fixes the target shape, since during
spectrum creation the number of called alleles in each population may vary
from site to site.
"""
import functools
from typing import Iterator, List, Sequence

import numpy as np

from .._errors import ProjectionError
from ..array import Shape
from ._count import Count
from ._hypergeometric import Distribution, JointIndependentDistribution


class Projected(object):
    """
    Weights of a single projected count over every cell of the target shape.

    Weights are laid out in row-major order as the product of the
    per-population marginal probabilities, scaled by `weight`.
    """

    def __init__(self, marginals: List[List[float]], weight: float = 1.0):
        self._marginals = marginals
        self._weight = weight

    def __repr__(self) -> str:
        return f"Projected(shape={self.shape}, weight={self._weight})"

    @property
    def shape(self) -> Shape:
        return Shape(len(m) for m in self._marginals)

    def __len__(self) -> int:
        return self.shape.elements()

    def weights(self) -> np.ndarray:
        """Flat array of weights over the target shape, in row-major order"""
        joint = functools.reduce(
            np.multiply.outer, [np.asarray(m, dtype=np.float64) for m in self._marginals]
        )
        return np.ravel(joint) * self._weight

    def __iter__(self) -> Iterator[float]:
        return iter(self.weights().tolist())

    def weighted(self, weight: float) -> "Projected":
        return Projected(self._marginals, self._weight * weight)

    def add_to(self, scs):
        """Add the projected weights into the count spectrum `scs` in place"""
        if tuple(scs.shape) != tuple(self.shape):
            raise ProjectionError(
                "mismatching_shapes",
                f"cannot add projection to shape {self.shape} "
                f"into spectrum with shape {scs.shape}",
                projection=self.shape,
                spectrum=scs.shape,
            )
        scs.inner.as_slice()[:] += self.weights()


class Projection(object):
    """
    Projection from one shape to another of the same dimension.

    Use `Projection.from_shapes` to construct a validated projection.
    """

    def __init__(self, project_from: Shape, project_to: Shape):
        self.project_from = project_from
        self.project_to = project_to
        self._distribution = JointIndependentDistribution(
            [
                Distribution(size=n - 1, draws=d - 1)
                for n, d in zip(project_from, project_to)
            ]
        )

    def __repr__(self) -> str:
        return f"Projection(from={self.project_from}, to={self.project_to})"

    @classmethod
    def from_shapes(cls, project_from: Sequence[int], project_to: Sequence[int]) -> "Projection":
        """
        Parameters
        ----------
        project_from : sequence of int
            shape of the spectrum to project from
        project_to : sequence of int
            shape to project to; must have the same dimension as `project_from`
            and no dimension larger than the corresponding one in `project_from`

        Raises
        ------
        ProjectionError
            with kind "zero", "unequal_dimensions" or "invalid_projection"
        """
        project_from = tuple(int(v) for v in project_from)
        project_to = tuple(int(v) for v in project_to)

        if any(v == 0 for v in project_from) or any(v == 0 for v in project_to):
            raise ProjectionError("zero", "cannot project from or to a zero shape")
        if len(project_from) != len(project_to):
            raise ProjectionError(
                "unequal_dimensions",
                f"cannot project from {len(project_from)} dimensions "
                f"to {len(project_to)} dimensions",
                project_from=len(project_from),
                project_to=len(project_to),
            )
        for dimension, (n, d) in enumerate(zip(project_from, project_to)):
            if d > n:
                raise ProjectionError(
                    "invalid_projection",
                    f"cannot project from {n} to {d} in dimension {dimension}",
                    dimension=dimension,
                    project_from=n,
                    project_to=d,
                )

        return cls(Shape(project_from), Shape(project_to))

    @property
    def dimensions(self) -> int:
        return len(self.project_from)

    def project(self, count: Sequence[int]) -> Projected:
        """Projected weights of the source index `count` over the target shape"""
        self._distribution.set_successes(count)
        return Projected(self._distribution.marginals())


class PartialProjection(object):
    """
    Projection to a fixed shape from a source shape that varies per site.
    """

    def __init__(self, project_to: Count):
        self.project_to = project_to

    def __repr__(self) -> str:
        return f"PartialProjection(to={self.project_to.into_shape()})"

    @classmethod
    def from_shape(cls, project_to: Sequence[int]) -> "PartialProjection":
        project_to = tuple(int(v) for v in project_to)
        if any(v == 0 for v in project_to):
            raise ProjectionError("zero", "cannot project to a zero shape")
        return cls(Count.from_shape(project_to))

    @property
    def dimensions(self) -> int:
        return len(self.project_to)

    def project(self, totals: Sequence[int], counts: Sequence[int]) -> Projected:
        """
        Project a site with `totals` called alleles, `counts` of them derived, per population.

        Every total must be at least as large as the corresponding target count.
        """
        assert len(totals) == len(counts) == len(self.project_to), (
            "totals and counts must have one value per population"
        )
        distribution = JointIndependentDistribution(
            [
                Distribution(size=total, draws=draws, successes=count)
                for total, draws, count in zip(totals, self.project_to, counts)
            ]
        )
        return Projected(distribution.marginals())
