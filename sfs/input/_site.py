import enum
import os
from typing import List, Optional, Sequence, Tuple, Union

from .._errors import GenotypeError, ProjectionError, ReadError, SampleMapError
from ..array import Shape
from ..spectrum import Count, PartialProjection, Projected, Scs
from ._genotype import Skipped
from ._reader import GenotypeReader
from ._sample import SampleMap


class SiteKind(enum.Enum):
    STANDARD = "standard"
    PROJECTED = "projected"
    INSUFFICIENT_DATA = "insufficient_data"


class Site(object):
    """
    Result of reading a single site.

    A standard site carries the derived allele `count` of each population, a
    projected site carries the `projected` weights over the output spectrum,
    and a site with insufficient data carries neither.
    """

    def __init__(
        self,
        kind: SiteKind,
        count: Optional[Count] = None,
        projected: Optional[Projected] = None,
    ):
        self.kind = kind
        self.count = count
        self.projected = projected

    def __repr__(self) -> str:
        if self.kind is SiteKind.STANDARD:
            return f"Site(standard, count={list(self.count)})"
        return f"Site({self.kind.value})"

    @property
    def is_insufficient(self) -> bool:
        return self.kind is SiteKind.INSUFFICIENT_DATA

    def add_to(self, scs: Scs):
        """Add the site to the count spectrum `scs` in place"""
        assert not self.is_insufficient, "cannot add a site with insufficient data"
        if self.kind is SiteKind.STANDARD:
            scs.increment(self.count)
        else:
            self.projected.add_to(scs)


def _to_sample_map(samples, reader: GenotypeReader) -> SampleMap:
    if samples is None:
        return SampleMap.from_all(reader.samples)
    elif isinstance(samples, SampleMap):
        return samples
    elif isinstance(samples, (str, os.PathLike)):
        return SampleMap.from_path(samples)
    else:
        return SampleMap.from_pairs(samples)


class SiteReader(object):
    """
    Reads sites from a genotype reader and counts derived alleles per population.

    Use `SiteReader.build` to create a validated reader. Each call to
    `read_site` resolves one site completely before the next is read.
    """

    def __init__(
        self,
        reader: GenotypeReader,
        sample_map: SampleMap,
        projection: Optional[PartialProjection] = None,
    ):
        self._reader = reader
        self._sample_map = sample_map
        self._projection = projection

        dimensions = sample_map.number_of_populations()
        self._counts = Count.from_zeros(dimensions)
        self._totals = Count.from_zeros(dimensions)
        self._skipped: List[Tuple[str, Skipped]] = []
        # population id of each reader column, None if the sample is not mapped
        self._columns = [sample_map.get_population_id(s) for s in reader.samples]

    @classmethod
    def build(
        cls,
        reader: GenotypeReader,
        samples: Union[SampleMap, str, Sequence[Tuple[str, Optional[str]]], None] = None,
        project_to: Optional[Sequence[int]] = None,
        project_individuals: Optional[Sequence[int]] = None,
    ) -> "SiteReader":
        """
        Build a site reader, validating its configuration before any site is read

        Parameters
        ----------
        reader : GenotypeReader
            source of genotypes
        samples : SampleMap, path, or list of (sample, population) pairs
            samples to include and their populations. By default, all samples
            in `reader` form a single population.
        project_to : Shape or sequence of int, optional
            shape to project each site to
        project_individuals : sequence of int, optional
            number of individuals to project each population to, i.e. a
            projected shape of `2 * i + 1` per population; mutually exclusive
            with `project_to`

        Raises
        ------
        SampleMapError
            if the samples mapping is empty or has samples not in `reader`
        ProjectionError
            if the projection does not fit the shape of the samples mapping
        """
        assert project_to is None or project_individuals is None, (
            "only one of project_to and project_individuals can be provided"
        )
        sample_map = _to_sample_map(samples, reader)

        if sample_map.is_empty():
            raise SampleMapError("empty samples mapping")
        reader_samples = set(reader.samples)
        for sample in sample_map.samples:
            if sample not in reader_samples:
                raise SampleMapError(f"unknown sample '{sample}'")

        if project_individuals is not None:
            project_to = [2 * int(i) + 1 for i in project_individuals]

        projection = None
        if project_to is not None:
            if isinstance(project_to, int):
                project_to = [project_to]
            project_from = sample_map.shape()
            project_to = tuple(int(v) for v in project_to)
            if len(project_from) != len(project_to):
                raise ProjectionError(
                    "unequal_dimensions",
                    f"cannot project from {len(project_from)} populations "
                    f"to {len(project_to)} dimensions",
                    project_from=len(project_from),
                    project_to=len(project_to),
                )
            for dimension, (n, d) in enumerate(zip(project_from, project_to)):
                if n < d:
                    raise ProjectionError(
                        "invalid_projection",
                        f"cannot project from {n} to {d} in dimension {dimension}",
                        dimension=dimension,
                        project_from=n,
                        project_to=d,
                    )
            projection = PartialProjection.from_shape(project_to)

        return cls(reader, sample_map, projection)

    def create_zero_scs(self) -> Scs:
        if self._projection is not None:
            shape = self._projection.project_to.into_shape()
        else:
            shape = self._sample_map.shape()
        return Scs.from_zeros(shape)

    @property
    def current_contig(self) -> Optional[str]:
        return self._reader.current_contig

    @property
    def current_position(self) -> Optional[int]:
        return self._reader.current_position

    def current_skipped_samples(self) -> List[Tuple[str, Skipped]]:
        """Samples skipped at the current site, with the reason for skipping"""
        return list(self._skipped)

    @property
    def samples(self) -> List[str]:
        return self._reader.samples

    @property
    def sample_map(self) -> SampleMap:
        return self._sample_map

    @property
    def shape(self) -> Shape:
        return self.create_zero_scs().shape

    def _reset(self):
        self._counts.set_zero()
        self._totals.set_zero()
        self._skipped.clear()

    def read_site(self) -> Optional[Site]:
        """
        Read the next site, or None when all sites have been read

        Raises
        ------
        ReadError
            if a genotype is structurally invalid; the `GenotypeError` is
            available as `__cause__`
        """
        self._reset()

        genotypes = self._reader.read_genotypes()
        if genotypes is None:
            return None

        for sample, population_id, genotype in zip(
            self._reader.samples, self._columns, genotypes
        ):
            if population_id is None:
                continue
            if isinstance(genotype, GenotypeError):
                raise ReadError(
                    f"invalid genotype for sample '{sample}' at "
                    f"{self.current_contig}:{self.current_position}: {genotype}"
                ) from genotype
            elif isinstance(genotype, Skipped):
                self._skipped.append((sample, genotype))
            else:
                self._counts[population_id] += int(genotype)
                self._totals[population_id] += 2

        if self._projection is not None:
            project_to = self._projection.project_to
            exact = all(t == d for t, d in zip(self._totals, project_to))
            projectable = all(t >= d for t, d in zip(self._totals, project_to))

            if exact:
                return Site(SiteKind.STANDARD, count=Count(self._counts))
            elif projectable:
                projected = self._projection.project(self._totals, self._counts)
                return Site(SiteKind.PROJECTED, projected=projected)
            else:
                return Site(SiteKind.INSUFFICIENT_DATA)
        elif len(self._skipped) == 0:
            return Site(SiteKind.STANDARD, count=Count(self._counts))
        else:
            return Site(SiteKind.INSUFFICIENT_DATA)
