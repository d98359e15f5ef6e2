import abc
from typing import Iterable, List, Optional, Sequence, Tuple

from .._errors import GenotypeError
from ._genotype import Genotype, GenotypeResult, Skipped


class GenotypeReader(abc.ABC):
    """
    A source of per-site genotypes for a fixed, ordered list of samples.

    Any failure to read the underlying input (e.g. `OSError`) propagates
    unchanged from `read_genotypes`.
    """

    @property
    @abc.abstractmethod
    def samples(self) -> List[str]:
        ...

    @property
    @abc.abstractmethod
    def current_contig(self) -> Optional[str]:
        ...

    @property
    @abc.abstractmethod
    def current_position(self) -> Optional[int]:
        ...

    @abc.abstractmethod
    def read_genotypes(self) -> Optional[List[GenotypeResult]]:
        """
        Genotypes of the next site, in the order of `samples`, or None when
        there are no more sites.
        """


def _to_result(value) -> GenotypeResult:
    if value is None:
        return Skipped.MISSING
    if isinstance(value, (Genotype, Skipped, GenotypeError)):
        return value
    if isinstance(value, int):
        genotype = Genotype.try_from_raw(value)
        return genotype if genotype is not None else Skipped.MULTIALLELIC
    raise TypeError(f"cannot convert {value!r} to a genotype")


class ListGenotypeReader(GenotypeReader):
    """
    Genotype reader over sites held in memory

    Parameters
    ----------
    samples : list of str
        sample names
    sites : iterable of (contig, position, genotypes)
        `genotypes` holds one value per sample: an int number of derived
        alleles, None for missing, or a `Genotype`, `Skipped` or
        `GenotypeError`
    """

    def __init__(self, samples: Sequence[str], sites: Iterable[Tuple[str, int, Sequence]]):
        self._samples = [str(s) for s in samples]
        self._sites = iter(sites)
        self._contig = None
        self._position = None

    @property
    def samples(self) -> List[str]:
        return self._samples

    @property
    def current_contig(self) -> Optional[str]:
        return self._contig

    @property
    def current_position(self) -> Optional[int]:
        return self._position

    def read_genotypes(self) -> Optional[List[GenotypeResult]]:
        site = next(self._sites, None)
        if site is None:
            return None
        self._contig, self._position, genotypes = site
        assert len(genotypes) == len(self._samples), (
            f"expected {len(self._samples)} genotypes, found {len(genotypes)}"
        )
        return [_to_result(g) for g in genotypes]
