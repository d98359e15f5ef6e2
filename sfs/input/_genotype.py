import enum
from typing import Optional, Sequence, Union

from .._errors import GenotypeError


class Genotype(enum.IntEnum):
    """Diploid, diallelic genotype as the number of derived alleles"""

    ZERO = 0
    ONE = 1
    TWO = 2

    @classmethod
    def try_from_raw(cls, raw: int) -> Optional["Genotype"]:
        if raw in (0, 1, 2):
            return cls(raw)
        return None


class Skipped(enum.Enum):
    """A genotype call that cannot be counted, which is not an error"""

    MISSING = "missing"
    MULTIALLELIC = "multiallelic"

    @property
    def reason(self) -> str:
        return self.value


GenotypeResult = Union[Genotype, Skipped, GenotypeError]


def from_alleles(alleles: Sequence[int]) -> GenotypeResult:
    """
    Convert the allele indices of a single call to a genotype result.

    Negative allele indices denote missing alleles. A call with an allele sum
    above two is treated as multiallelic, and a call that is not diploid gives
    a `GenotypeError` which is returned rather than raised.
    """
    if len(alleles) != 2:
        return GenotypeError("genotype not diploid")
    if any(a < 0 for a in alleles):
        return Skipped.MISSING
    genotype = Genotype.try_from_raw(int(alleles[0]) + int(alleles[1]))
    if genotype is None:
        return Skipped.MULTIALLELIC
    return genotype
