from ._genotype import Genotype, Skipped, from_alleles
from ._reader import GenotypeReader, ListGenotypeReader
from ._vcf import VcfGenotypeReader
from ._sample import Population, SampleMap
from ._site import Site, SiteKind, SiteReader

__all__ = [
    "Genotype",
    "Skipped",
    "from_alleles",
    "GenotypeReader",
    "ListGenotypeReader",
    "VcfGenotypeReader",
    "Population",
    "SampleMap",
    "Site",
    "SiteKind",
    "SiteReader",
]
