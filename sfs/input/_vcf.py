import re
from typing import List, Optional, Sequence

from .._errors import GenotypeError
from ._genotype import GenotypeResult, Skipped, from_alleles
from ._reader import GenotypeReader

_ALLELE_SEPARATOR = re.compile(r"[/|]")


class VcfGenotypeReader(GenotypeReader):
    """
    Streaming genotype reader for (optionally gzipped) VCF files

    Parameters
    ----------
    path : str
        path to the VCF file
    chunk_length : int
        number of sites to parse at once, passed to scikit-allel

    Notes
    -----
    GT is read as raw strings rather than allele indices, since scikit-allel
    pads calls of lower ploidy with missing alleles, which would make a
    haploid call "1" look like the diploid call "1/.".
    """

    def __init__(self, path: str, chunk_length: int = 65536):
        import allel

        _, samples, _, it = allel.iter_vcf_chunks(
            path,
            fields=["variants/CHROM", "variants/POS", "calldata/GT"],
            types={"calldata/GT": "S16"},
            numbers={"calldata/GT": 1},
            chunk_length=chunk_length,
        )
        self._samples = [str(s) for s in samples]
        self._chunks = it
        self._chrom = None
        self._pos = None
        self._gt = None
        self._i = 0
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

    def _next_chunk(self) -> bool:
        for chunk, _, _, _ in self._chunks:
            chrom = chunk["variants/CHROM"]
            if len(chrom) == 0:
                continue
            self._chrom = chrom
            self._pos = chunk["variants/POS"]
            self._gt = chunk["calldata/GT"]
            self._i = 0
            return True
        return False

    def read_genotypes(self) -> Optional[List[GenotypeResult]]:
        if self._gt is None or self._i >= len(self._chrom):
            if not self._next_chunk():
                return None

        i = self._i
        self._i += 1
        self._contig = str(self._chrom[i])
        self._position = int(self._pos[i])
        return convert_calls(self._gt[i])


def parse_call(raw) -> GenotypeResult:
    """
    Convert a raw GT string, such as b"0/1" or b"1|1", to a genotype result.

    An absent call, or a lone ".", is missing. Any other call is split on
    "/" and "|", and must have exactly two alleles.
    """
    call = raw.decode() if isinstance(raw, bytes) else str(raw)
    if call in ("", "."):
        return Skipped.MISSING
    alleles = []
    for allele in _ALLELE_SEPARATOR.split(call):
        if allele == ".":
            alleles.append(-1)
        elif allele.isdigit():
            alleles.append(int(allele))
        else:
            return GenotypeError(f"invalid allele '{allele}' in genotype '{call}'")
    return from_alleles(alleles)


def convert_calls(gt: Sequence) -> List[GenotypeResult]:
    """Convert the raw GT strings of all samples at one site to genotype results"""
    return [parse_call(raw) for raw in gt]
