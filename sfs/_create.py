from collections import Counter
from typing import Optional, Sequence

from tqdm import tqdm

from ._errors import GenotypeError, ReadError
from ._logging import logger
from .input import GenotypeReader, SiteReader
from .spectrum import Scs


class _Warnings(object):
    """Counts skipped genotypes and records by reason, warning once per reason"""

    def __init__(self):
        self.counts = Counter()
        self.units = {}

    def warn_once(self, reason: str, contig, position, unit: str = "records"):
        if self.counts[reason] == 0:
            logger.warning(
                f"Skipping {unit[:-1]} at position '{contig}:{position}' due to {reason}. "
                "This warning will be shown only once, with a summary at the end."
            )
        self.counts[reason] += 1
        self.units[reason] = unit

    def summarize(self):
        for reason, count in self.counts.items():
            logger.warning(f"Skipped {count} {self.units[reason]} due to {reason}.")


def create(
    reader: GenotypeReader,
    samples=None,
    project_to: Optional[Sequence[int]] = None,
    project_individuals: Optional[Sequence[int]] = None,
    strict: bool = False,
    progress: bool = False,
) -> Scs:
    """
    Create a site count spectrum from genotypes

    Parameters
    ----------
    reader : GenotypeReader
        source of genotypes
    samples : SampleMap, path, or list of (sample, population) pairs
        samples to include and their populations, by default all samples
        in `reader` in a single population
    project_to : sequence of int, optional
        shape to project sites to
    project_individuals : sequence of int, optional
        number of individuals to project each population to
    strict : bool
        raise on the first record that would be dropped, i.e. a record with
        an invalid genotype or with insufficient data, instead of warning
    progress : bool
        show a progress bar over records

    Returns
    -------
    Scs
        the spectrum, with one dimension per population

    Raises
    ------
    SampleMapError, ProjectionError
        if the configuration does not fit the reader, before any site is read
    ReadError
        on a fatal read error, or in strict mode on the first dropped record
    """
    site_reader = SiteReader.build(
        reader,
        samples=samples,
        project_to=project_to,
        project_individuals=project_individuals,
    )
    scs = site_reader.create_zero_scs()
    logger.info(
        f"Creating spectrum of shape {scs.shape} from "
        f"{len(site_reader.sample_map)} samples in "
        f"{site_reader.sample_map.number_of_populations()} population(s)"
    )

    warnings = _Warnings()
    n_sites = 0
    with tqdm(desc="sites", unit=" sites", disable=not progress) as pbar:
        while True:
            try:
                site = site_reader.read_site()
            except ReadError as e:
                if strict or not isinstance(e.__cause__, GenotypeError):
                    raise
                warnings.warn_once(
                    "invalid genotype",
                    site_reader.current_contig,
                    site_reader.current_position,
                )
                pbar.update()
                continue

            if site is None:
                break
            pbar.update()

            for _, skipped in site_reader.current_skipped_samples():
                warnings.warn_once(
                    f"{skipped.reason} genotype",
                    site_reader.current_contig,
                    site_reader.current_position,
                    unit="genotypes",
                )

            if site.is_insufficient:
                if strict:
                    raise ReadError(
                        "insufficient data at position "
                        f"'{site_reader.current_contig}:{site_reader.current_position}'"
                    )
                warnings.warn_once(
                    "insufficient data",
                    site_reader.current_contig,
                    site_reader.current_position,
                )
                continue

            site.add_to(scs)
            n_sites += 1

    warnings.summarize()
    logger.info(f"Counted {n_sites} sites")
    return scs
