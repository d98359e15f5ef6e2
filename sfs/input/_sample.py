from collections import OrderedDict
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

import pandas as pd

from .._errors import SampleMapError
from ..array import Shape


class Population(object):
    """A named or unnamed (`name` is None) population"""

    def __init__(self, name: Optional[str] = None):
        self.name = name

    def __repr__(self) -> str:
        return f"Population({self.name!r})"

    def __str__(self) -> str:
        return self.name if self.name is not None else "[unnamed]"

    def __eq__(self, other) -> bool:
        if not isinstance(other, Population):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)


class SampleMap(object):
    """
    Ordered mapping from sample names to population ids.

    Population ids are assigned in order of first appearance. Each population
    of `m` diploid samples gives a spectrum dimension of size `2m + 1`.
    """

    def __init__(self, pairs: Iterable[Tuple[str, Optional[str]]] = ()):
        self._samples: "OrderedDict[str, int]" = OrderedDict()
        self._populations: List[Population] = []
        population_ids: Dict[Population, int] = {}

        for sample, population in pairs:
            sample = str(sample)
            if not isinstance(population, Population):
                population = Population(population)
            if sample in self._samples:
                raise SampleMapError(f"duplicate sample '{sample}' in samples mapping")
            if population not in population_ids:
                population_ids[population] = len(self._populations)
                self._populations.append(population)
            self._samples[sample] = population_ids[population]

    def __repr__(self) -> str:
        return f"SampleMap({[(s, str(self._populations[p])) for s, p in self._samples.items()]})"

    def __len__(self) -> int:
        return len(self._samples)

    def __eq__(self, other) -> bool:
        if not isinstance(other, SampleMap):
            return NotImplemented
        return (
            list(self._samples.items()) == list(other._samples.items())
            and self._populations == other._populations
        )

    @classmethod
    def from_all(cls, samples: Iterable[str]) -> "SampleMap":
        """All samples in a single unnamed population"""
        return cls((sample, None) for sample in samples)

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[str, Optional[str]]]) -> "SampleMap":
        return cls(pairs)

    @classmethod
    def from_strings(cls, strings: Iterable[str]) -> "SampleMap":
        """
        From strings "sample=population", or "sample" for the unnamed population
        """
        pairs = []
        for s in strings:
            sample, sep, population = str(s).partition("=")
            pairs.append((sample, population if sep else None))
        return cls(pairs)

    @classmethod
    def from_path(cls, path: str) -> "SampleMap":
        """
        Read a samples file: one sample per line, optionally followed by a tab
        and the population name.

        Parameters
        ----------
        path : str
            path to the samples file
        """
        try:
            df = pd.read_csv(
                path,
                sep="\t",
                header=None,
                names=["sample", "population"],
                dtype=str,
                keep_default_na=False,
                skip_blank_lines=True,
            )
        except pd.errors.EmptyDataError:
            return cls()

        pairs = [
            (sample, population if isinstance(population, str) and population else None)
            for sample, population in zip(df["sample"], df["population"])
        ]
        return cls(pairs)

    def get_population_id(self, sample: str) -> Optional[int]:
        return self._samples.get(sample)

    def get_population(self, population_id: int) -> Population:
        return self._populations[population_id]

    def get_sample(self, sample_id: int) -> Optional[str]:
        if 0 <= sample_id < len(self._samples):
            return list(self._samples)[sample_id]
        return None

    def get_sample_id(self, sample: str) -> Optional[int]:
        for i, s in enumerate(self._samples):
            if s == sample:
                return i
        return None

    def is_empty(self) -> bool:
        return len(self._samples) == 0

    def number_of_populations(self) -> int:
        return len(self._populations)

    def population_sizes(self) -> List[int]:
        """Number of samples in each population, indexed by population id"""
        sizes = [0] * len(self._populations)
        for population_id in self._samples.values():
            sizes[population_id] += 1
        return sizes

    @property
    def populations(self) -> List[Population]:
        return list(self._populations)

    @property
    def samples(self) -> List[str]:
        return list(self._samples)

    def shape(self) -> Shape:
        return Shape(2 * size + 1 for size in self.population_sizes())
