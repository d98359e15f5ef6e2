from ._logging import logger, set_verbosity
from ._errors import (
    SfsError,
    ShapeError,
    MarginalizationError,
    ProjectionError,
    StatisticError,
    SampleMapError,
    FormatError,
    GenotypeError,
    ReadError,
)
from .array import Array, Shape, View
from .spectrum import Count, Folded, Scs, Sfs, Spectrum, read_scs, write_spectrum
from .input import (
    SampleMap,
    SiteReader,
    GenotypeReader,
    ListGenotypeReader,
    VcfGenotypeReader,
)
from ._create import create
from . import array, spectrum, input, utils, cli
from .version import __version__

__all__ = [
    "array",
    "spectrum",
    "input",
    "utils",
    "cli",
    "Array",
    "Shape",
    "View",
    "Count",
    "Folded",
    "Scs",
    "Sfs",
    "Spectrum",
    "SampleMap",
    "SiteReader",
    "GenotypeReader",
    "ListGenotypeReader",
    "VcfGenotypeReader",
    "create",
    "read_scs",
    "write_spectrum",
]
