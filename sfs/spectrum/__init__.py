from ._count import Count
from ._spectrum import Spectrum, Scs, Sfs
from ._fold import Folded
from ._project import Projection, PartialProjection, Projected
from ._hypergeometric import (
    Distribution,
    JointIndependentDistribution,
    binomial,
    ln_factorial,
    ln_gamma,
    pmf,
)
from ._stats import harmonic, p_harmonic
from ._io import Format, read_scs, write_spectrum, format_text

__all__ = [
    "Count",
    "Spectrum",
    "Scs",
    "Sfs",
    "Folded",
    "Projection",
    "PartialProjection",
    "Projected",
    "Distribution",
    "JointIndependentDistribution",
    "binomial",
    "ln_factorial",
    "ln_gamma",
    "pmf",
    "harmonic",
    "p_harmonic",
    "Format",
    "read_scs",
    "write_spectrum",
    "format_text",
]
