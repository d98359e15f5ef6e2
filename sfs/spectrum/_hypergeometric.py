"""
Hypergeometric distribution used to project allele counts to smaller sample sizes.

Log-factorials are exact (up to float rounding of the factorials themselves) for
n <= 170, the largest n whose factorial is representable as a float64, and are
approximated through a Lanczos log-gamma above that.
"""
import math
from functools import lru_cache
from typing import List, Optional, Sequence

from .._errors import ProjectionError

FACTORIAL_TABLE_SIZE = 171

# Lanczos approximation with r = 10.900511 and 11 coefficients
LANCZOS_R = 10.900511
LANCZOS_DK = [
    2.48574089138753565546e-5,
    1.05142378581721974210,
    -3.45687097222016235469,
    4.51227709466894823700,
    -2.98285225323576655721,
    1.05639711577126713077,
    -1.95428773191645869583e-1,
    1.70970543404441224307e-2,
    -5.71926117404305781283e-4,
    4.63399473359905636708e-6,
    -2.71994908488607703910e-9,
]
LN_2_SQRT_E_OVER_PI = 0.6207822376352452
LN_PI = 1.1447298858494002


@lru_cache(maxsize=None)
def _factorial_table() -> tuple:
    table = [0.0] * FACTORIAL_TABLE_SIZE
    factorial = 1.0
    for i in range(1, FACTORIAL_TABLE_SIZE):
        factorial *= i
        table[i] = math.log(factorial)
    return tuple(table)


def ln_gamma(x: float) -> float:
    """Natural log of the gamma function, via the Lanczos approximation"""
    if x < 0.5:
        s = LANCZOS_DK[0]
        for t in range(1, len(LANCZOS_DK)):
            s += LANCZOS_DK[t] / (t - x)
        return (
            LN_PI
            - math.log(math.sin(math.pi * x))
            - math.log(s)
            - LN_2_SQRT_E_OVER_PI
            - (0.5 - x) * math.log((0.5 - x + LANCZOS_R) / math.e)
        )
    else:
        s = LANCZOS_DK[0]
        for t in range(1, len(LANCZOS_DK)):
            s += LANCZOS_DK[t] / (x + t - 1.0)
        return (
            math.log(s)
            + LN_2_SQRT_E_OVER_PI
            + (x - 0.5) * math.log((x - 0.5 + LANCZOS_R) / math.e)
        )


def ln_factorial(n: int) -> float:
    if n < FACTORIAL_TABLE_SIZE:
        return _factorial_table()[n]
    return ln_gamma(n + 1.0)


def _ln_binomial(n: int, k: int) -> float:
    return ln_factorial(n) - ln_factorial(k) - ln_factorial(n - k)


def binomial(n: int, k: int) -> float:
    """Binomial coefficient C(n, k) rounded to the nearest integer, 0 when k > n"""
    if k > n:
        return 0.0
    try:
        return float(math.floor(0.5 + math.exp(_ln_binomial(n, k))))
    except OverflowError:
        return math.inf


def pmf(size: int, successes: int, draws: int, observed: int) -> float:
    """
    Probability of `observed` successes in `draws` draws without replacement
    from `size` items of which `successes` are successes.

    Parameters
    ----------
    size : int
        population size
    successes : int
        number of successes in the population
    draws : int
        number of draws
    observed : int
        number of observed successes among the draws

    Returns
    -------
    float
        C(successes, observed) * C(size - successes, draws - observed) / C(size, draws)
    """
    if observed > draws:
        return 0.0
    a = binomial(successes, observed)
    b = binomial(size - successes, draws - observed)
    if a == 0.0 or b == 0.0:
        return 0.0
    numerator = a * b
    denominator = binomial(size, draws)
    if math.isfinite(numerator) and math.isfinite(denominator):
        return numerator / denominator
    # too large to represent, stay in log space
    return math.exp(
        _ln_binomial(successes, observed)
        + _ln_binomial(size - successes, draws - observed)
        - _ln_binomial(size, draws)
    )


class Distribution(object):
    """
    Hypergeometric distribution of the number of derived alleles among `draws`
    alleles sampled from `size` alleles, `successes` of which are derived.
    """

    def __init__(self, size: int, draws: int, successes: Optional[int] = None):
        if draws > size:
            raise ProjectionError(
                "invalid_projection",
                f"cannot draw {draws} alleles from {size} alleles",
                size=size,
                draws=draws,
            )
        self.size = size
        self.draws = draws
        self._successes = None
        if successes is not None:
            self.set_successes(successes)

    def __repr__(self) -> str:
        return (
            f"Distribution(size={self.size}, draws={self.draws}, "
            f"successes={self._successes})"
        )

    @property
    def successes(self) -> Optional[int]:
        return self._successes

    def set_successes(self, successes: int):
        if successes > self.size:
            raise ProjectionError(
                "invalid_projection",
                f"cannot have {successes} derived alleles among {self.size} alleles",
                size=self.size,
                successes=successes,
            )
        self._successes = successes

    def pmf(self, observed: int) -> float:
        assert self._successes is not None, "successes must be set before calling pmf"
        return pmf(self.size, self._successes, self.draws, observed)


class JointIndependentDistribution(list):
    """
    Product of independent per-population hypergeometric distributions.
    """

    def __init__(self, distributions: Sequence[Distribution]):
        assert len(distributions) > 0, "at least one distribution is required"
        super().__init__(distributions)

    def pmf(self, observed: Sequence[int]) -> float:
        assert len(observed) == len(self), "observed must have one value per distribution"
        joint = 1.0
        for distribution, k in zip(self, observed):
            joint = distribution.pmf(k) * joint
        return joint

    def set_successes(self, successes: Sequence[int]):
        assert len(successes) == len(self), "successes must have one value per distribution"
        for distribution, s in zip(self, successes):
            distribution.set_successes(s)

    def marginals(self) -> List[List[float]]:
        """Per-population PMF over every possible observed count 0..=draws"""
        return [[d.pmf(k) for k in range(d.draws + 1)] for d in self]
