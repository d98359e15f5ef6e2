"""
Summary statistics computed from a spectrum.

References: Durrett (2008) for the θ estimators and D statistics, Peter (2016)
for f-statistics, Bhatia et al. (2013) for Fst, and Waples et al. (2019) for
the King, R0 and R1 kinship statistics.
"""
import numpy as np

from .._errors import StatisticError
from ._hypergeometric import binomial


def harmonic(n: int) -> float:
    """Sum of the first n - 1 terms of the harmonic series"""
    return p_harmonic(n, 1)


def p_harmonic(n: int, p: int) -> float:
    return sum(1.0 / i ** p for i in range(1, n))


def check_dimensions(spectrum, expected: int):
    if spectrum.dimensions != expected:
        raise StatisticError(
            f"expected spectrum with dimension {expected}, "
            f"found spectrum with dimension {spectrum.dimensions}"
        )


def check_shape(spectrum, expected):
    if tuple(spectrum.shape) != tuple(expected):
        raise StatisticError(
            f"expected spectrum with shape {'/'.join(map(str, expected))}, "
            f"found spectrum with shape {spectrum.shape}"
        )


def _frequencies(spectrum) -> np.ndarray:
    """(elements, dimensions) matrix of per-axis allele frequencies"""
    return np.array(list(spectrum.iter_frequencies()), dtype=np.float64).reshape(
        spectrum.elements, spectrum.dimensions
    )


def theta_tajima(spectrum) -> float:
    check_dimensions(spectrum, 1)
    n = spectrum.elements
    data = spectrum.inner.as_slice()
    pairs = binomial(n, 2)
    return float(sum(i * (n - i) / pairs * data[i] for i in range(1, n)))


def theta_watterson(spectrum) -> float:
    check_dimensions(spectrum, 1)
    n = spectrum.elements
    data = spectrum.inner.as_slice()
    return float(data[1:n].sum() / harmonic(n))


def theta_fu_li(spectrum) -> float:
    check_dimensions(spectrum, 1)
    return float(spectrum.inner.as_slice()[1])


def segregating_sites(spectrum) -> float:
    data = spectrum.inner.as_slice()
    return float(data[1 : len(data) - 1].sum())


def d_tajima(scs) -> float:
    """Tajima's D, following Tajima (1989)"""
    check_dimensions(scs, 1)
    n = scs.elements
    s = segregating_sites(scs)

    a1 = harmonic(n)
    a2 = p_harmonic(n, 2)

    b1 = (n + 1) / (3 * (n - 1))
    b2 = (2 * (n ** 2 + n + 3)) / (9 * n * (n - 1))

    c1 = b1 - 1.0 / a1
    c2 = b2 - (n + 2) / (a1 * n) + a2 / a1 ** 2

    e1 = c1 / a1
    e2 = c2 / (a1 ** 2 + a2)

    var = np.sqrt(e1 * s + e2 * s * (s - 1.0))
    return float((theta_tajima(scs) - theta_watterson(scs)) / var)


def d_fu_li(scs) -> float:
    """Fu and Li's D, following Fu and Li (1993)"""
    check_dimensions(scs, 1)
    n = scs.elements
    s = segregating_sites(scs)

    a = harmonic(n)
    g = p_harmonic(n, 2)

    c = (2.0 * n * a - 4 * (n - 1)) / ((n - 1) * (n - 2))
    v = 1.0 + a ** 2 / (g + a ** 2) * (c - (n + 1) / (n - 1))
    u = a - 1.0 - v

    # thetas in the numerator, hence the extra 1 / a
    var = np.sqrt(u * s + v * s ** 2) / a
    return float((theta_watterson(scs) - theta_fu_li(scs)) / var)


def pi_xy(spectrum) -> float:
    check_dimensions(spectrum, 2)
    v = spectrum.inner.as_slice()
    f = _frequencies(spectrum)
    fi, fj = f[:, 0], f[:, 1]
    return float(np.sum(v * (fi * (1 - fj) + fj * (1 - fi))))


def f2(sfs) -> float:
    check_dimensions(sfs, 2)
    v = sfs.inner.as_slice()
    f = _frequencies(sfs)
    return float(np.sum(v * (f[:, 0] - f[:, 1]) ** 2))


def f3(sfs) -> float:
    """f3(A; B, C) with A, B, C in the order of the populations in the spectrum"""
    check_dimensions(sfs, 3)
    v = sfs.inner.as_slice()
    f = _frequencies(sfs)
    return float(np.sum(v * (f[:, 0] - f[:, 1]) * (f[:, 0] - f[:, 2])))


def f4(sfs) -> float:
    """f4(A, B; C, D) with A, B, C, D in the order of the populations in the spectrum"""
    check_dimensions(sfs, 4)
    v = sfs.inner.as_slice()
    f = _frequencies(sfs)
    return float(np.sum(v * (f[:, 0] - f[:, 1]) * (f[:, 2] - f[:, 3])))


def fst(sfs) -> float:
    """Hudson's Fst as a ratio of averages over polymorphic cells"""
    check_dimensions(sfs, 2)
    shape = sfs.shape
    # drop the first and last cells, which are monomorphic in both populations
    v = sfs.inner.as_slice()[1:-1]
    f = _frequencies(sfs)[1:-1]
    fi, fj = f[:, 0], f[:, 1]
    gi, gj = 1.0 - fi, 1.0 - fj
    ni, nj = shape[0] - 2, shape[1] - 2

    num = (fi - fj) ** 2 - fi * gi / ni - fj * gj / nj
    den = fi * gj + fj * gi
    return float(np.sum(v * num) / np.sum(v * den))


def king(spectrum) -> float:
    check_shape(spectrum, [3, 3])
    s = spectrum
    numer = s[1, 1] - 2.0 * (s[0, 2] + s[2, 0])
    denom = s[0, 1] + s[1, 0] + 2.0 * s[1, 1] + s[1, 2] + s[2, 1]
    return numer / denom


def r0(spectrum) -> float:
    check_shape(spectrum, [3, 3])
    s = spectrum
    return (s[0, 2] + s[2, 0]) / s[1, 1]


def r1(spectrum) -> float:
    check_shape(spectrum, [3, 3])
    s = spectrum
    denom = sum(s[i] for i in [(0, 1), (0, 2), (1, 0), (1, 2), (2, 0), (2, 1)])
    return s[1, 1] / denom


def heterozygosity(sfs) -> float:
    check_shape(sfs, [3])
    return sfs[1]
