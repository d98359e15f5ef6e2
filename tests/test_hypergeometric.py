import numpy as np
import pytest
from scipy import special, stats

import sfs
from sfs.spectrum import (
    Distribution,
    JointIndependentDistribution,
    binomial,
    ln_factorial,
    ln_gamma,
    pmf,
)


def test_pmf():
    assert np.isclose(pmf(10, 7, 8, 4), 0.0)
    assert np.isclose(pmf(10, 7, 8, 5), 0.466667, atol=1e-6)
    assert np.isclose(pmf(10, 7, 8, 6), 0.466667, atol=1e-6)
    assert np.isclose(pmf(10, 7, 8, 7), 0.066667, atol=1e-6)
    assert pmf(10, 7, 8, 9) == 0.0

    assert np.isclose(pmf(6, 2, 2, 0), 0.4, atol=1e-6)
    assert np.isclose(pmf(6, 2, 2, 1), 0.533333, atol=1e-6)
    assert np.isclose(pmf(6, 2, 2, 2), 0.066667, atol=1e-6)
    assert pmf(6, 2, 2, 3) == 0.0


@pytest.mark.parametrize("size", [4, 20, 171, 400, 1000])
def test_pmf_matches_scipy(size):
    draws = size // 2
    for successes in [0, 1, size // 3, size - 1]:
        observed = np.arange(draws + 1)
        ours = np.array([pmf(size, successes, draws, k) for k in observed])
        expected = stats.hypergeom(size, successes, draws).pmf(observed)
        assert np.allclose(ours, expected, atol=1e-9)
        assert np.isclose(ours.sum(), 1.0)


def test_ln_factorial():
    for n in [0, 1, 2, 10, 170]:
        assert np.isclose(ln_factorial(n), special.gammaln(n + 1))
    for n in [171, 500, 10000]:
        assert np.isclose(ln_factorial(n), special.gammaln(n + 1), rtol=1e-10)


def test_ln_gamma():
    for x in [0.1, 0.25, 0.5, 1.0, 2.5, 10.0, 100.5]:
        assert np.isclose(ln_gamma(x), special.gammaln(x), rtol=1e-10)


def test_binomial():
    assert binomial(6, 2) == 15.0
    assert binomial(10, 0) == 1.0
    assert binomial(2, 3) == 0.0
    assert binomial(52, 5) == 2598960.0
    assert binomial(5000, 2500) == np.inf


def test_distribution():
    d = Distribution(size=6, draws=2)
    with pytest.raises(AssertionError):
        d.pmf(0)
    d.set_successes(2)
    assert np.isclose(d.pmf(1), 0.533333, atol=1e-6)

    with pytest.raises(sfs.ProjectionError):
        d.set_successes(7)
    with pytest.raises(sfs.ProjectionError):
        Distribution(size=2, draws=3)


def test_joint_distribution():
    with pytest.raises(AssertionError):
        JointIndependentDistribution([])

    joint = JointIndependentDistribution(
        [Distribution(size=6, draws=2), Distribution(size=10, draws=8)]
    )
    joint.set_successes([2, 7])
    assert np.isclose(joint.pmf([1, 5]), 0.533333 * 0.466667, atol=1e-5)

    marginals = joint.marginals()
    assert [len(m) for m in marginals] == [3, 9]
    assert np.allclose(marginals[0], [0.4, 0.533333, 0.066667], atol=1e-6)
