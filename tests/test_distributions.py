"""Tests for the bundled distribution objects."""

import numpy as np
import pytest

from easyrand.core.distributions import (
    DISTRIBUTIONS,
    Bernoulli,
    Binomial,
    Cauchy,
    ChiSquared,
    Discrete,
    Exponential,
    ExtremeValue,
    FisherF,
    Gamma,
    Geometric,
    LogNormal,
    NegativeBinomial,
    Normal,
    Poisson,
    Sampler,
    StudentT,
    UniformInt,
    UniformReal,
    Weibull,
)


@pytest.fixture
def rng():
    return np.random.default_rng(42)


def draws(dist, rng, n=20_000):
    return np.array([dist(rng) for _ in range(n)])


class TestParams:
    def test_defaults(self):
        assert Normal().param() == Normal.Params(0.0, 1.0)
        assert Bernoulli().param().p == 0.5
        assert UniformInt().param() == UniformInt.Params(0, 2**31 - 1)

    def test_keyword_construction(self):
        assert Gamma(alpha=2.0, beta=3.0).param() == Gamma.Params(2.0, 3.0)

    @pytest.mark.parametrize(
        "make",
        [
            lambda: Bernoulli(-0.1),
            lambda: Bernoulli(1.1),
            lambda: Binomial(-1, 0.5),
            lambda: Geometric(0.0),
            lambda: Poisson(0.0),
            lambda: Exponential(-1.0),
            lambda: Normal(0.0, 0.0),
            lambda: Discrete(()),
            lambda: Discrete((0.0, 0.0)),
            lambda: Discrete((1.0, -1.0)),
        ],
    )
    def test_invalid(self, make):
        with pytest.raises(ValueError):
            make()

    def test_set_param(self):
        d = Normal()
        d.set_param(Normal.Params(2.0, 3.0))
        assert d.param() == Normal.Params(2.0, 3.0)

    def test_set_param_wrong_type(self):
        with pytest.raises(TypeError):
            Normal().set_param(Bernoulli.Params(0.3))

    def test_override_does_not_stick(self, rng):
        d = UniformInt(0, 10)
        assert d(rng, UniformInt.Params(50, 50)) == 50
        assert d.param() == UniformInt.Params(0, 10)
        assert 0 <= d(rng) <= 10

    def test_equality_and_repr(self):
        assert Normal(1.0, 2.0) == Normal(1.0, 2.0)
        assert Normal(1.0, 2.0) != Normal(1.0, 3.0)
        assert repr(Normal(1.0, 2.0)) == "Normal(mean=1.0, stddev=2.0)"

    def test_override_wrong_type(self, rng):
        with pytest.raises(TypeError):
            Normal()(rng, Bernoulli.Params(0.3))

    def test_reset_is_harmless(self, rng):
        d = Normal()
        d.reset()
        assert isinstance(d(rng), float)

    def test_bundled_are_samplers(self):
        for kind in DISTRIBUTIONS.values():
            assert isinstance(kind(), Sampler)


class TestMoments:
    def test_uniform_int(self, rng):
        x = draws(UniformInt(1, 6), rng)
        assert set(np.unique(x)) == {1, 2, 3, 4, 5, 6}

    def test_uniform_real(self, rng):
        x = draws(UniformReal(2.0, 4.0), rng)
        assert x.min() >= 2.0 and x.max() < 4.0
        assert abs(x.mean() - 3.0) < 0.05

    def test_bernoulli(self, rng):
        x = draws(Bernoulli(0.75), rng)
        assert x.dtype == bool
        assert abs(x.mean() - 0.75) < 0.02

    def test_binomial(self, rng):
        x = draws(Binomial(10, 0.3), rng)
        assert x.min() >= 0 and x.max() <= 10
        assert abs(x.mean() - 3.0) < 0.1

    def test_geometric_counts_failures(self, rng):
        x = draws(Geometric(0.5), rng)
        assert x.min() == 0
        # mean failures = (1 - p) / p
        assert abs(x.mean() - 1.0) < 0.05

    def test_geometric_certain_success(self, rng):
        assert Geometric(1.0)(rng) == 0

    def test_poisson(self, rng):
        x = draws(Poisson(4.0), rng)
        assert abs(x.mean() - 4.0) < 0.1

    def test_exponential_rate(self, rng):
        x = draws(Exponential(2.0), rng)
        assert abs(x.mean() - 0.5) < 0.02

    def test_weibull_scale(self, rng):
        # shape 1 reduces to exponential with mean = scale
        x = draws(Weibull(1.0, 3.0), rng)
        assert abs(x.mean() - 3.0) < 0.1

    def test_cauchy_median(self, rng):
        x = draws(Cauchy(5.0, 1.0), rng)
        assert abs(np.median(x) - 5.0) < 0.1

    def test_discrete(self, rng):
        x = draws(Discrete((1.0, 0.0, 3.0)), rng)
        assert set(np.unique(x)) == {0, 2}
        assert abs((x == 2).mean() - 0.75) < 0.02

    def test_gamma_shape_scale(self, rng):
        # mean = shape * scale
        x = draws(Gamma(2.0, 3.0), rng)
        assert abs(x.mean() - 6.0) < 0.15

    def test_negative_binomial(self, rng):
        # mean failures = k * (1 - p) / p
        x = draws(NegativeBinomial(3, 0.5), rng)
        assert x.min() >= 0
        assert abs(x.mean() - 3.0) < 0.1

    def test_extreme_value(self, rng):
        # mean = a + b * Euler-Mascheroni
        x = draws(ExtremeValue(0.0, 1.0), rng)
        assert abs(x.mean() - 0.5772) < 0.05
        y = draws(ExtremeValue(10.0, 2.0), rng)
        assert abs(y.mean() - (10.0 + 2.0 * 0.5772)) < 0.1

    def test_lognormal_median(self, rng):
        x = draws(LogNormal(0.0, 0.5), rng)
        assert x.min() > 0
        assert abs(np.median(x) - 1.0) < 0.03

    def test_chi_squared(self, rng):
        x = draws(ChiSquared(4.0), rng)
        assert abs(x.mean() - 4.0) < 0.1

    def test_student_t(self, rng):
        x = draws(StudentT(10.0), rng)
        assert abs(x.mean()) < 0.05

    def test_fisher_f(self, rng):
        # mean = n / (n - 2)
        x = draws(FisherF(5.0, 10.0), rng)
        assert abs(x.mean() - 1.25) < 0.05

    @pytest.mark.parametrize("name", sorted(DISTRIBUTIONS))
    def test_every_default_draws(self, name, rng):
        value = DISTRIBUTIONS[name]()(rng)
        assert np.isfinite(float(value))
