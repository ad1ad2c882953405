"""Distribution objects that draw from a numpy Generator.

Any callable taking the engine (and optionally a parameter override) is a
valid sampler for ``rand``; the classes here adapt numpy's Generator
methods to that convention. Each class stores a frozen ``Params`` value,
and an override passed to ``__call__`` applies to that call only.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Protocol, runtime_checkable

import numpy as np


@runtime_checkable
class Sampler(Protocol):
    def __call__(self, engine: np.random.Generator, *params: Any) -> Any: ...


def _check_probability(p: float) -> None:
    if not 0.0 <= p <= 1.0:
        raise ValueError(f"p must be in [0, 1], got {p}")


def _check_positive(name: str, value: float) -> None:
    if not value > 0:
        raise ValueError(f"{name} must be > 0, got {value}")


class Distribution:
    """Base for the bundled distributions.

    Subclasses define a frozen ``Params`` dataclass and ``_draw``.
    """

    Params: ClassVar[type]

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        self._params = self.Params(*args, **kwargs)

    def __call__(self, engine: np.random.Generator, params=None):
        if params is None:
            return self._draw(engine, self._params)
        self._check_params(params)
        return self._draw(engine, params)

    def _check_params(self, params) -> None:
        if not isinstance(params, self.Params):
            raise TypeError(f"Expected {self.Params.__qualname__}, got {type(params).__name__}")

    def _draw(self, engine: np.random.Generator, params):
        raise NotImplementedError

    def param(self):
        return self._params

    def set_param(self, params) -> None:
        self._check_params(params)
        self._params = params

    def reset(self) -> None:
        """Clear cached state. The bundled distributions keep none."""

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other) and self._params == other._params

    def __hash__(self) -> int:
        return hash((type(self), self._params))

    def __repr__(self) -> str:
        fields = ", ".join(f"{k}={v!r}" for k, v in vars(self._params).items())
        return f"{type(self).__name__}({fields})"


# -- uniform -----------------------------------------------------------------


class UniformInt(Distribution):
    @dataclass(frozen=True)
    class Params:
        a: int = 0
        b: int = 2**31 - 1

    def _draw(self, engine, params):
        return int(engine.integers(params.a, params.b, endpoint=True))


class UniformReal(Distribution):
    """Uniform over ``[a, b)``."""

    @dataclass(frozen=True)
    class Params:
        a: float = 0.0
        b: float = 1.0

    def _draw(self, engine, params):
        return float(engine.uniform(params.a, params.b))


# -- Bernoulli family --------------------------------------------------------


class Bernoulli(Distribution):
    @dataclass(frozen=True)
    class Params:
        p: float = 0.5

        def __post_init__(self) -> None:
            _check_probability(self.p)

    def _draw(self, engine, params):
        return bool(engine.binomial(1, params.p))


class Binomial(Distribution):
    @dataclass(frozen=True)
    class Params:
        t: int = 1
        p: float = 0.5

        def __post_init__(self) -> None:
            if self.t < 0:
                raise ValueError(f"t must be >= 0, got {self.t}")
            _check_probability(self.p)

    def _draw(self, engine, params):
        return int(engine.binomial(params.t, params.p))


class Geometric(Distribution):
    """Number of failures before the first success."""

    @dataclass(frozen=True)
    class Params:
        p: float = 0.5

        def __post_init__(self) -> None:
            if not 0.0 < self.p <= 1.0:
                raise ValueError(f"p must be in (0, 1], got {self.p}")

    def _draw(self, engine, params):
        # numpy counts trials, including the success
        return int(engine.geometric(params.p)) - 1


class NegativeBinomial(Distribution):
    @dataclass(frozen=True)
    class Params:
        k: int = 1
        p: float = 0.5

        def __post_init__(self) -> None:
            _check_positive("k", self.k)
            if not 0.0 < self.p <= 1.0:
                raise ValueError(f"p must be in (0, 1], got {self.p}")

    def _draw(self, engine, params):
        return int(engine.negative_binomial(params.k, params.p))


# -- Poisson family ----------------------------------------------------------


class Poisson(Distribution):
    @dataclass(frozen=True)
    class Params:
        mean: float = 1.0

        def __post_init__(self) -> None:
            _check_positive("mean", self.mean)

    def _draw(self, engine, params):
        return int(engine.poisson(params.mean))


class Exponential(Distribution):
    @dataclass(frozen=True)
    class Params:
        lambd: float = 1.0  # rate

        def __post_init__(self) -> None:
            _check_positive("lambd", self.lambd)

    def _draw(self, engine, params):
        return float(engine.exponential(1.0 / params.lambd))


class Gamma(Distribution):
    @dataclass(frozen=True)
    class Params:
        alpha: float = 1.0  # shape
        beta: float = 1.0  # scale

        def __post_init__(self) -> None:
            _check_positive("alpha", self.alpha)
            _check_positive("beta", self.beta)

    def _draw(self, engine, params):
        return float(engine.gamma(params.alpha, params.beta))


class Weibull(Distribution):
    @dataclass(frozen=True)
    class Params:
        a: float = 1.0  # shape
        b: float = 1.0  # scale

        def __post_init__(self) -> None:
            _check_positive("a", self.a)
            _check_positive("b", self.b)

    def _draw(self, engine, params):
        return float(params.b * engine.weibull(params.a))


class ExtremeValue(Distribution):
    @dataclass(frozen=True)
    class Params:
        a: float = 0.0  # location
        b: float = 1.0  # scale

        def __post_init__(self) -> None:
            _check_positive("b", self.b)

    def _draw(self, engine, params):
        return float(engine.gumbel(params.a, params.b))


# -- normal family -----------------------------------------------------------


class Normal(Distribution):
    @dataclass(frozen=True)
    class Params:
        mean: float = 0.0
        stddev: float = 1.0

        def __post_init__(self) -> None:
            _check_positive("stddev", self.stddev)

    def _draw(self, engine, params):
        return float(engine.normal(params.mean, params.stddev))


class LogNormal(Distribution):
    @dataclass(frozen=True)
    class Params:
        m: float = 0.0
        s: float = 1.0

        def __post_init__(self) -> None:
            _check_positive("s", self.s)

    def _draw(self, engine, params):
        return float(engine.lognormal(params.m, params.s))


class ChiSquared(Distribution):
    @dataclass(frozen=True)
    class Params:
        n: float = 1.0

        def __post_init__(self) -> None:
            _check_positive("n", self.n)

    def _draw(self, engine, params):
        return float(engine.chisquare(params.n))


class Cauchy(Distribution):
    @dataclass(frozen=True)
    class Params:
        a: float = 0.0
        b: float = 1.0

        def __post_init__(self) -> None:
            _check_positive("b", self.b)

    def _draw(self, engine, params):
        return float(params.a + params.b * engine.standard_cauchy())


class FisherF(Distribution):
    @dataclass(frozen=True)
    class Params:
        m: float = 1.0
        n: float = 1.0

        def __post_init__(self) -> None:
            _check_positive("m", self.m)
            _check_positive("n", self.n)

    def _draw(self, engine, params):
        return float(engine.f(params.m, params.n))


class StudentT(Distribution):
    @dataclass(frozen=True)
    class Params:
        n: float = 1.0

        def __post_init__(self) -> None:
            _check_positive("n", self.n)

    def _draw(self, engine, params):
        return float(engine.standard_t(params.n))


# -- sampling ----------------------------------------------------------------


class Discrete(Distribution):
    """Index ``i`` with probability ``weights[i] / sum(weights)``."""

    @dataclass(frozen=True)
    class Params:
        weights: tuple[float, ...] = (1.0,)

        def __post_init__(self) -> None:
            object.__setattr__(self, "weights", tuple(float(w) for w in self.weights))
            if not self.weights:
                raise ValueError("weights must not be empty")
            if any(w < 0 for w in self.weights) or sum(self.weights) <= 0:
                raise ValueError("weights must be non-negative with a positive sum")

        def probabilities(self) -> np.ndarray:
            w = np.asarray(self.weights)
            return w / w.sum()

    def _draw(self, engine, params):
        return int(engine.choice(len(params.weights), p=params.probabilities()))


DISTRIBUTIONS: dict[str, type[Distribution]] = {
    "uniform_int": UniformInt,
    "uniform_real": UniformReal,
    "bernoulli": Bernoulli,
    "binomial": Binomial,
    "geometric": Geometric,
    "negative_binomial": NegativeBinomial,
    "poisson": Poisson,
    "exponential": Exponential,
    "gamma": Gamma,
    "weibull": Weibull,
    "extreme_value": ExtremeValue,
    "normal": Normal,
    "lognormal": LogNormal,
    "chi_squared": ChiSquared,
    "cauchy": Cauchy,
    "fisher_f": FisherF,
    "student_t": StudentT,
    "discrete": Discrete,
}
