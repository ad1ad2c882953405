"""Convenience functions over a process-wide default ``ThreadLocalEngine``.

    rand(10, 20)            # int in [10, 20]
    rand(0.0, 1.0)          # float in [0.0, 1.0)
    rand(Normal(5.0, 0.5))  # one draw from the given distribution
    rng = make_rng(Bernoulli, 0.75)
    rng()                   # bool, True about 75% of the time
    reseed(0)               # repeatable sequence on this thread
    reseed()                # back to an entropy seed

Every thread gets its own engine, so reseeding here never affects another
thread. Floating-point ranges are half-open: ``b`` is never returned except
through rounding, even though the bounds read like a closed interval.
"""

from __future__ import annotations

from typing import Any, Callable

import numpy as np

from easyrand.core.engine import ThreadLocalEngine

_default = ThreadLocalEngine()


def get_engine() -> np.random.Generator:
    """The calling thread's engine, created and entropy-seeded on first use."""
    return _default.get()


def reseed(value: int | None = None) -> None:
    """Reseed this thread's engine with ``value``, or with fresh entropy if omitted."""
    _default.reseed(value)


def rand(*args: Any):
    """Uniform sample from ``(a, b)`` bounds, or one draw from ``(dist[, params])``."""
    return _default.rand(*args)


def rand_int(a, b) -> int:
    """Integer in ``[a, b]`` on this thread's engine."""
    return _default.rand_int(a, b)


def rand_float(a, b) -> float:
    """Float in ``[a, b)`` on this thread's engine."""
    return _default.rand_float(a, b)


def make_rng(*args: Any, **kwargs: Any) -> Callable[[], Any]:
    """Bound generator over ``(a, b)`` or over ``(DistributionKind, *ctor_args)``."""
    return _default.make_rng(*args, **kwargs)
