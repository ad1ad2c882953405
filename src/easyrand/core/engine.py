"""Per-thread engine context.

A ``ThreadLocalEngine`` hands each thread its own numpy Generator, created
and seeded from OS entropy the first time that thread asks for it. Reseeding
overwrites the bit generator's state in place, so the Generator object a
thread holds stays valid across reseeds.
"""

from __future__ import annotations

import threading
from typing import Any, Callable

import numpy as np

from easyrand.core.config import EngineConfig
from easyrand.core.distributions import Sampler
from easyrand.core.logs import get_logger
from easyrand.core.sampling import (
    checked_int_bounds,
    is_number,
    sample,
    uniform,
    uniform_int,
    uniform_kind,
)

logger = get_logger(__name__)


class ThreadLocalEngine:
    """One numpy Generator per thread, plus the sampling calls bound to it."""

    def __init__(self, config: EngineConfig | None = None) -> None:
        self.config = config or EngineConfig()
        self._local = threading.local()

    def get(self) -> np.random.Generator:
        """Return the calling thread's Generator, creating it on first use."""
        engine = getattr(self._local, "engine", None)
        if engine is None:
            engine = np.random.Generator(self.config.make_bit_generator())
            self._local.engine = engine
            logger.debug(
                "engine_created",
                thread=threading.get_ident(),
                bit_generator=self.config.bit_generator,
            )
        return engine

    def reseed(self, value: int | None = None) -> None:
        """Reseed the calling thread's engine; ``None`` draws fresh entropy."""
        engine = self.get()
        engine.bit_generator.state = self.config.make_bit_generator(value).state
        logger.debug(
            "engine_reseeded",
            thread=threading.get_ident(),
            seed="entropy" if value is None else value,
        )

    def rand(self, *args: Any):
        """``rand(a, b)`` samples uniformly; ``rand(dist[, params])`` samples ``dist``."""
        if not args:
            raise TypeError("rand() takes bounds (a, b) or a distribution")
        if is_number(args[0]):
            if len(args) != 2:
                raise TypeError(f"rand() takes exactly two bounds ({len(args)} given)")
            return uniform(self.get(), args[0], args[1])
        if len(args) > 2:
            raise TypeError(f"rand() takes a distribution and optional params ({len(args)} given)")
        return sample(self.get(), *args)

    def rand_int(self, a, b) -> int:
        """Integer in ``[a, b]``; bounds must be integral."""
        a, b = checked_int_bounds(a, b)
        return uniform_int(self.get(), a, b)

    def rand_float(self, a, b) -> float:
        """Float in ``[a, b)``; bounds are coerced to float."""
        return uniform(self.get(), float(a), float(b))

    def sample(self, dist: Sampler, params=None):
        """One draw from ``dist``, with ``params`` overriding for this call only."""
        return sample(self.get(), dist, params)

    def make_rng(self, *args: Any, **kwargs: Any) -> Callable[[], Any]:
        """Return a zero-argument callable drawing repeatedly.

        ``make_rng(a, b)`` captures the bounds; ``make_rng(Kind, *ctor_args)``
        builds one ``Kind`` instance owned by the callable. Either way the
        engine used is that of the thread invoking the callable.
        """
        if args and isinstance(args[0], type) and not issubclass(args[0], (int, float, np.generic)):
            dist = args[0](*args[1:], **kwargs)

            def draw_from_dist():
                return sample(self.get(), dist)

            return draw_from_dist

        if kwargs or len(args) != 2:
            raise TypeError("make_rng() takes two bounds or a distribution type and its arguments")
        a, b = args
        uniform_kind(a, b)

        def draw_uniform():
            return uniform(self.get(), a, b)

        return draw_uniform
