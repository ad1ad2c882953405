"""Sampling primitives that take the engine explicitly.

Uniform sampling dispatches on the bounds' type: integer kinds draw from the
closed range ``[a, b]``, floating kinds from ``[a, b)``. The floating upper
bound is nominal only, matching numpy's ``uniform``.
"""

from __future__ import annotations

import numbers
import operator
from typing import Any

import numpy as np

# Single-byte and boolean-like types are not valid uniform bounds.
_EXCLUDED_TYPES = (bool, np.bool_, np.int8, np.uint8)

_INT64_MAX = int(np.iinfo(np.int64).max)


def uniform_kind(a: Any, b: Any) -> str:
    """Classify a pair of bounds as ``"int"`` or ``"float"``.

    Raises TypeError when the bounds differ in type or the type cannot be
    sampled uniformly.
    """
    if type(a) is not type(b):
        raise TypeError(
            f"rand() bounds must share a type, got {type(a).__name__} and {type(b).__name__}"
        )
    if isinstance(a, _EXCLUDED_TYPES):
        raise TypeError(f"rand() does not support {type(a).__name__} bounds")
    if isinstance(a, (int, np.integer)):
        return "int"
    if isinstance(a, (float, np.floating)):
        return "float"
    raise TypeError(f"rand() does not support {type(a).__name__} bounds")


def is_number(value: Any) -> bool:
    """True for Python and numpy numeric scalars, including bools."""
    return isinstance(value, (numbers.Number, np.bool_))


def uniform_int(engine: np.random.Generator, a, b):
    """Integer drawn uniformly from the closed range ``[a, b]``."""
    if isinstance(a, np.integer):
        return type(a)(engine.integers(a, b, endpoint=True, dtype=a.dtype))
    dtype = np.uint64 if a >= 0 and b > _INT64_MAX else np.int64
    return int(engine.integers(a, b, endpoint=True, dtype=dtype))


def uniform_float(engine: np.random.Generator, a, b):
    """Float drawn uniformly from ``[a, b)``; the result keeps the bounds' type."""
    if isinstance(a, np.float32):
        u = np.float32(engine.random(dtype=np.float32))
        return np.float32(a + (b - a) * u)
    value = engine.uniform(a, b)
    if isinstance(a, np.floating):
        return type(a)(value)
    return float(value)


def uniform(engine: np.random.Generator, a, b):
    """Uniform draw over ``[a, b]`` for integers, ``[a, b)`` for floats."""
    if uniform_kind(a, b) == "int":
        return uniform_int(engine, a, b)
    return uniform_float(engine, a, b)


def checked_int_bounds(a, b) -> tuple[int, int]:
    """Coerce bounds for the named integer entry point."""
    if isinstance(a, _EXCLUDED_TYPES) or isinstance(b, _EXCLUDED_TYPES):
        raise TypeError("rand_int() does not support bool or single-byte bounds")
    return operator.index(a), operator.index(b)


def sample(engine: np.random.Generator, dist, params=None):
    """Draw one value from ``dist``, optionally overriding its parameters for this call."""
    if params is None:
        return dist(engine)
    return dist(engine, params)
