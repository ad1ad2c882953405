"""Engine configuration dataclasses."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

BIT_GENERATORS: dict[str, type[np.random.BitGenerator]] = {
    "PCG64": np.random.PCG64,
    "PCG64DXSM": np.random.PCG64DXSM,
    "MT19937": np.random.MT19937,
    "Philox": np.random.Philox,
    "SFC64": np.random.SFC64,
}


@dataclass(frozen=True)
class EngineConfig:
    """Parameters defining the per-thread engine."""

    bit_generator: str = "PCG64"

    def __post_init__(self) -> None:
        if self.bit_generator not in BIT_GENERATORS:
            raise ValueError(f"Unknown bit generator: {self.bit_generator}")

    def make_bit_generator(self, seed: int | None = None) -> np.random.BitGenerator:
        """Build a bit generator; ``seed=None`` draws from OS entropy."""
        return BIT_GENERATORS[self.bit_generator](seed)
