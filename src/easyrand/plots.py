"""Histogram figures for sample batches."""

from __future__ import annotations

from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np

MAX_UNIT_BINS = 1000


def plot_histogram(samples, output: Path, title: str = "Samples", bins: int | None = None) -> Path:
    """Save a histogram of ``samples``.

    Integer samples get one bin per value unless ``bins`` is given or the
    observed range spans more than ``MAX_UNIT_BINS`` values.
    """
    values = np.asarray(samples)
    if bins is None:
        bins = 50
        if values.dtype.kind in "iub" and values.size:
            lo, hi = int(values.min()), int(values.max())
            if hi - lo + 1 <= MAX_UNIT_BINS:
                bins = np.arange(lo, hi + 2) - 0.5

    fig, ax = plt.subplots(figsize=(10, 6))
    ax.hist(values.astype(float), bins=bins, color="tab:blue", alpha=0.8)
    ax.set_xlabel("Value")
    ax.set_ylabel("Count")
    ax.set_title(f"{title} (n={values.size})")
    ax.grid(True, alpha=0.3)

    out = Path(output)
    out.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(out, dpi=150, bbox_inches="tight")
    plt.close(fig)
    return out
