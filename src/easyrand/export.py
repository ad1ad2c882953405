"""Atomic write helpers for sample batches."""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path


def atomic_write(path: Path, data: str | bytes) -> None:
    """Write data to a temp file, fsync, then rename into place."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    mode = "wb" if isinstance(data, bytes) else "w"

    fd, tmp_path = tempfile.mkstemp(dir=path.parent, suffix=".tmp")
    try:
        with os.fdopen(fd, mode) as f:
            f.write(data)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp_path, path)
    except BaseException:
        try:
            os.unlink(tmp_path)
        except OSError:
            pass
        raise


def write_samples(
    path: Path,
    samples: list,
    seed: int | None,
    bit_generator: str,
    source: str,
) -> None:
    """Store a sample batch with enough metadata to regenerate it."""
    record = {
        "seed": seed,
        "bit_generator": bit_generator,
        "source": source,
        "samples": list(samples),
    }
    atomic_write(path, json.dumps(record, indent=2, default=_json_default))


def _json_default(obj):
    """Handle numpy types in JSON serialization."""
    import numpy as np

    if isinstance(obj, np.bool_):
        return bool(obj)
    if isinstance(obj, np.integer):
        return int(obj)
    if isinstance(obj, np.floating):
        return float(obj)
    raise TypeError(f"Object of type {type(obj)} is not JSON serializable")
