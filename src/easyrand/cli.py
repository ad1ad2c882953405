"""Minimal CLI: sample, hist, demo."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import numpy as np

from easyrand.core.config import BIT_GENERATORS, EngineConfig
from easyrand.core.distributions import DISTRIBUTIONS, Bernoulli, Discrete, Normal
from easyrand.core.engine import ThreadLocalEngine


def _parse_number(s: str) -> int | float:
    """Parse a CLI number: int unless it looks like a float."""
    s = s.strip()
    if any(c in s.lower() for c in (".", "e", "inf")):
        return float(s)
    return int(s)


def _parse_number_list(s: str) -> list[int | float]:
    """Parse comma-separated number list from CLI string."""
    return [_parse_number(x) for x in s.split(",") if x.strip()]


def _build_source(args: argparse.Namespace, engine: ThreadLocalEngine):
    """Return (bound generator, description) for the sampling arguments."""
    if args.dist:
        kind = DISTRIBUTIONS[args.dist]
        ctor_args = _parse_number_list(args.args) if args.args else []
        if kind is Discrete:
            ctor_args = [tuple(ctor_args)] if ctor_args else []
        return engine.make_rng(kind, *ctor_args), f"{args.dist}({args.args or ''})"

    low, high = _parse_number(args.low), _parse_number(args.high)
    if isinstance(low, float) or isinstance(high, float):
        low, high = float(low), float(high)
    return engine.make_rng(low, high), f"uniform[{low}, {high}]"


def _draw(args: argparse.Namespace) -> tuple[list, str, ThreadLocalEngine]:
    engine = ThreadLocalEngine(EngineConfig(bit_generator=args.bit_generator))
    if args.seed is not None:
        engine.reseed(args.seed)
    rng, source = _build_source(args, engine)
    return [rng() for _ in range(args.n)], source, engine


def cmd_sample(args: argparse.Namespace) -> None:
    """Print samples, optionally writing them to JSON."""
    samples, source, engine = _draw(args)
    for s in samples:
        print(s)

    if args.output:
        from easyrand.export import write_samples

        write_samples(
            Path(args.output),
            samples,
            seed=args.seed,
            bit_generator=engine.config.bit_generator,
            source=source,
        )
        print(f"Wrote {len(samples)} samples to {args.output}", file=sys.stderr)


def cmd_hist(args: argparse.Namespace) -> None:
    """Draw samples and save a histogram."""
    from easyrand.plots import plot_histogram

    samples, source, _ = _draw(args)
    out = plot_histogram(samples, Path(args.output), title=source, bins=args.bins)
    print(f"Saved histogram of {len(samples)} samples to {out}")


def cmd_demo(args: argparse.Namespace) -> None:
    """Walk through the library's calls."""
    engine = ThreadLocalEngine()

    print("rand(0, 200):")
    for _ in range(5):
        print(f"  {engine.rand(0, 200)}")

    print("rand(0.0, 200.0):")
    for _ in range(5):
        print(f"  {engine.rand(0.0, 200.0)}")

    print("rand(float32(0), float32(200)):")
    for _ in range(5):
        print(f"  {engine.rand(np.float32(0), np.float32(200))}")

    engine.reseed(args.seed)
    print(f"make_rng(float32(0), float32(1)) after reseed({args.seed}):")
    rngf = engine.make_rng(np.float32(0), np.float32(1))
    for _ in range(5):
        print(f"  {rngf()}")

    engine.reseed()
    print("rand(Normal()) after reseed():")
    normal = Normal()
    for _ in range(5):
        print(f"  {engine.rand(normal)}")

    print("make_rng(Bernoulli, 0.75):")
    bern = engine.make_rng(Bernoulli, 0.75)
    for _ in range(5):
        print(f"  {bern()}")


def _add_sampling_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--low", type=str, default="0", help="Lower bound (uniform)")
    p.add_argument("--high", type=str, default="1.0", help="Upper bound (uniform)")
    p.add_argument("--dist", type=str, default=None, choices=sorted(DISTRIBUTIONS),
                   help="Distribution to sample instead of uniform")
    p.add_argument("--args", type=str, default=None,
                   help="Comma-separated distribution constructor arguments")
    p.add_argument("-n", type=int, default=10, help="Number of samples")
    p.add_argument("--seed", type=int, default=None, help="Seed (default: OS entropy)")
    p.add_argument("--bit-generator", type=str, default="PCG64", choices=sorted(BIT_GENERATORS),
                   help="numpy bit generator backing the engine")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="easyrand",
        description="Random numbers from a thread-local engine",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command")

    # sample
    p_sample = sub.add_parser("sample", help="Print samples")
    _add_sampling_args(p_sample)
    p_sample.add_argument("--output", type=str, default=None, help="Write samples to JSON")

    # hist
    p_hist = sub.add_parser("hist", help="Save a histogram of samples")
    _add_sampling_args(p_hist)
    p_hist.add_argument("--bins", type=int, default=None, help="Histogram bins")
    p_hist.add_argument("--output", type=str, default="histogram.png", help="Output PNG path")

    # demo
    p_demo = sub.add_parser("demo", help="Show typical usage")
    p_demo.add_argument("--seed", type=int, default=0, help="Seed for the repeatable section")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    dispatch = {
        "sample": cmd_sample,
        "hist": cmd_hist,
        "demo": cmd_demo,
    }
    dispatch[args.command](args)
