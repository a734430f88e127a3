#!/usr/bin/env python3
"""Entry point for generating degree-preserving null networks.

Reads an edge list, randomizes it with the configured method, and writes
one edge list per null sample plus a run.json with config and diagnostics.

Usage:
    python run_randomize.py --input net.edges --output out/
    python run_randomize.py --input net.edges --output null.edges
    python run_randomize.py --input net.edges --output out/ --config config.json
    python run_randomize.py --input net.edges --output out/ --rounds 100 --samples 5
    python run_randomize.py --input net.edges --output out/ --dry-run
"""

import argparse
import json
import logging
import sys
import time
from contextlib import contextmanager
from dataclasses import asdict, replace
from pathlib import Path
from typing import Callable, Generator

from netrewire.config import (
    DEFAULT_CONFIG,
    METHODS,
    RandomizerConfig,
    config_hash,
    config_to_dict,
    load_config,
    network_hash,
    save_config,
)
from netrewire.graph import read_edge_list, write_edge_list
from netrewire.randomize import (
    RandomizationError,
    generate_null_networks,
    untouched_edge_fraction,
)
from netrewire.randomize.types import RandomizeResult
from netrewire.reproducibility import get_git_hash

log = logging.getLogger(__name__)


@contextmanager
def stage_timer(name: str) -> Generator[None, None, None]:
    """Context manager that prints stage banners with elapsed time."""
    print(f"\n=== {name} ===")
    log.info("Starting: %s", name)
    t0 = time.monotonic()
    yield
    elapsed = time.monotonic() - t0
    print(f"... done in {elapsed:.1f}s")
    log.info("Completed: %s in %.1fs", name, elapsed)


def build_config(args: argparse.Namespace) -> RandomizerConfig:
    """Load the JSON config (or defaults) and apply command-line overrides."""
    config = DEFAULT_CONFIG
    if args.config:
        config = load_config(args.config)

    overrides = {}
    if args.rounds is not None:
        overrides["rounds"] = args.rounds
    if args.method is not None:
        overrides["method"] = args.method
    if args.seed is not None:
        overrides["seed"] = args.seed
    if args.samples is not None:
        overrides["n_samples"] = args.samples
    if args.limit is not None:
        overrides["swap"] = replace(config.swap, limit=args.limit)
    return replace(config, **overrides) if overrides else config


def _output_paths(
    output: Path, n_samples: int
) -> tuple[Callable[[int], Path], Path]:
    """Resolve where null samples and run.json go.

    An output path with a file suffix (e.g. `null.edges`) that is not an
    existing directory names a single edge list; run.json is written next
    to it as `null.run.json`. Anything else is a directory that receives
    `null_0000.edges`, ... plus `run.json`.
    """
    if output.suffix and not output.is_dir():
        if n_samples != 1:
            raise ValueError(
                f"--output {output} names one edge list but {n_samples} "
                f"samples were requested; pass a directory instead"
            )
        output.parent.mkdir(parents=True, exist_ok=True)
        return (lambda sample: output), output.with_suffix(".run.json")

    output.mkdir(parents=True, exist_ok=True)
    return (
        (lambda sample: output / f"null_{sample:04d}.edges"),
        output / "run.json",
    )


def run_pipeline(
    input_path: Path, output: Path, config: RandomizerConfig
) -> Path:
    """Randomize the input network and write all null samples.

    `output` is either a directory or, for a single sample, an edge list
    path (see _output_paths).

    Returns:
        Path to the written run.json.
    """
    pipeline_start = time.monotonic()
    sample_path, run_path = _output_paths(output, config.n_samples)

    with stage_timer("Loading Network"):
        network = read_edge_list(input_path)
        log.info(
            "Network: n=%d, edges=%d, connected=%s",
            network.size(),
            network.number_of_edges(),
            network.is_connected(),
        )

    samples = []
    with stage_timer(f"Randomization ({config.method})"):
        for sample, null, diagnostics in generate_null_networks(network, config):
            out_path = sample_path(sample)
            write_edge_list(null, out_path)

            if isinstance(diagnostics, RandomizeResult):
                moved = diagnostics.accepted_swaps
            else:
                moved = diagnostics.accepted
            entry = asdict(diagnostics)
            entry["path"] = out_path.name
            entry["untouched_edge_fraction"] = untouched_edge_fraction(
                network.number_of_edges(), moved
            )
            samples.append(entry)

    run_info = {
        "input": str(input_path),
        "input_hash": network_hash(network),
        "config": config_to_dict(config),
        "config_hash": config_hash(config),
        "code_hash": get_git_hash(),
        "samples": samples,
    }
    run_path.write_text(json.dumps(run_info, indent=2, sort_keys=True))

    total_elapsed = time.monotonic() - pipeline_start
    print(f"\n{'=' * 60}")
    print(f"Randomization complete in {total_elapsed:.1f}s")
    print(f"  Samples: {len(samples)}")
    print(f"  Output:  {output}")
    print(f"  Run:     {run_path}")
    print(f"{'=' * 60}")

    return run_path


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Generate degree-preserving null networks"
    )
    parser.add_argument(
        "--input", type=str, required=True, help="Input edge list (u v [weight])"
    )
    parser.add_argument(
        "--output",
        type=str,
        required=True,
        help="Output directory, or an edge list path for a single sample",
    )
    parser.add_argument(
        "--config", type=str, default=None, help="Randomizer config JSON file"
    )
    parser.add_argument("--rounds", type=int, default=None)
    parser.add_argument("--limit", type=int, default=None)
    parser.add_argument("--method", choices=METHODS, default=None)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--samples", type=int, default=None)
    parser.add_argument(
        "--save-config",
        type=str,
        default=None,
        help="Write the resolved config (file plus overrides) to this JSON file",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show the run plan without randomizing",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable DEBUG-level logging",
    )
    args = parser.parse_args()

    log_level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    input_path = Path(args.input)
    if not input_path.exists():
        print(f"Error: input file not found: {input_path}", file=sys.stderr)
        sys.exit(1)
    if args.config and not Path(args.config).exists():
        print(f"Error: config file not found: {args.config}", file=sys.stderr)
        sys.exit(1)

    try:
        config = build_config(args)
    except ValueError as exc:
        print(f"Error: invalid config: {exc}", file=sys.stderr)
        sys.exit(1)

    print(f"Config hash: {config_hash(config)}")
    print(f"Method:      {config.method}")
    if config.method == "connected":
        print(f"Rounds:      {config.rounds}, limit={config.swap.limit}, "
              f"limit_step={config.swap.limit_step}")
    else:
        print(f"Repeats:     {config.repeats_per_link} per edge")
    print(f"Samples:     {config.n_samples}")
    print(f"Seed:        {config.seed}")

    if args.save_config:
        print(f"Saved config: {save_config(config, args.save_config)}")

    if args.dry_run:
        print(f"\n[dry-run] Would write {config.n_samples} null edge list(s) "
              f"and run.json to {args.output}. Exiting.")
        return

    try:
        run_pipeline(input_path, Path(args.output), config)
    except (RandomizationError, ValueError):
        log.exception("Randomization failed")
        sys.exit(1)


if __name__ == "__main__":
    main()
