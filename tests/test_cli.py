"""Tests for the run_randomize.py entry point."""

import argparse
import json
from pathlib import Path

import pytest

from netrewire.config import DEFAULT_CONFIG, RandomizerConfig, config_to_json
from netrewire.graph.io import read_edge_list
from run_randomize import build_config, run_pipeline


def _args(**overrides) -> argparse.Namespace:
    values = {
        "config": None,
        "rounds": None,
        "limit": None,
        "method": None,
        "seed": None,
        "samples": None,
    }
    values.update(overrides)
    return argparse.Namespace(**values)


def _write_ring(path: Path, n: int = 30) -> None:
    lines = [f"{i} {(i + d) % n}" for i in range(n) for d in (1, 2)]
    path.write_text("\n".join(lines) + "\n")


class TestBuildConfig:
    """Config file plus command-line overrides."""

    def test_defaults(self) -> None:
        assert build_config(_args()) == DEFAULT_CONFIG

    def test_overrides(self) -> None:
        cfg = build_config(_args(rounds=3, limit=4, method="simple", seed=1, samples=2))
        assert cfg.rounds == 3
        assert cfg.swap.limit == 4
        assert cfg.method == "simple"
        assert cfg.seed == 1
        assert cfg.n_samples == 2

    def test_config_file(self, tmp_path: Path) -> None:
        path = tmp_path / "cfg.json"
        path.write_text(config_to_json(RandomizerConfig(rounds=4)))
        assert build_config(_args(config=str(path))).rounds == 4

    def test_invalid_override(self) -> None:
        with pytest.raises(ValueError):
            build_config(_args(rounds=-2))

    def test_bad_config_file_is_value_error(self, tmp_path: Path) -> None:
        path = tmp_path / "cfg.json"
        path.write_text('{"roundz": 4}')
        with pytest.raises(ValueError, match="cfg.json"):
            build_config(_args(config=str(path)))


class TestRunPipeline:
    """Full run from edge list to null edge lists and run.json."""

    def test_writes_samples_and_run_info(self, tmp_path: Path) -> None:
        input_path = tmp_path / "ring.edges"
        _write_ring(input_path)
        out = tmp_path / "out"
        config = build_config(_args(rounds=2, limit=5, samples=2))

        run_path = run_pipeline(input_path, out, config)

        info = json.loads(run_path.read_text())
        assert info["config"]["rounds"] == 2
        assert len(info["samples"]) == 2
        original = read_edge_list(input_path)
        for entry in info["samples"]:
            null = read_edge_list(out / entry["path"], n=original.size())
            assert null.is_connected()
            assert (null.degrees() == original.degrees()).all()
            assert 0.0 <= entry["untouched_edge_fraction"] <= 1.0
            assert len(entry["tries_per_switch"]) == 2

    def test_simple_method(self, tmp_path: Path) -> None:
        input_path = tmp_path / "ring.edges"
        _write_ring(input_path)
        config = build_config(_args(method="simple"))
        run_path = run_pipeline(input_path, tmp_path / "out", config)
        info = json.loads(run_path.read_text())
        assert info["samples"][0]["accepted"] > 0

    def test_single_edge_list_output(self, tmp_path: Path) -> None:
        input_path = tmp_path / "ring.edges"
        _write_ring(input_path)
        out = tmp_path / "nulls" / "null.edges"
        config = build_config(_args(rounds=1, limit=5))

        run_path = run_pipeline(input_path, out, config)

        assert run_path == tmp_path / "nulls" / "null.run.json"
        info = json.loads(run_path.read_text())
        assert info["samples"][0]["path"] == "null.edges"
        original = read_edge_list(input_path)
        null = read_edge_list(out, n=original.size())
        assert (null.degrees() == original.degrees()).all()

    def test_single_edge_list_rejects_many_samples(self, tmp_path: Path) -> None:
        input_path = tmp_path / "ring.edges"
        _write_ring(input_path)
        config = build_config(_args(samples=2))
        with pytest.raises(ValueError, match="pass a directory"):
            run_pipeline(input_path, tmp_path / "null.edges", config)
        assert not (tmp_path / "null.edges").exists()
