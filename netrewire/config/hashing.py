"""Deterministic hashing of configs and networks using SHA-256 over sorted JSON."""

import hashlib
import json
from dataclasses import asdict
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from netrewire.graph.network import Network


def _remove_nested(d: dict[str, Any], field_path: str) -> None:
    """Remove a dotted-path key from a nested dict.

    Example: _remove_nested(d, "swap.limit") removes d["swap"]["limit"].
    Single-level paths like "seed" remove d["seed"].
    """
    parts = field_path.split(".")
    current = d
    for part in parts[:-1]:
        if part not in current or not isinstance(current[part], dict):
            return
        current = current[part]
    current.pop(parts[-1], None)


def _digest(payload: Any) -> str:
    serialized = json.dumps(
        payload,
        sort_keys=True,
        ensure_ascii=True,
        separators=(",", ":"),
        indent=None,
    )
    return hashlib.sha256(serialized.encode("utf-8")).hexdigest()[:16]


def config_hash(config: Any, exclude_fields: list[str] | None = None) -> str:
    """Deterministic SHA-256 hash of a config object.

    Args:
        config: Any dataclass instance (or sub-config).
        exclude_fields: Optional list of dotted field paths to exclude.

    Returns:
        First 16 hex characters of the SHA-256 hash.
    """
    d = asdict(config)
    if exclude_fields:
        for field_path in exclude_fields:
            _remove_nested(d, field_path)
    return _digest(d)


def null_config_hash(config: Any) -> str:
    """Hash of the parameters that shape a null network.

    Seed, sample count, description and tags are excluded: the seed is part
    of the cache key separately and the rest never changes the output.
    """
    return config_hash(
        config, exclude_fields=["seed", "n_samples", "description", "tags"]
    )


def network_hash(network: "Network") -> str:
    """Hash of a network's node count and sorted weighted edge list."""
    edges = sorted((u, v, float(w)) for u, v, w in network.edges())
    return _digest({"n": network.size(), "edges": edges})
