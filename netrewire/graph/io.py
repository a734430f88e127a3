"""Reading and writing networks as edge lists and as sparse npz archives."""

import json
import logging
from datetime import datetime, timezone
from pathlib import Path

import numpy as np
import scipy.sparse

from netrewire.config.hashing import network_hash
from netrewire.graph.network import Network

log = logging.getLogger(__name__)


def read_edge_list(path: Path | str, n: int | None = None) -> Network:
    """Read a whitespace-separated `u v [weight]` edge list.

    Blank lines and lines starting with '#' are skipped. Node ids must be
    non-negative integers; the node count defaults to max id + 1.

    Raises:
        ValueError: On a malformed line, a self-loop, or an id >= n.
    """
    edges: list[tuple[int, int, float]] = []
    max_id = -1
    with open(path) as f:
        for lineno, line in enumerate(f, start=1):
            stripped = line.strip()
            if not stripped or stripped.startswith("#"):
                continue
            parts = stripped.split()
            if len(parts) not in (2, 3):
                raise ValueError(
                    f"{path}:{lineno}: expected 'u v [weight]', got {stripped!r}"
                )
            try:
                u, v = int(parts[0]), int(parts[1])
                weight = float(parts[2]) if len(parts) == 3 else 1.0
            except ValueError as exc:
                raise ValueError(f"{path}:{lineno}: {exc}") from exc
            if u < 0 or v < 0:
                raise ValueError(f"{path}:{lineno}: negative node id")
            if u == v:
                raise ValueError(f"{path}:{lineno}: self-loop on node {u}")
            if weight == 0.0:
                raise ValueError(f"{path}:{lineno}: zero weight means no edge")
            edges.append((u, v, weight))
            max_id = max(max_id, u, v)

    if n is None:
        n = max_id + 1
    elif max_id >= n:
        raise ValueError(f"Node id {max_id} does not fit in n={n} nodes")

    network = Network.from_edges(n, edges)
    log.info(
        "Read %s: n=%d, edges=%d", path, n, network.number_of_edges()
    )
    return network


def write_edge_list(network: Network, path: Path | str) -> None:
    """Write one `u v weight` line per undirected edge, sorted.

    Weights are written with repr() so they read back bit-identical.
    """
    with open(path, "w") as f:
        f.write(f"# n={network.size()} edges={network.number_of_edges()}\n")
        for u, v, w in sorted(network.edges()):
            f.write(f"{u} {v} {float(w)!r}\n")


def save_network(
    network: Network, directory: Path, extra: dict | None = None
) -> Path:
    """Save a network as adjacency.npz plus metadata.json under `directory`.

    Args:
        network: Network to store.
        directory: Target directory (created if missing).
        extra: Additional JSON-serializable metadata to record.

    Returns:
        The directory path.
    """
    directory.mkdir(parents=True, exist_ok=True)
    scipy.sparse.save_npz(str(directory / "adjacency.npz"), network.to_sparse())

    metadata = {
        "n": network.size(),
        "edges": network.number_of_edges(),
        "network_hash": network_hash(network),
        "degrees": network.degrees().tolist(),
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
    if extra:
        metadata.update(extra)
    with open(directory / "metadata.json", "w") as f:
        json.dump(metadata, f, indent=2)

    log.info("Network saved at %s", directory)
    return directory


def load_network(directory: Path) -> Network | None:
    """Load a network saved by save_network, or None if files are missing."""
    for fname in ("adjacency.npz", "metadata.json"):
        if not (directory / fname).exists():
            return None

    adjacency = scipy.sparse.load_npz(str(directory / "adjacency.npz"))
    network = Network.from_sparse(adjacency)

    with open(directory / "metadata.json") as f:
        metadata = json.load(f)
    if not np.array_equal(network.degrees(), np.array(metadata["degrees"])):
        raise ValueError(
            f"Degree sequence in {directory} does not match its metadata"
        )

    log.info("Network loaded from %s", directory)
    return network
