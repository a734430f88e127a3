"""Flat list of undirected edges for O(1) uniform edge selection.

The index is a working cache over a Network: entries are overwritten in
place when a swap changes an edge's endpoints and are never reordered or
removed, since swaps keep the edge count fixed. Orientation of an entry is
arbitrary after the first swap; only the Network is authoritative.
"""

import numpy as np

from netrewire.graph.network import Network


class EdgeIndex:
    """Indexable sequence of (u, v) edge endpoint pairs."""

    def __init__(self, edges: list[tuple[int, int]]) -> None:
        self._edges = edges

    @classmethod
    def from_network(cls, network: Network) -> "EdgeIndex":
        """Enumerate each undirected edge once, smaller node id first."""
        return cls([(u, v) for u, v, _ in network.edges()])

    def __len__(self) -> int:
        return len(self._edges)

    def __getitem__(self, index: int) -> tuple[int, int]:
        return self._edges[index]

    def sample_pair(self, rng: np.random.Generator) -> tuple[int, int]:
        """Draw two indices uniformly with replacement; they may coincide."""
        m = len(self._edges)
        if m == 0:
            raise ValueError("Cannot sample from an empty edge index")
        return int(rng.integers(m)), int(rng.integers(m))

    def sample_two_distinct(self, rng: np.random.Generator) -> tuple[int, int]:
        """Draw two indices uniformly, redrawing until they differ."""
        if len(self._edges) < 2:
            raise ValueError(
                f"Need at least 2 edges to draw distinct indices, "
                f"have {len(self._edges)}"
            )
        while True:
            first, second = self.sample_pair(rng)
            if first != second:
                return first, second

    def replace(self, index: int, u: int, v: int) -> None:
        """Overwrite entry `index` with edge (u, v)."""
        self._edges[index] = (u, v)

    def edge_set(self) -> frozenset[tuple[int, int]]:
        """All entries as orientation-free (min, max) pairs."""
        return frozenset((min(u, v), max(u, v)) for u, v in self._edges)
