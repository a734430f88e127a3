"""Mutable undirected weighted network with O(1) uniform neighbor sampling.

Nodes are the integers 0..n-1 and the node count never changes. A weight of
0.0 means "no edge". Each node keeps a weight map keyed by neighbor plus an
indexable neighbor list (with a slot map for O(1) swap-removal), so a uniform
random neighbor is one integer draw.
"""

from collections.abc import Iterable, Iterator

import numpy as np
import scipy.sparse
from scipy.sparse.csgraph import connected_components

EMPTY = 0.0


class Network:
    """Simple undirected graph: no self-loops, at most one weight per node pair."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError(f"Node count must be non-negative, got {n}")
        self._weights: list[dict[int, float]] = [{} for _ in range(n)]
        self._neighbors: list[list[int]] = [[] for _ in range(n)]
        self._slots: list[dict[int, int]] = [{} for _ in range(n)]

    @classmethod
    def from_edges(
        cls,
        n: int,
        edges: Iterable[tuple[int, int] | tuple[int, int, float]],
    ) -> "Network":
        """Build a network from (u, v) or (u, v, weight) tuples.

        Unweighted edges get weight 1.0. A repeated pair overwrites the
        earlier weight.
        """
        net = cls(n)
        for edge in edges:
            u, v = int(edge[0]), int(edge[1])
            weight = float(edge[2]) if len(edge) > 2 else 1.0
            net.set(u, v, weight)
        return net

    @classmethod
    def from_sparse(cls, adjacency: scipy.sparse.spmatrix) -> "Network":
        """Build a network from a symmetric sparse adjacency matrix.

        Only the upper triangle is read; the diagonal must be empty.
        """
        n, m = adjacency.shape
        if n != m:
            raise ValueError(f"Adjacency must be square, got {(n, m)}")
        if adjacency.diagonal().any():
            raise ValueError("Adjacency has self-loops on the diagonal")
        upper = scipy.sparse.triu(adjacency, k=1).tocoo()
        return cls.from_edges(
            n, zip(upper.row.tolist(), upper.col.tolist(), upper.data.tolist())
        )

    def size(self) -> int:
        return len(self._weights)

    def __len__(self) -> int:
        return len(self._weights)

    def _check_node(self, u: int) -> None:
        if not 0 <= u < len(self._weights):
            raise IndexError(f"Node {u} out of range [0, {len(self._weights)})")

    def get(self, u: int, v: int) -> float:
        """Weight of edge (u, v), or 0.0 when absent."""
        self._check_node(u)
        self._check_node(v)
        return self._weights[u].get(v, EMPTY)

    def has_edge(self, u: int, v: int) -> bool:
        self._check_node(u)
        self._check_node(v)
        return v in self._weights[u]

    def set(self, u: int, v: int, weight: float) -> None:
        """Create, update, or (weight == 0) remove edge (u, v) symmetrically."""
        self._check_node(u)
        self._check_node(v)
        if u == v:
            raise ValueError(f"Self-loop on node {u} is not allowed")
        if weight == EMPTY:
            self._unlink(u, v)
            self._unlink(v, u)
        else:
            self._link(u, v, weight)
            self._link(v, u, weight)

    def _link(self, u: int, v: int, weight: float) -> None:
        if v not in self._weights[u]:
            self._slots[u][v] = len(self._neighbors[u])
            self._neighbors[u].append(v)
        self._weights[u][v] = weight

    def _unlink(self, u: int, v: int) -> None:
        if self._weights[u].pop(v, None) is None:
            return
        # Swap-remove: move the last neighbor into the freed slot
        slot = self._slots[u].pop(v)
        last = self._neighbors[u].pop()
        if last != v:
            self._neighbors[u][slot] = last
            self._slots[u][last] = slot

    def degree(self, u: int) -> int:
        return len(self._neighbors[u])

    def degrees(self) -> np.ndarray:
        """Degree of every node as an int64 array of length n."""
        return np.array([len(nbrs) for nbrs in self._neighbors], dtype=np.int64)

    def neighbors(self, u: int) -> Iterator[tuple[int, float]]:
        """Yield (neighbor, weight) pairs of u."""
        weights = self._weights[u]
        for v in self._neighbors[u]:
            yield v, weights[v]

    def random_neighbor(self, u: int, rng: np.random.Generator) -> int:
        """Uniformly sample one neighbor of u."""
        nbrs = self._neighbors[u]
        if not nbrs:
            raise ValueError(f"Node {u} has no neighbors to sample")
        return nbrs[int(rng.integers(len(nbrs)))]

    def number_of_edges(self) -> int:
        return sum(len(nbrs) for nbrs in self._neighbors) // 2

    def edges(self) -> Iterator[tuple[int, int, float]]:
        """Yield each undirected edge once as (u, v, weight) with u < v."""
        for u, weights in enumerate(self._weights):
            for v in self._neighbors[u]:
                if u < v:
                    yield u, v, weights[v]

    def copy(self) -> "Network":
        """Full copy of adjacency, weights, and neighbor ordering."""
        clone = Network(0)
        clone._weights = [dict(w) for w in self._weights]
        clone._neighbors = [list(nbrs) for nbrs in self._neighbors]
        clone._slots = [dict(s) for s in self._slots]
        return clone

    def restore(self, backup: "Network") -> None:
        """Overwrite this network's state with a copy of `backup`."""
        if backup.size() != self.size():
            raise ValueError(
                f"Backup has {backup.size()} nodes, network has {self.size()}"
            )
        self._weights = [dict(w) for w in backup._weights]
        self._neighbors = [list(nbrs) for nbrs in backup._neighbors]
        self._slots = [dict(s) for s in backup._slots]

    def to_sparse(self) -> scipy.sparse.csr_matrix:
        """Symmetric CSR adjacency matrix of shape (n, n)."""
        n = self.size()
        rows: list[int] = []
        cols: list[int] = []
        data: list[float] = []
        for u, v, w in self.edges():
            rows.extend((u, v))
            cols.extend((v, u))
            data.extend((w, w))
        return scipy.sparse.csr_matrix(
            (
                np.asarray(data, dtype=np.float64),
                (np.asarray(rows, dtype=np.int64), np.asarray(cols, dtype=np.int64)),
            ),
            shape=(n, n),
        )

    def is_connected(self) -> bool:
        """Exact check that the whole network is a single component."""
        if self.size() <= 1:
            return True
        n_components, _ = connected_components(self.to_sparse(), directed=False)
        return n_components == 1

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Network):
            return NotImplemented
        return self._weights == other._weights

    def __repr__(self) -> str:
        return f"Network(n={self.size()}, edges={self.number_of_edges()})"
