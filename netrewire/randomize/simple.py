"""Configuration model for simple graphs via Markov-chain edge swaps.

Rather than a stub-matching construction, pairs of edges are picked
uniformly at random and their end nodes exchanged: edges AB and CD become
AD and CB when neither of those already exists. Like any MCMC sampler the
result is a uniform, independent draw only in the limit of infinitely many
repeats; in practice a large number of repeats is used.

Why the limit is uniform: consider the meta-graph whose nodes are all simple
graphs with the input's degree sequence, with an edge from A to B when one
swap turns A into B. From any state, every legal swap is proposed with
probability 1/L^2 (L = number of edges, constant along the chain), and a
failed proposal is a self-transition. The transition matrix is therefore
symmetric, every state has total out-probability 1, and the meta-graph is
connected, so the stationary distribution of the walk is uniform.

How many repeats? Each edge should move at least a few times. After `s`
accepted swaps the expected number of untouched edges is
L * (1 - 2/L)**s (see untouched_edge_fraction). Acceptance is high for large
sparse networks and drops for dense or fat-tailed ones.
"""

import logging

import numpy as np

from netrewire.graph.edge_index import EdgeIndex
from netrewire.graph.network import Network

log = logging.getLogger(__name__)


def conf_model_simple(
    network: Network, rng: np.random.Generator, repeats: int
) -> int:
    """Run `repeats` edge-swap attempts on `network` in place.

    Self-loops and multi-edges are never created, not even transiently.
    No connectivity guarantee is given.

    Args:
        network: Network to randomize (mutated).
        rng: numpy random Generator; the only source of randomness.
        repeats: Number of swap attempts.

    Returns:
        Number of accepted swaps.

    Raises:
        ValueError: If the network has no edges or repeats is negative.
    """
    if repeats < 0:
        raise ValueError(f"repeats must be >= 0, got {repeats}")
    index = EdgeIndex.from_network(network)
    if len(index) == 0:
        raise ValueError("Cannot randomize a network without edges")

    accepted = 0
    for _ in range(repeats):
        idx1, idx2 = index.sample_pair(rng)
        if idx1 == idx2:
            continue

        a, b = index[idx1]
        c, d = index[idx2]
        # Shared endpoint would produce a self-loop or a no-op
        if a == c or a == d or b == c or b == d:
            continue

        if rng.integers(2) == 0:
            a, b = b, a

        # New edges: (a, d) and (b, c)
        if network.has_edge(a, d) or network.has_edge(b, c):
            continue

        w_ab = network.get(a, b)
        w_cd = network.get(c, d)
        # Randomize which old weight lands on which new edge
        if rng.integers(2) == 0:
            network.set(a, d, w_ab)
            network.set(b, c, w_cd)
        else:
            network.set(a, d, w_cd)
            network.set(b, c, w_ab)
        network.set(a, b, 0.0)
        network.set(c, d, 0.0)

        index.replace(idx1, a, d)
        index.replace(idx2, c, b)
        accepted += 1

    log.debug(
        "conf_model_simple: %d/%d swaps accepted over %d edges",
        accepted,
        repeats,
        len(index),
    )
    return accepted


def untouched_edge_fraction(num_links: int, accepted: int) -> float:
    """Expected fraction of edges never moved after `accepted` swaps.

    Each accepted swap rewires 2 of the L edges, so an edge survives one
    swap with probability 1 - 2/L.
    """
    if num_links < 2:
        return 1.0
    return (1.0 - 2.0 / num_links) ** accepted
