"""Single edge swaps that keep the network connected.

switch_link_pair_ends() is the work unit of the adaptive randomizer: it
keeps drawing candidate swaps until one passes the bounded frontier probe.
switch_connections() is a cruder move that exchanges the whole
neighborhoods of two nodes.
"""

import logging

import numpy as np

from netrewire.graph.frontier import probe_pair
from netrewire.graph.network import Network
from netrewire.randomize.types import SwapStallError

log = logging.getLogger(__name__)


def switch_link_pair_ends(
    network: Network,
    rng: np.random.Generator,
    net_size: int,
    limit: int,
    max_attempts: int | None = None,
    by_layer: bool = False,
) -> int:
    """Swap the ends of two edges without detaching a small component.

    Edges (i, m) and (j, n) become (i, n) and (j, m). After the swap, a
    lockstep frontier probe runs from i and j for up to `limit` steps; if
    either side exhausts its component first the swap is reversed exactly
    and a new candidate is drawn. The network is never left swapped but
    unverified when this returns.

    Args:
        network: Network to mutate in place.
        rng: numpy random Generator.
        net_size: Number of nodes to draw from.
        limit: Frontier probe bound, 1 <= limit <= net_size.
        max_attempts: Bound on candidate draws (legal or not) before giving
            up; None retries forever.
        by_layer: Count probe steps in BFS layers instead of nodes.

    Returns:
        Number of tries used, counting certain-failure and reversed swaps
        plus the accepted one.

    Raises:
        ValueError: If limit is out of range.
        SwapStallError: If max_attempts draws pass without an accepted swap.
    """
    if not 0 < limit <= net_size:
        raise ValueError(f"limit must be in [1, {net_size}], got {limit}")

    tries = 0
    draws = 0
    while True:
        tries += 1
        # Draw edges i-m and j-n until the switch is structurally possible
        while True:
            draws += 1
            if max_attempts is not None and draws > max_attempts:
                raise SwapStallError(
                    f"No connectivity-safe swap found after {draws - 1} draws "
                    f"({tries} tries, limit={limit})"
                )
            i = int(rng.integers(net_size))
            j = int(rng.integers(net_size))
            m = network.random_neighbor(i, rng)
            n = network.random_neighbor(j, rng)
            if (
                i == j
                or m == n
                or m == j
                or n == i
                or network.has_edge(i, n)
                or network.has_edge(j, m)
            ):
                continue
            break

        # Removing the only edge of a leaf pair isolates it for certain.
        # Longer degree-1 chains are not detected here.
        if (network.degree(i) == 1 and network.degree(n) == 1) or (
            network.degree(j) == 1 and network.degree(m) == 1
        ):
            continue

        w_im = network.get(i, m)
        w_jn = network.get(j, n)
        network.set(i, n, w_im)
        network.set(j, m, w_jn)
        network.set(i, m, 0.0)
        network.set(j, n, 0.0)

        if probe_pair(network, i, j, limit, by_layer):
            network.set(i, m, w_im)
            network.set(j, n, w_jn)
            network.set(i, n, 0.0)
            network.set(j, m, 0.0)
            continue

        return tries


def switch_connections(
    network: Network, rng: np.random.Generator, net_size: int
) -> tuple[int, int]:
    """Exchange the complete neighborhoods of two distinct random nodes.

    Every edge i-k becomes j-k and every edge j-k becomes i-k, weights
    included. An edge between i and j stays in place. The degree sequence
    is permuted between i and j rather than preserved per node, and
    connectivity is unaffected since this is a relabeling of two nodes.

    Returns:
        The pair (i, j) that was switched.
    """
    if net_size < 2:
        raise ValueError(f"Need at least 2 nodes to switch, got {net_size}")
    while True:
        i = int(rng.integers(net_size))
        j = int(rng.integers(net_size))
        if i != j:
            break

    w_ij = network.get(i, j)
    old_i = [(k, w) for k, w in network.neighbors(i) if k != j]
    old_j = [(k, w) for k, w in network.neighbors(j) if k != i]
    for k, _ in old_i:
        network.set(i, k, 0.0)
    for k, _ in old_j:
        network.set(j, k, 0.0)
    for k, w in old_i:
        network.set(j, k, w)
    for k, w in old_j:
        network.set(i, k, w)

    log.debug(
        "Switched connections of %d and %d (edge between them: %s)",
        i,
        j,
        w_ij != 0.0,
    )
    return i, j
