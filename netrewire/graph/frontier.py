"""Bounded breadth-first expansion used as a cheap local connectivity probe.

After an edge swap, a component that broke off is almost always small. A
breadth-first expansion from a swapped endpoint that runs out of unvisited
nodes within a few steps has found such a piece; one that is still growing
after `limit` steps most likely sits in the large component. This trades
rare false negatives (caught later by the exact check) for avoiding an O(n)
traversal on every swap.

A step settles one node by default, so a probe finishes within `limit`
steps exactly when its component has at most `limit` nodes. With
`by_layer=True` a step expands one whole BFS layer instead.
"""

import logging
from collections import deque

from netrewire.graph.network import Network

log = logging.getLogger(__name__)


class FrontierProbe:
    """Incremental BFS from one seed node.

    `finished` becomes True once no unvisited node is left to expand, i.e.
    the seed's whole component has been visited.
    """

    def __init__(self, network: Network, seed: int, by_layer: bool = False) -> None:
        self._network = network
        self._by_layer = by_layer
        self.visited: set[int] = {seed}
        self.queue: deque[int] = deque([seed])
        self.finished = False
        self.steps = 0

    def _expand(self, u: int) -> None:
        visited = self.visited
        for v, _ in self._network.neighbors(u):
            if v not in visited:
                visited.add(v)
                self.queue.append(v)

    def step(self) -> bool:
        """Settle the next node (or layer). Returns `finished`."""
        if self.finished:
            return True
        if self._by_layer:
            for _ in range(len(self.queue)):
                self._expand(self.queue.popleft())
        else:
            self._expand(self.queue.popleft())
        self.steps += 1
        if not self.queue:
            self.finished = True
        return self.finished


def probe(
    network: Network, seed: int, max_steps: int, by_layer: bool = False
) -> bool:
    """Return True if the component of `seed` is exhausted within `max_steps` steps."""
    p = FrontierProbe(network, seed, by_layer)
    while not p.finished and p.steps < max_steps:
        p.step()
    return p.finished


def probe_pair(
    network: Network, a: int, b: int, limit: int, by_layer: bool = False
) -> bool:
    """Expand from `a` and `b` in lockstep for up to `limit` steps.

    Returns True as soon as either expansion finishes, meaning at least one
    endpoint probably ended up in a small detached piece.
    """
    p1 = FrontierProbe(network, a, by_layer)
    p2 = FrontierProbe(network, b, by_layer)
    steps = 0
    while not p1.finished and not p2.finished and steps < limit:
        p1.step()
        p2.step()
        steps += 1
    detached = p1.finished or p2.finished
    if detached:
        log.debug(
            "Probe from (%d, %d) exhausted a component after %d steps "
            "(sizes %d, %d)",
            a,
            b,
            steps,
            len(p1.visited),
            len(p2.visited),
        )
    return detached
