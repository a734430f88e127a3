"""Tests for single connectivity-preserving swaps and neighborhood switches."""

from unittest.mock import patch

import numpy as np
import pytest

from netrewire.graph.network import Network
from netrewire.randomize.swapper import switch_connections, switch_link_pair_ends
from netrewire.randomize.types import SwapStallError


def _ring_lattice(n: int, k: int, weighted: bool = False) -> Network:
    edges = []
    for i in range(n):
        for d in range(1, k + 1):
            w = float(1 + len(edges)) if weighted else 1.0
            edges.append((i, (i + d) % n, w))
    return Network.from_edges(n, edges)


def _star(n_leaves: int) -> Network:
    return Network.from_edges(n_leaves + 1, [(0, k) for k in range(1, n_leaves + 1)])


def _edge_set(net: Network) -> set[tuple[int, int]]:
    return {(u, v) for u, v, _ in net.edges()}


class TestAcceptedSwap:
    """A single accepted swap rewires exactly two edges."""

    def test_two_removed_two_added(self) -> None:
        net = _ring_lattice(30, 2)
        before = _edge_set(net)
        tries = switch_link_pair_ends(net, np.random.default_rng(0), 30, limit=5)
        after = _edge_set(net)

        assert tries >= 1
        removed = before - after
        added = after - before
        assert len(removed) == 2
        assert len(added) == 2
        assert len(after) == len(before)
        endpoints = {x for e in removed for x in e}
        assert len(endpoints) == 4
        assert endpoints == {x for e in added for x in e}

    def test_degrees_and_connectivity_kept(self) -> None:
        net = _ring_lattice(40, 2)
        before = net.degrees()
        rng = np.random.default_rng(1)
        for _ in range(200):
            switch_link_pair_ends(net, rng, 40, limit=10)
            assert np.array_equal(net.degrees(), before)
        assert net.is_connected()

    def test_weights_travel_with_edges(self) -> None:
        net = _ring_lattice(30, 2, weighted=True)
        before = sorted(w for _, _, w in net.edges())
        rng = np.random.default_rng(2)
        for _ in range(100):
            switch_link_pair_ends(net, rng, 30, limit=5)
        assert sorted(w for _, _, w in net.edges()) == before

    def test_deterministic_for_seed(self) -> None:
        a = _ring_lattice(30, 2)
        b = _ring_lattice(30, 2)
        tries_a = [switch_link_pair_ends(a, np.random.default_rng(4), 30, 5)]
        tries_b = [switch_link_pair_ends(b, np.random.default_rng(4), 30, 5)]
        assert a == b
        assert tries_a == tries_b


class TestReversal:
    """Swaps flagged by the probe are undone exactly."""

    def test_reversed_swap_restores_state(self) -> None:
        net = _ring_lattice(20, 2, weighted=True)
        before = net.copy()
        # limit == n: every probe exhausts the whole graph, so every swap is reversed
        with pytest.raises(SwapStallError):
            switch_link_pair_ends(
                net, np.random.default_rng(0), 20, limit=20, max_attempts=500
            )
        assert net == before
        assert np.array_equal(net.to_sparse().toarray(), before.to_sparse().toarray())

    def test_probe_rejection_counts_as_try(self) -> None:
        net = _ring_lattice(30, 2)
        before = net.copy()
        with patch(
            "netrewire.randomize.swapper.probe_pair",
            side_effect=[True, True, False],
        ) as mock_probe:
            tries = switch_link_pair_ends(net, np.random.default_rng(5), 30, 5)
        assert mock_probe.call_count == 3
        assert tries >= 3
        assert len(_edge_set(net) - _edge_set(before)) == 2

    def test_probe_sees_swapped_state(self) -> None:
        net = _ring_lattice(30, 2)
        seen: list[int] = []

        def fake_probe(network, i, j, limit, by_layer):
            seen.append(network.number_of_edges())
            return False

        with patch("netrewire.randomize.swapper.probe_pair", side_effect=fake_probe):
            switch_link_pair_ends(net, np.random.default_rng(6), 30, 5)
        assert seen == [60]


class TestHardCases:
    """Networks with few or no connectivity-safe swaps."""

    def test_star_stalls_with_bound(self) -> None:
        net = _star(6)
        before = net.copy()
        with pytest.raises(SwapStallError, match="draws"):
            switch_link_pair_ends(
                net, np.random.default_rng(0), 7, limit=2, max_attempts=2000
            )
        assert net == before

    def test_leaf_pair_short_circuit(self) -> None:
        """Two pendant edges hanging off a cycle: swapping them onto each other is never tried."""
        # Cycle 0-1-2-3-4-5, leaves 6 (on 0) and 7 (on 3)
        edges = [(i, (i + 1) % 6) for i in range(6)] + [(0, 6), (3, 7)]
        net = Network.from_edges(8, edges)
        rng = np.random.default_rng(11)
        for _ in range(50):
            switch_link_pair_ends(net, rng, 8, limit=2, max_attempts=100_000)
            assert not net.has_edge(6, 7)

    def test_limit_out_of_range(self) -> None:
        net = _ring_lattice(10, 1)
        with pytest.raises(ValueError, match="limit"):
            switch_link_pair_ends(net, np.random.default_rng(0), 10, limit=0)
        with pytest.raises(ValueError, match="limit"):
            switch_link_pair_ends(net, np.random.default_rng(0), 10, limit=11)


class TestSwitchConnections:
    """Whole-neighborhood exchange between two nodes."""

    def test_neighborhoods_exchanged(self) -> None:
        net = Network.from_edges(6, [(0, 2, 1.0), (0, 3, 2.0), (1, 4, 3.0), (4, 5, 1.0)])
        before = net.copy()
        i, j = switch_connections(net, np.random.default_rng(0), 6)
        for k in range(6):
            if k in (i, j):
                continue
            assert net.get(i, k) == before.get(j, k)
            assert net.get(j, k) == before.get(i, k)

    def test_edge_between_pair_kept(self) -> None:
        net = Network.from_edges(2, [(0, 1, 5.0)])
        switch_connections(net, np.random.default_rng(0), 2)
        assert net.get(0, 1) == 5.0

    def test_degree_multiset_kept(self) -> None:
        net = _ring_lattice(10, 1)
        net.set(0, 5, 1.0)
        before = sorted(net.degrees().tolist())
        rng = np.random.default_rng(3)
        for _ in range(20):
            switch_connections(net, rng, 10)
        assert sorted(net.degrees().tolist()) == before
        assert net.is_connected()

    def test_needs_two_nodes(self) -> None:
        with pytest.raises(ValueError):
            switch_connections(Network(1), np.random.default_rng(0), 1)
