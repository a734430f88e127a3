"""Tests for the flat edge index."""

import numpy as np
import pytest

from netrewire.graph.edge_index import EdgeIndex
from netrewire.graph.network import Network


class TestBuild:
    """Enumeration from a network."""

    def test_each_edge_once_smaller_first(self) -> None:
        net = Network.from_edges(4, [(3, 0), (2, 1), (1, 3)])
        index = EdgeIndex.from_network(net)
        assert len(index) == 3
        assert sorted(index[k] for k in range(len(index))) == [
            (0, 3),
            (1, 2),
            (1, 3),
        ]

    def test_edge_set_matches_network(self) -> None:
        net = Network.from_edges(5, [(0, 1), (1, 2), (2, 3), (3, 4), (4, 0)])
        index = EdgeIndex.from_network(net)
        assert index.edge_set() == {(u, v) for u, v, _ in net.edges()}


class TestSampling:
    """Uniform index draws."""

    def test_sample_pair_in_range(self) -> None:
        index = EdgeIndex([(0, 1), (1, 2), (2, 3)])
        rng = np.random.default_rng(3)
        for _ in range(100):
            a, b = index.sample_pair(rng)
            assert 0 <= a < 3 and 0 <= b < 3

    def test_sample_pair_can_coincide(self) -> None:
        index = EdgeIndex([(0, 1), (1, 2)])
        rng = np.random.default_rng(5)
        pairs = [index.sample_pair(rng) for _ in range(100)]
        assert any(a == b for a, b in pairs)

    def test_two_distinct_never_coincide(self) -> None:
        index = EdgeIndex([(0, 1), (1, 2)])
        rng = np.random.default_rng(5)
        for _ in range(100):
            a, b = index.sample_two_distinct(rng)
            assert a != b

    def test_two_distinct_needs_two_edges(self) -> None:
        with pytest.raises(ValueError, match="at least 2"):
            EdgeIndex([(0, 1)]).sample_two_distinct(np.random.default_rng(0))

    def test_empty_index(self) -> None:
        with pytest.raises(ValueError, match="empty"):
            EdgeIndex([]).sample_pair(np.random.default_rng(0))


class TestReplace:
    """In-place overwrite without reordering."""

    def test_replace_keeps_other_slots(self) -> None:
        index = EdgeIndex([(0, 1), (2, 3), (4, 5)])
        index.replace(1, 3, 0)
        assert index[0] == (0, 1)
        assert index[1] == (3, 0)
        assert index[2] == (4, 5)
        assert index.edge_set() == {(0, 1), (0, 3), (4, 5)}
