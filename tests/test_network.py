"""Tests for the household social network."""

import networkx as nx
import numpy as np
import pytest

import agentpy as ap

from stablecoin_abm.agents import Household
from stablecoin_abm.config import DEFAULT_PARAMS
from stablecoin_abm.network import build_peer_network


def _make_households(n):
    model = ap.Model(dict(DEFAULT_PARAMS))
    model.setup()
    households = [Household(model) for _ in range(n)]
    for h in households:
        h.setup()
    return households


class TestBuildPeerNetwork:
    @pytest.mark.parametrize("n", [1, 2, 5, 50, 200])
    def test_degree_bounded_and_no_self_links(self, n):
        households = _make_households(n)
        graph = build_peer_network(households, 3, np.random.default_rng(42))
        for h in households:
            assert len(h.peers) <= 3
            assert h not in h.peers
            assert len({p.id for p in h.peers}) == len(h.peers)
        assert nx.number_of_selfloops(graph) == 0

    def test_links_are_symmetric(self):
        households = _make_households(60)
        build_peer_network(households, 3, np.random.default_rng(1))
        for h in households:
            for peer in h.peers:
                assert h in peer.peers

    def test_two_households_linked(self):
        a, b = _make_households(2)
        build_peer_network([a, b], 3, np.random.default_rng(0))
        assert a.peers == [b]
        assert b.peers == [a]

    def test_graph_matches_peer_lists(self):
        households = _make_households(30)
        graph = build_peer_network(households, 3, np.random.default_rng(3))
        assert graph.number_of_nodes() == 30
        assert sum(len(h.peers) for h in households) == 2 * graph.number_of_edges()

    def test_most_households_reach_target_degree(self):
        households = _make_households(100)
        build_peer_network(households, 3, np.random.default_rng(5))
        full = sum(1 for h in households if len(h.peers) == 3)
        assert full >= 90
