"""Shared fixtures: small residual graphs and cube puzzles."""

from __future__ import annotations

import pytest

from cubespell.graph.residual import ResidualGraph
from cubespell.model.network import CubeNetwork, build_network


@pytest.fixture
def line3() -> ResidualGraph:
    #     [2]      [1]
    #  0 ──────► 1 ──────► 2
    g = ResidualGraph()
    for _ in range(3):
        g.add_node()
    g.add_edge(0, 1, 2)
    g.add_edge(1, 2, 1)
    return g


@pytest.fixture
def diamond() -> ResidualGraph:
    #        [3]  1  [2]
    #     ┌──────►●──────┐
    #     │       │[1]   ▼
    #     0       ▼      3
    #     │  [2]  ●  [3] ▲
    #     └──────►2──────┘
    g = ResidualGraph()
    for _ in range(4):
        g.add_node()
    g.add_edge(0, 1, 3)
    g.add_edge(0, 2, 2)
    g.add_edge(1, 2, 1)
    g.add_edge(1, 3, 2)
    g.add_edge(2, 3, 3)
    return g


@pytest.fixture
def crossing() -> ResidualGraph:
    # All capacities 1, source 0, sink 5:
    #
    #   0 ──► 1 ──► 4 ──► 5
    #   │     │           ▲
    #   ▼     ▼           │
    #   2 ──► 3 ──────────┘
    #
    # BFS first takes 0->1->3->5; the second path 0->2->3->1->4->5 has to
    # cancel the flow on 1->3 through its residual edge.
    g = ResidualGraph()
    for _ in range(6):
        g.add_node()
    g.add_edge(0, 1, 1)
    g.add_edge(0, 2, 1)
    g.add_edge(1, 3, 1)
    g.add_edge(1, 4, 1)
    g.add_edge(2, 3, 1)
    g.add_edge(3, 5, 1)
    g.add_edge(4, 5, 1)
    return g


@pytest.fixture
def scenario_a() -> CubeNetwork:
    return build_network(["AB", "BC"], "AC")


@pytest.fixture
def reroute_network() -> CubeNetwork:
    # First augmentation matches cube 0 to 'A'; the second must reroute it to 'B'.
    return build_network(["AB", "A"], "AB")
