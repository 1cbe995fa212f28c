import logging
import random

import networkx as nx
import pytest

from cubespell.algorithms.max_flow import calc_max_flow
from cubespell.algorithms.types import FlowSummary
from cubespell.config import SolverConfig
from cubespell.graph.convert import to_digraph
from cubespell.graph.residual import ResidualGraph
from cubespell.model.network import build_network


def _assert_flow_invariants(graph: ResidualGraph) -> None:
    for h in graph.forward_edges():
        edge = graph.edge(h)
        assert 0 <= edge.flow <= edge.capacity
        assert graph.edge(graph.pair(h)).flow == -edge.flow
        assert graph.residual_capacity(h) >= 0
        assert graph.residual_capacity(graph.pair(h)) >= 0


class TestMaxFlowBasic:
    """
    Tests that directly verify flow values on known small graphs.
    """

    def test_max_flow_line3(self, line3):
        assert calc_max_flow(line3, 0, 2) == 1
        _assert_flow_invariants(line3)

    def test_max_flow_diamond(self, diamond):
        assert calc_max_flow(diamond, 0, 3) == 5
        _assert_flow_invariants(diamond)

    def test_max_flow_reroutes_through_residual_edge(self, crossing):
        flow, summary = calc_max_flow(crossing, 0, 5, return_summary=True)
        assert flow == 2
        assert summary.augmentations == 2
        # 1->3 was used by the first path and cancelled by the second
        assert crossing.edge(4).flow == 0
        _assert_flow_invariants(crossing)

    def test_max_flow_same_source_and_sink(self, diamond):
        assert calc_max_flow(diamond, 1, 1) == 0

    def test_max_flow_no_path(self):
        g = ResidualGraph()
        g.add_node()
        g.add_node()
        assert calc_max_flow(g, 0, 1) == 0

    def test_second_run_finds_no_additional_flow(self, diamond):
        assert calc_max_flow(diamond, 0, 3) == 5
        assert calc_max_flow(diamond, 0, 3) == 0

    def test_reset_flow_allows_recomputation(self, diamond):
        calc_max_flow(diamond, 0, 3)
        diamond.reset_flow()
        assert calc_max_flow(diamond, 0, 3) == 5


class TestMaxFlowSummary:
    def test_summary_fields(self, diamond):
        flow, summary = calc_max_flow(diamond, 0, 3, return_summary=True)

        assert isinstance(summary, FlowSummary)
        assert summary.total_flow == flow == 5
        assert summary.augmentations == 3
        assert summary.edge_flow == {0: 3, 2: 2, 4: 1, 6: 2, 8: 3}
        assert summary.reachable == {0}
        assert summary.min_cut == (0, 2)

    def test_summary_min_cut_capacity_equals_flow(self, scenario_a):
        graph = scenario_a.graph
        flow, summary = calc_max_flow(
            graph, scenario_a.source, scenario_a.sink, return_summary=True
        )
        assert sum(graph.edge(h).capacity for h in summary.min_cut) == flow

    def test_summary_for_infeasible_puzzle(self):
        network = build_network(["AB"], "AB")
        flow, summary = calc_max_flow(
            network.graph, network.source, network.sink, return_summary=True
        )
        assert flow == 1
        assert summary.reachable == {network.source}
        # the single source edge is the bottleneck
        assert summary.min_cut == (8,)
        assert network.graph.edge(8).start == network.source


class TestMaxFlowAgainstNetworkX:
    @pytest.mark.parametrize("seed", range(25))
    def test_random_graphs(self, seed):
        rng = random.Random(seed)
        g = ResidualGraph()
        n = rng.randint(2, 8)
        for _ in range(n):
            g.add_node()
        for _ in range(rng.randint(0, 20)):
            u, v = rng.randrange(n), rng.randrange(n)
            if u != v:
                g.add_edge(u, v, rng.randint(0, 5))

        expected = nx.maximum_flow_value(to_digraph(g), 0, n - 1)
        assert calc_max_flow(g, 0, n - 1) == expected
        _assert_flow_invariants(g)

    @pytest.mark.parametrize("seed", range(25))
    def test_random_cube_networks(self, seed):
        rng = random.Random(1000 + seed)
        alphabet = "ABCDE"
        cubes = [
            "".join(rng.choice(alphabet) for _ in range(rng.randint(1, 4)))
            for _ in range(rng.randint(0, 6))
        ]
        word = "".join(rng.choice(alphabet) for _ in range(rng.randint(0, 6)))
        network = build_network(cubes, word)

        expected = nx.maximum_flow_value(
            to_digraph(network.graph), network.source, network.sink
        )
        flow = calc_max_flow(network.graph, network.source, network.sink)
        assert flow == expected
        assert flow <= min(len(word), len(cubes))
        _assert_flow_invariants(network.graph)


def test_corrupted_graph_raises_runtime_error():
    # Negative flow on a forward edge grants more residual capacity than the
    # source can supply; capping the sentinel forces one unit per augmentation.
    g = ResidualGraph()
    for _ in range(2):
        g.add_node()
    h = g.add_edge(0, 1, 1)
    g.edge(h).flow = -5
    with pytest.raises(RuntimeError, match="did not converge"):
        calc_max_flow(g, 0, 1, config=SolverConfig(unbounded_capacity=1))


def test_max_flow_debug_logging(caplog, diamond):
    caplog.set_level(logging.DEBUG, logger="cubespell.algorithms.max_flow")
    calc_max_flow(diamond, 0, 3)
    messages = [r.getMessage() for r in caplog.records]
    assert any("Augmentation 1 pushed 2 unit(s)" in m for m in messages)
    assert any("converged: 5 after 3 augmentation(s)" in m for m in messages)
