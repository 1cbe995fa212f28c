import pytest

from cubespell.algorithms.bfs import find_augmenting_path, reachable_nodes
from cubespell.config import SolverConfig
from cubespell.graph.residual import ResidualGraph


def test_bfs_line_bottleneck(line3):
    path = find_augmenting_path(line3, 0, 2)
    assert path.found
    assert path.bottleneck == 1
    assert path.previous == [None, 0, 2]


def test_bfs_prefers_first_inserted_edge(diamond):
    path = find_augmenting_path(diamond, 0, 3)
    # 0->1 (handle 0) is scanned before 0->2, so the sink is reached via 1->3
    assert path.previous[1] == 0
    assert path.previous[2] == 2
    assert path.previous[3] == 6
    assert path.bottleneck == 2


def test_bfs_skips_saturated_edges(line3):
    line3.push(2, 1)
    path = find_augmenting_path(line3, 0, 2)
    assert not path.found
    assert path.bottleneck == 0
    assert path.previous[2] is None


def test_bfs_uses_residual_edges(crossing):
    first = find_augmenting_path(crossing, 0, 5)
    # 0->1->3->5
    assert first.previous[5] == 10
    assert first.previous[3] == 4
    assert first.previous[1] == 0
    for handle in (10, 4, 0):
        crossing.push(handle, 1)

    second = find_augmenting_path(crossing, 0, 5)
    assert second.bottleneck == 1
    # 0->2->3->1->4->5, crossing 3->1 on the residual of edge 1->3
    assert second.previous[5] == 12
    assert second.previous[4] == 6
    assert second.previous[1] == 4 ^ 1
    assert second.previous[3] == 8
    assert second.previous[2] == 2


def test_bfs_scenario_a_first_path(scenario_a):
    path = find_augmenting_path(scenario_a.graph, scenario_a.source, scenario_a.sink)
    assert path.bottleneck == 1
    # source -> cube 0 -> 'A' -> sink
    assert path.previous[4] == 6
    assert path.previous[2] == 4
    assert path.previous[1] == 0
    assert path.previous[0] is None


def test_bfs_unreachable_sink():
    g = ResidualGraph()
    for _ in range(3):
        g.add_node()
    g.add_edge(0, 1, 4)
    path = find_augmenting_path(g, 0, 2)
    assert path.bottleneck == 0
    assert path.previous == [None, 0, None]


def test_bfs_same_source_and_sink(line3):
    path = find_augmenting_path(line3, 1, 1)
    assert path.bottleneck == 0


def test_bfs_unbounded_sentinel_caps_bottleneck(line3):
    path = find_augmenting_path(line3, 0, 1, SolverConfig(unbounded_capacity=1))
    assert path.bottleneck == 1


def test_reachable_nodes(line3):
    assert reachable_nodes(line3, 0) == {0, 1, 2}
    line3.push(0, 2)
    assert reachable_nodes(line3, 0) == {0}
    assert reachable_nodes(line3, 1) == {0, 1, 2}


@pytest.mark.parametrize("src, dst", [(0, 3), (3, 0), (-1, 2), (0, 99)])
def test_bfs_unknown_endpoint_raises(line3, src, dst):
    with pytest.raises(ValueError, match="does not exist"):
        find_augmenting_path(line3, src, dst)
