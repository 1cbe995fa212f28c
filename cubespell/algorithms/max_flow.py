"""Maximum-flow computation via breadth-first augmenting paths.

Implements the Ford-Fulkerson method with BFS path selection (Edmonds-Karp).
Each round finds one augmenting path, pushes its bottleneck along every edge
of the path and mirrors the change on the paired residual edges. The loop
converges when no augmenting path remains.
"""

from __future__ import annotations

from typing import Literal, Optional, Union, overload

from cubespell.algorithms.bfs import find_augmenting_path, reachable_nodes
from cubespell.algorithms.types import AugmentingPath, FlowSummary
from cubespell.config import SolverConfig
from cubespell.graph.residual import NodeID, ResidualGraph
from cubespell.logging import get_logger

logger = get_logger(__name__)


@overload
def calc_max_flow(
    graph: ResidualGraph,
    src_node: NodeID,
    dst_node: NodeID,
    *,
    return_summary: Literal[False] = False,
    config: Optional[SolverConfig] = None,
) -> int: ...


@overload
def calc_max_flow(
    graph: ResidualGraph,
    src_node: NodeID,
    dst_node: NodeID,
    *,
    return_summary: Literal[True],
    config: Optional[SolverConfig] = None,
) -> tuple[int, FlowSummary]: ...


def calc_max_flow(
    graph: ResidualGraph,
    src_node: NodeID,
    dst_node: NodeID,
    *,
    return_summary: bool = False,
    config: Optional[SolverConfig] = None,
) -> Union[int, tuple[int, FlowSummary]]:
    """Compute max flow between two nodes of a residual graph.

    The graph is mutated in place: on return every edge holds its final flow.
    Flow already present on the graph is kept and only the additional flow
    found by this call is counted.

    Args:
        graph: Residual graph with capacities and (usually zero) flows.
        src_node: The source node for flow.
        dst_node: The destination node for flow.
        return_summary: If True, also return a FlowSummary.
        config: Solver configuration; defaults to ``DEFAULT_CONFIG``.

    Returns:
        The total flow, or ``(total_flow, FlowSummary)`` if ``return_summary``.

    Raises:
        RuntimeError: If the number of augmentations exceeds the capacity
            leaving the source, which can only happen on a corrupted graph.

    Examples:
        >>> g = ResidualGraph()
        >>> a, b, c = g.add_node(), g.add_node(), g.add_node()
        >>> _ = g.add_edge(a, b, 2)
        >>> _ = g.add_edge(b, c, 1)
        >>> calc_max_flow(g, a, c)
        1
    """
    total_flow = 0
    rounds = 0

    # Degenerate case (s == t): conservation forces the flow value to zero.
    if src_node != dst_node:
        max_rounds = sum(
            graph.edge(h).capacity
            for h in graph.out_edges(src_node)
            if graph.is_forward(h)
        )
        while True:
            path = find_augmenting_path(graph, src_node, dst_node, config)
            if not path.found:
                break
            rounds += 1
            if rounds > max_rounds:
                raise RuntimeError(
                    f"Max flow did not converge within {max_rounds} augmentations."
                )
            _augment(graph, src_node, dst_node, path)
            total_flow += path.bottleneck
            logger.debug(
                "Augmentation %d pushed %d unit(s), total %d",
                rounds,
                path.bottleneck,
                total_flow,
            )

    logger.debug(
        "Max flow %s -> %s converged: %d after %d augmentation(s)",
        src_node,
        dst_node,
        total_flow,
        rounds,
    )

    if not return_summary:
        return total_flow
    return total_flow, _build_summary(graph, src_node, total_flow, rounds)


def _augment(
    graph: ResidualGraph, src_node: NodeID, dst_node: NodeID, path: AugmentingPath
) -> None:
    """Walk ``path.previous`` back from the sink, pushing the bottleneck."""
    node = dst_node
    while node != src_node:
        handle = path.previous[node]
        if handle is None:
            raise RuntimeError(f"Augmenting path is broken at node {node}.")
        graph.push(handle, path.bottleneck)
        node = graph.edge(handle).start


def _build_summary(
    graph: ResidualGraph, src_node: NodeID, total_flow: int, rounds: int
) -> FlowSummary:
    reachable = reachable_nodes(graph, src_node)
    edge_flow = {h: graph.edge(h).flow for h in graph.forward_edges()}
    min_cut = tuple(
        h
        for h in graph.forward_edges()
        if graph.edge(h).start in reachable and graph.edge(h).end not in reachable
    )
    return FlowSummary(
        total_flow=total_flow,
        augmentations=rounds,
        edge_flow=edge_flow,
        reachable=reachable,
        min_cut=min_cut,
    )
