from __future__ import annotations

from collections import deque
from typing import List, Optional

from cubespell.algorithms.types import AugmentingPath
from cubespell.config import DEFAULT_CONFIG, SolverConfig
from cubespell.graph.residual import EdgeHandle, NodeID, ResidualGraph


def find_augmenting_path(
    graph: ResidualGraph,
    src_node: NodeID,
    dst_node: NodeID,
    config: Optional[SolverConfig] = None,
) -> AugmentingPath:
    """
    Breadth-first search for one augmenting path from ``src_node`` to ``dst_node``.

    Edges are scanned in insertion order and are usable while their residual
    capacity is positive and their head has not been reached yet. The search
    stops as soon as the destination is reached.

    Raises:
        ValueError: If either endpoint is not a node of ``graph``.
    """
    for node in (src_node, dst_node):
        if node not in graph:
            raise ValueError(f"Node '{node}' does not exist.")
    config = config or DEFAULT_CONFIG
    previous: List[Optional[EdgeHandle]] = [None] * graph.num_nodes
    if src_node == dst_node:
        return AugmentingPath(bottleneck=0, previous=previous)

    # nonzero bottleneck means "already reached"
    bottleneck = [0] * graph.num_nodes
    bottleneck[src_node] = config.unbounded_capacity

    queue = deque([src_node])
    while queue and bottleneck[dst_node] == 0:
        node_id = queue.popleft()
        for handle in graph.out_edges(node_id):
            edge = graph.edge(handle)
            residual = edge.residual_capacity
            if residual > 0 and bottleneck[edge.end] == 0:
                previous[edge.end] = handle
                bottleneck[edge.end] = min(bottleneck[node_id], residual)
                queue.append(edge.end)

    return AugmentingPath(bottleneck=bottleneck[dst_node], previous=previous)


def reachable_nodes(graph: ResidualGraph, src_node: NodeID) -> set[NodeID]:
    """Nodes reachable from ``src_node`` over edges with positive residual capacity."""
    seen = {src_node}
    queue = deque([src_node])
    while queue:
        node_id = queue.popleft()
        for handle in graph.out_edges(node_id):
            edge = graph.edge(handle)
            if edge.residual_capacity > 0 and edge.end not in seen:
                seen.add(edge.end)
                queue.append(edge.end)
    return seen
