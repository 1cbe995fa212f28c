"""Graph conversion utilities between ResidualGraph and NetworkX graphs.

Only forward edges are exported; residual edges are implied by the flow
stored on their pair.
"""

from typing import Callable, Dict, Optional

import networkx as nx

from cubespell.graph.residual import NodeID, ResidualGraph


def to_digraph(
    graph: ResidualGraph,
    node_attrs: Optional[Callable[[NodeID], Dict]] = None,
) -> nx.DiGraph:
    """Convert a ResidualGraph to a NetworkX DiGraph.

    Each forward edge becomes a DiGraph edge carrying ``capacity``, ``flow``
    and ``handle`` attributes. Parallel forward edges between the same pair of
    nodes are consolidated by summing capacity and flow; ``handle`` then keeps
    the first edge's handle.

    Args:
        graph: The ResidualGraph to convert.
        node_attrs: Optional callable returning an attribute dict for a node id.

    Returns:
        A NetworkX DiGraph with one node per graph node.
    """
    nx_graph = nx.DiGraph()
    for node in range(graph.num_nodes):
        nx_graph.add_node(node, **(node_attrs(node) if node_attrs else {}))

    for handle in graph.forward_edges():
        edge = graph.edge(handle)
        if nx_graph.has_edge(edge.start, edge.end):
            data = nx_graph.edges[edge.start, edge.end]
            data["capacity"] += edge.capacity
            data["flow"] += edge.flow
        else:
            nx_graph.add_edge(
                edge.start,
                edge.end,
                capacity=edge.capacity,
                flow=edge.flow,
                handle=handle,
            )
    return nx_graph
