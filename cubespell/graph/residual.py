"""Residual flow graph with paired forward/backward edges.

`ResidualGraph` stores every edge in a flat arena addressed by integer
handles. Edges are always created in pairs: the forward edge at an even handle
``h`` and its residual edge at ``h ^ 1``. Pushing flow along one edge is
mirrored as the negated change on its pair, which lets later augmentations
cancel or reroute earlier flow.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List

NodeID = int
EdgeHandle = int


@dataclass(slots=True)
class Edge:
    """Directed arc with integer capacity and flow.

    Attributes:
        start: Tail node id.
        end: Head node id.
        capacity: Maximum flow the arc may carry (0 for residual edges).
        flow: Current flow; negative on residual edges whose pair carries flow.
    """

    start: NodeID
    end: NodeID
    capacity: int
    flow: int = 0

    @property
    def residual_capacity(self) -> int:
        return self.capacity - self.flow


class ResidualGraph:
    """Directed graph of integer nodes and paired capacity edges.

    This class enforces:
      - Node ids are assigned by the graph itself, densely from 0.
      - Edges may only connect existing nodes and never carry negative capacity.
      - Nodes and edges are never removed once added.
      - ``0 <= flow <= capacity`` on forward edges at all times.
    """

    def __init__(self) -> None:
        self._edges: List[Edge] = []
        self._adj: List[List[EdgeHandle]] = []

    def __len__(self) -> int:
        return len(self._adj)

    def __contains__(self, node: object) -> bool:
        return isinstance(node, int) and 0 <= node < len(self._adj)

    @property
    def num_nodes(self) -> int:
        return len(self._adj)

    @property
    def num_edges(self) -> int:
        """Number of edges including residual edges."""
        return len(self._edges)

    #
    # Construction
    #
    def add_node(self) -> NodeID:
        """Add a node and return its id (the next integer in sequence)."""
        self._adj.append([])
        return len(self._adj) - 1

    def add_edge(self, u: NodeID, v: NodeID, capacity: int) -> EdgeHandle:
        """Add a forward edge ``u -> v`` and its paired residual edge ``v -> u``.

        Both edges start with zero flow; the residual edge has zero capacity.
        Each edge is appended to its tail node's outgoing list.

        Args:
            u: Tail node of the forward edge.
            v: Head node of the forward edge.
            capacity: Capacity of the forward edge.

        Returns:
            Handle of the forward edge. The residual edge is ``handle ^ 1``.

        Raises:
            ValueError: If either node does not exist or capacity is negative.
        """
        if u not in self:
            raise ValueError(f"Source node '{u}' does not exist.")
        if v not in self:
            raise ValueError(f"Target node '{v}' does not exist.")
        if capacity < 0:
            raise ValueError(f"Edge capacity must be non-negative, got {capacity}.")

        handle = len(self._edges)
        self._edges.append(Edge(u, v, capacity))
        self._edges.append(Edge(v, u, 0))
        self._adj[u].append(handle)
        self._adj[v].append(handle ^ 1)
        return handle

    #
    # Queries
    #
    def edge(self, handle: EdgeHandle) -> Edge:
        """Return the edge record for ``handle``.

        Raises:
            ValueError: If the handle is unknown.
        """
        if not 0 <= handle < len(self._edges):
            raise ValueError(f"Edge '{handle}' does not exist.")
        return self._edges[handle]

    def pair(self, handle: EdgeHandle) -> EdgeHandle:
        """Return the handle of the edge paired with ``handle``."""
        self.edge(handle)
        return handle ^ 1

    def residual_capacity(self, handle: EdgeHandle) -> int:
        """Additional flow the edge can still carry (``capacity - flow``)."""
        return self.edge(handle).residual_capacity

    def out_edges(self, node: NodeID) -> List[EdgeHandle]:
        """Handles of edges leaving ``node`` in insertion order.

        Includes residual edges created for forward edges that enter ``node``.
        """
        if node not in self:
            raise ValueError(f"Node '{node}' does not exist.")
        return self._adj[node]

    def forward_edges(self) -> Iterator[EdgeHandle]:
        """Iterate over handles of forward (non-residual) edges."""
        return iter(range(0, len(self._edges), 2))

    @staticmethod
    def is_forward(handle: EdgeHandle) -> bool:
        return handle % 2 == 0

    #
    # Mutation
    #
    def push(self, handle: EdgeHandle, amount: int) -> None:
        """Send ``amount`` units of flow along an edge.

        Increases the edge flow by ``amount`` and decreases the paired edge flow
        by the same amount.

        Raises:
            ValueError: If ``amount`` is negative or exceeds the residual capacity.
        """
        edge = self.edge(handle)
        if amount < 0:
            raise ValueError(f"Cannot push negative flow {amount}.")
        if amount > edge.residual_capacity:
            raise ValueError(
                f"Cannot push {amount} on edge {edge.start}->{edge.end}: "
                f"residual capacity is {edge.residual_capacity}."
            )
        edge.flow += amount
        self._edges[handle ^ 1].flow -= amount

    def reset_flow(self) -> None:
        """Zero the flow on every edge."""
        for edge in self._edges:
            edge.flow = 0
