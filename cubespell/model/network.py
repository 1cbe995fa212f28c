"""Three-layer flow network for the cube spelling puzzle.

The network routes one unit of flow per cube from the source, through a cube
node, to a letter-position node whose character the cube carries, and on to
the sink:

    source -> cube nodes -> letter-position nodes -> sink

Node ids follow a fixed creation order: source (0), sink (1), one node per
letter position in word order, then one node per cube in input order. The
role of every node is also recorded explicitly in ``CubeNetwork.roles``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from cubespell.config import DEFAULT_CONFIG, SolverConfig
from cubespell.graph.residual import NodeID, ResidualGraph
from cubespell.logging import get_logger

logger = get_logger(__name__)


class NodeRole(Enum):
    SOURCE = "source"
    SINK = "sink"
    POSITION = "position"
    CUBE = "cube"


@dataclass
class CubeNetwork:
    """Flow network built from a set of cubes and a target word.

    Attributes:
        graph: Residual graph holding all nodes and edges.
        source: Source node id.
        sink: Sink node id.
        positions: Node id per letter position, in word order.
        cubes: Node id per cube, in input order.
        word: Target word the positions were built from.
        roles: ``node_id -> (role, index)``; index is the letter position or
            cube index for POSITION/CUBE nodes and 0 otherwise.
    """

    graph: ResidualGraph
    source: NodeID
    sink: NodeID
    word: str
    positions: List[NodeID] = field(default_factory=list)
    cubes: List[NodeID] = field(default_factory=list)
    roles: Dict[NodeID, Tuple[NodeRole, int]] = field(default_factory=dict)

    @property
    def num_nodes(self) -> int:
        return self.graph.num_nodes

    @property
    def word_length(self) -> int:
        return len(self.positions)

    def role_of(self, node: NodeID) -> NodeRole:
        return self.roles[node][0]

    def cube_index(self, node: NodeID) -> int:
        """Return the input index of the cube represented by ``node``.

        Raises:
            ValueError: If ``node`` is not a cube node.
        """
        role, index = self.roles.get(node, (None, -1))
        if role is not NodeRole.CUBE:
            raise ValueError(f"Node '{node}' is not a cube node.")
        return index

    def node_label(self, node: NodeID) -> str:
        """Human-readable label, e.g. ``cube[2]`` or ``pos[0]='A'``."""
        role, index = self.roles[node]
        if role is NodeRole.POSITION:
            return f"pos[{index}]={self.word[index]!r}"
        if role is NodeRole.CUBE:
            return f"cube[{index}]"
        return role.value


def build_network(
    cubes: Sequence[Iterable[str]],
    word: str,
    config: Optional[SolverConfig] = None,
) -> CubeNetwork:
    """Build the flow network for spelling ``word`` with ``cubes``.

    Every edge has capacity 1. A cube is linked to a letter position iff the
    cube's letters contain that position's character; duplicate letters on a
    cube are irrelevant.

    Args:
        cubes: Letters of each cube, e.g. ``["AB", "BC"]``.
        word: Target word.
        config: Solver configuration (``ignore_case`` affects matching).

    Returns:
        CubeNetwork with ``2 + len(word) + len(cubes)`` nodes and zero flow.
    """
    config = config or DEFAULT_CONFIG
    graph = ResidualGraph()
    source = graph.add_node()
    sink = graph.add_node()
    network = CubeNetwork(graph=graph, source=source, sink=sink, word=word)
    network.roles[source] = (NodeRole.SOURCE, 0)
    network.roles[sink] = (NodeRole.SINK, 0)

    # folded per character so each position keeps exactly one node
    target = [config.normalize(ch) for ch in word]
    for i in range(len(target)):
        node = graph.add_node()
        graph.add_edge(node, sink, 1)
        network.positions.append(node)
        network.roles[node] = (NodeRole.POSITION, i)

    for i, letters in enumerate(cubes):
        letter_set = {config.normalize(ch) for ch in letters}
        node = graph.add_node()
        for j, ch in enumerate(target):
            if ch in letter_set:
                graph.add_edge(node, network.positions[j], 1)
        graph.add_edge(source, node, 1)
        network.cubes.append(node)
        network.roles[node] = (NodeRole.CUBE, i)

    logger.debug(
        "Built network for word %r: %d positions, %d cubes, %d nodes, %d edges",
        word,
        len(network.positions),
        len(network.cubes),
        graph.num_nodes,
        graph.num_edges // 2,
    )
    return network
