"""Types and data structures for algorithm outputs.

Defines immutable containers returned by the search and max-flow routines.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Set, Tuple

from cubespell.graph.residual import EdgeHandle, NodeID


@dataclass(frozen=True)
class AugmentingPath:
    """Result of a single breadth-first search over the residual graph.

    Attributes:
        bottleneck: Minimum residual capacity along the path to the sink, or 0
            when the sink is unreachable.
        previous: Edge handle used to first reach each node, indexed by node id;
            ``None`` for the source and for unreached nodes.
    """

    bottleneck: int
    previous: List[Optional[EdgeHandle]]

    @property
    def found(self) -> bool:
        return self.bottleneck > 0


@dataclass(frozen=True)
class FlowSummary:
    """Summary of max-flow computation results.

    Attributes:
        total_flow: Maximum flow value achieved.
        augmentations: Number of augmenting paths used.
        edge_flow: Flow per forward edge handle.
        reachable: Nodes reachable from the source in the final residual graph.
        min_cut: Forward edges leading from reachable to unreachable nodes.
    """

    total_flow: int
    augmentations: int
    edge_flow: Dict[EdgeHandle, int]
    reachable: Set[NodeID]
    min_cut: Tuple[EdgeHandle, ...]
