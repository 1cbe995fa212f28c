from cubespell.graph.convert import to_digraph
from cubespell.graph.residual import Edge, EdgeHandle, NodeID, ResidualGraph

__all__ = ["Edge", "EdgeHandle", "NodeID", "ResidualGraph", "to_digraph"]
