from cubespell.algorithms.bfs import find_augmenting_path, reachable_nodes
from cubespell.algorithms.max_flow import calc_max_flow
from cubespell.algorithms.types import AugmentingPath, FlowSummary

__all__ = [
    "AugmentingPath",
    "FlowSummary",
    "calc_max_flow",
    "find_augmenting_path",
    "reachable_nodes",
]
