"""cubespell: spell words with letter cubes via maximum flow.

A word can be spelled when every letter position is covered by a distinct
cube carrying that letter. The problem is modeled as bipartite matching in a
unit-capacity flow network and solved with breadth-first augmenting paths.

Primary API:
    spell() - Feasibility and per-letter cube assignment as a SpellResult
    solve() - Plain list result: cube index per letter, or [-1]
    build_network() - Construct the source/cube/position/sink network
    calc_max_flow() - Max flow on any ResidualGraph

Example:
    from cubespell import spell

    result = spell(["AB", "BC"], "AC")
    result.feasible      # True
    result.assignment    # (0, 1)
"""

from __future__ import annotations

from cubespell import cli, logging
from cubespell.algorithms import (
    AugmentingPath,
    FlowSummary,
    calc_max_flow,
    find_augmenting_path,
)
from cubespell.config import DEFAULT_CONFIG, SolverConfig
from cubespell.graph import Edge, ResidualGraph, to_digraph
from cubespell.io import Puzzle, PuzzleFormatError, load_puzzle, parse_puzzle
from cubespell.model import CubeNetwork, NodeRole, build_network
from cubespell.solver import SpellResult, extract_assignment, solve, spell

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Solver
    "spell",
    "solve",
    "SpellResult",
    "extract_assignment",
    # Model
    "CubeNetwork",
    "NodeRole",
    "build_network",
    # Graph
    "Edge",
    "ResidualGraph",
    "to_digraph",
    # Algorithms
    "AugmentingPath",
    "FlowSummary",
    "calc_max_flow",
    "find_augmenting_path",
    # Input
    "Puzzle",
    "PuzzleFormatError",
    "load_puzzle",
    "parse_puzzle",
    # Configuration
    "SolverConfig",
    "DEFAULT_CONFIG",
    # Modules
    "cli",
    "logging",
]
