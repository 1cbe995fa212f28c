"""Cube spelling solver: network construction, max flow and assignment recovery.

Typical usage:

    >>> spell(["AB", "BC"], "AC").to_list()
    [0, 1]
    >>> solve(["AB"], "AB")
    [-1]

Infeasibility is an ordinary result (``SpellResult.feasible is False``), not
an exception.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

from cubespell.algorithms.max_flow import calc_max_flow
from cubespell.config import DEFAULT_CONFIG, SolverConfig
from cubespell.logging import get_logger
from cubespell.model.network import CubeNetwork, build_network

logger = get_logger(__name__)


@dataclass(frozen=True)
class SpellResult:
    """Outcome of a spelling attempt.

    Attributes:
        feasible: True when every letter position is covered by a distinct cube.
        assignment: Cube index per letter position (empty when infeasible).
        total_flow: Max-flow value, i.e. the size of the largest valid matching.
        unmatched: Letter positions left uncovered by the maximum matching.
        infeasible_marker: Value reported by ``to_list()`` when infeasible.
    """

    feasible: bool
    assignment: Tuple[int, ...]
    total_flow: int
    unmatched: Tuple[int, ...] = ()
    infeasible_marker: int = DEFAULT_CONFIG.infeasible_marker

    def to_list(self) -> List[int]:
        """Return the assignment, or ``[infeasible_marker]`` if infeasible."""
        if not self.feasible:
            return [self.infeasible_marker]
        return list(self.assignment)


def extract_assignment(
    network: CubeNetwork,
    total_flow: int,
    config: Optional[SolverConfig] = None,
) -> SpellResult:
    """Recover the cube used for each letter position from final edge flows.

    The word is spelled iff ``total_flow`` equals the number of positions. For
    each position, the residual edge carrying flow -1 points back to the cube
    that supplied it.

    Raises:
        RuntimeError: If a position of a feasible network has no supplying cube.
    """
    config = config or DEFAULT_CONFIG
    graph = network.graph

    if total_flow != network.word_length:
        unmatched = tuple(
            i
            for i, node in enumerate(network.positions)
            if not any(
                graph.is_forward(h)
                and graph.edge(h).end == network.sink
                and graph.edge(h).flow > 0
                for h in graph.out_edges(node)
            )
        )
        logger.debug(
            "Word %r is infeasible: matched %d of %d positions",
            network.word,
            total_flow,
            network.word_length,
        )
        return SpellResult(
            feasible=False,
            assignment=(),
            total_flow=total_flow,
            unmatched=unmatched,
            infeasible_marker=config.infeasible_marker,
        )

    assignment = []
    for i, node in enumerate(network.positions):
        for handle in graph.out_edges(node):
            edge = graph.edge(handle)
            if edge.flow == -1:
                assignment.append(network.cube_index(edge.end))
                break
        else:
            raise RuntimeError(f"No cube supplies letter position {i}.")

    return SpellResult(
        feasible=True,
        assignment=tuple(assignment),
        total_flow=total_flow,
        infeasible_marker=config.infeasible_marker,
    )


def spell(
    cubes: Sequence[Iterable[str]],
    word: str,
    config: Optional[SolverConfig] = None,
) -> SpellResult:
    """Decide whether ``word`` can be spelled with ``cubes`` and how.

    Args:
        cubes: Letters of each cube, in input order.
        word: Target word.
        config: Solver configuration; defaults to ``DEFAULT_CONFIG``.

    Returns:
        SpellResult describing feasibility and the cube index per position.
    """
    config = config or DEFAULT_CONFIG
    network = build_network(cubes, word, config)
    total_flow = calc_max_flow(
        network.graph, network.source, network.sink, config=config
    )
    return extract_assignment(network, total_flow, config)


def solve(cubes: Sequence[Iterable[str]], word: str) -> List[int]:
    """Return the cube index per letter of ``word``, or ``[-1]`` if impossible."""
    return spell(cubes, word).to_list()
