"""Command-line interface for cubespell."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from cubespell.config import SolverConfig
from cubespell.io import PuzzleFormatError, format_assignment, load_puzzle
from cubespell.logging import get_logger, set_global_log_level
from cubespell.solver import spell

logger = get_logger(__name__)


def _solve_puzzle(path: Path, as_json: bool = False, ignore_case: bool = False) -> None:
    """Load a puzzle file, solve it and print the result to stdout.

    Raises:
        SystemExit: With code 1 if the file is missing or malformed.
    """
    logger.info(f"Loading puzzle from: {path}")
    try:
        puzzle = load_puzzle(path)
    except FileNotFoundError:
        logger.error(f"Puzzle file not found: {path}")
        sys.exit(1)
    except PuzzleFormatError as e:
        logger.error(f"Invalid puzzle: {e}")
        sys.exit(1)

    logger.debug(f"Puzzle has {len(puzzle.cubes)} cube(s), word {puzzle.word!r}")
    result = spell(puzzle.cubes, puzzle.word, SolverConfig(ignore_case=ignore_case))
    logger.info(
        f"Word {puzzle.word!r} is {'feasible' if result.feasible else 'infeasible'}"
        f" ({result.total_flow}/{len(puzzle.word)} letters matched)"
    )

    if as_json:
        payload = {
            "word": puzzle.word,
            "feasible": result.feasible,
            "assignment": list(result.assignment) if result.feasible else None,
            "total_flow": result.total_flow,
            "unmatched": list(result.unmatched),
        }
        print(json.dumps(payload, indent=2))
    else:
        print(format_assignment(result.to_list()))


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``cubespell`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="cubespell",
        description="Spell words with letter cubes using maximum flow.",
    )

    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Suppress informational logs"
    )
    parser.add_argument(
        "--log-level",
        choices=["debug", "info", "warning", "error"],
        default=None,
        help="Explicit log level (overrides --verbose/--quiet)",
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{solve}",
        help="Available commands",
    )

    solve_parser = subparsers.add_parser("solve", help="Solve a puzzle file")
    solve_parser.add_argument(
        "puzzle",
        type=Path,
        help="Path to puzzle file (line format, or YAML with .yaml/.yml suffix)",
    )
    solve_parser.add_argument(
        "--json", action="store_true", help="Print the result as JSON"
    )
    solve_parser.add_argument(
        "--ignore-case",
        action="store_true",
        help="Match cube letters to the word case-insensitively",
    )

    effective_args = sys.argv[1:] if argv is None else argv

    # If no arguments are provided, show help and exit cleanly
    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    if args.log_level:
        set_global_log_level(args.log_level)
    elif args.verbose:
        set_global_log_level(logging.DEBUG)
        logger.debug("Debug logging enabled")
    elif args.quiet:
        set_global_log_level(logging.WARNING)
    else:
        set_global_log_level(logging.INFO)

    if args.command == "solve":
        _solve_puzzle(args.puzzle, as_json=args.json, ignore_case=args.ignore_case)


if __name__ == "__main__":
    main()
