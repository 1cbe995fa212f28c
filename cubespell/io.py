"""Puzzle input parsing and result formatting.

Two puzzle formats are supported:

Line format (one item per line)::

    2
    AB
    BC
    AC

The first line is the number of cubes, followed by that many lines of cube
letters, followed by the target word.

YAML format::

    cubes: [AB, BC]
    word: AC
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, List, Union

import yaml

YAML_SUFFIXES = (".yaml", ".yml")

# Plain YAML scalars accepted as cube letters or word
_SCALAR_TYPES = (str, int, float)


def _is_scalar(value: Any) -> bool:
    return isinstance(value, _SCALAR_TYPES) and not isinstance(value, bool)


class PuzzleFormatError(ValueError):
    """Raised when puzzle input does not follow the expected layout."""


@dataclass(frozen=True)
class Puzzle:
    """A set of cubes and the word to spell with them."""

    cubes: List[str]
    word: str


def parse_puzzle(text: str) -> Puzzle:
    """Parse a puzzle in line format.

    Blank lines after the target word are ignored; an empty line in the word
    slot is an empty word. Lines are otherwise taken verbatim apart from the
    line terminator.

    Raises:
        PuzzleFormatError: On a missing or invalid cube count or missing lines.
    """
    lines = text.splitlines()
    if not any(line.strip() for line in lines):
        raise PuzzleFormatError("Puzzle input is empty.")

    try:
        count = int(lines[0].strip())
    except ValueError as exc:
        raise PuzzleFormatError(
            f"First line must be the number of cubes, got {lines[0]!r}."
        ) from exc
    if count < 0:
        raise PuzzleFormatError(f"Number of cubes must be non-negative, got {count}.")

    while len(lines) > count + 2 and not lines[-1].strip():
        lines.pop()

    if len(lines) < count + 2:
        raise PuzzleFormatError(
            f"Expected {count} cube line(s) and a target word, "
            f"got {len(lines) - 1} line(s)."
        )
    return Puzzle(cubes=lines[1 : count + 1], word=lines[count + 1])


def parse_puzzle_yaml(yaml_str: str) -> Puzzle:
    """Parse a puzzle from a YAML mapping with ``cubes`` and ``word`` keys.

    Raises:
        PuzzleFormatError: If the document does not have the expected shape.
    """
    try:
        data: Any = yaml.safe_load(yaml_str)
    except yaml.YAMLError as exc:
        raise PuzzleFormatError(f"Invalid YAML: {exc}") from exc
    if not isinstance(data, dict):
        raise PuzzleFormatError(
            "The provided YAML must map to a dictionary at top-level."
        )
    unknown = set(data) - {"cubes", "word"}
    if unknown:
        raise PuzzleFormatError(
            f"Unrecognized puzzle keys: {sorted(map(str, unknown))}"
        )

    cubes = data.get("cubes")
    word = data.get("word")
    if not isinstance(cubes, list):
        raise PuzzleFormatError("'cubes' must be a list of strings")
    for index, entry in enumerate(cubes):
        if not _is_scalar(entry):
            raise PuzzleFormatError(
                f"Cube entry {index} must be a string, got {type(entry).__name__}"
            )
    if word is None:
        raise PuzzleFormatError("Puzzle is missing 'word'")
    if not _is_scalar(word):
        raise PuzzleFormatError(
            f"'word' must be a string, got {type(word).__name__}"
        )
    # YAML turns bare tokens like 12 into numbers
    return Puzzle(cubes=[str(c) for c in cubes], word=str(word))


def load_puzzle(path: Union[str, Path]) -> Puzzle:
    """Read a puzzle file, choosing the format by file suffix.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        PuzzleFormatError: If the file content is malformed.
    """
    path = Path(path)
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() in YAML_SUFFIXES:
        return parse_puzzle_yaml(text)
    return parse_puzzle(text)


def format_assignment(values: Iterable[int]) -> str:
    """Format an assignment (or the infeasibility marker) as space-separated ints."""
    return " ".join(str(v) for v in values)
