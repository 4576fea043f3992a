"""
Games module - Built-in puzzles.

Each puzzle has its own subpackage with a spec factory.
The registry below maps puzzle IDs to those factories.
"""

from __future__ import annotations
from typing import Callable

from ..puzzle_schema import PuzzleSpec
from .wood_nuts import create_wood_nuts_spec


PUZZLES: dict[str, Callable[[], PuzzleSpec]] = {
    "wood_nuts": create_wood_nuts_spec,
}


def get_puzzle(puzzle_id: str) -> PuzzleSpec:
    """Build the spec for a registered puzzle. Raises KeyError if unknown."""
    try:
        factory = PUZZLES[puzzle_id]
    except KeyError:
        raise KeyError(f"Unknown puzzle: {puzzle_id}") from None
    return factory()


def list_puzzles() -> list[str]:
    """IDs of all registered puzzles."""
    return list(PUZZLES.keys())
