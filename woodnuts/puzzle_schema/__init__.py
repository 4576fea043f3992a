"""Puzzle specification schema - static bolt grid and plank definitions."""

from .puzzle_spec import PuzzleSpec, Plank, Bolt, GridPosition
from .validation import validate_puzzle, PuzzleValidationError, ValidationResult

__all__ = [
    "PuzzleSpec",
    "Plank",
    "Bolt",
    "GridPosition",
    "validate_puzzle",
    "PuzzleValidationError",
    "ValidationResult",
]
