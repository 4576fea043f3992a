"""
Puzzle State - Session state of a bolt-and-plank puzzle.

Design principles:
- Immutable-friendly: all mutations return new state
- Removal order is kept (removed_bolts is a tuple, not a set)
- Planks are carried so reset can restore them from the spec
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..puzzle_schema import PuzzleSpec, Plank


class PuzzlePhase(Enum):
    """Derived phase of a puzzle session."""
    IN_PROGRESS = "in_progress"
    SOLVED = "solved"


@dataclass(frozen=True)
class PuzzleState:
    """
    Complete puzzle state at a point in time.

    This is the canonical state that the engine operates on.
    All state changes go through the reducer.
    """
    puzzle_id: str
    planks: tuple[Plank, ...] = ()

    # Grows monotonically between resets, in acceptance order
    removed_bolts: tuple[str, ...] = ()

    # One "Removed {bolt_id}" entry per accepted removal
    log: tuple[str, ...] = ()

    @classmethod
    def initial(cls, spec: PuzzleSpec) -> PuzzleState:
        """Fresh state for a spec: nothing removed, empty log."""
        return cls(puzzle_id=spec.puzzle_id, planks=tuple(spec.planks))

    def is_removed(self, bolt_id: str) -> bool:
        return bolt_id in self.removed_bolts

    def remaining_bolts(self, plank: Plank) -> list[str]:
        """Bolts of a plank that are still in place."""
        return [b for b in plank.bolts if b not in self.removed_bolts]

    def is_fallen(self, plank: Plank) -> bool:
        """A plank has fallen once every one of its bolts is removed."""
        return all(b in self.removed_bolts for b in plank.bolts)

    def is_dangling(self, plank: Plank) -> bool:
        """At least one bolt gone and exactly one left: the plank swings down."""
        remaining = self.remaining_bolts(plank)
        return len(remaining) == 1 and len(remaining) < len(plank.bolts)

    @property
    def is_solved(self) -> bool:
        return all(self.is_fallen(p) for p in self.planks)

    @property
    def phase(self) -> PuzzlePhase:
        return PuzzlePhase.SOLVED if self.is_solved else PuzzlePhase.IN_PROGRESS

    def with_removed(self, bolt_id: str) -> PuzzleState:
        """Return new state with the bolt removed and the removal logged."""
        return PuzzleState(
            puzzle_id=self.puzzle_id,
            planks=self.planks,
            removed_bolts=self.removed_bolts + (bolt_id,),
            log=self.log + (f"Removed {bolt_id}",),
        )
