"""
Action Generator - Generates all legal actions from a puzzle state.

The action generator is used by:
1. UI to decide which bolts are clickable
2. Validation (is this action in legal_actions?)
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING

from .state import PuzzleState
from .action import Action, ActionType
from .reducer import Reducer

if TYPE_CHECKING:
    from ..puzzle_schema import PuzzleSpec


@dataclass
class ActionGenerator:
    """Generates legal actions for the current puzzle state."""
    spec: PuzzleSpec

    def removable_bolts(self, state: PuzzleState) -> list[str]:
        """
        Grid bolts a removal would be accepted for, in row-major order.

        Bolts referenced only by planks (not on the grid) come last.
        """
        reducer = Reducer(spec=self.spec)
        candidates = list(self.spec.bolt_ids)
        for plank in state.planks:
            for bolt_id in plank.bolts:
                if bolt_id not in candidates:
                    candidates.append(bolt_id)

        return [
            b for b in candidates
            if not state.is_removed(b) and reducer.can_remove(state, b)
        ]

    def generate(self, state: PuzzleState) -> list[Action]:
        """
        Generate all legal actions.

        Reset is always available.
        """
        actions = [Action.remove_bolt(b) for b in self.removable_bolts(state)]
        actions.append(Action.reset())
        return actions


def legal_actions(spec: PuzzleSpec, state: PuzzleState) -> list[Action]:
    """
    Convenience function to get legal actions.

    Creates an ActionGenerator and generates actions.
    """
    generator = ActionGenerator(spec=spec)
    return generator.generate(state)


def is_legal(spec: PuzzleSpec, state: PuzzleState, action: Action) -> bool:
    """Check if a specific action is legal."""
    if action.action_type == ActionType.RESET:
        return True
    for a in legal_actions(spec, state):
        if a.action_type == action.action_type and a.payload.bolt_id == action.payload.bolt_id:
            return True
    return False
