"""
Reducer - Applies actions to puzzle state.

The reducer is the single point of state mutation.
All state changes must go through apply_action().

Design principles:
- Pure function: (state, action) -> new_state
- Validates before applying
- Returns ActionResult with success/failure, never raises

Eligibility rule, kept exactly as the puzzle defines it:
a plank P blocks bolt b when b is one of P's bolts, P still has a bolt
in place, and P spans more than one bolt. A bolt is removable when no
plank blocks it. Since b is itself still in place before its removal,
any bolt held by a multi-bolt plank is blocked.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING
import logging

from .state import PuzzleState
from .action import Action, ActionType, ActionResult, RefusalReason

if TYPE_CHECKING:
    from ..puzzle_schema import PuzzleSpec, Plank

logger = logging.getLogger(__name__)


@dataclass
class Reducer:
    """
    Reducer applies actions to puzzle state.

    Stateless - all state is in PuzzleState.
    Spec provides the topology for reset and bolt lookup.
    """
    spec: PuzzleSpec

    def blocking_planks(self, state: PuzzleState, bolt_id: str) -> list[Plank]:
        """Planks currently preventing removal of a bolt."""
        return [
            p for p in state.planks
            if p.holds(bolt_id)
            and any(not state.is_removed(b) for b in p.bolts)
            and p.bolt_count > 1
        ]

    def can_remove(self, state: PuzzleState, bolt_id: str) -> bool:
        """Eligibility predicate: no plank blocks the bolt."""
        return len(self.blocking_planks(state, bolt_id)) == 0

    def is_solved(self, state: PuzzleState) -> bool:
        """Every plank has fallen."""
        return state.is_solved

    def apply(self, state: PuzzleState, action: Action) -> ActionResult:
        """
        Apply an action to the puzzle state.

        Returns ActionResult with new state or error.
        """
        handler = self._get_handler(action.action_type)
        if not handler:
            return ActionResult.failure(
                f"No handler for action type: {action.action_type}",
                error_code="NO_HANDLER",
            )

        try:
            return handler(state, action)
        except Exception as e:
            logger.exception("Handler failed for %s", action.action_type.value)
            return ActionResult.failure(str(e), error_code="HANDLER_ERROR")

    def _get_handler(self, action_type: ActionType):
        """Get the handler function for an action type."""
        handlers = {
            ActionType.REMOVE_BOLT: self._handle_remove_bolt,
            ActionType.RESET: self._handle_reset,
        }
        return handlers.get(action_type)

    def _handle_remove_bolt(self, state: PuzzleState, action: Action) -> ActionResult:
        """Handle remove-bolt action."""
        bolt_id = action.payload.bolt_id

        # can_remove() is True for ids no plank holds; only known bolts are removed.
        if not bolt_id or not self.spec.is_known_bolt(bolt_id):
            return self._refuse(bolt_id, f"Bolt {bolt_id} is not part of this puzzle",
                                RefusalReason.UNKNOWN_BOLT)

        if state.is_removed(bolt_id):
            return self._refuse(bolt_id, f"Bolt {bolt_id} is already removed",
                                RefusalReason.ALREADY_REMOVED)

        blockers = self.blocking_planks(state, bolt_id)
        if blockers:
            names = ", ".join(p.id for p in blockers)
            return self._refuse(bolt_id, f"Bolt {bolt_id} is held by {names}",
                                RefusalReason.BOLT_BLOCKED)

        new_state = state.with_removed(bolt_id)
        changes = [new_state.log[-1]]
        for plank in new_state.planks:
            if plank.holds(bolt_id) and new_state.is_fallen(plank):
                changes.append(f"Plank {plank.id} fell")

        logger.debug("Removed bolt %s (%d removed)", bolt_id, len(new_state.removed_bolts))
        return ActionResult.success_with_state(new_state, changes=changes)

    def _handle_reset(self, state: PuzzleState, action: Action) -> ActionResult:
        """Handle reset action: empty removals and log, planks restored from spec."""
        logger.debug("Reset puzzle %s", state.puzzle_id)
        return ActionResult.success_with_state(
            PuzzleState.initial(self.spec),
            changes=["Puzzle reset"],
        )

    def _refuse(self, bolt_id: str | None, message: str, reason: RefusalReason) -> ActionResult:
        logger.debug("Refused removal of %s: %s", bolt_id, reason.value)
        return ActionResult.failure(message, error_code=reason.value)


def apply_action(spec: PuzzleSpec, state: PuzzleState, action: Action) -> ActionResult:
    """
    Convenience function to apply an action.

    Creates a Reducer and applies the action.
    """
    reducer = Reducer(spec=spec)
    return reducer.apply(state, action)


def can_remove(spec: PuzzleSpec, state: PuzzleState, bolt_id: str) -> bool:
    """Convenience function for the eligibility predicate."""
    return Reducer(spec=spec).can_remove(state, bolt_id)
