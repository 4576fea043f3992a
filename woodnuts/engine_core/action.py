"""
Action System - Actions, payloads, and results.

The puzzle accepts exactly two commands:
1. Remove a bolt
2. Reset the board

All state changes flow through actions.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ActionType(Enum):
    """Types of actions in the system."""
    REMOVE_BOLT = "remove_bolt"
    RESET = "reset"


class RefusalReason(str, Enum):
    """Why a removal was turned down."""
    UNKNOWN_BOLT = "UNKNOWN_BOLT"
    ALREADY_REMOVED = "ALREADY_REMOVED"
    BOLT_BLOCKED = "BOLT_BLOCKED"


@dataclass
class ActionPayload:
    """Payload for an action - contains the action parameters."""
    bolt_id: str | None = None


@dataclass
class Action:
    """A complete action to be applied to the puzzle state."""
    action_type: ActionType
    payload: ActionPayload = field(default_factory=ActionPayload)

    @classmethod
    def remove_bolt(cls, bolt_id: str) -> Action:
        """Factory for remove-bolt action."""
        return cls(
            action_type=ActionType.REMOVE_BOLT,
            payload=ActionPayload(bolt_id=bolt_id),
        )

    @classmethod
    def reset(cls) -> Action:
        """Factory for reset action."""
        return cls(action_type=ActionType.RESET)


@dataclass
class ActionResult:
    """
    Result of applying an action.

    Contains:
    - Whether action succeeded
    - New state (if succeeded)
    - Errors (if failed)
    - Human-readable changes for the UI
    """
    success: bool
    new_state: Any | None = None  # PuzzleState
    error: str | None = None
    error_code: str | None = None

    state_changes: list[str] = field(default_factory=list)

    @classmethod
    def failure(cls, error: str, error_code: str | None = None) -> ActionResult:
        """Create a failure result."""
        return cls(success=False, error=error, error_code=error_code)

    @classmethod
    def success_with_state(
        cls,
        state: Any,
        changes: list[str] | None = None,
    ) -> ActionResult:
        """Create a success result with new state."""
        return cls(
            success=True,
            new_state=state,
            state_changes=changes or [],
        )
