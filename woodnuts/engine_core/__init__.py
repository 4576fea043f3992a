"""
Engine Core - Deterministic puzzle state management.

The engine is the runtime that:
1. Loads a PuzzleSpec
2. Manages PuzzleState
3. Decides which bolts are removable
4. Applies actions via the reducer
5. Projects state into a renderable board
"""

from .state import PuzzleState, PuzzlePhase
from .action import Action, ActionType, ActionPayload, ActionResult, RefusalReason
from .reducer import Reducer, apply_action, can_remove
from .action_generator import ActionGenerator, legal_actions, is_legal
from .layout import BoardView, BoltView, PlankGeometry, build_board_view, render_text

__all__ = [
    "PuzzleState",
    "PuzzlePhase",
    "Action",
    "ActionType",
    "ActionPayload",
    "ActionResult",
    "RefusalReason",
    "Reducer",
    "apply_action",
    "can_remove",
    "ActionGenerator",
    "legal_actions",
    "is_legal",
    "BoardView",
    "BoltView",
    "PlankGeometry",
    "build_board_view",
    "render_text",
]
