"""
API Service - Business logic layer between API and engine.

The service:
1. Translates API requests to engine calls
2. Manages sessions
3. Formats board state for renderers

This layer is framework-agnostic (can be used with FastAPI, Flask, etc.)
Lookups of a missing session return an ErrorResponse instead of raising.
"""

from __future__ import annotations
from dataclasses import dataclass, field
import logging

from .schemas import (
    # Requests
    CreateSessionRequest,
    # Responses
    BoardResponse,
    RemoveBoltResponse,
    LegalActionsResponse,
    PuzzleListResponse,
    ErrorResponse,
    # Shared
    ActionInfo,
    BoltInfo,
    PlankInfo,
    PuzzleSummary,
    # Enums
    ErrorCode,
    SessionStatus,
    PuzzlePhase,
    RemovalRefusal,
)
from ..config import SESSION_MAX_AGE
from ..games import get_puzzle, list_puzzles
from ..session import SessionManager, Session
from ..engine_core.action import Action

logger = logging.getLogger(__name__)


def _refusal_reason(error_code: str | None) -> RemovalRefusal | None:
    """Map a reducer error code to a refusal reason, if it is one."""
    if error_code is None:
        return None
    try:
        return RemovalRefusal(error_code)
    except ValueError:
        return None


@dataclass
class APIService:
    """
    Main API service.

    Usage:
        service = APIService()
        board = service.create_session(CreateSessionRequest())
        result = service.remove_bolt(board.session_id, "1A")
        board = service.reset(board.session_id)
    """
    session_manager: SessionManager = field(default_factory=SessionManager)
    max_session_age: int = SESSION_MAX_AGE

    def list_puzzles(self) -> PuzzleListResponse:
        summaries = []
        for puzzle_id in list_puzzles():
            spec = get_puzzle(puzzle_id)
            summaries.append(PuzzleSummary(
                puzzle_id=spec.puzzle_id,
                name=spec.name,
                bolt_count=len(spec.bolt_ids),
                plank_count=len(spec.planks),
            ))
        return PuzzleListResponse(puzzles=summaries)

    def create_session(self, request: CreateSessionRequest) -> BoardResponse:
        """
        Create a new puzzle session.

        Raises ValueError if the puzzle is not registered.
        """
        try:
            spec = get_puzzle(request.puzzle_id)
        except KeyError:
            raise ValueError(f"Unknown puzzle: {request.puzzle_id}")

        self.cleanup(self.max_session_age)
        session = self.session_manager.create_session(spec)
        return self._board_response(session)

    def get_session(self, session_id: str) -> BoardResponse | ErrorResponse:
        """Get the current board for a session."""
        session = self.session_manager.get_session(session_id)
        if not session:
            return self._session_not_found(session_id)
        return self._board_response(session)

    def remove_bolt(self, session_id: str, bolt_id: str) -> RemoveBoltResponse | ErrorResponse:
        """
        Try to remove a bolt.

        A refused removal leaves the session untouched and reports why.
        """
        session = self.session_manager.get_session(session_id)
        if not session:
            return self._session_not_found(session_id)

        result = session.dispatch(Action.remove_bolt(bolt_id))

        return RemoveBoltResponse(
            accepted=result.success,
            bolt_id=bolt_id,
            reason=_refusal_reason(result.error_code),
            message=result.error,
            changes=result.state_changes,
            board=self._board_response(session),
        )

    def reset(self, session_id: str) -> BoardResponse | ErrorResponse:
        session = self.session_manager.get_session(session_id)
        if not session:
            return self._session_not_found(session_id)
        session.reset()
        return self._board_response(session)

    def legal_actions(self, session_id: str) -> LegalActionsResponse | ErrorResponse:
        session = self.session_manager.get_session(session_id)
        if not session:
            return self._session_not_found(session_id)

        actions = [
            ActionInfo(action_type=a.action_type.value, bolt_id=a.payload.bolt_id)
            for a in session.legal_actions()
        ]
        return LegalActionsResponse(
            session_id=session_id,
            actions=actions,
            removable_bolts=session.removable_bolts(),
        )

    def end_session(self, session_id: str, reason: str = "completed") -> bool:
        """End a session."""
        return self.session_manager.end_session(session_id, reason)

    def list_sessions(self) -> list[str]:
        """List active session IDs."""
        return self.session_manager.list_active_sessions()

    def cleanup(self, max_age_seconds: int) -> list[str]:
        return self.session_manager.cleanup_stale_sessions(max_age_seconds)

    # =========================================================================
    # Helpers
    # =========================================================================

    def _board_response(self, session: Session) -> BoardResponse:
        """Convert a session's board view to the API schema."""
        view = session.board()
        return BoardResponse(
            session_id=session.session_id,
            puzzle_id=view.puzzle_id,
            name=view.name,
            columns=view.columns,
            rows=view.rows,
            bolts=[BoltInfo.model_validate(b) for b in view.bolts],
            planks=[PlankInfo.model_validate(p) for p in view.planks],
            starter_holes=view.starter_holes,
            removed_bolts=list(session.removed_bolts),
            log=view.log,
            solved=view.solved,
            phase=PuzzlePhase(view.phase.value),
            status=SessionStatus(session.state.value),
        )

    def _session_not_found(self, session_id: str) -> ErrorResponse:
        logger.debug("Session %s not found", session_id)
        return ErrorResponse(
            error=f"Session {session_id} not found",
            error_code=ErrorCode.SESSION_NOT_FOUND,
        )
