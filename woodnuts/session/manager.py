"""
Session Manager - Creates and manages puzzle sessions.

A session is one play-through of a puzzle:
- Created when the player opens a puzzle
- Owns the only mutable copy of the puzzle state
- Mutated only by remove_bolt() and reset()
- Destroyed when the player leaves

Sessions are EPHEMERAL: in-memory only, nothing is persisted.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
import logging
import time
import uuid

from ..puzzle_schema import PuzzleSpec, Plank
from ..engine_core.state import PuzzleState, PuzzlePhase
from ..engine_core.action import Action, ActionResult
from ..engine_core.reducer import Reducer
from ..engine_core.action_generator import ActionGenerator
from ..engine_core.layout import BoardView, build_board_view

logger = logging.getLogger(__name__)


class SessionState(Enum):
    """State of a puzzle session."""
    ACTIVE = "active"  # Puzzle in progress
    SOLVED = "solved"  # Every plank has fallen
    COMPLETED = "completed"  # Ended after play
    ABANDONED = "abandoned"  # Player quit or session went stale


@dataclass
class Session:
    """
    An ephemeral puzzle session.

    Usage:
        session = Session.start(spec)
        if session.can_remove("1A"):
            session.remove_bolt("1A")
        session.is_solved()
        session.reset()
    """
    session_id: str
    spec: PuzzleSpec
    created_at: float
    puzzle_state: PuzzleState

    state: SessionState = SessionState.ACTIVE
    last_activity: float = 0.0

    _reducer: Reducer | None = field(default=None, repr=False)

    @classmethod
    def start(cls, spec: PuzzleSpec, session_id: str | None = None) -> Session:
        """Open a fresh session on a puzzle."""
        now = time.time()
        return cls(
            session_id=session_id or str(uuid.uuid4()),
            spec=spec,
            created_at=now,
            last_activity=now,
            puzzle_state=PuzzleState.initial(spec),
        )

    @property
    def reducer(self) -> Reducer:
        if self._reducer is None:
            self._reducer = Reducer(spec=self.spec)
        return self._reducer

    # -------------------------------------------------------------------------
    # Read-only queries
    # -------------------------------------------------------------------------

    @property
    def removed_bolts(self) -> tuple[str, ...]:
        return self.puzzle_state.removed_bolts

    @property
    def log(self) -> tuple[str, ...]:
        return self.puzzle_state.log

    @property
    def phase(self) -> PuzzlePhase:
        return self.puzzle_state.phase

    def can_remove(self, bolt_id: str) -> bool:
        return self.reducer.can_remove(self.puzzle_state, bolt_id)

    def blocking_planks(self, bolt_id: str) -> list[Plank]:
        return self.reducer.blocking_planks(self.puzzle_state, bolt_id)

    def is_solved(self) -> bool:
        return self.reducer.is_solved(self.puzzle_state)

    def removable_bolts(self) -> list[str]:
        return ActionGenerator(spec=self.spec).removable_bolts(self.puzzle_state)

    def legal_actions(self) -> list[Action]:
        return ActionGenerator(spec=self.spec).generate(self.puzzle_state)

    def fallen_planks(self) -> list[Plank]:
        return [p for p in self.puzzle_state.planks if self.puzzle_state.is_fallen(p)]

    def dangling_planks(self) -> list[Plank]:
        return [p for p in self.puzzle_state.planks if self.puzzle_state.is_dangling(p)]

    def board(self) -> BoardView:
        return build_board_view(self.spec, self.puzzle_state)

    def is_active(self) -> bool:
        return self.state in {SessionState.ACTIVE, SessionState.SOLVED}

    # -------------------------------------------------------------------------
    # Commands
    # -------------------------------------------------------------------------

    def dispatch(self, action: Action) -> ActionResult:
        """Apply an action; the session keeps the new state only on success."""
        result = self.reducer.apply(self.puzzle_state, action)
        if result.success and result.new_state is not None:
            self.puzzle_state = result.new_state
            self.state = SessionState.SOLVED if self.is_solved() else SessionState.ACTIVE
        self.last_activity = time.time()
        return result

    def remove_bolt(self, bolt_id: str) -> bool:
        """
        Remove a bolt if it is eligible.

        Ineligible, unknown or already-removed bolts are a silent no-op.
        Returns whether the removal was accepted.
        """
        return self.dispatch(Action.remove_bolt(bolt_id)).success

    def reset(self) -> None:
        """Back to zero removals and an empty log."""
        self.dispatch(Action.reset())


class SessionManager:
    """
    Manages puzzle sessions.

    Responsibilities:
    - Create sessions from puzzle specs
    - Track active sessions
    - Clean up stale sessions

    No persistence - sessions are in-memory only.
    """

    def __init__(self):
        self._sessions: dict[str, Session] = {}

    def create_session(self, spec: PuzzleSpec) -> Session:
        """Create a new session on a puzzle."""
        session = Session.start(spec)
        self._sessions[session.session_id] = session
        logger.info("Created session %s for puzzle %s", session.session_id, spec.puzzle_id)
        return session

    def get_session(self, session_id: str) -> Session | None:
        """Get a session by ID."""
        return self._sessions.get(session_id)

    def end_session(self, session_id: str, reason: str = "completed") -> bool:
        """
        End a session and drop it from memory.

        Returns False if no such session exists.
        """
        session = self._sessions.pop(session_id, None)
        if not session:
            return False

        if reason == "completed":
            session.state = SessionState.COMPLETED
        else:
            session.state = SessionState.ABANDONED
        logger.info("Ended session %s (%s)", session_id, reason)
        return True

    def list_active_sessions(self) -> list[str]:
        """List IDs of active sessions."""
        return [
            sid for sid, session in self._sessions.items()
            if session.is_active()
        ]

    def cleanup_stale_sessions(self, max_age_seconds: int = 3600) -> list[str]:
        """
        End sessions idle for longer than max_age_seconds.

        Returns the IDs that were removed.
        """
        current_time = time.time()
        to_remove = [
            session_id for session_id, session in self._sessions.items()
            if current_time - session.last_activity > max_age_seconds
        ]

        for session_id in to_remove:
            self.end_session(session_id, reason="stale")
        return to_remove
