"""
Pydantic Schemas for API - Request/response models for OpenAPI.

These models define the contract between a board renderer and the engine.
The renderer only draws what it is handed; every decision (which bolts
are clickable, which planks fell, whether the puzzle is solved) is made
by the engine and shipped in these models.

Error Codes:
- SESSION_NOT_FOUND: Session does not exist or has expired
- UNKNOWN_PUZZLE: Puzzle ID is not registered
- VALIDATION_ERROR: Request could not be parsed
- INTERNAL_ERROR: Unexpected failure

A refused bolt removal is not an error: it comes back with
accepted=false and a reason.
"""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field


# =============================================================================
# Enums
# =============================================================================

class SessionStatus(str, Enum):
    """Status of a live session; ended sessions are no longer reachable."""
    ACTIVE = "active"
    SOLVED = "solved"


class PuzzlePhase(str, Enum):
    IN_PROGRESS = "in_progress"
    SOLVED = "solved"


class RemovalRefusal(str, Enum):
    """Why a bolt removal was not accepted."""
    UNKNOWN_BOLT = "UNKNOWN_BOLT"
    ALREADY_REMOVED = "ALREADY_REMOVED"
    BOLT_BLOCKED = "BOLT_BLOCKED"


class ErrorCode(str, Enum):
    """Structured error codes."""
    SESSION_NOT_FOUND = "SESSION_NOT_FOUND"
    UNKNOWN_PUZZLE = "UNKNOWN_PUZZLE"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"


# =============================================================================
# Board Models
# =============================================================================

class BoltInfo(BaseModel):
    """A bolt and how to draw it."""
    bolt_id: str
    column: int
    row: int
    removed: bool = False
    removable: bool = False

    model_config = {"from_attributes": True}


class PlankInfo(BaseModel):
    """A plank rectangle, in grid cells."""
    plank_id: str
    color: str
    level: int
    left: int
    top: int
    width: int
    height: int
    z_index: int = Field(description="Stacking order, level * 10")
    bolts: list[str] = Field(default_factory=list)
    fallen: bool = Field(False, description="Every bolt removed")
    dangling: bool = Field(False, description="Some bolts removed, exactly one left")

    model_config = {"from_attributes": True}


class BoardResponse(BaseModel):
    """Everything a renderer needs to redraw the board."""
    session_id: str
    puzzle_id: str
    name: str
    columns: int
    rows: int
    bolts: list[BoltInfo] = Field(default_factory=list)
    planks: list[PlankInfo] = Field(default_factory=list)
    starter_holes: list[str] = Field(default_factory=list)
    removed_bolts: list[str] = Field(default_factory=list)
    log: list[str] = Field(default_factory=list)
    solved: bool = False
    phase: PuzzlePhase = PuzzlePhase.IN_PROGRESS
    status: SessionStatus = SessionStatus.ACTIVE


# =============================================================================
# Requests
# =============================================================================

class CreateSessionRequest(BaseModel):
    puzzle_id: str = Field("wood_nuts", description="Registered puzzle to play")


# =============================================================================
# Responses
# =============================================================================

class RemoveBoltResponse(BaseModel):
    """Result of a remove-bolt command."""
    accepted: bool
    bolt_id: str
    reason: Optional[RemovalRefusal] = None
    message: Optional[str] = None
    changes: list[str] = Field(default_factory=list)
    board: BoardResponse


class ActionInfo(BaseModel):
    action_type: str
    bolt_id: Optional[str] = None


class LegalActionsResponse(BaseModel):
    session_id: str
    actions: list[ActionInfo] = Field(default_factory=list)
    removable_bolts: list[str] = Field(default_factory=list)


class PuzzleSummary(BaseModel):
    puzzle_id: str
    name: str
    bolt_count: int
    plank_count: int


class PuzzleListResponse(BaseModel):
    puzzles: list[PuzzleSummary] = Field(default_factory=list)


class SessionListResponse(BaseModel):
    sessions: list[str] = Field(default_factory=list)
    count: int = 0


class EndSessionResponse(BaseModel):
    success: bool
    session_id: str


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str
    environment: str
    active_sessions: int = 0


class ErrorResponse(BaseModel):
    """Standardized error response."""
    error: str
    error_code: ErrorCode
    details: Optional[dict] = None
