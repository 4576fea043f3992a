"""
API Module - Renderer interface.

Exposes the engine via REST API. A renderer:
1. Starts a session on a puzzle
2. Draws the board it receives
3. Sends bolt removals and resets
4. Redraws from the returned board

All state is session-scoped.
"""

from .schemas import (
    CreateSessionRequest,
    BoardResponse,
    RemoveBoltResponse,
    LegalActionsResponse,
    ErrorResponse,
    BoltInfo,
    PlankInfo,
    ErrorCode,
)
from .service import APIService
from .app import create_app

__all__ = [
    "CreateSessionRequest",
    "BoardResponse",
    "RemoveBoltResponse",
    "LegalActionsResponse",
    "ErrorResponse",
    "BoltInfo",
    "PlankInfo",
    "ErrorCode",
    "APIService",
    "create_app",
]
