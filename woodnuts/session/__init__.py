"""
Session Module - Manages ephemeral puzzle sessions.

A session represents one play-through of a puzzle:
- Created when the player opens a puzzle
- Holds the current puzzle state
- Destroyed when the player leaves

No persistence to disk or database.
"""

from .manager import SessionManager, Session, SessionState

__all__ = [
    "SessionManager",
    "Session",
    "SessionState",
]
