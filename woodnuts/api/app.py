"""
FastAPI Application - REST API for board renderers.

Endpoints:
    GET    /api/v1/health                                 Service health
    GET    /api/v1/puzzles                                Built-in puzzles
    POST   /api/v1/sessions                               Start a puzzle session
    GET    /api/v1/sessions                               List active sessions
    GET    /api/v1/sessions/{id}                          Current board
    DELETE /api/v1/sessions/{id}                          End session
    POST   /api/v1/sessions/{id}/bolts/{bolt_id}/remove   Remove a bolt
    POST   /api/v1/sessions/{id}/reset                    Reset the board
    GET    /api/v1/sessions/{id}/actions                  Legal actions

All responses are JSON with explicit Pydantic schemas.
A refused removal is a 200 with accepted=false; only a missing
session or puzzle is an HTTP error.
"""

from typing import Optional, Union
import logging

from .. import __version__
from ..config import ALLOWED_ORIGINS, WOODNUTS_ENV

logger = logging.getLogger(__name__)


def create_app(service=None):
    """
    Create the FastAPI application.

    Args:
        service: Optional APIService instance (creates new if not provided)

    Returns:
        FastAPI application instance
    """
    try:
        from fastapi import FastAPI, Body
        from fastapi.middleware.cors import CORSMiddleware
        from fastapi.responses import JSONResponse
    except ImportError:
        raise ImportError(
            "FastAPI not installed. Install with: pip install fastapi uvicorn"
        )

    from .service import APIService
    from .schemas import (
        CreateSessionRequest,
        BoardResponse,
        RemoveBoltResponse,
        LegalActionsResponse,
        PuzzleListResponse,
        SessionListResponse,
        EndSessionResponse,
        HealthResponse,
        ErrorResponse,
        ErrorCode,
    )

    app = FastAPI(
        title="Wood Nuts API",
        description="""
Bolt-and-plank puzzle engine.

The renderer draws the board it is handed and sends back two commands:
remove a bolt, or reset. Which bolts are removable, which planks fell,
and whether the puzzle is solved are all decided here.

## Error Codes

| Code | Description |
|------|-------------|
| `SESSION_NOT_FOUND` | Session does not exist |
| `UNKNOWN_PUZZLE` | Puzzle ID is not registered |
        """,
        version=__version__,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    api_service = service or APIService()

    # =========================================================================
    # Error helpers
    # =========================================================================

    def make_error_response(
        error_code: ErrorCode,
        message: str,
        status_code: int = 400,
        details: Optional[dict] = None,
    ) -> JSONResponse:
        """Create a standardized error response."""
        return JSONResponse(
            status_code=status_code,
            content=ErrorResponse(
                error=message,
                error_code=error_code,
                details=details,
            ).model_dump(mode="json"),
        )

    def not_found(response: ErrorResponse) -> JSONResponse:
        return make_error_response(response.error_code, response.error, status_code=404)

    # =========================================================================
    # Health & Catalog
    # =========================================================================

    @app.get(
        "/api/v1/health",
        response_model=HealthResponse,
        tags=["Health"],
        summary="Service health",
    )
    async def health() -> HealthResponse:
        return HealthResponse(
            version=__version__,
            environment=WOODNUTS_ENV,
            active_sessions=len(api_service.list_sessions()),
        )

    @app.get(
        "/api/v1/puzzles",
        response_model=PuzzleListResponse,
        tags=["Puzzles"],
        summary="List built-in puzzles",
    )
    async def list_puzzles() -> PuzzleListResponse:
        return api_service.list_puzzles()

    # =========================================================================
    # Session Endpoints
    # =========================================================================

    @app.post(
        "/api/v1/sessions",
        response_model=BoardResponse,
        responses={400: {"model": ErrorResponse, "description": "Unknown puzzle"}},
        tags=["Sessions"],
        summary="Start a puzzle session",
    )
    async def create_session(
        body: Optional[CreateSessionRequest] = Body(None),
    ) -> Union[BoardResponse, JSONResponse]:
        """Start a new session. Defaults to the built-in Wood Nuts puzzle."""
        request = body or CreateSessionRequest()
        try:
            return api_service.create_session(request)
        except ValueError as e:
            return make_error_response(ErrorCode.UNKNOWN_PUZZLE, str(e))

    @app.get(
        "/api/v1/sessions",
        response_model=SessionListResponse,
        tags=["Sessions"],
        summary="List active sessions",
    )
    async def list_sessions() -> SessionListResponse:
        sessions = api_service.list_sessions()
        return SessionListResponse(sessions=sessions, count=len(sessions))

    @app.get(
        "/api/v1/sessions/{session_id}",
        response_model=BoardResponse,
        responses={404: {"model": ErrorResponse}},
        tags=["Sessions"],
        summary="Get the current board",
    )
    async def get_session(session_id: str) -> Union[BoardResponse, JSONResponse]:
        response = api_service.get_session(session_id)
        if isinstance(response, ErrorResponse):
            return not_found(response)
        return response

    @app.delete(
        "/api/v1/sessions/{session_id}",
        response_model=EndSessionResponse,
        tags=["Sessions"],
        summary="End a session",
    )
    async def end_session(session_id: str, reason: str = "completed") -> EndSessionResponse:
        success = api_service.end_session(session_id, reason)
        return EndSessionResponse(success=success, session_id=session_id)

    # =========================================================================
    # Play Endpoints
    # =========================================================================

    @app.post(
        "/api/v1/sessions/{session_id}/bolts/{bolt_id}/remove",
        response_model=RemoveBoltResponse,
        responses={404: {"model": ErrorResponse}},
        tags=["Play"],
        summary="Remove a bolt",
    )
    async def remove_bolt(session_id: str, bolt_id: str) -> Union[RemoveBoltResponse, JSONResponse]:
        """
        Remove a bolt if it is eligible.

        Ineligible removals leave the board as it was and come back
        with `accepted=false` and a `reason`.
        """
        response = api_service.remove_bolt(session_id, bolt_id)
        if isinstance(response, ErrorResponse):
            return not_found(response)
        return response

    @app.post(
        "/api/v1/sessions/{session_id}/reset",
        response_model=BoardResponse,
        responses={404: {"model": ErrorResponse}},
        tags=["Play"],
        summary="Reset the board",
    )
    async def reset(session_id: str) -> Union[BoardResponse, JSONResponse]:
        response = api_service.reset(session_id)
        if isinstance(response, ErrorResponse):
            return not_found(response)
        return response

    @app.get(
        "/api/v1/sessions/{session_id}/actions",
        response_model=LegalActionsResponse,
        responses={404: {"model": ErrorResponse}},
        tags=["Play"],
        summary="Legal actions for the current board",
    )
    async def get_actions(session_id: str) -> Union[LegalActionsResponse, JSONResponse]:
        response = api_service.legal_actions(session_id)
        if isinstance(response, ErrorResponse):
            return not_found(response)
        return response

    logger.info("Created app (env=%s)", WOODNUTS_ENV)
    return app
