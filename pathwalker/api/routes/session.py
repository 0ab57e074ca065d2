"""Session routes for interactive step-by-step walks."""

import logging

from fastapi import APIRouter, HTTPException, status

from pathwalker.api.deps import Catalog, Sessions, raise_path_error, resolve_map
from pathwalker.core.exceptions import (
    MapValidationError,
    TraversalError,
    WalkerCompletedError,
)
from pathwalker.core.map_parser import validate_map
from pathwalker.core.path_walker import WalkerState
from pathwalker.schemas.map import MapPosition
from pathwalker.schemas.session import (
    MoveRequest,
    MoveResponse,
    SessionCreateRequest,
    SessionState,
    WalkerStateResponse,
)
from pathwalker.services.session_service import WalkerSession

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/sessions", tags=["Sessions"])


def _state_response(state: WalkerState) -> WalkerStateResponse:
    return WalkerStateResponse(
        position=MapPosition(x=state.position.x, y=state.position.y),
        letters=state.letters,
        path=state.path,
        direction=state.direction.value,
    )


def _session_response(session: WalkerSession) -> SessionState:
    return SessionState(
        id=session.id,
        map_name=session.map_name,
        state=_state_response(session.state),
        status=session.status,
        wrong_moves=session.wrong_moves,
        created_at=session.created_at,
        completed_at=session.completed_at,
    )


@router.post(
    "",
    response_model=SessionState,
    status_code=status.HTTP_201_CREATED,
)
async def create_session(
    request: SessionCreateRequest,
    catalog: Catalog,
    sessions: Sessions,
) -> SessionState:
    """Create a new walker session.

    The walker starts on the map's start character facing the direction
    the path leaves it in. Inline maps are validated first.
    """
    grid, map_name = resolve_map(request, catalog)

    try:
        validate_map(grid)
        session = sessions.create_session(grid, map_name=map_name)
    except (MapValidationError, TraversalError) as e:
        logger.info(f"Session rejected ({e.code}): {e}")
        raise_path_error(e)

    return _session_response(session)


@router.get(
    "/{session_id}",
    response_model=SessionState,
)
async def get_session(session_id: str, sessions: Sessions) -> SessionState:
    """Get session state by ID."""
    session = sessions.get_session(session_id)
    if session is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Session not found: {session_id}",
        )
    return _session_response(session)


@router.post(
    "/{session_id}/move",
    response_model=MoveResponse,
)
async def move(
    session_id: str,
    request: MoveRequest,
    sessions: Sessions,
) -> MoveResponse:
    """Move one cell in a direction.

    A move into a cell that cannot be entered that way is rejected
    (accepted=false) and leaves the session unchanged.
    """
    try:
        result = sessions.move(session_id, request.direction)
    except KeyError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Session not found: {session_id}",
        )
    except WalkerCompletedError:
        logger.info(f"Move refused on completed session {session_id}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Session is not active (status: completed)",
        )

    return MoveResponse(
        status=result.status,
        accepted=result.accepted,
        state=_state_response(result.state),
    )


@router.delete(
    "/{session_id}",
    status_code=status.HTTP_204_NO_CONTENT,
)
async def end_session(session_id: str, sessions: Sessions) -> None:
    """End and remove a session."""
    if not sessions.end_session(session_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Session not found: {session_id}",
        )
