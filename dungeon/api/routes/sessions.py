"""/api/v1/sessions/{session_id}/... — play commands and read session state."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Path, Query

from dungeon.api.dependencies import get_session_manager
from dungeon.api.schemas import (
    CommandRequest,
    CommandResponse,
    EventSchema,
    EventsResponse,
    MapResponse,
    StateResponse,
)
from dungeon.core.serialization import world_to_dict
from dungeon.engine.session_manager import SessionManager

router = APIRouter()

_SESSION_PATTERN = r"^[A-Za-z0-9_-]+$"


def _require_session(manager: SessionManager, session_id: str) -> None:
    if not manager.store.exists(session_id):
        raise HTTPException(status_code=404, detail=f"No session {session_id!r}.")


@router.post("/sessions/{session_id}/commands", response_model=CommandResponse)
def run_command(
    body: CommandRequest,
    session_id: str = Path(..., pattern=_SESSION_PATTERN, max_length=64),
    manager: SessionManager = Depends(get_session_manager),
) -> CommandResponse:
    result = manager.handle(session_id, body.username, body.command)
    return CommandResponse(
        session_id=session_id,
        turn=result.state.turn,
        narrative=result.narrative,
        ascii_map=result.ascii_map,
    )


@router.get("/sessions/{session_id}/map", response_model=MapResponse)
def get_map(
    session_id: str = Path(..., pattern=_SESSION_PATTERN, max_length=64),
    username: str | None = Query(None, description="Viewer whose own icon is drawn on top"),
    manager: SessionManager = Depends(get_session_manager),
) -> MapResponse:
    _require_session(manager, session_id)
    world, ascii_map = manager.render(session_id, username)
    return MapResponse(
        session_id=session_id,
        turn=world.turn,
        width=world.grid.width,
        height=world.grid.height,
        ascii_map=ascii_map,
    )


@router.get("/sessions/{session_id}/state", response_model=StateResponse)
def get_state(
    session_id: str = Path(..., pattern=_SESSION_PATTERN, max_length=64),
    manager: SessionManager = Depends(get_session_manager),
) -> StateResponse:
    _require_session(manager, session_id)
    return StateResponse(session_id=session_id, state=world_to_dict(manager.load(session_id)))


@router.get("/sessions/{session_id}/events", response_model=EventsResponse)
def get_events(
    session_id: str = Path(..., pattern=_SESSION_PATTERN, max_length=64),
    since_turn: int = Query(0, ge=0),
    manager: SessionManager = Depends(get_session_manager),
) -> EventsResponse:
    events = manager.event_log(session_id).since_turn(since_turn)
    return EventsResponse(
        session_id=session_id,
        events=[EventSchema(turn=e.turn, username=e.username, narrative=e.narrative) for e in events],
    )
