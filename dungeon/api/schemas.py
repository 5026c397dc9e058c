"""Pydantic request/response models for the REST API."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class CommandRequest(BaseModel):
    username: str = Field(..., min_length=1, max_length=64)
    command: str = Field("", max_length=200)


class CommandResponse(BaseModel):
    session_id: str
    turn: int
    narrative: str
    ascii_map: str


class MapResponse(BaseModel):
    session_id: str
    turn: int
    width: int
    height: int
    ascii_map: str


class StateResponse(BaseModel):
    """Full session state in its persisted JSON layout."""

    session_id: str
    state: dict[str, Any]


class EventSchema(BaseModel):
    turn: int
    username: str
    narrative: str


class EventsResponse(BaseModel):
    session_id: str
    events: list[EventSchema]


class DungeonConfigResponse(BaseModel):
    world_seed: int
    map_width: int
    map_height: int
    monster_count: int
    item_count: int
    wall_chance: float
    aggro_radius: int
    wander_chance: float
    look_radius: int
    state_dir: str
