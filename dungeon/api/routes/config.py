"""GET /api/v1/config — expose engine configuration."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from dungeon.api.dependencies import get_session_manager
from dungeon.api.schemas import DungeonConfigResponse
from dungeon.engine.session_manager import SessionManager

router = APIRouter()


@router.get("/config", response_model=DungeonConfigResponse)
def get_config(
    manager: SessionManager = Depends(get_session_manager),
) -> DungeonConfigResponse:
    cfg = manager.config
    return DungeonConfigResponse(
        world_seed=cfg.world_seed,
        map_width=cfg.map_width,
        map_height=cfg.map_height,
        monster_count=cfg.monster_count,
        item_count=cfg.item_count,
        wall_chance=cfg.wall_chance,
        aggro_radius=cfg.aggro_radius,
        wander_chance=cfg.wander_chance,
        look_radius=cfg.look_radius,
        state_dir=cfg.state_dir,
    )
