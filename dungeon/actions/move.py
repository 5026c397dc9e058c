"""MoveAction — validates and applies a player's one-tile step.

Walls, the map edge and monsters block the step. Other players do not:
any number of players may share a tile.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from dungeon.core.models import DIRECTION_OFFSETS

if TYPE_CHECKING:
    from dungeon.core.enums import Direction
    from dungeon.core.models import Vector2
    from dungeon.core.world_state import WorldState

logger = logging.getLogger(__name__)


class MoveAction:
    """Stateless handler for /move."""

    @staticmethod
    def blocked_reason(world: WorldState, target: Vector2) -> str | None:
        """Return the bump narrative if *target* can't be entered, else None."""
        if not world.grid.in_bounds(target):
            return "bumps into the edge of the dungeon."
        if not world.grid.is_floor(target):
            return "bumps into a wall."
        monster = world.monster_at(target)
        if monster is not None:
            return f"cannot move: a {monster.type} blocks the way!"
        return None

    @staticmethod
    def apply(world: WorldState, username: str, direction: Direction) -> str:
        player = world.players[username]
        target = player.pos + DIRECTION_OFFSETS[direction]
        reason = MoveAction.blocked_reason(world, target)
        if reason is not None:
            logger.debug("Player %s blocked moving %s to %s", username, direction.value, target)
            return f"**{username}** {reason}"
        player.pos = target
        return f"**{username}** moves {direction.value}."
