"""Player spawn and death/respawn handling."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from dungeon.core.models import PLAYER_ICONS, Player

if TYPE_CHECKING:
    from dungeon.config import DungeonConfig
    from dungeon.core.world_state import WorldState

logger = logging.getLogger(__name__)


def ensure_player(world: WorldState, username: str, config: DungeonConfig) -> Player:
    """Return the player for *username*, creating it on first contact."""
    player = world.players.get(username)
    if player is not None:
        return player

    icon = PLAYER_ICONS[world.next_player_icon_index % len(PLAYER_ICONS)]
    world.player_icons[username] = icon
    world.next_player_icon_index += 1

    spawn = world.grid.center
    if not world.grid.is_floor(spawn):
        tiles = world.grid.floor_tiles()
        if tiles:
            spawn = tiles[0]

    player = Player(pos=spawn, hp=config.player_hp, max_hp=config.player_hp, atk=config.player_atk)
    world.players[username] = player
    logger.info("Spawned player %s at %s with icon %s", username, spawn, icon)
    return player


def respawn_player(world: WorldState, username: str) -> Player:
    """Drop everything the player carries where they fell and wake them at the centre.

    The centre is not re-checked for walkability; generated maps always
    clear it.
    """
    player = world.players[username]
    drops, player.inventory = player.inventory, []
    for held in drops:
        world.spawn_item(player.pos, held.type, held.name)
    player.hp = player.max_hp // 2
    player.pos = world.grid.center
    logger.info("Player %s died, dropped %d items, respawned with %d HP", username, len(drops), player.hp)
    return player
