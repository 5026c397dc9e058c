"""Inventory actions: /pickup, /use and /inventory listing."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from dungeon.core.enums import ItemType

if TYPE_CHECKING:
    from dungeon.config import DungeonConfig
    from dungeon.core.models import InventoryItem, Player
    from dungeon.core.world_state import WorldState

logger = logging.getLogger(__name__)


def find_inventory_item(player: Player, text: str) -> int | None:
    """Index of the first held item whose type is *text* or whose name contains it."""
    text = text.lower()
    for idx, held in enumerate(player.inventory):
        if held.type == text or text in held.name.lower():
            return idx
    return None


def list_inventory(world: WorldState, username: str) -> str:
    player = world.players[username]
    if not player.inventory:
        lines = "_empty_"
    else:
        lines = "\n".join(f"{i}. {held.name}" for i, held in enumerate(player.inventory, start=1))
    return f"**{username}** opens their inventory:\n{lines}"


def pickup(world: WorldState, username: str) -> str:
    player = world.players[username]
    item = world.item_at(player.pos)
    if item is None:
        return f"**{username}** finds nothing to pick up here."
    held = world.take_item(item.id)
    player.inventory.append(held)
    logger.debug("Player %s picked up item #%d (%s)", username, held.id, held.type)
    return f"**{username}** picked up {held.name}."


def apply_item(player: Player, held: InventoryItem, username: str, config: DungeonConfig) -> str:
    """Apply the effect of a consumed item and describe it."""
    narrative = f"**{username}** uses {held.name}."
    if held.type == ItemType.POTION:
        player.hp = min(player.max_hp, player.hp + config.potion_heal)
        narrative += f" Restored {config.potion_heal} HP (HP: {player.hp}/{player.max_hp})."
    elif held.type == ItemType.SWORD:
        player.atk += config.sword_atk_bonus
        narrative += f" {username} feels stronger (+{config.sword_atk_bonus} ATK)."
    else:
        narrative += " Nothing happens."
    return narrative
