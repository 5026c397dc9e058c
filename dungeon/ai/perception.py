"""Perception queries: what a player can see around them."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from dungeon.core.models import Vector2
    from dungeon.core.world_state import WorldState

NOTHING_NEARBY = "_No monsters or items nearby._"


def describe_nearby(world: WorldState, origin: Vector2, radius: int = 4) -> str:
    """One line per monster, then per item, within Manhattan *radius* of *origin*."""
    found: list[str] = []
    for m in world.monsters.values():
        if origin.manhattan(m.pos) <= radius:
            found.append(f"Monster: {m.type} at ({m.pos.x},{m.pos.y}) HP:{m.hp}")
    for it in world.items.values():
        if origin.manhattan(it.pos) <= radius:
            found.append(f"Item: {it.name} at ({it.pos.x},{it.pos.y})")
    if not found:
        return NOTHING_NEARBY
    return "\n".join(found)
