"""Core data models and world representation."""

from dungeon.core.enums import CommandType, Direction, Domain, ItemType, MonsterType, Tile
from dungeon.core.models import InventoryItem, Item, Monster, Player, Vector2
from dungeon.core.grid import Grid
from dungeon.core.world_state import WorldState

__all__ = [
    "CommandType",
    "Direction",
    "Domain",
    "Grid",
    "InventoryItem",
    "Item",
    "ItemType",
    "Monster",
    "MonsterType",
    "Player",
    "Tile",
    "Vector2",
    "WorldState",
]
