"""Enumerations used throughout the engine."""

from __future__ import annotations

from enum import Enum, IntEnum, unique


@unique
class CommandType(IntEnum):
    """Closed set of player commands after parsing."""

    EMPTY = 0
    LOOK = 1
    MOVE = 2
    ATTACK = 3
    PICKUP = 4
    INVENTORY = 5
    USE = 6
    SPAWN = 7
    UNKNOWN = 8


@unique
class Direction(str, Enum):
    """Cardinal movement directions, valued by their command word."""

    NORTH = "north"
    EAST = "east"
    SOUTH = "south"
    WEST = "west"


@unique
class Domain(IntEnum):
    """RNG domains for deterministic randomness isolation."""

    COMBAT = 0
    LOOT = 1
    AI_DECISION = 2
    SPAWN = 3
    MAP_GEN = 4
    WORLD_SEED = 5


@unique
class Tile(str, Enum):
    """Map tiles, valued by their persisted symbol."""

    FLOOR = "."
    WALL = "#"


@unique
class MonsterType(str, Enum):
    DEMON = "demon"
    SNAKE = "snake"
    ZOMBIE = "zombie"


@unique
class ItemType(str, Enum):
    SWORD = "sword"
    POTION = "potion"
    GEM = "gem"
