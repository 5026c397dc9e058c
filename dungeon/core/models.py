"""Core data models: Vector2, Player, Monster, Item and their stat tables."""

from __future__ import annotations

from dataclasses import dataclass, field

from dungeon.core.enums import Direction, ItemType, MonsterType


@dataclass(frozen=True, slots=True)
class Vector2:
    """Immutable 2D integer coordinate. ``y`` grows southwards."""

    x: int = 0
    y: int = 0

    def __add__(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def manhattan(self, other: Vector2) -> int:
        return abs(self.x - other.x) + abs(self.y - other.y)

    def __repr__(self) -> str:
        return f"({self.x},{self.y})"


DIRECTION_OFFSETS: dict[Direction, Vector2] = {
    Direction.NORTH: Vector2(0, -1),
    Direction.EAST: Vector2(1, 0),
    Direction.SOUTH: Vector2(0, 1),
    Direction.WEST: Vector2(-1, 0),
}


@dataclass(frozen=True, slots=True)
class MonsterStats:
    """Fixed per-type monster template."""

    hp: int
    atk: int
    xp: int


MONSTER_STATS: dict[str, MonsterStats] = {
    MonsterType.DEMON: MonsterStats(hp=12, atk=4, xp=20),
    MonsterType.SNAKE: MonsterStats(hp=6, atk=2, xp=8),
    MonsterType.ZOMBIE: MonsterStats(hp=8, atk=3, xp=12),
}

# Legacy saves may carry types that are no longer generated
DEFAULT_MONSTER_STATS = MonsterStats(hp=5, atk=1, xp=5)

ITEM_NAMES: dict[str, str] = {
    ItemType.SWORD: "Rusty Sword (+2 ATK)",
    ItemType.POTION: "Healing Potion (+8 HP)",
    ItemType.GEM: "Shiny Gem ($50)",
}


PLAYER_ICONS: tuple[str, ...] = (
    "🧙‍♂️", "🧝‍♂️", "🧚‍♂️", "🧛‍♂️", "🧞‍♂️",
    "👨‍🚀", "👩‍🚀", "🤺", "🕵️‍♂️", "🧟‍♂️",
    "👨‍🔬", "👩‍🎨", "👨‍🎤", "👨‍💻", "👩‍💻",
)


def monster_stats(monster_type: str) -> MonsterStats:
    return MONSTER_STATS.get(monster_type, DEFAULT_MONSTER_STATS)


def item_name(item_type: str) -> str:
    return ITEM_NAMES.get(item_type, item_type)


@dataclass(slots=True)
class InventoryItem:
    """An item held by a player. It keeps its id but has no position."""

    id: int
    type: str
    name: str


@dataclass(slots=True)
class Player:
    """A player character, keyed by username in the world."""

    pos: Vector2
    hp: int = 20
    max_hp: int = 20
    atk: int = 3
    inventory: list[InventoryItem] = field(default_factory=list)
    xp: int = 0
    level: int = 1

    @property
    def alive(self) -> bool:
        return self.hp > 0


@dataclass(slots=True)
class Monster:
    id: int
    pos: Vector2
    type: str
    hp: int
    atk: int

    @property
    def alive(self) -> bool:
        return self.hp > 0


@dataclass(slots=True)
class Item:
    """An item lying on the map."""

    id: int
    pos: Vector2
    type: str
    name: str

    def to_inventory(self) -> InventoryItem:
        return InventoryItem(id=self.id, type=self.type, name=self.name)
