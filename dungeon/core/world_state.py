"""Mutable authoritative world state of one session."""

from __future__ import annotations

from dungeon.core.grid import Grid
from dungeon.core.models import InventoryItem, Item, Monster, Player, Vector2


class WorldState:
    """The single source of truth for a session.

    Monsters and items live in id-keyed arenas. Their counters only grow,
    so an id is never handed out twice, even after the entity is deleted.
    """

    __slots__ = (
        "seed", "grid", "players", "monsters", "items", "turn",
        "next_monster_id", "next_item_id", "player_icons", "next_player_icon_index",
    )

    def __init__(self, grid: Grid, seed: int = 0) -> None:
        self.seed: int = seed
        self.grid: Grid = grid
        self.players: dict[str, Player] = {}
        self.monsters: dict[int, Monster] = {}
        self.items: dict[int, Item] = {}
        self.turn: int = 0
        self.next_monster_id: int = 1
        self.next_item_id: int = 1
        self.player_icons: dict[str, str] = {}
        self.next_player_icon_index: int = 0

    # -- id arenas --

    def allocate_monster_id(self) -> int:
        mid = self.next_monster_id
        self.next_monster_id += 1
        return mid

    def allocate_item_id(self) -> int:
        iid = self.next_item_id
        self.next_item_id += 1
        return iid

    def spawn_monster(self, pos: Vector2, monster_type: str, hp: int, atk: int) -> Monster:
        monster = Monster(id=self.allocate_monster_id(), pos=pos, type=monster_type, hp=hp, atk=atk)
        self.monsters[monster.id] = monster
        return monster

    def spawn_item(self, pos: Vector2, item_type: str, name: str) -> Item:
        item = Item(id=self.allocate_item_id(), pos=pos, type=item_type, name=name)
        self.items[item.id] = item
        return item

    def remove_monster(self, monster_id: int) -> Monster | None:
        return self.monsters.pop(monster_id, None)

    def take_item(self, item_id: int) -> InventoryItem | None:
        """Remove an item from the map and return it in inventory form."""
        item = self.items.pop(item_id, None)
        return item.to_inventory() if item is not None else None

    # -- queries --

    def monster_at(self, pos: Vector2) -> Monster | None:
        for monster in self.monsters.values():
            if monster.pos == pos:
                return monster
        return None

    def item_at(self, pos: Vector2) -> Item | None:
        for item in self.items.values():
            if item.pos == pos:
                return item
        return None

    def occupied_tiles(self) -> set[Vector2]:
        """Tiles held by a monster or a player."""
        occupied = {m.pos for m in self.monsters.values()}
        occupied.update(p.pos for p in self.players.values())
        return occupied
