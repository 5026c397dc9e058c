"""Dungeon generator: builds a fresh bordered map and populates it."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from dungeon.core.enums import Domain, ItemType, MonsterType, Tile
from dungeon.core.grid import Grid
from dungeon.core.models import Vector2, item_name, monster_stats
from dungeon.core.world_state import WorldState

if TYPE_CHECKING:
    from dungeon.config import DungeonConfig
    from dungeon.systems.rng import DeterministicRNG

logger = logging.getLogger(__name__)

_MONSTER_TYPES: tuple[MonsterType, ...] = (MonsterType.DEMON, MonsterType.SNAKE, MonsterType.ZOMBIE)
_ITEM_CYCLE: tuple[ItemType, ...] = (ItemType.SWORD, ItemType.POTION, ItemType.GEM)

# Turn keys for the map-gen domain; one per independent draw sequence
_WALL_PASS = 0
_MONSTER_SHUFFLE = 1
_ITEM_SHUFFLE = 2


class DungeonGenerator:
    """Creates new ``WorldState`` instances from an injected RNG."""

    __slots__ = ("_config", "_rng")

    def __init__(self, config: DungeonConfig, rng: DeterministicRNG) -> None:
        self._config = config
        self._rng = rng

    def generate(
        self,
        width: int | None = None,
        height: int | None = None,
        monster_count: int | None = None,
        item_count: int | None = None,
    ) -> WorldState:
        """Build a new world. Omitted arguments fall back to the config."""
        cfg = self._config
        width = cfg.map_width if width is None else width
        height = cfg.map_height if height is None else height
        monster_count = cfg.monster_count if monster_count is None else monster_count
        item_count = cfg.item_count if item_count is None else item_count

        # Odd sizes give a single centre tile
        if width % 2 == 0:
            width += 1
        if height % 2 == 0:
            height += 1

        grid = self._build_grid(width, height)
        world = WorldState(grid, seed=self._rng.seed)

        floor = grid.floor_tiles()
        self._rng.shuffle(floor, Domain.MAP_GEN, 0, _MONSTER_SHUFFLE)

        placed_monsters = min(max(monster_count, 0), len(floor))
        for pos in floor[:placed_monsters]:
            mid = world.next_monster_id
            mtype = _MONSTER_TYPES[self._rng.next_int(Domain.SPAWN, mid, 0, 0, len(_MONSTER_TYPES) - 1)]
            stats = monster_stats(mtype)
            world.spawn_monster(pos, mtype.value, stats.hp, stats.atk)

        leftover = floor[placed_monsters:]
        self._rng.shuffle(leftover, Domain.MAP_GEN, 0, _ITEM_SHUFFLE)
        for i, pos in enumerate(leftover[:max(item_count, 0)]):
            itype = _ITEM_CYCLE[i % len(_ITEM_CYCLE)]
            world.spawn_item(pos, itype.value, item_name(itype))

        logger.info(
            "Generated %dx%d dungeon (seed=%d): %d floor tiles, %d monsters, %d items",
            width, height, world.seed, len(floor), len(world.monsters), len(world.items),
        )
        return world

    def _build_grid(self, width: int, height: int) -> Grid:
        grid = Grid(width, height)
        for y in range(height):
            for x in range(width):
                pos = Vector2(x, y)
                if x == 0 or y == 0 or x == width - 1 or y == height - 1:
                    grid.set(pos, Tile.WALL)
                elif self._rng.next_bool(Domain.MAP_GEN, y * width + x, _WALL_PASS, self._config.wall_chance):
                    grid.set(pos, Tile.WALL)

        # Walkable spawn strip through the centre
        center = grid.center
        grid.set(center, Tile.FLOOR)
        if center.x + 1 < width - 1:
            grid.set(Vector2(center.x + 1, center.y), Tile.FLOOR)
        if center.x - 1 > 0:
            grid.set(Vector2(center.x - 1, center.y), Tile.FLOOR)
        return grid
