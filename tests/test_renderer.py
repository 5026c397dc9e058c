"""Tests for the emoji map projection."""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from dungeon.core.serialization import world_to_dict
from dungeon.engine.renderer import (
    FLOOR_ICON,
    ITEM_ICONS,
    MONSTER_ICONS,
    OTHER_PLAYER_ICON,
    UNKNOWN_MONSTER_ICON,
    WALL_ICON,
    render_map,
)
from tests.helpers.dungeon_arena import DungeonArena

TINY = ["###", "#.#", "#..", "###"]


def _cells(ascii_map: str, y: int) -> str:
    return ascii_map.split("\n")[y]


class TestRenderMap:
    def test_base_tiles(self):
        arena = DungeonArena(rows=TINY)
        out = render_map(arena.world)
        assert out.split("\n") == [
            WALL_ICON * 3,
            WALL_ICON + FLOOR_ICON + WALL_ICON,
            WALL_ICON + FLOOR_ICON + FLOOR_ICON,
            WALL_ICON * 3,
        ]

    def test_overlay_priority(self):
        arena = DungeonArena()
        arena.add_player("alice", pos=(2, 2))
        arena.add_player("bob", pos=(2, 2))
        arena.add_monster("demon", pos=(3, 2))
        arena.add_item("potion", pos=(3, 2))
        arena.add_item("sword", pos=(4, 2))
        icons = arena.world.player_icons

        row = _cells(render_map(arena.world, "alice"), 2)
        expected = WALL_ICON + FLOOR_ICON + icons["alice"] + MONSTER_ICONS["demon"] + ITEM_ICONS["sword"]
        assert row.startswith(expected)

        row = _cells(render_map(arena.world, "bob"), 2)
        assert row.startswith(WALL_ICON + FLOOR_ICON + icons["bob"])

    def test_other_players_use_their_icon(self):
        arena = DungeonArena()
        arena.add_player("alice", pos=(1, 1))
        arena.add_player("bob", pos=(2, 1))
        arena.world.player_icons.pop("bob")
        row = _cells(render_map(arena.world, "alice"), 1)
        assert row.startswith(WALL_ICON + arena.world.player_icons["alice"] + OTHER_PLAYER_ICON)

    def test_monster_hides_item(self):
        arena = DungeonArena()
        arena.add_monster("snake", pos=(1, 1))
        arena.add_item("gem", pos=(1, 1))
        assert _cells(render_map(arena.world), 1).startswith(WALL_ICON + MONSTER_ICONS["snake"])

    def test_unknown_monster_type(self):
        arena = DungeonArena()
        arena.add_monster("goblin", pos=(1, 1))
        assert _cells(render_map(arena.world), 1).startswith(WALL_ICON + UNKNOWN_MONSTER_ICON)

    def test_render_is_pure(self):
        arena = DungeonArena()
        arena.add_player("alice", pos=(1, 1))
        arena.add_monster("zombie", pos=(2, 2))
        before = world_to_dict(arena.world)
        render_map(arena.world, "alice")
        render_map(arena.world, "nobody")
        assert world_to_dict(arena.world) == before
