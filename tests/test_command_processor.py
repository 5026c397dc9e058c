"""Command-level scenarios through the CommandProcessor."""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from dungeon.actions.commands import COMMAND_HELP
from dungeon.config import DungeonConfig
from dungeon.core.models import Vector2
from dungeon.core.serialization import world_to_dict
from dungeon.engine.command_processor import CommandProcessor
from dungeon.systems.generator import DungeonGenerator
from dungeon.systems.rng import DeterministicRNG
from tests.helpers.dungeon_arena import DungeonArena

# 15x7 room; centre (7, 3) is far from the west wall
WIDE_ROOM = [
    "###############",
    "#.............#",
    "#.............#",
    "#.............#",
    "#.............#",
    "#.............#",
    "###############",
]


def _without_turn(world) -> dict:
    data = world_to_dict(world)
    data.pop("turn")
    return data


class TestNonTurnCommands:
    def test_empty_command_does_nothing(self):
        arena = DungeonArena()
        result = arena.send("alice", "   ")
        assert "sent an empty command" in result.narrative
        assert arena.world.players == {}
        assert arena.world.turn == 0

    def test_unknown_command_lists_commands(self):
        arena = DungeonArena()
        arena.add_player("alice", pos=(4, 3))
        arena.add_monster("zombie", pos=(5, 3))
        before = world_to_dict(arena.world)
        result = arena.send("alice", "/dance")
        assert COMMAND_HELP in result.narrative
        assert world_to_dict(arena.world) == before

    def test_unknown_command_still_creates_player(self):
        arena = DungeonArena()
        arena.send("bob", "/dance")
        assert "bob" in arena.world.players
        assert arena.world.turn == 0

    def test_inventory_lists_in_order(self):
        arena = DungeonArena()
        arena.add_player("alice", pos=(4, 3))
        arena.give("alice", "potion")
        arena.give("alice", "gem")
        before = world_to_dict(arena.world)
        result = arena.send("alice", "/inventory")
        assert "1. Healing Potion (+8 HP)\n2. Shiny Gem ($50)" in result.narrative
        assert world_to_dict(arena.world) == before

    def test_empty_inventory(self):
        arena = DungeonArena()
        arena.add_player("alice", pos=(4, 3))
        assert "_empty_" in arena.send("alice", "/inventory").narrative


class TestLook:
    def test_look_advances_turn_without_monsters(self):
        arena = DungeonArena()
        alice = arena.add_player("alice", pos=(4, 3))
        arena.add_monster("zombie", pos=(5, 3))
        arena.add_item("gem", pos=(4, 1))
        before = _without_turn(arena.world)

        result = arena.send("alice", "/look")

        assert arena.world.turn == 1
        assert _without_turn(arena.world) == before
        assert alice.hp == 20  # adjacent zombie did not strike
        assert "Monster: zombie at (5,3) HP:8" in result.narrative
        assert "Item: Shiny Gem ($50) at (4,1)" in result.narrative

    def test_look_radius(self):
        arena = DungeonArena(rows=WIDE_ROOM)
        arena.add_player("alice", pos=(1, 1))
        arena.add_monster("snake", pos=(13, 5))
        result = arena.send("alice", "/look")
        assert "_No monsters or items nearby._" in result.narrative


class TestUse:
    def test_potion_heals_capped(self):
        arena = DungeonArena()
        alice = arena.add_player("alice", pos=(4, 3), hp=15)
        arena.give("alice", "potion")
        result = arena.send("alice", "/use potion")
        assert alice.hp == 20
        assert alice.inventory == []
        assert arena.world.turn == 1
        assert "Restored 8 HP" in result.narrative

    def test_sword_adds_attack(self):
        arena = DungeonArena()
        alice = arena.add_player("alice", pos=(4, 3))
        arena.give("alice", "sword")
        arena.send("alice", "/use rusty")
        assert alice.atk == 5

    def test_gem_does_nothing(self):
        arena = DungeonArena()
        arena.add_player("alice", pos=(4, 3))
        arena.give("alice", "gem")
        assert "Nothing happens." in arena.send("alice", "/use GEM").narrative

    def test_first_match_wins(self):
        arena = DungeonArena()
        alice = arena.add_player("alice", pos=(4, 3), hp=5)
        first = arena.give("alice", "potion")
        second = arena.give("alice", "potion")
        arena.send("alice", "/use healing")
        assert [h.id for h in alice.inventory] == [second.id]
        assert first.id not in [h.id for h in alice.inventory]

    def test_missing_item_costs_nothing(self):
        arena = DungeonArena()
        arena.add_player("alice", pos=(4, 3))
        arena.add_monster("demon", pos=(5, 3))
        before = world_to_dict(arena.world)
        result = arena.send("alice", "/use sword")
        assert 'doesn\'t have "sword"' in result.narrative
        assert world_to_dict(arena.world) == before

    def test_use_runs_monster_turn(self):
        arena = DungeonArena()
        alice = arena.add_player("alice", pos=(4, 3))
        arena.add_monster("snake", pos=(5, 3))
        arena.give("alice", "gem")
        result = arena.send("alice", "/use gem")
        assert alice.hp < 20
        assert "The snake attacks alice" in result.narrative


class TestPickup:
    def test_generated_world_pickup_scenario(self):
        cfg = DungeonConfig()
        world = DungeonGenerator(cfg, DeterministicRNG(5)).generate(11, 9, 0, 1)
        processor = CommandProcessor(cfg, DeterministicRNG(5))
        processor.process(world, "alice", "/look")
        alice = world.players["alice"]
        item = next(iter(world.items.values()))
        if alice.pos == item.pos:
            alice.pos = next(p for p in world.grid.floor_tiles() if p != item.pos)

        turn = world.turn
        result = processor.process(world, "alice", "/pickup")
        assert "finds nothing to pick up here" in result.narrative
        assert world.turn == turn + 1
        assert item.id in world.items

        alice.pos = item.pos
        result = processor.process(world, "alice", "/pickup")
        assert world.turn == turn + 2
        assert item.id not in world.items
        assert [(h.id, h.type, h.name) for h in alice.inventory] == [(item.id, item.type, item.name)]
        assert f"picked up {item.name}" in result.narrative

    def test_failed_pickup_runs_monster_turn(self):
        arena = DungeonArena()
        alice = arena.add_player("alice", pos=(4, 3))
        arena.add_monster("zombie", pos=(4, 4))
        arena.send("alice", "/pickup")
        assert alice.hp < 20


class TestMove:
    def test_move_updates_position(self):
        arena = DungeonArena()
        alice = arena.add_player("alice", pos=(4, 3))
        result = arena.send("alice", "/move north")
        assert alice.pos == Vector2(4, 2)
        assert result.narrative == "**alice** moves north."
        assert arena.world.turn == 1

    def test_wall_bump(self):
        arena = DungeonArena()
        alice = arena.add_player("alice", pos=(1, 1))
        result = arena.send("alice", "/move west")
        assert alice.pos == Vector2(1, 1)
        assert "bumps into a wall" in result.narrative
        assert arena.world.turn == 1

    def test_edge_bump(self):
        arena = DungeonArena(rows=["...", "...", "..."])
        alice = arena.add_player("alice", pos=(0, 0))
        result = arena.send("alice", "/move north")
        assert alice.pos == Vector2(0, 0)
        assert "edge of the dungeon" in result.narrative
        assert arena.world.turn == 1

    def test_monster_blocks_and_acts(self):
        arena = DungeonArena()
        alice = arena.add_player("alice", pos=(4, 3))
        arena.add_monster("zombie", pos=(5, 3))
        result = arena.send("alice", "/move east")
        assert alice.pos == Vector2(4, 3)
        assert "a zombie blocks the way!" in result.narrative
        assert arena.world.turn == 1
        assert 16 <= alice.hp <= 17

    def test_players_share_tiles(self):
        arena = DungeonArena()
        alice = arena.add_player("alice", pos=(4, 3))
        arena.add_player("bob", pos=(5, 3))
        arena.send("alice", "/move east")
        assert alice.pos == Vector2(5, 3)


class TestAttack:
    def test_attack_empty_air(self):
        arena = DungeonArena()
        arena.add_player("alice", pos=(4, 3))
        result = arena.send("alice", "/attack south")
        assert "swings at empty air" in result.narrative
        assert arena.world.turn == 1

    def test_attack_out_of_bounds(self):
        arena = DungeonArena(rows=["...", "...", "..."])
        arena.add_player("alice", pos=(2, 1))
        assert "swings at nothing" in arena.send("alice", "/attack east").narrative
        assert arena.world.turn == 1

    def test_kill_awards_xp(self):
        arena = DungeonArena(drop_chance=0.0)
        alice = arena.add_player("alice", pos=(4, 3))
        snake = arena.add_monster("snake", pos=(5, 3), hp=1)
        result = arena.send("alice", "/attack east")
        assert "dies!" in result.narrative
        assert snake.id not in arena.world.monsters
        assert alice.xp == 8
        assert arena.world.items == {}
        assert arena.world.turn == 1

    def test_kill_drop(self):
        arena = DungeonArena(drop_chance=1.0)
        arena.add_player("alice", pos=(4, 3))
        arena.add_monster("zombie", pos=(4, 2), hp=1)
        result = arena.send("alice", "/attack north")
        drops = list(arena.world.items.values())
        assert len(drops) == 1
        assert drops[0].pos == Vector2(4, 2)
        assert drops[0].type in ("gem", "potion")
        assert f"It dropped {drops[0].name}." in result.narrative

    def test_kill_levels_up(self):
        arena = DungeonArena(drop_chance=0.0)
        alice = arena.add_player("alice", pos=(4, 3), hp=3, xp=15)
        arena.add_monster("demon", pos=(3, 3), hp=1)
        result = arena.send("alice", "/attack west")
        assert (alice.level, alice.xp, alice.max_hp, alice.atk, alice.hp) == (2, 15, 24, 4, 24)
        assert "leveled up to level 2!" in result.narrative

    def test_damage_range(self):
        arena = DungeonArena()
        arena.add_player("alice", pos=(4, 3), hp=200, max_hp=200)
        demon = arena.add_monster("demon", pos=(5, 3), hp=100)
        arena.send("alice", "/attack east")
        assert 2 <= 100 - demon.hp <= 4

    def test_counterattack(self):
        arena = DungeonArena()
        alice = arena.add_player("alice", pos=(4, 3))
        arena.add_monster("demon", pos=(5, 3))
        result = arena.send("alice", "/attack east")
        assert "The demon counterattacks" in result.narrative
        # Counterattack plus the demon's own turn, 4-5 damage each
        assert 10 <= alice.hp <= 12

    def test_defeat_drops_inventory_and_respawns(self):
        arena = DungeonArena(rows=WIDE_ROOM)
        alice = arena.add_player("alice", pos=(1, 3), hp=1)
        arena.add_monster("demon", pos=(2, 3))
        potion = arena.give("alice", "potion")
        gem = arena.give("alice", "gem")

        result = arena.send("alice", "/attack east")

        assert "was defeated and wakes up at the dungeon center" in result.narrative
        assert alice.inventory == []
        assert alice.pos == Vector2(7, 3)
        assert alice.hp == 10
        dropped = sorted(arena.world.items.values(), key=lambda it: it.id)
        assert [(it.type, it.pos) for it in dropped] == [("potion", Vector2(1, 3)), ("gem", Vector2(1, 3))]
        # Fresh ids, never the held ones
        assert all(it.id > gem.id for it in dropped)
        assert potion.id not in arena.world.items


class TestSpawn:
    def test_spawn_regenerates_world(self):
        arena = DungeonArena()
        arena.add_player("alice", pos=(4, 3))
        arena.world.turn = 5
        old = arena.world
        result = arena.send("alice", "/spawn")
        assert result.state is not old
        assert result.state.turn == 6
        assert result.state.players == {}
        assert (result.state.grid.width, result.state.grid.height) == (11, 9)
        assert "regenerated the dungeon" in result.narrative

    def test_spawn_result_has_map(self):
        arena = DungeonArena()
        result = arena.send("alice", "/spawn")
        assert len(result.ascii_map.split("\n")) == 9
