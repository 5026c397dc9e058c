"""CommandProcessor — the turn state machine.

One call applies one command to a world:
  1. Parse — raw text becomes a ``ParsedCommand``.
  2. Spawn — the acting player is created on first contact.
  3. Resolve — the player's action mutates the world.
  4. Advance — turn-consuming commands bump ``turn`` and, except /look,
     hand the world to the monster AI.

Failed moves, attacks and pickups still cost a turn and wake the monsters.
A failed /use, /inventory, unknown and empty commands do not.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from dungeon.actions.combat import CombatAction
from dungeon.actions.commands import COMMAND_HELP, ParsedCommand, parse_command
from dungeon.actions.items import apply_item, find_inventory_item, list_inventory, pickup
from dungeon.actions.move import MoveAction
from dungeon.ai.monster_ai import MonsterAI
from dungeon.ai.perception import describe_nearby
from dungeon.core.enums import CommandType
from dungeon.engine.renderer import render_map
from dungeon.systems.generator import DungeonGenerator
from dungeon.systems.rng import DeterministicRNG
from dungeon.systems.spawner import ensure_player

if TYPE_CHECKING:
    from dungeon.config import DungeonConfig
    from dungeon.core.world_state import WorldState

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class CommandResult:
    """What a command produced: the (possibly new) world and what to show."""

    state: WorldState
    narrative: str
    ascii_map: str
    command: ParsedCommand | None = None


class CommandProcessor:
    """Applies player commands to a world using an injected RNG."""

    __slots__ = ("_config", "_rng", "_combat", "_monster_ai")

    def __init__(self, config: DungeonConfig, rng: DeterministicRNG) -> None:
        self._config = config
        self._rng = rng
        self._combat = CombatAction(config, rng)
        self._monster_ai = MonsterAI(config, rng)

    def process(self, world: WorldState, username: str, raw: str | None) -> CommandResult:
        command = parse_command(raw)
        logger.debug("Turn %d: %s issued %r", world.turn, username, command)

        if command.kind == CommandType.EMPTY:
            return self._result(world, username, f"**{username}** sent an empty command.", command)

        if command.kind == CommandType.SPAWN:
            new_world = self._regenerate(world)
            return self._result(new_world, username, f"**{username}** regenerated the dungeon.", command)

        ensure_player(world, username, self._config)
        narrative = self.apply(world, username, command)
        return self._result(world, username, narrative, command)

    def apply(self, world: WorldState, username: str, command: ParsedCommand) -> str:
        """Resolve *command* for an existing player and return the narrative."""
        player = world.players[username]

        match command.kind:
            case CommandType.LOOK:
                world.turn += 1
                nearby = describe_nearby(world, player.pos, self._config.look_radius)
                return f"**{username}** looks around the dungeon.\n\n{nearby}"

            case CommandType.INVENTORY:
                return list_inventory(world, username)

            case CommandType.USE:
                idx = find_inventory_item(player, command.argument)
                if idx is None:
                    return f'**{username}** doesn\'t have "{command.argument}".'
                held = player.inventory.pop(idx)
                return self._end_turn(world, apply_item(player, held, username, self._config))

            case CommandType.PICKUP:
                return self._end_turn(world, pickup(world, username))

            case CommandType.MOVE:
                return self._end_turn(world, MoveAction.apply(world, username, command.direction))

            case CommandType.ATTACK:
                return self._end_turn(world, self._combat.apply(world, username, command.direction))

        return f"**{username}** tried an unknown command. Use {COMMAND_HELP}."

    # -- internals --

    def _end_turn(self, world: WorldState, narrative: str) -> str:
        world.turn += 1
        events = self._monster_ai.act(world)
        if events:
            narrative += "\n" + "\n".join(events)
        return narrative

    def _regenerate(self, world: WorldState) -> WorldState:
        seed = self._rng.derive_seed(world.turn)
        new_world = DungeonGenerator(self._config, DeterministicRNG(seed)).generate()
        new_world.turn = world.turn + 1
        logger.info("Dungeon regenerated at turn %d (new seed %d)", new_world.turn, seed)
        return new_world

    @staticmethod
    def _result(world: WorldState, username: str, narrative: str, command: ParsedCommand) -> CommandResult:
        return CommandResult(
            state=world,
            narrative=narrative,
            ascii_map=render_map(world, username),
            command=command,
        )
