"""MonsterAI — one decision pass over every monster after a player's turn.

Per monster, against the nearest player by Manhattan distance:
  1. Adjacent → attack, no movement.
  2. Within the aggro radius → greedy step toward the player, trying the
     horizontal, vertical, then diagonal offset. No search: a monster
     boxed in by walls simply waits.
  3. Otherwise → occasionally wander one tile in a random direction.

Steps are checked against a shared occupancy set that is updated as each
monster claims a tile, so two monsters never end on the same tile and
never pass through a player. Positions are written back only after the
whole pass.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from dungeon.actions.combat import monster_damage
from dungeon.core.enums import Domain
from dungeon.core.models import DIRECTION_OFFSETS, Vector2
from dungeon.systems.spawner import respawn_player

if TYPE_CHECKING:
    from dungeon.config import DungeonConfig
    from dungeon.core.models import Monster
    from dungeon.core.world_state import WorldState
    from dungeon.systems.rng import DeterministicRNG

logger = logging.getLogger(__name__)

_SALT_WANDER = 0


def _sign(v: int) -> int:
    return (v > 0) - (v < 0)


class MonsterAI:
    """Runs the monster phase of a turn. Holds no per-world state."""

    __slots__ = ("_config", "_rng")

    def __init__(self, config: DungeonConfig, rng: DeterministicRNG) -> None:
        self._config = config
        self._rng = rng

    def act(self, world: WorldState) -> list[str]:
        """Run one pass and return narrative lines for the attacks that happened."""
        events: list[str] = []
        if not world.players:
            return events

        occupied = world.occupied_tiles()
        updates: dict[int, Vector2] = {}

        for monster in list(world.monsters.values()):
            if monster.id not in world.monsters or not monster.alive:
                continue

            target_name, dist = self._nearest_player(world, monster.pos)
            if target_name is None:
                continue

            if dist == 1:
                events.extend(self._attack(world, monster, target_name, occupied))
                continue

            if dist <= self._config.aggro_radius:
                step = self._chase_step(world, monster, world.players[target_name].pos, occupied)
            elif self._rng.next_bool(Domain.AI_DECISION, monster.id, world.turn, self._config.wander_chance, salt=_SALT_WANDER):
                step = self._wander_step(world, monster, occupied)
            else:
                step = None

            if step is not None:
                occupied.discard(monster.pos)
                occupied.add(step)
                updates[monster.id] = step

        for mid, pos in updates.items():
            monster = world.monsters.get(mid)
            if monster is not None:
                logger.debug("Monster #%d (%s) moves %s -> %s", mid, monster.type, monster.pos, pos)
                monster.pos = pos

        return events

    # -- decisions --

    @staticmethod
    def _nearest_player(world: WorldState, origin: Vector2) -> tuple[str | None, int]:
        best: str | None = None
        best_dist = 0
        for name, player in world.players.items():
            d = origin.manhattan(player.pos)
            if best is None or d < best_dist:
                best, best_dist = name, d
        return best, best_dist

    def _attack(self, world: WorldState, monster: Monster, username: str, occupied: set[Vector2]) -> list[str]:
        player = world.players[username]
        dmg = monster_damage(self._rng, monster, world.turn)
        player.hp -= dmg
        lines = [f"The {monster.type} attacks {username} for {dmg} damage."]
        if not player.alive:
            respawn_player(world, username)
            occupied.add(player.pos)
            lines.append(
                f"**{username}** was slain by the {monster.type} and wakes up at the dungeon center "
                f"(HP: {player.hp}/{player.max_hp})."
            )
        return lines

    def _chase_step(self, world: WorldState, monster: Monster, target: Vector2, occupied: set[Vector2]) -> Vector2 | None:
        dx = _sign(target.x - monster.pos.x)
        dy = _sign(target.y - monster.pos.y)
        candidates = (
            Vector2(monster.pos.x + dx, monster.pos.y),
            Vector2(monster.pos.x, monster.pos.y + dy),
            Vector2(monster.pos.x + dx, monster.pos.y + dy),
        )
        return self._first_free(world, candidates, occupied)

    def _wander_step(self, world: WorldState, monster: Monster, occupied: set[Vector2]) -> Vector2 | None:
        offsets = list(DIRECTION_OFFSETS.values())
        self._rng.shuffle(offsets, Domain.AI_DECISION, monster.id, world.turn)
        return self._first_free(world, [monster.pos + off for off in offsets], occupied)

    @staticmethod
    def _first_free(world: WorldState, candidates, occupied: set[Vector2]) -> Vector2 | None:
        for pos in candidates:
            if world.grid.in_bounds(pos) and world.grid.is_floor(pos) and pos not in occupied:
                return pos
        return None
