"""CombatAction — resolves a player's melee attack and the monster's answer.

Damage is flat: the attacker's ATK plus a small roll, never below 1.
Players roll -1..+1, monsters 0..+1. A kill awards the monster type's XP
and may leave a gem or potion behind. A survivor strikes back at once.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from dungeon.core.enums import Domain, ItemType
from dungeon.core.models import DIRECTION_OFFSETS, item_name, monster_stats
from dungeon.systems.progression import try_level_up
from dungeon.systems.spawner import respawn_player

if TYPE_CHECKING:
    from dungeon.config import DungeonConfig
    from dungeon.core.enums import Direction
    from dungeon.core.models import Monster, Player
    from dungeon.core.world_state import WorldState
    from dungeon.systems.rng import DeterministicRNG

logger = logging.getLogger(__name__)

# Salts for the COMBAT domain, keyed by monster id and turn
_SALT_PLAYER_HIT = 0
_SALT_COUNTER = 1
_SALT_MONSTER_HIT = 2

# Salts for the LOOT domain
_SALT_DROP_ROLL = 0
_SALT_DROP_TYPE = 1


def player_damage(rng: DeterministicRNG, player: Player, monster: Monster, turn: int) -> int:
    roll = rng.next_int(Domain.COMBAT, monster.id, turn, -1, 1, salt=_SALT_PLAYER_HIT)
    return max(1, player.atk + roll)


def monster_damage(rng: DeterministicRNG, monster: Monster, turn: int, counter: bool = False) -> int:
    salt = _SALT_COUNTER if counter else _SALT_MONSTER_HIT
    return max(1, monster.atk + rng.next_int(Domain.COMBAT, monster.id, turn, 0, 1, salt=salt))


class CombatAction:
    """Handler for /attack."""

    __slots__ = ("_config", "_rng")

    def __init__(self, config: DungeonConfig, rng: DeterministicRNG) -> None:
        self._config = config
        self._rng = rng

    def apply(self, world: WorldState, username: str, direction: Direction) -> str:
        player = world.players[username]
        target_pos = player.pos + DIRECTION_OFFSETS[direction]
        if not world.grid.in_bounds(target_pos):
            return f"**{username}** swings at nothing."
        target = world.monster_at(target_pos)
        if target is None:
            return f"**{username}** swings at empty air — no monster there."

        turn = world.turn
        dmg = player_damage(self._rng, player, target, turn)
        target.hp -= dmg
        narrative = (
            f"**{username}** attacks the {target.type} for {dmg} damage "
            f"(HP left: {max(0, target.hp)})."
        )

        if not target.alive:
            return narrative + self._kill(world, username, target)

        counter = monster_damage(self._rng, target, turn, counter=True)
        player.hp -= counter
        narrative += (
            f" The {target.type} counterattacks for {counter} damage "
            f"(You HP: {max(0, player.hp)}/{player.max_hp})."
        )
        if not player.alive:
            respawn_player(world, username)
            narrative += (
                f"\n**{username}** was defeated and wakes up at the dungeon center "
                f"(HP: {player.hp}/{player.max_hp})."
            )
        return narrative

    def _kill(self, world: WorldState, username: str, target: Monster) -> str:
        player = world.players[username]
        xp = monster_stats(target.type).xp
        player.xp += xp
        text = f" The {target.type} dies! Gained {xp} XP."

        turn = world.turn
        if self._rng.next_bool(Domain.LOOT, target.id, turn, self._config.drop_chance, salt=_SALT_DROP_ROLL):
            gem = self._rng.next_bool(Domain.LOOT, target.id, turn, 0.5, salt=_SALT_DROP_TYPE)
            itype = ItemType.GEM if gem else ItemType.POTION
            drop = world.spawn_item(target.pos, itype.value, item_name(itype))
            text += f" It dropped {drop.name}."

        world.remove_monster(target.id)
        logger.info("Player %s killed %s #%d (+%d XP)", username, target.type, target.id, xp)

        if try_level_up(player, self._config):
            logger.info("Player %s reached level %d", username, player.level)
            cfg = self._config
            text += (
                f"\n**{username}** leveled up to level {player.level}! "
                f"(+{cfg.level_hp_gain} HP, +{cfg.level_atk_gain} ATK)"
            )
        return text
