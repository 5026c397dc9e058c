"""XP and leveling."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from dungeon.config import DungeonConfig
    from dungeon.core.models import Player


def xp_to_next_level(level: int, config: DungeonConfig) -> int:
    return config.xp_per_level * level


def try_level_up(player: Player, config: DungeonConfig) -> bool:
    """Apply every level-up the player's XP pays for. Returns True if any happened.

    Each level costs ``xp_per_level * level`` XP and grants max HP, ATK and
    a full heal.
    """
    leveled = False
    while player.xp >= xp_to_next_level(player.level, config):
        player.xp -= xp_to_next_level(player.level, config)
        player.level += 1
        player.max_hp += config.level_hp_gain
        player.atk += config.level_atk_gain
        player.hp = player.max_hp
        leveled = True
    return leveled
