"""Engine systems: RNG, dungeon generation, spawning, progression."""

from dungeon.systems.rng import DeterministicRNG
from dungeon.systems.generator import DungeonGenerator
from dungeon.systems.progression import try_level_up, xp_to_next_level
from dungeon.systems.spawner import ensure_player, respawn_player

__all__ = [
    "DeterministicRNG",
    "DungeonGenerator",
    "ensure_player",
    "respawn_player",
    "try_level_up",
    "xp_to_next_level",
]
