"""Engine configuration with sensible defaults."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DungeonConfig:
    """Immutable configuration shared by every session."""

    # World
    world_seed: int = 42
    map_width: int = 11
    map_height: int = 9
    monster_count: int = 6
    item_count: int = 6
    wall_chance: float = 0.18

    # AI
    aggro_radius: int = 5
    wander_chance: float = 0.3
    look_radius: int = 4

    # Player
    player_hp: int = 20
    player_atk: int = 3

    # Items
    potion_heal: int = 8
    sword_atk_bonus: int = 2
    drop_chance: float = 0.5

    # Leveling
    xp_per_level: int = 20
    level_hp_gain: int = 4
    level_atk_gain: int = 1

    # Persistence
    state_dir: str = "state"

    # Logging
    log_level: str = "INFO"
