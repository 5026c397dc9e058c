"""Monster AI and perception."""

from dungeon.ai.monster_ai import MonsterAI
from dungeon.ai.perception import describe_nearby

__all__ = ["MonsterAI", "describe_nearby"]
