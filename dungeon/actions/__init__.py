"""Action system: command parsing and player action handlers."""

from dungeon.actions.commands import COMMAND_HELP, ParsedCommand, parse_command
from dungeon.actions.move import MoveAction
from dungeon.actions.combat import CombatAction

__all__ = ["COMMAND_HELP", "CombatAction", "MoveAction", "ParsedCommand", "parse_command"]
