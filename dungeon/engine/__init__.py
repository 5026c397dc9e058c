"""Turn engine: command processing, rendering, persistence, sessions."""

from dungeon.engine.command_processor import CommandProcessor, CommandResult
from dungeon.engine.persistence import PersistenceError, SessionStore
from dungeon.engine.renderer import render_map
from dungeon.engine.session_manager import SessionManager

__all__ = [
    "CommandProcessor",
    "CommandResult",
    "PersistenceError",
    "SessionManager",
    "SessionStore",
    "render_map",
]
