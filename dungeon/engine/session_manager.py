"""SessionManager — brackets each command with load and save.

The core never locks. Commands for one session are serialized here with
a per-session lock, so a session's state file is always read, advanced by
exactly one command, and written back before the next command starts.
Different sessions proceed independently.
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING

from dungeon.engine.command_processor import CommandProcessor, CommandResult
from dungeon.engine.persistence import PersistenceError, SessionStore
from dungeon.engine.renderer import render_map
from dungeon.systems.generator import DungeonGenerator
from dungeon.systems.rng import DeterministicRNG, session_seed
from dungeon.utils.event_log import EventLog, GameEvent

if TYPE_CHECKING:
    from dungeon.config import DungeonConfig
    from dungeon.core.world_state import WorldState

logger = logging.getLogger(__name__)


class SessionManager:
    """Runs commands against persisted sessions.

    Provides thread-safe access to:
      - per-session command execution (load → process → save)
      - per-session event logs
    """

    def __init__(self, config: DungeonConfig, store: SessionStore | None = None) -> None:
        self.config = config
        self.store = store or SessionStore(config.state_dir, default_seed=config.world_seed)
        self._locks: dict[str, threading.Lock] = {}
        self._logs: dict[str, EventLog] = {}
        self._registry_lock = threading.Lock()

    # -- per-session resources --

    def _lock_for(self, session_id: str) -> threading.Lock:
        with self._registry_lock:
            return self._locks.setdefault(session_id, threading.Lock())

    def event_log(self, session_id: str) -> EventLog:
        with self._registry_lock:
            return self._logs.setdefault(session_id, EventLog())

    # -- commands --

    def handle(self, session_id: str, username: str, text: str) -> CommandResult:
        """Apply one command to a session and persist the result.

        A session without a state file starts from a freshly generated world.
        Raises ``PersistenceError`` if the state cannot be read or written.
        """
        with self._lock_for(session_id):
            world = self._load_or_create(session_id)
            processor = CommandProcessor(self.config, DeterministicRNG(world.seed))
            result = processor.process(world, username, text)
            try:
                self.store.save(session_id, result.state)
            except PersistenceError:
                logger.exception("Could not persist session %s", session_id)
                raise
            self.event_log(session_id).append(GameEvent(result.state.turn, username, result.narrative))
        return result

    def load(self, session_id: str) -> WorldState:
        with self._lock_for(session_id):
            return self.store.load(session_id)

    def render(self, session_id: str, username: str | None = None) -> tuple[WorldState, str]:
        world = self.load(session_id)
        return world, render_map(world, username)

    def _load_or_create(self, session_id: str) -> WorldState:
        if self.store.exists(session_id):
            try:
                return self.store.load(session_id)
            except PersistenceError:
                logger.exception("Could not load session %s", session_id)
                raise
        seed = session_seed(self.config.world_seed, session_id)
        world = DungeonGenerator(self.config, DeterministicRNG(seed)).generate()
        logger.info("Created new session %s (seed %d)", session_id, seed)
        return world
