"""JSON file store for session worlds: ``<state_dir>/session-<id>.json``."""

from __future__ import annotations

import json
import logging
import re
from pathlib import Path

from dungeon.core.serialization import world_from_dict, world_to_dict
from dungeon.core.world_state import WorldState

logger = logging.getLogger(__name__)

_SESSION_ID = re.compile(r"^[A-Za-z0-9_-]+$")


class PersistenceError(Exception):
    """A session's state could not be read or written.

    Carries the session id; the underlying error is chained as ``__cause__``.
    """

    def __init__(self, session_id: str, message: str) -> None:
        super().__init__(message)
        self.session_id = session_id


class SessionStore:
    """Loads and saves whole worlds, one file per session."""

    def __init__(self, state_dir: str | Path, default_seed: int = 0) -> None:
        self.state_dir = Path(state_dir)
        self._default_seed = default_seed

    def path_for(self, session_id: str) -> Path:
        if not _SESSION_ID.match(session_id or ""):
            raise PersistenceError(session_id, f"Invalid session id {session_id!r}")
        return self.state_dir / f"session-{session_id}.json"

    def exists(self, session_id: str) -> bool:
        return self.path_for(session_id).exists()

    def load(self, session_id: str) -> WorldState:
        path = self.path_for(session_id)
        try:
            raw = json.loads(path.read_text(encoding="utf-8"))
            world = world_from_dict(raw, default_seed=self._default_seed)
        except (OSError, ValueError) as exc:
            # json.JSONDecodeError and StateFormatError are ValueErrors
            raise PersistenceError(
                session_id, f"Failed to load state for session {session_id}: {exc}"
            ) from exc
        logger.debug("Loaded session %s from %s (turn %d)", session_id, path, world.turn)
        return world

    def save(self, session_id: str, world: WorldState) -> None:
        path = self.path_for(session_id)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(json.dumps(world_to_dict(world), indent=2, ensure_ascii=False), encoding="utf-8")
        except (OSError, TypeError, ValueError) as exc:
            raise PersistenceError(
                session_id, f"Failed to save state for session {session_id}: {exc}"
            ) from exc
        logger.debug("Saved session %s to %s (turn %d)", session_id, path, world.turn)
