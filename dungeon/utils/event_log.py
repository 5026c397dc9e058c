"""Thread-safe per-session feed of command narratives exposed via the API."""

from __future__ import annotations

import threading
from collections import deque
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class GameEvent:
    """A single narrative entry for the API event feed."""

    turn: int
    username: str
    narrative: str


class EventLog:
    """Bounded event log. Writers append; readers snapshot a slice.

    Thread-safe via a simple lock. The session manager writes once per
    command, the API reads.
    """

    __slots__ = ("_buffer", "_lock")

    def __init__(self, maxlen: int = 500) -> None:
        self._buffer: deque[GameEvent] = deque(maxlen=maxlen)
        self._lock = threading.Lock()

    def append(self, event: GameEvent) -> None:
        with self._lock:
            self._buffer.append(event)

    def since_turn(self, turn: int) -> list[GameEvent]:
        """Return all events with turn >= *turn*."""
        with self._lock:
            return [e for e in self._buffer if e.turn >= turn]
