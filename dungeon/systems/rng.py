"""Domain-separated deterministic RNG using xxhash.

A roll depends only on the world seed and on where it is drawn:
``Hash(WorldSeed, Domain, EntityID, Turn, Salt)``. Replaying the same
commands against the same seeded world reproduces every roll.
"""

from __future__ import annotations

import struct
from typing import MutableSequence, TypeVar

import xxhash

from dungeon.core.enums import Domain

T = TypeVar("T")


class DeterministicRNG:
    """Stateless domain-separated pseudo-random number generator.

    Each call is a pure function of (seed, domain, entity_id, turn, salt).
    Callers that draw more than once for the same entity in the same turn
    pass distinct salts.
    """

    __slots__ = ("_seed",)

    _MAX_UINT64 = (1 << 64) - 1

    def __init__(self, seed: int) -> None:
        self._seed = seed

    @property
    def seed(self) -> int:
        return self._seed

    def _hash(self, domain: Domain, entity_id: int, turn: int, salt: int) -> int:
        payload = struct.pack("<qiqqi", self._seed, domain.value, entity_id, turn, salt)
        return xxhash.xxh64(payload).intdigest()

    def next_float(self, domain: Domain, entity_id: int, turn: int, salt: int = 0) -> float:
        """Return a deterministic float in [0.0, 1.0)."""
        return self._hash(domain, entity_id, turn, salt) / (self._MAX_UINT64 + 1)

    def next_int(self, domain: Domain, entity_id: int, turn: int, low: int, high: int, salt: int = 0) -> int:
        """Return a deterministic integer in [low, high] inclusive."""
        f = self.next_float(domain, entity_id, turn, salt)
        return low + int(f * (high - low + 1))

    def next_bool(self, domain: Domain, entity_id: int, turn: int, probability: float = 0.5, salt: int = 0) -> bool:
        """Return True with the given probability."""
        return self.next_float(domain, entity_id, turn, salt) < probability

    def shuffle(self, items: MutableSequence[T], domain: Domain, entity_id: int, turn: int) -> None:
        """Fisher-Yates shuffle in place; the swap index for slot i is salted by i."""
        for i in range(len(items) - 1, 0, -1):
            j = self.next_int(domain, entity_id, turn, 0, i, salt=i)
            items[i], items[j] = items[j], items[i]

    def derive_seed(self, turn: int) -> int:
        """A fresh signed 63-bit seed for a regenerated world."""
        return self._hash(Domain.WORLD_SEED, 0, turn, 0) >> 1


def session_seed(world_seed: int, session_id: str) -> int:
    """Seed for a new session's first world, distinct per session id."""
    return xxhash.xxh64(f"{world_seed}:{session_id}".encode("utf-8")).intdigest() >> 1
