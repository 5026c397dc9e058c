"""Grid / map system."""

from __future__ import annotations

from typing import Iterable

from dungeon.core.enums import Tile
from dungeon.core.models import Vector2


class Grid:
    """2D tile grid backed by a flat list, row-major."""

    __slots__ = ("width", "height", "_tiles")

    def __init__(self, width: int, height: int, default: Tile = Tile.FLOOR) -> None:
        self.width = width
        self.height = height
        self._tiles: list[Tile] = [default] * (width * height)

    @classmethod
    def from_rows(cls, rows: Iterable[str]) -> Grid:
        """Build a grid from persisted row strings (``#`` wall, anything else floor)."""
        rows = list(rows)
        height = len(rows)
        width = len(rows[0]) if rows else 0
        grid = cls(width, height)
        for y, row in enumerate(rows):
            if len(row) != width:
                raise ValueError(f"Map row {y} has length {len(row)}, expected {width}")
            for x, ch in enumerate(row):
                grid._tiles[y * width + x] = Tile.WALL if ch == Tile.WALL.value else Tile.FLOOR
        return grid

    def to_rows(self) -> list[str]:
        return [
            "".join(t.value for t in self._tiles[y * self.width:(y + 1) * self.width])
            for y in range(self.height)
        ]

    # -- access --

    def in_bounds(self, pos: Vector2) -> bool:
        return 0 <= pos.x < self.width and 0 <= pos.y < self.height

    def get(self, pos: Vector2) -> Tile:
        if not self.in_bounds(pos):
            return Tile.WALL
        return self._tiles[pos.y * self.width + pos.x]

    def set(self, pos: Vector2, tile: Tile) -> None:
        if self.in_bounds(pos):
            self._tiles[pos.y * self.width + pos.x] = tile

    def is_floor(self, pos: Vector2) -> bool:
        return self.get(pos) == Tile.FLOOR

    @property
    def center(self) -> Vector2:
        return Vector2(self.width // 2, self.height // 2)

    def floor_tiles(self) -> list[Vector2]:
        """All floor tiles in row-major scan order."""
        return [
            Vector2(i % self.width, i // self.width)
            for i, t in enumerate(self._tiles)
            if t == Tile.FLOOR
        ]
