"""Emoji map projection of a world, as seen by one player."""

from __future__ import annotations

from typing import TYPE_CHECKING

from dungeon.core.enums import ItemType, MonsterType, Tile

if TYPE_CHECKING:
    from dungeon.core.world_state import WorldState

WALL_ICON = "🟥"
FLOOR_ICON = "⬜"
OTHER_PLAYER_ICON = "👤"
UNKNOWN_MONSTER_ICON = "👾"
UNKNOWN_ITEM_ICON = "❔"

MONSTER_ICONS: dict[str, str] = {
    MonsterType.DEMON: "👹",
    MonsterType.SNAKE: "🐍",
    MonsterType.ZOMBIE: "🧟",
}

ITEM_ICONS: dict[str, str] = {
    ItemType.SWORD: "🗡️",
    ItemType.POTION: "🧪",
    ItemType.GEM: "💎",
}


def render_map(world: WorldState, viewer: str | None = None) -> str:
    """Render one line per map row.

    Overlay priority, highest first: the viewer's own icon, other players,
    monsters, items, then the base tile. Pure projection; *world* is not
    touched.
    """
    overlays: dict[tuple[int, int], str] = {}
    for it in world.items.values():
        overlays[(it.pos.x, it.pos.y)] = ITEM_ICONS.get(it.type, UNKNOWN_ITEM_ICON)
    for m in world.monsters.values():
        overlays[(m.pos.x, m.pos.y)] = MONSTER_ICONS.get(m.type, UNKNOWN_MONSTER_ICON)
    for name, p in world.players.items():
        if name != viewer:
            overlays[(p.pos.x, p.pos.y)] = world.player_icons.get(name, OTHER_PLAYER_ICON)
    own = world.players.get(viewer) if viewer is not None else None
    if own is not None:
        overlays[(own.pos.x, own.pos.y)] = world.player_icons.get(viewer, OTHER_PLAYER_ICON)

    rows: list[str] = []
    for y, row in enumerate(world.grid.to_rows()):
        cells = []
        for x, ch in enumerate(row):
            base = WALL_ICON if ch == Tile.WALL.value else FLOOR_ICON
            cells.append(overlays.get((x, y), base))
        rows.append("".join(cells))
    return "\n".join(rows)
