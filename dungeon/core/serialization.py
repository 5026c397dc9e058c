"""Persisted-format conversion and versioned migration of session state.

The on-disk layout keeps the camelCase field names of the first version of
the save format so that old session files stay readable::

    {
      "version": 2,
      "seed": 42,
      "map": ["#####", "#...#", ...],
      "players": {"alice": {"x": 2, "y": 1, "hp": 20, "maxHp": 20, ...}},
      "monsters": {"1": {"id": 1, "x": 3, "y": 1, "type": "snake", ...}},
      "items": {"1": {"id": 1, "x": 1, "y": 1, "type": "gem", "name": ...}},
      "turn": 0,
      "nextMonsterId": 2,
      "nextItemId": 2,
      "playerIcons": {"alice": "..."},
      "nextPlayerIconIndex": 1
    }

Version 1 files (no ``version`` key) may miss any of the collections,
counters and icon tables. ``migrate_state`` back-fills them once, before the
typed ``WorldState`` is built.
"""

from __future__ import annotations

import logging
from typing import Any

from dungeon.core.grid import Grid
from dungeon.core.models import PLAYER_ICONS, InventoryItem, Item, Monster, Player, Vector2
from dungeon.core.world_state import WorldState

logger = logging.getLogger(__name__)

STATE_VERSION = 2

_PLAYER_DEFAULTS: dict[str, Any] = {
    "hp": 20,
    "maxHp": 20,
    "atk": 3,
    "xp": 0,
    "level": 1,
}


class StateFormatError(ValueError):
    """Raised when a payload cannot be read as session state at all."""


def _check_table(raw: dict[str, Any], key: str) -> None:
    """Entity tables, when present, map a key to one JSON object per entity."""
    table = raw.get(key, {})
    if not isinstance(table, dict):
        raise StateFormatError(f"State field {key!r} must be an object, got {type(table).__name__}")
    for entry_key, entry in table.items():
        if not isinstance(entry, dict):
            raise StateFormatError(f"Entry {entry_key!r} in {key!r} must be an object, got {type(entry).__name__}")


def migrate_state(raw: dict[str, Any], default_seed: int = 0) -> dict[str, Any]:
    """Bring a parsed payload of unknown vintage up to ``STATE_VERSION``.

    Mutates and returns *raw*.
    """
    if not isinstance(raw, dict):
        raise StateFormatError(f"State must be a JSON object, got {type(raw).__name__}")
    rows = raw.get("map")
    if not isinstance(rows, list) or not rows:
        raise StateFormatError("State has no map")

    version = raw.get("version", 1)
    if isinstance(version, bool) or not isinstance(version, int):
        raise StateFormatError(f"State version must be an integer, got {version!r}")
    for key in ("players", "monsters", "items"):
        _check_table(raw, key)
    for name, player in raw.get("players", {}).items():
        inventory = player.get("inventory", [])
        if not isinstance(inventory, list) or not all(isinstance(it, dict) for it in inventory):
            raise StateFormatError(f"Inventory of player {name!r} must be a list of objects")

    if version >= STATE_VERSION:
        return raw

    logger.info("Migrating session state from version %s to %s", version, STATE_VERSION)

    raw.setdefault("players", {})
    raw.setdefault("monsters", {})
    raw.setdefault("items", {})
    raw.setdefault("turn", 0)
    raw.setdefault("seed", default_seed)

    if "nextMonsterId" not in raw:
        raw["nextMonsterId"] = max((int(k) for k in raw["monsters"]), default=0) + 1
    if "nextItemId" not in raw:
        held = [
            int(it["id"])
            for p in raw["players"].values()
            for it in p.get("inventory", [])
        ]
        raw["nextItemId"] = max([int(k) for k in raw["items"]] + held, default=0) + 1

    for player in raw["players"].values():
        for key, value in _PLAYER_DEFAULTS.items():
            player.setdefault(key, value)
        player.setdefault("inventory", [])

    icons = raw.setdefault("playerIcons", {})
    cursor = raw.get("nextPlayerIconIndex", len(icons))
    for username in raw["players"]:
        if username not in icons:
            icons[username] = PLAYER_ICONS[cursor % len(PLAYER_ICONS)]
            cursor += 1
    raw["nextPlayerIconIndex"] = cursor

    raw["version"] = STATE_VERSION
    return raw


def world_to_dict(world: WorldState) -> dict[str, Any]:
    return {
        "version": STATE_VERSION,
        "seed": world.seed,
        "map": world.grid.to_rows(),
        "players": {
            name: {
                "x": p.pos.x,
                "y": p.pos.y,
                "hp": p.hp,
                "maxHp": p.max_hp,
                "atk": p.atk,
                "inventory": [{"id": it.id, "type": it.type, "name": it.name} for it in p.inventory],
                "xp": p.xp,
                "level": p.level,
            }
            for name, p in world.players.items()
        },
        "monsters": {
            str(m.id): {"id": m.id, "x": m.pos.x, "y": m.pos.y, "type": m.type, "hp": m.hp, "atk": m.atk}
            for m in world.monsters.values()
        },
        "items": {
            str(it.id): {"id": it.id, "x": it.pos.x, "y": it.pos.y, "type": it.type, "name": it.name}
            for it in world.items.values()
        },
        "turn": world.turn,
        "nextMonsterId": world.next_monster_id,
        "nextItemId": world.next_item_id,
        "playerIcons": dict(world.player_icons),
        "nextPlayerIconIndex": world.next_player_icon_index,
    }


def world_from_dict(raw: dict[str, Any], default_seed: int = 0) -> WorldState:
    """Migrate *raw* if needed and build the typed world from it."""
    try:
        data = migrate_state(raw, default_seed)
        world = WorldState(Grid.from_rows(data["map"]), seed=int(data["seed"]))
        for name, p in data["players"].items():
            world.players[name] = Player(
                pos=Vector2(int(p["x"]), int(p["y"])),
                hp=int(p["hp"]),
                max_hp=int(p["maxHp"]),
                atk=int(p["atk"]),
                inventory=[
                    InventoryItem(id=int(it["id"]), type=it["type"], name=it["name"])
                    for it in p["inventory"]
                ],
                xp=int(p["xp"]),
                level=int(p["level"]),
            )
        for m in data["monsters"].values():
            monster = Monster(
                id=int(m["id"]), pos=Vector2(int(m["x"]), int(m["y"])),
                type=m["type"], hp=int(m["hp"]), atk=int(m["atk"]),
            )
            world.monsters[monster.id] = monster
        for it in data["items"].values():
            item = Item(id=int(it["id"]), pos=Vector2(int(it["x"]), int(it["y"])), type=it["type"], name=it["name"])
            world.items[item.id] = item
        world.turn = int(data["turn"])
        world.next_monster_id = int(data["nextMonsterId"])
        world.next_item_id = int(data["nextItemId"])
        world.player_icons = dict(data["playerIcons"])
        world.next_player_icon_index = int(data["nextPlayerIconIndex"])
    except StateFormatError:
        raise
    except (AttributeError, KeyError, TypeError, ValueError) as exc:
        raise StateFormatError(f"Malformed session state: {exc}") from exc
    return world
