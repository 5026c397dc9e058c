"""Command parsing — raw chat text to a closed set of command variants."""

from __future__ import annotations

import re
from dataclasses import dataclass

from dungeon.core.enums import CommandType, Direction


@dataclass(frozen=True, slots=True)
class ParsedCommand:
    """A parsed player command.

    ``direction`` is set only for MOVE and ATTACK, ``argument`` only for USE
    (lower-cased item text).
    """

    kind: CommandType
    direction: Direction | None = None
    argument: str = ""

    def __repr__(self) -> str:
        if self.direction is not None:
            return f"Command({self.kind.name} {self.direction.value})"
        if self.argument:
            return f"Command({self.kind.name} {self.argument!r})"
        return f"Command({self.kind.name})"


COMMAND_HELP = "`/look`, `/move <direction>`, `/attack <direction>`, `/pickup`, `/inventory`, or `/use <item>`"

_DIRECTIONAL = re.compile(r"^/(move|attack)\s+(north|south|east|west)$")

_EXACT: dict[str, CommandType] = {
    "/look": CommandType.LOOK,
    "/inventory": CommandType.INVENTORY,
    "/pickup": CommandType.PICKUP,
}


def parse_command(raw: str | None) -> ParsedCommand:
    """Parse one line of input. Matching is case-insensitive and whitespace-trimmed."""
    trimmed = (raw or "").strip()
    if not trimmed:
        return ParsedCommand(CommandType.EMPTY)
    lower = trimmed.lower()

    if lower.startswith("/spawn"):
        return ParsedCommand(CommandType.SPAWN)

    exact = _EXACT.get(lower)
    if exact is not None:
        return ParsedCommand(exact)

    if lower.startswith("/use "):
        return ParsedCommand(CommandType.USE, argument=lower[5:].strip())

    match = _DIRECTIONAL.match(lower)
    if match:
        kind = CommandType.MOVE if match.group(1) == "move" else CommandType.ATTACK
        return ParsedCommand(kind, direction=Direction(match.group(2)))

    return ParsedCommand(CommandType.UNKNOWN)
