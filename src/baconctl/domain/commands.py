"""Game command grammar for the interactive ``play`` loop.

One command per line, a single-letter action followed by a space and
its arguments::

    c <n>            top (n > 0) or bottom (n < 0) centers
    d <low> <high>   actors by degree
    i                actors with infinite separation
    p <name>         path from <name> to the center
    s <low> <high>   actors by separation
    u <name>         make <name> the center
    q                quit
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from baconctl.domain.errors import CommandError

_REJECTED = "Action not acceptable."


class Action(StrEnum):
    """Single-letter game actions."""

    CENTERS = "c"
    DEGREE = "d"
    INFINITE = "i"
    PATH = "p"
    SEPARATION = "s"
    CENTER = "u"
    QUIT = "q"


HELP_TEXT = """\
Commands:
c <#>: list top (positive number) or bottom (negative) <#> centers of the universe, sorted by average separation
d <low> <high>: list actors sorted by degree, with degree between low and high
i: list actors with infinite separation from the current center
p <name>: find path from <name> to current center of the universe
s <low> <high>: list actors sorted by non-infinite separation from the current center, with separation between low and high
u <name>: make <name> the center of the universe
q: quit game"""  # noqa: E501


@dataclass(frozen=True)
class GameCommand:
    """A parsed game line."""

    action: Action
    number: int | None = None
    low: int | None = None
    high: int | None = None
    name: str | None = None


def _int(line: str, raw: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise CommandError(line, f"{_REJECTED} Expected a whole number, got {raw!r}") from None


def parse_command(line: str) -> GameCommand:
    """Parse one line of game input.

    Raises:
        CommandError: On an empty line, unknown action, or bad arguments.
    """
    text = line.strip()
    if not text:
        raise CommandError(line, _REJECTED)

    try:
        action = Action(text[0])
    except ValueError:
        raise CommandError(line, _REJECTED) from None

    if action in (Action.INFINITE, Action.QUIT):
        if len(text) > 1:
            raise CommandError(line, _REJECTED)
        return GameCommand(action)

    if len(text) < 3 or text[1] != " ":
        raise CommandError(line, _REJECTED)
    rest = text[2:].strip()

    if action in (Action.PATH, Action.CENTER):
        return GameCommand(action, name=rest)

    parts = rest.split()
    if action is Action.CENTERS:
        if len(parts) != 1:
            raise CommandError(line, f"{_REJECTED} Usage: c <#>")
        return GameCommand(action, number=_int(line, parts[0]))

    if len(parts) != 2:
        raise CommandError(line, f"{_REJECTED} Usage: {action} <low> <high>")
    return GameCommand(action, low=_int(line, parts[0]), high=_int(line, parts[1]))
