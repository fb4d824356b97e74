"""Interactive Bacon game — one command per line until ``q`` or EOF."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import click

from baconctl.commands._base import BaconCommand
from baconctl.domain.commands import HELP_TEXT, Action, GameCommand, parse_command
from baconctl.domain.errors import CommandError

if TYPE_CHECKING:
    from baconctl.commands._context import AppContext
    from baconctl.services.result import ServiceResult
    from baconctl.services.universe import UniverseService

logger = logging.getLogger(__name__)


def dispatch(service: UniverseService, command: GameCommand) -> ServiceResult:
    """Run a parsed non-quit command against *service*."""
    match command.action:
        case Action.CENTERS:
            assert command.number is not None
            return service.rank(command.number)
        case Action.DEGREE:
            assert command.low is not None and command.high is not None
            return service.degree(command.low, command.high)
        case Action.INFINITE:
            return service.unreachable()
        case Action.PATH:
            assert command.name is not None
            return service.path(command.name)
        case Action.SEPARATION:
            assert command.low is not None and command.high is not None
            return service.separation(command.low, command.high)
        case Action.CENTER:
            assert command.name is not None
            return service.recenter(command.name)
    msg = f"No handler for action {command.action!r}"
    raise ValueError(msg)


@click.command(
    cls=BaconCommand,
    examples="""\
  baconctl play
  baconctl --center "Tom Hanks" play
  printf 'p Meryl Streep\\nq\\n' | baconctl play""",
)
@click.pass_obj
def play(app: AppContext) -> None:
    """Play the Bacon game interactively."""
    click.echo("Welcome to the Bacon Game!\n")
    click.echo(HELP_TEXT + "\n")

    service = app.service
    app.show(service.summary())
    click.echo()

    stdin = click.get_text_stream("stdin")
    suffix = app.settings.game.prompt_suffix
    while True:
        click.echo(f"{service.engine.center} {suffix}")
        line = stdin.readline()
        if not line:
            logger.debug("End of input, leaving game")
            break

        try:
            command = parse_command(line)
        except CommandError as exc:
            click.echo(str(exc), err=True)
            click.echo()
            continue

        if command.action is Action.QUIT:
            click.echo("Exiting game...")
            break

        app.show(dispatch(service, command))
        click.echo()
