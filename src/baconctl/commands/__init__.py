"""Subcommand modules for baconctl.

Provides register_commands(), which attaches every command to the root
group using deferred imports.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the one-shot query commands and the interactive game."""
    from baconctl.commands.play import play
    from baconctl.commands.universe import (
        center,
        degree,
        path,
        rank,
        separation,
        unreachable,
    )

    cli.add_command(center)
    cli.add_command(path)
    cli.add_command(rank)
    cli.add_command(degree)
    cli.add_command(separation)
    cli.add_command(unreachable)
    cli.add_command(play)
