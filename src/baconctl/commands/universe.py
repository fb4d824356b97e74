"""One-shot query commands against the configured center of the universe."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from baconctl.commands._base import BaconCommand

if TYPE_CHECKING:
    from baconctl.commands._context import AppContext


@click.command(
    cls=BaconCommand,
    examples="""\
  baconctl center
  baconctl --center "Tom Hanks" center
  baconctl --json center""",
)
@click.pass_obj
def center(app: AppContext) -> None:
    """Show the center of the universe and how well connected it is."""
    app.emit(app.service.summary())


@click.command(
    cls=BaconCommand,
    examples="""\
  baconctl path "Meryl Streep"
  baconctl -q path "Meryl Streep"
  baconctl --center "Tom Hanks" --json path Madonna""",
)
@click.argument("name")
@click.pass_obj
def path(app: AppContext, name: str) -> None:
    """Find the co-star chain from NAME to the center."""
    app.emit(app.service.path(name))


@click.command(
    cls=BaconCommand,
    examples="""\
  baconctl rank 10
  baconctl rank 5 --worst
  baconctl --json rank 3""",
)
@click.argument("count", type=int)
@click.option("--worst", is_flag=True, help="List the highest average separations instead.")
@click.pass_obj
def rank(app: AppContext, count: int, worst: bool) -> None:
    """List the COUNT best centers of the universe by average separation."""
    app.emit(app.service.rank(-count if worst else count))


@click.command(
    cls=BaconCommand,
    examples="""\
  baconctl degree 0 0
  baconctl degree 50 1000""",
)
@click.argument("low", type=int)
@click.argument("high", type=int)
@click.pass_obj
def degree(app: AppContext, low: int, high: int) -> None:
    """List actors with between LOW and HIGH direct co-stars."""
    app.emit(app.service.degree(low, high))


@click.command(
    cls=BaconCommand,
    examples="""\
  baconctl separation 1 2
  baconctl --center "Tom Hanks" separation 3 10""",
)
@click.argument("low", type=int)
@click.argument("high", type=int)
@click.pass_obj
def separation(app: AppContext, low: int, high: int) -> None:
    """List actors between LOW and HIGH steps from the center."""
    app.emit(app.service.separation(low, high))


@click.command(
    cls=BaconCommand,
    examples="""\
  baconctl unreachable
  baconctl -q unreachable""",
)
@click.pass_obj
def unreachable(app: AppContext) -> None:
    """List actors with no connection to the center."""
    app.emit(app.service.unreachable())
