"""Root CLI group for baconctl with global flags and command registration."""

from __future__ import annotations

import click

from baconctl import __version__
from baconctl.commands import register_commands
from baconctl.commands._context import AppContext
from baconctl.config.settings import BaconSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="baconctl")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option("--data-dir", default=None, help="Directory holding the dataset files.")
@click.option("--center", default=None, help="Actor to start as the center of the universe.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    data_dir: str | None,
    center: str | None,
) -> None:
    """baconctl — explore degrees of separation between actors."""
    ctx.ensure_object(dict)
    flags: dict[str, object] = {
        "json_output": json_output,
        "quiet": quiet,
        "verbose": verbose,
        "log_json": log_json,
    }
    if center is not None:
        flags["center"] = center
    settings = BaconSettings.from_cli(config_path=config_path, data_dir=data_dir, **flags)
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
