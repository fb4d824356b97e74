"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Provides lazy universe loading and centralized
result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, NoReturn

import click

from baconctl.output.formatters import OutputSettings, format_result
from baconctl.services.result import ServiceResult

if TYPE_CHECKING:
    from baconctl.config.settings import BaconSettings
    from baconctl.services.universe import UniverseService


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    Subcommands access it via ``@click.pass_obj``.  The dataset is parsed
    lazily on first use so ``--help`` and ``--version`` never read it.
    """

    def __init__(self, settings: BaconSettings) -> None:
        self.settings = settings
        self._service: UniverseService | None = None

        from baconctl.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

        if settings.verbose:
            from baconctl.services.telemetry import enable_telemetry

            enable_telemetry()

    @property
    def service(self) -> UniverseService:
        """The universe service (dataset loaded on first access).

        Exits with code 1 when the dataset cannot be loaded or the
        initial center is not an actor in it.
        """
        if self._service is None:
            from baconctl.domain.errors import DatasetError, VertexNotFoundError
            from baconctl.services.universe import open_universe

            try:
                self._service = open_universe(self.settings)
            except DatasetError as exc:
                self.abort(
                    ServiceResult.failure(
                        "load",
                        "DATASET_ERROR",
                        str(exc),
                        path=str(exc.path),
                        line=exc.line,
                    )
                )
            except VertexNotFoundError as exc:
                self.abort(
                    ServiceResult.failure(
                        "load",
                        "NOT_FOUND",
                        f"Center '{exc.vertex}' not found in the universe",
                        name=str(exc.vertex),
                    )
                )
        return self._service

    @property
    def output_settings(self) -> OutputSettings:
        return OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )

    def show(self, result: ServiceResult) -> None:
        """Format and print a ServiceResult without exiting.

        Success goes to stdout with warnings on stderr (JSON mode keeps
        them in the payload).  Failure goes to stderr.
        """
        settings = self.output_settings
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)

    def emit(self, result: ServiceResult) -> None:
        """Show a one-shot command's result; exit with code 1 on failure."""
        self.show(result)
        if not result.ok:
            raise SystemExit(1)

    def abort(self, result: ServiceResult) -> NoReturn:
        """Show a failed result and exit with code 1."""
        self.show(result)
        raise SystemExit(1)
