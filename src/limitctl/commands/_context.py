"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Builds the prescription service from settings and
centralizes result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from limitctl.config.logging import configure_logging
from limitctl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from limitctl.config.settings import LimitSettings
    from limitctl.services.prescription import PrescriptionService
    from limitctl.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: LimitSettings) -> None:
        self.settings = settings
        self._service: PrescriptionService | None = None

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

        if settings.verbose:
            from limitctl.services.telemetry import enable_telemetry

            enable_telemetry()

    @property
    def service(self) -> PrescriptionService:
        """The prescription service (rules built lazily from settings)."""
        if self._service is None:
            from limitctl.services.prescription import PrescriptionService

            self._service = PrescriptionService(self.settings.rules.to_rules())
        return self._service

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
