"""AppContext — the object every command receives via ``@click.pass_obj``.

Built once by the root group from the resolved settings. It configures
logging, switches on telemetry for ``--verbose``, and owns result output:
successes go to stdout, failures to stderr with exit status 1.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from timedate.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from timedate.config.settings import TimedateSettings
    from timedate.infrastructure.runtime import Runtime
    from timedate.services.result import ServiceResult
    from timedate.services.time_query import TimeService


class AppContext:
    def __init__(self, settings: TimedateSettings) -> None:
        self.settings = settings
        self.output = OutputSettings(
            json_output=settings.json_output,
            quiet=settings.quiet,
            verbose=settings.verbose,
        )
        self._runtime: Runtime | None = None

        from timedate.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

        if settings.verbose:
            from timedate.services.telemetry import enable_telemetry

            enable_telemetry()

    @property
    def runtime(self) -> Runtime:
        """Runtime over the system clock and process environment, built on first use.

        ``--help`` and ``--version`` never reach it.
        """
        if self._runtime is None:
            from timedate.infrastructure.runtime import Runtime

            self._runtime = Runtime(self.settings)
        return self._runtime

    @property
    def service(self) -> TimeService:
        from timedate.services.time_query import TimeService

        return TimeService(self.runtime)

    def emit(self, result: ServiceResult) -> None:
        """Print *result*; exit with status 1 if it is a failure."""
        rendered = format_result(result, settings=self.output)
        if not result.ok:
            click.echo(rendered, err=True)
            raise SystemExit(1)
        click.echo(rendered)
