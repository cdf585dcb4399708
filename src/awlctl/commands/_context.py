"""AppContext — shared Click context for all commands.

Created once by the root CLI group and passed to subcommands via
``@click.pass_obj``. Opens the display backend lazily so ``--help`` and
``--version`` work without a desktop session, and centralizes result
emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from awlctl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from awlctl.config.settings import AwlSettings
    from awlctl.infrastructure.display import DisplayContext
    from awlctl.services.layout import LayoutService
    from awlctl.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: AwlSettings) -> None:
        self.settings = settings
        self._display: DisplayContext | None = None

        from awlctl.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

        if settings.verbose:
            from awlctl.services.telemetry import enable_telemetry

            enable_telemetry()

    @property
    def display(self) -> DisplayContext:
        """The display backend (opened lazily on first access)."""
        if self._display is None:
            from awlctl.infrastructure.backends import open_display
            from awlctl.infrastructure.display import DisplayUnavailable

            try:
                self._display = open_display(self.settings.display.backend)
            except DisplayUnavailable as exc:
                raise click.ClickException(str(exc)) from exc
        return self._display

    @property
    def layout(self) -> LayoutService:
        """A LayoutService bound to the display and settings."""
        from awlctl.services.layout import LayoutService

        return LayoutService(self.display, self.settings)

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: writes to stdout; warnings go to stderr so they don't
          pollute piped output.
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
            # In JSON mode, warnings are already in the serialized payload.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
