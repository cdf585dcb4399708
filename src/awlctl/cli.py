"""Root CLI group for awlctl with global flags and command registration."""

from __future__ import annotations

import click

from awlctl import __version__
from awlctl.commands import register_commands
from awlctl.commands._context import AppContext
from awlctl.config.settings import AwlSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="awlctl")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option("--backend", default=None, help="Display backend (default: [display] backend).")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    backend: str | None,
) -> None:
    """awlctl — move and resize the focused window."""
    settings = AwlSettings.from_cli(
        config_path=config_path,
        backend=backend,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
