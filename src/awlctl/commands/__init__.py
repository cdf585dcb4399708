"""Subcommand modules for awlctl.

Provides register_commands() which uses deferred imports so
``awlctl --help`` never loads services or a display binding.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the ``window`` group and the standalone commands on the root group."""
    from awlctl.commands.serve import serve
    from awlctl.commands.window import window
    from awlctl.commands.workarea import workarea

    cli.add_command(window)
    cli.add_command(workarea)
    cli.add_command(serve)
