"""workarea — print the focused window's work area."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from awlctl.commands._base import AwlCommand

if TYPE_CHECKING:
    from awlctl.commands._context import AppContext


@click.command(
    cls=AwlCommand,
    examples="""\
  awlctl workarea
  # "x y width height" on one line, for scripts
  awlctl -q workarea
  awlctl --json workarea""",
)
@click.pass_obj
def workarea(app: AppContext) -> None:
    """Show the work area of the focused window's monitor (zeros if none)."""
    app.emit(app.layout.get_work_area())
