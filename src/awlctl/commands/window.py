"""Command group: move and resize the focused window."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from awlctl.commands._base import AwlGroup

if TYPE_CHECKING:
    from awlctl.commands._context import AppContext

_WINDOW_EXAMPLES = """\
  awlctl window resize 1280 720
  awlctl window move 0 0
  awlctl window move-resize 100 50 1200 800
  awlctl window to-monitor 1
  awlctl window place --x right --y center --width 50% --height 100%"""


@click.group(cls=AwlGroup, examples=_WINDOW_EXAMPLES)
@click.pass_obj
def window(app: AppContext) -> None:
    """Move and resize the focused window inside its work area."""


@window.command(
    examples="""\
  awlctl window resize 1280 720
  awlctl --json window resize 800 600"""
)
@click.argument("width", type=int)
@click.argument("height", type=int)
@click.pass_obj
def resize(app: AppContext, width: int, height: int) -> None:
    """Resize to WIDTH x HEIGHT pixels, keeping the position."""
    app.emit(app.layout.resize_in_work_area(width, height))


@window.command(
    examples="""\
  awlctl window move 0 0
  awlctl window move 200 100
  # Negative offsets need a separator
  awlctl window move -- -20 0"""
)
@click.argument("x", type=int)
@click.argument("y", type=int)
@click.pass_obj
def move(app: AppContext, x: int, y: int) -> None:
    """Move to X, Y pixels from the work area origin, keeping the size."""
    app.emit(app.layout.move_in_work_area(x, y))


@window.command(
    "move-resize",
    examples="""\
  awlctl window move-resize 0 0 960 1080
  awlctl -q window move-resize 100 50 1200 800""",
)
@click.argument("x", type=int)
@click.argument("y", type=int)
@click.argument("width", type=int)
@click.argument("height", type=int)
@click.pass_obj
def move_resize(app: AppContext, x: int, y: int, width: int, height: int) -> None:
    """Move to X, Y then resize to WIDTH x HEIGHT."""
    app.emit(app.layout.move_resize_in_work_area(x, y, width, height))


@window.command(
    "to-monitor",
    examples="""\
  awlctl window to-monitor 0
  awlctl window to-monitor 1""",
)
@click.argument("monitor", type=int)
@click.pass_obj
def to_monitor(app: AppContext, monitor: int) -> None:
    """Send the window to monitor index MONITOR (0-based)."""
    app.emit(app.layout.move_to_monitor(monitor))


@window.command(
    examples="""\
  # Right half of the screen
  awlctl window place --x right --y top --width 50% --height 100%

  # Centered, 1200px wide, height unchanged
  awlctl window place --x center --width 1200

  # Only move: a quarter of the free space from the left
  awlctl window place --x 25% --y middle"""
)
@click.option("--x", "x", default="null", show_default=True, help="left, center, right, N% or px.")
@click.option("--y", "y", default="null", show_default=True, help="top, middle, bottom, N% or px.")
@click.option("--width", default="null", show_default=True, help="N% of the work area or px.")
@click.option("--height", default="null", show_default=True, help="N% of the work area or px.")
@click.pass_obj
def place(app: AppContext, x: str, y: str, width: str, height: str) -> None:
    """Place the window using semantic tokens; "null" leaves a value unchanged."""
    app.emit(app.layout.move_resize_semantic(x, y, width, height))
