"""Two-phase apply of a GeometryPlan to a window.

Many window managers silently drop a combined move+resize, and ignore
both while a window is maximized or tiled. So the apply step:

1. clears maximized/tiled state (always, even for an empty plan),
2. converts work-area offsets to absolute screen coordinates,
3. moves with the *current* frame size (no implicit resize),
4. resizes at the new origin.

Steps 3 and 4 are separate ``move_resize_frame`` calls and each is
skipped when its inputs are absent.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from awlctl.domain.geometry import FrameRect, GeometryPlan, WorkArea
    from awlctl.infrastructure.display import WindowHandle

logger = logging.getLogger(__name__)


def unblock(window: WindowHandle) -> None:
    """Leave maximized and tiled states that would swallow a move/resize."""
    if window.is_maximized():
        logger.debug("Unmaximizing window before move/resize")
        window.unmaximize()
    if window.untile is not None:
        window.untile()


def apply_plan(
    window: WindowHandle,
    plan: GeometryPlan,
    work_area: WorkArea,
    frame: FrameRect | None = None,
) -> FrameRect:
    """Apply *plan* to *window* as a move followed by a resize.

    When *frame* is None it is read after unblocking, so a window that
    was maximized moves with its restored size. Returns the frame the
    move was computed from.
    """
    unblock(window)
    if frame is None:
        frame = window.get_frame_rect()

    abs_x = work_area.x + plan.x if plan.x is not None else frame.x
    abs_y = work_area.y + plan.y if plan.y is not None else frame.y

    if plan.moves:
        logger.debug("move_resize_frame move -> (%d, %d)", abs_x, abs_y)
        window.move_resize_frame(abs_x, abs_y, frame.width, frame.height)

    width, height = plan.width, plan.height
    if width is not None and height is not None:
        logger.debug("move_resize_frame resize -> (%d, %d, %d, %d)", abs_x, abs_y, width, height)
        window.move_resize_frame(abs_x, abs_y, width, height)

    return frame
