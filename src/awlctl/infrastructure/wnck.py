"""libwnck + GDK binding for X11 sessions (requires the ``awlctl[wnck]`` extra).

Focus and frame geometry come from libwnck; monitor layout and work
areas come from GDK. Every query first drains pending GLib events and
forces a libwnck refresh so a long-running server never answers from a
stale snapshot.

libwnck has no tiling API, so :class:`WnckWindow` exposes no ``untile``
capability.
"""

from __future__ import annotations

import logging
from typing import Any

from awlctl.domain.geometry import FrameRect, WorkArea
from awlctl.infrastructure.display import DisplayContext, DisplayUnavailable, WindowHandle

logger = logging.getLogger(__name__)


def _load_gi() -> tuple[Any, Any, Any]:
    """Import GLib/Gdk/Wnck lazily so the core never needs PyGObject."""
    try:
        import gi

        gi.require_version("Gdk", "3.0")
        gi.require_version("Wnck", "3.0")
        from gi.repository import Gdk, GLib, Wnck
    except (ImportError, ValueError) as exc:
        msg = "libwnck binding unavailable. Install with: pip install awlctl[wnck]"
        raise DisplayUnavailable(msg) from exc
    return GLib, Gdk, Wnck


class WnckWindow(WindowHandle):
    """A libwnck window wrapped in the collaborator contract."""

    untile = None

    def __init__(self, display: WnckDisplay, window: Any) -> None:
        self._display = display
        self._window = window

    def get_monitor(self) -> int:
        frame = self.get_frame_rect()
        return self._display.monitor_at(frame.x + frame.width // 2, frame.y + frame.height // 2)

    def get_frame_rect(self) -> FrameRect:
        x, y, width, height = self._window.get_geometry()
        return FrameRect(x=x, y=y, width=width, height=height)

    def is_maximized(self) -> bool:
        return bool(
            self._window.is_maximized()
            or self._window.is_maximized_horizontally()
            or self._window.is_maximized_vertically()
        )

    def unmaximize(self) -> None:
        self._window.unmaximize()
        self._display.flush()

    def move_resize_frame(self, x: int, y: int, width: int, height: int) -> None:
        wnck = self._display.wnck
        mask = (
            wnck.WindowMoveResizeMask.X
            | wnck.WindowMoveResizeMask.Y
            | wnck.WindowMoveResizeMask.WIDTH
            | wnck.WindowMoveResizeMask.HEIGHT
        )
        self._window.set_geometry(wnck.WindowGravity.NORTHWEST, mask, x, y, width, height)
        self._display.flush()

    def move_to_monitor(self, index: int) -> None:
        frame = self.get_frame_rect()
        src = self._display.work_area_for_monitor(self.get_monitor())
        dst = self._display.work_area_for_monitor(index)

        width = min(frame.width, dst.width)
        height = min(frame.height, dst.height)
        x = dst.x + min(max(0, frame.x - src.x), max(0, dst.width - width))
        y = dst.y + min(max(0, frame.y - src.y), max(0, dst.height - height))
        logger.debug("Moving window to monitor %d at (%d, %d)", index, x, y)
        self.move_resize_frame(x, y, width, height)


class WnckDisplay(DisplayContext):
    """Display context backed by the default X11 screen."""

    def __init__(self) -> None:
        self.glib, self.gdk, self.wnck = _load_gi()
        self._gdk_display = self.gdk.Display.get_default()
        self._screen = self.wnck.Screen.get_default()
        if self._gdk_display is None or self._screen is None:
            msg = "No X11 display available (is DISPLAY set?)"
            raise DisplayUnavailable(msg)

    def _refresh(self) -> None:
        context = self.glib.MainContext.default()
        while context.pending():
            context.iteration(False)
        self._screen.force_update()

    def flush(self) -> None:
        self._gdk_display.flush()

    def monitor_at(self, x: int, y: int) -> int:
        target = self._gdk_display.get_monitor_at_point(x, y)
        for index in range(self._gdk_display.get_n_monitors()):
            if self._gdk_display.get_monitor(index) == target:
                return index
        return 0

    def get_focused_window(self) -> WindowHandle | None:
        self._refresh()
        window = self._screen.get_active_window()
        if window is None:
            return None
        return WnckWindow(self, window)

    def work_area_for_monitor(self, index: int) -> WorkArea:
        self._refresh()
        rect = self._gdk_display.get_monitor(index).get_workarea()
        return WorkArea(x=rect.x, y=rect.y, width=rect.width, height=rect.height)

    def get_monitor_count(self) -> int:
        self._refresh()
        return int(self._gdk_display.get_n_monitors())
