"""Display collaborator contract — the window-manager seam.

Services never touch a window-manager binding directly. They receive a
:class:`DisplayContext` at construction time and re-query it on every
call, because focus, monitor layout, and workspace can all change
between two calls.

Concrete bindings live beside this module (see :mod:`awlctl.infrastructure.wnck`);
tests provide an in-memory fake.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable

from awlctl.domain.geometry import FrameRect, WorkArea


class DisplayUnavailable(RuntimeError):
    """The display binding could not be loaded or connected."""


class WindowHandle(ABC):
    """One top-level window as seen by the window manager.

    ``untile`` is an optional capability: a callable when the binding can
    leave tiled/snapped mode, ``None`` otherwise. It is fixed when the
    handle is constructed.
    """

    untile: Callable[[], None] | None = None

    @abstractmethod
    def get_monitor(self) -> int:
        """Index of the monitor the window is on."""
        ...

    @abstractmethod
    def get_frame_rect(self) -> FrameRect:
        """Current outer frame geometry."""
        ...

    @abstractmethod
    def is_maximized(self) -> bool:
        """True if maximized on either axis."""
        ...

    @abstractmethod
    def unmaximize(self) -> None:
        """Clear maximization on both axes."""
        ...

    @abstractmethod
    def move_resize_frame(self, x: int, y: int, width: int, height: int) -> None:
        """Request a new frame rectangle in absolute screen coordinates."""
        ...

    @abstractmethod
    def move_to_monitor(self, index: int) -> None:
        """Send the window to monitor *index*."""
        ...


class DisplayContext(ABC):
    """Session-wide queries against the live window-manager state."""

    @abstractmethod
    def get_focused_window(self) -> WindowHandle | None:
        """The focused window, or None if nothing has focus."""
        ...

    @abstractmethod
    def work_area_for_monitor(self, index: int) -> WorkArea:
        """Work area of monitor *index* in the active workspace."""
        ...

    @abstractmethod
    def get_monitor_count(self) -> int:
        """Number of connected monitors."""
        ...
