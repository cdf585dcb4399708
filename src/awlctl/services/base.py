"""BaseService — foundation for awlctl services.

Every service receives a :class:`DisplayContext` and the resolved
settings at construction time. Nothing read from the display is kept
between calls.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from awlctl.config.settings import AwlSettings
    from awlctl.infrastructure.display import DisplayContext, WindowHandle

logger = logging.getLogger(__name__)


class BaseService:
    """Base for service-layer classes.

    Usage::

        class LayoutService(BaseService):
            def move_in_work_area(self, x: int, y: int) -> ServiceResult:
                window = self._focused_window()
                ...
    """

    def __init__(self, display: DisplayContext, settings: AwlSettings | None = None) -> None:
        if settings is None:
            from awlctl.config.settings import AwlSettings

            settings = AwlSettings()
        self._display = display
        self._settings = settings

    @property
    def min_size(self) -> int:
        return self._settings.layout.min_size

    def _focused_window(self) -> WindowHandle | None:
        window = self._display.get_focused_window()
        if window is None:
            logger.debug("No focused window")
        return window
