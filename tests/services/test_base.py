"""Tests for BaseService and service inheritance."""

from collections.abc import Callable

from awlctl.config.models import LayoutConfig
from awlctl.config.settings import AwlSettings
from awlctl.services.base import BaseService
from awlctl.services.layout import LayoutService


class TestBaseService:
    def test_display_stored(self, display) -> None:
        service = BaseService(display)
        assert service._display is display

    def test_default_settings(self, display) -> None:
        assert BaseService(display).min_size == 50

    def test_min_size_from_settings(self, display) -> None:
        settings = AwlSettings(layout=LayoutConfig(min_size=120))
        assert BaseService(display, settings).min_size == 120

    def test_focused_window_reads_display_each_time(self, make_display: Callable, window) -> None:
        display = make_display(window)
        service = BaseService(display)
        assert service._focused_window() is window
        display.window = None
        assert service._focused_window() is None

    def test_layout_service_extends_base(self) -> None:
        assert issubclass(LayoutService, BaseService)
