"""Tests for MCP resource _impl functions (no mcp package needed)."""

from __future__ import annotations

from collections.abc import Callable

from awlctl.config.settings import AwlSettings
from awlctl.mcp.resources import register_resources, work_area_impl


class TestResources:
    def test_work_area(self, display, settings: AwlSettings) -> None:
        assert work_area_impl(display, settings) == {
            "x": 0,
            "y": 0,
            "width": 1920,
            "height": 1080,
            "monitor": 0,
        }

    def test_work_area_without_focus(self, make_display: Callable, settings: AwlSettings) -> None:
        data = work_area_impl(make_display(None), settings)
        assert data["width"] == 0
        assert data["monitor"] is None

    def test_register_resources(self, display, settings: AwlSettings) -> None:
        uris: list[str] = []

        class DummyServer:
            def resource(self, uri: str):
                uris.append(uri)
                return lambda fn: fn

        register_resources(DummyServer(), display, settings)
        assert uris == ["awlctl://work-area"]
