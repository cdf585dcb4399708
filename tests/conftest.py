"""Shared pytest fixtures and an in-memory display for awlctl tests."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from awlctl.config.settings import AwlSettings
from awlctl.domain.geometry import FrameRect, WorkArea
from awlctl.infrastructure.display import DisplayContext, WindowHandle
from awlctl.services.telemetry import disable_telemetry

FULL_HD = WorkArea(x=0, y=0, width=1920, height=1080)


class FakeWindow(WindowHandle):
    """Window double that records every call in ``calls``.

    ``move_resize_frame`` updates the frame, like a cooperative window
    manager would. ``restores_to`` is the frame ``unmaximize`` brings back.
    """

    def __init__(
        self,
        frame: FrameRect,
        *,
        monitor: int = 0,
        maximized: bool = False,
        tileable: bool = False,
        restores_to: FrameRect | None = None,
    ) -> None:
        self.frame = frame
        self.restores_to = restores_to
        self.monitor = monitor
        self.maximized = maximized
        self.calls: list[tuple[Any, ...]] = []
        if tileable:
            self.untile = self._untile

    def _untile(self) -> None:
        self.calls.append(("untile",))

    def get_monitor(self) -> int:
        return self.monitor

    def get_frame_rect(self) -> FrameRect:
        return self.frame

    def is_maximized(self) -> bool:
        return self.maximized

    def unmaximize(self) -> None:
        self.calls.append(("unmaximize",))
        self.maximized = False
        if self.restores_to is not None:
            self.frame = self.restores_to

    def move_resize_frame(self, x: int, y: int, width: int, height: int) -> None:
        self.calls.append(("move_resize_frame", x, y, width, height))
        self.frame = FrameRect(x=x, y=y, width=width, height=height)

    def move_to_monitor(self, index: int) -> None:
        self.calls.append(("move_to_monitor", index))
        self.monitor = index

    @property
    def mutations(self) -> list[tuple[Any, ...]]:
        return [c for c in self.calls if c[0] == "move_resize_frame"]


class FakeDisplay(DisplayContext):
    """Display double with a fixed monitor layout and an optional focused window."""

    def __init__(self, work_areas: list[WorkArea], window: FakeWindow | None) -> None:
        self.work_areas = work_areas
        self.window = window

    def get_focused_window(self) -> WindowHandle | None:
        return self.window

    def work_area_for_monitor(self, index: int) -> WorkArea:
        return self.work_areas[index]

    def get_monitor_count(self) -> int:
        return len(self.work_areas)


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Keep user config files and AWLCTL_* env vars out of every test."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    monkeypatch.delenv("AWLCTL_CONFIG", raising=False)
    for name in ("AWLCTL_LAYOUT__MIN_SIZE", "AWLCTL_DISPLAY__BACKEND", "AWLCTL_VERBOSE"):
        monkeypatch.delenv(name, raising=False)
    yield
    disable_telemetry()


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def settings() -> AwlSettings:
    """Default settings (min_size=50, wnck backend)."""
    return AwlSettings.from_cli()


@pytest.fixture
def make_window() -> Callable[..., FakeWindow]:
    """Factory for FakeWindow; defaults to an 800x600 frame at (100, 100)."""

    def _make(frame: FrameRect | None = None, **kwargs: Any) -> FakeWindow:
        return FakeWindow(frame or FrameRect(x=100, y=100, width=800, height=600), **kwargs)

    return _make


@pytest.fixture
def make_display() -> Callable[..., FakeDisplay]:
    """Factory for FakeDisplay; defaults to one 1920x1080 monitor."""

    def _make(window: FakeWindow | None, work_areas: list[WorkArea] | None = None) -> FakeDisplay:
        return FakeDisplay(work_areas or [FULL_HD], window)

    return _make


@pytest.fixture
def window(make_window: Callable[..., FakeWindow]) -> FakeWindow:
    """Focused 800x600 window at (100, 100) on monitor 0."""
    return make_window()


@pytest.fixture
def display(make_display: Callable[..., FakeDisplay], window: FakeWindow) -> FakeDisplay:
    """One 1920x1080 monitor with :func:`window` focused."""
    return make_display(window)
