"""Tests for @traced span injection."""

from __future__ import annotations

from awlctl.services.layout import LayoutService
from awlctl.services.result import ServiceResult
from awlctl.services.telemetry import (
    Span,
    annotate,
    disable_telemetry,
    enable_telemetry,
    traced,
)


@traced
def _op() -> ServiceResult:
    annotate("answer", 42)
    return ServiceResult(ok=True, op="probe")


class TestTraced:
    def test_disabled_leaves_meta_empty(self) -> None:
        disable_telemetry()
        assert _op().meta is None

    def test_enabled_injects_span(self) -> None:
        enable_telemetry()
        result = _op()
        span = result.meta["telemetry"]  # type: ignore[index]
        assert span["name"] == "_op"
        assert span["annotations"] == {"answer": 42}
        assert span["duration_ms"] >= 0

    def test_annotate_outside_span_is_noop(self) -> None:
        enable_telemetry()
        annotate("ignored", True)

    def test_layout_service_annotates_plan(self, display, settings) -> None:
        enable_telemetry()
        result = LayoutService(display, settings).move_in_work_area(1, 2)
        annotations = result.meta["telemetry"]["annotations"]  # type: ignore[index]
        assert annotations["plan"]["x"] == 1
        assert annotations["frame"]["width"] == 800


class TestSpan:
    def test_open_span_has_zero_duration(self) -> None:
        assert Span(name="x").duration_ms == 0.0

    def test_to_dict_omits_empty_annotations(self) -> None:
        span = Span(name="x")
        span.end()
        assert "annotations" not in span.to_dict()
