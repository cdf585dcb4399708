"""LayoutService — the six remote-callable window layout operations.

Each operation is one stateless transaction against the live window
manager: read the focused window, its monitor and work area fresh,
resolve, then hand a GeometryPlan to :func:`apply_plan`.

Pipeline: FOCUS → READ → RESOLVE → APPLY → RESPOND
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from awlctl.domain.geometry import FrameRect, GeometryPlan, WorkArea, clamp_extent
from awlctl.domain.resolve import GeometryError, plan_geometry
from awlctl.services.apply import apply_plan, unblock
from awlctl.services.base import BaseService
from awlctl.services.result import (
    MONITOR_OUT_OF_RANGE,
    NO_FOCUSED_WINDOW,
    ServiceResult,
)
from awlctl.services.telemetry import annotate, traced

if TYPE_CHECKING:
    from awlctl.infrastructure.display import WindowHandle


def _no_window(op: str) -> ServiceResult:
    return ServiceResult.failure(op, NO_FOCUSED_WINDOW, "No focused window")


class LayoutService(BaseService):
    """Moves and resizes the focused window inside its monitor's work area."""

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @traced
    def get_work_area(self) -> ServiceResult:
        """Work area of the focused window's monitor; all zeros if none."""
        op = "get_work_area"
        window = self._focused_window()
        if window is None:
            return ServiceResult(
                ok=True,
                op=op,
                data={**WorkArea.empty().to_dict(), "monitor": None},
                warnings=["No focused window; reporting an empty work area"],
            )

        monitor = window.get_monitor()
        work_area = self._display.work_area_for_monitor(monitor)
        return ServiceResult(ok=True, op=op, data={**work_area.to_dict(), "monitor": monitor})

    @traced
    def resize_in_work_area(self, width: int, height: int) -> ServiceResult:
        """Resize in place, clamping both sides to the minimum size."""
        plan = GeometryPlan(
            width=clamp_extent(width, self.min_size),
            height=clamp_extent(height, self.min_size),
        )
        return self._apply("resize_in_work_area", plan)

    @traced
    def move_in_work_area(self, x: int, y: int) -> ServiceResult:
        """Move to offsets from the work area origin, keeping the size."""
        return self._apply("move_in_work_area", GeometryPlan(x=int(x), y=int(y)))

    @traced
    def move_resize_in_work_area(self, x: int, y: int, width: int, height: int) -> ServiceResult:
        """Move then resize; size is clamped to the minimum."""
        plan = GeometryPlan(
            x=int(x),
            y=int(y),
            width=clamp_extent(width, self.min_size),
            height=clamp_extent(height, self.min_size),
        )
        return self._apply("move_resize_in_work_area", plan)

    @traced
    def move_to_monitor(self, monitor: int) -> ServiceResult:
        """Send the focused window to monitor index *monitor*."""
        op = "move_to_monitor"
        window = self._focused_window()
        if window is None:
            return _no_window(op)

        count = self._display.get_monitor_count()
        if not 0 <= monitor < count:
            return ServiceResult.failure(
                op,
                MONITOR_OUT_OF_RANGE,
                f"Monitor {monitor} out of range (0..{count - 1})",
                monitor=monitor,
                monitor_count=count,
            )

        window.move_to_monitor(monitor)
        return ServiceResult(ok=True, op=op, data={"monitor": monitor, "monitor_count": count})

    @traced
    def move_resize_semantic(self, x: Any, y: Any, width: Any, height: Any) -> ServiceResult:
        """Resolve four tokens (numbers, keywords, ``"N%"``, ``"null"``) and apply.

        Size resolves before position so ``center``/``right`` use the new
        size. Sizes are taken as given, without the minimum-size clamp. A
        rejected token aborts before any mutation.
        """
        op = "move_resize_semantic"
        window = self._focused_window()
        if window is None:
            return _no_window(op)

        work_area = self._display.work_area_for_monitor(window.get_monitor())

        try:
            plan_geometry(x, y, width, height, work_area, window.get_frame_rect())
        except GeometryError as exc:
            return ServiceResult.failure(op, exc.code, str(exc), value=exc.value)

        # Re-plan against the restored frame once maximize/tile is cleared.
        unblock(window)
        frame = window.get_frame_rect()
        try:
            plan = plan_geometry(x, y, width, height, work_area, frame)
        except GeometryError as exc:
            return ServiceResult.failure(op, exc.code, str(exc), value=exc.value)

        warnings: list[str] = []
        if (plan.width is None) != (plan.height is None):
            warnings.append("Width and height must both be given to resize; size left unchanged")

        return self._apply(
            op, plan, window=window, work_area=work_area, frame=frame, warnings=warnings
        )

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _apply(
        self,
        op: str,
        plan: GeometryPlan,
        *,
        window: WindowHandle | None = None,
        work_area: WorkArea | None = None,
        frame: FrameRect | None = None,
        warnings: list[str] | None = None,
    ) -> ServiceResult:
        if window is None:
            window = self._focused_window()
            if window is None:
                return _no_window(op)
        if work_area is None:
            work_area = self._display.work_area_for_monitor(window.get_monitor())

        frame = apply_plan(window, plan, work_area, frame)
        annotate("frame", frame.to_dict())
        annotate("plan", plan.to_dict())

        return ServiceResult(
            ok=True,
            op=op,
            data={"plan": plan.to_dict(), "work_area": work_area.to_dict()},
            warnings=warnings or [],
        )
