"""MCP tool definitions — one tool per layout operation.

Each tool has a ``<name>_impl`` function testable without the mcp
package. ``register_tools()`` wraps them with FastMCP decorators.
"""

from __future__ import annotations

from typing import Any

from awlctl.services.layout import LayoutService
from awlctl.services.result import ServiceResult


def _to_mcp_response(result: ServiceResult) -> dict[str, Any]:
    """Convert a ServiceResult to an MCP-friendly dict."""
    response: dict[str, Any] = {
        "ok": result.ok,
        "op": result.op,
        "data": result.data,
    }
    if result.warnings:
        response["warnings"] = result.warnings
    if result.error is not None:
        response["error"] = {
            "code": result.error.code,
            "message": result.error.message,
        }
    return response


# ---------------------------------------------------------------------------
# Query
# ---------------------------------------------------------------------------


def get_work_area_impl(display: Any, settings: Any) -> dict[str, Any]:
    """Work area of the focused window's monitor (zeros if none)."""
    return _to_mcp_response(LayoutService(display, settings).get_work_area())


# ---------------------------------------------------------------------------
# Pixel geometry
# ---------------------------------------------------------------------------


def resize_in_work_area_impl(display: Any, settings: Any, width: int, height: int) -> dict[str, Any]:
    """Resize the focused window."""
    result = LayoutService(display, settings).resize_in_work_area(width, height)
    return _to_mcp_response(result)


def move_in_work_area_impl(display: Any, settings: Any, x: int, y: int) -> dict[str, Any]:
    """Move the focused window."""
    result = LayoutService(display, settings).move_in_work_area(x, y)
    return _to_mcp_response(result)


def move_resize_in_work_area_impl(
    display: Any,
    settings: Any,
    x: int,
    y: int,
    width: int,
    height: int,
) -> dict[str, Any]:
    """Move, then resize, the focused window."""
    result = LayoutService(display, settings).move_resize_in_work_area(x, y, width, height)
    return _to_mcp_response(result)


def move_to_monitor_impl(display: Any, settings: Any, monitor: int) -> dict[str, Any]:
    """Send the focused window to another monitor."""
    result = LayoutService(display, settings).move_to_monitor(monitor)
    return _to_mcp_response(result)


# ---------------------------------------------------------------------------
# Semantic geometry
# ---------------------------------------------------------------------------


def move_resize_semantic_impl(
    display: Any,
    settings: Any,
    x: str,
    y: str,
    width: str,
    height: str,
) -> dict[str, Any]:
    """Place the focused window using semantic tokens."""
    result = LayoutService(display, settings).move_resize_semantic(x, y, width, height)
    return _to_mcp_response(result)


# ---------------------------------------------------------------------------
# Registration — wraps _impl functions with FastMCP decorators
# ---------------------------------------------------------------------------


def register_tools(server: Any, display: Any, settings: Any) -> None:
    """Register all six layout tools on the FastMCP server."""

    @server.tool()  # type: ignore[untyped-decorator]
    def get_work_area() -> dict[str, Any]:
        """Get the work area (x, y, width, height) of the focused window's monitor."""
        return get_work_area_impl(display, settings)

    @server.tool()  # type: ignore[untyped-decorator]
    def resize_in_work_area(width: int, height: int) -> dict[str, Any]:
        """Resize the focused window in pixels (each side at least the minimum size)."""
        return resize_in_work_area_impl(display, settings, width, height)

    @server.tool()  # type: ignore[untyped-decorator]
    def move_in_work_area(x: int, y: int) -> dict[str, Any]:
        """Move the focused window to pixel offsets from the work area origin."""
        return move_in_work_area_impl(display, settings, x, y)

    @server.tool()  # type: ignore[untyped-decorator]
    def move_resize_in_work_area(x: int, y: int, width: int, height: int) -> dict[str, Any]:
        """Move the focused window, then resize it, in work-area pixels."""
        return move_resize_in_work_area_impl(display, settings, x, y, width, height)

    @server.tool()  # type: ignore[untyped-decorator]
    def move_to_monitor(monitor: int) -> dict[str, Any]:
        """Move the focused window to the monitor with index *monitor*."""
        return move_to_monitor_impl(display, settings, monitor)

    @server.tool()  # type: ignore[untyped-decorator]
    def move_resize_semantic(x: str, y: str, width: str, height: str) -> dict[str, Any]:
        """Place the focused window with tokens.

        Each argument is a number, "null" (unchanged), a keyword
        (left/top, center/middle, right/bottom for x/y) or "N%".
        """
        return move_resize_semantic_impl(display, settings, x, y, width, height)
