"""MCP resource definitions.

URI: awlctl://work-area — the focused window's work area as JSON.
Implementation is testable without the mcp package.
"""

from __future__ import annotations

from typing import Any

from awlctl.services.layout import LayoutService


def work_area_impl(display: Any, settings: Any) -> dict[str, Any]:
    """Work area of the focused window's monitor; zeros when nothing is focused."""
    result = LayoutService(display, settings).get_work_area()
    return dict(result.data)


def register_resources(server: Any, display: Any, settings: Any) -> None:
    """Register layout resources on the FastMCP server."""

    @server.resource("awlctl://work-area")  # type: ignore[untyped-decorator]
    def work_area() -> dict[str, Any]:
        """Current work area of the focused window's monitor."""
        return work_area_impl(display, settings)
