"""FastMCP server setup.

Optional extra — guarded behind try/except ImportError.
Transport: stdio default, SSE and streamable HTTP optional.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from awlctl.config.settings import AwlSettings
    from awlctl.infrastructure.display import DisplayContext

logger = logging.getLogger(__name__)

mcp_available = False
_FastMCP: Any = None

try:
    from mcp.server.fastmcp import FastMCP as _FastMCP  # type: ignore[no-redef,import-not-found]

    mcp_available = True
except ImportError:
    pass

__all__ = ["INTERFACE_NAME", "create_server", "mcp_available"]

INTERFACE_NAME = "org.jidaikobo.shibata.ActiveWindowLayout"

_INSTRUCTIONS = f"""\
Active window layout ({INTERFACE_NAME}).
Moves and resizes the currently focused desktop window inside its
monitor's work area. Positions are offsets from the work area origin.
move_resize_semantic accepts numbers, "null" (leave unchanged),
"left"/"top", "center"/"middle", "right"/"bottom", and "N%"."""


def create_server(
    *,
    settings: AwlSettings | None = None,
    display: DisplayContext | None = None,
    host: str | None = None,
    port: int | None = None,
) -> Any:
    """Create and configure the MCP server.

    Opens the configured display backend unless *display* is given,
    then registers all tools and resources. Returns the FastMCP instance.

    *host* and *port* default to the ``[mcp]`` settings and are ignored
    for the stdio transport.

    Raises RuntimeError if the mcp extra is not installed.
    """
    if not mcp_available or _FastMCP is None:
        msg = "MCP extra not installed. Install with: pip install awlctl[mcp]"
        raise RuntimeError(msg)

    from awlctl.config.settings import AwlSettings
    from awlctl.mcp.resources import register_resources
    from awlctl.mcp.tools import register_tools

    if settings is None:
        settings = AwlSettings.from_cli()
    if display is None:
        from awlctl.infrastructure.backends import open_display

        display = open_display(settings.display.backend)

    server = _FastMCP(
        "awlctl",
        instructions=_INSTRUCTIONS,
        host=host or settings.mcp.host,
        port=port or settings.mcp.port,
    )

    register_tools(server, display, settings)
    register_resources(server, display, settings)
    logger.debug("MCP server ready (backend=%s)", settings.display.backend)

    return server
