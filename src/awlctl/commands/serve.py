"""serve — start the MCP server (requires awlctl[mcp] extra)."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from awlctl.commands._base import AwlCommand

if TYPE_CHECKING:
    from awlctl.commands._context import AppContext


@click.command(
    cls=AwlCommand,
    examples="""\
  # Start the MCP server (stdio transport, default)
  awlctl serve

  # Streamable HTTP on custom host/port
  awlctl serve --transport streamable-http --host 0.0.0.0 --port 9000""",
)
@click.option(
    "--transport",
    default=None,
    type=click.Choice(["stdio", "sse", "streamable-http"]),
    help="MCP transport protocol (default: [mcp] transport, else stdio).",
)
@click.option("--host", default=None, help="Bind address (HTTP transports only).")
@click.option("--port", default=None, type=int, help="Listen port (HTTP transports only).")
@click.pass_obj
def serve(app: AppContext, transport: str | None, host: str | None, port: int | None) -> None:
    """Expose the layout operations over MCP (requires awlctl[mcp] extra)."""
    from awlctl.mcp.server import create_server, mcp_available

    if not mcp_available:
        click.echo("MCP not installed. Install with: pip install awlctl[mcp]", err=True)
        raise SystemExit(1)

    server = create_server(settings=app.settings, display=app.display, host=host, port=port)
    server.run(transport=transport or app.settings.mcp.transport)
