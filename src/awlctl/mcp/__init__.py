"""MCP adapter — exposes the layout operations as remote-callable tools."""
