"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, awlctl.toml only contains
overrides. An empty file (or no file at all) is a valid configuration.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

# --- awlctl.toml sections ---


class LayoutConfig(BaseModel):
    """[layout] section."""

    model_config = {"frozen": True}

    min_size: int = Field(default=50, ge=1)


class DisplayConfig(BaseModel):
    """[display] section."""

    model_config = {"frozen": True}

    backend: str = "wnck"


class McpConfig(BaseModel):
    """[mcp] section."""

    model_config = {"frozen": True}

    transport: str = "stdio"
    host: str = "127.0.0.1"
    port: int = 8000
