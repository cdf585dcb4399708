"""Config file discovery.

Lookup order for awlctl.toml:
  1. ``AWLCTL_CONFIG`` env var (must point at an existing file)
  2. Walk up from the start directory, like git finding .git/
  3. ``$XDG_CONFIG_HOME/awlctl/awlctl.toml`` (``~/.config`` by default)
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "awlctl.toml"
CONFIG_ENV_VAR = "AWLCTL_CONFIG"


def user_config_path() -> Path:
    """Per-user config location under the XDG config home."""
    base = os.environ.get("XDG_CONFIG_HOME") or str(Path.home() / ".config")
    return Path(base) / "awlctl" / CONFIG_FILENAME


def find_config(start: Path | None = None) -> Path | None:
    """Locate awlctl.toml, or return None to run on code defaults."""
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate

    user = user_config_path()
    return user if user.is_file() else None
