"""Display backend registry.

Backends are registered by name as zero-argument factories and imported
only when opened, so ``awlctl --help`` never loads a display binding.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from awlctl.infrastructure.display import DisplayContext, DisplayUnavailable

logger = logging.getLogger(__name__)


def _open_wnck() -> DisplayContext:
    from awlctl.infrastructure.wnck import WnckDisplay

    return WnckDisplay()


BACKENDS: dict[str, Callable[[], DisplayContext]] = {
    "wnck": _open_wnck,
}


def open_display(name: str) -> DisplayContext:
    """Open the display backend registered under *name*.

    Raises:
        DisplayUnavailable: unknown backend, or the binding failed to load.
    """
    factory = BACKENDS.get(name)
    if factory is None:
        known = ", ".join(sorted(BACKENDS))
        msg = f"Unknown display backend: {name!r} (known: {known})"
        raise DisplayUnavailable(msg)
    logger.debug("Opening display backend %s", name)
    return factory()
