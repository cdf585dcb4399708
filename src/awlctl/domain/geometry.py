"""Geometry value types shared by the planner, the apply step, and services.

All rectangles are plain pixel values as reported by the window manager.
They are recreated on every operation and never cached.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class WorkArea:
    """Usable rectangle of one monitor in the active workspace (panels excluded)."""

    x: int
    y: int
    width: int
    height: int

    @classmethod
    def empty(cls) -> WorkArea:
        return cls(x=0, y=0, width=0, height=0)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class FrameRect:
    """A window's outer geometry, decorations included."""

    x: int
    y: int
    width: int
    height: int

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class GeometryPlan:
    """Resolved, possibly partial target geometry.

    ``x``/``y`` are offsets from the work area origin; ``width``/``height``
    are absolute pixels. ``None`` leaves that component unchanged.
    """

    x: int | None = None
    y: int | None = None
    width: int | None = None
    height: int | None = None

    @property
    def moves(self) -> bool:
        return self.x is not None or self.y is not None

    @property
    def resizes(self) -> bool:
        return self.width is not None and self.height is not None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def clamp_extent(value: int, minimum: int) -> int:
    """Clamp a requested width or height to *minimum* pixels."""
    return max(minimum, int(value))
