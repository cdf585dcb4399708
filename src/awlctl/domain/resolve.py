"""Semantic geometry resolution — tokens to pixels.

Sizes resolve against the work area extent alone. Positions resolve
against the work area extent *and* the window size the window is about
to have, so :func:`plan_geometry` always resolves width/height before
x/y.

Pure functions, no infrastructure dependencies.
"""

from __future__ import annotations

import math
import re

from awlctl.domain.geometry import FrameRect, GeometryPlan, WorkArea
from awlctl.domain.tokens import (
    KeywordToken,
    NullToken,
    NumberToken,
    Token,
    normalize_token,
    parse_number,
)

# Lenient integer prefix: "50%" -> 50, "12.5%" -> 12, "abc%" -> no match.
_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")

START_KEYWORDS = frozenset({"left", "top"})
CENTER_KEYWORDS = frozenset({"center", "middle"})
END_KEYWORDS = frozenset({"right", "bottom"})

# Window-manager geometry is signed 32-bit.
PIXEL_MIN = -(2**31)
PIXEL_MAX = 2**31 - 1


class GeometryError(ValueError):
    """A geometry token could not be resolved."""

    code = "INVALID_GEOMETRY"

    def __init__(self, value: object, message: str) -> None:
        super().__init__(message)
        self.value = value


class InvalidSize(GeometryError):
    """Unparsable or unsupported size token."""

    code = "INVALID_SIZE"


class InvalidPosition(GeometryError):
    """Unparsable or unsupported position token."""

    code = "INVALID_POSITION"


def parse_percent(text: str) -> int | None:
    """Return the leading integer of a ``"N%"`` string, or None.

    Examples:
        >>> parse_percent("50%")
        50
        >>> parse_percent("center") is None
        True
        >>> parse_percent("x%") is None
        True
    """
    if not text.endswith("%"):
        return None
    match = _LEADING_INT.match(text)
    if match is None:
        return None
    return int(match.group(1))


def _to_pixels(value: float, error: type[GeometryError], raw: object) -> int:
    """Floor *value* to whole pixels inside the signed 32-bit range."""
    if not math.isfinite(value):
        raise error(raw, f"Not a finite number: {raw!r}")
    pixels = math.floor(value)
    if not PIXEL_MIN <= pixels <= PIXEL_MAX:
        raise error(raw, f"Out of pixel range: {raw!r}")
    return pixels


def resolve_size(token: Token, total: int) -> int:
    """Resolve a size token against *total* pixels.

    Raises:
        InvalidSize: for keywords (sizes have no positional vocabulary),
            malformed percentages, null tokens, and values outside the
            pixel range.
    """
    if isinstance(token, NumberToken):
        return _to_pixels(token.value, InvalidSize, token.value)
    if isinstance(token, KeywordToken):
        percent = parse_percent(token.text)
        if percent is not None:
            return _to_pixels(total * percent // 100, InvalidSize, token.text)
        number = parse_number(token.text)
        if number is not None:
            return _to_pixels(number, InvalidSize, token.text)
        raise InvalidSize(token.text, f"Unknown size value: {token.text!r}")
    raise InvalidSize(None, "Size token is null; nothing to resolve")


def resolve_position(token: Token, total: int, window_size: int) -> int:
    """Resolve a position token to an offset from the work area origin.

    *window_size* is the window's final extent along the same axis, which
    ``center``/``right``/percentages are computed against.

    Raises:
        InvalidPosition: for unknown keywords, null tokens, and values
            outside the pixel range.
    """
    if isinstance(token, NumberToken):
        return _to_pixels(token.value, InvalidPosition, token.value)
    if isinstance(token, KeywordToken):
        text = token.text
        free = total - window_size
        if text in START_KEYWORDS:
            return 0
        if text in CENTER_KEYWORDS:
            return free // 2
        if text in END_KEYWORDS:
            return max(0, free)
        percent = parse_percent(text)
        if percent is not None:
            return _to_pixels(free * percent // 100, InvalidPosition, text)
        number = parse_number(text)
        if number is not None:
            return _to_pixels(number, InvalidPosition, text)
        raise InvalidPosition(text, f"Unknown position keyword: {text!r}")
    raise InvalidPosition(None, "Position token is null; nothing to resolve")


def plan_geometry(
    x: object,
    y: object,
    width: object,
    height: object,
    work_area: WorkArea,
    frame: FrameRect,
) -> GeometryPlan:
    """Resolve four raw arguments into a :class:`GeometryPlan`.

    Order is fixed: normalize, width, height, x, y. When no new size is
    requested on an axis, position keywords fall back to the current
    *frame* extent. Sizes are not clamped here.

    Any :class:`GeometryError` aborts the whole plan.
    """
    tx, ty, tw, th = (normalize_token(raw) for raw in (x, y, width, height))

    plan_w = None if isinstance(tw, NullToken) else resolve_size(tw, work_area.width)
    plan_h = None if isinstance(th, NullToken) else resolve_size(th, work_area.height)

    size_w = plan_w if plan_w is not None else frame.width
    size_h = plan_h if plan_h is not None else frame.height

    plan_x = None if isinstance(tx, NullToken) else resolve_position(tx, work_area.width, size_w)
    plan_y = None if isinstance(ty, NullToken) else resolve_position(ty, work_area.height, size_h)

    return GeometryPlan(x=plan_x, y=plan_y, width=plan_w, height=plan_h)
