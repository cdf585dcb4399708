"""Token normalization for string-or-number geometry arguments.

A raw argument may arrive as a number, a numeric string, the literal
``"null"``, a positional keyword (``"center"``) or a percentage
(``"50%"``). :func:`normalize_token` folds all of these into a closed
union so the resolvers never inspect raw types again.

Normalization never fails. Unknown keywords are passed through and
rejected later by whichever resolver consumes them.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass

NULL_LITERAL = "null"

# Plain decimal literal: no digit separators, hex or "inf"/"nan" spellings.
_DECIMAL = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


@dataclass(frozen=True)
class NullToken:
    """The argument was absent: leave that component unchanged."""


@dataclass(frozen=True)
class NumberToken:
    """Absolute pixel value."""

    value: float


@dataclass(frozen=True)
class KeywordToken:
    """Positional keyword or percentage string, resolved downstream."""

    text: str


Token = NullToken | NumberToken | KeywordToken


def parse_number(text: str) -> float | None:
    """Parse a plain numeric string, or return None.

    Only plain decimal literals count. Digit separators (``"1_000"``) and
    non-finite spellings (``"nan"``, ``"inf"``) are not numbers here.

    Examples:
        >>> parse_number("120")
        120.0
        >>> parse_number(" -4 ")
        -4.0
        >>> parse_number("50%") is None
        True
    """
    stripped = text.strip()
    if _DECIMAL.fullmatch(stripped) is None:
        return None
    value = float(stripped)
    if not math.isfinite(value):
        return None
    return value


def normalize_token(raw: object) -> Token:
    """Classify one raw argument as a :data:`Token`."""
    if raw is None:
        return NullToken()
    if isinstance(raw, (int, float)) and not isinstance(raw, bool):
        try:
            return NumberToken(float(raw))
        except OverflowError:
            return NumberToken(math.copysign(math.inf, raw))

    text = str(raw)
    if text == NULL_LITERAL or not text.strip():
        return NullToken()

    number = parse_number(text)
    if number is not None:
        return NumberToken(number)
    return KeywordToken(text)
