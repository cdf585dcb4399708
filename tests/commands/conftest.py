"""Fixtures for CLI command tests."""

from __future__ import annotations

from collections.abc import Iterator
from unittest.mock import patch

import pytest


@pytest.fixture
def fake_backend(display) -> Iterator:
    """Route every backend lookup to the in-memory display."""
    with patch("awlctl.infrastructure.backends.open_display", return_value=display):
        yield display
