"""Tests for the workarea command."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from awlctl.cli import cli


@pytest.mark.usefixtures("fake_backend")
class TestWorkareaCommand:
    def test_rich_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["workarea"])
        assert result.exit_code == 0
        assert "monitor 0" in result.stdout
        assert "1920" in result.stdout

    def test_quiet_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "workarea"])
        assert result.stdout.strip() == "0 0 1920 1080"

    def test_json_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "workarea"])
        payload = json.loads(result.stdout)
        assert payload["op"] == "get_work_area"
        assert payload["data"]["height"] == 1080

    def test_verbose_shows_telemetry(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-v", "workarea"])
        assert result.exit_code == 0
        assert "get_work_area" in result.stdout
        assert "ms" in result.stdout


class TestWorkareaWithoutFocus:
    def test_zeros_and_warning(self, cli_runner: CliRunner, make_display) -> None:
        from unittest.mock import patch

        with patch(
            "awlctl.infrastructure.backends.open_display", return_value=make_display(None)
        ):
            result = cli_runner.invoke(cli, ["-q", "workarea"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "0 0 0 0"
        assert "WARNING" in result.stderr
