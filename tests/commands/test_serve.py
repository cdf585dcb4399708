"""Tests for the serve command."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest
from click.testing import CliRunner

from awlctl.cli import cli


class TestServeCommand:
    def test_serve_registered(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--help"])
        assert "serve" in result.output

    def test_serve_help_shows_transports(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["serve", "--help"])
        assert "stdio" in result.output
        assert "sse" in result.output
        assert "streamable-http" in result.output

    def test_serve_without_mcp(self, cli_runner: CliRunner) -> None:
        with patch("awlctl.mcp.server.mcp_available", False):
            result = cli_runner.invoke(cli, ["serve"])
        assert result.exit_code == 1
        assert "pip install awlctl[mcp]" in result.stderr

    @pytest.mark.usefixtures("fake_backend")
    def test_serve_invokes_create_server_with_transport_options(
        self, cli_runner: CliRunner
    ) -> None:
        server = MagicMock()

        with (
            patch("awlctl.mcp.server.mcp_available", True),
            patch("awlctl.mcp.server.create_server", return_value=server) as create_server,
        ):
            result = cli_runner.invoke(
                cli,
                ["serve", "--transport", "sse", "--host", "0.0.0.0", "--port", "9000"],
            )

        assert result.exit_code == 0
        create_server.assert_called_once()
        _, kwargs = create_server.call_args
        assert kwargs["host"] == "0.0.0.0"
        assert kwargs["port"] == 9000
        server.run.assert_called_once_with(transport="sse")

    @pytest.mark.usefixtures("fake_backend")
    def test_transport_defaults_to_config(self, cli_runner: CliRunner, tmp_path) -> None:
        (tmp_path / "awlctl.toml").write_text('[mcp]\ntransport = "streamable-http"\n')
        server = MagicMock()

        with (
            patch("awlctl.mcp.server.mcp_available", True),
            patch("awlctl.mcp.server.create_server", return_value=server),
        ):
            result = cli_runner.invoke(cli, ["serve"])

        assert result.exit_code == 0
        server.run.assert_called_once_with(transport="streamable-http")
