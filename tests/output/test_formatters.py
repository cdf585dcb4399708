"""Tests for the format_result dispatcher and OutputSettings."""

import json

from awlctl.output.formatters import OutputSettings, format_result
from awlctl.services.result import ServiceError, ServiceResult


def _ok(op: str = "test", **data: object) -> ServiceResult:
    return ServiceResult(ok=True, op=op, data=dict(data))


def _err(op: str = "test", msg: str = "fail") -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code="ERR", message=msg),
    )


class TestOutputSettings:
    def test_defaults(self) -> None:
        s = OutputSettings()
        assert s.json_output is False
        assert s.quiet is False
        assert s.verbose is False


class TestFormatResult:
    def test_json_mode_returns_valid_json(self) -> None:
        settings = OutputSettings(json_output=True)
        output = format_result(_ok("get_work_area", width=1920), settings=settings)
        data = json.loads(output)
        assert data["ok"] is True
        assert data["data"]["width"] == 1920

    def test_json_wins_over_quiet(self) -> None:
        settings = OutputSettings(json_output=True, quiet=True)
        assert json.loads(format_result(_err(), settings=settings))["ok"] is False

    def test_quiet_mode(self) -> None:
        assert format_result(_ok("x"), settings=OutputSettings(quiet=True)) == "OK: x"

    def test_default_is_rich(self) -> None:
        output = format_result(_err(msg="boom"))
        assert "ERROR" in output
        assert "boom" in output
