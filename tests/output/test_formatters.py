"""Tests for the format_result dispatcher and OutputSettings."""

import json

from baconctl.output.formatters import OutputSettings, format_result
from baconctl.services.result import ServiceError, ServiceResult


def _ok(op: str = "test", **data: object) -> ServiceResult:
    return ServiceResult(ok=True, op=op, data=dict(data))


def _err(op: str = "test", msg: str = "fail") -> ServiceResult:
    return ServiceResult(ok=False, op=op, error=ServiceError(code="ERR", message=msg))


class TestOutputSettings:
    def test_defaults(self) -> None:
        s = OutputSettings()
        assert s.json_output is False
        assert s.quiet is False
        assert s.verbose is False


class TestFormatResultJSON:
    def test_json_mode_returns_valid_json(self) -> None:
        result = _ok("path", name="Tom Hanks", separation=1)
        output = format_result(result, settings=OutputSettings(json_output=True))
        data = json.loads(output)
        assert data["ok"] is True
        assert data["op"] == "path"
        assert data["data"]["separation"] == 1

    def test_json_mode_error(self) -> None:
        output = format_result(_err("path", "Bad"), settings=OutputSettings(json_output=True))
        data = json.loads(output)
        assert data["ok"] is False
        assert data["error"]["message"] == "Bad"

    def test_json_beats_quiet(self) -> None:
        settings = OutputSettings(json_output=True, quiet=True)
        assert json.loads(format_result(_ok(), settings=settings))["ok"] is True


class TestFormatResultQuiet:
    def test_quiet_generic_success(self) -> None:
        assert format_result(_ok("test"), settings=OutputSettings(quiet=True)) == "OK: test"

    def test_quiet_error(self) -> None:
        output = format_result(_err("path", "Bad input"), settings=OutputSettings(quiet=True))
        assert output.startswith("ERROR: path")
        assert "Bad input" in output

    def test_quiet_path_number(self) -> None:
        result = _ok("path", separation=2)
        assert format_result(result, settings=OutputSettings(quiet=True)) == "2"

    def test_quiet_path_infinity(self) -> None:
        result = _ok("path", separation=None)
        assert format_result(result, settings=OutputSettings(quiet=True)) == "infinity"

    def test_quiet_center(self) -> None:
        result = _ok("recenter", center="Tom Hanks")
        assert format_result(result, settings=OutputSettings(quiet=True)) == "Tom Hanks"

    def test_quiet_items(self) -> None:
        result = _ok("unreachable", items=[{"name": "Ann"}, {"name": "Bob"}])
        assert format_result(result, settings=OutputSettings(quiet=True)) == "Ann\nBob"


class TestFormatResultDefault:
    def test_default_is_rich(self) -> None:
        output = format_result(_ok("test", key="val"))
        assert "OK" in output
        assert "key:" in output
        assert "val" in output
        assert not output.startswith("{")
