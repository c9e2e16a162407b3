from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

import cli.doctor as doctor_mod
import cli.main as cli_main
from conftest import StubHealthChecker
from core import __version__
from core.domain.errors import HealthCheckError
from core.services import HELP_TEXT


runner = CliRunner()


class _FakeChecker(StubHealthChecker):
    instances: list["_FakeChecker"] = []
    body = "healthy"
    error: Exception | None = None

    def __init__(self, settings=None, **kwargs) -> None:
        super().__init__(body=type(self).body, error=type(self).error)
        self.settings = settings
        _FakeChecker.instances.append(self)


@pytest.fixture
def fake_checker(monkeypatch):
    _FakeChecker.instances.clear()
    _FakeChecker.body = "healthy"
    _FakeChecker.error = None
    monkeypatch.setattr("adapters.http_client.HttpHealthChecker", _FakeChecker)
    monkeypatch.setattr(doctor_mod, "HttpHealthChecker", _FakeChecker)
    return _FakeChecker


def test_read_prints_file(tmp_path: Path) -> None:
    target = tmp_path / "hello.txt"
    target.write_text("hello\nworld", encoding="utf-8")

    result = runner.invoke(cli_main.app, ["read", str(target)])

    assert result.exit_code == 0
    assert result.stdout == "hello\nworld\n"


@pytest.mark.parametrize("verb", ["READ", "Read", "read"])
def test_command_names_ignore_case(tmp_path: Path, verb: str) -> None:
    target = tmp_path / "x.txt"
    target.write_text("content", encoding="utf-8")

    result = runner.invoke(cli_main.app, [verb, str(target)])

    assert result.exit_code == 0
    assert result.stdout == "content\n"


def test_dir_prints_one_entry_per_line(tmp_path: Path) -> None:
    (tmp_path / "a.txt").touch()
    (tmp_path / "b.txt").touch()

    result = runner.invoke(cli_main.app, ["dir", str(tmp_path)])

    assert result.exit_code == 0
    assert sorted(result.stdout.splitlines()) == ["a.txt", "b.txt"]


def test_read_without_path_reports_missing_argument() -> None:
    result = runner.invoke(cli_main.app, ["read"])
    assert result.exit_code == 1
    assert "Error: missing file path" in result.output


def test_dir_without_path_reports_missing_argument() -> None:
    result = runner.invoke(cli_main.app, ["dir"])
    assert result.exit_code == 1
    assert "Error: missing directory path" in result.output


def test_read_missing_file_exits_non_zero(tmp_path: Path) -> None:
    result = runner.invoke(cli_main.app, ["read", str(tmp_path / "missing.txt")])
    assert result.exit_code == 1
    assert "Error:" in result.output
    assert "missing.txt" in result.output
    assert result.exception is None or isinstance(result.exception, SystemExit)


def test_read_invalid_utf8_reports_error(tmp_path: Path) -> None:
    target = tmp_path / "binary.bin"
    target.write_bytes(b"\xff\xfe\x00bad")

    result = runner.invoke(cli_main.app, ["read", str(target)])

    assert result.exit_code == 1
    assert "Error:" in result.output
    assert "invalid start byte" in result.output
    assert isinstance(result.exception, SystemExit)


def test_read_prints_crlf_file_unchanged(tmp_path: Path) -> None:
    target = tmp_path / "crlf.txt"
    target.write_bytes(b"a\r\nb")

    result = runner.invoke(cli_main.app, ["read", str(target)])

    assert result.exit_code == 0
    assert result.stdout_bytes == b"a\r\nb\n"


def test_unknown_command_is_a_usage_error() -> None:
    result = runner.invoke(cli_main.app, ["frobnicate"])
    assert result.exit_code == 2
    assert "frobnicate" in result.output


def test_help_and_version_commands() -> None:
    result = runner.invoke(cli_main.app, ["help"])
    assert result.exit_code == 0
    assert result.stdout == HELP_TEXT + "\n"

    result = runner.invoke(cli_main.app, ["VERSION"])
    assert result.exit_code == 0
    assert result.stdout.strip() == f"learn-cli {__version__}"


def test_version_flag() -> None:
    result = runner.invoke(cli_main.app, ["--version"])
    assert result.exit_code == 0
    assert result.stdout.strip() == f"learn-cli {__version__}"


def test_health_prints_body(fake_checker) -> None:
    result = runner.invoke(cli_main.app, ["health"])

    assert result.exit_code == 0
    assert result.stdout == "healthy\n"
    assert len(fake_checker.instances) == 1
    assert fake_checker.instances[0].calls == 1


def test_health_passes_configured_settings(fake_checker, monkeypatch) -> None:
    monkeypatch.setenv("LEARN_CLI_HEALTH_URL", "http://localhost:1/health")

    result = runner.invoke(cli_main.app, ["health"])

    assert result.exit_code == 0
    assert fake_checker.instances[0].settings.health_url == "http://localhost:1/health"


def test_health_failure_exits_non_zero(fake_checker) -> None:
    fake_checker.error = HealthCheckError("All connection attempts failed")

    result = runner.invoke(cli_main.app, ["health"])

    assert result.exit_code == 1
    assert "Error: All connection attempts failed" in result.output


def test_invalid_configuration_exits_non_zero(monkeypatch) -> None:
    monkeypatch.setenv("LEARN_CLI_HTTP_TIMEOUT_SECONDS", "-1")

    result = runner.invoke(cli_main.app, ["help"])

    assert result.exit_code == 1
    assert "Invalid configuration" in result.output


def test_verbose_flag_is_accepted(tmp_path: Path) -> None:
    result = runner.invoke(cli_main.app, ["-v", "dir", str(tmp_path)])
    assert result.exit_code == 0


def test_doctor_reports_settings(fake_checker) -> None:
    result = runner.invoke(cli_main.app, ["doctor", "run"])

    assert result.exit_code == 0
    assert "Health URL" in result.output
    assert "healthy" in result.output


def test_doctor_fails_when_endpoint_is_down(fake_checker) -> None:
    fake_checker.error = HealthCheckError("connection refused")

    result = runner.invoke(cli_main.app, ["doctor", "run"])

    assert result.exit_code == 1
    assert "FAIL" in result.output
