"""Tests for the root baconctl CLI."""

from pathlib import Path

import pytest
from click.testing import CliRunner

from baconctl import __version__
from baconctl.cli import cli


def test_cli_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "baconctl" in result.output
    for name in ("center", "path", "rank", "degree", "separation", "unreachable", "play"):
        assert name in result.output


def test_cli_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_cli_no_args(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, [])
    assert result.exit_code == 0
    assert "Usage" in result.output


# --- Global flags ---


@pytest.mark.parametrize(
    "flags",
    [
        ["--json"],
        ["-q"],
        ["-v"],
        ["--log-json"],
        ["-c", "/tmp/nonexistent-baconctl.toml"],
        ["--data-dir", "somewhere"],
        ["--center", "Tom Hanks"],
    ],
)
def test_global_flag_accepted(cli_runner: CliRunner, flags: list[str]) -> None:
    result = cli_runner.invoke(cli, [*flags, "--version"])
    assert result.exit_code == 0


def test_help_never_reads_dataset(cli_runner: CliRunner, tmp_path: Path) -> None:
    with cli_runner.isolated_filesystem(temp_dir=tmp_path):
        result = cli_runner.invoke(cli, ["path", "--help"])
    assert result.exit_code == 0
    assert "NAME" in result.output


def test_invalid_toml_is_reported(cli_runner: CliRunner, tmp_path: Path) -> None:
    bad = tmp_path / "bad.toml"
    bad.write_text("[game\n")
    result = cli_runner.invoke(cli, ["-c", str(bad), "center"])
    assert result.exit_code == 1
    assert "Invalid TOML" in result.output
