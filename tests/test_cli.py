"""Tests for the root acctctl CLI."""

import pytest
from click.testing import CliRunner

from acctctl import __version__
from acctctl.cli import cli


def test_cli_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "acctctl" in result.output


def test_cli_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


@pytest.mark.usefixtures("_isolated_cwd")
def test_cli_no_args(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, [])
    assert result.exit_code == 0
    assert "Usage" in result.output


@pytest.mark.parametrize(
    "flags",
    [["--json"], ["-q"], ["-v"], ["--log-json"], ["-c", "/tmp/does-not-exist.toml"]],
)
def test_global_flags_accepted(cli_runner: CliRunner, flags: list[str]) -> None:
    result = cli_runner.invoke(cli, [*flags, "--version"])
    assert result.exit_code == 0


@pytest.mark.parametrize("name", ["create", "check", "normalize", "suggest", "demo"])
def test_commands_registered(name: str) -> None:
    assert name in cli.commands


@pytest.mark.parametrize("sub", ["account", "batch"])
def test_create_subcommands(sub: str) -> None:
    assert sub in cli.commands["create"].commands  # type: ignore[attr-defined]
