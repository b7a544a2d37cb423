"""Tests for ``acctctl create``."""

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from acctctl.cli import cli


@pytest.mark.usefixtures("_isolated_cwd")
class TestCreateAccount:
    def test_success(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["create", "account", "Jastine ", "--password", "S3cur3Pa$$"]
        )
        assert result.exit_code == 0, result.output
        assert "Username: jastine | Password: **********" in result.stdout
        assert "S3cur3Pa$$" not in result.output

    def test_weak_password_exits_1(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["create", "account", "mochi", "--password", "weak"])
        assert result.exit_code == 1
        assert "ERROR" in result.stderr
        assert "Weak password for 'mochi'" in result.stderr
        assert result.stdout == ""

    def test_prompts_for_password(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["create", "account", "Nicole"], input="J@ne1234\n")
        assert result.exit_code == 0, result.output
        assert "nicole" in result.stdout

    def test_json_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["--json", "create", "account", "JastineNicole", "--password", "V3ryS3cure!"]
        )
        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        assert data["ok"] is True
        assert data["op"] == "create_account"
        assert data["data"]["username"] == "jastinenicole"
        assert data["data"]["password"] == "*" * len("V3ryS3cure!")
        assert "account" not in data

    def test_quiet_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["-q", "create", "account", "Mary Jane", "--password", "S3cur3Pa$$"]
        )
        assert result.exit_code == 0
        assert result.stdout.strip() == "mary-jane"

    def test_mask_char_from_config(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "acctctl.toml").write_text('[display]\nmask_char = "#"\n')
        result = cli_runner.invoke(cli, ["create", "account", "nicole", "--password", "J@ne1234"])
        assert result.exit_code == 0, result.output
        assert "########" in result.stdout

    def test_examples(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["create", "--examples"])
        assert result.exit_code == 0
        assert "acctctl create account" in result.output

    def test_markup_like_username_with_verbose_error(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["-v", "create", "account", "[/x]", "--password", "weak"]
        )
        assert result.exit_code == 1
        assert "raw_username: [/x]" in result.stderr
        assert "Weak password for '[/x]'" in result.stderr


@pytest.mark.usefixtures("_isolated_cwd")
class TestCreateBatch:
    def _write(self, tmp_path: Path, payload: object) -> str:
        path = tmp_path / "accounts.json"
        path.write_text(json.dumps(payload))
        return str(path)

    def test_collisions_resolve_across_batch(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        path = self._write(
            tmp_path,
            [
                {"username": "Jastine ", "password": "S3cur3Pa$$"},
                {"username": "jastine", "password": "An0therPa$$"},
            ],
        )
        result = cli_runner.invoke(cli, ["--json", "create", "batch", path])
        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        assert [c["username"] for c in data["data"]["created"]] == ["jastine", "jastine1"]

    def test_partial_failure_exits_1(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        path = self._write(
            tmp_path,
            [
                {"username": "nicole", "password": "J@ne1234"},
                {"username": "mochi", "password": "weak"},
            ],
        )
        result = cli_runner.invoke(cli, ["create", "batch", path])
        assert result.exit_code == 1
        assert "1 of 2 items failed" in result.stderr

    def test_not_a_list(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        path = self._write(tmp_path, {"username": "nicole"})
        result = cli_runner.invoke(cli, ["create", "batch", path])
        assert result.exit_code == 1
        assert "JSON array" in result.stderr

    def test_invalid_json(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        path = tmp_path / "broken.json"
        path.write_text("[{")
        result = cli_runner.invoke(cli, ["--json", "create", "batch", str(path)])
        assert result.exit_code == 1
        data = json.loads(result.stderr)
        assert data["error"]["code"] == "INVALID_BATCH"

    def test_missing_file(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        result = cli_runner.invoke(cli, ["create", "batch", str(tmp_path / "nope.json")])
        assert result.exit_code == 2

    def test_invalid_utf8(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        path = tmp_path / "latin1.json"
        path.write_bytes(b'[{"username": "\xff", "password": "S3cur3Pa$$"}]')
        result = cli_runner.invoke(cli, ["--json", "create", "batch", str(path)])
        assert result.exit_code == 1
        data = json.loads(result.stderr)
        assert data["error"]["code"] == "INVALID_BATCH"
        assert "Cannot read" in data["error"]["message"]

    def test_markup_like_username(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        path = self._write(tmp_path, [{"username": "[/x]", "password": "S3cur3Pa$$"}])
        result = cli_runner.invoke(cli, ["create", "batch", path])
        assert result.exit_code == 0, result.output
        assert "[/x]" in result.stdout

    def test_partial_failure_lists_created(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        path = self._write(
            tmp_path,
            [
                {"username": "jastine", "password": "S3cur3Pa$$"},
                {"username": "jastine", "password": "An0therPa$$"},
                {"username": "mochi", "password": "weak"},
            ],
        )
        result = cli_runner.invoke(cli, ["create", "batch", path])
        assert result.exit_code == 1
        assert "1 of 3 items failed" in result.stderr
        assert "jastine1" in result.stderr

    def test_partial_failure_quiet_lists_created(
        self, cli_runner: CliRunner, tmp_path: Path
    ) -> None:
        path = self._write(
            tmp_path,
            [
                {"username": "jastine", "password": "S3cur3Pa$$"},
                {"username": "jastine", "password": "An0therPa$$"},
                {"username": "mochi", "password": "weak"},
            ],
        )
        result = cli_runner.invoke(cli, ["-q", "create", "batch", path])
        assert result.exit_code == 1
        lines = result.stderr.splitlines()
        start = lines.index("ERROR: create_batch — 1 of 3 items failed")
        assert lines[start + 1 : start + 3] == ["jastine", "jastine1"]
