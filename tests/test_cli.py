"""Tests for valmaker CLI commands."""

from pathlib import Path

import pytest
from click.testing import CliRunner

from valmaker.cli.main import cli


PROFILES_DIR = Path(__file__).parent.parent / "profiles"
ACCOUNTS = str(PROFILES_DIR / "accounts.yaml")


@pytest.fixture
def runner():
    return CliRunner()


class TestCheck:
    def test_valid_values(self, runner):
        result = runner.invoke(cli, ["check", ACCOUNTS, "username", "john_doe", "jane.doe"])
        assert result.exit_code == 0
        assert "ok: john_doe" in result.output
        assert "ok: jane.doe" in result.output

    def test_invalid_value_exits_with_error(self, runner):
        result = runner.invoke(cli, ["check", ACCOUNTS, "username", "john_doe", "John"])
        assert result.exit_code == 1
        assert "ok: john_doe" in result.output
        assert "invalid: John: 'J' is NOT valid." in result.output
        assert "1 of 2 value(s) invalid" in result.output

    def test_unknown_validator(self, runner):
        result = runner.invoke(cli, ["check", ACCOUNTS, "nope", "abc"])
        assert result.exit_code == 1
        assert "Validator 'nope' is not defined" in result.output

    def test_requires_values(self, runner):
        result = runner.invoke(cli, ["check", ACCOUNTS, "username"])
        assert result.exit_code != 0


class TestProfileLint:
    def test_lint_directory(self, runner):
        result = runner.invoke(cli, ["profile", "lint", str(PROFILES_DIR)])
        assert result.exit_code == 0
        assert "accounts" in result.output
        assert "- username" in result.output
        assert "All profiles are valid" in result.output

    def test_lint_single_file(self, runner):
        result = runner.invoke(cli, ["profile", "lint", ACCOUNTS])
        assert result.exit_code == 0
        assert "accounts (4 matchers, 3 validators)" in result.output

    def test_lint_reports_errors(self, runner, tmp_path):
        bad = tmp_path / "bad.yaml"
        bad.write_text("profile: bad\nmatchers:\n  x: {pattern: '[a-z]+$', message: 'Lower case.'}\n")

        result = runner.invoke(cli, ["profile", "lint", str(bad)])
        assert result.exit_code == 1
        assert "Profile validation failed" in result.output
        assert "should NOT be ended with '$'" in result.output

    def test_lint_reports_malformed_preset(self, runner, tmp_path):
        bad = tmp_path / "bad.yaml"
        bad.write_text("profile: bad\nmatchers:\n  x: {preset: [alpha]}\n")

        result = runner.invoke(cli, ["profile", "lint", str(bad)])
        assert result.exit_code == 1
        assert "Profile validation failed" in result.output
        assert "'preset' must be a preset name" in result.output

    def test_check_reports_unreadable_profile(self, runner, tmp_path):
        bad = tmp_path / "latin.yaml"
        bad.write_bytes(b"profile: caf\xe9\n")

        result = runner.invoke(cli, ["check", str(bad), "word", "abc"])
        assert result.exit_code == 1
        assert "cannot read profile" in result.output

    def test_lint_empty_directory(self, runner, tmp_path):
        result = runner.invoke(cli, ["profile", "lint", str(tmp_path)])
        assert result.exit_code == 0
        assert "No profiles found" in result.output

    def test_verbose_flag(self, runner):
        result = runner.invoke(cli, ["-v", "profile", "lint", ACCOUNTS])
        assert result.exit_code == 0
