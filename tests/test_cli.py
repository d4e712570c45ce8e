"""
Tests for the tracker command line
"""

import json

import pytest
from click.testing import CliRunner

from tracker.cli import cli
from tracker.config import DEFAULT_SEED_FILE

BUNDLED_SEED = str(DEFAULT_SEED_FILE)


@pytest.fixture
def runner():
    return CliRunner()


class TestCli:
    """Tests for CLI commands."""

    def test_version(self, runner):
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output

    def test_dashboard_json(self, runner):
        result = runner.invoke(cli, ["dashboard", "P1", "--seed", BUNDLED_SEED, "--json"])

        assert result.exit_code == 0
        assert json.loads(result.output) == {"low": 1, "medium": 0, "high": 0, "critical": 1}

    def test_dashboard_table(self, runner):
        result = runner.invoke(cli, ["dashboard", "P1", "--seed", BUNDLED_SEED])

        assert result.exit_code == 0
        assert "Alpha" in result.output
        assert "CRITICAL" in result.output

    def test_report_json(self, runner):
        result = runner.invoke(cli, ["report", "P1", "--seed", BUNDLED_SEED, "--json"])

        assert result.exit_code == 0
        rows = json.loads(result.output)
        assert [r["issue_id"] for r in rows] == ["I1", "I2"]
        assert rows[0]["status"] == "in_progress"

    def test_issues_json(self, runner):
        result = runner.invoke(cli, ["issues", "--seed", BUNDLED_SEED, "--json"])

        assert result.exit_code == 0
        labels = {d["issue_id"]: d["label"] for d in json.loads(result.output)}
        assert labels == {"I1": "BUG", "I2": "TASK"}

    def test_default_seed_file(self, runner):
        """Without --seed the bundled sample data is used."""
        result = runner.invoke(cli, ["issues", "--json"])

        assert result.exit_code == 0
        assert {d["issue_id"] for d in json.loads(result.output)} == {"I1", "I2"}

    def test_unknown_project(self, runner):
        result = runner.invoke(cli, ["report", "P9", "--seed", BUNDLED_SEED])

        assert result.exit_code == 1
        assert "not found" in result.output

    def test_missing_seed_file(self, runner, tmp_path):
        result = runner.invoke(cli, ["issues", "--seed", str(tmp_path / "missing.yaml")])

        assert result.exit_code == 1
        assert "Failed to load seed data" in result.output

    def test_demo(self, runner):
        result = runner.invoke(cli, ["--log-level", "error", "demo"])

        assert result.exit_code == 0
        assert "Manager approval" in result.output
        assert "NullPointer" in result.output
