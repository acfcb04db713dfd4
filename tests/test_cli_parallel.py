"""
Tests for the parallel-execute command.

subprocess.run is mocked, so no create process is started.
"""

import json
from unittest.mock import MagicMock, patch

import pytest
from typer.testing import CliRunner

from wtree.cli import app as wtree_app
from wtree.cli import parallel

runner = CliRunner()


@pytest.fixture
def tasks_file(repo_dir):
    path = repo_dir / "tasks.json"
    path.write_text(
        json.dumps(
            [
                {"name": "backend-api", "prompt": "Create POST /api/auth/login endpoint"},
                {"name": "frontend-ui", "prompt": "Build login form", "baseBranch": "develop"},
                {"name": "docs", "prompt": "Document login"},
            ]
        )
    )
    return path


@pytest.fixture
def mock_run():
    with patch("wtree.core.worktree.parallel.subprocess.run") as run:
        run.return_value = MagicMock(returncode=0)
        yield run


class TestParallelExecute:
    def test_sets_up_all_tasks(self, tasks_file, mock_run):
        result = runner.invoke(parallel.app, [str(tasks_file)])

        assert result.exit_code == 0, result.output
        commands = [c.args[0][3:] for c in mock_run.call_args_list]
        assert commands == [
            ["create", "--", "backend-api", "main"],
            ["create", "--", "frontend-ui", "develop"],
            ["create", "--", "docs", "main"],
        ]
        assert "Setting up worktrees for 3 task(s)" in result.output
        assert "All worktrees created!" in result.output
        assert "Agents can now work in parallel in each worktree" in result.output
        assert "Merge branches back to main" in result.output
        assert "Run cleanup: cleanup-worktrees" in result.output

    def test_failure_stops_batch(self, tasks_file, mock_run):
        """The third task is never attempted when the second fails."""
        mock_run.side_effect = [MagicMock(returncode=0), MagicMock(returncode=1)]

        result = runner.invoke(parallel.app, [str(tasks_file)])

        assert result.exit_code == 1
        assert mock_run.call_count == 2
        assert "frontend-ui" in result.output
        assert "All worktrees created!" not in result.output

    def test_missing_argument(self, repo_dir, mock_run):
        result = runner.invoke(parallel.app, [])

        assert result.exit_code == 1
        assert "Usage: parallel-execute <tasks-json-file>" in result.output
        mock_run.assert_not_called()

    def test_invalid_json(self, repo_dir, mock_run):
        bad = repo_dir / "tasks.json"
        bad.write_text("[{not json")

        result = runner.invoke(parallel.app, [str(bad)])

        assert result.exit_code == 1
        assert "Invalid tasks file" in result.output
        assert "All worktrees created!" not in result.output
        mock_run.assert_not_called()

    def test_missing_file(self, repo_dir, mock_run):
        result = runner.invoke(parallel.app, [str(repo_dir / "missing.json")])

        assert result.exit_code == 1
        assert "Cannot read tasks file" in result.output
        mock_run.assert_not_called()

    def test_task_without_name(self, repo_dir, mock_run):
        bad = repo_dir / "tasks.json"
        bad.write_text(json.dumps([{"name": "ok"}, {"prompt": "missing name"}]))

        result = runner.invoke(parallel.app, [str(bad)])

        assert result.exit_code == 1
        mock_run.assert_not_called()

    def test_prompts_not_interpreted(self, repo_dir, mock_run):
        tasks = repo_dir / "tasks.json"
        tasks.write_text(
            json.dumps([{"name": "a", "prompt": None}, {"name": "b", "prompt": {"text": "do it"}}])
        )

        result = runner.invoke(parallel.app, [str(tasks)])

        assert result.exit_code == 0, result.output
        assert mock_run.call_count == 2

    def test_configured_default_base(self, tasks_file, mock_run, monkeypatch):
        monkeypatch.setenv("WTREE_BASE_BRANCH", "trunk")

        result = runner.invoke(parallel.app, [str(tasks_file)])

        assert result.exit_code == 0, result.output
        assert mock_run.call_args_list[0].args[0][-1] == "trunk"
        assert mock_run.call_args_list[1].args[0][-1] == "develop"
        assert "Merge branches back to trunk" in result.output

    def test_umbrella_command(self, tasks_file, mock_run):
        result = runner.invoke(wtree_app, ["parallel", str(tasks_file)])

        assert result.exit_code == 0, result.output
        assert mock_run.call_count == 3
