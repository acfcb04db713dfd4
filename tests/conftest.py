"""
Pytest configuration and shared fixtures.

Provides fixtures for an isolated configuration environment, a repository
directory layout, mocked GitPython repos and sample git output.
"""

import os
from unittest.mock import MagicMock, patch

import pytest

from wtree.core.config import clear_cache
from wtree.core.config.loader import ENV_OVERRIDES

# ==============================================================================
# Environment Fixtures
# ==============================================================================


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """
    Keep user config, .env files and WTREE_* variables out of every test.

    Points XDG_CONFIG_HOME at an empty temporary directory, clears the
    config cache, and restores os.environ afterwards since .env loading
    writes to it directly.
    """
    saved_environ = os.environ.copy()
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg-config"))
    for env_name in ENV_OVERRIDES:
        monkeypatch.delenv(env_name, raising=False)
    clear_cache()
    yield
    clear_cache()
    os.environ.clear()
    os.environ.update(saved_environ)


@pytest.fixture
def repo_dir(tmp_path, monkeypatch):
    """
    Provide a repository directory and make it the working directory.

    Worktrees derived from it land in tmp_path / "worktrees".
    """
    repo = tmp_path / "my-repo"
    repo.mkdir()
    monkeypatch.chdir(repo)
    return repo


# ==============================================================================
# Git Fixtures
# ==============================================================================


@pytest.fixture
def mock_repo(tmp_path):
    """Provide a mock git.Repo object."""
    repo = MagicMock()
    repo.working_dir = str(tmp_path / "my-repo")
    repo.git = MagicMock()
    return repo


@pytest.fixture
def worktree_manager(mock_repo, tmp_path):
    """Provide a WorktreeManager instance with a mocked repo."""
    from wtree.core.worktree import WorktreeManager

    with patch("wtree.core.worktree.manager.Repo") as mock_repo_class:
        mock_repo_class.return_value = mock_repo
        manager = WorktreeManager(tmp_path / "my-repo")
        return manager


@pytest.fixture
def porcelain_output():
    """Porcelain listing with the main workspace and three task worktrees."""
    return (
        "worktree /home/dev/my-repo\n"
        "HEAD 1111111111111111111111111111111111111111\n"
        "branch refs/heads/main\n"
        "\n"
        "worktree /home/dev/worktrees/backend-api\n"
        "HEAD 2222222222222222222222222222222222222222\n"
        "branch refs/heads/feature/backend-api\n"
        "\n"
        "worktree /home/dev/worktrees/frontend-ui\n"
        "HEAD 3333333333333333333333333333333333333333\n"
        "branch refs/heads/feature/frontend-ui\n"
        "locked\n"
        "\n"
        "worktree /home/dev/worktrees/docs\n"
        "HEAD 4444444444444444444444444444444444444444\n"
        "detached\n"
        "\n"
    )


@pytest.fixture
def list_output():
    """Human-readable `git worktree list` output matching porcelain_output."""
    return (
        "/home/dev/my-repo                  1111111 [main]\n"
        "/home/dev/worktrees/backend-api    2222222 [feature/backend-api]\n"
        "/home/dev/worktrees/frontend-ui    3333333 [feature/frontend-ui] locked\n"
        "/home/dev/worktrees/docs           4444444 (detached HEAD)"
    )

