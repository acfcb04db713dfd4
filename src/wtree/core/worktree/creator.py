"""
Creating a worktree for a task.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol

from .layout import WorktreeLayout
from .manager import WorktreeManager
from .models import TaskWorktree

logger = logging.getLogger(__name__)


class CreateCallback(Protocol):
    """Protocol for progress events while creating a task worktree."""

    def on_update_base(self, base_branch: str) -> None:
        """Called before the base branch is checked out and pulled."""
        ...

    def on_add_worktree(self, path: Path, branch: str) -> None:
        """Called before the worktree is added."""
        ...


class _NoOpCallback:
    """Default no-op callback implementation."""

    def on_update_base(self, base_branch: str) -> None:
        pass

    def on_add_worktree(self, path: Path, branch: str) -> None:
        pass


def create_task_worktree(
    manager: WorktreeManager,
    layout: WorktreeLayout,
    task_name: str,
    base_branch: str = "main",
    callback: CreateCallback | None = None,
) -> TaskWorktree:
    """
    Create a worktree and branch for a task.

    Steps run in order and the first failure aborts; nothing is rolled back
    (a freshly created worktrees directory stays in place).

    1. Create the worktrees directory if missing.
    2. Check out `base_branch` and pull it.
    3. Add a worktree at `layout.path_for(task_name)` on a new
       `layout.branch_for(task_name)` branch started from `base_branch`.

    Args:
        manager: Git interface for the repository
        layout: Path and branch naming rules
        task_name: Task name (directory name and branch suffix)
        base_branch: Branch to fork from
        callback: Optional progress callback

    Returns:
        The created TaskWorktree

    Raises:
        WorktreeError: If checkout, pull or worktree add fails
        OSError: If the worktrees directory cannot be created
    """
    events = callback or _NoOpCallback()

    worktree_path = layout.path_for(task_name)
    branch = layout.branch_for(task_name)

    if not layout.worktrees_dir.exists():
        logger.debug("Creating worktrees directory %s", layout.worktrees_dir)
        layout.worktrees_dir.mkdir(parents=True, exist_ok=True)

    events.on_update_base(base_branch)
    manager.checkout(base_branch)
    manager.pull()

    events.on_add_worktree(worktree_path, branch)
    manager.add(worktree_path, branch, base_branch)

    logger.debug("Created worktree %s on %s", worktree_path, branch)
    return TaskWorktree(
        task_name=task_name,
        path=worktree_path,
        branch=branch,
        base_branch=base_branch,
    )
