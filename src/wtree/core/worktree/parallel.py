"""
Batch setup of task worktrees for parallel agent work.

This module provides the BatchRunner class, which prepares one worktree per
task so that agents can later work on all of them at once. Setup itself is
sequential: each task's worktree is created by a separate `wtree create`
process, and the first failure stops the batch.
"""

from __future__ import annotations

import logging
import subprocess
import sys
from dataclasses import dataclass, field
from typing import Protocol

from .layout import WorktreeLayout
from .manager import WorktreeError
from .models import TaskDescriptor, TaskWorktree

logger = logging.getLogger(__name__)


class BatchTaskError(WorktreeError):
    """Raised when creating the worktree for one task of a batch fails."""

    def __init__(self, task_name: str, exit_code: int):
        super().__init__(f"Creating worktree for '{task_name}' failed with exit code {exit_code}")
        self.task_name = task_name
        self.exit_code = exit_code


class BatchRunnerCallback(Protocol):
    """Protocol for batch runner event callbacks."""

    def on_start(self, num_tasks: int) -> None:
        """Called before the first task is set up.

        Args:
            num_tasks: Total number of tasks in the batch
        """
        ...

    def on_task_start(self, task: TaskDescriptor, base_branch: str) -> None:
        """Called before a task's worktree is created.

        Args:
            task: Task being set up
            base_branch: Resolved base branch for the task
        """
        ...

    def on_debug(self, message: str) -> None:
        """Called for debug messages."""
        ...


class _NoOpCallback:
    """Default no-op callback implementation."""

    def on_start(self, num_tasks: int) -> None:
        pass

    def on_task_start(self, task: TaskDescriptor, base_branch: str) -> None:
        pass

    def on_debug(self, message: str) -> None:
        pass


@dataclass
class BatchRunResult:
    """
    Worktrees set up by a batch run.

    Attributes:
        worktrees: One entry per task, in task order
    """

    worktrees: list[TaskWorktree] = field(default_factory=list)


class BatchRunner:
    """
    Creates a worktree for every task in a list, one after another.

    Example:
        >>> runner = BatchRunner(layout, default_base_branch="main")
        >>> result = runner.run(load_tasks(Path("tasks.json")))
        >>> [wt.branch for wt in result.worktrees]
    """

    def __init__(
        self,
        layout: WorktreeLayout,
        default_base_branch: str = "main",
        debug: bool = False,
        callback: BatchRunnerCallback | None = None,
    ):
        """
        Initialize the batch runner.

        Args:
            layout: Path and branch naming rules (used for reporting)
            default_base_branch: Base branch for tasks that don't name one
            debug: Pass --debug to each create process
            callback: Event callback for progress output
        """
        self.layout = layout
        self.default_base_branch = default_base_branch
        self.debug = debug
        self._callback = callback or _NoOpCallback()

    def base_branch_for(self, task: TaskDescriptor) -> str:
        return task.base_branch or self.default_base_branch

    def build_create_command(self, task: TaskDescriptor) -> list[str]:
        """
        Build the `wtree create` command for a task.

        Args:
            task: Task to set up

        Returns:
            Command list for subprocess
        """
        # Use sys.executable to ensure we use the same Python
        cmd = [sys.executable, "-m", "wtree", "create"]

        if self.debug:
            cmd.append("--debug")

        # Task names starting with "-" are still positionals
        cmd += ["--", task.name, self.base_branch_for(task)]
        return cmd

    def run(self, tasks: list[TaskDescriptor]) -> BatchRunResult:
        """
        Create worktrees for all tasks in order.

        Args:
            tasks: Tasks to set up

        Returns:
            BatchRunResult describing the created worktrees

        Raises:
            BatchTaskError: On the first task whose create process fails;
                later tasks are not attempted
        """
        result = BatchRunResult()
        self._callback.on_start(len(tasks))

        for task in tasks:
            base_branch = self.base_branch_for(task)
            self._callback.on_task_start(task, base_branch)

            cmd = self.build_create_command(task)
            if self.debug:
                self._callback.on_debug(f"{task.name}: {' '.join(cmd)}")
            logger.debug("Running %s", cmd)

            completed = subprocess.run(cmd, cwd=self.layout.repo_dir)
            if completed.returncode != 0:
                raise BatchTaskError(task.name, completed.returncode)

            result.worktrees.append(
                TaskWorktree(
                    task_name=task.name,
                    path=self.layout.path_for(task.name),
                    branch=self.layout.branch_for(task.name),
                    base_branch=base_branch,
                )
            )

        return result


__all__ = [
    "BatchRunner",
    "BatchRunResult",
    "BatchRunnerCallback",
    "BatchTaskError",
]
