"""
Git worktree management for parallel agent tasks.

Each task gets its own worktree next to the repository and its own branch,
so several agents can work at once without touching each other's files.

Example:
    >>> from wtree.core.worktree import WorktreeLayout, WorktreeManager, create_task_worktree
    >>> layout = WorktreeLayout(Path.cwd())
    >>> created = create_task_worktree(WorktreeManager(), layout, "login-feature")
    >>> print(created.path, created.branch)
"""

from .cleanup import find_task_worktrees, remove_worktrees
from .creator import create_task_worktree
from .layout import WorktreeLayout
from .listing import count_additional_worktrees, parse_porcelain, select_for_cleanup
from .manager import WorktreeError, WorktreeManager
from .models import CleanupResult, TaskDescriptor, TaskWorktree, Worktree
from .parallel import BatchRunner, BatchRunResult, BatchTaskError
from .tasks import TaskFileError, load_tasks, parse_tasks

__all__ = [
    "WorktreeManager",
    "WorktreeLayout",
    "Worktree",
    "TaskWorktree",
    "TaskDescriptor",
    "CleanupResult",
    "WorktreeError",
    "TaskFileError",
    "BatchTaskError",
    "BatchRunner",
    "BatchRunResult",
    "create_task_worktree",
    "find_task_worktrees",
    "remove_worktrees",
    "count_additional_worktrees",
    "parse_porcelain",
    "select_for_cleanup",
    "load_tasks",
    "parse_tasks",
]
