"""
wtree - Git worktrees for parallel agent tasks

Command-line utilities that give each coding-agent task its own git worktree
and branch, list them, and clean them up afterwards.
"""

__version__ = "0.1.0"

from wtree.core.config.models import WtreeConfig
from wtree.core.worktree.models import TaskDescriptor, TaskWorktree, Worktree

__all__ = ["WtreeConfig", "TaskDescriptor", "TaskWorktree", "Worktree", "__version__"]
