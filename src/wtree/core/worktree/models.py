"""
Data models for task worktrees.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


@dataclass
class Worktree:
    """
    Represents a git worktree as reported by `git worktree list --porcelain`.

    Attributes:
        path: Absolute path to the worktree directory
        branch: Branch ref (None for detached HEAD or bare entries)
        commit: Commit SHA
        is_bare: Whether this is the bare repository
        is_locked: Whether the worktree is locked
        is_detached: Whether HEAD is detached
    """

    path: Path
    branch: str | None
    commit: str
    is_bare: bool = False
    is_locked: bool = False
    is_detached: bool = False

    @property
    def branch_name(self) -> str | None:
        """Branch name without the refs/heads/ prefix."""
        if self.branch and self.branch.startswith("refs/heads/"):
            return self.branch[len("refs/heads/") :]
        return self.branch


@dataclass
class TaskWorktree:
    """A worktree created for a task."""

    task_name: str
    path: Path
    branch: str
    base_branch: str


@dataclass
class CleanupResult:
    """
    Outcome of removing task worktrees.

    Attributes:
        found: Worktree paths selected for removal
        removed: Paths that were removed
        failed: (path, error message) for each removal that failed
    """

    found: list[Path] = field(default_factory=list)
    removed: list[Path] = field(default_factory=list)
    failed: list[tuple[Path, str]] = field(default_factory=list)


class TaskDescriptor(BaseModel):
    """
    A unit of work read from a tasks file.

    Only `name` is required. `prompt` is carried for the agent that will work
    in the worktree and is never interpreted here.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: str = Field(..., min_length=1, description="Task name (branch suffix and directory)")
    prompt: Any = Field(default=None, description="Instructions for the agent, any JSON value")
    base_branch: str | None = Field(
        default=None,
        alias="baseBranch",
        description="Branch to fork from (defaults to the configured base branch)",
    )
