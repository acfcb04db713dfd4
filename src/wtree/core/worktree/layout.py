"""
Where task worktrees live and what their branches are called.
"""

from dataclasses import dataclass
from pathlib import Path

from wtree.core.config.models import WorktreeConfig


@dataclass(frozen=True)
class WorktreeLayout:
    """
    Derives worktree paths and branch names from the repository directory.

    Worktrees are siblings of the repository, not nested inside it:

        <repo parent>/
            my-repo/                  # repo_dir
            worktrees/
                login-feature/        # branch feature/login-feature

    Attributes:
        repo_dir: Directory the command runs from (normally the repo root)
        dir_name: Name of the shared worktrees directory
        branch_prefix: Prefix for task branch names
    """

    repo_dir: Path
    dir_name: str = "worktrees"
    branch_prefix: str = "feature/"

    @classmethod
    def from_config(cls, repo_dir: Path, config: WorktreeConfig) -> "WorktreeLayout":
        return cls(
            repo_dir=repo_dir,
            dir_name=config.dir_name,
            branch_prefix=config.branch_prefix,
        )

    @property
    def worktrees_dir(self) -> Path:
        return self.repo_dir.parent / self.dir_name

    @property
    def cleanup_segment(self) -> str:
        """Path segment identifying worktrees managed under `dir_name`."""
        return f"/{self.dir_name}/"

    def path_for(self, task_name: str) -> Path:
        return self.worktrees_dir / task_name

    def branch_for(self, task_name: str) -> str:
        return f"{self.branch_prefix}{task_name}"
