"""
Git worktree manager implementation.

This module provides the WorktreeManager class, a narrow interface over the
git commands wtree needs: listing, adding and removing worktrees, plus the
checkout and pull that refresh a base branch.
"""

import builtins
import logging
from pathlib import Path

from git import GitCommandError, InvalidGitRepositoryError, NoSuchPathError, Repo

from .listing import parse_porcelain
from .models import Worktree

logger = logging.getLogger(__name__)


class WorktreeError(Exception):
    """Base exception for worktree operations."""

    pass


class WorktreeManager:
    """
    Runs git worktree operations against one repository.

    Example:
        >>> manager = WorktreeManager()
        >>> manager.checkout("main")
        >>> manager.pull()
        >>> manager.add(Path("../worktrees/login"), "feature/login", "main")
        >>> [wt.path for wt in manager.list()]
    """

    def __init__(self, repo_path: Path | None = None):
        """
        Initialize the worktree manager.

        Args:
            repo_path: Path inside a git repository (defaults to current directory)

        Raises:
            WorktreeError: If not in a git repository
        """
        self.repo_path = repo_path or Path.cwd()

        try:
            self.repo = Repo(self.repo_path, search_parent_directories=True)
        except (InvalidGitRepositoryError, NoSuchPathError) as e:
            raise WorktreeError(f"Not a git repository: {self.repo_path}") from e

    def list_text(self) -> str:
        """
        Return the human-readable `git worktree list` output.

        Raises:
            WorktreeError: If listing worktrees fails
        """
        logger.debug("git worktree list")
        try:
            return str(self.repo.git.worktree("list"))
        except GitCommandError as e:
            raise WorktreeError(f"Failed to list worktrees: {e.stderr}") from e

    def list(self) -> builtins.list[Worktree]:
        """
        List all worktrees in the repository.

        Returns:
            List of Worktree objects, main workspace first

        Raises:
            WorktreeError: If listing worktrees fails
        """
        logger.debug("git worktree list --porcelain")
        try:
            output = self.repo.git.worktree("list", "--porcelain")
        except GitCommandError as e:
            raise WorktreeError(f"Failed to list worktrees: {e.stderr}") from e
        return parse_porcelain(str(output))

    def add(self, path: Path, branch: str, base_branch: str | None = None) -> None:
        """
        Create a worktree at `path` on a new branch.

        Args:
            path: Directory for the new worktree (must not exist yet)
            branch: Name of the branch to create
            base_branch: Commit-ish the branch starts from (defaults to HEAD)

        Raises:
            WorktreeError: If the branch or path already exists, or git fails
        """
        # Format: git worktree add -b <new-branch> <path> [<commit-ish>]
        args = ["add", "-b", branch, str(path)]
        if base_branch:
            args.append(base_branch)

        logger.debug("git worktree %s", " ".join(args))
        try:
            self.repo.git.worktree(*args)
        except GitCommandError as e:
            raise WorktreeError(f"Failed to create worktree: {e.stderr}") from e

    def remove(self, path: Path, force: bool = True) -> None:
        """
        Remove a worktree.

        Args:
            path: Path to the worktree directory
            force: Remove even if the worktree has uncommitted changes

        Raises:
            WorktreeError: If removal fails
        """
        args = ["remove", str(path)]
        if force:
            args.append("--force")

        logger.debug("git worktree %s", " ".join(args))
        try:
            self.repo.git.worktree(*args)
        except GitCommandError as e:
            raise WorktreeError(f"Failed to remove worktree {path}: {e.stderr}") from e

    def checkout(self, branch: str) -> None:
        """
        Switch the main workspace to `branch`.

        Raises:
            WorktreeError: If checkout fails (e.g. local changes would be overwritten)
        """
        logger.debug("git checkout %s", branch)
        try:
            self.repo.git.checkout(branch)
        except GitCommandError as e:
            raise WorktreeError(f"Failed to checkout {branch}: {e.stderr}") from e

    def pull(self) -> None:
        """
        Pull the current branch from its remote.

        Raises:
            WorktreeError: If pull fails
        """
        logger.debug("git pull")
        try:
            self.repo.git.pull()
        except GitCommandError as e:
            raise WorktreeError(f"Failed to pull: {e.stderr}") from e
