"""
Bulk removal of task worktrees.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol

from .listing import select_for_cleanup
from .manager import WorktreeError, WorktreeManager
from .models import CleanupResult

logger = logging.getLogger(__name__)


class CleanupCallback(Protocol):
    """Protocol for per-worktree cleanup events."""

    def on_removed(self, path: Path) -> None:
        """Called after a worktree was removed."""
        ...

    def on_failed(self, path: Path, error: str) -> None:
        """Called when removing a worktree failed."""
        ...


class _NoOpCallback:
    """Default no-op callback implementation."""

    def on_removed(self, path: Path) -> None:
        pass

    def on_failed(self, path: Path, error: str) -> None:
        pass


def find_task_worktrees(manager: WorktreeManager, segment: str = "/worktrees/") -> list[Path]:
    """
    List the worktrees that live under the task worktrees directory.

    Raises:
        WorktreeError: If listing worktrees fails
    """
    return select_for_cleanup(manager.list(), segment)


def remove_worktrees(
    manager: WorktreeManager,
    paths: list[Path],
    callback: CleanupCallback | None = None,
) -> CleanupResult:
    """
    Force-remove each worktree, continuing past failures.

    Args:
        manager: Git interface for the repository
        paths: Worktree paths to remove
        callback: Optional per-item callback

    Returns:
        CleanupResult with found, removed and failed paths
    """
    events = callback or _NoOpCallback()
    result = CleanupResult(found=list(paths))

    for path in paths:
        try:
            manager.remove(path, force=True)
        except WorktreeError as e:
            logger.debug("Removal of %s failed: %s", path, e)
            result.failed.append((path, str(e)))
            events.on_failed(path, str(e))
            continue
        result.removed.append(path)
        events.on_removed(path)

    return result
