"""
Parsing of `git worktree list` output.

Pure functions over git's text output, kept apart from the code that runs git.
"""

from pathlib import Path

from .models import Worktree


def parse_porcelain(output: str) -> list[Worktree]:
    """
    Parse `git worktree list --porcelain` output.

    Entries are separated by blank lines; each starts with a
    `worktree <path>` line followed by attribute lines.

    Args:
        output: Raw porcelain output

    Returns:
        List of Worktree objects in listing order
    """
    worktrees: list[Worktree] = []
    current: dict[str, str | bool] = {}

    for line in output.splitlines():
        # Attribute values are taken verbatim; paths may end in whitespace
        if not line.strip():
            if current:
                worktrees.append(_to_worktree(current))
                current = {}
            continue

        if line.startswith("worktree "):
            # A new entry without a separating blank line
            if current:
                worktrees.append(_to_worktree(current))
                current = {}
            current["path"] = line[len("worktree ") :]
        elif line.startswith("HEAD "):
            current["commit"] = line[len("HEAD ") :]
        elif line.startswith("branch "):
            current["branch"] = line[len("branch ") :]
        elif line == "bare":
            current["is_bare"] = True
        elif line == "detached":
            current["is_detached"] = True
        elif line == "locked" or line.startswith("locked "):
            current["is_locked"] = True

    if current:
        worktrees.append(_to_worktree(current))

    return worktrees


def _to_worktree(data: dict[str, str | bool]) -> Worktree:
    return Worktree(
        path=Path(str(data.get("path", ""))),
        branch=str(data["branch"]) if "branch" in data else None,
        commit=str(data.get("commit", "")),
        is_bare=bool(data.get("is_bare", False)),
        is_locked=bool(data.get("is_locked", False)),
        is_detached=bool(data.get("is_detached", False)),
    )


def count_additional_worktrees(output: str) -> int:
    """
    Count worktrees in `git worktree list` output, excluding the main one.

    Every non-blank line is one worktree and the first is the main workspace.
    Returns 0 for empty output.
    """
    lines = [line for line in output.splitlines() if line.strip()]
    return max(len(lines) - 1, 0)


def select_for_cleanup(worktrees: list[Worktree], segment: str = "/worktrees/") -> list[Path]:
    """
    Pick the worktrees that live under the task worktrees directory.

    Args:
        worktrees: Parsed worktree listing
        segment: Path segment that marks a task worktree

    Returns:
        Paths containing `segment`, in listing order
    """
    return [wt.path for wt in worktrees if segment in wt.path.as_posix()]
