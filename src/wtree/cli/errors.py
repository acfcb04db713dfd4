"""
Standardized error handling and exit codes for the wtree CLI.

Errors are printed to stderr with actionable guidance; exit codes are shared
by all commands.
"""

from enum import IntEnum

from rich.console import Console
from rich.markup import escape

err_console = Console(stderr=True, soft_wrap=True)


class ExitCode(IntEnum):
    """Standard exit codes for wtree commands."""

    SUCCESS = 0
    """Operation completed successfully."""

    GENERAL_ERROR = 1
    """Usage error, git failure, or any other error."""


def print_error(
    problem: str,
    *,
    reason: str | None = None,
    solution: str | None = None,
) -> None:
    """
    Print a standardized error message with actionable guidance.

    Args:
        problem: Brief description of what went wrong
        reason: Optional explanation of why it happened
        solution: Optional command or action to fix it

    Example:
        >>> print_error(
        ...     "Failed to create worktree",
        ...     reason="fatal: a branch named 'feature/login' already exists",
        ...     solution="cleanup-worktrees",
        ... )
    """
    err_console.print(f"[red]Error:[/red] {escape(problem)}", highlight=False)

    if reason:
        err_console.print(f"[dim]{escape(reason)}[/dim]", highlight=False)

    if solution:
        err_console.print(f"[cyan]→ Try:[/cyan] {escape(solution)}", highlight=False)


def print_usage(usage: str) -> None:
    """Print a usage line for a missing required argument."""
    err_console.print(f"Usage: {usage}", markup=False, highlight=False)


def print_not_git_repo_error(detail: str) -> None:
    """Print error when the command is not run inside a git repository."""
    print_error(
        detail,
        reason="wtree manages worktrees of the repository in the current directory",
        solution="cd to your repository root",
    )


def print_unexpected_error(error: Exception) -> None:
    """Print an error that has no dedicated handling."""
    err_console.print(f"[red]Unexpected error:[/red] {escape(str(error))}", highlight=False)


__all__ = [
    "ExitCode",
    "err_console",
    "print_error",
    "print_not_git_repo_error",
    "print_unexpected_error",
    "print_usage",
]
