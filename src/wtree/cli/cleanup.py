"""
wtree CLI - Clean up task worktrees.

Force-removes every worktree under the shared worktrees directory. Worktrees
elsewhere, including the main workspace, are left alone.
"""

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from wtree.cli.common import prepare
from wtree.cli.errors import ExitCode, err_console, print_error, print_unexpected_error
from wtree.core.worktree import (
    WorktreeError,
    WorktreeLayout,
    WorktreeManager,
    find_task_worktrees,
    remove_worktrees,
)

app = typer.Typer(
    name="cleanup-worktrees",
    help="Remove all task worktrees",
    add_completion=False,
)

console = Console(soft_wrap=True)


class _ConsoleProgress:
    """Reports each removal as it happens."""

    def on_removed(self, path: Path) -> None:
        console.print(f"  [green]✓[/green] Removed: {escape(str(path))}", highlight=False)

    def on_failed(self, path: Path, error: str) -> None:
        err_console.print(
            f"  [red]✗[/red] Failed to remove {escape(str(path))}: {escape(error)}",
            highlight=False,
        )


@app.command()
def cleanup_worktrees(
    dry_run: bool = typer.Option(
        False,
        "--dry-run",
        "-n",
        help="Show which worktrees would be removed without removing them",
    ),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
) -> None:
    """
    Remove all worktrees under the worktrees directory.

    Removal is forced, so uncommitted changes in those worktrees are lost.
    A failure to remove one worktree does not stop the others.

    Examples:
        cleanup-worktrees              # Remove all task worktrees
        cleanup-worktrees --dry-run    # Only show what would be removed
    """
    try:
        config = prepare(debug)
        layout = WorktreeLayout.from_config(Path.cwd(), config.worktree)
        manager = WorktreeManager(Path.cwd())

        console.print("Listing worktrees...")
        paths = find_task_worktrees(manager, layout.cleanup_segment)

    except WorktreeError as e:
        print_error(f"Cleanup failed: {e}")
        raise typer.Exit(ExitCode.GENERAL_ERROR)
    except Exception as e:
        print_unexpected_error(e)
        raise typer.Exit(ExitCode.GENERAL_ERROR)

    if not paths:
        console.print("[green]✓[/green] No worktrees to clean up!")
        return

    console.print(f"\nFound {len(paths)} worktree(s) to remove:")
    for path in paths:
        console.print(f"  - {path}", markup=False, highlight=False)

    if dry_run:
        console.print("\n[yellow]Dry run: nothing removed[/yellow]")
        return

    console.print("\nRemoving worktrees...")
    result = remove_worktrees(manager, paths, callback=_ConsoleProgress())

    console.print(
        f"\n[green]✓[/green] Cleanup complete! "
        f"Removed {len(result.removed)} of {len(result.found)} worktree(s)."
    )
    if result.failed:
        console.print(f"[yellow]{len(result.failed)} worktree(s) could not be removed[/yellow]")


def main() -> None:
    """Entry point for the cleanup-worktrees script."""
    app()


__all__ = ["app", "cleanup_worktrees", "main"]
