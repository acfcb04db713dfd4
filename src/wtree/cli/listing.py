"""
wtree CLI - List worktrees.

Shows every git worktree of the current repository and how many exist
besides the main workspace.
"""

from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from wtree.cli.common import prepare
from wtree.cli.errors import ExitCode, print_error, print_unexpected_error
from wtree.core.worktree import WorktreeError, WorktreeManager, count_additional_worktrees

app = typer.Typer(
    name="list-worktrees",
    help="List all git worktrees",
    add_completion=False,
)

console = Console(soft_wrap=True)


@app.command()
def list_worktrees(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Also show a table with branch, commit and lock state",
    ),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
) -> None:
    """
    Show all worktrees in the repository.

    Prints git's worktree listing followed by the number of worktrees
    besides the main workspace.

    Examples:
        list-worktrees              # Show all worktrees
        list-worktrees --verbose    # Add a detailed table
    """
    try:
        prepare(debug)
        manager = WorktreeManager(Path.cwd())

        console.print("Git Worktrees:\n")
        output = manager.list_text()

        if not output.strip():
            console.print("No worktrees found (only main workspace exists)")
            return

        console.print(output, markup=False, highlight=False)

        if verbose:
            _print_table(manager)

        count = count_additional_worktrees(output)
        console.print(f"\n[green]✓[/green] Found {count} additional worktree(s)")

    except WorktreeError as e:
        print_error(f"Failed to list worktrees: {e}")
        raise typer.Exit(ExitCode.GENERAL_ERROR)
    except Exception as e:
        print_unexpected_error(e)
        raise typer.Exit(ExitCode.GENERAL_ERROR)


def _print_table(manager: WorktreeManager) -> None:
    table = Table(title="Worktree details")
    table.add_column("Path", style="cyan")
    table.add_column("Branch", style="green")
    table.add_column("Commit", style="blue")
    table.add_column("Locked", style="red")

    for wt in manager.list():
        if wt.is_bare:
            continue
        branch = wt.branch_name or "[dim]detached[/dim]"
        commit = wt.commit[:7] if wt.commit else "unknown"
        locked = "locked" if wt.is_locked else ""
        table.add_row(str(wt.path), branch, commit, locked)

    console.print()
    console.print(table)


def main() -> None:
    """Entry point for the list-worktrees script."""
    app()


__all__ = ["app", "list_worktrees", "main"]
