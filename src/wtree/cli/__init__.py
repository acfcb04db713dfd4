"""
wtree CLI - Main application entry point.

This module sets up the Typer CLI application with all subcommands. Each
subcommand is also installed as its own console script
(list-worktrees, create-worktree, cleanup-worktrees, parallel-execute).
"""

import typer
from rich.console import Console

from wtree import __version__
from wtree.cli import cleanup, create, listing, parallel

app = typer.Typer(
    name="wtree",
    help="Git worktrees for running coding-agent tasks in parallel",
    no_args_is_help=True,
    add_completion=True,
    context_settings={"help_option_names": ["--help", "-h"]},
)

console = Console()


@app.callback()
def main() -> None:
    """
    wtree - Git worktrees for parallel agent tasks.

    Every task gets its own worktree next to the repository
    (<repo parent>/worktrees/<task>) on its own branch (feature/<task>),
    so several agents can work at the same time without conflicts.

    Common Workflows:
        wtree create login-feature          # One task, forked from main
        wtree create login-feature develop  # Fork from another branch
        wtree parallel tasks.json           # One worktree per task in a file
        wtree list                          # Show worktrees
        wtree cleanup                       # Remove all task worktrees
    """


app.command(name="list")(listing.list_worktrees)
app.command(name="create", context_settings=create.CONTEXT_SETTINGS)(create.create_worktree)
app.command(name="cleanup")(cleanup.cleanup_worktrees)
app.command(name="parallel")(parallel.parallel_execute)


@app.command()
def version() -> None:
    """Show wtree version and exit."""
    console.print(f"wtree version {__version__}")
    raise typer.Exit(0)


def cli_main() -> None:
    """Main CLI entry point."""
    app()


__all__ = ["app", "cli_main"]
