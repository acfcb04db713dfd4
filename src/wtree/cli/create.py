"""
wtree CLI - Create a worktree for a task.

Creates `<repo parent>/worktrees/<task>` on a new `feature/<task>` branch
forked from a freshly pulled base branch.
"""

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from wtree.cli.common import prepare
from wtree.cli.errors import (
    ExitCode,
    print_error,
    print_not_git_repo_error,
    print_unexpected_error,
    print_usage,
)
from wtree.core.worktree import (
    WorktreeError,
    WorktreeLayout,
    WorktreeManager,
    create_task_worktree,
)

USAGE = "create-worktree <task-name> [base-branch]"

# A task name such as "-x" is taken as a positional, not an unknown option
CONTEXT_SETTINGS = {"ignore_unknown_options": True}

app = typer.Typer(
    name="create-worktree",
    help="Create a git worktree for a task",
    add_completion=False,
)

console = Console(soft_wrap=True)


class _ConsoleProgress:
    """Prints create steps as they start."""

    def on_update_base(self, base_branch: str) -> None:
        console.print(f"Updating {base_branch}...", markup=False, highlight=False)

    def on_add_worktree(self, path: Path, branch: str) -> None:
        console.print(f"Creating worktree: {path}", markup=False, highlight=False)


@app.command(context_settings=CONTEXT_SETTINGS)
def create_worktree(
    task_name: str | None = typer.Argument(
        None,
        help="Task name, used for the worktree directory and branch",
        show_default=False,
    ),
    base_branch: str | None = typer.Argument(
        None,
        help="Branch to fork from (default: main)",
        show_default=False,
    ),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
) -> None:
    """
    Create a worktree and branch for a task.

    Checks out and pulls the base branch, then adds a worktree next to the
    repository on a new feature branch.

    Examples:
        create-worktree login-feature
        create-worktree login-feature develop
    """
    if not task_name:
        print_usage(USAGE)
        raise typer.Exit(ExitCode.GENERAL_ERROR)

    try:
        config = prepare(debug)
        cwd = Path.cwd()
        layout = WorktreeLayout.from_config(cwd, config.worktree)
        base = base_branch or config.worktree.base_branch

        try:
            manager = WorktreeManager(cwd)
        except WorktreeError as e:
            print_not_git_repo_error(str(e))
            raise typer.Exit(ExitCode.GENERAL_ERROR)

        created = create_task_worktree(
            manager,
            layout,
            task_name,
            base_branch=base,
            callback=_ConsoleProgress(),
        )

        console.print("\n[green]✓[/green] Worktree created!")
        console.print(f"  Path: [cyan]{escape(str(created.path))}[/cyan]", highlight=False)
        console.print(f"  Branch: [cyan]{escape(created.branch)}[/cyan]", highlight=False)
        console.print(
            f"  Location: project root (not in {cwd.name})", markup=False, highlight=False
        )
        console.print("\nTo work in this worktree:")
        console.print(f"  cd {created.path}", markup=False, highlight=False)

    except typer.Exit:
        raise
    except WorktreeError as e:
        print_error(f"Failed to create worktree: {e}")
        raise typer.Exit(ExitCode.GENERAL_ERROR)
    except Exception as e:
        print_unexpected_error(e)
        raise typer.Exit(ExitCode.GENERAL_ERROR)


def main() -> None:
    """Entry point for the create-worktree script."""
    app()


__all__ = ["app", "create_worktree", "main"]
