"""
wtree CLI - Set up worktrees for a batch of tasks.

Reads a JSON list of tasks and creates one worktree per task, so agents can
then work on all of them in parallel.
"""

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from wtree.cli.common import prepare
from wtree.cli.errors import ExitCode, print_error, print_unexpected_error, print_usage
from wtree.core.worktree import (
    BatchRunner,
    BatchRunResult,
    BatchTaskError,
    TaskDescriptor,
    TaskFileError,
    WorktreeError,
    WorktreeLayout,
    load_tasks,
)

USAGE = "parallel-execute <tasks-json-file>"

app = typer.Typer(
    name="parallel-execute",
    help="Create worktrees for every task in a tasks file",
    add_completion=False,
)

console = Console(soft_wrap=True)


class _ConsoleProgress:
    """Prints batch progress."""

    def on_start(self, num_tasks: int) -> None:
        console.print(f"Setting up worktrees for {num_tasks} task(s)...\n")

    def on_task_start(self, task: TaskDescriptor, base_branch: str) -> None:
        console.print(
            f"[bold]Setting up worktree for:[/bold] {escape(task.name)} "
            f"[dim](from {escape(base_branch)})[/dim]",
            highlight=False,
        )

    def on_debug(self, message: str) -> None:
        console.print(f"[dim]{escape(message)}[/dim]", highlight=False)


@app.command()
def parallel_execute(
    tasks_file: Path | None = typer.Argument(
        None,
        help="JSON file with a list of tasks ({name, prompt, baseBranch?})",
        show_default=False,
    ),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
) -> None:
    """
    Create a worktree for each task in a tasks file.

    Tasks are set up one after another in file order; the first failure stops
    the batch. Agents are not started: run them in the created worktrees.

    Example tasks.json:
        [
          {"name": "backend-api", "prompt": "Create POST /api/auth/login endpoint"},
          {"name": "frontend-ui", "prompt": "Build login form component"}
        ]

    Examples:
        parallel-execute tasks.json
    """
    if tasks_file is None:
        print_usage(USAGE)
        raise typer.Exit(ExitCode.GENERAL_ERROR)

    try:
        config = prepare(debug)
        layout = WorktreeLayout.from_config(Path.cwd(), config.worktree)

        tasks = load_tasks(tasks_file)

        runner = BatchRunner(
            layout,
            default_base_branch=config.worktree.base_branch,
            debug=debug,
            callback=_ConsoleProgress(),
        )
        result = runner.run(tasks)

    except TaskFileError as e:
        print_error(
            "Parallel execution setup failed",
            reason=str(e),
            solution="check that the file is a JSON array of objects with a \"name\"",
        )
        raise typer.Exit(ExitCode.GENERAL_ERROR)
    except BatchTaskError as e:
        print_error("Parallel execution setup failed", reason=str(e))
        raise typer.Exit(ExitCode.GENERAL_ERROR)
    except WorktreeError as e:
        print_error(f"Parallel execution setup failed: {e}")
        raise typer.Exit(ExitCode.GENERAL_ERROR)
    except Exception as e:
        print_unexpected_error(e)
        raise typer.Exit(ExitCode.GENERAL_ERROR)

    _print_summary(result, config.worktree.base_branch)


def _print_summary(result: BatchRunResult, base_branch: str) -> None:
    console.print("\n[green]✓[/green] All worktrees created!")

    if result.worktrees:
        table = Table(title="Task worktrees")
        table.add_column("Task", style="magenta")
        table.add_column("Branch", style="green")
        table.add_column("Path", style="cyan")
        for wt in result.worktrees:
            table.add_row(escape(wt.task_name), escape(wt.branch), escape(str(wt.path)))
        console.print()
        console.print(table)

    console.print("\nNext steps:")
    console.print("  1. Agents can now work in parallel in each worktree")
    console.print("  2. When done, review changes in each worktree")
    console.print(f"  3. Merge branches back to {base_branch}", markup=False, highlight=False)
    console.print("  4. Run cleanup: cleanup-worktrees")


def main() -> None:
    """Entry point for the parallel-execute script."""
    app()


__all__ = ["app", "parallel_execute", "main"]
