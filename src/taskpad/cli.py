"""Command-line interface for taskpad."""

import logging
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.prompt import Confirm, Prompt

from .app import TodoApp
from .config import load_config
from .state import Editing

logger = logging.getLogger(__name__)

SHELL_HELP = "Commands: add <text>, edit <id>, done <id>, delete <id>, help, quit"


def configure_logging(level: str) -> None:
    """Send log records to stderr through rich."""
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _get_app(ctx) -> TodoApp:
    return TodoApp.open(ctx.obj["data_file"])


def _report_save(app: TodoApp, console: Console) -> None:
    """Warn and exit non-zero when the last save did not reach disk."""
    if app.save_failed:
        console.print(f"[red]Error: could not save tasks to {app.data_file}[/red]")
        sys.exit(1)


def _parse_id(arg: str, console: Console) -> Optional[int]:
    try:
        return int(arg)
    except ValueError:
        console.print(f"[red]'{escape(arg)}' is not a task id[/red]")
        return None


def _shell_edit(app: TodoApp, task_id: int, console: Console) -> None:
    state = app.begin_edit(task_id)
    if not isinstance(state, Editing):
        console.print(f"[yellow]No task with id {task_id}[/yellow]")
        return

    # No default: a blank line is a valid (empty) description
    console.print(app.render())
    draft = Prompt.ask("Enter new description", console=console)
    app.update_draft(draft)
    console.print(app.render())
    if Confirm.ask("Save changes?", default=True, console=console):
        app.commit_edit()
    else:
        app.cancel_edit()


def run_shell(app: TodoApp, console: Console) -> None:
    """Interactive loop: redraw the list, read one command, apply it."""
    console.print(f"[dim]{SHELL_HELP}[/dim]")
    while True:
        console.print()
        console.print(app.render())
        try:
            line = console.input("[bold]> [/bold]").strip()
        except (EOFError, KeyboardInterrupt):
            console.print()
            break

        if not line:
            continue

        command, _, arg = line.partition(" ")
        command = command.lower()
        arg = arg.strip()

        if command in ("quit", "exit", "q"):
            break
        elif command in ("help", "?"):
            console.print(SHELL_HELP)
        elif command == "add":
            if app.add(arg) is None:
                console.print("[yellow]Nothing to add[/yellow]")
        elif command in ("edit", "done", "delete"):
            task_id = _parse_id(arg, console)
            if task_id is None:
                continue
            if command == "edit":
                _shell_edit(app, task_id, console)
            elif command == "done":
                app.complete(task_id)
            else:
                app.delete(task_id)
        else:
            console.print(f"[red]Unknown command '{escape(command)}'[/red]. {SHELL_HELP}")


@click.group(invoke_without_command=True)
@click.option("--file", "-f", "data_file", type=click.Path(dir_okay=False),
              help="Task file (default: tasks.txt)")
@click.option("--config", type=click.Path(dir_okay=False), help="Path to config file")
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
@click.pass_context
def main(ctx, data_file, config, verbose):
    """taskpad - a minimal to-do list."""
    ctx.ensure_object(dict)

    cfg = load_config(Path(config) if config else None)
    configure_logging("DEBUG" if verbose else cfg.log_level)

    ctx.obj["config"] = cfg
    ctx.obj["data_file"] = Path(data_file) if data_file else cfg.get_data_path()
    ctx.obj["console"] = Console(no_color=cfg.no_color)

    if ctx.invoked_subcommand is None:
        run_shell(_get_app(ctx), ctx.obj["console"])


@main.command()
@click.argument("text")
@click.pass_context
def add(ctx, text):
    """Add a new task."""
    console = ctx.obj["console"]
    app = _get_app(ctx)

    task = app.add(text)
    if task is None:
        console.print("[red]Error: task description cannot be empty[/red]")
        sys.exit(1)

    _report_save(app, console)
    console.print(f"[green]Added task {task.id}:[/green] {escape(task.description)}")


@main.command(name="list")
@click.pass_context
def list_tasks(ctx):
    """Show all tasks."""
    app = _get_app(ctx)
    ctx.obj["console"].print(app.render())


@main.command()
@click.argument("task_id", type=int)
@click.argument("text")
@click.pass_context
def edit(ctx, task_id, text):
    """Replace the description of a task."""
    console = ctx.obj["console"]
    app = _get_app(ctx)

    if not isinstance(app.begin_edit(task_id), Editing):
        console.print(f"[yellow]No task with id {task_id}[/yellow]")
        return

    app.update_draft(text)
    app.commit_edit()
    _report_save(app, console)
    console.print(f"[green]Updated task {task_id}[/green]")


@main.command()
@click.argument("task_id", type=int)
@click.pass_context
def done(ctx, task_id):
    """Mark a task as completed."""
    console = ctx.obj["console"]
    app = _get_app(ctx)

    if app.store.get(task_id) is None:
        console.print(f"[yellow]No task with id {task_id}[/yellow]")
        return

    app.complete(task_id)
    _report_save(app, console)
    console.print(f"[green]Completed task {task_id}[/green]")


@main.command()
@click.argument("task_id", type=int)
@click.pass_context
def delete(ctx, task_id):
    """Delete a task."""
    console = ctx.obj["console"]
    app = _get_app(ctx)

    if app.store.get(task_id) is None:
        console.print(f"[yellow]No task with id {task_id}[/yellow]")
        return

    app.delete(task_id)
    _report_save(app, console)
    console.print(f"[green]Deleted task {task_id}[/green]")


if __name__ == "__main__":
    main()
