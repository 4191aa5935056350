"""Presentation shell controller.

``TodoApp`` turns UI events into store operations and saves the whole store
after every change. It knows nothing about how input is collected, so the
interactive shell and the one-shot CLI commands both drive it.
"""

import logging
from pathlib import Path
from typing import Optional

from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .state import EditState, Editing, Idle
from .store import SaveResult, TaskStore, load_store
from .task import Task

logger = logging.getLogger(__name__)


class TodoApp:
    """Routes user actions to a ``TaskStore`` and persists after each one."""

    def __init__(self, store: TaskStore, data_file: Path):
        self.store = store
        self.data_file = Path(data_file)
        self.edit_state: EditState = Idle()
        self.last_save: Optional[SaveResult] = None

    @classmethod
    def open(cls, data_file: Path) -> "TodoApp":
        """Create an app backed by the store found at ``data_file``."""
        result = load_store(data_file)
        return cls(result.store, result.path)

    def _save(self) -> SaveResult:
        self.last_save = self.store.save(self.data_file)
        return self.last_save

    @property
    def save_failed(self) -> bool:
        return self.last_save is not None and not self.last_save.ok

    def add(self, text: str) -> Optional[Task]:
        """Add a task from user input; empty input is ignored."""
        if not text:
            return None
        task = self.store.add(text)
        self._save()
        return task

    def complete(self, task_id: int) -> None:
        self.store.mark_completed(task_id)
        self._save()

    def delete(self, task_id: int) -> None:
        self.store.delete(task_id)
        self._save()

    def begin_edit(self, task_id: int) -> EditState:
        """Open the editor on a task, seeding the draft with its text."""
        task = self.store.get(task_id)
        if task is None:
            logger.debug(f"Ignoring edit of unknown task {task_id}")
            return self.edit_state
        self.edit_state = Editing(task.id, task.description)
        return self.edit_state

    def update_draft(self, text: str) -> None:
        if isinstance(self.edit_state, Editing):
            self.edit_state = self.edit_state.with_draft(text)

    def commit_edit(self) -> None:
        """Apply the draft, save and close the editor."""
        state = self.edit_state
        if not isinstance(state, Editing):
            return
        self.store.edit(state.task_id, state.draft)
        self._save()
        self.edit_state = Idle()

    def cancel_edit(self) -> None:
        self.edit_state = Idle()

    def render(self) -> RenderableType:
        """Build the current view of the list."""
        parts = [Text("To-Do List", style="bold underline")]

        if self.store.tasks:
            table = Table(show_header=False, box=None, padding=(0, 1))
            table.add_column("id", style="dim", justify="right")
            table.add_column("status")
            table.add_column("description")
            for task in self.store.tasks:
                if task.completed:
                    status = Text("✓", style="green")
                    description = Text(task.description, style="strike dim")
                else:
                    status = Text("·")
                    description = Text(task.description)
                table.add_row(str(task.id), status, description)
            parts.append(table)
        else:
            parts.append(Text("No tasks available.", style="dim"))

        if isinstance(self.edit_state, Editing):
            parts.append(
                Panel(
                    Text(self.edit_state.draft),
                    title="Edit Task Description",
                    expand=False,
                )
            )

        if self.save_failed:
            parts.append(
                Text(
                    f"Warning: changes could not be saved to {self.data_file}",
                    style="bold red",
                )
            )

        return Group(*parts)
