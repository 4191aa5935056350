"""In-memory task store with whole-file persistence."""

import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional, Union

import yaml

from . import fileformat
from .exceptions import TaskFileFormatError
from .task import Task

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class PersistenceStatus(Enum):
    """Outcome of a save or load."""
    LOADED = "loaded"
    DEFAULTED = "defaulted"
    SAVED = "saved"
    FAILED = "failed"


@dataclass
class SaveResult:
    """Outcome of ``TaskStore.save``."""
    status: PersistenceStatus
    path: Path
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.status == PersistenceStatus.SAVED


@dataclass
class LoadResult:
    """Outcome of ``load_store``; ``store`` is always usable."""
    store: "TaskStore"
    status: PersistenceStatus
    path: Path
    error: Optional[Exception] = None

    @property
    def defaulted(self) -> bool:
        return self.status == PersistenceStatus.DEFAULTED


@dataclass
class TaskStore:
    """Ordered collection of tasks plus the id counter.

    Ids come from ``next_id`` and are never handed out twice, even after
    the task holding one is deleted.
    """

    tasks: List[Task] = field(default_factory=list)
    next_id: int = 0

    def add(self, description: str) -> Task:
        """Append a new, not yet completed task and return it."""
        task = Task(id=self.next_id, description=description, completed=False)
        self.tasks.append(task)
        self.next_id += 1
        logger.debug(f"Added task {task.id}")
        return task

    def get(self, task_id: int) -> Optional[Task]:
        """Return the first task with ``task_id``, or None."""
        for task in self.tasks:
            if task.id == task_id:
                return task
        return None

    def edit(self, task_id: int, description: str) -> None:
        """Replace a task's description. Unknown ids are ignored."""
        task = self.get(task_id)
        if task is not None:
            task.description = description

    def delete(self, task_id: int) -> None:
        """Remove every task with ``task_id``. Unknown ids are ignored."""
        self.tasks = [task for task in self.tasks if task.id != task_id]

    def mark_completed(self, task_id: int) -> None:
        """Mark a task completed. Unknown ids are ignored."""
        task = self.get(task_id)
        if task is not None:
            task.complete()

    def save(self, path: PathLike) -> SaveResult:
        """Write the whole store to ``path``, replacing any existing file.

        Never raises; failures are logged and reported in the result.
        """
        path = Path(path)
        try:
            content = fileformat.dumps(self.tasks, self.next_id)
            with open(path, "w", encoding="utf-8") as f:
                f.write(content)
        except (OSError, yaml.YAMLError) as e:
            logger.warning(f"Failed to save tasks to {path}: {e}")
            return SaveResult(PersistenceStatus.FAILED, path, e)

        logger.debug(f"Saved {len(self.tasks)} tasks to {path}")
        return SaveResult(PersistenceStatus.SAVED, path)

    @classmethod
    def load(cls, path: PathLike) -> "TaskStore":
        """Load a store from ``path``, falling back to an empty one."""
        return load_store(path).store


def load_store(path: PathLike) -> LoadResult:
    """Load a store from ``path`` and report how it was obtained.

    A missing, unreadable or malformed file yields an empty store with
    status ``DEFAULTED``. Never raises.
    """
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            content = f.read()
    except FileNotFoundError as e:
        logger.info(f"No task file at {path}, starting empty")
        return LoadResult(TaskStore(), PersistenceStatus.DEFAULTED, path, e)
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(f"Could not read {path}, starting empty: {e}")
        return LoadResult(TaskStore(), PersistenceStatus.DEFAULTED, path, e)

    try:
        tasks, next_id = fileformat.loads(content)
    except TaskFileFormatError as e:
        logger.warning(f"Malformed task file {path}, starting empty: {e}")
        return LoadResult(TaskStore(), PersistenceStatus.DEFAULTED, path, e)

    logger.debug(f"Loaded {len(tasks)} tasks from {path}")
    return LoadResult(TaskStore(tasks, next_id), PersistenceStatus.LOADED, path)
