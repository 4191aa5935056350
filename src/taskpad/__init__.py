"""taskpad - A minimal to-do list with flat-file persistence."""

__version__ = "0.1.0"

from .task import Task
from .store import TaskStore, LoadResult, SaveResult, PersistenceStatus, load_store
from .exceptions import TaskpadError, TaskFileFormatError, ConfigError

__all__ = [
    "Task",
    "TaskStore",
    "LoadResult",
    "SaveResult",
    "PersistenceStatus",
    "load_store",
    "TaskpadError",
    "TaskFileFormatError",
    "ConfigError",
    "__version__",
]
