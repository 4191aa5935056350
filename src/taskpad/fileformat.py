"""Task file format: the whole store as a YAML document.

The file holds a single mapping::

    tasks:
    - id: 0
      description: buy milk
      completed: true
    next_id: 1

Both keys are required. Unknown keys are ignored so hand-edited files with
extra notes still load.
"""

import logging
from typing import Any, Dict, List, Tuple

import yaml

from .exceptions import TaskFileFormatError
from .task import Task

logger = logging.getLogger(__name__)

DEFAULT_FILE_NAME = "tasks.txt"


def dumps(tasks: List[Task], next_id: int) -> str:
    """Serialize tasks and the id counter to YAML text."""
    data = {
        "tasks": [task.to_dict() for task in tasks],
        "next_id": next_id,
    }
    return yaml.safe_dump(
        data, default_flow_style=False, sort_keys=False, allow_unicode=True
    )


def _parse_task(entry: Any, index: int) -> Task:
    if not isinstance(entry, dict):
        raise TaskFileFormatError(f"Task #{index} is not a mapping", "tasks")

    for key in ("id", "description", "completed"):
        if key not in entry:
            raise TaskFileFormatError(f"Task #{index} is missing '{key}'", key)

    task_id = entry["id"]
    # bool is an int subclass; "id: true" must not load as 1
    if isinstance(task_id, bool) or not isinstance(task_id, int) or task_id < 0:
        raise TaskFileFormatError(
            f"Task #{index} has invalid id {task_id!r}", "id"
        )
    if not isinstance(entry["description"], str):
        raise TaskFileFormatError(
            f"Task #{index} description must be a string", "description"
        )
    if not isinstance(entry["completed"], bool):
        raise TaskFileFormatError(
            f"Task #{index} completed flag must be true or false", "completed"
        )

    return Task.from_dict(entry)


def loads(text: str) -> Tuple[List[Task], int]:
    """Parse YAML text into a task list and next id.

    Raises:
        TaskFileFormatError: If the text is not a valid task document.
    """
    # Bad implicit timestamps raise ValueError, deep nesting RecursionError
    try:
        data = yaml.safe_load(text)
    except (yaml.YAMLError, ValueError, RecursionError) as e:
        raise TaskFileFormatError(f"Invalid YAML: {e}") from e

    if not isinstance(data, dict):
        raise TaskFileFormatError("Task file must contain a mapping at the top level")

    for key in ("tasks", "next_id"):
        if key not in data:
            raise TaskFileFormatError(f"Task file is missing '{key}'", key)

    raw_tasks = data["tasks"]
    if not isinstance(raw_tasks, list):
        raise TaskFileFormatError("'tasks' must be a list", "tasks")

    next_id = data["next_id"]
    if isinstance(next_id, bool) or not isinstance(next_id, int) or next_id < 0:
        raise TaskFileFormatError(f"Invalid next_id {next_id!r}", "next_id")

    tasks = [_parse_task(entry, index) for index, entry in enumerate(raw_tasks)]

    seen: Dict[int, int] = {}
    for index, task in enumerate(tasks):
        if task.id in seen:
            raise TaskFileFormatError(
                f"Duplicate task id {task.id} at #{seen[task.id]} and #{index}", "id"
            )
        seen[task.id] = index

    if tasks:
        max_id = max(seen)
        if next_id <= max_id:
            logger.warning(
                f"next_id {next_id} does not exceed stored id {max_id}; using {max_id + 1}"
            )
            next_id = max_id + 1

    return tasks, next_id
