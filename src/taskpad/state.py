"""Transient edit state for the presentation shell.

The shell is either idle or editing exactly one task with a draft
description. An open editor always has a task attached.
"""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Idle:
    """No task is being edited."""


@dataclass(frozen=True)
class Editing:
    """A task is being edited; ``draft`` holds the unsaved text."""
    task_id: int
    draft: str

    def with_draft(self, draft: str) -> "Editing":
        return Editing(self.task_id, draft)


EditState = Union[Idle, Editing]
