"""Task data model for taskpad."""

from dataclasses import dataclass
from typing import Any, Dict


@dataclass
class Task:
    """A single to-do item."""

    id: int
    description: str
    completed: bool = False

    def complete(self):
        """Mark the task as completed."""
        self.completed = True

    def to_dict(self) -> Dict[str, Any]:
        """Convert the Task to a plain dictionary."""
        return {
            "id": self.id,
            "description": self.description,
            "completed": self.completed,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Task":
        """Create a Task from a dictionary.

        No type checking happens here; use ``fileformat.loads`` for
        untrusted input.
        """
        return cls(
            id=data["id"],
            description=data["description"],
            completed=data["completed"],
        )
