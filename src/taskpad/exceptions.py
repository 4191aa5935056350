"""Exceptions raised inside taskpad."""

from typing import Optional


class TaskpadError(Exception):
    """Base class for taskpad errors."""


class TaskFileFormatError(TaskpadError):
    """Raised when the task file content does not describe a valid store."""

    def __init__(self, message: str, field_name: Optional[str] = None):
        self.field_name = field_name
        super().__init__(message)


class ConfigError(TaskpadError):
    """Raised when a config file cannot be parsed."""
