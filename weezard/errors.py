"""Exceptions raised by weezard."""

from typing import List, Optional


class WeezardError(Exception):
    """Base class for all weezard errors."""


class InvalidArgument(WeezardError, TypeError):
    """Questions were requested for something that is not a record."""


class MalformedTag(WeezardError, ValueError):
    """A field tag does not follow the ``<default>,<question>`` grammar."""

    def __init__(self, message: str, field_name: Optional[str] = None, questions: Optional[List] = None):
        """
        Initialize the error.

        Args:
            message: Human readable description.
            field_name: Field carrying the bad tag, if known.
            questions: Questions built before the bad field was reached.
                Advisory only, callers should treat the error as total failure.
        """
        super().__init__(message)
        self.field_name = field_name
        self.questions = questions if questions is not None else []


class ReadError(WeezardError, OSError):
    """A line of input could not be read."""


class TemplateError(WeezardError, ValueError):
    """The prompt template could not be rendered."""
