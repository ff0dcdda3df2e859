"""Custom exceptions for workflow data operations."""

from typing import Any, Optional


class WorkflowDataError(Exception):
    """Base exception for all workflow data errors."""

    pass


class InvalidRawJSONError(WorkflowDataError):
    """Raised when raw JSON for a merge is not an object.

    Attributes:
        raw: The input that was rejected
        reason: Why it was rejected
    """

    def __init__(self, raw: Any, reason: Optional[str] = None):
        self.raw = raw
        self.reason = reason

        message = "rawJSON could not be parsed"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class StaticDataFileError(WorkflowDataError):
    """Raised when the static data file cannot be used.

    Attributes:
        path: Location of the file
    """

    def __init__(self, path: Any, message: str):
        self.path = path
        super().__init__(f"{message}: {path}")
