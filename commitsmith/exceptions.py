"""Engine-level exception classes.

Contains:
- CommitsmithError: Base exception for commitsmith errors
- ValidationError: Raised for malformed parameters or an unusable root directory
- GitOperationError: Raised when the repository query layer fails
"""

from typing import Optional


class CommitsmithError(Exception):
    """Base exception for commitsmith errors."""

    pass


class ValidationError(CommitsmithError):
    """Raised when caller parameters or the target directory are invalid."""

    pass


class GitOperationError(CommitsmithError):
    """Raised when a repository query fails unexpectedly.

    Attributes:
        cause: The original exception, if any.
    """

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause
