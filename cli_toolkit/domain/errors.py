"""Exception hierarchy shared by every tool in the package."""
from typing import Optional


class ToolkitError(Exception):
    """Base class for errors reported to the user by a command-line tool."""
    pass


class GitHubApiError(ToolkitError):
    """Raised when a request to the GitHub REST API fails.

    ``status`` and ``body`` are set when the server answered with a
    non-success status; both are ``None`` for transport failures.
    """

    def __init__(self, message: str, status: Optional[int] = None, body: Optional[str] = None):
        super().__init__(message)
        self.status = status
        self.body = body


class UserNotFoundError(GitHubApiError):
    """Raised when the requested user or organization does not exist (HTTP 404)."""
    pass


class ResponseParseError(GitHubApiError):
    """Raised when a response body cannot be turned into repository records."""
    pass


class PaginationLimitError(GitHubApiError):
    """Raised when the listing keeps returning pages past the configured cap."""
    pass


class TaskNotFoundError(ToolkitError):
    pass


class InvalidPriorityError(ToolkitError):
    pass


class TaskStorageError(ToolkitError):
    """Raised when the todo file cannot be read, parsed or written."""
    pass


class ExpressionParseError(ToolkitError):
    pass


class CalculationError(ToolkitError):
    pass


class InvalidTaskIdError(ToolkitError):
    pass
