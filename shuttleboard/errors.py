"""Errors raised by the bracket engine and its API.

Each carries the HTTP status the error handlers answer with.
"""


class AppError(Exception):
    """Base error for tournament operations, with a status code."""

    def __init__(self, message, status_code=400):
        """Initialize the error."""
        super().__init__(message)
        self.status_code = status_code
        self.message = message


class ValidationError(AppError):
    """Raised when a creation or edit request is rejected before any state exists."""

    def __init__(self, message="Invalid tournament request."):
        """Initialize the error."""
        super().__init__(message, 400)


class NotFoundError(AppError):
    """Raised when no tournament is stored under the requested id."""

    def __init__(self, message="Tournament not found."):
        """Initialize the error."""
        super().__init__(message, 404)


class InvalidTransitionError(AppError):
    """Raised when a bracket operation breaks the tournament state machine."""

    def __init__(self, message="Invalid bracket transition."):
        """Initialize the error."""
        super().__init__(message, 409)


class InvariantViolation(AppError):
    """Raised when a bracket is structurally broken and cannot progress."""

    def __init__(self, message="Bracket invariant violated."):
        """Initialize the error."""
        super().__init__(message, 500)
