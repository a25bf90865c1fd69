from abc import ABC


class UserError(ABC, Exception):
    """Base class for user-related errors.

    All errors that inherit from UserError will have their messages
    displayed to the user. These errors should not contain any
    sensitive information.
    """


class AuthenticationError(UserError):
    """Raised when a request needs a session and has none."""

    def __init__(self, message: str = "Authentication failed") -> None:
        super().__init__(message)


class ValidationError(UserError):
    """Raised when user input fails validation."""


class CredentialsError(UserError):
    """Raised when the backend rejects a login or registration.

    The message comes verbatim from the backend (wrong password, duplicate
    username or email, invalid input).
    """


class BackendError(UserError):
    """Raised when the backend answers a relayed call with an error status."""

    def __init__(self, message: str, status_code: int) -> None:
        super().__init__(message)
        self.status_code = status_code


class BackendUnavailableError(UserError):
    """Raised when the backend cannot be reached or returns an unreadable response."""

    def __init__(self, message: str = "The service is temporarily unavailable. Please try again later.") -> None:
        super().__init__(message)
