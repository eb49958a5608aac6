from abc import ABC


class UserError(ABC, Exception):
    """Base class for user-related errors.

    All errors that inherit from UserError will have their messages
    displayed to the caller. These errors should not contain any
    sensitive information.
    """


class NotFoundError(UserError):
    """Raised when a requested resource is not found."""

    def __init__(self, message: str = "Session not found") -> None:
        super().__init__(message)


class AuthenticationError(UserError):
    """Raised when authentication fails."""

    def __init__(self, message: str = "Unauthorized") -> None:
        super().__init__(message)


class InvalidTokenError(AuthenticationError):
    """Raised when a signed token is malformed, tampered with or expired."""


class SessionExpiredError(AuthenticationError):
    """Raised when a session is past its retention window."""

    def __init__(self, message: str = "Session expired") -> None:
        super().__init__(message)


class ValidationError(UserError):
    """Raised when user input fails validation."""

    def __init__(self, message: str = "Invalid request") -> None:
        super().__init__(message)


class TokenSigningError(Exception):
    """Raised when a token cannot be signed with the configured secret."""
