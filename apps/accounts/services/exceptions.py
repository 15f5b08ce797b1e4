"""Domain-specific exceptions for accounts services."""

from apps.common.exceptions import (
    ConflictError,
    InvalidInputError,
    NotFoundError,
    UnauthorizedError,
)


class UserNotFoundError(NotFoundError):
    """Raised when user does not exist."""
    default_message = 'User not found.'


class InvalidUserNameError(InvalidInputError):
    """Raised when a user name is empty or too long."""
    default_message = 'Name must not be empty.'


class InvalidPinError(InvalidInputError):
    """Raised when a new PIN is malformed or is the shared default."""
    default_message = 'PIN must be exactly 4 digits.'


class PinConfirmationError(InvalidInputError):
    """Raised when the PIN confirmation does not match."""
    default_message = 'PINs do not match.'


class PinConflictError(ConflictError):
    """Raised when another user already uses the requested PIN."""
    default_message = 'This PIN is already in use. Choose another one.'


class InvalidCredentialsError(UnauthorizedError):
    """Raised when a PIN or the admin password is wrong."""
    default_message = 'Invalid PIN.'


class AmbiguousPinError(UnauthorizedError):
    """Raised when a PIN alone cannot identify a single user."""
    default_message = 'Select your name to log in with the default PIN.'
