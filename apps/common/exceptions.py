"""
Domain error taxonomy shared by all apps.

Every service raises a subclass of one of the four categories below.
The API exception handler (``config.exceptions``) maps each category to an
HTTP status; anything that is not a ``ServiceError`` is a persistence or
programming failure and is reported separately.

Exception Hierarchy:
    ServiceError (base)
    ├── NotFoundError        -> 404
    ├── InvalidInputError    -> 400
    ├── UnauthorizedError    -> 401
    └── ConflictError        -> 409

Usage:
    from apps.common.exceptions import NotFoundError

    class ProductNotFoundError(NotFoundError):
        pass
"""


class ServiceError(Exception):
    """Base exception for all domain service errors."""

    status_code = 400
    default_message = 'Request could not be completed.'

    def __init__(self, message=None):
        super().__init__(message or self.default_message)


class NotFoundError(ServiceError):
    """Raised when a referenced user, product or transaction does not exist."""

    status_code = 404
    default_message = 'Not found.'


class InvalidInputError(ServiceError):
    """Raised when input is malformed (PIN format, price, empty name)."""

    status_code = 400
    default_message = 'Invalid input.'


class UnauthorizedError(ServiceError):
    """Raised when a PIN or the admin password does not match."""

    status_code = 401
    default_message = 'Invalid credentials.'


class ConflictError(ServiceError):
    """Raised when a write would collide with existing state."""

    status_code = 409
    default_message = 'Conflict with existing data.'
