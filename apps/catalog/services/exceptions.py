"""Domain-specific exceptions for catalog services."""

from apps.common.exceptions import InvalidInputError, NotFoundError


class ProductNotFoundError(NotFoundError):
    """Raised when a product does not exist."""
    default_message = 'Product not found.'


class InvalidPriceError(InvalidInputError):
    """Raised when a price is not a finite, non-negative number."""
    default_message = 'Price must be a number greater than or equal to zero.'


class InvalidProductNameError(InvalidInputError):
    """Raised when a product name is empty."""
    default_message = 'Product name must not be empty.'
