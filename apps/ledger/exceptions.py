"""
Domain exceptions for the ledger app.

Lookups of users and products during a purchase reuse the categories from
``apps.common.exceptions`` so the API maps them to 404 like everywhere else.
"""
from apps.common.exceptions import NotFoundError


class PurchaserNotFoundError(NotFoundError):
    """Raised when a purchase or settlement names a user that does not exist."""
    default_message = 'User not found.'


class PurchasedProductNotFoundError(NotFoundError):
    """Raised when a purchase names a product that is no longer in the catalog."""
    default_message = 'Product not found.'
