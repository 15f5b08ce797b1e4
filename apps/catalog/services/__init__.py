"""Services for catalog business logic."""

from .exceptions import (
    ProductNotFoundError,
    InvalidPriceError,
    InvalidProductNameError,
)
from .product_management import (
    clean_price,
    get_product_by_id,
    create_product,
    update_product,
    set_price,
    delete_product,
)

__all__ = [
    # Exceptions
    'ProductNotFoundError',
    'InvalidPriceError',
    'InvalidProductNameError',
    # Product management
    'clean_price',
    'get_product_by_id',
    'create_product',
    'update_product',
    'set_price',
    'delete_product',
]
