"""Product CRUD operations service."""

import logging
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Any, Dict, Optional

from django.db import transaction

from ..models import Product, ProductCategory
from .exceptions import ProductNotFoundError, InvalidPriceError, InvalidProductNameError

logger = logging.getLogger(__name__)

MAX_PRICE = Decimal('99999999.99')

EDITABLE_FIELDS = ['name', 'price', 'category', 'icon', 'border_color']


def clean_price(value) -> Decimal:
    """
    Coerce a price to a 2-place Decimal.

    Raises:
        InvalidPriceError: If value is not numeric, not finite, negative or too large
    """
    if isinstance(value, bool) or value is None:
        raise InvalidPriceError()
    try:
        price = Decimal(str(value))
    except (InvalidOperation, ValueError):
        raise InvalidPriceError()

    if not price.is_finite() or price < 0 or price > MAX_PRICE:
        raise InvalidPriceError()
    return price.quantize(Decimal('0.01'), rounding=ROUND_HALF_UP)


def _clean_name(name) -> str:
    cleaned = (name or '').strip()
    if not cleaned:
        raise InvalidProductNameError()
    return cleaned


def get_product_by_id(product_id: int) -> Product:
    """
    Fetch a product.

    Raises:
        ProductNotFoundError: If product doesn't exist
    """
    try:
        return Product.objects.get(id=product_id)
    except Product.DoesNotExist:
        raise ProductNotFoundError(f"Product {product_id} not found.")


def create_product(
    *,
    name: str,
    price,
    category: str = ProductCategory.OTHER,
    icon: Optional[str] = None,
    border_color: Optional[str] = None
) -> Product:
    """
    Add a product to the catalog.

    Args:
        name: Button label
        price: Unit price, >= 0
        category: Reporting category; unknown values become "other"
        icon: Icon key for the client
        border_color: Accent color for the client

    Returns:
        Created Product instance

    Raises:
        InvalidProductNameError: If name is blank
        InvalidPriceError: If price is invalid
    """
    product = Product.objects.create(
        name=_clean_name(name),
        price=clean_price(price),
        category=ProductCategory.normalize(category),
        icon=icon or None,
        border_color=border_color or None,
    )
    logger.info("Created product %s (%s at %s)", product.id, product.name, product.price)
    return product


@transaction.atomic
def update_product(
    *,
    product_id: int,
    data: Dict[str, Any]
) -> Product:
    """
    Update an existing product.

    Args:
        product_id: Product id
        data: Fields to update; keys outside EDITABLE_FIELDS are ignored

    Returns:
        Updated Product instance

    Raises:
        ProductNotFoundError: If product doesn't exist
        InvalidProductNameError: If name is blank
        InvalidPriceError: If price is invalid
    """
    try:
        product = (
            Product.objects
            .select_for_update()
            .get(id=product_id)
        )
    except Product.DoesNotExist:
        raise ProductNotFoundError(f"Product {product_id} not found.")

    changes = {key: value for key, value in data.items() if key in EDITABLE_FIELDS}

    if 'name' in changes:
        changes['name'] = _clean_name(changes['name'])
    if 'price' in changes:
        changes['price'] = clean_price(changes['price'])
    if 'category' in changes:
        changes['category'] = ProductCategory.normalize(changes['category'])
    for field in ('icon', 'border_color'):
        if field in changes:
            changes[field] = changes[field] or None

    for field, value in changes.items():
        setattr(product, field, value)

    if changes:
        product.save(update_fields=[*changes.keys(), 'updated_at'])
    return product


@transaction.atomic
def set_price(*, product_id: int, price) -> Product:
    """
    Change only the unit price (inline edit on the admin screen).

    Existing tab entries keep the price they were recorded with.

    Raises:
        InvalidPriceError: If price is invalid
        ProductNotFoundError: If product doesn't exist
    """
    new_price = clean_price(price)
    try:
        product = Product.objects.select_for_update().get(id=product_id)
    except Product.DoesNotExist:
        raise ProductNotFoundError(f"Product {product_id} not found.")

    old_price = product.price
    product.price = new_price
    product.save(update_fields=['price', 'updated_at'])
    logger.info("Product %s price changed %s -> %s", product.id, old_price, new_price)
    return product


def delete_product(*, product_id: int) -> None:
    """
    Remove a product from the catalog.

    Tab entries and history rows that mention it are untouched.

    Raises:
        ProductNotFoundError: If product doesn't exist
    """
    deleted, _ = Product.objects.filter(id=product_id).delete()
    if not deleted:
        raise ProductNotFoundError(f"Product {product_id} not found.")
    logger.info("Deleted product %s", product_id)
