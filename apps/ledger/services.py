"""
Ledger Services Module
======================

Business logic for the running tab: recording purchases and settling debt.

Classes:
    LedgerService: Purchase recording and settlement.

Example:
    Recording a purchase and settling at month end::

        from apps.ledger.services import LedgerService

        entry = LedgerService.record_purchase(user_id=ana.id, product_id=coke.id)
        # ana's balance grew by coke.price; one history row was archived

        LedgerService.settle_user(user_id=ana.id)   # ana paid
        LedgerService.settle_all()                  # new cycle for everyone
"""

import logging
from decimal import Decimal

from django.db import transaction
from django.db.models import Sum
from django.utils import timezone

from apps.accounts.models import User
from apps.catalog.models import Product, ProductCategory
from .exceptions import PurchaserNotFoundError, PurchasedProductNotFoundError
from .models import Transaction, PurchaseHistory, month_key

logger = logging.getLogger(__name__)


class LedgerService:
    """
    Service for the debt ledger and its settlement lifecycle.

    A user's balance is never stored: it is the sum of their Transaction
    rows. Purchases append to both Transaction and PurchaseHistory inside one
    database transaction; settlement deletes Transaction rows only, so the
    history remains a complete record of everything ever bought.

    Methods:
        record_purchase: Put one product on a user's tab.
        settle_user: Clear one user's tab.
        settle_all: Clear every tab (start a new cycle).
    """

    @staticmethod
    def record_purchase(user_id, product_id):
        """
        Put one unit of a product on a user's tab.

        The product's current name, price and category and the user's current
        name are copied onto the new rows, so later catalog edits or renames do
        not alter them.

        Args:
            user_id (int): The buying user.
            product_id (int): The product bought.

        Returns:
            Transaction: The created debt entry.

        Raises:
            PurchaserNotFoundError: If the user doesn't exist.
            PurchasedProductNotFoundError: If the product doesn't exist.

        Note:
            Both rows are written in a single database transaction; a reader
            sees either both or neither. The balance grows by exactly
            ``product.price``.
        """
        with transaction.atomic():
            try:
                user = User.objects.get(id=user_id)
            except User.DoesNotExist:
                raise PurchaserNotFoundError(f"User {user_id} not found.")

            try:
                product = Product.objects.get(id=product_id)
            except Product.DoesNotExist:
                raise PurchasedProductNotFoundError(f"Product {product_id} not found.")

            now = timezone.now()

            entry = Transaction.objects.create(
                user_id=user.id,
                product_id=product.id,
                product_name=product.name,
                price=product.price,
                category=ProductCategory.normalize(product.category),
                timestamp=now,
            )
            PurchaseHistory.objects.create(
                user_id=user.id,
                user_name=user.name,
                product_name=product.name,
                price=product.price,
                timestamp=now,
                month=month_key(now),
            )

        logger.info(
            "Recorded purchase %s: user %s bought %s for %s",
            entry.id, user.id, product.name, product.price
        )
        return entry

    @staticmethod
    def settle_user(user_id):
        """
        Mark a user's tab as paid by deleting all their debt entries.

        Settling an empty tab is a no-op. A deleted user's leftover entries
        can still be settled by id.

        Args:
            user_id (int): The user whose tab is cleared.

        Returns:
            dict: ``user_id``, ``settled_count`` and ``settled_amount``.

        Raises:
            PurchaserNotFoundError: If the user doesn't exist and has no
                outstanding entries either.
        """
        with transaction.atomic():
            entries = Transaction.objects.filter(user_id=user_id)

            if not User.objects.filter(id=user_id).exists() and not entries.exists():
                raise PurchaserNotFoundError(f"User {user_id} not found.")

            amount = entries.aggregate(total=Sum('price'))['total'] or Decimal('0.00')
            count, _ = entries.delete()

        logger.info("Settled user %s: %s entries, %s", user_id, count, amount)
        return {
            'user_id': user_id,
            'settled_count': count,
            'settled_amount': amount,
        }

    @staticmethod
    def settle_all():
        """
        Start a new billing cycle: delete every debt entry of every user.

        Purchase history is not touched. This is an explicit, irreversible
        administrator action; nothing schedules it.

        Returns:
            dict: ``settled_count`` and ``settled_amount`` across all users.
        """
        with transaction.atomic():
            amount = Transaction.objects.aggregate(total=Sum('price'))['total'] or Decimal('0.00')
            count, _ = Transaction.objects.all().delete()

        logger.warning("Settled all tabs: %s entries, %s", count, amount)
        return {
            'settled_count': count,
            'settled_amount': amount,
        }
