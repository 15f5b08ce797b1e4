from django.db import models
from django.core.validators import MinValueValidator
from django.utils import timezone
from decimal import Decimal

from apps.catalog.models import ProductCategory


def month_key(moment):
    """Calendar month of a timestamp in the configured time zone, as "YYYY-MM"."""
    return timezone.localtime(moment).strftime('%Y-%m')


class Transaction(models.Model):
    """
    One unsettled purchase on a user's tab.

    Rows are never edited, only deleted by settlement. User and product are
    referenced without database constraints so deleting either leaves the
    row (and the debt) in place.
    """

    user = models.ForeignKey(
        'accounts.User',
        on_delete=models.DO_NOTHING,
        db_constraint=False,
        related_name='debt_entries'
    )
    product = models.ForeignKey(
        'catalog.Product',
        on_delete=models.DO_NOTHING,
        db_constraint=False,
        related_name='debt_entries'
    )

    # Snapshot taken at purchase time
    product_name = models.CharField(max_length=100)
    price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.00'))]
    )
    category = models.CharField(
        max_length=20,
        choices=ProductCategory.choices,
        default=ProductCategory.OTHER
    )

    timestamp = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = 'transactions'
        indexes = [
            models.Index(fields=['user', 'timestamp'], name='transactions_user_ts_idx'),
            models.Index(fields=['timestamp'], name='transactions_ts_idx'),
        ]
        ordering = ['timestamp', 'id']

    def __str__(self):
        return f"{self.product_name} - {self.price} (user {self.user_id})"


class PurchaseHistory(models.Model):
    """
    Permanent record of a purchase, independent of settlement.

    Carries its own copy of the user name so it reads correctly after the
    user is renamed or deleted.
    """

    user_id = models.IntegerField(db_index=True)
    user_name = models.CharField(max_length=100)
    product_name = models.CharField(max_length=100)
    price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.00'))]
    )
    timestamp = models.DateTimeField(default=timezone.now)
    month = models.CharField(max_length=7, db_index=True)

    class Meta:
        db_table = 'purchase_history'
        verbose_name_plural = 'purchase history'
        indexes = [
            models.Index(fields=['month', 'timestamp'], name='history_month_ts_idx'),
            models.Index(fields=['user_id', 'timestamp'], name='history_user_ts_idx'),
        ]
        ordering = ['-timestamp', '-id']

    def __str__(self):
        return f"{self.user_name}: {self.product_name} - {self.price} ({self.month})"
