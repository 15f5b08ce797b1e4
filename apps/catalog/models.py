from django.db import models
from django.core.validators import MinValueValidator
from decimal import Decimal


class ProductCategory(models.TextChoices):
    """Closed set used only to group consumption in reports."""
    MONSTER = 'monster', 'Monster'
    COKE = 'coke', 'Coca Zero'
    OTHER = 'other', 'Other'

    @classmethod
    def normalize(cls, value):
        """Map anything outside the set (or empty) to OTHER."""
        if value in cls.values:
            return value
        return cls.OTHER.value


class Product(models.Model):
    """Catalog entry shown as a button on the tablet."""

    name = models.CharField(max_length=100)
    price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.00'))]
    )
    category = models.CharField(
        max_length=20,
        choices=ProductCategory.choices,
        default=ProductCategory.OTHER,
        db_column='type',
    )

    # Display only
    icon = models.CharField(max_length=50, null=True, blank=True)
    border_color = models.CharField(max_length=30, null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'products'
        ordering = ['id']

    def __str__(self):
        return f"{self.name} - {self.price}"
