import pytest
from datetime import datetime
from decimal import Decimal
from django.utils import timezone
from rest_framework.test import APIClient
from apps.accounts.models import User
from apps.catalog.models import Product, ProductCategory
from apps.ledger.models import PurchaseHistory, month_key


@pytest.fixture
def api_client():
    """Return an API client without an admin session."""
    return APIClient()


@pytest.fixture
def ana(db):
    return User.objects.create(name='Ana')


@pytest.fixture
def carlos(db):
    return User.objects.create(name='Carlos')


@pytest.fixture
def beatriz(db):
    return User.objects.create(name='Beatriz')


@pytest.fixture
def monster(db):
    return Product.objects.create(
        name='Monster Energy',
        price=Decimal('7.00'),
        category=ProductCategory.MONSTER,
    )


@pytest.fixture
def coke(db):
    return Product.objects.create(
        name='Coca-Cola Zero',
        price=Decimal('5.00'),
        category=ProductCategory.COKE,
    )


@pytest.fixture
def archive(db):
    """
    Return a factory for history rows at a given local time.

    Usage: archive(user, 'Coke', '5.00', 2025, 1, 15)
    """
    def _archive(user, product_name, price, year, month, day=1, hour=12):
        moment = timezone.make_aware(datetime(year, month, day, hour))
        return PurchaseHistory.objects.create(
            user_id=user.id,
            user_name=user.name,
            product_name=product_name,
            price=Decimal(price),
            timestamp=moment,
            month=month_key(moment),
        )
    return _archive
