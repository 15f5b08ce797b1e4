import pytest
from decimal import Decimal
from rest_framework.test import APIClient
from apps.accounts.services import issue_admin_token
from apps.catalog.models import Product, ProductCategory


@pytest.fixture
def api_client():
    """Return an API client without an admin session."""
    return APIClient()


@pytest.fixture
def admin_client():
    """Return an API client carrying an admin session token."""
    client = APIClient()
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {issue_admin_token()}')
    return client


@pytest.fixture
def monster(db):
    """Create and return an energy drink."""
    return Product.objects.create(
        name='Monster Energy',
        price=Decimal('7.00'),
        category=ProductCategory.MONSTER,
        icon='Zap',
    )


@pytest.fixture
def coke(db):
    """Create and return a soda."""
    return Product.objects.create(
        name='Coca-Cola Zero',
        price=Decimal('5.00'),
        category=ProductCategory.COKE,
        icon='Droplets',
    )
