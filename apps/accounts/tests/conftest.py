import pytest
from rest_framework.test import APIClient
from apps.accounts.models import User
from apps.accounts.services import issue_admin_token


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
def user(db):
    """Create and return a user still on the default PIN."""
    return User.objects.create(name='Ana')


@pytest.fixture
def other_user(db):
    """Create and return another user on the default PIN."""
    return User.objects.create(name='Carlos')


@pytest.fixture
def user_with_pin(db):
    """Create and return a user who already picked a personal PIN."""
    return User.objects.create(name='Beatriz', pin='4321', must_reset_pin=False)
