import pytest
from decimal import Decimal
from unittest.mock import patch
from django.db import DatabaseError
from django.urls import reverse
from rest_framework import status
from apps.accounts.models import User
from apps.ledger.models import Transaction, PurchaseHistory
from apps.ledger.services import LedgerService


# =============================================================================
# Purchase Tests
# =============================================================================

@pytest.mark.django_db
class TestRecordPurchase:
    """Tests for POST /api/transactions"""

    def test_record_purchase(self, api_client, ana, monster):
        url = reverse('ledger:transaction-list')
        response = api_client.post(url, {'userId': ana.id, 'productId': monster.id}, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['userId'] == ana.id
        assert response.data['productId'] == monster.id
        assert response.data['productName'] == 'Monster Energy'
        assert response.data['price'] == Decimal('7.00')
        assert response.data['type'] == 'monster'
        assert 'timestamp' in response.data
        assert PurchaseHistory.objects.count() == 1

    def test_client_price_is_ignored(self, api_client, ana, monster):
        """The catalog price is recorded, not whatever the client sent."""
        url = reverse('ledger:transaction-list')
        data = {
            'userId': ana.id,
            'productId': monster.id,
            'productName': 'Free Drink',
            'price': 0,
        }
        response = api_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['price'] == Decimal('7.00')
        assert response.data['productName'] == 'Monster Energy'

    def test_unknown_user(self, api_client, monster):
        url = reverse('ledger:transaction-list')
        response = api_client.post(url, {'userId': 999, 'productId': monster.id}, format='json')

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert not Transaction.objects.exists()

    def test_unknown_product(self, api_client, ana):
        url = reverse('ledger:transaction-list')
        response = api_client.post(url, {'userId': ana.id, 'productId': 999}, format='json')

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert not PurchaseHistory.objects.exists()

    def test_storage_failure_is_reported_as_server_error(self, api_client, ana, monster):
        url = reverse('ledger:transaction-list')
        with patch.object(LedgerService, 'record_purchase', side_effect=DatabaseError('locked')):
            response = api_client.post(url, {'userId': ana.id, 'productId': monster.id}, format='json')

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert 'message' in response.data

    def test_missing_fields(self, api_client):
        url = reverse('ledger:transaction-list')
        response = api_client.post(url, {}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'userId' in response.data['errors']
        assert 'productId' in response.data['errors']


# =============================================================================
# Tab Listing Tests
# =============================================================================

@pytest.mark.django_db
class TestListTransactions:
    """Tests for GET /api/transactions and /api/transactions/user/{id}"""

    def test_list_all_entries(self, api_client, ana, carlos, monster, coke):
        LedgerService.record_purchase(user_id=ana.id, product_id=monster.id)
        LedgerService.record_purchase(user_id=carlos.id, product_id=coke.id)

        response = api_client.get(reverse('ledger:transaction-list'))

        assert response.status_code == status.HTTP_200_OK
        assert [row['userId'] for row in response.data] == [ana.id, carlos.id]

    def test_user_entries_newest_first(self, api_client, ana, carlos, monster, coke):
        first = LedgerService.record_purchase(user_id=ana.id, product_id=monster.id)
        second = LedgerService.record_purchase(user_id=ana.id, product_id=coke.id)
        LedgerService.record_purchase(user_id=carlos.id, product_id=coke.id)

        url = reverse('ledger:user-transactions', kwargs={'user_id': ana.id})
        response = api_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert [row['id'] for row in response.data] == [second.id, first.id]

    def test_entries_of_deleted_user_still_listed(self, api_client, ana, monster):
        LedgerService.record_purchase(user_id=ana.id, product_id=monster.id)
        User.objects.filter(id=ana.id).delete()

        url = reverse('ledger:user-transactions', kwargs={'user_id': ana.id})
        response = api_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert len(response.data) == 1


# =============================================================================
# Settlement Tests
# =============================================================================

@pytest.mark.django_db
class TestSettlement:
    """Tests for DELETE /api/transactions and /api/transactions/user/{id}"""

    def test_settle_user(self, admin_client, ana, carlos, monster, coke):
        LedgerService.record_purchase(user_id=ana.id, product_id=monster.id)
        LedgerService.record_purchase(user_id=carlos.id, product_id=coke.id)

        url = reverse('ledger:user-transactions', kwargs={'user_id': ana.id})
        response = admin_client.delete(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['settledCount'] == 1
        assert response.data['settledAmount'] == Decimal('7.00')
        assert not Transaction.objects.filter(user_id=ana.id).exists()
        assert Transaction.objects.filter(user_id=carlos.id).count() == 1
        assert PurchaseHistory.objects.count() == 2

    def test_settle_user_requires_admin(self, api_client, ana, monster):
        LedgerService.record_purchase(user_id=ana.id, product_id=monster.id)

        url = reverse('ledger:user-transactions', kwargs={'user_id': ana.id})
        response = api_client.delete(url)

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert Transaction.objects.count() == 1

    def test_settle_unknown_user(self, admin_client):
        url = reverse('ledger:user-transactions', kwargs={'user_id': 999})
        response = admin_client.delete(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_settle_all(self, admin_client, ana, carlos, monster, coke):
        LedgerService.record_purchase(user_id=ana.id, product_id=monster.id)
        LedgerService.record_purchase(user_id=carlos.id, product_id=coke.id)

        response = admin_client.delete(reverse('ledger:transaction-list'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['settledCount'] == 2
        assert response.data['settledAmount'] == Decimal('12.00')
        assert not Transaction.objects.exists()
        assert PurchaseHistory.objects.count() == 2

    def test_settle_all_requires_admin(self, api_client, ana, monster):
        LedgerService.record_purchase(user_id=ana.id, product_id=monster.id)

        response = api_client.delete(reverse('ledger:transaction-list'))

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert Transaction.objects.count() == 1
