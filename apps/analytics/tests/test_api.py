import pytest
from decimal import Decimal
from django.urls import reverse
from rest_framework import status
from apps.ledger.services import LedgerService


def buy(user, product, times=1):
    for _ in range(times):
        LedgerService.record_purchase(user_id=user.id, product_id=product.id)


# =============================================================================
# Balance Tests
# =============================================================================

@pytest.mark.django_db
class TestUserBalance:
    """Tests for GET /api/users/{id}/balance"""

    def test_balance(self, api_client, ana, monster, coke):
        buy(ana, monster)
        buy(ana, coke)

        url = reverse('analytics:user-balance', kwargs={'user_id': ana.id})
        response = api_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data == {'userId': ana.id, 'balance': Decimal('12.00')}

    def test_balance_missing_user(self, api_client):
        url = reverse('analytics:user-balance', kwargs={'user_id': 999})
        response = api_client.get(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_balances_report(self, api_client, ana, carlos, coke):
        buy(carlos, coke)

        response = api_client.get(reverse('analytics:balances'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data[0]['balance'] == Decimal('0.00')
        assert response.data[1] == {
            'userId': carlos.id,
            'name': 'Carlos',
            'count': 1,
            'balance': Decimal('5.00'),
        }


# =============================================================================
# Report Tests
# =============================================================================

@pytest.mark.django_db
class TestReports:
    """Tests for /api/reports/*"""

    def test_ranking_default_limit(self, api_client, ana, carlos, beatriz, coke):
        buy(beatriz, coke, times=2)

        response = api_client.get(reverse('analytics:ranking'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data[0]['name'] == 'Beatriz'
        assert response.data[0]['spent'] == Decimal('10.00')
        assert len(response.data) == 3

    def test_ranking_limit(self, api_client, ana, carlos, beatriz):
        response = api_client.get(reverse('analytics:ranking'), {'limit': 1})

        assert len(response.data) == 1

    def test_ranking_invalid_limit(self, api_client):
        response = api_client.get(reverse('analytics:ranking'), {'limit': 0})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'limit' in response.data['errors']

    def test_categories(self, api_client, ana, monster):
        buy(ana, monster)

        response = api_client.get(reverse('analytics:categories'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data[0] == {'type': 'monster', 'label': 'Monster', 'count': 1}
        assert [row['type'] for row in response.data] == ['monster', 'coke', 'other']

    def test_hourly(self, api_client, db):
        response = api_client.get(reverse('analytics:hourly'))

        assert response.status_code == status.HTTP_200_OK
        assert len(response.data) == 24

    def test_summary(self, api_client, ana, monster, coke):
        buy(ana, monster)
        buy(ana, coke)

        response = api_client.get(reverse('analytics:summary'))

        assert response.data == {
            'totalRevenue': Decimal('12.00'),
            'totalItems': 2,
            'usersWithDebt': 1,
        }

    def test_dashboard(self, api_client, ana, monster):
        buy(ana, monster)

        response = api_client.get(reverse('analytics:dashboard'))

        assert response.status_code == status.HTTP_200_OK
        assert set(response.data) == {'summary', 'ranking', 'categories', 'hourly'}
        assert response.data['summary']['totalItems'] == 1
        assert response.data['ranking'][0]['userId'] == ana.id


# =============================================================================
# History Tests
# =============================================================================

@pytest.mark.django_db
class TestHistory:
    """Tests for /api/history/*"""

    def test_history_survives_settlement(self, api_client, ana, coke):
        buy(ana, coke)
        LedgerService.settle_user(ana.id)

        response = api_client.get(reverse('analytics:history-list'))

        assert response.status_code == status.HTTP_200_OK
        assert len(response.data) == 1
        row = response.data[0]
        assert row['userId'] == ana.id
        assert row['userName'] == 'Ana'
        assert row['productName'] == 'Coca-Cola Zero'
        assert row['price'] == Decimal('5.00')

    def test_user_history(self, api_client, ana, carlos, coke):
        buy(ana, coke)
        buy(carlos, coke)

        url = reverse('analytics:user-history', kwargs={'user_id': carlos.id})
        response = api_client.get(url)

        assert [row['userName'] for row in response.data] == ['Carlos']

    def test_months(self, api_client, ana, archive):
        archive(ana, 'Coke', '5.00', 2025, 1, 15)
        archive(ana, 'Coke', '5.00', 2025, 2, 15)

        response = api_client.get(reverse('analytics:history-months'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data == ['2025-02', '2025-01']

    def test_month_history(self, api_client, ana, archive):
        archive(ana, 'Coke', '5.00', 2025, 1, 15)
        archive(ana, 'Coke', '5.00', 2025, 2, 15)

        url = reverse('analytics:month-history', kwargs={'month': '2025-01'})
        response = api_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert [row['month'] for row in response.data] == ['2025-01']

    def test_month_history_malformed(self, api_client):
        url = reverse('analytics:month-history', kwargs={'month': '2025-13'})
        response = api_client.get(url)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'message' in response.data

    def test_month_summary(self, api_client, ana, carlos, archive):
        archive(ana, 'Coke', '5.00', 2025, 1, 15)
        archive(carlos, 'Monster', '7.00', 2025, 1, 16)

        url = reverse('analytics:month-summary', kwargs={'month': '2025-01'})
        response = api_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['totalItems'] == 2
        assert response.data['totalSpent'] == Decimal('12.00')
        assert response.data['users'][0]['userName'] == 'Carlos'


# =============================================================================
# Schema Tests
# =============================================================================

@pytest.mark.django_db
class TestSchema:
    """Tests for GET /api/schema"""

    def test_months_documented_as_string_list(self, api_client):
        response = api_client.get(reverse('api-schema'), {'format': 'json'})

        assert response.status_code == status.HTTP_200_OK
        operation = response.data['paths']['/api/history/months']['get']
        schema = operation['responses']['200']['content']['application/json']['schema']
        assert schema['type'] == 'array'
        assert schema['items']['type'] == 'string'
