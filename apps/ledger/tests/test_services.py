"""
Service layer unit tests for ledger app.

Tests cover:
- Dual write of tab entry and history row
- Snapshot semantics (later catalog edits and renames)
- Settlement of one user and of everyone
- Error handling without partial writes
"""

import pytest
from datetime import datetime, timezone as dt_timezone
from decimal import Decimal
from unittest.mock import patch

from django.db import DatabaseError

from apps.accounts.models import User
from apps.analytics.analytics import ReportingQueries
from apps.catalog.models import Product
from apps.ledger.exceptions import PurchaserNotFoundError, PurchasedProductNotFoundError
from apps.ledger.models import Transaction, PurchaseHistory, month_key
from apps.ledger.services import LedgerService


# =============================================================================
# Purchase Recording Tests
# =============================================================================

@pytest.mark.django_db
class TestRecordPurchase:
    """Tests for LedgerService.record_purchase()."""

    def test_purchase_writes_both_logs(self, ana, monster):
        """One purchase adds exactly one row to each log with the same snapshot."""
        entry = LedgerService.record_purchase(user_id=ana.id, product_id=monster.id)

        assert Transaction.objects.count() == 1
        assert PurchaseHistory.objects.count() == 1

        archived = PurchaseHistory.objects.get()
        assert entry.product_name == archived.product_name == 'Monster Energy'
        assert entry.price == archived.price == Decimal('7.00')
        assert entry.timestamp == archived.timestamp
        assert archived.user_id == ana.id
        assert archived.user_name == 'Ana'
        assert archived.month == month_key(entry.timestamp)
        assert entry.category == 'monster'

    def test_month_key_uses_configured_time_zone(self, ana, monster, settings):
        settings.TIME_ZONE = 'America/Sao_Paulo'
        moment = datetime(2025, 2, 1, 1, 30, tzinfo=dt_timezone.utc)

        with patch('django.utils.timezone.now', return_value=moment):
            LedgerService.record_purchase(user_id=ana.id, product_id=monster.id)

        archived = PurchaseHistory.objects.get()
        assert archived.timestamp == moment
        assert archived.month == '2025-01'

    def test_balance_grows_by_price(self, ana, monster, coke):
        LedgerService.record_purchase(user_id=ana.id, product_id=monster.id)
        assert ReportingQueries.balance_of(ana.id) == Decimal('7.00')

        LedgerService.record_purchase(user_id=ana.id, product_id=coke.id)
        assert ReportingQueries.balance_of(ana.id) == Decimal('12.00')

    def test_snapshot_survives_price_change(self, ana, monster):
        entry = LedgerService.record_purchase(user_id=ana.id, product_id=monster.id)

        Product.objects.filter(id=monster.id).update(price=Decimal('9.00'), name='Monster Ultra')

        entry.refresh_from_db()
        assert entry.price == Decimal('7.00')
        assert entry.product_name == 'Monster Energy'
        assert ReportingQueries.balance_of(ana.id) == Decimal('7.00')

    def test_history_keeps_name_after_rename(self, ana, coke):
        LedgerService.record_purchase(user_id=ana.id, product_id=coke.id)

        User.objects.filter(id=ana.id).update(name='Ana Maria')

        assert PurchaseHistory.objects.get().user_name == 'Ana'

    def test_unknown_user(self, monster):
        with pytest.raises(PurchaserNotFoundError):
            LedgerService.record_purchase(user_id=999, product_id=monster.id)

        assert Transaction.objects.count() == 0
        assert PurchaseHistory.objects.count() == 0

    def test_unknown_product(self, ana):
        with pytest.raises(PurchasedProductNotFoundError):
            LedgerService.record_purchase(user_id=ana.id, product_id=999)

        assert Transaction.objects.count() == 0
        assert PurchaseHistory.objects.count() == 0

    def test_history_failure_rolls_back_tab_entry(self, ana, monster):
        """Neither log is written when the second append fails."""
        with patch.object(PurchaseHistory.objects, 'create', side_effect=DatabaseError('disk full')):
            with pytest.raises(DatabaseError):
                LedgerService.record_purchase(user_id=ana.id, product_id=monster.id)

        assert Transaction.objects.count() == 0
        assert PurchaseHistory.objects.count() == 0

    def test_purchase_after_product_deleted_keeps_entry(self, ana, monster):
        entry = LedgerService.record_purchase(user_id=ana.id, product_id=monster.id)

        Product.objects.filter(id=monster.id).delete()

        assert Transaction.objects.filter(id=entry.id).exists()
        assert ReportingQueries.balance_of(ana.id) == Decimal('7.00')


# =============================================================================
# Settlement Tests
# =============================================================================

@pytest.mark.django_db
class TestSettlement:
    """Tests for LedgerService.settle_user() and settle_all()."""

    def test_settle_user_clears_balance_keeps_history(self, ana, carlos, monster, coke):
        LedgerService.record_purchase(user_id=ana.id, product_id=monster.id)
        LedgerService.record_purchase(user_id=ana.id, product_id=coke.id)
        LedgerService.record_purchase(user_id=carlos.id, product_id=coke.id)

        result = LedgerService.settle_user(ana.id)

        assert result == {
            'user_id': ana.id,
            'settled_count': 2,
            'settled_amount': Decimal('12.00'),
        }
        assert ReportingQueries.balance_of(ana.id) == Decimal('0.00')
        assert ReportingQueries.balance_of(carlos.id) == Decimal('5.00')
        assert PurchaseHistory.objects.count() == 3

    def test_settle_empty_tab_is_noop(self, ana):
        result = LedgerService.settle_user(ana.id)

        assert result['settled_count'] == 0
        assert result['settled_amount'] == Decimal('0.00')

    def test_settle_unknown_user(self, db):
        with pytest.raises(PurchaserNotFoundError):
            LedgerService.settle_user(999)

    def test_settle_deleted_users_leftover_debt(self, ana, monster):
        LedgerService.record_purchase(user_id=ana.id, product_id=monster.id)
        User.objects.filter(id=ana.id).delete()

        result = LedgerService.settle_user(ana.id)

        assert result['settled_count'] == 1
        assert not Transaction.objects.exists()

    def test_settle_all(self, ana, carlos, monster, coke):
        LedgerService.record_purchase(user_id=ana.id, product_id=monster.id)
        LedgerService.record_purchase(user_id=carlos.id, product_id=coke.id)

        result = LedgerService.settle_all()

        assert result == {'settled_count': 2, 'settled_amount': Decimal('12.00')}
        assert ReportingQueries.balance_of(ana.id) == Decimal('0.00')
        assert ReportingQueries.balance_of(carlos.id) == Decimal('0.00')
        assert PurchaseHistory.objects.count() == 2

    def test_settle_all_on_empty_ledger(self, db):
        assert LedgerService.settle_all() == {'settled_count': 0, 'settled_amount': Decimal('0.00')}
