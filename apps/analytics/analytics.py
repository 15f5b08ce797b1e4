"""
Reporting Module
=================

Read-only queries over the tab ledger and the purchase history. They power
the balance badges on the tablet, the admin dashboard and the monthly
history screens.

Classes:
    ReportingQueries: Static methods for balances, rankings and breakdowns.

Two sources are queried:
    - ``Transaction``: the current, unsettled cycle. Balances, ranking,
      category mix and the hourly histogram are computed from it, so they
      reset when tabs are settled.
    - ``PurchaseHistory``: every purchase ever made, grouped by month key.

Example:
    Getting a user's balance::

        from apps.analytics.analytics import ReportingQueries

        balance = ReportingQueries.balance_of(user.id)
        top = ReportingQueries.ranking_top(5)

Note:
    Balances are never stored; every call sums the rows. Month keys and
    hour buckets follow the ``TIME_ZONE`` setting.
"""

import re
from decimal import Decimal

from django.db.models import Sum, Count, Max, Value, DecimalField
from django.db.models.functions import Coalesce, ExtractHour

from apps.accounts.models import User
from apps.catalog.models import ProductCategory
from apps.ledger.models import Transaction, PurchaseHistory
from .exceptions import InvalidPeriodError


MONTH_PATTERN = re.compile(r'\d{4}-(0[1-9]|1[0-2])')

ZERO = Decimal('0.00')
CENT = Decimal('0.01')


def _money(value):
    """Normalize an aggregate result to a two-place Decimal."""
    if value is None:
        return ZERO
    return Decimal(value).quantize(CENT)


def _sum_price(field='price'):
    return Coalesce(
        Sum(field),
        Value(ZERO),
        output_field=DecimalField(max_digits=12, decimal_places=2),
    )


class ReportingQueries:
    """
    Aggregations for the reporting endpoints.

    Methods:
        balance_of: Current debt of one user.
        balances: Current debt and item count of every user.
        debt_entries_of: A user's unsettled entries.
        history_of: A user's archived purchases.
        ranking_top: Top consumers of the current cycle.
        category_mix: Item count per product category.
        hourly_histogram: Item count per hour of day.
        available_months: Months that have history.
        history_by_month: Archived purchases of one month.
        month_summary: Per-user totals for one month.
        ledger_summary: Revenue and item count of the current cycle.

    Note:
        All methods return plain dictionaries, lists or querysets, never
        modify data, and can be called without instantiation.
    """

    # =========================================================================
    # Balances
    # =========================================================================

    @staticmethod
    def balance_of(user_id):
        """
        Sum of the user's unsettled entries.

        Args:
            user_id (int): The user's id. Orphaned entries of a deleted user
                are still summed.

        Returns:
            Decimal: The balance, ``0.00`` when the tab is empty.
        """
        total = Transaction.objects.filter(user_id=user_id).aggregate(
            total=_sum_price()
        )['total']
        return _money(total)

    @staticmethod
    def balances():
        """
        Balance and item count for every registered user, in registry order.

        Returns:
            list[dict]: Each with ``user_id``, ``name``, ``count`` and ``balance``.
        """
        users = User.objects.annotate(
            item_count=Count('debt_entries'),
            balance=_sum_price('debt_entries__price'),
        ).order_by('id')

        return [
            {
                'user_id': user.id,
                'name': user.name,
                'count': user.item_count,
                'balance': _money(user.balance),
            }
            for user in users
        ]

    @staticmethod
    def debt_entries_of(user_id):
        """The user's unsettled entries, newest first."""
        return Transaction.objects.filter(user_id=user_id).order_by('-timestamp', '-id')

    @staticmethod
    def history_of(user_id):
        """The user's archived purchases, newest first."""
        return PurchaseHistory.objects.filter(user_id=user_id).order_by('-timestamp', '-id')

    # =========================================================================
    # Current cycle breakdowns
    # =========================================================================

    @staticmethod
    def ranking_top(n=5):
        """
        Users ordered by number of unsettled items.

        Ties keep registry order (ascending id). Users with an empty tab are
        included after everyone who bought something.

        Args:
            n (int): Maximum number of rows.

        Returns:
            list[dict]: Each with ``user_id``, ``name``, ``count`` and ``spent``.
        """
        users = User.objects.annotate(
            item_count=Count('debt_entries'),
            spent=_sum_price('debt_entries__price'),
        ).order_by('-item_count', 'id')[:n]

        return [
            {
                'user_id': user.id,
                'name': user.name,
                'count': user.item_count,
                'spent': _money(user.spent),
            }
            for user in users
        ]

    @staticmethod
    def category_mix():
        """
        Number of unsettled items per product category.

        The category is the one frozen on each entry, so deleting or
        re-categorizing a product does not change past counts. Every
        category is present, zero-filled.

        Returns:
            list[dict]: Each with ``category``, ``label`` and ``count``.
        """
        counts = {category: 0 for category in ProductCategory.values}

        rows = (
            Transaction.objects
            .order_by()
            .values('category')
            .annotate(item_count=Count('id'))
        )
        for row in rows:
            counts[ProductCategory.normalize(row['category'])] += row['item_count']

        return [
            {
                'category': category,
                'label': ProductCategory(category).label,
                'count': counts[category],
            }
            for category in ProductCategory.values
        ]

    @staticmethod
    def hourly_histogram():
        """
        Number of unsettled items per local hour of day.

        Returns:
            list[dict]: 24 rows, ``hour`` 0-23 with its ``count``.
        """
        counts = [0] * 24

        rows = (
            Transaction.objects
            .annotate(hour=ExtractHour('timestamp'))
            .order_by()
            .values('hour')
            .annotate(item_count=Count('id'))
        )
        for row in rows:
            counts[row['hour']] += row['item_count']

        return [{'hour': hour, 'count': count} for hour, count in enumerate(counts)]

    @staticmethod
    def ledger_summary():
        """
        Totals of the current cycle for the admin dashboard header.

        Returns:
            dict: ``total_revenue``, ``total_items`` and ``users_with_debt``.
        """
        totals = Transaction.objects.aggregate(
            total_revenue=_sum_price(),
            total_items=Count('id'),
            users_with_debt=Count('user', distinct=True),
        )
        return {
            'total_revenue': _money(totals['total_revenue']),
            'total_items': totals['total_items'],
            'users_with_debt': totals['users_with_debt'],
        }

    # =========================================================================
    # History
    # =========================================================================

    @staticmethod
    def validate_month(month):
        """Raise InvalidPeriodError unless ``month`` is a YYYY-MM key."""
        if not isinstance(month, str) or not MONTH_PATTERN.fullmatch(month):
            raise InvalidPeriodError(f"Invalid month '{month}'. Use YYYY-MM.")
        return month

    @staticmethod
    def available_months():
        """Distinct month keys that have history, most recent first."""
        return list(
            PurchaseHistory.objects
            .order_by('-month')
            .values_list('month', flat=True)
            .distinct()
        )

    @staticmethod
    def history_by_month(month):
        """
        Archived purchases of one month, newest first.

        Raises:
            InvalidPeriodError: If ``month`` is not YYYY-MM.
        """
        ReportingQueries.validate_month(month)
        return PurchaseHistory.objects.filter(month=month).order_by('-timestamp', '-id')

    @staticmethod
    def month_summary(month):
        """
        Per-user totals for one month of history.

        Rows are grouped by user id, so users deleted since still appear
        under the name they had at purchase time.

        Args:
            month (str): Month key, YYYY-MM.

        Returns:
            dict: ``month``, ``total_items``, ``total_spent`` and ``users``,
            a list of ``user_id``, ``user_name``, ``count``, ``spent`` ordered
            by spending.

        Raises:
            InvalidPeriodError: If ``month`` is not YYYY-MM.
        """
        ReportingQueries.validate_month(month)

        rows = (
            PurchaseHistory.objects
            .filter(month=month)
            .order_by()
            .values('user_id')
            .annotate(
                user_name=Max('user_name'),
                item_count=Count('id'),
                spent=_sum_price(),
            )
            .order_by('-spent', 'user_id')
        )

        users = [
            {
                'user_id': row['user_id'],
                'user_name': row['user_name'],
                'count': row['item_count'],
                'spent': _money(row['spent']),
            }
            for row in rows
        ]

        return {
            'month': month,
            'total_items': sum(row['count'] for row in users),
            'total_spent': _money(sum((row['spent'] for row in users), ZERO)),
            'users': users,
        }
