"""
Serializers for analytics app.

This module contains:
1. Input serializers - Query parameter validation
2. Response serializers - camelCase output and API documentation

Input Serializers:
    RankingQuerySerializer - Validates the ranking limit

Response Serializers:
    BalanceSerializer - One user's balance
    UserBalanceSerializer - Balance row of the all-users report
    RankingEntrySerializer - Ranking row
    CategoryCountSerializer - Category mix row
    HourlyCountSerializer - Hourly histogram row
    LedgerSummarySerializer - Current cycle totals
    MonthSummarySerializer - Per-user totals for one history month
    DashboardResponseSerializer - Everything the admin dashboard shows
"""

from rest_framework import serializers


# =============================================================================
# Input Serializers (Query Parameter Validation)
# =============================================================================

class RankingQuerySerializer(serializers.Serializer):
    """
    Validate query parameters for the ranking endpoint.

    Query Parameters:
        limit (int): Number of results to return (1-100)
    """

    limit = serializers.IntegerField(
        min_value=1,
        max_value=100,
        required=False,
        default=5,
        help_text='Number of results (1-100)'
    )


# =============================================================================
# Response Serializers
# =============================================================================

class BalanceSerializer(serializers.Serializer):
    """Response serializer for a single user's balance."""
    userId = serializers.IntegerField(source='user_id')
    balance = serializers.DecimalField(max_digits=12, decimal_places=2)


class UserBalanceSerializer(serializers.Serializer):
    """Row of the balances report."""
    userId = serializers.IntegerField(source='user_id')
    name = serializers.CharField()
    count = serializers.IntegerField()
    balance = serializers.DecimalField(max_digits=12, decimal_places=2)


class RankingEntrySerializer(serializers.Serializer):
    """Row of the consumer ranking."""
    userId = serializers.IntegerField(source='user_id')
    name = serializers.CharField()
    count = serializers.IntegerField()
    spent = serializers.DecimalField(max_digits=12, decimal_places=2)


class CategoryCountSerializer(serializers.Serializer):
    """Item count for one product category."""
    type = serializers.CharField(source='category')
    label = serializers.CharField()
    count = serializers.IntegerField()


class HourlyCountSerializer(serializers.Serializer):
    """Item count for one hour of the day."""
    hour = serializers.IntegerField()
    count = serializers.IntegerField()


class LedgerSummarySerializer(serializers.Serializer):
    """Totals of the current, unsettled cycle."""
    totalRevenue = serializers.DecimalField(source='total_revenue', max_digits=12, decimal_places=2)
    totalItems = serializers.IntegerField(source='total_items')
    usersWithDebt = serializers.IntegerField(source='users_with_debt')


class MonthUserTotalSerializer(serializers.Serializer):
    """One user's purchases within a history month."""
    userId = serializers.IntegerField(source='user_id')
    userName = serializers.CharField(source='user_name')
    count = serializers.IntegerField()
    spent = serializers.DecimalField(max_digits=12, decimal_places=2)


class MonthSummarySerializer(serializers.Serializer):
    """Per-user and overall totals for one history month."""
    month = serializers.CharField()
    totalItems = serializers.IntegerField(source='total_items')
    totalSpent = serializers.DecimalField(source='total_spent', max_digits=12, decimal_places=2)
    users = MonthUserTotalSerializer(many=True)


class DashboardResponseSerializer(serializers.Serializer):
    """Response serializer for the admin dashboard."""
    summary = LedgerSummarySerializer()
    ranking = RankingEntrySerializer(many=True)
    categories = CategoryCountSerializer(many=True)
    hourly = HourlyCountSerializer(many=True)


class ErrorSerializer(serializers.Serializer):
    """Standard error response serializer."""
    message = serializers.CharField()
