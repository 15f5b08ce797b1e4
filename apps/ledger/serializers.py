from rest_framework import serializers
from .models import Transaction, PurchaseHistory


# =============================================================================
# Input Serializers
# =============================================================================

class PurchaseInputSerializer(serializers.Serializer):
    """
    Body of POST /transactions.

    Fields:
        userId (int): The buyer
        productId (int): The product
        productName, price: Accepted for older clients and ignored; the
            server always records the catalog's current values.
    """

    userId = serializers.IntegerField(source='user_id')
    productId = serializers.IntegerField(source='product_id')
    productName = serializers.CharField(required=False, write_only=True)
    price = serializers.DecimalField(max_digits=None, decimal_places=None, required=False, write_only=True)


# =============================================================================
# Output Serializers
# =============================================================================

class TransactionSerializer(serializers.ModelSerializer):
    """Debt entry on a user's tab."""

    userId = serializers.IntegerField(source='user_id', read_only=True)
    productId = serializers.IntegerField(source='product_id', read_only=True)
    productName = serializers.CharField(source='product_name', read_only=True)
    type = serializers.CharField(source='category', read_only=True)

    class Meta:
        model = Transaction
        fields = ['id', 'userId', 'productId', 'productName', 'price', 'type', 'timestamp']
        read_only_fields = fields


class PurchaseHistorySerializer(serializers.ModelSerializer):
    """Archived purchase."""

    userId = serializers.IntegerField(source='user_id', read_only=True)
    userName = serializers.CharField(source='user_name', read_only=True)
    productName = serializers.CharField(source='product_name', read_only=True)

    class Meta:
        model = PurchaseHistory
        fields = ['id', 'userId', 'userName', 'productName', 'price', 'timestamp', 'month']
        read_only_fields = fields


class SettlementSerializer(serializers.Serializer):
    """Result of clearing one tab or all of them."""

    userId = serializers.IntegerField(source='user_id', required=False)
    settledCount = serializers.IntegerField(source='settled_count')
    settledAmount = serializers.DecimalField(source='settled_amount', max_digits=12, decimal_places=2)
