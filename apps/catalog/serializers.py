from rest_framework import serializers
from .models import Product


# =============================================================================
# Input Serializers
# =============================================================================

class ProductInputSerializer(serializers.Serializer):
    """
    Body of POST /products and PATCH /products/:id.

    Range and category rules live in the catalog services; this only checks
    types. ``type`` is free text: unknown categories are stored as "other".
    """

    name = serializers.CharField(max_length=100)
    price = serializers.DecimalField(max_digits=None, decimal_places=None)
    type = serializers.CharField(source='category', max_length=20, required=False)
    icon = serializers.CharField(max_length=50, required=False, allow_null=True, allow_blank=True)
    borderColor = serializers.CharField(
        source='border_color',
        max_length=30,
        required=False,
        allow_null=True,
        allow_blank=True,
    )


class PriceInputSerializer(serializers.Serializer):
    """Body of PATCH /products/:id/price."""

    price = serializers.DecimalField(max_digits=None, decimal_places=None)


# =============================================================================
# Output Serializers
# =============================================================================

class ProductSerializer(serializers.ModelSerializer):
    """Product as the tablet client expects it."""

    type = serializers.CharField(source='category', read_only=True)
    borderColor = serializers.CharField(source='border_color', read_only=True, allow_null=True)

    class Meta:
        model = Product
        fields = ['id', 'name', 'price', 'type', 'icon', 'borderColor']
        read_only_fields = fields
