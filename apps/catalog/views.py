from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from apps.accounts.permissions import IsAdminSession
from .models import Product
from .serializers import (
    ProductInputSerializer,
    PriceInputSerializer,
    ProductSerializer,
)
from . import services


class ProductViewSet(viewsets.ViewSet):
    """
    Catalog endpoints.

    list: All products (open)
    retrieve: One product (open)
    create: Add a product (admin)
    partial_update: Edit a product (admin)
    price: Inline price change (admin)
    destroy: Remove a product; past tab entries keep their snapshot (admin)
    """

    lookup_value_regex = r'\d+'

    def get_permissions(self):
        """Anyone can read the catalog; changes need an admin session."""
        if self.action in ['list', 'retrieve']:
            return [AllowAny()]
        return [IsAdminSession()]

    @extend_schema(responses={200: ProductSerializer(many=True)}, tags=['products'])
    def list(self, request):
        products = Product.objects.order_by('id')
        return Response(ProductSerializer(products, many=True).data)

    @extend_schema(responses={200: ProductSerializer}, tags=['products'])
    def retrieve(self, request, pk=None):
        product = services.get_product_by_id(int(pk))
        return Response(ProductSerializer(product).data)

    @extend_schema(request=ProductInputSerializer, responses={201: ProductSerializer}, tags=['products'])
    def create(self, request):
        serializer = ProductInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        product = services.create_product(**serializer.validated_data)
        return Response(ProductSerializer(product).data, status=status.HTTP_201_CREATED)

    @extend_schema(request=ProductInputSerializer, responses={200: ProductSerializer}, tags=['products'])
    def partial_update(self, request, pk=None):
        serializer = ProductInputSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        product = services.update_product(product_id=int(pk), data=serializer.validated_data)
        return Response(ProductSerializer(product).data)

    @extend_schema(responses={204: None}, tags=['products'])
    def destroy(self, request, pk=None):
        services.delete_product(product_id=int(pk))
        return Response(status=status.HTTP_204_NO_CONTENT)

    @extend_schema(request=PriceInputSerializer, responses={200: ProductSerializer}, tags=['products'])
    @action(detail=True, methods=['patch'])
    def price(self, request, pk=None):
        """
        Change the unit price only.

        PATCH /api/products/{id}/price
        Body: {"price": 6.5}
        """
        serializer = PriceInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        product = services.set_price(product_id=int(pk), price=serializer.validated_data['price'])
        return Response(ProductSerializer(product).data)
