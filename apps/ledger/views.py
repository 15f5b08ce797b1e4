from rest_framework import status, viewsets
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from apps.accounts.permissions import IsAdminSession
from apps.analytics.analytics import ReportingQueries
from .models import Transaction
from .serializers import (
    PurchaseInputSerializer,
    TransactionSerializer,
    SettlementSerializer,
)
from .services import LedgerService


class TransactionViewSet(viewsets.ViewSet):
    """
    The current cycle's tab entries.

    list: All unsettled entries
    create: Record a purchase at the catalog price
    settle_all: Clear every tab and start a new cycle (admin)
    list_for_user: One user's unsettled entries, newest first
    settle_user: Mark one user's tab as paid (admin)

    Routes are bound explicitly in urls.py because settlement is a DELETE on
    the collection paths.
    """

    admin_actions = ['settle_all', 'settle_user']

    def get_permissions(self):
        """Settlement needs an admin session; reading and buying do not."""
        if self.action in self.admin_actions:
            return [IsAdminSession()]
        return [AllowAny()]

    @extend_schema(responses={200: TransactionSerializer(many=True)}, tags=['transactions'])
    def list(self, request):
        entries = Transaction.objects.order_by('timestamp', 'id')
        return Response(TransactionSerializer(entries, many=True).data)

    @extend_schema(
        request=PurchaseInputSerializer,
        responses={201: TransactionSerializer},
        description="Record a purchase at the product's current price.",
        tags=['transactions'],
    )
    def create(self, request):
        """
        Put one product on a user's tab.

        POST /api/transactions
        Body: {"userId": 3, "productId": 1}
        """
        serializer = PurchaseInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        entry = LedgerService.record_purchase(
            user_id=serializer.validated_data['user_id'],
            product_id=serializer.validated_data['product_id'],
        )
        return Response(TransactionSerializer(entry).data, status=status.HTTP_201_CREATED)

    @extend_schema(
        request=None,
        responses={200: SettlementSerializer},
        description="Clear every tab. Purchase history is kept.",
        tags=['transactions'],
    )
    def settle_all(self, request):
        result = LedgerService.settle_all()
        return Response(SettlementSerializer(result).data)

    @extend_schema(responses={200: TransactionSerializer(many=True)}, tags=['transactions'])
    def list_for_user(self, request, user_id=None):
        entries = ReportingQueries.debt_entries_of(user_id)
        return Response(TransactionSerializer(entries, many=True).data)

    @extend_schema(
        request=None,
        responses={200: SettlementSerializer},
        description="Clear one user's tab. Purchase history is kept.",
        tags=['transactions'],
    )
    def settle_user(self, request, user_id=None):
        """
        Mark a user's tab as paid.

        DELETE /api/transactions/user/{id}
        """
        result = LedgerService.settle_user(user_id)
        return Response(SettlementSerializer(result).data)
