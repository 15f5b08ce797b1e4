from rest_framework.decorators import api_view
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter, OpenApiResponse
from drf_spectacular.types import OpenApiTypes

from apps.accounts.services import get_user_by_id
from apps.ledger.models import PurchaseHistory
from apps.ledger.serializers import PurchaseHistorySerializer
from .analytics import ReportingQueries
from .serializers import (
    # Input serializers
    RankingQuerySerializer,
    # Response serializers
    BalanceSerializer,
    UserBalanceSerializer,
    RankingEntrySerializer,
    CategoryCountSerializer,
    HourlyCountSerializer,
    LedgerSummarySerializer,
    MonthSummarySerializer,
    DashboardResponseSerializer,
    ErrorSerializer,
)


DASHBOARD_RANKING_SIZE = 5


# =============================================================================
# Balances
# =============================================================================

@extend_schema(
    responses={
        200: BalanceSerializer,
        404: ErrorSerializer,
    },
    description="Get a user's current balance (sum of unsettled purchases).",
    tags=['reports'],
)
@api_view(['GET'])
def user_balance(request, user_id):
    """Get a user's balance - thin HTTP handler."""
    # Raises UserNotFoundError -> 404
    user = get_user_by_id(user_id)

    data = {
        'user_id': user.id,
        'balance': ReportingQueries.balance_of(user.id),
    }
    return Response(BalanceSerializer(data).data)


@extend_schema(
    responses={200: UserBalanceSerializer(many=True)},
    description="Get the balance and item count of every user.",
    tags=['reports'],
)
@api_view(['GET'])
def balances(request):
    """Get every user's balance."""
    return Response(UserBalanceSerializer(ReportingQueries.balances(), many=True).data)


# =============================================================================
# Current cycle reports
# =============================================================================

@extend_schema(
    parameters=[
        OpenApiParameter('limit', OpenApiTypes.INT, description='Number of results', default=5),
    ],
    responses={
        200: RankingEntrySerializer(many=True),
        400: ErrorSerializer,
    },
    description="Get the top consumers of the current cycle by number of items.",
    tags=['reports'],
)
@api_view(['GET'])
def ranking(request):
    """Get the consumer ranking - thin HTTP handler."""
    query_serializer = RankingQuerySerializer(data=request.query_params)
    query_serializer.is_valid(raise_exception=True)

    data = ReportingQueries.ranking_top(query_serializer.validated_data['limit'])
    return Response(RankingEntrySerializer(data, many=True).data)


@extend_schema(
    responses={200: CategoryCountSerializer(many=True)},
    description="Get the number of items per product category in the current cycle.",
    tags=['reports'],
)
@api_view(['GET'])
def categories(request):
    """Get the category mix."""
    return Response(CategoryCountSerializer(ReportingQueries.category_mix(), many=True).data)


@extend_schema(
    responses={200: HourlyCountSerializer(many=True)},
    description="Get the number of items per hour of day in the current cycle.",
    tags=['reports'],
)
@api_view(['GET'])
def hourly(request):
    return Response(HourlyCountSerializer(ReportingQueries.hourly_histogram(), many=True).data)


@extend_schema(
    responses={200: LedgerSummarySerializer},
    description="Get total revenue and item count of the current cycle.",
    tags=['reports'],
)
@api_view(['GET'])
def summary(request):
    return Response(LedgerSummarySerializer(ReportingQueries.ledger_summary()).data)


@extend_schema(
    responses={200: DashboardResponseSerializer},
    description="Get everything the admin dashboard shows in one call.",
    tags=['reports'],
)
@api_view(['GET'])
def dashboard(request):
    """Get summary, ranking, category mix and hourly histogram together."""
    data = {
        'summary': ReportingQueries.ledger_summary(),
        'ranking': ReportingQueries.ranking_top(DASHBOARD_RANKING_SIZE),
        'categories': ReportingQueries.category_mix(),
        'hourly': ReportingQueries.hourly_histogram(),
    }
    return Response(DashboardResponseSerializer(data).data)


# =============================================================================
# Purchase history
# =============================================================================

@extend_schema(
    responses={200: PurchaseHistorySerializer(many=True)},
    description="Get every archived purchase, newest first.",
    tags=['history'],
)
@api_view(['GET'])
def history_list(request):
    entries = PurchaseHistory.objects.order_by('-timestamp', '-id')
    return Response(PurchaseHistorySerializer(entries, many=True).data)


@extend_schema(
    responses={200: PurchaseHistorySerializer(many=True)},
    description="Get a user's archived purchases, newest first. Works for deleted users.",
    tags=['history'],
)
@api_view(['GET'])
def user_history(request, user_id):
    entries = ReportingQueries.history_of(user_id)
    return Response(PurchaseHistorySerializer(entries, many=True).data)


@extend_schema(
    responses={
        200: OpenApiResponse(
            response={'type': 'array', 'items': {'type': 'string', 'example': '2025-01'}},
            description='Month keys (YYYY-MM)',
        ),
    },
    description="Get the months that have history (YYYY-MM), most recent first.",
    tags=['history'],
)
@api_view(['GET'])
def available_months(request):
    return Response(ReportingQueries.available_months())


@extend_schema(
    responses={
        200: PurchaseHistorySerializer(many=True),
        400: ErrorSerializer,
    },
    description="Get the archived purchases of one month, newest first.",
    tags=['history'],
)
@api_view(['GET'])
def month_history(request, month):
    """Get one month of history - thin HTTP handler."""
    # Raises InvalidPeriodError -> 400
    entries = ReportingQueries.history_by_month(month)
    return Response(PurchaseHistorySerializer(entries, many=True).data)


@extend_schema(
    responses={
        200: MonthSummarySerializer,
        400: ErrorSerializer,
    },
    description="Get per-user totals for one month of history.",
    tags=['history'],
)
@api_view(['GET'])
def month_summary(request, month):
    data = ReportingQueries.month_summary(month)
    return Response(MonthSummarySerializer(data).data)
