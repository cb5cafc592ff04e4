from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from apps.accounts.permissions import IsAdminRole
from .serializers import ProfitInputSerializer, WalletSerializer
from .services import add_profit, get_wallet_with_transactions, withdraw_profit


def _wallet_response():
    wallet, transactions = get_wallet_with_transactions()
    return Response(WalletSerializer(wallet, context={'transactions': transactions}).data)


@extend_schema(
    responses={200: WalletSerializer},
    description="Admin wallet balance and transaction history (newest first).",
    tags=['wallet'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated, IsAdminRole])
def wallet_detail(request):
    return _wallet_response()


@extend_schema(
    request=ProfitInputSerializer,
    responses={200: WalletSerializer},
    description="Withdraw profit from the admin wallet.",
    tags=['wallet'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated, IsAdminRole])
def withdraw_profit_view(request):
    """
    Record a profit withdrawal.

    Kept at ``/add-profit`` for existing clients even though it lowers
    the balance.
    """
    serializer = ProfitInputSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    withdraw_profit(user=request.user, **serializer.validated_data)
    return _wallet_response()


@extend_schema(
    request=ProfitInputSerializer,
    responses={200: WalletSerializer},
    description="Deposit profit into the admin wallet.",
    tags=['wallet'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated, IsAdminRole])
def deposit_profit_view(request):
    serializer = ProfitInputSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    add_profit(user=request.user, **serializer.validated_data)
    return _wallet_response()
