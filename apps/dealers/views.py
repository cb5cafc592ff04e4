from rest_framework import viewsets
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from apps.accounts.permissions import IsAdminRole
from .models import Dealer
from .serializers import (
    AddPaymentInputSerializer,
    DealerBatchDetailSerializer,
    DealerBatchSerializer,
    DealerSerializer,
)
from .services import BatchSettlementService


class DealerViewSet(viewsets.ModelViewSet):
    """
    Admin CRUD for dealers.

    A dealer that already has batches cannot be deleted (400).
    """

    queryset = Dealer.objects.all().order_by('-created_at')
    serializer_class = DealerSerializer
    permission_classes = [IsAuthenticated, IsAdminRole]
    lookup_value_regex = '[0-9a-fA-F-]{36}'

    def destroy(self, request, *args, **kwargs):
        self.get_object().delete()
        return Response({'message': 'Dealer deleted successfully'})


class DealerBatchViewSet(viewsets.ViewSet):
    """
    Dealer batch queries and payments (admin only).

    list: All batches, newest first
    retrieve: One batch with its bookings and payments
    by_dealer: Batches of one dealer
    add_payment: Record a payment against a batch
    """

    permission_classes = [IsAuthenticated, IsAdminRole]
    lookup_value_regex = '[0-9a-fA-F-]{36}'

    @extend_schema(responses={200: DealerBatchSerializer(many=True)}, tags=['dealer-batches'])
    def list(self, request):
        batches = BatchSettlementService.list_batches().prefetch_related('payments')
        return Response(DealerBatchSerializer(batches, many=True).data)

    @extend_schema(responses={200: DealerBatchDetailSerializer}, tags=['dealer-batches'])
    def retrieve(self, request, pk=None):
        batch = BatchSettlementService.get_batch_detail(pk)
        return Response(DealerBatchDetailSerializer(batch).data)

    @extend_schema(responses={200: DealerBatchSerializer(many=True)}, tags=['dealer-batches'])
    @action(
        detail=False,
        methods=['get'],
        url_path=r'dealer/(?P<dealer_id>[0-9a-fA-F-]{36})',
        url_name='by-dealer',
    )
    def by_dealer(self, request, dealer_id=None):
        batches = BatchSettlementService.batches_for_dealer(dealer_id).prefetch_related('payments')
        return Response(DealerBatchSerializer(batches, many=True).data)

    @extend_schema(
        request=AddPaymentInputSerializer,
        responses={200: DealerBatchSerializer},
        tags=['dealer-batches'],
    )
    @action(detail=True, methods=['patch'], url_path='add-payment', url_name='add-payment')
    def add_payment(self, request, pk=None):
        serializer = AddPaymentInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        batch = BatchSettlementService.add_payment(batch_id=pk, **serializer.validated_data)
        return Response(DealerBatchSerializer(batch).data)
