from rest_framework import viewsets
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from .models import Card
from .serializers import AmountPayInputSerializer, CardSerializer
from .services import increase_available_limit


class CardViewSet(viewsets.ModelViewSet):
    """
    CRUD for the caller's own cards.

    amountpay: Record a repayment that raises a card's available limit
    """

    serializer_class = CardSerializer
    permission_classes = [IsAuthenticated]
    lookup_value_regex = '[0-9a-fA-F-]{36}'

    def get_queryset(self):
        return Card.objects.filter(user=self.request.user).order_by('-created_at')

    def perform_create(self, serializer):
        serializer.save(user=self.request.user)

    def destroy(self, request, *args, **kwargs):
        self.get_object().delete()
        return Response({'message': 'Card deleted successfully'})

    @extend_schema(request=AmountPayInputSerializer, tags=['cards'])
    @action(detail=False, methods=['post'], url_path='amountpay', url_name='amountpay')
    def amountpay(self, request):
        serializer = AmountPayInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        card = increase_available_limit(
            card_id=serializer.validated_data['id'],
            user=request.user,
            amount=serializer.validated_data['amount'],
        )
        return Response({
            'message': 'Available limit updated',
            'available_limit': card.available_limit,
        })
