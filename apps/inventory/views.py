from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, PolymorphicProxySerializer

from apps.accounts.permissions import IsAdminRole
from apps.bookings.serializers import BookingSerializer
from apps.bookings.services import mark_user_paid
from apps.dealers.serializers import DealerBatchSerializer
from apps.dealers.services import BatchSettlementService
from .queries import InventoryQueries
from .serializers import AdminStatsSerializer, AssignToDealerInputSerializer, UserStatsSerializer


@extend_schema(
    responses={200: BookingSerializer(many=True)},
    description="The caller's delivered phones, not yet handed to the admin.",
    tags=['inventory'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def user_inventory(request):
    bookings = InventoryQueries.user_inventory(request.user)
    return Response(BookingSerializer(bookings, many=True).data)


@extend_schema(
    responses={200: BookingSerializer(many=True)},
    description="Phones handed to the admin and not yet assigned to a dealer.",
    tags=['inventory'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated, IsAdminRole])
def admin_inventory(request):
    bookings = InventoryQueries.admin_inventory()
    return Response(BookingSerializer(bookings, many=True).data)


@extend_schema(
    request=AssignToDealerInputSerializer,
    responses={201: DealerBatchSerializer},
    description="Assign phones to a dealer as a new batch.",
    tags=['inventory'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated, IsAdminRole])
def assign_to_dealer(request):
    serializer = AssignToDealerInputSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    batch = BatchSettlementService.create_batch(
        dealer_id=serializer.validated_data['dealer_id'],
        booking_amounts=serializer.validated_data['booking_amounts'],
    )
    return Response({
        'message': 'Mobiles assigned to dealer in a new batch successfully',
        'batch': DealerBatchSerializer(batch).data,
    }, status=status.HTTP_201_CREATED)


@extend_schema(
    request=None,
    responses={200: BookingSerializer},
    description="Mark the owner as paid for a booking and debit the wallet.",
    tags=['inventory'],
)
@api_view(['PATCH'])
@permission_classes([IsAuthenticated, IsAdminRole])
def user_payment(request, booking_id):
    booking = mark_user_paid(booking_id=booking_id)
    return Response(BookingSerializer(booking).data)


@extend_schema(
    responses={200: PolymorphicProxySerializer(
        component_name='InventoryStats',
        serializers=[AdminStatsSerializer, UserStatsSerializer],
        resource_type_field_name=None,
    )},
    description="Dashboard counters; admins get system-wide numbers.",
    tags=['inventory'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def stats(request):
    return Response(InventoryQueries.stats_for(request.user))
