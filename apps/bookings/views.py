from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.pagination import PageNumberPagination
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import extend_schema

from apps.accounts.permissions import IsAdminRole
from .serializers import (
    BookingSerializer,
    BookingCreateSerializer,
    BookingUpdateSerializer,
    # Input serializers
    BookingFilterSerializer,
    BookingExportSerializer,
    BookingStatusInputSerializer,
    MarkUserPaidInputSerializer,
)
from .services import (
    create_booking,
    delete_booking,
    export_bookings,
    get_booking_for_user,
    list_bookings,
    mark_user_paid,
    update_booking,
    update_booking_status,
)


class BookingPagination(PageNumberPagination):
    """Custom pagination for bookings."""
    page_size = 20
    page_size_query_param = 'page_size'
    max_page_size = 100


class BookingViewSet(viewsets.GenericViewSet):
    """
    ViewSet for bookings.

    list: Bookings visible to the caller (admins see all), filterable
    create: Book a phone
    retrieve: Get a booking
    update / partial_update: Change the fields the caller's role may write
    destroy: Delete a booking
    update_status: Move to any status
    mark_user_paid: Settle the owner's payout (admin)
    export: CSV / JSON download
    """

    serializer_class = BookingSerializer
    permission_classes = [IsAuthenticated]
    pagination_class = BookingPagination
    lookup_value_regex = '[0-9a-fA-F-]{36}'

    def get_permissions(self):
        if self.action == 'mark_user_paid':
            return [IsAuthenticated(), IsAdminRole()]
        return super().get_permissions()

    def get_queryset(self):
        filter_serializer = BookingFilterSerializer(data=self.request.query_params)
        filter_serializer.is_valid(raise_exception=True)
        return list_bookings(user=self.request.user, filters=filter_serializer.validated_data)

    @extend_schema(parameters=[BookingFilterSerializer], tags=['bookings'])
    def list(self, request):
        queryset = self.get_queryset()
        page = self.paginate_queryset(queryset)
        if page is not None:
            return self.get_paginated_response(BookingSerializer(page, many=True).data)
        return Response(BookingSerializer(queryset, many=True).data)

    @extend_schema(request=BookingCreateSerializer, responses={201: BookingSerializer}, tags=['bookings'])
    def create(self, request):
        serializer = BookingCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        booking = create_booking(user=request.user, **serializer.validated_data)
        return Response(BookingSerializer(booking).data, status=status.HTTP_201_CREATED)

    @extend_schema(responses={200: BookingSerializer}, tags=['bookings'])
    def retrieve(self, request, pk=None):
        booking = get_booking_for_user(booking_id=pk, user=request.user)
        return Response(BookingSerializer(booking).data)

    @extend_schema(request=BookingUpdateSerializer, responses={200: BookingSerializer}, tags=['bookings'])
    def update(self, request, pk=None):
        serializer = BookingUpdateSerializer(
            data=request.data,
            partial=True,
            context={'request': request},
        )
        serializer.is_valid(raise_exception=True)

        booking = update_booking(booking_id=pk, user=request.user, data=serializer.validated_data)
        return Response(BookingSerializer(booking).data)

    def partial_update(self, request, pk=None):
        return self.update(request, pk=pk)

    @extend_schema(tags=['bookings'])
    def destroy(self, request, pk=None):
        delete_booking(booking_id=pk, user=request.user)
        return Response({'message': 'Booking deleted successfully'})

    @extend_schema(request=BookingStatusInputSerializer, responses={200: BookingSerializer}, tags=['bookings'])
    @action(detail=True, methods=['patch'], url_path='status', url_name='status')
    def update_status(self, request, pk=None):
        serializer = BookingStatusInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        booking = update_booking_status(
            booking_id=pk,
            user=request.user,
            status=serializer.validated_data['status'],
        )
        return Response(BookingSerializer(booking).data)

    @extend_schema(request=MarkUserPaidInputSerializer, responses={200: BookingSerializer}, tags=['bookings'])
    @action(detail=True, methods=['patch'], url_path='mark-user-paid', url_name='mark-user-paid')
    def mark_user_paid(self, request, pk=None):
        serializer = MarkUserPaidInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        booking = mark_user_paid(booking_id=pk, selling_price=serializer.validated_data.get('selling_price'))
        return Response(BookingSerializer(booking).data)

    @extend_schema(
        parameters=[BookingExportSerializer],
        responses={200: OpenApiTypes.BINARY},
        tags=['bookings'],
    )
    @action(detail=False, methods=['get'], url_path='export', url_name='export')
    def export(self, request):
        serializer = BookingExportSerializer(data=request.query_params)
        serializer.is_valid(raise_exception=True)

        return export_bookings(user=request.user, **serializer.validated_data)
