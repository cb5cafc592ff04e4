from rest_framework import serializers
from apps.accounts.serializers import UserMinimalSerializer
from apps.dealers.models import Dealer
from .models import Booking, BookingStatus
from .policies import editable_fields_for


# =============================================================================
# Input Serializers
# =============================================================================

class BookingFilterSerializer(serializers.Serializer):
    """
    Validate query parameters for booking listing.

    Query Parameters:
        status (str): Booking status
        platform (str): Exact platform name
        card (str): Exact card alias
        mobile_model (str): Case-insensitive substring
        date_from (date): booking_date lower bound (inclusive)
        date_to (date): booking_date upper bound (inclusive)
        user (UUID): Owner, honoured for admins only
    """

    status = serializers.ChoiceField(choices=BookingStatus.choices, required=False)
    platform = serializers.CharField(required=False)
    card = serializers.CharField(required=False)
    mobile_model = serializers.CharField(required=False)
    date_from = serializers.DateField(required=False)
    date_to = serializers.DateField(required=False)
    user = serializers.UUIDField(required=False)

    def validate(self, attrs):
        date_from = attrs.get('date_from')
        date_to = attrs.get('date_to')

        if date_from and date_to and date_from > date_to:
            raise serializers.ValidationError({
                'date_to': 'End date must be after start date'
            })

        return attrs


class BookingExportSerializer(serializers.Serializer):
    date_from = serializers.DateField(required=False)
    date_to = serializers.DateField(required=False)
    export_format = serializers.ChoiceField(choices=['csv', 'json'], default='csv')


class BookingStatusInputSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=BookingStatus.choices)


class MarkUserPaidInputSerializer(serializers.Serializer):
    """Optional selling price override; negative values are ignored."""

    selling_price = serializers.DecimalField(
        max_digits=12,
        decimal_places=2,
        required=False,
        allow_null=True,
    )


class BookingCreateSerializer(serializers.ModelSerializer):

    class Meta:
        model = Booking
        fields = [
            'booking_date',
            'mobile_model',
            'booking_price',
            'selling_price',
            'platform',
            'card',
            'notes',
        ]


class BookingUpdateSerializer(serializers.ModelSerializer):
    """
    Partial update input.

    Fields the requesting user's role may not write are removed from the
    serializer, so they are neither validated nor returned.
    """

    assigned_to_dealer = serializers.PrimaryKeyRelatedField(
        queryset=Dealer.objects.all(),
        required=False,
        allow_null=True,
    )

    class Meta:
        model = Booking
        fields = [
            'booking_date',
            'mobile_model',
            'booking_price',
            'selling_price',
            'platform',
            'card',
            'notes',
            'booking_account',
            'dealer',
            'booking_id',
            'assigned_to_dealer',
            'dealer_amount',
            'status',
        ]

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        request = self.context.get('request')
        if request is not None:
            allowed = editable_fields_for(request.user)
            for name in list(self.fields):
                if name not in allowed:
                    self.fields.pop(name)


# =============================================================================
# Output Serializers
# =============================================================================

class BookingSerializer(serializers.ModelSerializer):
    """Full booking representation."""

    user = UserMinimalSerializer(read_only=True)
    dealer_batch_code = serializers.CharField(source='dealer_batch.batch_id', read_only=True, default=None)
    assigned_to_dealer_name = serializers.CharField(source='assigned_to_dealer.name', read_only=True, default=None)

    class Meta:
        model = Booking
        fields = [
            'id',
            'user',
            'booking_date',
            'mobile_model',
            'booking_price',
            'selling_price',
            'platform',
            'booking_account',
            'card',
            'dealer',
            'booking_id',
            'notes',
            'status',
            'assigned_to_dealer',
            'assigned_to_dealer_name',
            'dealer_batch',
            'dealer_batch_code',
            'given_to_admin_at',
            'assigned_to_dealer_at',
            'dealer_payment_received',
            'dealer_payment_date',
            'user_payment_given',
            'user_payment_date',
            'dealer_amount',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields
