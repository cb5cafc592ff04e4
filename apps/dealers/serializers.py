from decimal import Decimal
from rest_framework import serializers
from .models import Dealer, DealerBatch, DealerBatchPayment


# =============================================================================
# Input Serializers
# =============================================================================

class AddPaymentInputSerializer(serializers.Serializer):
    """
    Validate input for a dealer batch payment.

    Fields:
        amount (decimal): Positive amount received
        notes (str): Optional note stored with the payment
    """

    amount = serializers.DecimalField(
        max_digits=12,
        decimal_places=2,
        min_value=Decimal('0.01'),
        error_messages={'min_value': 'Payment amount must be a positive number'},
    )
    notes = serializers.CharField(max_length=500, required=False, allow_blank=True, default='')


# =============================================================================
# Output Serializers
# =============================================================================

class DealerSerializer(serializers.ModelSerializer):
    """Dealer CRUD. Running totals are maintained by batch settlement only."""

    outstanding_amount = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)

    class Meta:
        model = Dealer
        fields = [
            'id',
            'name',
            'phone',
            'address',
            'email',
            'total_mobiles',
            'total_amount',
            'paid_amount',
            'outstanding_amount',
            'created_at',
            'updated_at',
        ]
        read_only_fields = [
            'id',
            'total_mobiles',
            'total_amount',
            'paid_amount',
            'created_at',
            'updated_at',
        ]


class DealerMinimalSerializer(serializers.ModelSerializer):

    class Meta:
        model = Dealer
        fields = ['id', 'name', 'phone']
        read_only_fields = fields


class DealerBatchPaymentSerializer(serializers.ModelSerializer):

    class Meta:
        model = DealerBatchPayment
        fields = ['id', 'amount', 'notes', 'date']
        read_only_fields = fields


class DealerBatchSerializer(serializers.ModelSerializer):
    """Batch summary with its payments."""

    dealer = DealerMinimalSerializer(read_only=True)
    payments = DealerBatchPaymentSerializer(many=True, read_only=True)
    booking_ids = serializers.SerializerMethodField()

    class Meta:
        model = DealerBatch
        fields = [
            'id',
            'batch_id',
            'dealer',
            'booking_ids',
            'total_amount',
            'paid_amount',
            'remaining_amount',
            'status',
            'payments',
            'assigned_at',
        ]
        read_only_fields = fields

    def get_booking_ids(self, obj):
        return [str(pk) for pk in obj.bookings.values_list('id', flat=True)]


class DealerBatchDetailSerializer(DealerBatchSerializer):
    """Batch with full booking records."""

    bookings = serializers.SerializerMethodField()

    class Meta(DealerBatchSerializer.Meta):
        fields = DealerBatchSerializer.Meta.fields + ['bookings']
        read_only_fields = fields

    def get_bookings(self, obj):
        from apps.bookings.serializers import BookingSerializer
        return BookingSerializer(obj.bookings.all(), many=True).data
