import uuid
from decimal import Decimal
from rest_framework import serializers


# =============================================================================
# Input Serializers
# =============================================================================

class AssignToDealerInputSerializer(serializers.Serializer):
    """
    Validate input for assigning phones to a dealer.

    Fields:
        dealer_id (UUID): Receiving dealer
        booking_ids (list[UUID]): Bookings to hand over (non-empty)
        amounts (dict): Booking id -> amount owed; a missing entry counts as 0
    """

    dealer_id = serializers.UUIDField()
    booking_ids = serializers.ListField(child=serializers.UUIDField(), allow_empty=False)
    amounts = serializers.DictField(
        child=serializers.DecimalField(
            max_digits=12,
            decimal_places=2,
            min_value=Decimal('0.00'),
        ),
    )

    def validate_amounts(self, value):
        """Key the amounts by parsed UUID so any spelling of an id matches."""
        amounts = {}
        for key, amount in value.items():
            try:
                amounts[uuid.UUID(str(key))] = amount
            except ValueError:
                raise serializers.ValidationError(f"'{key}' is not a valid booking id")
        return amounts

    def validate(self, attrs):
        amounts = attrs['amounts']
        attrs['booking_amounts'] = {
            booking_id: amounts.get(booking_id, Decimal('0.00'))
            for booking_id in attrs['booking_ids']
        }
        return attrs


# =============================================================================
# Response Serializers
# =============================================================================

class AdminStatsSerializer(serializers.Serializer):
    total_bookings = serializers.IntegerField()
    mobiles_delivered = serializers.IntegerField()
    mobiles_with_admin = serializers.IntegerField()
    mobiles_assigned_to_dealers = serializers.IntegerField()
    dealer_payment_pending = serializers.IntegerField()
    user_payment_pending = serializers.IntegerField()


class UserStatsSerializer(serializers.Serializer):
    total_bookings = serializers.IntegerField()
    mobiles_delivered = serializers.IntegerField()
    mobiles_given_to_admin = serializers.IntegerField()
    mobiles_assigned_to_dealers = serializers.IntegerField()
    payment_pending = serializers.IntegerField()
