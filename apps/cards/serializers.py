from decimal import Decimal
from rest_framework import serializers
from .models import Card


class AmountPayInputSerializer(serializers.Serializer):
    id = serializers.UUIDField()
    amount = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=Decimal('0.01'))


class CardSerializer(serializers.ModelSerializer):
    """Owner-scoped card. ``available_limit`` defaults to ``limit`` on create."""

    available_limit = serializers.DecimalField(max_digits=12, decimal_places=2, required=False)

    class Meta:
        model = Card
        fields = [
            'id',
            'alias',
            'bank_name',
            'last_four',
            'card_type',
            'is_active',
            'limit',
            'available_limit',
            'created_at',
            'updated_at',
        ]
        read_only_fields = ['id', 'created_at', 'updated_at']

    def create(self, validated_data):
        validated_data.setdefault('available_limit', validated_data.get('limit', Decimal('0.00')))
        return super().create(validated_data)
