from decimal import Decimal
from rest_framework import serializers
from .models import Wallet, WalletTransaction


class ProfitInputSerializer(serializers.Serializer):
    """
    Validate input for profit withdrawal / deposit.

    Fields:
        amount (decimal): Positive amount
        notes (str): Optional free text copied into the description
    """

    amount = serializers.DecimalField(
        max_digits=12,
        decimal_places=2,
        min_value=Decimal('0.01'),
        error_messages={'min_value': 'Amount must be a positive number'},
    )
    notes = serializers.CharField(max_length=300, required=False, allow_blank=True, default='')


class WalletTransactionSerializer(serializers.ModelSerializer):

    class Meta:
        model = WalletTransaction
        fields = [
            'id',
            'type',
            'amount',
            'description',
            'related_booking',
            'related_batch',
            'date',
        ]
        read_only_fields = fields


class WalletSerializer(serializers.ModelSerializer):
    """Wallet with its full history, newest first."""

    transactions = serializers.SerializerMethodField()

    class Meta:
        model = Wallet
        fields = ['id', 'name', 'balance', 'transactions']
        read_only_fields = fields

    def get_transactions(self, obj):
        # supplied by the view from get_wallet_with_transactions()
        return WalletTransactionSerializer(self.context['transactions'], many=True).data
