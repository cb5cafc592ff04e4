from django.db import models
from django.core.validators import MinValueValidator
from decimal import Decimal
import uuid


class TransactionType(models.TextChoices):
    CREDIT = 'credit', 'Credit'
    DEBIT = 'debit', 'Debit'
    PROFIT_ADDITION = 'profit_addition', 'Profit Addition'
    PROFIT_WITHDRAWAL = 'profit_withdrawal', 'Profit Withdrawal'


# Transaction types that increase the balance; the rest decrease it.
INFLOW_TYPES = frozenset({TransactionType.CREDIT, TransactionType.PROFIT_ADDITION})


class Wallet(models.Model):
    """The operator's ledger. A single row, looked up by its unique name."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=100, unique=True)
    balance = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        default=Decimal('0.00')
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'wallets'

    def __str__(self):
        return f"{self.name} ({self.balance})"


class WalletTransaction(models.Model):
    """Append-only ledger entry. ``amount`` is always positive, ``type`` gives the sign."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    wallet = models.ForeignKey(
        Wallet,
        on_delete=models.CASCADE,
        related_name='transactions'
    )
    type = models.CharField(
        max_length=20,
        choices=TransactionType.choices
    )
    amount = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.01'))]
    )
    description = models.CharField(max_length=500, blank=True)

    related_booking = models.ForeignKey(
        'bookings.Booking',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='wallet_transactions'
    )
    related_batch = models.ForeignKey(
        'dealers.DealerBatch',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='wallet_transactions'
    )

    date = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'wallet_transactions'
        indexes = [
            models.Index(fields=['wallet', 'date'], name='wallet_tran_wallet__3c1d7e_idx'),
            models.Index(fields=['type'], name='wallet_tran_type_9a4f21_idx'),
        ]
        ordering = ['-date']

    def __str__(self):
        return f"{self.get_type_display()} {self.amount}"

    @property
    def signed_amount(self):
        return self.amount if self.type in INFLOW_TYPES else -self.amount
