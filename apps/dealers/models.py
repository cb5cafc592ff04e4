from django.db import models
from django.core.validators import MinValueValidator
from decimal import Decimal
import uuid


class BatchStatus(models.TextChoices):
    PENDING_PAYMENT = 'pending_payment', 'Pending Payment'
    PARTIALLY_PAID = 'partially_paid', 'Partially Paid'
    COMPLETED_PAYMENT = 'completed_payment', 'Completed Payment'


class Dealer(models.Model):
    """Buyer of handed-over phones. Running totals are maintained by the batch service."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=200)
    phone = models.CharField(max_length=50)
    address = models.TextField(blank=True)
    email = models.EmailField(blank=True)

    total_mobiles = models.PositiveIntegerField(default=0)
    total_amount = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal('0.00'))
    paid_amount = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal('0.00'))

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'dealers'
        ordering = ['-created_at']

    def __str__(self):
        return self.name

    @property
    def outstanding_amount(self):
        return max(Decimal('0.00'), self.total_amount - self.paid_amount)


class DealerBatch(models.Model):
    """
    Group of bookings handed to one dealer and settled together.

    ``remaining_amount`` is ``max(total_amount - paid_amount, 0)`` and the
    status follows from it: completed once nothing remains, otherwise
    partially paid after the first payment.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    dealer = models.ForeignKey(
        Dealer,
        on_delete=models.PROTECT,
        related_name='batches'
    )
    batch_id = models.CharField(max_length=20, unique=True, editable=False)

    total_amount = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal('0.00'))
    paid_amount = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal('0.00'))
    remaining_amount = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal('0.00'))
    status = models.CharField(
        max_length=20,
        choices=BatchStatus.choices,
        default=BatchStatus.PENDING_PAYMENT
    )

    assigned_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'dealer_batches'
        indexes = [
            models.Index(fields=['dealer', 'assigned_at'], name='dealer_batc_dealer__5e2a11_idx'),
            models.Index(fields=['status'], name='dealer_batc_status_b7c310_idx'),
        ]
        ordering = ['-assigned_at']

    def __str__(self):
        return f"{self.batch_id} ({self.dealer.name})"

    def apply_payment(self, amount):
        """Add ``amount`` to paid and recompute remaining/status. Does not save."""
        self.paid_amount += amount
        self.refresh_settlement()

    def refresh_settlement(self):
        self.remaining_amount = max(Decimal('0.00'), self.total_amount - self.paid_amount)
        if self.paid_amount <= 0:
            self.status = BatchStatus.PENDING_PAYMENT
        elif self.remaining_amount == 0:
            self.status = BatchStatus.COMPLETED_PAYMENT
        else:
            self.status = BatchStatus.PARTIALLY_PAID

    @property
    def is_settled(self):
        return self.status == BatchStatus.COMPLETED_PAYMENT


class DealerBatchPayment(models.Model):
    """Append-only payment received against a batch."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    batch = models.ForeignKey(
        DealerBatch,
        on_delete=models.CASCADE,
        related_name='payments'
    )
    amount = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.01'))]
    )
    notes = models.CharField(max_length=500, blank=True)
    date = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'dealer_batch_payments'
        ordering = ['date']

    def __str__(self):
        return f"{self.amount} for {self.batch.batch_id}"


class BatchSequence(models.Model):
    """Named counter row; locked with SELECT ... FOR UPDATE to hand out batch ids."""

    name = models.CharField(max_length=50, unique=True)
    last_value = models.PositiveIntegerField(default=0)

    class Meta:
        db_table = 'batch_sequences'

    def __str__(self):
        return f"{self.name}={self.last_value}"
