from django.db import models
from decimal import Decimal
import uuid


class CardType(models.TextChoices):
    CREDIT = 'credit', 'Credit'
    DEBIT = 'debit', 'Debit'


class Card(models.Model):
    """
    Payment card used to fund bookings.

    ``available_limit`` is a maintained balance: booking creation lowers it
    by the booking price for the card whose alias matches, and a repayment
    through ``amountpay`` raises it.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey(
        'accounts.User',
        on_delete=models.CASCADE,
        related_name='cards'
    )
    alias = models.CharField(max_length=100)
    bank_name = models.CharField(max_length=100)
    last_four = models.CharField(max_length=4)
    card_type = models.CharField(max_length=10, choices=CardType.choices)
    is_active = models.BooleanField(default=True)
    limit = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal('0.00'))
    available_limit = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal('0.00'))

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'cards'
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.alias} ({self.bank_name} ****{self.last_four})"
