from django.db import models
from django.core.validators import MinValueValidator
from decimal import Decimal
import uuid


class BookingStatus(models.TextChoices):
    PENDING = 'pending', 'Pending'
    DELIVERED = 'delivered', 'Delivered'
    GIVEN_TO_ADMIN = 'given_to_admin', 'Given to Admin'
    GIVEN_TO_DEALER = 'given_to_dealer', 'Given to Dealer'
    PAYMENT_DONE = 'payment_done', 'Payment Done'


class Booking(models.Model):
    """A single phone purchase tracked from booking through resale and payout."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    user = models.ForeignKey(
        'accounts.User',
        on_delete=models.CASCADE,
        related_name='bookings'
    )

    # Purchase details
    booking_date = models.DateField()
    mobile_model = models.CharField(max_length=200)
    booking_price = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.00'))]
    )
    selling_price = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        null=True,
        blank=True,
        validators=[MinValueValidator(Decimal('0.00'))]
    )
    platform = models.CharField(max_length=100)
    booking_account = models.CharField(max_length=200, blank=True)
    card = models.CharField(max_length=100, help_text='Alias of the card used to pay')
    notes = models.TextField(blank=True)

    # Set by admin
    dealer = models.CharField(max_length=200, blank=True)
    booking_id = models.CharField(max_length=100, blank=True, help_text='Order id on the platform')

    status = models.CharField(
        max_length=20,
        choices=BookingStatus.choices,
        default=BookingStatus.PENDING
    )

    # Dealer assignment
    assigned_to_dealer = models.ForeignKey(
        'dealers.Dealer',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='bookings'
    )
    dealer_batch = models.ForeignKey(
        'dealers.DealerBatch',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='bookings'
    )
    dealer_amount = models.DecimalField(max_digits=12, decimal_places=2, null=True, blank=True)

    # Settlement tracking
    given_to_admin_at = models.DateTimeField(null=True, blank=True)
    assigned_to_dealer_at = models.DateTimeField(null=True, blank=True)
    dealer_payment_received = models.BooleanField(default=False)
    dealer_payment_date = models.DateTimeField(null=True, blank=True)
    user_payment_given = models.BooleanField(default=False)
    user_payment_date = models.DateTimeField(null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'bookings'
        indexes = [
            models.Index(fields=['user', 'booking_date'], name='bookings_user_id_2d7c4b_idx'),
            models.Index(fields=['status'], name='bookings_status_61f0aa_idx'),
            models.Index(fields=['booking_date'], name='bookings_booking_9e3b52_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.mobile_model} ({self.get_status_display()})"

    @property
    def payout_amount(self):
        """What the owner is paid on settlement: selling price, else booking price."""
        return self.selling_price or self.booking_price
