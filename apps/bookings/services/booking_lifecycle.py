"""
Booking lifecycle: create, read, update, status transitions and payout.

Visibility rule used throughout: an admin sees every booking, a regular
user only their own. A booking the caller cannot see is reported as not
found.
"""

import logging
from decimal import Decimal

from django.db import transaction
from django.db.models import F, QuerySet
from django.utils import timezone

from apps.cards.models import Card
from apps.wallet.models import TransactionType
from apps.wallet.services import record_transaction
from ..exceptions import BookingNotFoundError, InvalidPayoutAmountError
from ..models import Booking, BookingStatus
from ..policies import filter_update_data

logger = logging.getLogger(__name__)


def visible_bookings(user) -> QuerySet:
    queryset = Booking.objects.select_related('user', 'assigned_to_dealer', 'dealer_batch')
    if user.is_admin:
        return queryset
    return queryset.filter(user=user)


def get_booking_for_user(*, booking_id, user) -> Booking:
    try:
        return visible_bookings(user).get(id=booking_id)
    except Booking.DoesNotExist:
        raise BookingNotFoundError()


@transaction.atomic
def create_booking(*, user, **fields) -> Booking:
    """
    Create a booking owned by ``user`` in ``pending`` status.

    The owner's card whose alias equals ``card`` has its available limit
    reduced by the booking price.
    """
    booking = Booking.objects.create(user=user, status=BookingStatus.PENDING, **fields)

    Card.objects.filter(user=user, alias=booking.card).update(
        available_limit=F('available_limit') - booking.booking_price
    )

    logger.info("User %s booked %s for %s", user.username, booking.mobile_model, booking.booking_price)
    return booking


@transaction.atomic
def update_booking_status(*, booking_id, user, status) -> Booking:
    """Set any status. Moving to ``given_to_admin`` stamps ``given_to_admin_at``."""
    booking = get_booking_for_user(booking_id=booking_id, user=user)

    booking.status = status
    update_fields = ['status', 'updated_at']
    if status == BookingStatus.GIVEN_TO_ADMIN:
        booking.given_to_admin_at = timezone.now()
        update_fields.append('given_to_admin_at')

    booking.save(update_fields=update_fields)
    return booking


@transaction.atomic
def update_booking(*, booking_id, user, data) -> Booking:
    """
    Apply the fields of ``data`` that the caller's role may write.

    Anything else in ``data`` is ignored.
    """
    booking = get_booking_for_user(booking_id=booking_id, user=user)

    changes = filter_update_data(user, data)
    for field, value in changes.items():
        setattr(booking, field, value)

    if changes:
        booking.save(update_fields=list(changes) + ['updated_at'])
    return booking


@transaction.atomic
def delete_booking(*, booking_id, user) -> None:
    booking = get_booking_for_user(booking_id=booking_id, user=user)
    booking.delete()
    logger.info("Booking %s deleted by %s", booking_id, user.username)


@transaction.atomic
def mark_user_paid(*, booking_id, selling_price=None) -> Booking:
    """
    Settle the owner's payout for a booking and debit the admin wallet.

    Args:
        booking_id: Booking to settle.
        selling_price: If given and >= 0, replaces the stored selling
            price. Otherwise an unset selling price falls back to the
            booking price.

    Raises:
        BookingNotFoundError: Unknown booking.
        InvalidPayoutAmountError: The payout would not be positive.
    """
    try:
        booking = Booking.objects.select_for_update().select_related('user').get(id=booking_id)
    except Booking.DoesNotExist:
        raise BookingNotFoundError()

    if selling_price is not None and Decimal(str(selling_price)) >= 0:
        booking.selling_price = Decimal(str(selling_price))
    elif booking.selling_price is None:
        booking.selling_price = booking.booking_price

    amount = booking.payout_amount
    if amount is None or amount <= 0:
        raise InvalidPayoutAmountError()

    booking.user_payment_given = True
    booking.user_payment_date = timezone.now()
    booking.status = BookingStatus.PAYMENT_DONE
    booking.save(update_fields=[
        'selling_price',
        'user_payment_given',
        'user_payment_date',
        'status',
        'updated_at',
    ])

    record_transaction(
        type=TransactionType.DEBIT,
        amount=amount,
        description=(
            f"Payment to user {booking.user.username} for mobile {booking.mobile_model} "
            f"(Booking ID: {booking.booking_id or booking.id})"
        ),
        related_booking=booking,
    )

    logger.info("Paid %s to %s for booking %s", amount, booking.user.username, booking.id)
    return booking


def list_bookings(*, user, filters=None) -> QuerySet:
    """
    Bookings visible to ``user``, newest first.

    Supported filters: status, platform, card, mobile_model (substring,
    case-insensitive), date_from / date_to (on booking_date) and, for
    admins only, user.
    """
    filters = filters or {}
    queryset = visible_bookings(user)

    if filters.get('status'):
        queryset = queryset.filter(status=filters['status'])
    if filters.get('platform'):
        queryset = queryset.filter(platform=filters['platform'])
    if filters.get('card'):
        queryset = queryset.filter(card=filters['card'])
    if filters.get('mobile_model'):
        queryset = queryset.filter(mobile_model__icontains=filters['mobile_model'])
    if filters.get('date_from'):
        queryset = queryset.filter(booking_date__gte=filters['date_from'])
    if filters.get('date_to'):
        queryset = queryset.filter(booking_date__lte=filters['date_to'])
    if filters.get('user') and user.is_admin:
        queryset = queryset.filter(user_id=filters['user'])

    return queryset.order_by('-created_at')
