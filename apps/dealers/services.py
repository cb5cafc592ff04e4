"""
Dealer Batch Settlement
=======================

Business logic for handing bookings to a dealer in a batch and settling
that batch with one or more payments.

Classes:
    BatchSettlementService: Batch creation, payments and batch queries.

Every operation that touches more than one record (bookings, dealer totals,
the batch, its payments and the admin wallet) runs in a single database
transaction with the affected rows locked, so a failure part way through
leaves nothing half-written.

Example:
    Assigning two phones and settling the batch in two payments::

        from apps.dealers.services import BatchSettlementService

        batch = BatchSettlementService.create_batch(
            dealer_id=dealer.id,
            booking_amounts={b1.id: Decimal('100'), b2.id: Decimal('200')},
        )
        # batch.batch_id == 'A001', batch.status == 'pending_payment'

        BatchSettlementService.add_payment(batch_id=batch.id, amount=Decimal('120'))
        # partially_paid, remaining 180

        BatchSettlementService.add_payment(batch_id=batch.id, amount=Decimal('180'))
        # completed_payment, wallet credited 300 in total
"""

import logging
import re
from decimal import Decimal, InvalidOperation

from django.conf import settings
from django.db import transaction
from django.db.models import F
from django.utils import timezone

from apps.bookings.models import Booking, BookingStatus
from apps.wallet.models import TransactionType
from apps.wallet.services import record_transaction
from .exceptions import (
    BatchBookingNotFoundError,
    DealerBatchNotFoundError,
    DealerNotFoundError,
    EmptyBatchError,
    InvalidBatchAmountError,
    InvalidPaymentAmountError,
)
from .models import BatchSequence, Dealer, DealerBatch, DealerBatchPayment

logger = logging.getLogger(__name__)

BATCH_SEQUENCE_NAME = 'dealer_batch'
CENT = Decimal('0.01')


def _to_amount(value):
    """Coerce a JSON number to Decimal, or return None if it is not a whole-cent amount."""
    if isinstance(value, bool) or value is None:
        return None
    try:
        amount = Decimal(str(value))
        if amount != amount.quantize(CENT):
            return None
    except (InvalidOperation, ValueError, TypeError):
        return None
    return amount


class BatchSettlementService:
    """
    Service for dealer batches.

    Methods:
        allocate_batch_id: Hand out the next "A001"-style batch id.
        create_batch: Assign bookings to a dealer as a new batch.
        add_payment: Record a dealer payment against a batch.
        list_batches / batches_for_dealer / get_batch_detail: Queries.
    """

    @staticmethod
    def _highest_existing_number(prefix):
        pattern = re.compile(rf'^{re.escape(prefix)}(\d+)$')
        highest = 0
        for batch_id in DealerBatch.objects.filter(
            batch_id__startswith=prefix
        ).values_list('batch_id', flat=True):
            match = pattern.match(batch_id)
            if match:
                highest = max(highest, int(match.group(1)))
        return highest

    @staticmethod
    def allocate_batch_id():
        """
        Return the next batch id and advance the counter.

        The counter row is locked for the rest of the surrounding
        transaction, so two concurrent callers can never receive the same
        number. On first use the counter is seeded from the highest batch
        id already stored.

        Returns:
            str: ``BATCH_ID_PREFIX`` followed by at least three digits,
            e.g. ``'A001'``; numbers past 999 widen (``'A1000'``).
        """
        prefix = settings.BATCH_ID_PREFIX
        with transaction.atomic():
            sequence, created = BatchSequence.objects.select_for_update().get_or_create(
                name=BATCH_SEQUENCE_NAME,
                defaults={'last_value': 0},
            )
            if created:
                sequence.last_value = BatchSettlementService._highest_existing_number(prefix)

            sequence.last_value += 1
            sequence.save(update_fields=['last_value'])

        return f"{prefix}{sequence.last_value:03d}"

    @staticmethod
    def create_batch(dealer_id, booking_amounts):
        """
        Assign bookings to a dealer as a new batch.

        Args:
            dealer_id (UUID): The receiving dealer.
            booking_amounts (dict): Booking id -> amount the dealer owes
                for that phone. Amounts must be non-negative numbers with at
                most two decimal places.

        Returns:
            DealerBatch: The new batch, status ``pending_payment`` and
            ``remaining_amount == total_amount``.

        Raises:
            EmptyBatchError: No bookings given.
            InvalidBatchAmountError: An amount is not a number, is negative or has
                fractions of a cent.
            DealerNotFoundError: Unknown dealer.
            BatchBookingNotFoundError: A booking id does not exist.
        """
        if not booking_amounts:
            raise EmptyBatchError()

        amounts = {}
        for booking_id, raw_amount in booking_amounts.items():
            amount = _to_amount(raw_amount)
            if amount is None or amount < 0:
                raise InvalidBatchAmountError(f"Invalid amount for booking {booking_id}")
            amounts[str(booking_id)] = amount

        total = sum(amounts.values(), Decimal('0.00'))

        with transaction.atomic():
            try:
                dealer = Dealer.objects.select_for_update().get(id=dealer_id)
            except Dealer.DoesNotExist:
                raise DealerNotFoundError()

            bookings = list(Booking.objects.select_for_update().filter(id__in=list(amounts)))
            found = {str(booking.id) for booking in bookings}
            missing = [booking_id for booking_id in amounts if booking_id not in found]
            if missing:
                raise BatchBookingNotFoundError(f"Booking {missing[0]} not found")

            batch = DealerBatch.objects.create(
                dealer=dealer,
                batch_id=BatchSettlementService.allocate_batch_id(),
                total_amount=total,
                paid_amount=Decimal('0.00'),
                remaining_amount=total,
            )

            now = timezone.now()
            for booking in bookings:
                booking.status = BookingStatus.GIVEN_TO_DEALER
                booking.assigned_to_dealer = dealer
                booking.dealer = dealer.name
                booking.dealer_batch = batch
                booking.assigned_to_dealer_at = now
                booking.dealer_amount = amounts[str(booking.id)]
                booking.updated_at = now
            Booking.objects.bulk_update(
                bookings,
                [
                    'status',
                    'assigned_to_dealer',
                    'dealer',
                    'dealer_batch',
                    'assigned_to_dealer_at',
                    'dealer_amount',
                    'updated_at',
                ],
            )

            Dealer.objects.filter(id=dealer.id).update(
                total_mobiles=F('total_mobiles') + len(bookings),
                total_amount=F('total_amount') + total,
            )

        logger.info(
            "Created batch %s for dealer %s: %d booking(s), total %s",
            batch.batch_id, dealer.name, len(bookings), total,
        )
        return batch

    @staticmethod
    def add_payment(batch_id, amount, notes=''):
        """
        Record a dealer payment against a batch.

        Credits the admin wallet with the same amount. When the batch
        becomes fully paid, its bookings are flagged as paid by the dealer.

        Args:
            batch_id (UUID): Primary key of the batch.
            amount: Positive number with at most two decimal places.
            notes (str, optional): Stored with the payment.

        Returns:
            DealerBatch: The updated batch.

        Raises:
            InvalidPaymentAmountError: ``amount`` is not > 0 or has fractions of a cent.
            DealerBatchNotFoundError: Unknown batch.
        """
        amount = _to_amount(amount)
        if amount is None or amount <= 0:
            raise InvalidPaymentAmountError()

        with transaction.atomic():
            try:
                batch = DealerBatch.objects.select_for_update().select_related('dealer').get(id=batch_id)
            except DealerBatch.DoesNotExist:
                raise DealerBatchNotFoundError()

            was_settled = batch.is_settled
            batch.apply_payment(amount)
            batch.save(update_fields=['paid_amount', 'remaining_amount', 'status', 'updated_at'])

            DealerBatchPayment.objects.create(batch=batch, amount=amount, notes=notes or '')

            dealer = batch.dealer
            Dealer.objects.filter(id=dealer.id).update(paid_amount=F('paid_amount') + amount)

            record_transaction(
                type=TransactionType.CREDIT,
                amount=amount,
                description=f"Payment from dealer {dealer.name} for batch {batch.batch_id}",
                related_batch=batch,
            )

            if batch.is_settled and not was_settled:
                batch.bookings.update(
                    dealer_payment_received=True,
                    dealer_payment_date=timezone.now(),
                    updated_at=timezone.now(),
                )

        logger.info(
            "Batch %s received %s from %s; remaining %s (%s)",
            batch.batch_id, amount, dealer.name, batch.remaining_amount, batch.status,
        )
        return batch

    @staticmethod
    def list_batches():
        return DealerBatch.objects.select_related('dealer').order_by('-assigned_at')

    @staticmethod
    def batches_for_dealer(dealer_id):
        return BatchSettlementService.list_batches().filter(dealer_id=dealer_id)

    @staticmethod
    def get_batch_detail(batch_id):
        """Return one batch with its bookings (and their users) and payments."""
        try:
            return (
                DealerBatch.objects
                .select_related('dealer')
                .prefetch_related('bookings__user', 'payments')
                .get(id=batch_id)
            )
        except DealerBatch.DoesNotExist:
            raise DealerBatchNotFoundError()
