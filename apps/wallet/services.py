"""
Admin Wallet Ledger
===================

The operator has exactly one wallet. Every balance change goes through
:func:`record_transaction`, which appends a :class:`WalletTransaction` and
moves the balance in the same database transaction, with the wallet row
locked. The stored balance therefore always equals the signed sum of the
transaction log; :func:`compute_ledger_balance` recomputes that sum for
reconciliation.

Sign convention:
    credit, profit_addition    -> +amount
    debit, profit_withdrawal   -> -amount

Example::

    from apps.wallet.services import record_transaction
    from apps.wallet.models import TransactionType

    record_transaction(
        type=TransactionType.CREDIT,
        amount=Decimal('300.00'),
        description='Payment from dealer Acme for batch A001',
        related_batch=batch,
    )
"""

import logging
from decimal import Decimal

from django.conf import settings
from django.db import transaction
from django.db.models import Case, DecimalField, F, Sum, Value, When
from django.db.models.functions import Coalesce

from .exceptions import InvalidTransactionAmountError, InvalidTransactionTypeError
from .models import INFLOW_TYPES, TransactionType, Wallet, WalletTransaction

logger = logging.getLogger(__name__)


def get_admin_wallet():
    """Return the operator wallet, creating it with a zero balance on first access."""
    wallet, created = Wallet.objects.get_or_create(
        name=settings.ADMIN_WALLET_NAME,
        defaults={'balance': Decimal('0.00')},
    )
    if created:
        logger.info("Created wallet %r", wallet.name)
    return wallet


def lock_admin_wallet():
    """Return the operator wallet with its row locked until the surrounding transaction ends."""
    get_admin_wallet()
    return Wallet.objects.select_for_update().get(name=settings.ADMIN_WALLET_NAME)


@transaction.atomic
def record_transaction(*, type, amount, description='', related_booking=None, related_batch=None):
    """
    Append a ledger entry and apply it to the wallet balance.

    Args:
        type: One of :class:`TransactionType`.
        amount: Positive Decimal; the sign comes from ``type``.
        description: Free text shown in the wallet history.
        related_booking: Booking the entry pays out for, if any.
        related_batch: DealerBatch the entry was received for, if any.

    Returns:
        WalletTransaction: The appended entry.

    Raises:
        InvalidTransactionTypeError: ``type`` is not a known transaction type.
        InvalidTransactionAmountError: ``amount`` is not > 0 or has fractions of a cent.
    """
    if type not in TransactionType.values:
        raise InvalidTransactionTypeError()

    amount = Decimal(str(amount))
    if amount <= 0 or amount != amount.quantize(Decimal('0.01')):
        raise InvalidTransactionAmountError()

    wallet = lock_admin_wallet()

    entry = WalletTransaction.objects.create(
        wallet=wallet,
        type=type,
        amount=amount,
        description=description,
        related_booking=related_booking,
        related_batch=related_batch,
    )

    delta = amount if type in INFLOW_TYPES else -amount
    wallet.balance = F('balance') + delta
    wallet.save(update_fields=['balance', 'updated_at'])
    wallet.refresh_from_db(fields=['balance'])

    logger.info(
        "Wallet %s: %s %s (%s), balance now %s",
        wallet.name, type, amount, description, wallet.balance,
    )
    return entry


def withdraw_profit(*, amount, user, notes=''):
    """Take profit out of the wallet on behalf of an admin."""
    return record_transaction(
        type=TransactionType.PROFIT_WITHDRAWAL,
        amount=amount,
        description=f"Profit withdrawn by {user.username} ({notes or 'No notes'})",
    )


def add_profit(*, amount, user, notes=''):
    """Put money into the wallet on behalf of an admin."""
    return record_transaction(
        type=TransactionType.PROFIT_ADDITION,
        amount=amount,
        description=f"Profit added by {user.username} ({notes or 'No notes'})",
    )


def compute_ledger_balance(wallet):
    """Signed sum of every transaction recorded against ``wallet``."""
    money = DecimalField(max_digits=14, decimal_places=2)
    result = wallet.transactions.aggregate(
        total=Coalesce(
            Sum(
                Case(
                    When(type__in=list(INFLOW_TYPES), then=F('amount')),
                    default=-F('amount'),
                    output_field=money,
                )
            ),
            Value(Decimal('0.00')),
            output_field=money,
        )
    )
    return result['total']


def get_wallet_with_transactions():
    """Return ``(wallet, transactions)`` with the newest transaction first."""
    wallet = get_admin_wallet()
    transactions = wallet.transactions.select_related(
        'related_booking', 'related_batch'
    ).order_by('-date')
    return wallet, transactions
