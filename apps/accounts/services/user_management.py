"""
Admin-side user management.

Listing annotates each user with their booking count and the sum of their
booking prices. Deleting a user removes that user's bookings with them.
"""

import logging
from decimal import Decimal
from typing import Optional
from uuid import UUID

from django.contrib.auth import get_user_model
from django.db import transaction
from django.db.models import Count, DecimalField, QuerySet, Sum, Value
from django.db.models.functions import Coalesce

from .exceptions import DuplicateUsernameError, UserNotFoundError

User = get_user_model()
logger = logging.getLogger(__name__)


def list_users_with_stats() -> QuerySet:
    """Return all users, newest first, with ``booking_count`` and ``total_amount``."""
    return (
        User.objects
        .annotate(
            booking_count=Count('bookings'),
            total_amount=Coalesce(
                Sum('bookings__booking_price'),
                Value(Decimal('0.00')),
                output_field=DecimalField(max_digits=14, decimal_places=2),
            ),
        )
        .order_by('-created_at')
    )


def get_user_by_id(*, user_id: UUID) -> User:
    try:
        return User.objects.get(id=user_id)
    except User.DoesNotExist:
        raise UserNotFoundError(f"User with ID {user_id} not found")


def get_user_with_bookings(*, user_id: UUID):
    """
    Return ``(user, bookings)`` for the admin detail view.

    Raises:
        UserNotFoundError: If user doesn't exist
    """
    user = get_user_by_id(user_id=user_id)
    bookings = (
        user.bookings
        .select_related('assigned_to_dealer', 'dealer_batch')
        .order_by('-created_at')
    )
    return user, bookings


@transaction.atomic
def update_user(
    *,
    user_id: UUID,
    username: Optional[str] = None,
    role: Optional[str] = None
) -> User:
    """
    Change a user's username and/or role.

    Raises:
        UserNotFoundError: If user doesn't exist
        DuplicateUsernameError: If the new username is taken
    """
    try:
        user = User.objects.select_for_update().get(id=user_id)
    except User.DoesNotExist:
        raise UserNotFoundError(f"User with ID {user_id} not found")

    update_fields = []
    if username is not None and username != user.username:
        if User.objects.filter(username=username).exclude(id=user.id).exists():
            raise DuplicateUsernameError("Username is already taken")
        user.username = username
        update_fields.append('username')
    if role is not None and role != user.role:
        user.role = role
        update_fields.append('role')

    if update_fields:
        user.save(update_fields=update_fields)
        logger.info("Updated user %s fields=%s", user.id, update_fields)

    return user


@transaction.atomic
def delete_user(*, user_id: UUID) -> int:
    """
    Delete a user together with their bookings.

    Returns:
        Number of bookings removed

    Raises:
        UserNotFoundError: If user doesn't exist
    """
    user = get_user_by_id(user_id=user_id)
    booking_count, _ = user.bookings.all().delete()
    user.delete()
    logger.info("Deleted user %s and %d booking(s)", user_id, booking_count)
    return booking_count
