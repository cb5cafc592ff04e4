"""Services for the booking lifecycle."""

from .booking_lifecycle import (
    visible_bookings,
    get_booking_for_user,
    create_booking,
    update_booking_status,
    update_booking,
    delete_booking,
    mark_user_paid,
    list_bookings,
)
from .booking_export import export_bookings

__all__ = [
    'visible_bookings',
    'get_booking_for_user',
    'create_booking',
    'update_booking_status',
    'update_booking',
    'delete_booking',
    'mark_user_paid',
    'list_bookings',
    'export_bookings',
]
