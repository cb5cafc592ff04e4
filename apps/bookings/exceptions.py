"""
Domain exceptions for bookings app.
"""
from rest_framework.exceptions import APIException


class BookingNotFoundError(APIException):
    """Booking absent, or not visible to the caller."""
    status_code = 404
    default_detail = 'Booking not found.'
    default_code = 'booking_not_found'


class InvalidPayoutAmountError(APIException):
    status_code = 400
    default_detail = 'Invalid amount for user payment deduction.'
    default_code = 'invalid_payout_amount'


class InvalidExportFormatError(APIException):
    status_code = 400
    default_detail = 'Export format must be "csv" or "json".'
    default_code = 'invalid_export_format'
