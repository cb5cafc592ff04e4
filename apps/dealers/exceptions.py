"""
Domain exceptions for dealers and dealer batches.
"""
from rest_framework.exceptions import APIException


class DealerNotFoundError(APIException):
    status_code = 404
    default_detail = 'Dealer not found.'
    default_code = 'dealer_not_found'


class DealerBatchNotFoundError(APIException):
    status_code = 404
    default_detail = 'Dealer batch not found.'
    default_code = 'dealer_batch_not_found'


class BatchBookingNotFoundError(APIException):
    """One or more bookings named in a batch do not exist."""
    status_code = 404
    default_detail = 'Booking not found.'
    default_code = 'booking_not_found'


class EmptyBatchError(APIException):
    status_code = 400
    default_detail = 'Dealer ID, booking IDs, and amounts are required.'
    default_code = 'empty_batch'


class InvalidBatchAmountError(APIException):
    status_code = 400
    default_detail = 'Invalid amount for booking.'
    default_code = 'invalid_amount'


class InvalidPaymentAmountError(APIException):
    status_code = 400
    default_detail = 'Payment amount must be a positive number.'
    default_code = 'invalid_payment_amount'
