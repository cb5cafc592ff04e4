"""
Domain exceptions for the wallet app.
"""
from rest_framework.exceptions import APIException


class InvalidTransactionAmountError(APIException):
    """Ledger amounts must be strictly positive."""
    status_code = 400
    default_detail = 'Amount must be a positive number.'
    default_code = 'invalid_amount'


class InvalidTransactionTypeError(APIException):
    status_code = 400
    default_detail = 'Unknown wallet transaction type.'
    default_code = 'invalid_transaction_type'
