"""
Domain exceptions for cards app.
"""
from rest_framework.exceptions import APIException


class CardNotFoundError(APIException):
    status_code = 404
    default_detail = 'Card not found.'
    default_code = 'card_not_found'
