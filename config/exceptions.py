"""
Project-wide DRF exception handler.

Every error response leaves the API as ``{"message": ..., "error": ...}``:

    - APIException subclasses (domain errors, validation, auth) keep their
      status code; ``message`` is a readable summary and ``error`` carries
      the exception code or the per-field validation detail.
    - Anything else is logged and converted to a 500 ``Server error``.
"""
import logging

from django.core.exceptions import PermissionDenied, ValidationError as DjangoValidationError
from django.db.models import ProtectedError
from django.http import Http404
from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


def _summarize(detail):
    """Pick a single human-readable line out of a DRF error detail."""
    if isinstance(detail, dict):
        for field, value in detail.items():
            text = _summarize(value)
            if field in ('detail', 'non_field_errors'):
                return text
            return f"{field}: {text}"
        return 'Invalid request'
    if isinstance(detail, list):
        return _summarize(detail[0]) if detail else 'Invalid request'
    return str(detail)


def api_exception_handler(exc, context):
    """Render errors with the ``{message, error}`` envelope."""
    if isinstance(exc, DjangoValidationError):
        exc = exceptions.ValidationError(
            exc.message_dict if hasattr(exc, 'error_dict') else exc.messages
        )
    elif isinstance(exc, ProtectedError):
        exc = exceptions.ValidationError(
            {'detail': 'Object is still referenced by other records and cannot be deleted.'}
        )

    response = exception_handler(exc, context)

    if response is None:
        view = context.get('view')
        logger.exception(
            "Unhandled error in %s", view.__class__.__name__ if view else 'unknown view'
        )
        return Response(
            {'message': 'Server error', 'error': str(exc)},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    if isinstance(exc, exceptions.ValidationError):
        error = exc.detail
    elif isinstance(exc, (Http404, PermissionDenied)):
        error = 'not_found' if isinstance(exc, Http404) else 'permission_denied'
    elif isinstance(exc, exceptions.APIException):
        codes = exc.get_codes()
        error = codes if isinstance(codes, str) else exc.default_code
    else:
        error = response.data

    response.data = {
        'message': _summarize(response.data),
        'error': error,
    }
    return response
