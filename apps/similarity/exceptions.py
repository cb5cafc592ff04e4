"""
Domain exceptions for the similarity app.
"""
from rest_framework.exceptions import APIException


class EmbeddingProviderError(APIException):
    """The embedding API failed or returned something unusable."""
    status_code = 500
    default_detail = 'Failed to group items'
    default_code = 'embedding_provider_error'
