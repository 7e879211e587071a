"""
Error types raised by the service layer and the REST framework handler
that renders them.

Every error response has the same body:

    {"error": "<kind>", "detail": "<message>"}
"""
import logging

from rest_framework import status
from rest_framework.exceptions import ParseError
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


class ServiceError(Exception):
    """Base class for errors with a fixed HTTP mapping."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    error = 'Server Error'

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(detail)


class InvalidRequest(ServiceError):
    """Raised when client input fails validation."""
    status_code = status.HTTP_400_BAD_REQUEST
    error = 'Validation Error'


class NotFound(ServiceError):
    """Raised when an update targets a record that does not exist."""
    status_code = status.HTTP_404_NOT_FOUND
    error = 'Not Found'


class StoreError(ServiceError):
    """Raised when the store fails, times out or is unreachable."""
    pass


def error_response(error: str, detail: str, status_code: int) -> Response:
    return Response({'error': error, 'detail': detail}, status=status_code)


def api_exception_handler(exc, context):
    """
    REST framework EXCEPTION_HANDLER.

    Service errors map to their declared status. Unparseable request bodies
    become a validation error. Anything REST framework does not recognise is
    logged with its traceback and reported as a generic server error.
    """
    view = context.get('view')
    view_name = view.__class__.__name__ if view is not None else 'unknown view'

    if isinstance(exc, ServiceError):
        if exc.status_code >= 500:
            logger.error(f"{view_name} failed: {exc.detail}")
        else:
            logger.warning(f"{view_name} rejected request: {exc.detail}")
        return error_response(exc.error, exc.detail, exc.status_code)

    if isinstance(exc, ParseError):
        logger.warning(f"{view_name} rejected request: malformed JSON ({exc.detail})")
        return error_response(
            InvalidRequest.error, 'invalid JSON payload', status.HTTP_400_BAD_REQUEST
        )

    response = exception_handler(exc, context)
    if response is None:
        logger.exception(f"Unexpected error in {view_name}: {exc}")
        return error_response(
            'Server Error',
            'An unexpected error occurred',
            status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
    return response
