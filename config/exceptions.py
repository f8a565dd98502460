"""
Project-wide DRF exception handling.

Every error leaves the API as ``{"message": "<text>"}`` so clients can show
it verbatim. Validation errors additionally carry the full field map under
``errors``. Database failures that escape a view become HTTP 500 with the
driver's message.
"""
import logging

from django.db import DatabaseError
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler


logger = logging.getLogger(__name__)


def _first_message(detail):
    """Pull one human readable line out of a DRF error structure."""
    if isinstance(detail, (list, tuple)):
        return _first_message(detail[0]) if detail else ''
    if isinstance(detail, dict):
        if not detail:
            return ''
        field, value = next(iter(detail.items()))
        message = _first_message(value)
        if field in ('detail', 'non_field_errors'):
            return message
        return f'{field}: {message}'
    return str(detail)


def message_exception_handler(exc, context):
    response = exception_handler(exc, context)

    if response is not None:
        detail = response.data
        body = {'message': _first_message(detail)}
        if isinstance(detail, list) or (isinstance(detail, dict) and set(detail) != {'detail'}):
            body['errors'] = detail
        response.data = body
        return response

    if isinstance(exc, DatabaseError):
        view = context.get('view')
        logger.error(f"Database error in {view.__class__.__name__ if view else 'unknown view'}: {exc}", exc_info=True)
        return Response({'message': str(exc)}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

    return None
