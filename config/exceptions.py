"""
DRF exception handler.

Turns domain ``ServiceError`` subclasses into ``{"message": ...}`` responses
with the category's status code, flattens DRF's own errors into the same
shape, and reports database failures as a generic 500 that never looks like
one of the domain errors.
"""
import logging

from django.db import DatabaseError
from rest_framework import status
from rest_framework.exceptions import ValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler

from apps.common.exceptions import ServiceError

logger = logging.getLogger(__name__)


def api_exception_handler(exc, context):
    if isinstance(exc, ServiceError):
        return Response({'message': str(exc)}, status=exc.status_code)

    if isinstance(exc, DatabaseError):
        view = context.get('view')
        logger.exception('Database failure in %s', view.__class__.__name__ if view else 'unknown view')
        return Response(
            {'message': 'The operation could not be saved. Please try again.'},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR
        )

    response = exception_handler(exc, context)
    if response is None:
        return None

    if isinstance(exc, ValidationError):
        response.data = {'message': 'Invalid input.', 'errors': response.data}
    elif isinstance(response.data, dict) and 'detail' in response.data:
        response.data = {'message': str(response.data['detail'])}
    return response
