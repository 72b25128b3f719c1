"""Central translation of exceptions into the JSON error envelope."""

import logging

from django.core.exceptions import ObjectDoesNotExist
from django.db.models import ProtectedError
from django.http import Http404

from .exceptions import LedgerError
from .responses import error_response

logger = logging.getLogger(__name__)

API_PREFIX = "/api/"


class ApiErrorMiddleware:
    """Turn exceptions raised by API views into ``{success: false}`` bodies.

    Only requests under ``/api/`` are handled; anything else falls through
    to Django's normal error handling.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        return self.get_response(request)

    def process_exception(self, request, exception):
        if not request.path.startswith(API_PREFIX):
            return None

        if isinstance(exception, LedgerError):
            if exception.status_code >= 500:
                logger.error("%s %s failed: %s", request.method, request.path, exception.message)
            return error_response(exception.message, status=exception.status_code)

        if isinstance(exception, (Http404, ObjectDoesNotExist)):
            return error_response("Not found", status=404)

        if isinstance(exception, ProtectedError):
            return error_response(
                "Record is referenced by other documents and cannot be deleted",
                status=400,
            )

        logger.exception("Unhandled error on %s %s", request.method, request.path)
        return error_response("Unexpected error", status=500)
