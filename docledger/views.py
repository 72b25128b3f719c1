"""Views for docledger."""

from django.db import connection
from django.views.decorators.http import require_GET

from docledger import __version__
from docledger.core.responses import error_response, success_response


@require_GET
def health_check(request):
    """Health check endpoint for container orchestration."""
    try:
        with connection.cursor() as cursor:
            cursor.execute("SELECT 1")
    except Exception as e:
        return error_response(f"Database unavailable: {e}", status=503)

    return success_response({"status": "ok", "database": "ok", "version": __version__}, "OK")
