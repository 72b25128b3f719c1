"""Standard JSON envelope for every API response.

Every body is ``{"success": bool, "message": str, "data": payload|null}``;
paginated lists add a ``pagination`` block.
"""

from decimal import Decimal

from django.core.serializers.json import DjangoJSONEncoder
from django.http import JsonResponse


class LedgerJSONEncoder(DjangoJSONEncoder):
    """JSON encoder that renders currency Decimals with two places."""

    def default(self, o):
        if isinstance(o, Decimal):
            return f"{o:.2f}"
        return super().default(o)


def success_response(data=None, message: str = "Success", status: int = 200, **extra):
    """Return a success envelope."""
    body = {"success": True, "message": message, "data": data}
    body.update(extra)
    return JsonResponse(body, status=status, encoder=LedgerJSONEncoder)


def error_response(message: str = "An error occurred", status: int = 400):
    """Return a failure envelope."""
    return JsonResponse(
        {"success": False, "message": message, "data": None},
        status=status,
        encoder=LedgerJSONEncoder,
    )


def paginated_response(data, pagination: dict, message: str = "Success"):
    """Return a success envelope carrying a pagination block."""
    return success_response(data, message, pagination=pagination)
