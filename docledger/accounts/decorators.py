"""
Auth decorators for function-based API views.

Usage:
    @token_required
    def record_payment(request, invoice_id):
        request.user  # the authenticated staff user

    @token_optional
    def quotation_collection(request):
        acting_user(request)  # the staff user, or None for anonymous callers

    @admin_required
    def user_list(request):
        ...
"""

import logging
from functools import wraps

from docledger.core.exceptions import AuthError, PermissionDeniedError

from .tokens import bearer_token, verify_token

logger = logging.getLogger(__name__)


def token_required(view_func):
    """Require a valid bearer token; sets ``request.user``.

    Raises:
        AuthError: If the header is missing or the token is invalid/expired
    """
    @wraps(view_func)
    def wrapper(request, *args, **kwargs):
        token = bearer_token(request)
        if token is None:
            raise AuthError("Please log in")
        request.user = verify_token(token)
        return view_func(request, *args, **kwargs)
    return wrapper


def admin_required(view_func):
    """Require a bearer token belonging to an admin.

    Raises:
        AuthError: If not authenticated
        PermissionDeniedError: If the user is not an admin
    """
    @token_required
    @wraps(view_func)
    def wrapper(request, *args, **kwargs):
        if not request.user.is_admin:
            raise PermissionDeniedError("Admin access required")
        return view_func(request, *args, **kwargs)
    return wrapper


def token_optional(view_func):
    """Attach the bearer token's user when a valid one is sent.

    Open endpoints ignore a missing or stale token; the request then
    carries whatever user the session middleware resolved (usually
    anonymous).
    """
    @wraps(view_func)
    def wrapper(request, *args, **kwargs):
        token = bearer_token(request)
        if token is not None:
            try:
                request.user = verify_token(token)
            except AuthError as e:
                logger.debug("Ignoring bearer token on open endpoint: %s", e.message)
        return view_func(request, *args, **kwargs)
    return wrapper


def acting_user(request):
    """Return the authenticated user for attribution, or None."""
    user = getattr(request, "user", None)
    if user is None or not user.is_authenticated:
        return None
    return user
