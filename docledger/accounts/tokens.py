"""Signed bearer tokens.

Tokens are Django ``signing`` payloads: tamper-proof and time-limited,
with no server-side session table.
"""

from django.contrib.auth import get_user_model
from django.core import signing

from docledger.core.conf import ledger_setting

from .exceptions import InvalidTokenError, TokenExpiredError

TOKEN_SALT = "docledger.accounts.token"


def issue_token(user) -> str:
    """Return a signed bearer token for ``user``."""
    payload = {"id": user.pk, "email": user.email, "role": user.role}
    return signing.dumps(payload, salt=TOKEN_SALT, compress=True)


def verify_token(token: str):
    """Resolve a bearer token back to its active user.

    Raises:
        TokenExpiredError: If the token is older than TOKEN_MAX_AGE
        InvalidTokenError: If the signature is bad or the user is gone
    """
    try:
        payload = signing.loads(
            token,
            salt=TOKEN_SALT,
            max_age=ledger_setting("TOKEN_MAX_AGE"),
        )
    except signing.SignatureExpired:
        raise TokenExpiredError()
    except signing.BadSignature:
        raise InvalidTokenError()

    User = get_user_model()
    try:
        user = User.objects.get(pk=payload.get("id"), is_active=True)
    except User.DoesNotExist:
        raise InvalidTokenError()
    return user


def bearer_token(request):
    """Return the token from an ``Authorization: Bearer ...`` header, or None."""
    header = request.headers.get("Authorization", "")
    if not header.startswith("Bearer "):
        return None
    return header[len("Bearer "):].strip() or None
