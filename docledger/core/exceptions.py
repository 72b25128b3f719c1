"""Error taxonomy shared by every docledger app.

Business violations are raised as one of these typed errors. Each carries
the HTTP status the API answers with; ``ApiErrorMiddleware`` turns them
into the standard ``{"success": false, "message": ...}`` envelope.
"""


class LedgerError(Exception):
    """Base exception for docledger errors."""

    status_code = 500
    default_message = "Unexpected error"

    def __init__(self, message=None, *, status_code=None):
        self.message = message or self.default_message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)


class ValidationError(LedgerError):
    """Missing or malformed input."""

    status_code = 400
    default_message = "Invalid input"


class NotFoundError(LedgerError):
    """Referenced entity does not exist."""

    status_code = 404
    default_message = "Not found"


class ConflictError(LedgerError):
    """State-machine violation, e.g. already converted or already decided."""

    status_code = 400
    default_message = "Operation conflicts with the current state"


class AuthError(LedgerError):
    """Missing or invalid credentials."""

    status_code = 401
    default_message = "Authentication required"


class PermissionDeniedError(AuthError):
    """Authenticated, but not allowed to do this."""

    status_code = 403
    default_message = "Permission denied"

