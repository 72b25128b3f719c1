"""Exceptions for accounts."""

from docledger.core.exceptions import AuthError, ConflictError


class InvalidCredentialsError(AuthError):
    """Email/password pair did not match an active user."""

    default_message = "Invalid email or password"


class InvalidTokenError(AuthError):
    """Bearer token is malformed, tampered with or refers to no user."""

    default_message = "Invalid token"


class TokenExpiredError(AuthError):
    """Bearer token is older than TOKEN_MAX_AGE."""

    default_message = "Token expired"


class EmailTakenError(ConflictError):
    """Another user already uses this email."""

    default_message = "This email is already in use"


class WrongPasswordError(AuthError):
    """Current password did not match when changing it."""

    default_message = "Current password is incorrect"
