"""Account services: login, user management and signature templates."""

import logging
from typing import Optional

from django.contrib.auth import get_user_model
from django.db import transaction

from docledger.core.exceptions import ConflictError, NotFoundError

from .exceptions import EmailTakenError, InvalidCredentialsError, WrongPasswordError
from .models import LoginHistory, SignatureTemplate
from .tokens import issue_token

logger = logging.getLogger(__name__)

User = get_user_model()


def login(email: str, password: str, *, ip_address=None, user_agent: str = ""):
    """Check credentials and issue a bearer token.

    Every attempt is written to LoginHistory, including failures.

    Returns:
        (user, token) tuple

    Raises:
        InvalidCredentialsError: If the email/password pair is wrong
    """
    email = email.lower()
    user = User.objects.filter(email__iexact=email, is_active=True).first()
    success = user is not None and user.check_password(password)

    LoginHistory.objects.create(
        user=user,
        email=email,
        ip_address=ip_address,
        user_agent=(user_agent or "")[:512],
        success=success,
    )

    if not success:
        logger.info("Failed login for %s from %s", email, ip_address)
        raise InvalidCredentialsError()

    logger.info("User %s logged in", user.pk)
    return user, issue_token(user)


@transaction.atomic
def register(email: str, password: str, name: str):
    """Self-service sign-up. New accounts always get the "user" role.

    Returns:
        (user, token) tuple
    """
    user = create_user(email, password, name, role="user")
    return user, issue_token(user)


def recent_failed_logins(user, limit: int = 10):
    """Newest failed attempts against ``user``'s account."""
    return LoginHistory.objects.filter(user=user, success=False)[:limit]


def get_user(user_id: int):
    try:
        return User.objects.get(pk=user_id)
    except User.DoesNotExist:
        raise NotFoundError("User not found")


def _ensure_email_free(email: str, exclude_pk: Optional[int] = None):
    taken = User.objects.filter(email__iexact=email)
    if exclude_pk is not None:
        taken = taken.exclude(pk=exclude_pk)
    if taken.exists():
        raise EmailTakenError()


@transaction.atomic
def create_user(email: str, password: str, name: str, role: str = "user"):
    """Create a staff user. The email doubles as the username."""
    email = email.lower()
    _ensure_email_free(email)
    user = User.objects.create_user(
        username=email,
        email=email,
        password=password,
        name=name,
        role=role,
    )
    logger.info("Created user %s (%s)", user.pk, role)
    return user


@transaction.atomic
def update_user(user_id: int, **changes):
    user = get_user(user_id)

    email = changes.get("email")
    if email and email.lower() != user.email:
        email = email.lower()
        _ensure_email_free(email, exclude_pk=user.pk)
        user.email = email
        user.username = email

    for field in ("name", "role", "is_active"):
        if changes.get(field) is not None:
            setattr(user, field, changes[field])

    if changes.get("password"):
        user.set_password(changes["password"])

    user.save()
    return user


def update_profile(user, name: Optional[str] = None, email: Optional[str] = None):
    """Let a user change their own name and email. Role stays as it is."""
    return update_user(user.pk, name=name, email=email)


def change_password(user, current_password: str, new_password: str):
    """
    Change the user's own password.

    Raises:
        WrongPasswordError: If current_password does not match
    """
    if not user.check_password(current_password):
        logger.info("Rejected password change for user %s", user.pk)
        raise WrongPasswordError()
    user.set_password(new_password)
    user.save(update_fields=["password"])
    logger.info("User %s changed their password", user.pk)


def reset_password(user_id: int, new_password: str):
    """Admin reset: set a new password without knowing the old one."""
    user = get_user(user_id)
    user.set_password(new_password)
    user.save(update_fields=["password"])
    logger.info("Password reset for user %s", user.pk)
    return user


def delete_user(user_id: int, *, acting_user):
    user = get_user(user_id)
    if user.pk == acting_user.pk:
        raise ConflictError("You cannot delete your own account")
    user.delete()


def list_signature_templates(user):
    return SignatureTemplate.objects.filter(user=user)


def get_default_signature_template(user) -> Optional[SignatureTemplate]:
    return SignatureTemplate.objects.filter(user=user, is_default=True).first()


def _get_template(user, template_id: int) -> SignatureTemplate:
    try:
        return SignatureTemplate.objects.get(pk=template_id, user=user)
    except SignatureTemplate.DoesNotExist:
        raise NotFoundError("Signature template not found")


@transaction.atomic
def create_signature_template(user, name: str, signature_data: str, is_default: bool = False):
    """Save a signature; a new default replaces the previous one."""
    if is_default:
        SignatureTemplate.objects.filter(user=user, is_default=True).update(is_default=False)
    return SignatureTemplate.objects.create(
        user=user,
        name=name,
        signature_data=signature_data,
        is_default=is_default,
    )


@transaction.atomic
def update_signature_template(user, template_id: int, **changes):
    template = _get_template(user, template_id)

    if changes.get("is_default"):
        SignatureTemplate.objects.filter(user=user, is_default=True).exclude(
            pk=template.pk
        ).update(is_default=False)

    for field in ("name", "signature_data", "is_default"):
        if changes.get(field) is not None:
            setattr(template, field, changes[field])
    template.save()
    return template


def set_default_signature_template(user, template_id: int) -> SignatureTemplate:
    """Make one template the default and unset the others."""
    return update_signature_template(user, template_id, is_default=True)


def delete_signature_template(user, template_id: int):
    _get_template(user, template_id).delete()
