"""Models for accounts.

Defines the custom User model plus the per-user records hanging off it.
"""

from django.conf import settings
from django.contrib.auth.models import AbstractUser
from django.db import models
from django.db.models import Q

from docledger.core.models import TimeStampedModel


class User(AbstractUser):
    """Staff user. Logs in with email; ``role`` gates admin endpoints."""

    ROLE_CHOICES = [
        ("admin", "Admin"),
        ("user", "User"),
    ]

    email = models.EmailField(unique=True)
    name = models.CharField(max_length=255, blank=True)
    role = models.CharField(max_length=20, choices=ROLE_CHOICES, default="user")

    class Meta:
        verbose_name = "user"
        verbose_name_plural = "users"
        swappable = "AUTH_USER_MODEL"

    def __str__(self):
        return self.name or self.email

    @property
    def is_admin(self) -> bool:
        return self.role == "admin" or self.is_superuser

    @property
    def display_name(self) -> str:
        return self.name or self.get_full_name() or self.email


class LoginHistory(models.Model):
    """One login attempt, successful or not."""

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name="login_history",
    )
    email = models.EmailField(help_text="Email the attempt was made with")
    ip_address = models.GenericIPAddressField(null=True, blank=True)
    user_agent = models.CharField(max_length=512, blank=True)
    success = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-created_at"]
        verbose_name_plural = "login history"

    def __str__(self):
        outcome = "ok" if self.success else "failed"
        return f"{self.email} {outcome} at {self.created_at:%Y-%m-%d %H:%M}"


class SignatureTemplate(TimeStampedModel):
    """Saved signature a user can stamp onto documents."""

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="signature_templates",
    )
    name = models.CharField(max_length=100)
    signature_data = models.TextField(help_text="Base64 data URL of the signature image")
    is_default = models.BooleanField(default=False)

    class Meta:
        ordering = ["-is_default", "-created_at"]
        constraints = [
            models.UniqueConstraint(
                fields=["user"],
                condition=Q(is_default=True),
                name="signaturetemplate_one_default_per_user",
            ),
        ]

    def __str__(self):
        return f"{self.name} ({self.user})"
