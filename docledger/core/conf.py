"""Configuration for docledger.

All project-level knobs live in a single ``DOCLEDGER`` dict in Django
settings. Missing keys fall back to ``DEFAULTS``.
"""

from decimal import Decimal

from django.conf import settings

DEFAULTS = {
    "CURRENCY": "THB",
    "VAT_PERCENT": Decimal("7"),
    # allow | reject | clamp
    "DISCOUNT_POLICY": "allow",
    # allow | reject | clamp
    "OVERPAYMENT_POLICY": "allow",
    "OWNER_EMAIL": "",
    "PUBLIC_BASE_URL": "http://localhost:5173",
    "COMPANY_NAME": "docledger",
    "TOKEN_MAX_AGE": 60 * 60 * 24 * 7,
    "UPLOAD_MAX_BYTES": 5 * 1024 * 1024,
    "UPLOAD_DIR": "uploads",
    "NOTIFICATIONS_ENABLED": True,
}

POLICY_CHOICES = ("allow", "reject", "clamp")


def ledger_setting(name: str):
    """Return a DOCLEDGER setting, falling back to the default.

    Raises:
        KeyError: If ``name`` is not a known setting
    """
    if name not in DEFAULTS:
        raise KeyError(f"Unknown DOCLEDGER setting: {name}")
    configured = getattr(settings, "DOCLEDGER", {}) or {}
    return configured.get(name, DEFAULTS[name])


def policy_setting(name: str) -> str:
    """Return a validated policy setting (DISCOUNT_POLICY, OVERPAYMENT_POLICY)."""
    value = ledger_setting(name)
    if value not in POLICY_CHOICES:
        raise ValueError(f"DOCLEDGER[{name!r}] must be one of {POLICY_CHOICES}, got {value!r}")
    return value
