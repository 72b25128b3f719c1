"""
Django settings for docledger project.

Values come from the environment (a .env file is loaded first).
PostgreSQL is the production database; DATABASE_ENGINE=sqlite switches to
a local SQLite file for quick runs.
"""

import os
from decimal import Decimal
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# Build paths inside the project like this: BASE_DIR / 'subdir'.
BASE_DIR = Path(__file__).resolve().parent.parent


def env_bool(name: str, default: str = "False") -> bool:
    return os.getenv(name, default).lower() in ("true", "1", "yes")


# SECURITY WARNING: keep the secret key used in production secret!
SECRET_KEY = os.getenv("SECRET_KEY", "django-insecure-docledger-key-change-in-production")

# SECURITY WARNING: don't run with debug turned on in production!
DEBUG = env_bool("DEBUG", "True")

ALLOWED_HOSTS = [h.strip() for h in os.getenv("ALLOWED_HOSTS", "*").split(",") if h.strip()]

# Application definition
INSTALLED_APPS = [
    "django.contrib.admin",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.messages",
    "django.contrib.staticfiles",
    # Foundation
    "docledger.core",
    "docledger.sequence",
    "docledger.accounts",
    # Master data
    "docledger.customers",
    "docledger.catalog",
    # Documents
    "docledger.invoicing",
    "docledger.quotations",
    "docledger.receipts",
    # Collaborators
    "docledger.notifications",
    "docledger.rendering",
    "docledger.uploads",
    "docledger.dashboard",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
    "docledger.middleware.ServicesMiddleware",
    "docledger.core.middleware.ApiErrorMiddleware",
]

ROOT_URLCONF = "docledger.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.debug",
                "django.template.context_processors.request",
                "django.contrib.auth.context_processors.auth",
                "django.contrib.messages.context_processors.messages",
            ],
        },
    },
]

WSGI_APPLICATION = "docledger.wsgi.application"

# Database
if os.getenv("DATABASE_ENGINE", "postgresql") == "sqlite":
    DATABASES = {
        "default": {
            "ENGINE": "django.db.backends.sqlite3",
            "NAME": os.getenv("SQLITE_PATH", str(BASE_DIR / "db.sqlite3")),
        }
    }
else:
    DATABASES = {
        "default": {
            "ENGINE": "django.db.backends.postgresql",
            "NAME": os.getenv("POSTGRES_DB", "docledger"),
            "USER": os.getenv("POSTGRES_USER", "postgres"),
            "PASSWORD": os.getenv("POSTGRES_PASSWORD", "postgres"),
            "HOST": os.getenv("POSTGRES_HOST", "localhost"),
            "PORT": os.getenv("POSTGRES_PORT", "5432"),
            "OPTIONS": {
                "connect_timeout": 10,
            },
            "TEST": {
                "NAME": os.getenv("POSTGRES_TEST_DB", "test_docledger"),
            },
        }
    }

# Custom user model: email login with admin/user role
AUTH_USER_MODEL = "accounts.User"

# Password validation
AUTH_PASSWORD_VALIDATORS = [
    {"NAME": "django.contrib.auth.password_validation.UserAttributeSimilarityValidator"},
    {"NAME": "django.contrib.auth.password_validation.MinimumLengthValidator"},
    {"NAME": "django.contrib.auth.password_validation.CommonPasswordValidator"},
    {"NAME": "django.contrib.auth.password_validation.NumericPasswordValidator"},
]

# Internationalization
# Document numbers use the Buddhist-era year of the business time zone.
LANGUAGE_CODE = "en-us"
TIME_ZONE = os.getenv("TIME_ZONE", "Asia/Bangkok")
USE_I18N = True
USE_TZ = True

# Static files (CSS, JavaScript, Images)
STATIC_URL = "static/"
STATIC_ROOT = BASE_DIR / "staticfiles"

# Uploaded images
MEDIA_URL = os.getenv("MEDIA_URL", "/media/")
MEDIA_ROOT = Path(os.getenv("MEDIA_ROOT", str(BASE_DIR / "media")))

# Default primary key field type
DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# Email
EMAIL_BACKEND = os.getenv("EMAIL_BACKEND", "django.core.mail.backends.console.EmailBackend")
EMAIL_HOST = os.getenv("EMAIL_HOST", "smtp.gmail.com")
EMAIL_PORT = int(os.getenv("EMAIL_PORT", "465"))
EMAIL_HOST_USER = os.getenv("EMAIL_HOST_USER", "")
EMAIL_HOST_PASSWORD = os.getenv("EMAIL_HOST_PASSWORD", "")
EMAIL_USE_SSL = env_bool("EMAIL_USE_SSL", "True")
EMAIL_TIMEOUT = 30
DEFAULT_FROM_EMAIL = os.getenv("DEFAULT_FROM_EMAIL", EMAIL_HOST_USER or "noreply@localhost")

# Document ledger configuration
DOCLEDGER = {
    "CURRENCY": "THB",
    "VAT_PERCENT": Decimal(os.getenv("VAT_PERCENT", "7")),
    # allow | reject | clamp
    "DISCOUNT_POLICY": os.getenv("DISCOUNT_POLICY", "allow"),
    "OVERPAYMENT_POLICY": os.getenv("OVERPAYMENT_POLICY", "allow"),
    "OWNER_EMAIL": os.getenv("OWNER_EMAIL", ""),
    "PUBLIC_BASE_URL": os.getenv("PUBLIC_BASE_URL", "http://localhost:5173"),
    "COMPANY_NAME": os.getenv("COMPANY_NAME", "docledger"),
    "TOKEN_MAX_AGE": int(os.getenv("TOKEN_MAX_AGE", str(60 * 60 * 24 * 7))),
    "UPLOAD_MAX_BYTES": 5 * 1024 * 1024,
    "UPLOAD_DIR": "uploads",
    "NOTIFICATIONS_ENABLED": env_bool("NOTIFICATIONS_ENABLED", "True"),
}

# Logging configuration
LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "verbose": {
            "format": "{levelname} {asctime} {module} {message}",
            "style": "{",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "verbose",
        },
    },
    "root": {
        "handlers": ["console"],
        "level": "INFO",
    },
    "loggers": {
        "django": {
            "handlers": ["console"],
            "level": os.getenv("DJANGO_LOG_LEVEL", "INFO"),
            "propagate": False,
        },
        "docledger": {
            "handlers": ["console"],
            "level": os.getenv("DOCLEDGER_LOG_LEVEL", "DEBUG"),
            "propagate": False,
        },
    },
}
