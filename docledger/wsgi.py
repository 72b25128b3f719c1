"""WSGI config for docledger project."""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "docledger.settings")

application = get_wsgi_application()
