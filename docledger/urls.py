"""URL configuration for docledger project.

Every JSON endpoint lives under /api/; the Django admin stays at /admin/.
"""

from django.conf import settings
from django.conf.urls.static import static
from django.contrib import admin
from django.urls import include, path

from . import views

api_urlpatterns = [
    # Health check
    path("health", views.health_check, name="health_check"),

    path("", include("docledger.accounts.urls")),
    path("", include("docledger.dashboard.urls")),
    path("", include("docledger.notifications.urls")),
    path("", include("docledger.customers.urls")),
    path("", include("docledger.catalog.urls")),
    path("", include("docledger.quotations.urls")),
    path("", include("docledger.invoicing.urls")),
    path("", include("docledger.receipts.urls")),
    path("", include("docledger.uploads.urls")),
]

urlpatterns = [
    path("admin/", admin.site.urls),
    path("api/", include(api_urlpatterns)),
]

# Serve uploaded images in development
if settings.DEBUG:
    urlpatterns += static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)
