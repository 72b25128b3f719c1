"""URL configuration for accounts."""

from django.urls import path

from . import views

app_name = "accounts"

urlpatterns = [
    # Authentication
    path("auth/login", views.login, name="login"),
    path("auth/register", views.register, name="register"),
    path("auth/me", views.me, name="me"),
    path("auth/profile", views.profile, name="profile"),
    path("auth/change-password", views.change_password, name="change-password"),
    path("auth/login-history", views.login_history, name="login-history"),
    path("auth/login-history/failed", views.failed_logins, name="login-history-failed"),

    # User management (admin only)
    path("admin/users", views.user_collection, name="user-collection"),
    path("admin/users/<int:user_id>", views.user_detail, name="user-detail"),
    path("admin/users/<int:user_id>/reset-password", views.reset_user_password, name="user-reset-password"),

    # Signature templates
    path("signature-templates", views.signature_template_collection, name="signature-template-collection"),
    path("signature-templates/default", views.signature_template_default, name="signature-template-default"),
    path("signature-templates/<int:template_id>", views.signature_template_detail, name="signature-template-detail"),
    path(
        "signature-templates/<int:template_id>/set-default",
        views.signature_template_set_default,
        name="signature-template-set-default",
    ),
]
