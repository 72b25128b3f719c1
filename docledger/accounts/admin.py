"""Django admin configuration for accounts."""

from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin

from .models import LoginHistory, SignatureTemplate, User


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    list_display = ["email", "name", "role", "is_active", "date_joined"]
    list_filter = ["role", "is_active"]
    search_fields = ["email", "name"]
    fieldsets = BaseUserAdmin.fieldsets + (("Role", {"fields": ("name", "role")}),)


@admin.register(LoginHistory)
class LoginHistoryAdmin(admin.ModelAdmin):
    list_display = ["email", "success", "ip_address", "created_at"]
    list_filter = ["success"]
    readonly_fields = ["user", "email", "ip_address", "user_agent", "success", "created_at"]


@admin.register(SignatureTemplate)
class SignatureTemplateAdmin(admin.ModelAdmin):
    list_display = ["name", "user", "is_default", "created_at"]
