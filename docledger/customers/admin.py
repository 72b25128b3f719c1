from django.contrib import admin

from .models import Customer


@admin.register(Customer)
class CustomerAdmin(admin.ModelAdmin):
    list_display = ["name", "email", "phone", "tax_id", "created_at"]
    search_fields = ["name", "email", "phone", "tax_id"]
