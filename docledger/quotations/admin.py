from django.contrib import admin

from .models import Quotation, QuotationImage, QuotationItem, QuotationSignature


class QuotationItemInline(admin.TabularInline):
    model = QuotationItem
    extra = 0


class QuotationImageInline(admin.TabularInline):
    model = QuotationImage
    extra = 0


class QuotationSignatureInline(admin.TabularInline):
    model = QuotationSignature
    extra = 0


@admin.register(Quotation)
class QuotationAdmin(admin.ModelAdmin):
    list_display = ["quotation_number", "customer_name", "status", "approval_status", "total", "created_at"]
    list_filter = ["status", "approval_status"]
    search_fields = ["quotation_number", "customer_name"]
    readonly_fields = ["quotation_number", "approval_token", "decided_at", "created_at", "updated_at"]
    inlines = [QuotationItemInline, QuotationImageInline, QuotationSignatureInline]
