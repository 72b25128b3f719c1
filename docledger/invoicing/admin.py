"""Admin configuration for invoicing models."""

from django.contrib import admin

from .models import Invoice, InvoiceImage, InvoiceItem, InvoiceSignature, Payment


class InvoiceItemInline(admin.TabularInline):
    model = InvoiceItem
    extra = 0
    readonly_fields = ["product", "product_name", "quantity", "unit_price", "line_total"]
    can_delete = False


class PaymentInline(admin.TabularInline):
    model = Payment
    extra = 0
    readonly_fields = ["amount", "method", "notes", "recorded_by", "created_at"]
    can_delete = False


class InvoiceImageInline(admin.TabularInline):
    model = InvoiceImage
    extra = 0


class InvoiceSignatureInline(admin.TabularInline):
    model = InvoiceSignature
    extra = 0


@admin.register(Invoice)
class InvoiceAdmin(admin.ModelAdmin):
    list_display = [
        "invoice_number",
        "customer_name",
        "status",
        "total",
        "paid_amount",
        "remaining_amount",
        "created_at",
    ]
    list_filter = ["status", "created_at"]
    search_fields = ["invoice_number", "customer_name"]
    readonly_fields = [
        "invoice_number",
        "quotation",
        "subtotal",
        "discount_amount",
        "vat_percent",
        "total",
        "paid_amount",
        "remaining_amount",
        "paid_at",
        "created_at",
        "updated_at",
    ]
    inlines = [InvoiceItemInline, PaymentInline, InvoiceImageInline, InvoiceSignatureInline]
