from django.contrib import admin

from .models import Receipt, ReceiptSignature


class ReceiptSignatureInline(admin.TabularInline):
    model = ReceiptSignature
    extra = 0


@admin.register(Receipt)
class ReceiptAdmin(admin.ModelAdmin):
    list_display = ["receipt_number", "invoice", "amount", "method", "issued_by", "created_at"]
    search_fields = ["receipt_number", "invoice__invoice_number"]
    readonly_fields = ["receipt_number", "invoice", "payment", "issued_by", "amount", "method", "created_at"]
    inlines = [ReceiptSignatureInline]

    def has_add_permission(self, request):
        return False
