from django.views.decorators.http import require_GET

from docledger.accounts.decorators import admin_required
from docledger.core.responses import success_response

from .stats import dashboard_statistics


def _document_row(number: str, document) -> dict:
    return {
        "id": document.pk,
        "number": number,
        "customerName": document.customer_name,
        "total": document.total,
        "status": document.status,
        "createdAt": document.created_at,
    }


@require_GET
@admin_required
def dashboard(request):
    stats = dashboard_statistics()
    stats["recentQuotations"] = [
        _document_row(q.quotation_number, q) for q in stats["recentQuotations"]
    ]
    stats["recentInvoices"] = [
        _document_row(i.invoice_number, i) for i in stats["recentInvoices"]
    ]
    return success_response(stats, "Fetched dashboard statistics")
