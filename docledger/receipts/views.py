"""JSON API views for receipts. Receipts are read-only apart from signatures."""

from django.http import HttpResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_GET, require_POST

from docledger.core.pagination import paginate
from docledger.core.responses import paginated_response, success_response
from docledger.core.schemas import parse_body
from docledger.invoicing.schemas import SignatureRequest
from docledger.invoicing.selectors import get_invoice
from docledger.invoicing.serializers import signature_to_dict
from docledger.rendering.renderer import filename_for

from . import services
from .serializers import receipt_to_dict


@require_GET
def receipt_list(request):
    rows, pagination = paginate(services.receipt_queryset(), request.GET)
    return paginated_response(
        [receipt_to_dict(r) for r in rows], pagination, "Fetched receipts"
    )


@require_GET
def receipt_detail(request, receipt_id: int):
    receipt = services.get_receipt(receipt_id)
    return success_response(receipt_to_dict(receipt, detail=True), "Fetched receipt")


@require_GET
def receipts_by_invoice(request, invoice_id: int):
    invoice = get_invoice(invoice_id)
    receipts = services.receipts_for_invoice(invoice.pk)
    return success_response([receipt_to_dict(r) for r in receipts], "Fetched receipts")


@csrf_exempt
@require_POST
def receipt_signature(request, receipt_id: int):
    body = parse_body(request, SignatureRequest)
    signature = services.add_signature(receipt_id, body.signature_data, body.signed_by)
    return success_response(signature_to_dict(signature), "Signature saved", status=201)


@require_GET
def receipt_pdf(request, receipt_id: int):
    receipt = services.get_receipt(receipt_id)
    pdf_bytes = request.services.renderer.render_receipt(receipt)

    disposition = "inline" if request.GET.get("inline") else "attachment"
    response = HttpResponse(pdf_bytes, content_type="application/pdf")
    response["Content-Disposition"] = f'{disposition}; filename="{filename_for("receipt", receipt)}"'
    return response
