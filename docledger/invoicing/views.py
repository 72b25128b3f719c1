"""JSON API views for invoices and payments."""

from django.http import HttpResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_GET, require_http_methods, require_POST

from docledger.accounts.decorators import acting_user, token_optional, token_required
from docledger.core.pagination import paginate
from docledger.core.responses import paginated_response, success_response
from docledger.core.schemas import parse_body
from docledger.receipts.serializers import receipt_to_dict
from docledger.rendering.renderer import filename_for

from . import payments, selectors, services
from .schemas import (
    ImageRequest,
    InvoiceCreateRequest,
    InvoiceStatusRequest,
    InvoiceUpdateRequest,
    PaymentRequest,
    SignatureRequest,
)
from .serializers import image_to_dict, invoice_to_dict, signature_to_dict


@csrf_exempt
@require_http_methods(["GET", "POST"])
@token_optional
def invoice_collection(request):
    if request.method == "POST":
        body = parse_body(request, InvoiceCreateRequest)
        invoice = services.create_invoice(body, created_by=acting_user(request))
        invoice = selectors.get_invoice(invoice.pk)
        return success_response(invoice_to_dict(invoice, detail=True), "Invoice created", status=201)

    invoices = selectors.list_invoices(request.GET.get("status", "").strip())
    rows, pagination = paginate(invoices, request.GET)
    return paginated_response(
        [invoice_to_dict(i) for i in rows], pagination, "Fetched invoices"
    )


@csrf_exempt
@require_http_methods(["GET", "PUT", "DELETE"])
def invoice_detail(request, invoice_id: int):
    if request.method == "PUT":
        body = parse_body(request, InvoiceUpdateRequest)
        invoice = services.update_invoice(invoice_id, body)
        return success_response(invoice_to_dict(invoice, detail=True), "Invoice updated")

    if request.method == "DELETE":
        services.delete_invoice(invoice_id)
        return success_response(None, "Invoice deleted")

    invoice = selectors.get_invoice(invoice_id)
    return success_response(invoice_to_dict(invoice, detail=True), "Fetched invoice")


@csrf_exempt
@require_http_methods(["PATCH", "PUT"])
def invoice_status(request, invoice_id: int):
    body = parse_body(request, InvoiceStatusRequest)
    invoice = services.set_status(invoice_id, body.status)
    return success_response(invoice_to_dict(invoice, detail=True), "Invoice status updated")


@csrf_exempt
@require_POST
@token_required
def record_payment(request, invoice_id: int):
    """Apply a payment; the response carries the invoice and its new receipt."""
    body = parse_body(request, PaymentRequest)
    result = payments.apply_payment(
        invoice_id,
        body.amount,
        body.payment_method,
        body.notes,
        recorded_by=request.user,
        notifier=request.services.notifier,
        renderer=request.services.renderer,
    )
    data = invoice_to_dict(result.invoice, detail=True)
    data["receipt"] = receipt_to_dict(result.receipt)
    return success_response(data, "Payment recorded")


@csrf_exempt
@require_POST
def invoice_signature(request, invoice_id: int):
    body = parse_body(request, SignatureRequest)
    signature = services.add_signature(invoice_id, body.signature_data, body.signed_by)
    return success_response(signature_to_dict(signature), "Signature saved", status=201)


@csrf_exempt
@require_POST
def invoice_image(request, invoice_id: int):
    body = parse_body(request, ImageRequest)
    image = services.add_image(invoice_id, body.url, body.filename)
    return success_response(image_to_dict(image), "Image attached", status=201)


@require_GET
def invoice_pdf(request, invoice_id: int):
    """Download the invoice as PDF.

    ``?inline=1`` shows it in the browser instead of downloading.
    """
    invoice = selectors.get_invoice(invoice_id)
    pdf_bytes = request.services.renderer.render_invoice(invoice)

    disposition = "inline" if request.GET.get("inline") else "attachment"
    response = HttpResponse(pdf_bytes, content_type="application/pdf")
    response["Content-Disposition"] = f'{disposition}; filename="{filename_for("invoice", invoice)}"'
    return response
