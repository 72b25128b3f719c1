"""JSON API views for quotations (staff side)."""

from django.http import HttpResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_GET, require_http_methods, require_POST

from docledger.accounts.decorators import acting_user, token_optional
from docledger.core.pagination import paginate
from docledger.core.responses import paginated_response, success_response
from docledger.core.schemas import parse_body
from docledger.invoicing.schemas import ImageRequest, SignatureRequest
from docledger.invoicing.serializers import image_to_dict, invoice_to_dict, signature_to_dict
from docledger.rendering.renderer import filename_for

from . import conversion, selectors, services
from .schemas import QuotationCreateRequest, QuotationUpdateRequest, SendQuotationRequest
from .serializers import quotation_to_dict


@csrf_exempt
@require_http_methods(["GET", "POST"])
@token_optional
def quotation_collection(request):
    if request.method == "POST":
        body = parse_body(request, QuotationCreateRequest)
        quotation = services.create_quotation(
            body,
            created_by=acting_user(request),
            notifier=request.services.notifier,
        )
        quotation = selectors.get_quotation(quotation.pk)
        return success_response(quotation_to_dict(quotation, detail=True), "Quotation created", status=201)

    quotations = selectors.list_quotations(request.GET.get("status", "").strip())
    rows, pagination = paginate(quotations, request.GET)
    return paginated_response(
        [quotation_to_dict(q) for q in rows], pagination, "Fetched quotations"
    )


@csrf_exempt
@require_http_methods(["GET", "PUT", "DELETE"])
def quotation_detail(request, quotation_id: int):
    if request.method == "PUT":
        body = parse_body(request, QuotationUpdateRequest)
        quotation = services.update_quotation(quotation_id, body)
        return success_response(quotation_to_dict(quotation, detail=True), "Quotation updated")

    if request.method == "DELETE":
        services.delete_quotation(quotation_id)
        return success_response(None, "Quotation deleted")

    quotation = selectors.get_quotation(quotation_id)
    return success_response(quotation_to_dict(quotation, detail=True), "Fetched quotation")


@csrf_exempt
@require_POST
def convert_to_invoice(request, quotation_id: int):
    """201 with the new invoice, or 200 with the one created earlier."""
    result = conversion.convert_to_invoice(
        quotation_id,
        notifier=request.services.notifier,
        renderer=request.services.renderer,
    )
    if result.created:
        return success_response(
            invoice_to_dict(result.invoice, detail=True),
            "Quotation converted to invoice",
            status=201,
        )
    return success_response(
        invoice_to_dict(result.invoice, detail=True),
        "Quotation was already converted to this invoice",
    )


@csrf_exempt
@require_POST
def quotation_signature(request, quotation_id: int):
    body = parse_body(request, SignatureRequest)
    signature = services.add_signature(quotation_id, body.signature_data, body.signed_by)
    return success_response(signature_to_dict(signature), "Signature saved", status=201)


@csrf_exempt
@require_POST
def quotation_image(request, quotation_id: int):
    body = parse_body(request, ImageRequest)
    image = services.add_image(quotation_id, body.url, body.filename)
    return success_response(image_to_dict(image), "Image attached", status=201)


@csrf_exempt
@require_POST
def send_quotation(request, quotation_id: int):
    """Email the quotation to the customer. Delivery failure is reported, not raised."""
    body = parse_body(request, SendQuotationRequest)
    result = services.send_quotation(
        quotation_id,
        body.email,
        notifier=request.services.notifier,
        renderer=request.services.renderer,
    )
    data = {"sent": result.sent, "email": result.recipient, "error": result.error}
    message = "Quotation sent" if result.sent else "Quotation could not be sent"
    return success_response(data, message)


@require_GET
def quotation_pdf(request, quotation_id: int):
    quotation = selectors.get_quotation(quotation_id)
    pdf_bytes = request.services.renderer.render_quotation(quotation)

    disposition = "inline" if request.GET.get("inline") else "attachment"
    response = HttpResponse(pdf_bytes, content_type="application/pdf")
    response["Content-Disposition"] = f'{disposition}; filename="{filename_for("quotation", quotation)}"'
    return response
