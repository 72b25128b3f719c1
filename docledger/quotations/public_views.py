"""Unauthenticated views behind the customer's approval link."""

from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_GET, require_POST

from docledger.core.responses import success_response
from docledger.core.schemas import parse_body

from . import approval
from .schemas import DecisionRequest
from .serializers import public_quotation_to_dict


@require_GET
def public_quotation(request, token: str):
    quotation = approval.get_by_token(token)
    return success_response(public_quotation_to_dict(quotation), "Fetched quotation")


@csrf_exempt
@require_POST
def approve_quotation(request, token: str):
    body = parse_body(request, DecisionRequest)
    quotation = approval.approve(token, body.comment, notifier=request.services.notifier)
    return success_response(public_quotation_to_dict(quotation), "Quotation approved")


@csrf_exempt
@require_POST
def reject_quotation(request, token: str):
    body = parse_body(request, DecisionRequest)
    quotation = approval.reject(token, body.comment, notifier=request.services.notifier)
    return success_response(public_quotation_to_dict(quotation), "Quotation rejected")
