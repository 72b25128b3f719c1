from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_POST
from pydantic import EmailStr

from docledger.accounts.decorators import admin_required
from docledger.core.responses import error_response, success_response
from docledger.core.schemas import RequestSchema, parse_body

from .dispatch import send_check_email


class EmailCheckRequest(RequestSchema):
    email: EmailStr


@csrf_exempt
@require_POST
@admin_required
def send_test_email(request):
    body = parse_body(request, EmailCheckRequest)
    result = send_check_email(request.services.notifier, body.email)
    if not result.sent:
        return error_response(f"Could not send email: {result.reason}", status=500)
    return success_response({"email": body.email}, f"Test email sent to {body.email}")
