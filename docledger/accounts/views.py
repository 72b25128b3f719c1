"""JSON API views for authentication, users and signature templates."""

from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_GET, require_http_methods, require_POST

from docledger.core.pagination import paginate
from docledger.core.responses import paginated_response, success_response
from docledger.core.schemas import parse_body

from . import services
from .decorators import admin_required, token_required
from .models import LoginHistory
from .schemas import (
    ChangePasswordRequest,
    LoginRequest,
    ProfileUpdateRequest,
    RegisterRequest,
    ResetPasswordRequest,
    SignatureTemplateRequest,
    SignatureTemplateUpdateRequest,
    UserCreateRequest,
    UserUpdateRequest,
)
from .serializers import (
    login_history_to_dict,
    signature_template_to_dict,
    user_to_dict,
)


def _client_ip(request):
    forwarded = request.META.get("HTTP_X_FORWARDED_FOR")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.META.get("REMOTE_ADDR")


# =============================================================================
# Authentication
# =============================================================================


@csrf_exempt
@require_POST
def login(request):
    body = parse_body(request, LoginRequest)
    user, token = services.login(
        body.email,
        body.password,
        ip_address=_client_ip(request),
        user_agent=request.headers.get("User-Agent", ""),
    )
    return success_response({"user": user_to_dict(user), "token": token}, "Logged in")


@csrf_exempt
@require_POST
def register(request):
    body = parse_body(request, RegisterRequest)
    user, token = services.register(body.email, body.password, body.name)
    return success_response({"user": user_to_dict(user), "token": token}, "Registered", status=201)


@require_GET
@token_required
def me(request):
    return success_response(user_to_dict(request.user), "Fetched current user")


@csrf_exempt
@require_http_methods(["PUT"])
@token_required
def profile(request):
    body = parse_body(request, ProfileUpdateRequest)
    user = services.update_profile(request.user, body.name, body.email)
    return success_response(user_to_dict(user), "Profile updated")


@csrf_exempt
@require_http_methods(["PUT"])
@token_required
def change_password(request):
    body = parse_body(request, ChangePasswordRequest)
    services.change_password(request.user, body.current_password, body.new_password)
    return success_response(None, "Password changed")


@require_GET
@token_required
def login_history(request):
    """Own login history; admins see everyone's."""
    entries = LoginHistory.objects.select_related("user")
    if not request.user.is_admin:
        entries = entries.filter(user=request.user)
    rows, pagination = paginate(entries, request.GET)
    return paginated_response(
        [login_history_to_dict(e) for e in rows], pagination, "Fetched login history"
    )


@require_GET
@token_required
def failed_logins(request):
    """The ten newest failed attempts on the caller's own account."""
    entries = services.recent_failed_logins(request.user)
    return success_response(
        [login_history_to_dict(e) for e in entries], "Fetched failed logins"
    )


# =============================================================================
# User management (admin only)
# =============================================================================


@csrf_exempt
@require_http_methods(["GET", "POST"])
@admin_required
def user_collection(request):
    if request.method == "POST":
        body = parse_body(request, UserCreateRequest)
        user = services.create_user(body.email, body.password, body.name, body.role)
        return success_response(user_to_dict(user), "User created", status=201)

    users = services.User.objects.order_by("-date_joined")
    return success_response([user_to_dict(u) for u in users], "Fetched users")


@csrf_exempt
@require_http_methods(["GET", "PUT", "DELETE"])
@admin_required
def user_detail(request, user_id: int):
    if request.method == "PUT":
        body = parse_body(request, UserUpdateRequest)
        user = services.update_user(user_id, **body.provided())
        return success_response(user_to_dict(user), "User updated")

    if request.method == "DELETE":
        services.delete_user(user_id, acting_user=request.user)
        return success_response(None, "User deleted")

    return success_response(user_to_dict(services.get_user(user_id)), "Fetched user")


@csrf_exempt
@require_http_methods(["PUT"])
@admin_required
def reset_user_password(request, user_id: int):
    body = parse_body(request, ResetPasswordRequest)
    services.reset_password(user_id, body.new_password)
    return success_response(None, "Password reset")


# =============================================================================
# Signature templates (per user)
# =============================================================================


@csrf_exempt
@require_http_methods(["GET", "POST"])
@token_required
def signature_template_collection(request):
    if request.method == "POST":
        body = parse_body(request, SignatureTemplateRequest)
        template = services.create_signature_template(
            request.user, body.name, body.signature_data, body.is_default
        )
        return success_response(
            signature_template_to_dict(template), "Signature template created", status=201
        )

    templates = services.list_signature_templates(request.user)
    return success_response(
        [signature_template_to_dict(t) for t in templates], "Fetched signature templates"
    )


@require_GET
@token_required
def signature_template_default(request):
    template = services.get_default_signature_template(request.user)
    data = signature_template_to_dict(template) if template else None
    return success_response(data, "Fetched default signature template")


@csrf_exempt
@require_http_methods(["PUT", "DELETE"])
@token_required
def signature_template_detail(request, template_id: int):
    if request.method == "DELETE":
        services.delete_signature_template(request.user, template_id)
        return success_response(None, "Signature template deleted")

    body = parse_body(request, SignatureTemplateUpdateRequest)
    template = services.update_signature_template(request.user, template_id, **body.provided())
    return success_response(signature_template_to_dict(template), "Signature template updated")


@csrf_exempt
@require_POST
@token_required
def signature_template_set_default(request, template_id: int):
    template = services.set_default_signature_template(request.user, template_id)
    return success_response(signature_template_to_dict(template), "Default signature template set")
