"""JSON API views for customers."""

from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_http_methods

from docledger.core.pagination import paginate
from docledger.core.responses import paginated_response, success_response
from docledger.core.schemas import parse_body

from . import services
from .schemas import CustomerRequest, CustomerUpdateRequest
from .serializers import customer_to_dict


@csrf_exempt
@require_http_methods(["GET", "POST"])
def customer_collection(request):
    if request.method == "POST":
        body = parse_body(request, CustomerRequest)
        customer = services.create_customer(**body.model_dump())
        return success_response(customer_to_dict(customer), "Customer created", status=201)

    customers = services.list_customers(request.GET.get("search", "").strip())
    rows, pagination = paginate(customers, request.GET)
    return paginated_response(
        [customer_to_dict(c) for c in rows], pagination, "Fetched customers"
    )


@csrf_exempt
@require_http_methods(["GET", "PUT", "DELETE"])
def customer_detail(request, customer_id: int):
    if request.method == "PUT":
        body = parse_body(request, CustomerUpdateRequest)
        customer = services.update_customer(customer_id, **body.provided())
        return success_response(customer_to_dict(customer), "Customer updated")

    if request.method == "DELETE":
        services.delete_customer(customer_id)
        return success_response(None, "Customer deleted")

    return success_response(customer_to_dict(services.get_customer(customer_id)), "Fetched customer")
