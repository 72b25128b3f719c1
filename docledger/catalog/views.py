"""JSON API views for products."""

from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_http_methods

from docledger.core.pagination import paginate
from docledger.core.responses import paginated_response, success_response
from docledger.core.schemas import parse_body

from . import services
from .schemas import ProductRequest, ProductUpdateRequest
from .serializers import product_to_dict


@csrf_exempt
@require_http_methods(["GET", "POST"])
def product_collection(request):
    if request.method == "POST":
        body = parse_body(request, ProductRequest)
        product = services.create_product(**body.model_dump())
        return success_response(product_to_dict(product), "Product created", status=201)

    products = services.list_products(request.GET.get("search", "").strip())
    rows, pagination = paginate(products, request.GET)
    return paginated_response(
        [product_to_dict(p) for p in rows], pagination, "Fetched products"
    )


@csrf_exempt
@require_http_methods(["GET", "PUT", "DELETE"])
def product_detail(request, product_id: int):
    if request.method == "PUT":
        body = parse_body(request, ProductUpdateRequest)
        product = services.update_product(product_id, **body.provided())
        return success_response(product_to_dict(product), "Product updated")

    if request.method == "DELETE":
        services.deactivate_product(product_id)
        return success_response(None, "Product deleted")

    return success_response(product_to_dict(services.get_product(product_id)), "Fetched product")
