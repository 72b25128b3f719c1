"""Product services. Products are soft-deleted so old documents keep their link."""

import logging

from docledger.core.exceptions import NotFoundError

from .models import Product

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = ("name", "description", "price", "unit", "is_active")


def get_product(product_id: int, *, include_inactive: bool = False) -> Product:
    manager = Product.all_objects if include_inactive else Product.objects
    try:
        return manager.get(pk=product_id)
    except Product.DoesNotExist:
        raise NotFoundError("Product not found")


def list_products(search: str = ""):
    products = Product.objects.all()
    if search:
        products = products.filter(name__icontains=search)
    return products


def create_product(**fields) -> Product:
    product = Product.objects.create(
        **{k: v for k, v in fields.items() if k in EDITABLE_FIELDS}
    )
    logger.info("Created product %s", product.pk)
    return product


def update_product(product_id: int, **changes) -> Product:
    product = get_product(product_id, include_inactive=True)
    for field in EDITABLE_FIELDS:
        if changes.get(field) is not None:
            setattr(product, field, changes[field])
    product.save()
    return product


def deactivate_product(product_id: int) -> Product:
    product = get_product(product_id)
    product.is_active = False
    product.save(update_fields=["is_active", "updated_at"])
    logger.info("Deactivated product %s", product.pk)
    return product
