"""Customer services."""

import logging

from docledger.core.exceptions import NotFoundError

from .models import Customer

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = ("name", "email", "phone", "address", "tax_id")


def get_customer(customer_id: int) -> Customer:
    try:
        return Customer.objects.get(pk=customer_id)
    except Customer.DoesNotExist:
        raise NotFoundError("Customer not found")


def list_customers(search: str = ""):
    customers = Customer.objects.all()
    if search:
        customers = customers.filter(name__icontains=search)
    return customers


def create_customer(**fields) -> Customer:
    customer = Customer.objects.create(
        **{k: v for k, v in fields.items() if k in EDITABLE_FIELDS}
    )
    logger.info("Created customer %s", customer.pk)
    return customer


def update_customer(customer_id: int, **changes) -> Customer:
    customer = get_customer(customer_id)
    for field in EDITABLE_FIELDS:
        if changes.get(field) is not None:
            setattr(customer, field, changes[field])
    customer.save()
    return customer


def delete_customer(customer_id: int):
    """Delete a customer. Documents keep their snapshot; the link is cleared."""
    get_customer(customer_id).delete()
