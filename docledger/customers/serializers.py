def customer_to_dict(customer) -> dict:
    return {
        "id": customer.pk,
        "name": customer.name,
        "email": customer.email,
        "phone": customer.phone,
        "address": customer.address,
        "taxId": customer.tax_id,
        "createdAt": customer.created_at,
        "updatedAt": customer.updated_at,
    }
