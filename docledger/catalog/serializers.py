def product_to_dict(product) -> dict:
    return {
        "id": product.pk,
        "name": product.name,
        "description": product.description,
        "price": product.price,
        "unit": product.unit,
        "isActive": product.is_active,
        "createdAt": product.created_at,
        "updatedAt": product.updated_at,
    }
