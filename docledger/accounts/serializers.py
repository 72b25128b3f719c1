"""Plain-dict renderings of account models for JSON responses."""


def user_to_dict(user) -> dict:
    return {
        "id": user.pk,
        "email": user.email,
        "name": user.name,
        "role": user.role,
        "isActive": user.is_active,
        "createdAt": user.date_joined,
    }


def user_summary(user) -> dict:
    """Short form embedded in documents (receipts, etc.)."""
    if user is None:
        return None
    return {"id": user.pk, "name": user.display_name, "email": user.email}


def login_history_to_dict(entry) -> dict:
    return {
        "id": entry.pk,
        "userId": entry.user_id,
        "email": entry.email,
        "ipAddress": entry.ip_address,
        "userAgent": entry.user_agent,
        "success": entry.success,
        "createdAt": entry.created_at,
    }


def signature_template_to_dict(template) -> dict:
    return {
        "id": template.pk,
        "name": template.name,
        "signatureData": template.signature_data,
        "isDefault": template.is_default,
        "createdAt": template.created_at,
        "updatedAt": template.updated_at,
    }
