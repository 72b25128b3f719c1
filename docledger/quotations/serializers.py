from docledger.invoicing.serializers import (
    customer_snapshot,
    document_totals,
    image_to_dict,
    item_to_dict,
    signature_to_dict,
)


def quotation_to_dict(quotation, *, detail: bool = False) -> dict:
    data = {
        "id": quotation.pk,
        "quotationNo": quotation.quotation_number,
        **customer_snapshot(quotation),
        **document_totals(quotation),
        "status": quotation.status,
        "approvalStatus": quotation.approval_status,
        "approvalNotes": quotation.approval_notes,
        "approvedAt": quotation.decided_at,
        "validUntil": quotation.valid_until,
        "notes": quotation.notes,
        "createdAt": quotation.created_at,
        "updatedAt": quotation.updated_at,
        "items": [item_to_dict(item) for item in quotation.items.all()],
    }
    if detail:
        data["approvalToken"] = quotation.approval_token
        data["images"] = [image_to_dict(i) for i in quotation.images.all()]
        data["signatures"] = [signature_to_dict(s) for s in quotation.signatures.all()]
    return data


def public_quotation_to_dict(quotation) -> dict:
    """What the customer sees on the approval page: no internal ids or token."""
    data = quotation_to_dict(quotation)
    data.pop("customerId", None)
    data["images"] = [image_to_dict(i) for i in quotation.images.all()]
    data["signatures"] = [signature_to_dict(s) for s in quotation.signatures.all()]
    data["isExpired"] = quotation.is_expired
    return data
