"""Plain-dict renderings of invoicing models for JSON responses.

Also holds the item/image/signature renderers quotations reuse.
"""


def customer_snapshot(document) -> dict:
    return {
        "customerId": document.customer_id,
        "customerName": document.customer_name,
        "customerPhone": document.customer_phone,
        "customerAddress": document.customer_address,
        "customerEmail": document.customer_email,
    }


def document_totals(document) -> dict:
    return {
        "subtotal": document.subtotal,
        "discount": document.discount_amount,
        "vat": document.vat_percent,
        "vatAmount": document.vat_amount,
        "total": document.total,
    }


def item_to_dict(item) -> dict:
    return {
        "id": item.pk,
        "productId": item.product_id,
        "productName": item.product_name,
        "description": item.description,
        "quantity": item.quantity,
        "price": item.unit_price,
        "total": item.line_total,
    }


def image_to_dict(image) -> dict:
    return {
        "id": image.pk,
        "url": image.url,
        "filename": image.filename,
        "createdAt": image.created_at,
    }


def signature_to_dict(signature) -> dict:
    return {
        "id": signature.pk,
        "signatureData": signature.signature_data,
        "signedBy": signature.signed_by,
        "signedAt": signature.signed_at,
    }


def payment_to_dict(payment) -> dict:
    return {
        "id": payment.pk,
        "invoiceId": payment.invoice_id,
        "amount": payment.amount,
        "paymentMethod": payment.method,
        "notes": payment.notes,
        "recordedBy": payment.recorded_by_id,
        "createdAt": payment.created_at,
    }


def invoice_to_dict(invoice, *, detail: bool = False) -> dict:
    data = {
        "id": invoice.pk,
        "invoiceNo": invoice.invoice_number,
        "quotationId": invoice.quotation_id,
        **customer_snapshot(invoice),
        **document_totals(invoice),
        "paidAmount": invoice.paid_amount,
        "remainingAmount": invoice.remaining_amount,
        "status": invoice.status,
        "dueDate": invoice.due_date,
        "paidDate": invoice.paid_at,
        "notes": invoice.notes,
        "createdAt": invoice.created_at,
        "updatedAt": invoice.updated_at,
        "items": [item_to_dict(item) for item in invoice.items.all()],
        "payments": [payment_to_dict(p) for p in invoice.payments.all()],
    }
    if detail:
        data["images"] = [image_to_dict(i) for i in invoice.images.all()]
        data["signatures"] = [signature_to_dict(s) for s in invoice.signatures.all()]
    return data
