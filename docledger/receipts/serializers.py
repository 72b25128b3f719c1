from docledger.accounts.serializers import user_summary
from docledger.invoicing.serializers import signature_to_dict


def receipt_to_dict(receipt, *, detail: bool = False) -> dict:
    data = {
        "id": receipt.pk,
        "receiptNo": receipt.receipt_number,
        "invoiceId": receipt.invoice_id,
        "invoiceNo": receipt.invoice.invoice_number,
        "paymentId": receipt.payment_id,
        "customerName": receipt.invoice.customer_name,
        "amount": receipt.amount,
        "paymentMethod": receipt.method,
        "notes": receipt.notes,
        "issuedBy": user_summary(receipt.issued_by),
        "createdAt": receipt.created_at,
    }
    if detail:
        data["remainingAmount"] = receipt.invoice.remaining_amount
        data["signatures"] = [signature_to_dict(s) for s in receipt.signatures.all()]
    return data
