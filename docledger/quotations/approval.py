"""Public approval flow.

Customers open the link carrying the quotation's approval token and accept
or reject it once. No login is involved; the token is the credential.
"""

import logging

from django.db import transaction
from django.utils import timezone

from docledger.core.tasks import after_commit
from docledger.notifications import dispatch

from .exceptions import QuotationAlreadyDecidedError, QuotationNotFoundError
from .models import Quotation
from .selectors import get_by_token, get_quotation

logger = logging.getLogger(__name__)

DECISIONS = {
    # approval_status: mirrored quotation status
    "approved": "accepted",
    "rejected": "rejected",
}

__all__ = ["get_by_token", "approve", "reject", "decide"]


@transaction.atomic
def decide(token: str, decision: str, notes: str = "", *, notifier=None) -> Quotation:
    """
    Record the customer's decision on a quotation.

    The row is locked so two concurrent decisions cannot both succeed.

    Args:
        token: Public approval token
        decision: 'approved' or 'rejected'
        notes: Customer's comment
        notifier: Notifier for the owner email, or None

    Raises:
        QuotationNotFoundError: On an unknown token
        QuotationAlreadyDecidedError: If a decision was already recorded
    """
    if decision not in DECISIONS:
        raise ValueError(f"Unknown decision: {decision}")
    if not token:
        raise QuotationNotFoundError()

    try:
        quotation = Quotation.objects.select_for_update().get(approval_token=token)
    except Quotation.DoesNotExist:
        raise QuotationNotFoundError()

    if quotation.approval_status != "pending":
        raise QuotationAlreadyDecidedError(quotation.approval_status)

    quotation.approval_status = decision
    quotation.approval_notes = notes or ""
    quotation.decided_at = timezone.now()
    # A converted quotation keeps its status; the decision is still recorded.
    if quotation.status != "converted":
        quotation.status = DECISIONS[decision]
    quotation.save(
        update_fields=["approval_status", "approval_notes", "decided_at", "status", "updated_at"]
    )

    if notifier is not None:
        after_commit("quotation decision", dispatch.notify_quotation_decided, notifier, quotation.pk)

    logger.info("Quotation %s %s by customer", quotation.quotation_number, decision)
    return get_quotation(quotation.pk)


def approve(token: str, notes: str = "", *, notifier=None) -> Quotation:
    return decide(token, "approved", notes, notifier=notifier)


def reject(token: str, notes: str = "", *, notifier=None) -> Quotation:
    return decide(token, "rejected", notes, notifier=notifier)
