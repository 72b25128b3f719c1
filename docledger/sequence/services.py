"""Sequence services for atomic document-number allocation."""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Callable, Optional, TypeVar

from django.apps import apps
from django.db import IntegrityError, transaction
from django.utils import timezone

from .exceptions import NumberAllocationError, UnknownDocumentKindError
from .models import DocumentSequence

logger = logging.getLogger(__name__)

T = TypeVar("T")

BUDDHIST_ERA_OFFSET = 543
PAD_WIDTH = 4


@dataclass(frozen=True)
class DocumentKind:
    """Numbering policy for one kind of document."""

    code: str
    model: str
    number_field: str


DOCUMENT_KINDS = {
    "quotation": DocumentKind("QT", "quotations.Quotation", "quotation_number"),
    "invoice": DocumentKind("INV", "invoicing.Invoice", "invoice_number"),
    "receipt": DocumentKind("REC", "receipts.Receipt", "receipt_number"),
}


def get_kind(kind: str) -> DocumentKind:
    try:
        return DOCUMENT_KINDS[kind]
    except KeyError:
        raise UnknownDocumentKindError(f"Unknown document kind: {kind}")


def buddhist_year(reference_date: date) -> int:
    """Return the Buddhist Era year for a Gregorian date (2026 -> 2569)."""
    return reference_date.year + BUDDHIST_ERA_OFFSET


def period_prefix(kind: str, reference_date: date) -> str:
    """Return the prefix for a kind and period, e.g. ('invoice', 2026-10-19) -> 'INV256910'."""
    code = get_kind(kind).code
    return f"{code}{buddhist_year(reference_date)}{reference_date.month:02d}"


def format_number(prefix: str, value: int, pad_width: int = PAD_WIDTH) -> str:
    """Concatenate a prefix and a zero-padded running number."""
    return f"{prefix}{str(value).zfill(pad_width)}"


def parse_suffix(number: str, prefix: str) -> Optional[int]:
    """Return the running number of ``number`` under ``prefix``, or None."""
    if not number.startswith(prefix):
        return None
    suffix = number[len(prefix):]
    if not suffix.isdigit():
        return None
    return int(suffix)


def highest_existing(kind: str, prefix: str) -> int:
    """Return the largest running number already stored under ``prefix``.

    Parses every number with this prefix rather than trusting a
    lexicographic sort, so a suffix that outgrew its padding still counts.
    """
    policy = get_kind(kind)
    model = apps.get_model(policy.model)
    manager = getattr(model, "all_objects", model.objects)
    numbers = manager.filter(
        **{f"{policy.number_field}__startswith": prefix}
    ).values_list(policy.number_field, flat=True)

    highest = 0
    for number in numbers:
        value = parse_suffix(number, prefix)
        if value is not None and value > highest:
            highest = value
    return highest


def _locked_sequence(kind: str, prefix: str) -> DocumentSequence:
    """Return the counter row for ``prefix``, locked for update.

    A missing row is created and seeded from the documents already stored
    under that prefix. Two requests racing to create it both end up
    locking the single row that won.
    """
    try:
        return DocumentSequence.objects.select_for_update().get(prefix=prefix)
    except DocumentSequence.DoesNotExist:
        pass

    seed = highest_existing(kind, prefix)
    try:
        with transaction.atomic():
            DocumentSequence.objects.create(
                prefix=prefix,
                kind=kind,
                current_value=seed,
                pad_width=PAD_WIDTH,
            )
    except IntegrityError:
        logger.debug("Sequence %s created concurrently, reusing it", prefix)

    return DocumentSequence.objects.select_for_update().get(prefix=prefix)


def next_number(kind: str, reference_date: Optional[date] = None) -> str:
    """
    Allocate the next document number for ``kind`` atomically.

    Uses select_for_update() on the per-prefix counter so concurrent
    requests in the same period never receive the same number. Call it
    inside the transaction that inserts the document.

    Args:
        kind: 'quotation', 'invoice' or 'receipt'
        reference_date: Period to number in (defaults to today, local time)

    Returns:
        The formatted number, e.g. "QT2569100001"

    Raises:
        UnknownDocumentKindError: If ``kind`` is not a known document kind
    """
    reference_date = reference_date or timezone.localdate()
    prefix = period_prefix(kind, reference_date)

    with transaction.atomic():
        seq = _locked_sequence(kind, prefix)
        seq.current_value += 1
        seq.save(update_fields=["current_value", "updated_at"])

    logger.info("Allocated %s number %s", kind, seq.formatted_value)
    return seq.formatted_value


def resync_sequence(kind: str, prefix: str) -> int:
    """Move the counter for ``prefix`` past any number already stored.

    Returns:
        The counter value after resynchronising
    """
    with transaction.atomic():
        seq = _locked_sequence(kind, prefix)
        highest = highest_existing(kind, prefix)
        if highest > seq.current_value:
            seq.current_value = highest
            seq.save(update_fields=["current_value", "updated_at"])
    return seq.current_value


def _number_taken(kind: str, number: str) -> bool:
    policy = get_kind(kind)
    model = apps.get_model(policy.model)
    manager = getattr(model, "all_objects", model.objects)
    return manager.filter(**{policy.number_field: number}).exists()


def allocate_with_retry(
    kind: str,
    create: Callable[[str], T],
    *,
    reference_date: Optional[date] = None,
    attempts: int = 2,
) -> T:
    """Allocate a number and insert the document, retrying on a number clash.

    ``create`` receives the allocated number and must insert the row. If
    the insert violates the unique number constraint (a row was written
    without going through the counter), the counter is resynchronised and
    the insert retried. Other integrity errors propagate unchanged.

    Raises:
        NumberAllocationError: If every attempt collided
    """
    reference_date = reference_date or timezone.localdate()
    prefix = period_prefix(kind, reference_date)

    for attempt in range(1, attempts + 1):
        number = next_number(kind, reference_date)
        try:
            with transaction.atomic():
                return create(number)
        except IntegrityError:
            if not _number_taken(kind, number):
                raise
            logger.warning(
                "%s number %s already taken (attempt %d/%d)", kind, number, attempt, attempts
            )
            resync_sequence(kind, prefix)

    raise NumberAllocationError()
