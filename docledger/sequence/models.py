"""Per-prefix counter rows backing document numbers."""

from django.db import models

from docledger.core.models import TimeStampedModel


class DocumentSequence(TimeStampedModel):
    """
    Running counter for one period-scoped prefix.

    One row exists per prefix, e.g. "QT256910" (quotations, BE 2569,
    October). Numbers are allocated by locking the row with
    select_for_update() inside the transaction that inserts the document.

    Usage:
        from docledger.sequence.services import next_number

        number = next_number("invoice")
        # Returns: "INV2569100001"
    """

    prefix = models.CharField(
        max_length=20,
        unique=True,
        help_text="Period-scoped prefix, e.g. 'INV256910'",
    )
    kind = models.CharField(
        max_length=20,
        help_text="Document kind: quotation, invoice or receipt",
    )
    current_value = models.PositiveBigIntegerField(
        default=0,
        help_text="Last number handed out for this prefix",
    )
    pad_width = models.PositiveSmallIntegerField(
        default=4,
        help_text="Zero-padding width for the number portion",
    )

    class Meta:
        app_label = "sequence"
        ordering = ["prefix"]

    def __str__(self):
        return f"{self.prefix}: {self.current_value}"

    @property
    def formatted_value(self) -> str:
        """Return the current value with prefix and padding, e.g. 'QT2569100007'."""
        return f"{self.prefix}{str(self.current_value).zfill(self.pad_width)}"
