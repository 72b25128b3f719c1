"""HTML to PDF rendering for quotations, invoices and receipts.

``DocumentRenderer`` is a long-lived service: WeasyPrint is imported and
the print stylesheet parsed once, in ``start()``, rather than on every
request. The container starts it lazily on first use.
"""

import io
import logging

from django.conf import settings
from django.template.loader import render_to_string

from . import context as document_context

logger = logging.getLogger(__name__)


class DocumentRenderer:
    """Renders stored documents to HTML and PDF."""

    TEMPLATES = {
        "quotation": "rendering/quotation.html",
        "invoice": "rendering/invoice.html",
        "receipt": "rendering/receipt.html",
    }
    CSS_TEMPLATE = "rendering/print.css"

    CONTEXT_BUILDERS = {
        "quotation": document_context.quotation_context,
        "invoice": document_context.invoice_context,
        "receipt": document_context.receipt_context,
    }

    def __init__(self, base_url=None):
        self.base_url = base_url or str(getattr(settings, "BASE_DIR", "."))
        self._html_class = None
        self._stylesheet = None

    @property
    def started(self) -> bool:
        return self._html_class is not None

    def start(self):
        """Import WeasyPrint and parse the stylesheet. Safe to call twice."""
        if self._html_class is None:
            # Imported here: loading WeasyPrint takes seconds.
            from weasyprint import CSS, HTML

            self._html_class = HTML
            self._stylesheet = CSS(string=render_to_string(self.CSS_TEMPLATE))
            logger.debug("Document renderer started")
        return self

    def shutdown(self):
        self._html_class = None
        self._stylesheet = None

    def render_html(self, kind: str, document) -> str:
        context = self.CONTEXT_BUILDERS[kind](document)
        return render_to_string(self.TEMPLATES[kind], context)

    def render_pdf(self, kind: str, document) -> bytes:
        """Render a document to PDF bytes."""
        self.start()
        html = self._html_class(string=self.render_html(kind, document), base_url=self.base_url)
        buffer = io.BytesIO()
        html.write_pdf(buffer, stylesheets=[self._stylesheet])
        logger.info("Rendered %s PDF %s", kind, filename_for(kind, document))
        return buffer.getvalue()

    def render_quotation(self, quotation) -> bytes:
        return self.render_pdf("quotation", quotation)

    def render_invoice(self, invoice) -> bytes:
        return self.render_pdf("invoice", invoice)

    def render_receipt(self, receipt) -> bytes:
        return self.render_pdf("receipt", receipt)


NUMBER_FIELDS = {
    "quotation": "quotation_number",
    "invoice": "invoice_number",
    "receipt": "receipt_number",
}


def filename_for(kind: str, document) -> str:
    """Deterministic download name, e.g. 'invoice-INV2569100001.pdf'."""
    number = getattr(document, NUMBER_FIELDS[kind])
    safe_number = number.replace("/", "-").replace("\\", "-")
    return f"{kind}-{safe_number}.pdf"
