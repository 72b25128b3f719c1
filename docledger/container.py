"""Process-wide service objects.

The Notifier and DocumentRenderer are built once per process, started,
and handed to ledger functions explicitly through ``request.services``.

Usage:
    services = build_services()
    services.start()
    ...
    services.shutdown()
"""

import logging
from dataclasses import dataclass, field

from docledger.notifications.mailer import Notifier
from docledger.rendering.renderer import DocumentRenderer

logger = logging.getLogger(__name__)


@dataclass
class Services:
    notifier: Notifier = field(default_factory=Notifier)
    renderer: DocumentRenderer = field(default_factory=DocumentRenderer)

    def start(self):
        """Start eager services.

        The renderer is started on first use instead: importing WeasyPrint
        takes seconds and most requests never render a PDF.
        """
        self.notifier.start()
        logger.info("Services started")
        return self

    def shutdown(self):
        for service in (self.notifier, self.renderer):
            try:
                service.shutdown()
            except Exception:
                logger.exception("Shutting down %s failed", type(service).__name__)
        logger.info("Services shut down")


def build_services() -> Services:
    return Services()
