"""Best-effort side effects.

Emails and PDFs are dispatched only after the business transaction has
committed, and their failures are logged and swallowed. They never turn a
committed write into a failed response.
"""

import logging
from functools import partial

from django.db import transaction

logger = logging.getLogger(__name__)


def run_best_effort(label: str, func, *args, **kwargs):
    """Call ``func`` and swallow any exception after logging it.

    Returns:
        The function result, or None if it raised
    """
    try:
        return func(*args, **kwargs)
    except Exception:
        logger.exception("Side effect %r failed", label)
        return None


def after_commit(label: str, func, *args, **kwargs):
    """Schedule a best-effort side effect for when the transaction commits.

    Outside an atomic block the callback runs immediately.
    """
    transaction.on_commit(partial(run_best_effort, label, func, *args, **kwargs))
