"""Concurrency checks for document-number allocation.

SQLite serialises writers at the file level and has no row locks, so
these only run against PostgreSQL.
"""

from concurrent.futures import ThreadPoolExecutor, as_completed

import pytest
from django.db import connection

from docledger.sequence.models import DocumentSequence
from docledger.sequence.services import next_number

from .factories import OCTOBER

pytestmark = pytest.mark.skipif(
    connection.vendor == "sqlite", reason="row locking needs PostgreSQL"
)


def _run_concurrently(func, calls: int, workers: int = 5):
    results = []
    errors = []
    with ThreadPoolExecutor(max_workers=workers) as executor:
        futures = [executor.submit(func) for _ in range(calls)]
        for future in as_completed(futures):
            result = future.result()
            if isinstance(result, Exception):
                errors.append(result)
            else:
                results.append(result)
    return results, errors


def _allocate_invoice_number():
    try:
        return next_number("invoice", OCTOBER)
    except Exception as e:
        return e
    finally:
        # Each worker thread opens its own connection
        connection.close()


@pytest.mark.django_db(transaction=True)
class TestSequenceConcurrency:

    def test_concurrent_allocations_are_unique(self):
        results, errors = _run_concurrently(_allocate_invoice_number, calls=10)

        assert errors == [], f"Errors during concurrent allocation: {errors}"
        assert len(results) == len(set(results)), "Duplicate numbers generated"
        assert sorted(results) == [f"INV256910{n:04d}" for n in range(1, 11)]

    def test_counter_ends_at_number_of_allocations(self):
        next_number("invoice", OCTOBER)

        results, errors = _run_concurrently(_allocate_invoice_number, calls=8)

        assert errors == []
        assert len(set(results)) == 8
        sequence = DocumentSequence.objects.get(prefix="INV256910")
        assert sequence.current_value == 9
