"""Tests for the API envelope, error translation and the services container."""

import json
import logging
from decimal import Decimal
from unittest import mock

import pytest

from docledger.container import Services, build_services
from docledger.core.exceptions import ConflictError, ValidationError
from docledger.core.responses import LedgerJSONEncoder, success_response
from docledger.core.schemas import parse_data
from docledger.core.tasks import after_commit, run_best_effort
from docledger.customers.schemas import CustomerRequest
from docledger.middleware import ServicesMiddleware


@pytest.mark.django_db
class TestHealth:

    def test_health(self, anonymous_client):
        response = anonymous_client.get("/api/health")
        assert response.status_code == 200
        assert response.json()["data"] == {"status": "ok", "database": "ok", "version": "0.1.0"}


class TestEnvelope:

    def test_decimals_render_with_two_places(self):
        assert json.dumps({"total": Decimal("2675")}, cls=LedgerJSONEncoder) == '{"total": "2675.00"}'

    def test_success_response_shape(self):
        body = json.loads(success_response({"id": 1}, "Done", status=201).content)
        assert body == {"success": True, "message": "Done", "data": {"id": 1}}

    def test_parse_data_names_the_failing_field(self):
        with pytest.raises(ValidationError) as exc_info:
            parse_data({"name": ""}, CustomerRequest)
        assert exc_info.value.message.startswith("name:")

    def test_camel_case_keys_are_accepted(self):
        assert parse_data({"name": "A", "taxId": "123"}, CustomerRequest).tax_id == "123"

    def test_conflict_status_can_be_overridden(self):
        assert ConflictError().status_code == 400
        assert ConflictError("Locked", status_code=409).status_code == 409


@pytest.mark.django_db
class TestErrorMiddleware:

    def test_unexpected_error_becomes_500_envelope(self, api_client, caplog):
        with mock.patch(
            "docledger.customers.services.list_customers", side_effect=RuntimeError("db on fire")
        ):
            with caplog.at_level(logging.ERROR, logger="docledger.core.middleware"):
                response = api_client.get("/api/customers")

        assert response.status_code == 500
        assert response.json() == {"success": False, "message": "Unexpected error", "data": None}
        assert "Unhandled error on GET /api/customers" in caplog.text

    def test_wrong_method(self, api_client):
        assert api_client.patch("/api/customers").status_code == 405


class TestBestEffort:

    def test_failure_is_logged_and_swallowed(self, caplog):
        def explode():
            raise ConnectionError("SMTP down")

        with caplog.at_level(logging.ERROR, logger="docledger.core.tasks"):
            assert run_best_effort("email", explode) is None
        assert "Side effect 'email' failed" in caplog.text

    def test_result_is_returned(self):
        assert run_best_effort("sum", sum, [1, 2, 3]) == 6

    @pytest.mark.django_db
    def test_after_commit_waits_for_commit(self, django_capture_on_commit_callbacks):
        calls = []
        with django_capture_on_commit_callbacks(execute=True) as callbacks:
            after_commit("record", calls.append, "sent")
            assert calls == []
        assert len(callbacks) == 1
        assert calls == ["sent"]


class TestServices:

    def test_start_only_starts_notifier(self):
        services = build_services()
        with mock.patch.object(services.notifier, "start") as notifier_start, \
                mock.patch.object(services.renderer, "start") as renderer_start:
            services.start()
        notifier_start.assert_called_once()
        renderer_start.assert_not_called()

    def test_shutdown_survives_a_failing_service(self):
        notifier = mock.Mock()
        notifier.shutdown.side_effect = RuntimeError("already closed")
        renderer = mock.Mock()

        Services(notifier=notifier, renderer=renderer).shutdown()

        renderer.shutdown.assert_called_once()

    def test_middleware_builds_one_container(self):
        with mock.patch("docledger.middleware.build_services") as build, \
                mock.patch("docledger.middleware.atexit") as at_exit:
            middleware = ServicesMiddleware(lambda request: request)
            first = middleware(mock.Mock())
            second = middleware(mock.Mock())

        build.assert_called_once()
        assert first.services is second.services is build.return_value.start.return_value
        at_exit.register.assert_called_once_with(middleware.services.shutdown)
