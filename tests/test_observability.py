import structlog
from fastapi import FastAPI
from structlog.testing import capture_logs

import services.order_service.service as order_service_module
from conftest import auth_header
from shared.observability import setup as observability_setup


PAYMENT = {
    "id": "PAY-AUDIT",
    "status": "COMPLETED",
    "update_time": "2024-01-02T10:00:00Z",
    "email_address": "payer@example.com",
}


def _events(logs, name):
    return [entry for entry in logs if entry["event"] == name]


class TestRequestMetrics:
    def test_mounted_routes_are_labelled_with_full_path(self, client, admin):
        client.get("/api/orders/", headers=auth_header(admin))
        client.get("/api/products/")

        body = client.get("/metrics").text

        assert 'handler="/api/orders/"' in body
        assert 'handler="/api/products/"' in body


class TestTracingSetup:
    def test_mounted_apps_are_not_traced_twice(self, monkeypatch):
        traced = []
        monkeypatch.setattr(observability_setup, "TRACING_ENABLED", True)
        monkeypatch.setattr(
            observability_setup,
            "configure_tracing",
            lambda app, name: traced.append(name),
        )

        observability_setup.setup_observability(
            FastAPI(), "mounted", expose_metrics=False, trace_requests=False
        )
        observability_setup.setup_observability(FastAPI(), "host", expose_metrics=False)

        assert traced == ["host"]


class TestOwnershipAudit:
    def test_reading_someone_elses_order_is_logged(
        self, client, make_user, make_order, monkeypatch
    ):
        owner = make_user("Owner")
        other = make_user("Other")
        order = make_order(owner)

        with capture_logs() as logs:
            monkeypatch.setattr(order_service_module, "logger", structlog.get_logger())
            client.get(f"/api/orders/{order.id}", headers=auth_header(other))
            client.get(f"/api/orders/{order.id}", headers=auth_header(owner))

        events = _events(logs, "order_read_by_non_owner")
        assert len(events) == 1
        assert events[0]["order_id"] == order.id
        assert events[0]["owner_id"] == owner.id
        assert events[0]["user_id"] == other.id
        assert events[0]["log_level"] == "warning"

    def test_paying_someone_elses_order_is_logged(
        self, client, make_user, make_order, monkeypatch
    ):
        owner = make_user("Owner")
        other = make_user("Other")
        order = make_order(owner)

        with capture_logs() as logs:
            monkeypatch.setattr(order_service_module, "logger", structlog.get_logger())
            response = client.put(
                f"/api/orders/{order.id}/pay", json=PAYMENT, headers=auth_header(other)
            )

        assert response.status_code == 200
        events = _events(logs, "order_paid_by_non_owner")
        assert [(e["owner_id"], e["user_id"]) for e in events] == [(owner.id, other.id)]

    def test_admin_access_is_not_flagged(self, client, make_user, admin, make_order, monkeypatch):
        order = make_order(make_user("Owner"))

        with capture_logs() as logs:
            monkeypatch.setattr(order_service_module, "logger", structlog.get_logger())
            client.get(f"/api/orders/{order.id}", headers=auth_header(admin))
            client.put(f"/api/orders/{order.id}/pay", json=PAYMENT, headers=auth_header(admin))

        assert _events(logs, "order_read_by_non_owner") == []
        assert _events(logs, "order_paid_by_non_owner") == []
