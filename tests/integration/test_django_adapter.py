"""
FOS Integration — Django HTTP Adapter
========================================
Envelope shape and ErrorKind → status mapping over the real URLconf.
"""

from __future__ import annotations

import pytest

from adapters.django_api.wiring import build_store, reset_store


@pytest.fixture(autouse=True)
def fresh_store():
    reset_store()
    yield
    reset_store()


def _post(client, path, body=None):
    return client.post(f"/v1/{path}", data=body or {}, content_type="application/json")


def _login(client, role):
    response = _post(client, "session/login", {"role": role})
    assert response.status_code == 200
    return response.json()["data"]


class TestSession:
    def test_login_returns_user(self, client):
        user = _login(client, "OWNER")
        assert user["user_id"] == "u1"
        session = client.get("/v1/session").json()["data"]
        assert session["user"]["full_name"] == "Abdellah Teshome"
        assert "dashboard" in session["sections"]

    def test_login_rejects_unknown_role(self, client):
        response = _post(client, "session/login", {"role": "JANITOR"})
        assert response.status_code == 400
        assert response.json()["error"]["code"] == "INVALID_REQUEST"

    def test_logout_clears_session(self, client):
        _login(client, "OWNER")
        _post(client, "session/logout")
        data = client.get("/v1/session").json()["data"]
        assert data["user"] is None
        assert data["sections"] == []
        assert client.get("/v1/notifications").json()["data"] == []

    def test_writes_require_post(self, client):
        assert client.get("/v1/orders/fulfill").status_code == 405


class TestReads:
    def test_inventory_listing_scoped_to_admin(self, client):
        _login(client, "WAREHOUSE_ADMIN")
        rows = client.get("/v1/inventory").json()["data"]
        assert {row["warehouse_id"] for row in rows} == {"w1"}
        assert len(rows) == 5

    def test_attendance_rows_carry_names(self, client):
        _login(client, "WORKER")
        rows = client.get("/v1/attendance").json()["data"]
        assert {row["user_name"] for row in rows} == {"John Worker"}

    def test_unknown_resource(self, client):
        _login(client, "OWNER")
        response = client.get("/v1/spaceships")
        assert response.status_code == 404
        assert response.json()["error"]["code"] == "UNKNOWN_RESOURCE"

    def test_dashboard(self, client):
        _login(client, "OWNER")
        data = client.get("/v1/dashboard").json()["data"]
        assert data["total_units"] == 6135

    def test_payroll_workers(self, client):
        _login(client, "WAREHOUSE_ADMIN")
        workers = client.get("/v1/payroll/workers").json()["data"]
        assert [w["user_id"] for w in workers] == ["u3"]

    def test_worker_reads_own_payroll(self, client):
        _login(client, "OWNER")
        for user_id in ("u3", "u4"):
            _post(client, "payroll/estimate", {
                "user_id": user_id, "start_date": "2026-03-01",
                "end_date": "2026-03-07", "hours_worked": "40",
            })
        _post(client, "session/logout")
        _login(client, "WORKER")
        rows = client.get("/v1/payroll/mine").json()["data"]
        assert [row["user_id"] for row in rows] == ["u3"]
        listing = client.get("/v1/payroll").json()["data"]
        assert [row["user_id"] for row in listing] == ["u3"]


class TestWrites:
    def test_fulfill_order(self, client):
        _login(client, "OWNER")
        response = _post(client, "orders/fulfill", {"order_id": "o2"})
        assert response.status_code == 200
        body = response.json()
        assert body["ok"] is True
        assert body["data"]["status"] == "COMPLETED"
        assert build_store().state.find_item("i4", "w1").quantity == 115

    def test_invoice_then_payment(self, client):
        _login(client, "OWNER")
        invoice = _post(client, "invoices/generate", {"order_id": "o2"}).json()["data"]
        assert invoice["status"] == "PENDING"
        response = _post(client, "payments/record", {
            "invoice_id": invoice["invoice_id"], "amount": "500", "method": "CASH",
        })
        assert response.json()["data"]["status"] == "PAID"
        latest = client.get("/v1/notifications").json()["data"][0]
        assert latest["message"] == "Payment of 500 ETB recorded via Cash"

    def test_worker_check_in_defaults_to_self(self, client):
        _login(client, "WORKER")
        response = _post(client, "attendance/check-in", {"shift": "NIGHT"})
        assert response.status_code == 200
        record = response.json()["data"]
        assert record["user_id"] == "u3"
        assert record["warehouse_id"] == "w1"
        assert record["shift"] == "NIGHT"


class TestErrorMapping:
    def test_not_found_is_404(self, client):
        _login(client, "OWNER")
        response = _post(client, "orders/fulfill", {"order_id": "o404"})
        assert response.status_code == 404
        assert response.json()["error"]["code"] == "ORDER_NOT_FOUND"

    def test_conflict_is_409(self, client):
        _login(client, "OWNER")
        response = _post(client, "orders/fulfill", {"order_id": "o1"})
        assert response.status_code == 409
        error = response.json()["error"]
        assert error["message"] == "Order is already completed"
        assert error["details"]["kind"] == "CONFLICT"

    def test_unauthorized_is_403(self, client):
        _login(client, "WORKER")
        response = _post(client, "orders/fulfill", {"order_id": "o2"})
        assert response.status_code == 403

    def test_validation_failure_is_422(self, client):
        _login(client, "OWNER")
        response = _post(client, "payments/record", {
            "invoice_id": "inv1", "amount": "0", "method": "CASH",
        })
        assert response.status_code == 422
        assert response.json()["error"]["code"] == "INVALID_REQUEST"

    def test_unknown_field_is_400(self, client):
        _login(client, "OWNER")
        response = _post(client, "orders/fulfill", {"order_id": "o2", "rush": True})
        assert response.status_code == 400
        assert "Unknown fields" in response.json()["error"]["message"]

    def test_malformed_json_is_400(self, client):
        _login(client, "OWNER")
        response = client.post(
            "/v1/orders/fulfill", data="{not json", content_type="application/json",
        )
        assert response.status_code == 400
