"""
FOS Reporting Engine — Dashboard Metric Tests
"""

from __future__ import annotations

from datetime import date, datetime, timezone
from decimal import Decimal

from core.primitives.attendance import AttendanceRecord, AttendanceStatus
from core.primitives.invoice import PaymentMethod
from core.state.seed import build_seed_state
from engines.invoicing.engine import generate_invoice, record_payment
from engines.reporting.dashboard import compute_dashboard


def _metrics(state, today=date(2023, 10, 28), threshold=50):
    return compute_dashboard(
        inventory=state.inventory,
        attendance=state.attendance,
        invoices=state.invoices,
        today=today,
        low_stock_threshold=threshold,
    )


class TestComputeDashboard:
    def test_seed_totals(self):
        metrics = _metrics(build_seed_state())
        assert metrics.total_units == 6135
        assert metrics.low_stock_count == 0
        assert metrics.total_revenue == Decimal("15000")
        assert metrics.pending_payments == Decimal("0")

    def test_present_today_counts_matching_date(self):
        state = build_seed_state()
        assert _metrics(state, today=date(2023, 10, 28)).present_today == 1
        assert _metrics(state, today=date(2023, 10, 29)).present_today == 0

    def test_absent_records_not_counted(self):
        state = build_seed_state()
        absent = AttendanceRecord(
            record_id="a9", user_id="u4", warehouse_id="w2",
            work_date=date(2023, 10, 28),
            check_in=datetime(2023, 10, 28, 8, 0, tzinfo=timezone.utc),
            status=AttendanceStatus.ABSENT,
        )
        state = state.with_changes(attendance=(absent,) + state.attendance)
        assert _metrics(state).present_today == 1

    def test_low_stock_threshold(self):
        assert _metrics(build_seed_state(), threshold=150).low_stock_count == 1

    def test_pending_payments_tracks_open_balance(self):
        state, _ = generate_invoice(build_seed_state(), "o2", "inv-1", date(2026, 3, 2), 30)
        state, _, _ = record_payment(
            state, "inv-1", Decimal("200"), PaymentMethod.CASH, "p-1", date(2026, 3, 2),
        )
        metrics = _metrics(state)
        assert metrics.total_revenue == Decimal("15200")
        assert metrics.pending_payments == Decimal("300")

    def test_items_by_type(self):
        data = _metrics(build_seed_state()).to_dict()
        assert data["items_by_type"] == {
            "RAW_MATERIAL": 2,
            "WIP": 1,
            "FINISHED_GOOD": 2,
            "WASTE": 1,
        }
        assert data["total_revenue"] == "15000"

    def test_empty_collections(self):
        metrics = compute_dashboard(
            inventory=(), attendance=(), invoices=(),
            today=date(2026, 3, 2), low_stock_threshold=50,
        )
        assert metrics.total_units == 0
        assert metrics.total_revenue == Decimal("0")
