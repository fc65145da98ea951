"""
FOS Reporting Engine — Dashboard Metrics
==========================================
Read-side KPIs over whatever collections the caller passes in.

The store passes the actor-visible subsets, so an Admin's dashboard
only counts their own warehouse. Nothing here mutates state.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Iterable

from core.primitives.attendance import AttendanceRecord, AttendanceStatus
from core.primitives.inventory import InventoryItem, InventoryType
from core.primitives.invoice import Invoice
from engines.inventory.ledger import low_stock_items, total_units


@dataclass(frozen=True)
class DashboardMetrics:
    total_units: int
    low_stock_count: int
    present_today: int
    total_revenue: Decimal
    pending_payments: Decimal
    items_by_type: tuple[tuple[InventoryType, int], ...]

    def to_dict(self) -> dict:
        return {
            "total_units": self.total_units,
            "low_stock_count": self.low_stock_count,
            "present_today": self.present_today,
            "total_revenue": str(self.total_revenue),
            "pending_payments": str(self.pending_payments),
            "items_by_type": {
                item_type.value: count for item_type, count in self.items_by_type
            },
        }


def compute_dashboard(
    *,
    inventory: Iterable[InventoryItem],
    attendance: Iterable[AttendanceRecord],
    invoices: Iterable[Invoice],
    today: date,
    low_stock_threshold: int,
) -> DashboardMetrics:
    inventory = tuple(inventory)
    invoices = tuple(invoices)

    present = sum(
        1 for record in attendance
        if record.work_date == today and record.status == AttendanceStatus.PRESENT
    )

    by_type = tuple(
        (item_type, sum(1 for item in inventory if item.item_type == item_type))
        for item_type in InventoryType
    )

    return DashboardMetrics(
        total_units=total_units(inventory),
        low_stock_count=len(low_stock_items(inventory, low_stock_threshold)),
        present_today=present,
        total_revenue=sum((inv.paid_amount for inv in invoices), Decimal("0")),
        pending_payments=sum(
            (inv.total_amount - inv.paid_amount for inv in invoices), Decimal("0"),
        ),
        items_by_type=by_type,
    )
