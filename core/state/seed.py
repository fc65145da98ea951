"""
FOS State — Seed Data
========================
Initial entity collections the store starts from.

State lives in process memory only; a fresh store (or a restart of
the Django host) begins again from build_seed_state().
"""

from __future__ import annotations

from datetime import date, datetime, timezone
from decimal import Decimal

from core.primitives import (
    AttendanceRecord,
    AttendanceStatus,
    Customer,
    CustomerType,
    InventoryItem,
    InventoryType,
    Invoice,
    InvoiceStatus,
    Order,
    OrderLine,
    OrderStatus,
    Shift,
    User,
    UserRole,
    Warehouse,
    WarehouseStatus,
)
from core.state.snapshot import AppState


def _at(day: date, hour: int, minute: int) -> datetime:
    return datetime(day.year, day.month, day.day, hour, minute, tzinfo=timezone.utc)


SEED_USERS = (
    User(
        user_id="u1",
        employee_number="Y00001",
        full_name="Abdellah Teshome",
        email="owner@anuinv.com",
        role=UserRole.OWNER,
        hourly_rate=Decimal("0"),
    ),
    User(
        user_id="u2",
        employee_number="Y00002",
        full_name="Warehouse Manager 1",
        email="admin1@anuinv.com",
        role=UserRole.WAREHOUSE_ADMIN,
        assigned_warehouse_id="w1",
        hourly_rate=Decimal("150"),
    ),
    User(
        user_id="u3",
        employee_number="Y00003",
        full_name="John Worker",
        email="yee1@anuinv.com",
        role=UserRole.WORKER,
        assigned_warehouse_id="w1",
        hourly_rate=Decimal("60"),
    ),
    User(
        user_id="u4",
        employee_number="Y00004",
        full_name="Jane Worker",
        email="yee2@anuinv.com",
        role=UserRole.WORKER,
        assigned_warehouse_id="w2",
        hourly_rate=Decimal("60"),
    ),
)

SEED_WAREHOUSES = (
    Warehouse("w1", "Addis Main Factory", "Addis Ababa", WarehouseStatus.ACTIVE, 12),
    Warehouse("w2", "Adama Distribution", "Adama", WarehouseStatus.ACTIVE, 5),
    Warehouse("w3", "Old Storage", "Bole", WarehouseStatus.DISABLED, 0),
)

SEED_INVENTORY = (
    InventoryItem("i1", "w1", "Sugar", 500, "kg",
                  InventoryType.RAW_MATERIAL, date(2023, 10, 26)),
    InventoryItem("i2", "w1", "Glucose Syrup", 200, "liters",
                  InventoryType.RAW_MATERIAL, date(2023, 10, 25)),
    InventoryItem("i3", "w1", "Fruit Chews (Unwrapped)", 5000, "pcs",
                  InventoryType.WIP, date(2023, 10, 27)),
    InventoryItem("i4", "w1", "Fruit Chews (Packaged)", 120, "boxes",
                  InventoryType.FINISHED_GOOD, date(2023, 10, 27)),
    InventoryItem("i5", "w1", "Burnt Batch #402", 15, "kg",
                  InventoryType.WASTE, date(2023, 10, 24)),
    InventoryItem("i6", "w2", "Lollipops", 300, "boxes",
                  InventoryType.FINISHED_GOOD, date(2023, 10, 26)),
)

SEED_ATTENDANCE = (
    AttendanceRecord(
        record_id="a1",
        user_id="u3",
        warehouse_id="w1",
        work_date=date(2023, 10, 27),
        check_in=_at(date(2023, 10, 27), 8, 0),
        check_out=_at(date(2023, 10, 27), 17, 0),
        status=AttendanceStatus.PRESENT,
        shift=Shift.MORNING,
    ),
    AttendanceRecord(
        record_id="a2",
        user_id="u3",
        warehouse_id="w1",
        work_date=date(2023, 10, 28),
        check_in=_at(date(2023, 10, 28), 8, 15),
        status=AttendanceStatus.PRESENT,
        shift=Shift.MORNING,
    ),
)

SEED_CUSTOMERS = (
    Customer("c1", "Sweet Tooth Wholesale", CustomerType.COMPANY,
             "Alice Smith", "alice@sweets.com", "+251 911 000 000"),
    Customer("c2", "Kiosk #42", CustomerType.INDIVIDUAL,
             "Kebede", "n/a", "+251 922 111 111"),
)

SEED_ORDERS = (
    Order(
        order_id="o1",
        customer_id="c1",
        warehouse_id="w1",
        total_amount=Decimal("15000"),
        status=OrderStatus.COMPLETED,
        order_date=date(2023, 10, 20),
        items=(OrderLine("i4", 50),),
    ),
    Order(
        order_id="o2",
        customer_id="c2",
        warehouse_id="w1",
        total_amount=Decimal("500"),
        status=OrderStatus.PROCESSING,
        order_date=date(2023, 10, 27),
        items=(OrderLine("i4", 5),),
    ),
)

SEED_INVOICES = (
    Invoice(
        invoice_id="inv1",
        order_id="o1",
        customer_id="c1",
        total_amount=Decimal("15000"),
        paid_amount=Decimal("15000"),
        status=InvoiceStatus.PAID,
        created_at=date(2023, 10, 21),
        due_date=date(2023, 11, 21),
    ),
)


def build_seed_state() -> AppState:
    return AppState(
        users=SEED_USERS,
        warehouses=SEED_WAREHOUSES,
        inventory=SEED_INVENTORY,
        attendance=SEED_ATTENDANCE,
        customers=SEED_CUSTOMERS,
        orders=SEED_ORDERS,
        invoices=SEED_INVOICES,
    )
