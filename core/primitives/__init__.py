"""
FOS Core Primitives — Domain Model
====================================
Immutable value snapshots for every entity the operations core owns.

- Pure Python (no Django dependency)
- Immutable (frozen dataclasses); changes go through dataclasses.replace
- Cross-references by identifier only

Primitives:
    user        — Role-bearing staff member
    warehouse   — Site with ACTIVE/DISABLED lifecycle
    inventory   — Stock line per warehouse
    attendance  — Shift check-in/check-out record
    party       — Customer
    order       — Customer order with line items
    invoice     — Receivable + payment history
    payroll     — Frozen gross pay estimate
"""

from core.primitives.attendance import AttendanceRecord, AttendanceStatus, Shift
from core.primitives.inventory import InventoryItem, InventoryType
from core.primitives.invoice import (
    Invoice,
    InvoiceStatus,
    Payment,
    PaymentMethod,
)
from core.primitives.order import Order, OrderLine, OrderStatus
from core.primitives.party import Customer, CustomerType
from core.primitives.payroll import PayrollEstimate
from core.primitives.user import User, UserRole
from core.primitives.warehouse import Warehouse, WarehouseStatus

__all__ = [
    "AttendanceRecord",
    "AttendanceStatus",
    "Shift",
    "InventoryItem",
    "InventoryType",
    "Invoice",
    "InvoiceStatus",
    "Payment",
    "PaymentMethod",
    "Order",
    "OrderLine",
    "OrderStatus",
    "Customer",
    "CustomerType",
    "PayrollEstimate",
    "User",
    "UserRole",
    "Warehouse",
    "WarehouseStatus",
]
