"""
FOS State — Application State Snapshot
=========================================
The one aggregate every engine reads and rewrites.

AppState is immutable: an engine returns a new AppState built with
with_changes(), and the store swaps it in only when the operation is
ACCEPTED. Lookups return the FIRST match in collection order.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Callable, Iterable, Optional, TypeVar

from core.primitives import (
    AttendanceRecord,
    Customer,
    InventoryItem,
    Invoice,
    Order,
    Payment,
    PayrollEstimate,
    User,
    Warehouse,
)

T = TypeVar("T")


def _first(collection: Iterable[T], predicate: Callable[[T], bool]) -> Optional[T]:
    for entry in collection:
        if predicate(entry):
            return entry
    return None


def replace_entry(
    collection: tuple,
    predicate: Callable[[T], bool],
    new_value: T,
) -> tuple:
    """Copy-on-write replacement of the first entry matching predicate."""
    replaced = False
    result = []
    for entry in collection:
        if not replaced and predicate(entry):
            result.append(new_value)
            replaced = True
        else:
            result.append(entry)
    return tuple(result)


@dataclass(frozen=True)
class AppState:
    """
    Entity collections owned by the store.

    All collections are tuples; cross-references are ids only.
    """

    users: tuple[User, ...] = ()
    warehouses: tuple[Warehouse, ...] = ()
    inventory: tuple[InventoryItem, ...] = ()
    attendance: tuple[AttendanceRecord, ...] = ()
    customers: tuple[Customer, ...] = ()
    orders: tuple[Order, ...] = ()
    invoices: tuple[Invoice, ...] = ()
    payments: tuple[Payment, ...] = ()
    payroll_estimates: tuple[PayrollEstimate, ...] = ()

    def __post_init__(self):
        for f in fields(self):
            if not isinstance(getattr(self, f.name), tuple):
                raise ValueError(f"{f.name} must be a tuple.")

    def with_changes(self, **changes) -> AppState:
        return replace(self, **changes)

    # ── Lookups ───────────────────────────────────────────────

    def find_user(self, user_id: str) -> Optional[User]:
        return _first(self.users, lambda u: u.user_id == user_id)

    def find_warehouse(self, warehouse_id: str) -> Optional[Warehouse]:
        return _first(self.warehouses, lambda w: w.warehouse_id == warehouse_id)

    def find_item(
        self,
        item_id: str,
        warehouse_id: Optional[str] = None,
    ) -> Optional[InventoryItem]:
        """warehouse_id=None matches on item id alone."""
        return _first(
            self.inventory,
            lambda i: i.item_id == item_id
            and (warehouse_id is None or i.warehouse_id == warehouse_id),
        )

    def find_attendance(self, record_id: str) -> Optional[AttendanceRecord]:
        return _first(self.attendance, lambda a: a.record_id == record_id)

    def find_customer(self, customer_id: str) -> Optional[Customer]:
        return _first(self.customers, lambda c: c.customer_id == customer_id)

    def find_order(self, order_id: str) -> Optional[Order]:
        return _first(self.orders, lambda o: o.order_id == order_id)

    def find_invoice(self, invoice_id: str) -> Optional[Invoice]:
        return _first(self.invoices, lambda i: i.invoice_id == invoice_id)

    def find_invoice_for_order(self, order_id: str) -> Optional[Invoice]:
        return _first(self.invoices, lambda i: i.order_id == order_id)

    def payments_for(self, invoice_id: str) -> tuple[Payment, ...]:
        return tuple(p for p in self.payments if p.invoice_id == invoice_id)

    def to_dict(self) -> dict:
        return {
            f.name: [entry.to_dict() for entry in getattr(self, f.name)]
            for f in fields(self)
        }
