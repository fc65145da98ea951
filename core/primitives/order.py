"""
FOS Order Primitive — Customer Order with Line Items
======================================================
Orders arrive from seed data and are mutated only by fulfillment.

RULES:
- total_amount is authoritative; it is NOT derived from the lines
- status only moves forward: PENDING/PROCESSING → COMPLETED | CANCELLED
- Lines reference inventory by item id; the order's warehouse scopes them
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Tuple


class OrderStatus(Enum):
    PENDING = "PENDING"
    PROCESSING = "PROCESSING"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"


@dataclass(frozen=True)
class OrderLine:
    inventory_item_id: str
    quantity: int

    def __post_init__(self):
        if not self.inventory_item_id:
            raise ValueError("inventory_item_id must be non-empty.")
        if isinstance(self.quantity, bool) or not isinstance(self.quantity, int):
            raise ValueError("quantity must be an integer.")
        if self.quantity <= 0:
            raise ValueError("quantity must be positive integer.")

    def to_dict(self) -> dict:
        return {
            "inventory_item_id": self.inventory_item_id,
            "quantity": self.quantity,
        }


@dataclass(frozen=True)
class Order:
    """
    Customer order.

    Fields:
        order_id:     Identifier
        customer_id:  Buying customer
        warehouse_id: Warehouse that ships the order
        total_amount: Authoritative order value (Decimal)
        status:       OrderStatus
        order_date:   Date placed
        items:        Tuple of OrderLine
    """
    order_id: str
    customer_id: str
    warehouse_id: str
    total_amount: Decimal
    status: OrderStatus
    order_date: date
    items: Tuple[OrderLine, ...] = ()

    def __post_init__(self):
        if not self.order_id:
            raise ValueError("order_id must be non-empty.")
        if not self.warehouse_id:
            raise ValueError("warehouse_id must be non-empty.")
        if not isinstance(self.total_amount, Decimal):
            raise ValueError("total_amount must be Decimal.")
        if not isinstance(self.status, OrderStatus):
            raise ValueError("status must be OrderStatus enum.")
        if not isinstance(self.items, tuple):
            raise ValueError("items must be a tuple.")
        for line in self.items:
            if not isinstance(line, OrderLine):
                raise ValueError("items must contain OrderLine values.")

    @property
    def is_completed(self) -> bool:
        return self.status == OrderStatus.COMPLETED

    def to_dict(self) -> dict:
        return {
            "order_id": self.order_id,
            "customer_id": self.customer_id,
            "warehouse_id": self.warehouse_id,
            "total_amount": str(self.total_amount),
            "status": self.status.value,
            "order_date": self.order_date.isoformat(),
            "items": [line.to_dict() for line in self.items],
        }
