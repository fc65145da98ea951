"""
FOS Inventory Primitive — Stock Line per Warehouse
====================================================
Engine: Core Primitives
Used by: Inventory Ledger, Order Fulfillment, Reporting

RULES (NON-NEGOTIABLE):
- quantity is an integer and NEVER negative
- An item belongs to exactly one warehouse
- Changes replace the snapshot (dataclasses.replace), never edit in place

This file contains NO persistence logic.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum


# ══════════════════════════════════════════════════════════════
# ENUMS
# ══════════════════════════════════════════════════════════════

class InventoryType(Enum):
    """Production stage of a stock line."""
    RAW_MATERIAL = "RAW_MATERIAL"
    WIP = "WIP"
    FINISHED_GOOD = "FINISHED_GOOD"
    WASTE = "WASTE"


# ══════════════════════════════════════════════════════════════
# INVENTORY ITEM
# ══════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class InventoryItem:
    """
    One stock line held in one warehouse.

    Fields:
        item_id:      Identifier (NOT guaranteed unique across warehouses)
        warehouse_id: Owning warehouse
        item_name:    Display name
        quantity:     Units on hand (int >= 0)
        unit:         Unit of measure label ('kg', 'boxes', ...)
        item_type:    InventoryType
        last_updated: Date of the last stock change
    """
    item_id: str
    warehouse_id: str
    item_name: str
    quantity: int
    unit: str
    item_type: InventoryType
    last_updated: date

    def __post_init__(self):
        if not self.item_id or not isinstance(self.item_id, str):
            raise ValueError("item_id must be non-empty string.")
        if not self.warehouse_id or not isinstance(self.warehouse_id, str):
            raise ValueError("warehouse_id must be non-empty string.")
        if not self.item_name or not isinstance(self.item_name, str):
            raise ValueError("item_name must be non-empty string.")
        if isinstance(self.quantity, bool) or not isinstance(self.quantity, int):
            raise ValueError("quantity must be an integer.")
        if self.quantity < 0:
            raise ValueError("quantity must be >= 0.")
        if not isinstance(self.item_type, InventoryType):
            raise ValueError("item_type must be InventoryType enum.")
        if not isinstance(self.last_updated, date):
            raise ValueError("last_updated must be a date.")

    def to_dict(self) -> dict:
        return {
            "item_id": self.item_id,
            "warehouse_id": self.warehouse_id,
            "item_name": self.item_name,
            "quantity": self.quantity,
            "unit": self.unit,
            "item_type": self.item_type.value,
            "last_updated": self.last_updated.isoformat(),
        }
