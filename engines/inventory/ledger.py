"""
FOS Inventory Engine — Stock Ledger
======================================
Pure quantity arithmetic over the inventory collection.

Nothing here commits. add_item/update_item return a new AppState;
deduct returns a StockDeduction that the caller applies.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from datetime import date
from typing import Iterable, Optional

from core.commands.errors import (
    DuplicateItem,
    InsufficientStock,
    ItemNotFound,
    WarehouseNotFound,
)
from core.primitives.inventory import InventoryItem, InventoryType
from core.state.snapshot import AppState, replace_entry
from engines.inventory.commands import (
    AddInventoryItemRequest,
    UpdateInventoryItemRequest,
)

logger = logging.getLogger("fos.inventory")


@dataclass(frozen=True)
class StockDeduction:
    """A validated, not yet applied, stock decrement."""

    item: InventoryItem
    previous_quantity: int
    new_quantity: int
    last_updated: date

    @property
    def item_id(self) -> str:
        return self.item.item_id

    @property
    def warehouse_id(self) -> str:
        return self.item.warehouse_id


def _matches(item_id: str, warehouse_id: Optional[str]):
    return lambda item: item.item_id == item_id and (
        warehouse_id is None or item.warehouse_id == warehouse_id
    )


def _find(items: Iterable[InventoryItem], item_id: str, warehouse_id: Optional[str]):
    match = _matches(item_id, warehouse_id)
    for item in items:
        if match(item):
            return item
    return None


# ══════════════════════════════════════════════════════════════
# LINE MAINTENANCE
# ══════════════════════════════════════════════════════════════

def add_item(
    state: AppState,
    request: AddInventoryItemRequest,
    item_id: str,
    today: date,
) -> tuple[AppState, InventoryItem]:
    if state.find_warehouse(request.warehouse_id) is None:
        raise WarehouseNotFound(request.warehouse_id)

    if state.find_item(item_id, request.warehouse_id) is not None:
        raise DuplicateItem(item_id, request.warehouse_id)

    item = InventoryItem(
        item_id=item_id,
        warehouse_id=request.warehouse_id,
        item_name=request.item_name,
        quantity=request.quantity,
        unit=request.unit,
        item_type=request.item_type,
        last_updated=today,
    )
    return state.with_changes(inventory=state.inventory + (item,)), item


def update_item(
    state: AppState,
    request: UpdateInventoryItemRequest,
    today: date,
) -> tuple[AppState, InventoryItem]:
    existing = state.find_item(request.item_id, request.warehouse_id)
    if existing is None:
        raise ItemNotFound(request.item_id, request.warehouse_id)

    updated = replace(
        existing,
        item_name=request.item_name,
        quantity=request.quantity,
        unit=request.unit,
        item_type=request.item_type,
        last_updated=today,
    )
    inventory = replace_entry(
        state.inventory, _matches(request.item_id, request.warehouse_id), updated,
    )
    return state.with_changes(inventory=inventory), updated


# ══════════════════════════════════════════════════════════════
# DEDUCTION
# ══════════════════════════════════════════════════════════════

def deduct(
    items: tuple[InventoryItem, ...],
    item_id: str,
    warehouse_id: Optional[str],
    amount: int,
    today: date,
) -> StockDeduction:
    """
    Validate taking amount units from the first matching line.

    warehouse_id=None matches on item id alone.

    Raises:
        ItemNotFound:      no line matches.
        InsufficientStock: quantity < amount.
    """
    if isinstance(amount, bool) or not isinstance(amount, int) or amount <= 0:
        raise ValueError("amount must be a positive integer.")

    item = _find(items, item_id, warehouse_id)
    if item is None:
        raise ItemNotFound(item_id, warehouse_id)

    if item.quantity < amount:
        raise InsufficientStock(item.item_id, item.item_name, item.quantity, amount)

    return StockDeduction(
        item=item,
        previous_quantity=item.quantity,
        new_quantity=item.quantity - amount,
        last_updated=today,
    )


def apply_deduction(
    items: tuple[InventoryItem, ...],
    deduction: StockDeduction,
) -> tuple[InventoryItem, ...]:
    updated = replace(
        deduction.item,
        quantity=deduction.new_quantity,
        last_updated=deduction.last_updated,
    )
    logger.debug(
        f"Stock {deduction.item_id}@{deduction.warehouse_id}: "
        f"{deduction.previous_quantity} -> {deduction.new_quantity}"
    )
    return replace_entry(
        items, _matches(deduction.item_id, deduction.warehouse_id), updated,
    )


# ══════════════════════════════════════════════════════════════
# QUERIES
# ══════════════════════════════════════════════════════════════

def low_stock_items(
    items: Iterable[InventoryItem],
    threshold: int,
) -> tuple[InventoryItem, ...]:
    """Non-waste lines with quantity below threshold."""
    return tuple(
        item
        for item in items
        if item.item_type != InventoryType.WASTE and item.quantity < threshold
    )


def total_units(items: Iterable[InventoryItem]) -> int:
    return sum(item.quantity for item in items)
