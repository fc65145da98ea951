"""
FOS Fulfillment Engine — Order Fulfillment
=============================================
Two-phase, all-or-nothing conversion of an order into COMPLETED.

Phase 1 (pre-check) resolves every line by (item id, order warehouse)
and collects ALL failures before anything changes.
Phase 2 (apply) deducts each line by item id alone: the first stock
line carrying that id, whatever its warehouse. When the same item id
exists in two warehouses the two phases can disagree; that behavior
is kept as observed and pinned by tests.

Lines naming the same item are summed for the pre-check so a passing
pre-check can never drive stock negative in phase 2.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date

from core.commands.errors import (
    AlreadyCompleted,
    FulfillmentBlocked,
    InsufficientStock,
    ItemNotFound,
    OrderCancelled,
    OrderNotFound,
)
from core.primitives.order import Order, OrderStatus
from core.state.snapshot import AppState, replace_entry
from engines.inventory.ledger import apply_deduction, deduct

logger = logging.getLogger("fos.fulfillment")


def _demand_by_item(order: Order) -> dict[str, int]:
    demand: dict[str, int] = {}
    for line in order.items:
        demand[line.inventory_item_id] = (
            demand.get(line.inventory_item_id, 0) + line.quantity
        )
    return demand


def precheck(state: AppState, order: Order, today: date) -> tuple[str, ...]:
    """Human-readable reasons the order cannot ship (empty when it can)."""
    reasons = []
    for item_id, quantity in _demand_by_item(order).items():
        try:
            deduct(state.inventory, item_id, order.warehouse_id, quantity, today)
        except ItemNotFound:
            reasons.append(f"Item ID {item_id} not found")
        except InsufficientStock as exc:
            reasons.append(f"{exc.item_name} (Insufficient Stock)")
    return tuple(reasons)


def fulfill(state: AppState, order_id: str, today: date) -> tuple[AppState, Order]:
    """
    Fulfill an order against the snapshot.

    Raises:
        OrderNotFound, AlreadyCompleted, OrderCancelled,
        FulfillmentBlocked (every failing line listed).
    """
    order = state.find_order(order_id)
    if order is None:
        raise OrderNotFound(order_id)

    if order.status == OrderStatus.COMPLETED:
        raise AlreadyCompleted(order_id)

    if order.status == OrderStatus.CANCELLED:
        raise OrderCancelled(order_id)

    reasons = precheck(state, order, today)
    if reasons:
        raise FulfillmentBlocked(order_id, reasons)

    inventory = state.inventory
    for line in order.items:
        deduction = deduct(inventory, line.inventory_item_id, None, line.quantity, today)
        inventory = apply_deduction(inventory, deduction)

    completed = replace(order, status=OrderStatus.COMPLETED)
    orders = replace_entry(state.orders, lambda o: o.order_id == order_id, completed)

    logger.info(
        f"Order {order_id} fulfilled from warehouse {order.warehouse_id} "
        f"({len(order.items)} lines)"
    )
    return state.with_changes(inventory=inventory, orders=orders), completed
