"""
FOS Fulfillment Engine — Tests
=================================
Pre-check collects every failing line; apply deducts all lines or none.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from core.commands.errors import (
    AlreadyCompleted,
    FulfillmentBlocked,
    InsufficientStock,
    OrderCancelled,
    OrderNotFound,
)
from core.primitives.inventory import InventoryItem, InventoryType
from core.primitives.order import Order, OrderLine, OrderStatus
from core.state.seed import build_seed_state
from engines.fulfillment.engine import fulfill, precheck

TODAY = date(2026, 3, 2)


def _order(order_id="o9", warehouse_id="w1", status=OrderStatus.PENDING, lines=()):
    return Order(
        order_id=order_id,
        customer_id="c1",
        warehouse_id=warehouse_id,
        total_amount=Decimal("1000"),
        status=status,
        order_date=TODAY,
        items=tuple(OrderLine(item_id, qty) for item_id, qty in lines),
    )


def _with_order(order, state=None):
    state = state or build_seed_state()
    return state.with_changes(orders=state.orders + (order,))


def _quantity(state, item_id, warehouse_id):
    return state.find_item(item_id, warehouse_id).quantity


# ══════════════════════════════════════════════════════════════
# HAPPY PATH
# ══════════════════════════════════════════════════════════════

class TestFulfill:
    def test_deducts_and_completes(self):
        state = _with_order(_order(lines=[("i4", 50)]))
        new_state, order = fulfill(state, "o9", TODAY)
        assert order.status == OrderStatus.COMPLETED
        assert new_state.find_order("o9").status == OrderStatus.COMPLETED
        assert _quantity(new_state, "i4", "w1") == 70
        assert new_state.find_item("i4", "w1").last_updated == TODAY

    def test_seed_processing_order(self):
        new_state, _ = fulfill(build_seed_state(), "o2", TODAY)
        assert _quantity(new_state, "i4", "w1") == 115

    def test_multi_line_order(self):
        state = _with_order(_order(lines=[("i1", 100), ("i2", 50)]))
        new_state, _ = fulfill(state, "o9", TODAY)
        assert _quantity(new_state, "i1", "w1") == 400
        assert _quantity(new_state, "i2", "w1") == 150

    def test_original_state_untouched(self):
        state = _with_order(_order(lines=[("i4", 50)]))
        fulfill(state, "o9", TODAY)
        assert _quantity(state, "i4", "w1") == 120
        assert state.find_order("o9").status == OrderStatus.PENDING


# ══════════════════════════════════════════════════════════════
# STATUS GUARDS
# ══════════════════════════════════════════════════════════════

class TestStatusGuards:
    def test_unknown_order(self):
        with pytest.raises(OrderNotFound):
            fulfill(build_seed_state(), "o404", TODAY)

    def test_completed_order(self):
        with pytest.raises(AlreadyCompleted, match="already completed"):
            fulfill(build_seed_state(), "o1", TODAY)

    def test_cancelled_order(self):
        state = _with_order(_order(status=OrderStatus.CANCELLED, lines=[("i4", 1)]))
        with pytest.raises(OrderCancelled):
            fulfill(state, "o9", TODAY)


# ══════════════════════════════════════════════════════════════
# PRE-CHECK
# ══════════════════════════════════════════════════════════════

class TestPrecheck:
    def test_collects_every_failure(self):
        state = _with_order(_order(lines=[("x", 1), ("i4", 500)]))
        with pytest.raises(FulfillmentBlocked) as exc_info:
            fulfill(state, "o9", TODAY)
        assert exc_info.value.reasons == (
            "Item ID x not found",
            "Fruit Chews (Packaged) (Insufficient Stock)",
        )

    def test_nothing_deducted_when_blocked(self):
        state = _with_order(_order(lines=[("i1", 10), ("i4", 500)]))
        with pytest.raises(FulfillmentBlocked):
            fulfill(state, "o9", TODAY)
        assert _quantity(state, "i1", "w1") == 500

    def test_item_must_be_in_order_warehouse(self):
        state = _with_order(_order(warehouse_id="w2", lines=[("i4", 1)]))
        assert precheck(state, state.find_order("o9"), TODAY) == (
            "Item ID i4 not found",
        )

    def test_duplicate_lines_are_summed(self):
        state = _with_order(_order(lines=[("i4", 70), ("i4", 60)]))
        assert precheck(state, state.find_order("o9"), TODAY) == (
            "Fruit Chews (Packaged) (Insufficient Stock)",
        )

    def test_duplicate_lines_within_stock(self):
        state = _with_order(_order(lines=[("i4", 70), ("i4", 50)]))
        new_state, _ = fulfill(state, "o9", TODAY)
        assert _quantity(new_state, "i4", "w1") == 0


class TestCrossWarehouseItemIds:
    """The pre-check scopes by warehouse; the deduction matches by id only."""

    def test_deduction_hits_first_line_with_that_id(self):
        state = build_seed_state()
        w2_line = InventoryItem(
            "i4", "w2", "Fruit Chews (Packaged)", 30, "boxes",
            InventoryType.FINISHED_GOOD, TODAY,
        )
        state = state.with_changes(inventory=state.inventory + (w2_line,))
        state = _with_order(_order(warehouse_id="w2", lines=[("i4", 10)]), state)

        new_state, _ = fulfill(state, "o9", TODAY)

        assert _quantity(new_state, "i4", "w1") == 110
        assert _quantity(new_state, "i4", "w2") == 30

    def test_short_first_line_rejects_after_passing_precheck(self):
        state = build_seed_state()
        w2_line = InventoryItem(
            "i4", "w2", "Fruit Chews (Packaged)", 200, "boxes",
            InventoryType.FINISHED_GOOD, TODAY,
        )
        state = state.with_changes(inventory=state.inventory + (w2_line,))
        state = _with_order(_order(warehouse_id="w2", lines=[("i4", 150)]), state)
        assert precheck(state, state.find_order("o9"), TODAY) == ()

        with pytest.raises(InsufficientStock, match="120 available, 150 requested"):
            fulfill(state, "o9", TODAY)

        assert _quantity(state, "i4", "w1") == 120
        assert _quantity(state, "i4", "w2") == 200
        assert state.find_order("o9").status == OrderStatus.PENDING
