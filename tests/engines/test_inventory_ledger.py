"""
FOS Inventory Engine — Ledger Tests
======================================
Line maintenance, validated deduction and the stock invariant
(no line ever goes negative).
"""

from __future__ import annotations

from datetime import date

import pytest

from core.commands.errors import (
    DuplicateItem,
    InsufficientStock,
    ItemNotFound,
    WarehouseNotFound,
)
from core.primitives.inventory import InventoryItem, InventoryType
from core.state.seed import build_seed_state
from engines.inventory import ledger
from engines.inventory.commands import (
    AddInventoryItemRequest,
    UpdateInventoryItemRequest,
)

TODAY = date(2026, 3, 2)


def _add_request(**overrides):
    fields = dict(
        warehouse_id="w1", item_name="Cocoa", quantity=40,
        unit="kg", item_type=InventoryType.RAW_MATERIAL,
    )
    fields.update(overrides)
    return AddInventoryItemRequest(**fields)


# ══════════════════════════════════════════════════════════════
# REQUEST VALIDATION
# ══════════════════════════════════════════════════════════════

class TestInventoryRequestValidation:
    def test_negative_quantity_rejected(self):
        with pytest.raises(ValueError, match="quantity must be >= 0"):
            _add_request(quantity=-1)

    def test_quantity_must_be_integer(self):
        with pytest.raises(ValueError, match="quantity must be an integer"):
            _add_request(quantity=1.5)

    def test_bool_quantity_rejected(self):
        with pytest.raises(ValueError, match="quantity must be an integer"):
            _add_request(quantity=True)

    def test_item_type_must_be_enum(self):
        with pytest.raises(ValueError, match="item_type"):
            _add_request(item_type="RAW_MATERIAL")

    def test_blank_name_rejected(self):
        with pytest.raises(ValueError, match="item_name"):
            _add_request(item_name="  ")


# ══════════════════════════════════════════════════════════════
# ADD / UPDATE
# ══════════════════════════════════════════════════════════════

class TestAddItem:
    def test_appends_line(self):
        state = build_seed_state()
        new_state, item = ledger.add_item(state, _add_request(), "i7", TODAY)
        assert new_state.inventory[-1] == item
        assert item.last_updated == TODAY
        assert len(state.inventory) == 6

    def test_unknown_warehouse(self):
        with pytest.raises(WarehouseNotFound):
            ledger.add_item(build_seed_state(), _add_request(warehouse_id="w9"), "i7", TODAY)

    def test_duplicate_id_in_same_warehouse(self):
        with pytest.raises(DuplicateItem):
            ledger.add_item(build_seed_state(), _add_request(), "i1", TODAY)

    def test_same_id_in_other_warehouse_allowed(self):
        new_state, item = ledger.add_item(
            build_seed_state(), _add_request(warehouse_id="w2"), "i1", TODAY,
        )
        assert new_state.find_item("i1", "w2") == item


class TestUpdateItem:
    def test_updates_in_place(self):
        request = UpdateInventoryItemRequest(
            item_id="i2", warehouse_id="w1", item_name="Glucose Syrup",
            quantity=180, unit="liters", item_type=InventoryType.RAW_MATERIAL,
        )
        state = build_seed_state()
        new_state, item = ledger.update_item(state, request, TODAY)
        assert item.quantity == 180
        assert new_state.inventory[1] == item
        assert [i.item_id for i in new_state.inventory] == [i.item_id for i in state.inventory]

    def test_item_matched_by_warehouse(self):
        request = UpdateInventoryItemRequest(
            item_id="i2", warehouse_id="w2", item_name="Glucose Syrup",
            quantity=180, unit="liters", item_type=InventoryType.RAW_MATERIAL,
        )
        with pytest.raises(ItemNotFound):
            ledger.update_item(build_seed_state(), request, TODAY)


# ══════════════════════════════════════════════════════════════
# DEDUCTION
# ══════════════════════════════════════════════════════════════

class TestDeduct:
    def setup_method(self):
        self.items = build_seed_state().inventory

    def test_validated_deduction(self):
        deduction = ledger.deduct(self.items, "i4", "w1", 50, TODAY)
        assert deduction.previous_quantity == 120
        assert deduction.new_quantity == 70
        assert deduction.warehouse_id == "w1"

    def test_apply_deduction(self):
        deduction = ledger.deduct(self.items, "i4", "w1", 50, TODAY)
        items = ledger.apply_deduction(self.items, deduction)
        item = next(i for i in items if i.item_id == "i4")
        assert item.quantity == 70
        assert item.last_updated == TODAY

    def test_exact_stock_allowed(self):
        deduction = ledger.deduct(self.items, "i4", "w1", 120, TODAY)
        assert deduction.new_quantity == 0

    def test_insufficient_stock(self):
        with pytest.raises(InsufficientStock) as exc_info:
            ledger.deduct(self.items, "i4", "w1", 121, TODAY)
        assert exc_info.value.item_name == "Fruit Chews (Packaged)"

    def test_missing_in_warehouse(self):
        with pytest.raises(ItemNotFound):
            ledger.deduct(self.items, "i4", "w2", 1, TODAY)

    def test_non_positive_amount(self):
        with pytest.raises(ValueError, match="positive"):
            ledger.deduct(self.items, "i4", "w1", 0, TODAY)

    def test_stock_never_negative(self):
        items = self.items
        for _ in range(5):
            try:
                deduction = ledger.deduct(items, "i4", "w1", 50, TODAY)
            except InsufficientStock:
                continue
            items = ledger.apply_deduction(items, deduction)
        assert all(i.quantity >= 0 for i in items)
        assert next(i for i in items if i.item_id == "i4").quantity == 20

    def test_item_rejects_negative_quantity(self):
        with pytest.raises(ValueError):
            InventoryItem("x", "w1", "Bad", -1, "kg", InventoryType.WIP, TODAY)


class TestQueries:
    def test_low_stock_excludes_waste(self):
        items = build_seed_state().inventory
        assert ledger.low_stock_items(items, 50) == ()
        low = ledger.low_stock_items(items, 150)
        assert [i.item_id for i in low] == ["i4"]

    def test_total_units(self):
        assert ledger.total_units(build_seed_state().inventory) == 6135
