"""
FOS Warehouse & Customer Engines — Tests
==========================================
Site maintenance, the disabled-warehouse guard and customer registration.
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone

import pytest

from core.commands.errors import DuplicateCustomer, DuplicateWarehouse, WarehouseNotFound
from core.context.actor_context import ActorContext
from core.primitives.inventory import InventoryType
from core.primitives.party import CustomerType
from core.primitives.user import UserRole
from core.primitives.warehouse import WarehouseStatus
from core.state.seed import build_seed_state
from engines.customer.commands import AddCustomerRequest
from engines.customer.services import add_customer
from engines.inventory.commands import AddInventoryItemRequest
from engines.warehouse.commands import AddWarehouseRequest, UpdateWarehouseRequest
from engines.warehouse.policies import warehouse_must_be_active_policy
from engines.warehouse.services import add_warehouse, update_warehouse

NOW = datetime(2026, 3, 2, 9, 0, tzinfo=timezone.utc)
OWNER = ActorContext(actor_id="u1", role=UserRole.OWNER)


def _command(request):
    return request.to_command(command_id=uuid.uuid4(), actor=OWNER, issued_at=NOW)


class TestWarehouseSites:
    def test_add(self):
        request = AddWarehouseRequest(name="Hawassa Depot", location="Hawassa")
        state, warehouse = add_warehouse(build_seed_state(), request, "w4")
        assert warehouse.status == WarehouseStatus.ACTIVE
        assert state.warehouses[-1] == warehouse

    def test_duplicate_id(self):
        request = AddWarehouseRequest(name="Copy", location="Addis Ababa")
        with pytest.raises(DuplicateWarehouse):
            add_warehouse(build_seed_state(), request, "w1")

    def test_update_can_disable(self):
        request = UpdateWarehouseRequest(
            warehouse_id="w2", name="Adama Distribution", location="Adama",
            status=WarehouseStatus.DISABLED, worker_count=5,
        )
        state, warehouse = update_warehouse(build_seed_state(), request)
        assert not warehouse.is_active
        assert state.find_warehouse("w2").status == WarehouseStatus.DISABLED

    def test_update_unknown(self):
        request = UpdateWarehouseRequest(
            warehouse_id="w9", name="Nowhere", location="n/a",
            status=WarehouseStatus.ACTIVE,
        )
        with pytest.raises(WarehouseNotFound):
            update_warehouse(build_seed_state(), request)

    def test_negative_worker_count_rejected(self):
        with pytest.raises(ValueError, match="worker_count"):
            AddWarehouseRequest(name="Bad", location="x", worker_count=-2)

    def test_blank_name_rejected(self):
        with pytest.raises(ValueError, match="name must be non-empty"):
            AddWarehouseRequest(name="", location="x")


class TestWarehouseActivePolicy:
    def _item_request(self, warehouse_id):
        return AddInventoryItemRequest(
            warehouse_id=warehouse_id, item_name="Wrappers", quantity=10,
            unit="rolls", item_type=InventoryType.RAW_MATERIAL,
        )

    def test_disabled_warehouse_rejected(self):
        rejection = warehouse_must_be_active_policy(
            _command(self._item_request("w3")), build_seed_state(),
        )
        assert rejection is not None
        assert rejection.policy_name == "warehouse_must_be_active_policy"

    def test_active_warehouse_passes(self):
        assert warehouse_must_be_active_policy(
            _command(self._item_request("w1")), build_seed_state(),
        ) is None

    def test_unknown_warehouse_passes(self):
        assert warehouse_must_be_active_policy(
            _command(self._item_request("w9")), build_seed_state(),
        ) is None

    def test_unguarded_command_passes(self):
        request = UpdateWarehouseRequest(
            warehouse_id="w3", name="Old Storage", location="Bole",
            status=WarehouseStatus.ACTIVE,
        )
        assert warehouse_must_be_active_policy(_command(request), build_seed_state()) is None


class TestCustomers:
    def test_add(self):
        request = AddCustomerRequest(
            name="Hawassa Sweets", customer_type=CustomerType.COMPANY,
            contact_person="Sara", phone="+251 911 000 000",
        )
        state, customer = add_customer(build_seed_state(), request, "c3")
        assert customer.name == "Hawassa Sweets"
        assert state.find_customer("c3") == customer

    def test_duplicate(self):
        request = AddCustomerRequest(name="Again", customer_type=CustomerType.INDIVIDUAL)
        with pytest.raises(DuplicateCustomer):
            add_customer(build_seed_state(), request, "c1")

    def test_type_must_be_enum(self):
        with pytest.raises(ValueError, match="customer_type"):
            AddCustomerRequest(name="Kiosk", customer_type="COMPANY")
