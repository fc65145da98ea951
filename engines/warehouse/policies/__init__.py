"""
FOS Warehouse Engine — Policies
=================================
Dispatcher policies that guard writes against retired warehouses.
"""

from __future__ import annotations

from typing import Optional

from core.commands.base import Command
from core.commands.errors import WarehouseDisabled
from core.commands.rejection import RejectionReason

# Commands that write into a warehouse and must target an ACTIVE one.
WAREHOUSE_GUARDED_COMMAND_TYPES = frozenset({
    "inventory.item.add.request",
    "inventory.item.update.request",
    "hr.attendance.check_in.request",
})


def warehouse_must_be_active_policy(
    command: Command,
    state,
) -> Optional[RejectionReason]:
    """
    Reject inventory writes and check-ins against a DISABLED warehouse.

    Unknown warehouses pass here; the engine reports them as not found.
    """
    if command.command_type not in WAREHOUSE_GUARDED_COMMAND_TYPES:
        return None

    warehouse_id = getattr(command.request, "warehouse_id", None)
    warehouse = state.find_warehouse(warehouse_id) if warehouse_id else None
    if warehouse is None or warehouse.is_active:
        return None

    return WarehouseDisabled(warehouse.warehouse_id).to_rejection(
        policy_name="warehouse_must_be_active_policy",
    )
