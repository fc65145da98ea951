"""
FOS Inventory Engine — Request Commands
=========================================
Typed inventory requests that convert into canonical Command objects.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from core.commands.base import Command
from core.context.actor_context import ActorContext
from core.primitives.inventory import InventoryType


# ══════════════════════════════════════════════════════════════
# COMMAND TYPE CONSTANTS
# ══════════════════════════════════════════════════════════════

INVENTORY_ITEM_ADD_REQUEST = "inventory.item.add.request"
INVENTORY_ITEM_UPDATE_REQUEST = "inventory.item.update.request"

INVENTORY_COMMAND_TYPES = frozenset({
    INVENTORY_ITEM_ADD_REQUEST,
    INVENTORY_ITEM_UPDATE_REQUEST,
})


def _validate_item_fields(request) -> None:
    if not request.warehouse_id:
        raise ValueError("warehouse_id must be non-empty.")
    if not request.item_name or not request.item_name.strip():
        raise ValueError("item_name must be non-empty.")
    if isinstance(request.quantity, bool) or not isinstance(request.quantity, int):
        raise ValueError("quantity must be an integer.")
    if request.quantity < 0:
        raise ValueError("quantity must be >= 0.")
    if not request.unit:
        raise ValueError("unit must be non-empty.")
    if not isinstance(request.item_type, InventoryType):
        raise ValueError("item_type must be InventoryType enum.")


# ══════════════════════════════════════════════════════════════
# REQUEST COMMANDS
# ══════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class AddInventoryItemRequest:
    """Request to add a stock line to a warehouse. item_id is generated when omitted."""
    warehouse_id: str
    item_name: str
    quantity: int
    unit: str
    item_type: InventoryType
    item_id: Optional[str] = None

    def __post_init__(self):
        _validate_item_fields(self)
        if self.item_id is not None and not self.item_id:
            raise ValueError("item_id must be non-empty when given.")

    def to_command(
        self,
        *,
        command_id: uuid.UUID,
        actor: Optional[ActorContext],
        issued_at: datetime,
    ) -> Command:
        return Command(
            command_id=command_id,
            command_type=INVENTORY_ITEM_ADD_REQUEST,
            actor=actor,
            request=self,
            issued_at=issued_at,
            source_engine="inventory",
        )


@dataclass(frozen=True)
class UpdateInventoryItemRequest:
    """
    Request to replace a stock line.

    The line is identified by (item_id, warehouse_id); moving a line
    between warehouses is not an update.
    """
    item_id: str
    warehouse_id: str
    item_name: str
    quantity: int
    unit: str
    item_type: InventoryType

    def __post_init__(self):
        if not self.item_id:
            raise ValueError("item_id must be non-empty.")
        _validate_item_fields(self)

    def to_command(
        self,
        *,
        command_id: uuid.UUID,
        actor: Optional[ActorContext],
        issued_at: datetime,
    ) -> Command:
        return Command(
            command_id=command_id,
            command_type=INVENTORY_ITEM_UPDATE_REQUEST,
            actor=actor,
            request=self,
            issued_at=issued_at,
            source_engine="inventory",
        )
