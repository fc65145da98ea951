"""
FOS Inventory Engine — Application Service
=============================================
Routes inventory commands to the stock ledger.
"""

from __future__ import annotations

import logging

from core.commands.base import Command
from core.commands.outcomes import Mutation
from core.identity.ids import IdProvider
from core.permissions.models import AccessScope
from core.state.snapshot import AppState
from engines.inventory import ledger
from engines.inventory.commands import (
    INVENTORY_COMMAND_TYPES,
    INVENTORY_ITEM_ADD_REQUEST,
    INVENTORY_ITEM_UPDATE_REQUEST,
)

logger = logging.getLogger("fos.inventory")


# ══════════════════════════════════════════════════════════════
# COMMAND HANDLER
# ══════════════════════════════════════════════════════════════

class _InventoryCommandHandler:
    def __init__(self, service: "InventoryService"):
        self._service = service

    def resolve_scope(self, command: Command, state: AppState) -> AccessScope:
        return AccessScope(warehouse_id=command.request.warehouse_id)

    def execute(self, command: Command, state: AppState) -> Mutation:
        return self._service._execute_command(command, state)


# ══════════════════════════════════════════════════════════════
# APPLICATION SERVICE
# ══════════════════════════════════════════════════════════════

class InventoryService:
    """
    Inventory Engine application service.

    Handles:
        inventory.item.add.request     → ledger.add_item
        inventory.item.update.request  → ledger.update_item
    """

    def __init__(self, *, command_bus, id_provider: IdProvider):
        self._command_bus = command_bus
        self._id_provider = id_provider
        self._register_handlers()

    def _register_handlers(self) -> None:
        handler = _InventoryCommandHandler(self)
        for command_type in sorted(INVENTORY_COMMAND_TYPES):
            self._command_bus.register_handler(command_type, handler)

    def _execute_command(self, command: Command, state: AppState) -> Mutation:
        request = command.request
        today = command.issued_at.date()

        if command.command_type == INVENTORY_ITEM_ADD_REQUEST:
            item_id = request.item_id or self._id_provider.new_id("i")
            new_state, item = ledger.add_item(state, request, item_id, today)
            logger.info(
                f"Stock line {item.item_id} opened in {item.warehouse_id} "
                f"with {item.quantity} {item.unit}"
            )
            return Mutation(
                state=new_state,
                value=item,
                message=f'Item "{item.item_name}" added to inventory',
            )

        if command.command_type == INVENTORY_ITEM_UPDATE_REQUEST:
            new_state, item = ledger.update_item(state, request, today)
            return Mutation(
                state=new_state,
                value=item,
                message=f'Item "{item.item_name}" updated',
            )

        raise ValueError(
            f"Unsupported inventory command type: {command.command_type}"
        )
