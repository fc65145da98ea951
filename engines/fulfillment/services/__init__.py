"""
FOS Fulfillment Engine — Application Service
===============================================
"""

from __future__ import annotations

from core.commands.base import Command
from core.commands.outcomes import Mutation
from core.permissions.models import AccessScope
from core.state.snapshot import AppState
from engines.fulfillment.commands import (
    FULFILLMENT_COMMAND_TYPES,
    FULFILLMENT_ORDER_FULFILL_REQUEST,
)
from engines.fulfillment.engine import fulfill


class _FulfillmentCommandHandler:
    def __init__(self, service: "FulfillmentService"):
        self._service = service

    def resolve_scope(self, command: Command, state: AppState) -> AccessScope:
        order = state.find_order(command.request.order_id)
        if order is None:
            return AccessScope.unresolved()
        return AccessScope(warehouse_id=order.warehouse_id)

    def execute(self, command: Command, state: AppState) -> Mutation:
        return self._service._execute_command(command, state)


class FulfillmentService:
    """
    Fulfillment Engine application service.

    Handles:
        fulfillment.order.fulfill.request → engine.fulfill
    """

    def __init__(self, *, command_bus):
        self._command_bus = command_bus
        handler = _FulfillmentCommandHandler(self)
        for command_type in sorted(FULFILLMENT_COMMAND_TYPES):
            self._command_bus.register_handler(command_type, handler)

    def _execute_command(self, command: Command, state: AppState) -> Mutation:
        if command.command_type != FULFILLMENT_ORDER_FULFILL_REQUEST:
            raise ValueError(
                f"Unsupported fulfillment command type: {command.command_type}"
            )

        new_state, order = fulfill(
            state, command.request.order_id, command.issued_at.date(),
        )
        return Mutation(
            state=new_state,
            value=order,
            message=f"Order #{order.order_id} fulfilled. Stock deducted.",
        )
