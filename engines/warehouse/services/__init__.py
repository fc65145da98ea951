"""
FOS Warehouse Engine — Application Service
=============================================
"""

from __future__ import annotations

from dataclasses import replace

from core.commands.base import Command
from core.commands.errors import DuplicateWarehouse, WarehouseNotFound
from core.commands.outcomes import Mutation
from core.identity.ids import IdProvider
from core.permissions.models import AccessScope
from core.primitives.warehouse import Warehouse
from core.state.snapshot import AppState, replace_entry
from engines.warehouse.commands import (
    WAREHOUSE_COMMAND_TYPES,
    WAREHOUSE_SITE_ADD_REQUEST,
    WAREHOUSE_SITE_UPDATE_REQUEST,
    AddWarehouseRequest,
    UpdateWarehouseRequest,
)


def add_warehouse(
    state: AppState,
    request: AddWarehouseRequest,
    warehouse_id: str,
) -> tuple[AppState, Warehouse]:
    if state.find_warehouse(warehouse_id) is not None:
        raise DuplicateWarehouse(warehouse_id)

    warehouse = Warehouse(
        warehouse_id=warehouse_id,
        name=request.name,
        location=request.location,
        status=request.status,
        worker_count=request.worker_count,
    )
    return state.with_changes(warehouses=state.warehouses + (warehouse,)), warehouse


def update_warehouse(
    state: AppState,
    request: UpdateWarehouseRequest,
) -> tuple[AppState, Warehouse]:
    existing = state.find_warehouse(request.warehouse_id)
    if existing is None:
        raise WarehouseNotFound(request.warehouse_id)

    updated = replace(
        existing,
        name=request.name,
        location=request.location,
        status=request.status,
        worker_count=request.worker_count,
    )
    warehouses = replace_entry(
        state.warehouses,
        lambda w: w.warehouse_id == request.warehouse_id,
        updated,
    )
    return state.with_changes(warehouses=warehouses), updated


class _WarehouseCommandHandler:
    def __init__(self, service: "WarehouseService"):
        self._service = service

    def resolve_scope(self, command: Command, state: AppState) -> AccessScope:
        warehouse_id = getattr(command.request, "warehouse_id", None)
        if not warehouse_id or state.find_warehouse(warehouse_id) is None:
            return AccessScope.unresolved()
        return AccessScope(warehouse_id=warehouse_id)

    def execute(self, command: Command, state: AppState) -> Mutation:
        return self._service._execute_command(command, state)


class WarehouseService:
    def __init__(self, *, command_bus, id_provider: IdProvider):
        self._command_bus = command_bus
        self._id_provider = id_provider
        handler = _WarehouseCommandHandler(self)
        for command_type in sorted(WAREHOUSE_COMMAND_TYPES):
            self._command_bus.register_handler(command_type, handler)

    def _execute_command(self, command: Command, state: AppState) -> Mutation:
        request = command.request

        if command.command_type == WAREHOUSE_SITE_ADD_REQUEST:
            warehouse_id = request.warehouse_id or self._id_provider.new_id("w")
            new_state, warehouse = add_warehouse(state, request, warehouse_id)
            return Mutation(
                state=new_state,
                value=warehouse,
                message=f'Warehouse "{warehouse.name}" created',
            )

        if command.command_type == WAREHOUSE_SITE_UPDATE_REQUEST:
            new_state, warehouse = update_warehouse(state, request)
            return Mutation(
                state=new_state,
                value=warehouse,
                message=f'Warehouse "{warehouse.name}" updated',
            )

        raise ValueError(
            f"Unsupported warehouse command type: {command.command_type}"
        )
