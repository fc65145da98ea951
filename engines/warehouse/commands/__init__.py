"""
FOS Warehouse Engine — Request Commands
=========================================
Typed warehouse requests. Warehouses are never deleted; DISABLED is
their only retirement state.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from core.commands.base import Command
from core.context.actor_context import ActorContext
from core.primitives.warehouse import WarehouseStatus


WAREHOUSE_SITE_ADD_REQUEST = "warehouse.site.add.request"
WAREHOUSE_SITE_UPDATE_REQUEST = "warehouse.site.update.request"

WAREHOUSE_COMMAND_TYPES = frozenset({
    WAREHOUSE_SITE_ADD_REQUEST,
    WAREHOUSE_SITE_UPDATE_REQUEST,
})


def _validate_site_fields(request) -> None:
    if not request.name or not request.name.strip():
        raise ValueError("name must be non-empty.")
    if not request.location or not request.location.strip():
        raise ValueError("location must be non-empty.")
    if not isinstance(request.status, WarehouseStatus):
        raise ValueError("status must be WarehouseStatus enum.")
    if (
        isinstance(request.worker_count, bool)
        or not isinstance(request.worker_count, int)
        or request.worker_count < 0
    ):
        raise ValueError("worker_count must be a non-negative integer.")


@dataclass(frozen=True)
class AddWarehouseRequest:
    name: str
    location: str
    status: WarehouseStatus = WarehouseStatus.ACTIVE
    worker_count: int = 0
    warehouse_id: Optional[str] = None

    def __post_init__(self):
        _validate_site_fields(self)
        if self.warehouse_id is not None and not self.warehouse_id:
            raise ValueError("warehouse_id must be non-empty when given.")

    def to_command(
        self,
        *,
        command_id: uuid.UUID,
        actor: Optional[ActorContext],
        issued_at: datetime,
    ) -> Command:
        return Command(
            command_id=command_id,
            command_type=WAREHOUSE_SITE_ADD_REQUEST,
            actor=actor,
            request=self,
            issued_at=issued_at,
            source_engine="warehouse",
        )


@dataclass(frozen=True)
class UpdateWarehouseRequest:
    warehouse_id: str
    name: str
    location: str
    status: WarehouseStatus
    worker_count: int = 0

    def __post_init__(self):
        if not self.warehouse_id:
            raise ValueError("warehouse_id must be non-empty.")
        _validate_site_fields(self)

    def to_command(
        self,
        *,
        command_id: uuid.UUID,
        actor: Optional[ActorContext],
        issued_at: datetime,
    ) -> Command:
        return Command(
            command_id=command_id,
            command_type=WAREHOUSE_SITE_UPDATE_REQUEST,
            actor=actor,
            request=self,
            issued_at=issued_at,
            source_engine="warehouse",
        )
