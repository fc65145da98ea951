"""
FOS Warehouse Primitive
=========================
A physical site that holds inventory and staff.

Warehouses are never deleted. A DISABLED warehouse stays readable but
refuses new inventory writes and check-ins.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class WarehouseStatus(Enum):
    ACTIVE = "ACTIVE"
    DISABLED = "DISABLED"


@dataclass(frozen=True)
class Warehouse:
    warehouse_id: str
    name: str
    location: str
    status: WarehouseStatus = WarehouseStatus.ACTIVE
    worker_count: int = 0

    def __post_init__(self):
        if not self.warehouse_id or not isinstance(self.warehouse_id, str):
            raise ValueError("warehouse_id must be non-empty string.")
        if not self.name or not isinstance(self.name, str):
            raise ValueError("name must be non-empty string.")
        if not isinstance(self.status, WarehouseStatus):
            raise ValueError("status must be WarehouseStatus enum.")
        if not isinstance(self.worker_count, int) or self.worker_count < 0:
            raise ValueError("worker_count must be non-negative integer.")

    @property
    def is_active(self) -> bool:
        return self.status == WarehouseStatus.ACTIVE

    def to_dict(self) -> dict:
        return {
            "warehouse_id": self.warehouse_id,
            "name": self.name,
            "location": self.location,
            "status": self.status.value,
            "worker_count": self.worker_count,
        }
