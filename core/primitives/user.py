"""
FOS User Primitive — Role-Bearing Staff Member
================================================
Every actor in FOS is a User with exactly one role.

Roles:
    OWNER            — Unrestricted. Manages users and warehouses.
    WAREHOUSE_ADMIN  — Runs one warehouse (inventory, attendance, CRM, payroll).
    WORKER           — Read-only, checks in/out of shifts.

RULES:
- The OWNER user is never deleted and never demoted
- Non-owners SHOULD carry assigned_warehouse_id; absence means "unassigned"
- hourly_rate is optional; payroll treats a missing rate as zero

This file contains NO persistence logic.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Optional


class UserRole(Enum):
    """Role of a user; drives every authorization decision."""
    OWNER = "OWNER"
    WAREHOUSE_ADMIN = "WAREHOUSE_ADMIN"
    WORKER = "WORKER"


@dataclass(frozen=True)
class User:
    """
    Staff member snapshot.

    Fields:
        user_id:               Unique identifier (e.g. 'u1')
        employee_number:       Human-facing staff number (e.g. 'Y00003')
        full_name:             Display name
        email:                 Contact / login email
        role:                  UserRole
        assigned_warehouse_id: Warehouse scope (None = unassigned)
        hourly_rate:           Payroll rate per hour (None = not set)
    """
    user_id: str
    employee_number: str
    full_name: str
    email: str
    role: UserRole
    assigned_warehouse_id: Optional[str] = None
    hourly_rate: Optional[Decimal] = None

    def __post_init__(self):
        if not self.user_id or not isinstance(self.user_id, str):
            raise ValueError("user_id must be non-empty string.")
        if not self.full_name or not isinstance(self.full_name, str):
            raise ValueError("full_name must be non-empty string.")
        if not isinstance(self.role, UserRole):
            raise ValueError("role must be UserRole enum.")
        if self.hourly_rate is not None:
            if not isinstance(self.hourly_rate, Decimal):
                raise ValueError("hourly_rate must be Decimal or None.")
            if self.hourly_rate < 0:
                raise ValueError("hourly_rate must be >= 0.")

    @property
    def is_owner(self) -> bool:
        return self.role == UserRole.OWNER

    @property
    def is_unassigned(self) -> bool:
        return not self.assigned_warehouse_id

    @property
    def effective_hourly_rate(self) -> Decimal:
        return self.hourly_rate if self.hourly_rate is not None else Decimal("0")

    def to_dict(self) -> dict:
        return {
            "user_id": self.user_id,
            "employee_number": self.employee_number,
            "full_name": self.full_name,
            "email": self.email,
            "role": self.role.value,
            "assigned_warehouse_id": self.assigned_warehouse_id,
            "hourly_rate": (
                str(self.hourly_rate) if self.hourly_rate is not None else None
            ),
        }
