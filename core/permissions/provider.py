"""
FOS Permissions - Provider Protocol and Role Grant Table
========================================================
"""

from __future__ import annotations

from typing import Mapping, Protocol

from core.permissions.constants import (
    GRANT_SCOPE_ALL,
    GRANT_SCOPE_SELF,
    GRANT_SCOPE_WAREHOUSE,
    GRANT_SCOPE_WAREHOUSE_WORKERS,
    SECTION_ATTENDANCE,
    SECTION_CRM,
    SECTION_DASHBOARD,
    SECTION_INVENTORY,
    SECTION_PAYROLL,
    SECTION_USERS,
    SECTION_WAREHOUSES,
    Action,
    ResourceKind,
)
from core.permissions.models import Grant
from core.primitives.user import UserRole


class PermissionProvider(Protocol):
    def get_grants(self, role: UserRole) -> tuple[Grant, ...]:
        ...

    def get_sections(self, role: UserRole) -> tuple[str, ...]:
        ...


_READ = (Action.READ,)
_READ_WRITE = (Action.READ, Action.WRITE)

DEFAULT_ROLE_GRANTS: Mapping[UserRole, tuple[Grant, ...]] = {
    UserRole.OWNER: tuple(
        Grant(kind, _READ_WRITE, GRANT_SCOPE_ALL) for kind in ResourceKind
    ),
    UserRole.WAREHOUSE_ADMIN: (
        Grant(ResourceKind.INVENTORY, _READ_WRITE, GRANT_SCOPE_WAREHOUSE),
        Grant(ResourceKind.ATTENDANCE, _READ_WRITE, GRANT_SCOPE_WAREHOUSE),
        Grant(ResourceKind.WAREHOUSES, _READ, GRANT_SCOPE_WAREHOUSE),
        Grant(ResourceKind.ORDERS, _READ_WRITE, GRANT_SCOPE_WAREHOUSE),
        Grant(ResourceKind.INVOICES, _READ_WRITE, GRANT_SCOPE_WAREHOUSE),
        Grant(ResourceKind.PAYROLL, _READ_WRITE, GRANT_SCOPE_WAREHOUSE),
        Grant(ResourceKind.CUSTOMERS, _READ_WRITE, GRANT_SCOPE_ALL),
        Grant(ResourceKind.USERS, _READ, GRANT_SCOPE_WAREHOUSE_WORKERS),
    ),
    UserRole.WORKER: (
        Grant(ResourceKind.WAREHOUSES, _READ, GRANT_SCOPE_WAREHOUSE),
        Grant(ResourceKind.ATTENDANCE, _READ_WRITE, GRANT_SCOPE_SELF),
        # Own estimates only, shown on the profile rather than a section.
        Grant(ResourceKind.PAYROLL, _READ, GRANT_SCOPE_SELF),
    ),
}

DEFAULT_ROLE_SECTIONS: Mapping[UserRole, tuple[str, ...]] = {
    UserRole.OWNER: (
        SECTION_DASHBOARD,
        SECTION_WAREHOUSES,
        SECTION_INVENTORY,
        SECTION_ATTENDANCE,
        SECTION_CRM,
        SECTION_PAYROLL,
        SECTION_USERS,
    ),
    UserRole.WAREHOUSE_ADMIN: (
        SECTION_DASHBOARD,
        SECTION_WAREHOUSES,
        SECTION_INVENTORY,
        SECTION_ATTENDANCE,
        SECTION_CRM,
        SECTION_PAYROLL,
    ),
    UserRole.WORKER: (
        SECTION_DASHBOARD,
        SECTION_WAREHOUSES,
        SECTION_ATTENDANCE,
    ),
}


class StaticPermissionProvider:
    """
    Deterministic in-memory provider backed by the role grant table.
    """

    def __init__(
        self,
        grants: Mapping[UserRole, tuple[Grant, ...]] | None = None,
        sections: Mapping[UserRole, tuple[str, ...]] | None = None,
    ):
        self._grants = dict(DEFAULT_ROLE_GRANTS if grants is None else grants)
        self._sections = dict(DEFAULT_ROLE_SECTIONS if sections is None else sections)

    def get_grants(self, role: UserRole) -> tuple[Grant, ...]:
        return self._grants.get(role, tuple())

    def get_sections(self, role: UserRole) -> tuple[str, ...]:
        return self._sections.get(role, tuple())
