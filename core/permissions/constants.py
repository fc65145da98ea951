"""
FOS Permissions - Constants
===========================
Resource kinds, actions, grant scopes and navigation sections.
"""

from __future__ import annotations

from enum import Enum


class ResourceKind(Enum):
    USERS = "USERS"
    WAREHOUSES = "WAREHOUSES"
    INVENTORY = "INVENTORY"
    ATTENDANCE = "ATTENDANCE"
    CUSTOMERS = "CUSTOMERS"
    ORDERS = "ORDERS"
    INVOICES = "INVOICES"
    PAYROLL = "PAYROLL"


class Action(Enum):
    READ = "READ"
    WRITE = "WRITE"


# ══════════════════════════════════════════════════════════════
# GRANT SCOPES
# ══════════════════════════════════════════════════════════════

# Any row of the resource kind.
GRANT_SCOPE_ALL = "ALL"
# Rows whose warehouse equals the actor's assigned warehouse.
GRANT_SCOPE_WAREHOUSE = "WAREHOUSE"
# Rows that belong to the actor's own user id.
GRANT_SCOPE_SELF = "SELF"
# Worker accounts assigned to the actor's warehouse.
GRANT_SCOPE_WAREHOUSE_WORKERS = "WAREHOUSE_WORKERS"

VALID_GRANT_SCOPES = frozenset({
    GRANT_SCOPE_ALL,
    GRANT_SCOPE_WAREHOUSE,
    GRANT_SCOPE_SELF,
    GRANT_SCOPE_WAREHOUSE_WORKERS,
})


# ══════════════════════════════════════════════════════════════
# NAVIGATION SECTIONS
# ══════════════════════════════════════════════════════════════

SECTION_DASHBOARD = "dashboard"
SECTION_WAREHOUSES = "warehouses"
SECTION_INVENTORY = "inventory"
SECTION_ATTENDANCE = "attendance"
SECTION_CRM = "crm"
SECTION_PAYROLL = "payroll"
SECTION_USERS = "users"

ALL_SECTIONS = (
    SECTION_DASHBOARD,
    SECTION_WAREHOUSES,
    SECTION_INVENTORY,
    SECTION_ATTENDANCE,
    SECTION_CRM,
    SECTION_PAYROLL,
    SECTION_USERS,
)
