"""
FOS Permissions - Command to Permission Registry
================================================
"""

from __future__ import annotations

from core.permissions.constants import Action, ResourceKind

RequiredPermission = tuple[ResourceKind, Action]

COMMAND_PERMISSION_MAP: dict[str, RequiredPermission] = {
    "warehouse.site.add.request": (ResourceKind.WAREHOUSES, Action.WRITE),
    "warehouse.site.update.request": (ResourceKind.WAREHOUSES, Action.WRITE),
    "inventory.item.add.request": (ResourceKind.INVENTORY, Action.WRITE),
    "inventory.item.update.request": (ResourceKind.INVENTORY, Action.WRITE),
    "hr.attendance.check_in.request": (ResourceKind.ATTENDANCE, Action.WRITE),
    "hr.attendance.check_out.request": (ResourceKind.ATTENDANCE, Action.WRITE),
    "hr.payroll.estimate.request": (ResourceKind.PAYROLL, Action.WRITE),
    "hr.user.add.request": (ResourceKind.USERS, Action.WRITE),
    "hr.user.update.request": (ResourceKind.USERS, Action.WRITE),
    "hr.user.delete.request": (ResourceKind.USERS, Action.WRITE),
    "fulfillment.order.fulfill.request": (ResourceKind.ORDERS, Action.WRITE),
    "customer.profile.add.request": (ResourceKind.CUSTOMERS, Action.WRITE),
    "invoicing.invoice.generate.request": (ResourceKind.INVOICES, Action.WRITE),
    "invoicing.payment.record.request": (ResourceKind.INVOICES, Action.WRITE),
}


def resolve_required_permission(command_type: str) -> RequiredPermission | None:
    """Resolve required (resource kind, action) for a command type."""
    return COMMAND_PERMISSION_MAP.get(command_type)
