"""
FOS Permissions - Read Visibility
=================================
Row filtering applied to every listing a caller receives.

Every read path goes through filter_visible(); the same rule set
decides command authorization, so what an actor can list and what it
can mutate never drift apart.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, Optional

from core.context.actor_context import ActorContext
from core.permissions.constants import Action, ResourceKind
from core.permissions.evaluator import PermissionEvaluator
from core.permissions.models import AccessScope
from core.primitives.user import UserRole

_DEFAULT_EVALUATOR = PermissionEvaluator()


# ══════════════════════════════════════════════════════════════
# ROW SCOPE RESOLUTION
# ══════════════════════════════════════════════════════════════

def _invoice_scope(invoice, state) -> AccessScope:
    order = state.find_order(invoice.order_id) if state is not None else None
    return AccessScope(warehouse_id=order.warehouse_id if order else None)


ROW_SCOPE_RESOLVERS: dict[ResourceKind, Callable[[Any, Any], AccessScope]] = {
    ResourceKind.USERS: lambda user, state: AccessScope(
        warehouse_id=user.assigned_warehouse_id,
        user_id=user.user_id,
        target_role=user.role,
    ),
    ResourceKind.WAREHOUSES: lambda warehouse, state: AccessScope(
        warehouse_id=warehouse.warehouse_id,
    ),
    ResourceKind.INVENTORY: lambda item, state: AccessScope(
        warehouse_id=item.warehouse_id,
    ),
    ResourceKind.ATTENDANCE: lambda record, state: AccessScope(
        warehouse_id=record.warehouse_id,
        user_id=record.user_id,
    ),
    ResourceKind.CUSTOMERS: lambda customer, state: AccessScope(),
    ResourceKind.ORDERS: lambda order, state: AccessScope(
        warehouse_id=order.warehouse_id,
    ),
    ResourceKind.INVOICES: _invoice_scope,
    ResourceKind.PAYROLL: lambda estimate, state: AccessScope(
        warehouse_id=estimate.warehouse_id or None,
        user_id=estimate.user_id,
    ),
}


def row_scope(resource_kind: ResourceKind, row: Any, state=None) -> AccessScope:
    return ROW_SCOPE_RESOLVERS[resource_kind](row, state)


# ══════════════════════════════════════════════════════════════
# PUBLIC PREDICATES
# ══════════════════════════════════════════════════════════════

def can_access(
    actor: Optional[ActorContext],
    resource_kind: ResourceKind,
    action: Action,
    scope: AccessScope | None = None,
    evaluator: PermissionEvaluator | None = None,
) -> bool:
    """
    True if the actor's role may perform action on resource_kind.

    With a scope, the actor's assignment must also cover it.
    """
    if actor is None:
        return False
    evaluator = evaluator or _DEFAULT_EVALUATOR
    return evaluator.check(actor, resource_kind, action, scope).allowed


def filter_visible(
    actor: Optional[ActorContext],
    resource_kind: ResourceKind,
    collection: Iterable[Any],
    state=None,
    evaluator: PermissionEvaluator | None = None,
) -> tuple:
    """Subset of collection the actor may read, order preserved."""
    if actor is None:
        return tuple()

    evaluator = evaluator or _DEFAULT_EVALUATOR
    if not evaluator.check(actor, resource_kind, Action.READ).allowed:
        return tuple()

    return tuple(
        row
        for row in collection
        if evaluator.check(
            actor,
            resource_kind,
            Action.READ,
            row_scope(resource_kind, row, state),
        ).allowed
    )


def visible_sections(
    role: Optional[UserRole],
    evaluator: PermissionEvaluator | None = None,
) -> tuple[str, ...]:
    """Navigation section identifiers the role may open."""
    if role is None:
        return tuple()
    evaluator = evaluator or _DEFAULT_EVALUATOR
    return evaluator.provider.get_sections(role)
