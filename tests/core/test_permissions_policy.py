"""
FOS Permissions — Authorization Policy Tests
===============================================
Role grants, warehouse scoping, row visibility and navigation sections.
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone

import pytest

from core.commands.base import Command
from core.commands.rejection import ReasonCode
from core.context.actor_context import ActorContext
from core.permissions import (
    ALL_SECTIONS,
    AccessScope,
    Action,
    Grant,
    PermissionEvaluator,
    ResourceKind,
    StaticPermissionProvider,
    can_access,
    filter_visible,
    visible_sections,
)
from core.primitives.user import UserRole
from core.state.seed import build_seed_state
from engines.fulfillment.commands import FulfillOrderRequest

NOW = datetime(2026, 3, 2, 9, 0, tzinfo=timezone.utc)

OWNER = ActorContext(actor_id="u1", role=UserRole.OWNER)
ADMIN_W1 = ActorContext(actor_id="u2", role=UserRole.WAREHOUSE_ADMIN, assigned_warehouse_id="w1")
WORKER_W1 = ActorContext(actor_id="u3", role=UserRole.WORKER, assigned_warehouse_id="w1")
UNASSIGNED_ADMIN = ActorContext(actor_id="u9", role=UserRole.WAREHOUSE_ADMIN)


def _fulfill_command(actor, order_id="o2"):
    return FulfillOrderRequest(order_id=order_id).to_command(
        command_id=uuid.uuid4(), actor=actor, issued_at=NOW,
    )


# ══════════════════════════════════════════════════════════════
# ROLE-LEVEL CAPABILITIES
# ══════════════════════════════════════════════════════════════

class TestRoleCapabilities:
    def test_owner_can_write_every_resource_kind(self):
        for kind in ResourceKind:
            assert can_access(OWNER, kind, Action.WRITE)

    def test_admin_cannot_manage_users(self):
        assert can_access(ADMIN_W1, ResourceKind.USERS, Action.READ)
        assert not can_access(ADMIN_W1, ResourceKind.USERS, Action.WRITE)

    def test_admin_cannot_write_warehouses(self):
        assert not can_access(ADMIN_W1, ResourceKind.WAREHOUSES, Action.WRITE)

    def test_worker_has_no_inventory_or_invoice_access(self):
        assert not can_access(WORKER_W1, ResourceKind.INVENTORY, Action.READ)
        assert not can_access(WORKER_W1, ResourceKind.INVOICES, Action.READ)
        assert not can_access(WORKER_W1, ResourceKind.ORDERS, Action.WRITE)

    def test_worker_can_write_attendance(self):
        assert can_access(WORKER_W1, ResourceKind.ATTENDANCE, Action.WRITE)

    def test_no_actor_has_no_access(self):
        assert not can_access(None, ResourceKind.WAREHOUSES, Action.READ)


# ══════════════════════════════════════════════════════════════
# SCOPED CHECKS
# ══════════════════════════════════════════════════════════════

class TestScopedChecks:
    def test_admin_limited_to_own_warehouse(self):
        in_scope = AccessScope(warehouse_id="w1")
        out_of_scope = AccessScope(warehouse_id="w2")
        assert can_access(ADMIN_W1, ResourceKind.INVENTORY, Action.WRITE, in_scope)
        assert not can_access(ADMIN_W1, ResourceKind.INVENTORY, Action.WRITE, out_of_scope)

    def test_unassigned_admin_sees_no_warehouse_data(self):
        scope = AccessScope(warehouse_id="w1")
        assert not can_access(UNASSIGNED_ADMIN, ResourceKind.INVENTORY, Action.READ, scope)

    def test_worker_attendance_is_self_scoped(self):
        own = AccessScope(warehouse_id="w1", user_id="u3")
        other = AccessScope(warehouse_id="w1", user_id="u4")
        assert can_access(WORKER_W1, ResourceKind.ATTENDANCE, Action.WRITE, own)
        assert not can_access(WORKER_W1, ResourceKind.ATTENDANCE, Action.WRITE, other)

    def test_worker_reads_own_payroll_only(self):
        own = AccessScope(warehouse_id="w1", user_id="u3")
        other = AccessScope(warehouse_id="w1", user_id="u2")
        assert can_access(WORKER_W1, ResourceKind.PAYROLL, Action.READ, own)
        assert not can_access(WORKER_W1, ResourceKind.PAYROLL, Action.READ, other)
        assert not can_access(WORKER_W1, ResourceKind.PAYROLL, Action.WRITE, own)

    def test_admin_reads_only_workers_of_own_warehouse(self):
        worker = AccessScope(warehouse_id="w1", user_id="u3", target_role=UserRole.WORKER)
        peer_admin = AccessScope(
            warehouse_id="w1", user_id="u5", target_role=UserRole.WAREHOUSE_ADMIN,
        )
        assert can_access(ADMIN_W1, ResourceKind.USERS, Action.READ, worker)
        assert not can_access(ADMIN_W1, ResourceKind.USERS, Action.READ, peer_admin)

    def test_unresolved_scope_checks_role_only(self):
        scope = AccessScope.unresolved()
        assert can_access(ADMIN_W1, ResourceKind.ORDERS, Action.WRITE, scope)
        assert not can_access(WORKER_W1, ResourceKind.ORDERS, Action.WRITE, scope)


# ══════════════════════════════════════════════════════════════
# COMMAND EVALUATION
# ══════════════════════════════════════════════════════════════

class TestCommandEvaluation:
    def test_missing_actor_rejected(self):
        result = PermissionEvaluator().evaluate(
            _fulfill_command(None), AccessScope(warehouse_id="w1"),
        )
        assert not result.allowed
        assert result.rejection_code == ReasonCode.NO_ACTIVE_ACTOR

    def test_unmapped_command_type_rejected(self):
        command = Command(
            command_id=uuid.uuid4(),
            command_type="fulfillment.order.reopen.request",
            actor=OWNER,
            request=FulfillOrderRequest(order_id="o2"),
            issued_at=NOW,
            source_engine="fulfillment",
        )
        result = PermissionEvaluator().evaluate(command, AccessScope())
        assert not result.allowed
        assert result.rejection_code == ReasonCode.PERMISSION_MAPPING_MISSING

    def test_admin_fulfills_in_own_warehouse_only(self):
        evaluator = PermissionEvaluator()
        assert evaluator.evaluate(
            _fulfill_command(ADMIN_W1), AccessScope(warehouse_id="w1"),
        ).allowed
        denied = evaluator.evaluate(
            _fulfill_command(ADMIN_W1), AccessScope(warehouse_id="w2"),
        )
        assert not denied.allowed
        assert denied.rejection_code == ReasonCode.PERMISSION_DENIED

    def test_custom_provider_replaces_defaults(self):
        provider = StaticPermissionProvider(
            grants={UserRole.WORKER: (Grant(ResourceKind.ORDERS, (Action.WRITE,)),)},
        )
        evaluator = PermissionEvaluator(provider=provider)
        assert evaluator.evaluate(
            _fulfill_command(WORKER_W1), AccessScope(warehouse_id="w2"),
        ).allowed


# ══════════════════════════════════════════════════════════════
# ROW VISIBILITY
# ══════════════════════════════════════════════════════════════

class TestFilterVisible:
    def setup_method(self):
        self.state = build_seed_state()

    def test_owner_sees_everything(self):
        rows = filter_visible(OWNER, ResourceKind.INVENTORY, self.state.inventory)
        assert rows == self.state.inventory

    def test_admin_sees_own_warehouse_inventory(self):
        rows = filter_visible(ADMIN_W1, ResourceKind.INVENTORY, self.state.inventory)
        assert {item.warehouse_id for item in rows} == {"w1"}
        assert "i6" not in {item.item_id for item in rows}

    def test_order_preserved(self):
        rows = filter_visible(ADMIN_W1, ResourceKind.INVENTORY, self.state.inventory)
        assert [item.item_id for item in rows] == ["i1", "i2", "i3", "i4", "i5"]

    def test_admin_sees_invoices_through_order_warehouse(self):
        rows = filter_visible(
            ADMIN_W1, ResourceKind.INVOICES, self.state.invoices, state=self.state,
        )
        assert [inv.invoice_id for inv in rows] == ["inv1"]

    def test_admin_user_listing_is_w1_workers(self):
        rows = filter_visible(ADMIN_W1, ResourceKind.USERS, self.state.users)
        assert [user.user_id for user in rows] == ["u3"]

    def test_worker_sees_only_own_attendance(self):
        worker_w2 = ActorContext(actor_id="u4", role=UserRole.WORKER, assigned_warehouse_id="w2")
        rows = filter_visible(worker_w2, ResourceKind.ATTENDANCE, self.state.attendance)
        assert rows == ()

    def test_worker_sees_no_inventory(self):
        assert filter_visible(WORKER_W1, ResourceKind.INVENTORY, self.state.inventory) == ()

    def test_worker_sees_assigned_warehouse(self):
        rows = filter_visible(WORKER_W1, ResourceKind.WAREHOUSES, self.state.warehouses)
        assert [w.warehouse_id for w in rows] == ["w1"]

    def test_no_actor_sees_nothing(self):
        assert filter_visible(None, ResourceKind.WAREHOUSES, self.state.warehouses) == ()


class TestVisibleSections:
    def test_owner_sees_all_sections(self):
        assert set(visible_sections(UserRole.OWNER)) == set(ALL_SECTIONS)

    def test_admin_has_no_users_section(self):
        sections = visible_sections(UserRole.WAREHOUSE_ADMIN)
        assert "users" not in sections
        assert "payroll" in sections

    def test_worker_sections(self):
        assert visible_sections(UserRole.WORKER) == ("dashboard", "warehouses", "attendance")

    def test_no_role_no_sections(self):
        assert visible_sections(None) == ()
