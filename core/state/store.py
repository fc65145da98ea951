"""
FOS State — Application State Store
=====================================
Owns the current AppState snapshot, the active actor and the
notification log. Every mutating operation runs the same path:

    typed request → Command → CommandBus.handle() → commit on ACCEPTED
                                                  → notification

RULES:
- The snapshot is swapped only when the outcome is ACCEPTED
- Every operation appends exactly one notification
- Every operation holds the store lock for its whole duration
- Read helpers return only what the active actor may see

login()/logout() change the session, not the snapshot, so they do not
go through the bus.
"""

from __future__ import annotations

import logging
import threading
from datetime import date
from decimal import Decimal
from typing import Any, Callable, Optional

from core.commands.bus import CommandBus, CommandResult, invalid_request
from core.commands.dispatcher import CommandDispatcher
from core.commands.errors import UserNotFound
from core.commands.outcomes import CommandOutcome
from core.config.rules import OperationsConfig
from core.context.actor_context import ActorContext
from core.identity.ids import IdProvider, UuidIdProvider
from core.notifications.log import (
    NOTIFICATION_TYPE_ERROR,
    NOTIFICATION_TYPE_INFO,
    NotificationLog,
)
from core.permissions.constants import ResourceKind
from core.permissions.evaluator import PermissionEvaluator
from core.permissions.visibility import filter_visible
from core.permissions.visibility import visible_sections as _visible_sections
from core.primitives.attendance import Shift
from core.primitives.invoice import PaymentMethod
from core.primitives.user import User, UserRole
from core.state.seed import build_seed_state
from core.state.snapshot import AppState
from core.time.clock import Clock, SystemClock
from engines.customer.commands import AddCustomerRequest
from engines.customer.services import CustomerService
from engines.fulfillment.commands import FulfillOrderRequest
from engines.fulfillment.services import FulfillmentService
from engines.hr.attendance import AttendanceRow, attendance_rows
from engines.hr.commands import (
    AddUserRequest,
    CheckInRequest,
    CheckOutRequest,
    DeleteUserRequest,
    PayrollEstimateRequest,
    UpdateUserRequest,
)
from engines.hr.payroll import eligible_workers
from engines.hr.services import HRService
from engines.inventory.commands import (
    AddInventoryItemRequest,
    UpdateInventoryItemRequest,
)
from engines.inventory.services import InventoryService
from engines.invoicing.commands import GenerateInvoiceRequest, RecordPaymentRequest
from engines.invoicing.services import InvoicingService
from engines.reporting.dashboard import DashboardMetrics, compute_dashboard
from engines.warehouse.commands import AddWarehouseRequest, UpdateWarehouseRequest
from engines.warehouse.policies import warehouse_must_be_active_policy
from engines.warehouse.services import WarehouseService

logger = logging.getLogger("fos.state")

# ResourceKind → AppState collection attribute
RESOURCE_COLLECTIONS = {
    ResourceKind.USERS: "users",
    ResourceKind.WAREHOUSES: "warehouses",
    ResourceKind.INVENTORY: "inventory",
    ResourceKind.ATTENDANCE: "attendance",
    ResourceKind.CUSTOMERS: "customers",
    ResourceKind.ORDERS: "orders",
    ResourceKind.INVOICES: "invoices",
    ResourceKind.PAYROLL: "payroll_estimates",
}


def build_command_bus(
    *,
    config: OperationsConfig,
    id_provider: IdProvider,
    evaluator: PermissionEvaluator,
) -> CommandBus:
    """Dispatcher, bus and every engine service, wired once."""
    dispatcher = CommandDispatcher(
        authorizer=evaluator if config.enforce_authorization else None,
    )
    if config.enforce_warehouse_status:
        dispatcher.register_policy(warehouse_must_be_active_policy)

    bus = CommandBus(dispatcher=dispatcher)
    WarehouseService(command_bus=bus, id_provider=id_provider)
    InventoryService(command_bus=bus, id_provider=id_provider)
    CustomerService(command_bus=bus, id_provider=id_provider)
    FulfillmentService(command_bus=bus)
    InvoicingService(command_bus=bus, id_provider=id_provider, config=config)
    HRService(command_bus=bus, id_provider=id_provider, config=config)

    logger.debug(
        f"Command bus wired with {len(bus.registered_command_types)} command types"
    )
    return bus


class ApplicationStateStore:
    """
    Single-session operations store.

    Usage:
        store = ApplicationStateStore()
        store.login(UserRole.OWNER)
        result = store.fulfill_order("o2")
        if result.is_rejected:
            print(result.reason.message)
    """

    def __init__(
        self,
        state: AppState | None = None,
        *,
        config: OperationsConfig | None = None,
        clock: Clock | None = None,
        id_provider: IdProvider | None = None,
        evaluator: PermissionEvaluator | None = None,
    ):
        self._state = state if state is not None else build_seed_state()
        self._config = config or OperationsConfig()
        self._clock = clock or SystemClock()
        self._id_provider = id_provider or UuidIdProvider()
        self._evaluator = evaluator or PermissionEvaluator()
        self._lock = threading.RLock()
        self._current_user_id: Optional[str] = None
        self._notifications = NotificationLog(
            clock=self._clock, id_provider=self._id_provider,
        )
        self._bus = build_command_bus(
            config=self._config,
            id_provider=self._id_provider,
            evaluator=self._evaluator,
        )

    # ══════════════════════════════════════════════════════════
    # PROPERTIES
    # ══════════════════════════════════════════════════════════

    @property
    def config(self) -> OperationsConfig:
        return self._config

    @property
    def state(self) -> AppState:
        """The full committed snapshot, unfiltered."""
        return self._state

    @property
    def notifications(self) -> NotificationLog:
        return self._notifications

    @property
    def command_bus(self) -> CommandBus:
        return self._bus

    @property
    def current_user(self) -> Optional[User]:
        with self._lock:
            if self._current_user_id is None:
                return None
            return self._state.find_user(self._current_user_id)

    @property
    def current_actor(self) -> Optional[ActorContext]:
        """Re-derived from the snapshot so a reassignment takes effect at once."""
        user = self.current_user
        return ActorContext.from_user(user) if user is not None else None

    def today(self) -> date:
        return self._clock.now_utc().date()

    # ══════════════════════════════════════════════════════════
    # SESSION
    # ══════════════════════════════════════════════════════════

    def login(self, role: UserRole) -> User:
        """
        Sign in as the first user holding role.

        Raises:
            UserNotFound: no user has that role.
        """
        with self._lock:
            user = next((u for u in self._state.users if u.role == role), None)
            if user is None:
                self._notifications.append(
                    f"No user with role {role.value}", NOTIFICATION_TYPE_ERROR,
                )
                raise UserNotFound(role.value)

            self._current_user_id = user.user_id
            self._notifications.append(
                f"Welcome back, {user.full_name}", NOTIFICATION_TYPE_INFO,
            )
            logger.info(f"Session opened for {user.user_id} ({role.value})")
            return user

    def logout(self) -> None:
        with self._lock:
            logger.info(f"Session closed for {self._current_user_id}")
            self._current_user_id = None
            self._notifications.clear()

    # ══════════════════════════════════════════════════════════
    # COMMAND PATH
    # ══════════════════════════════════════════════════════════

    def submit(self, request: Any) -> CommandResult:
        """Run an already-built request dataclass through the bus."""
        with self._lock:
            command = request.to_command(
                command_id=self._id_provider.new_command_id(),
                actor=self.current_actor,
                issued_at=self._clock.now_utc(),
            )
            result = self._bus.handle(command, self._state)

            if result.is_accepted:
                self._state = result.mutation.state
                self._notifications.append(
                    result.mutation.message,
                    result.mutation.notification_type,
                )
            else:
                self._notifications.append(
                    result.reason.message, NOTIFICATION_TYPE_ERROR,
                )

            result.snapshot = self._state
            return result

    def _run(self, request_factory: Callable[..., Any], **fields) -> CommandResult:
        with self._lock:
            try:
                request = request_factory(**fields)
            except ValueError as exc:
                return self._reject_invalid(str(exc))
            return self.submit(request)

    def _reject_invalid(self, message: str) -> CommandResult:
        reason = invalid_request(message)
        logger.warning(f"Request rejected before dispatch: {reason.message}")
        self._notifications.append(reason.message, NOTIFICATION_TYPE_ERROR)
        outcome = CommandOutcome.rejected(
            self._id_provider.new_command_id(), reason, self._clock.now_utc(),
        )
        return CommandResult(outcome=outcome, snapshot=self._state)

    # ══════════════════════════════════════════════════════════
    # OPERATIONS
    # ══════════════════════════════════════════════════════════

    def add_warehouse(self, **fields) -> CommandResult:
        return self._run(AddWarehouseRequest, **fields)

    def update_warehouse(self, **fields) -> CommandResult:
        return self._run(UpdateWarehouseRequest, **fields)

    def add_inventory_item(self, **fields) -> CommandResult:
        return self._run(AddInventoryItemRequest, **fields)

    def update_inventory_item(self, **fields) -> CommandResult:
        return self._run(UpdateInventoryItemRequest, **fields)

    def check_in(self, user_id: str, warehouse_id: str, shift: Shift) -> CommandResult:
        return self._run(
            CheckInRequest, user_id=user_id, warehouse_id=warehouse_id, shift=shift,
        )

    def check_out(self, record_id: str) -> CommandResult:
        return self._run(CheckOutRequest, record_id=record_id)

    def fulfill_order(self, order_id: str) -> CommandResult:
        return self._run(FulfillOrderRequest, order_id=order_id)

    def add_customer(self, **fields) -> CommandResult:
        return self._run(AddCustomerRequest, **fields)

    def generate_invoice(self, order_id: str) -> CommandResult:
        return self._run(GenerateInvoiceRequest, order_id=order_id)

    def record_payment(
        self,
        invoice_id: str,
        amount: Decimal,
        method: PaymentMethod,
    ) -> CommandResult:
        return self._run(
            RecordPaymentRequest, invoice_id=invoice_id, amount=amount, method=method,
        )

    def create_payroll_estimate(
        self,
        user_id: str,
        start_date: date,
        end_date: date,
        hours_worked: Decimal,
    ) -> CommandResult:
        return self._run(
            PayrollEstimateRequest,
            user_id=user_id,
            start_date=start_date,
            end_date=end_date,
            hours_worked=hours_worked,
        )

    def add_user(self, **fields) -> CommandResult:
        return self._run(AddUserRequest, **fields)

    def update_user(self, **fields) -> CommandResult:
        return self._run(UpdateUserRequest, **fields)

    def delete_user(self, user_id: str) -> CommandResult:
        return self._run(DeleteUserRequest, user_id=user_id)

    # ══════════════════════════════════════════════════════════
    # READ HELPERS (always filtered for the active actor)
    # ══════════════════════════════════════════════════════════

    def visible(self, resource_kind: ResourceKind) -> tuple:
        with self._lock:
            collection = getattr(self._state, RESOURCE_COLLECTIONS[resource_kind])
            return filter_visible(
                self.current_actor,
                resource_kind,
                collection,
                state=self._state,
                evaluator=self._evaluator,
            )

    def snapshot(self) -> AppState:
        """AppState holding only the rows the active actor may read."""
        with self._lock:
            visible = {
                attr: self.visible(kind)
                for kind, attr in RESOURCE_COLLECTIONS.items()
            }
            invoice_ids = {inv.invoice_id for inv in visible["invoices"]}
            visible["payments"] = tuple(
                p for p in self._state.payments if p.invoice_id in invoice_ids
            )
            return AppState(**visible)

    def dashboard(self) -> DashboardMetrics:
        with self._lock:
            return compute_dashboard(
                inventory=self.visible(ResourceKind.INVENTORY),
                attendance=self.visible(ResourceKind.ATTENDANCE),
                invoices=self.visible(ResourceKind.INVOICES),
                today=self.today(),
                low_stock_threshold=self._config.low_stock_threshold,
            )

    def visible_sections(self) -> tuple[str, ...]:
        actor = self.current_actor
        return _visible_sections(
            actor.role if actor else None, evaluator=self._evaluator,
        )

    def eligible_workers(self) -> tuple[User, ...]:
        with self._lock:
            return eligible_workers(self._state, self.current_actor)

    def own_payroll_estimates(self) -> tuple:
        """Estimates computed for the active user, newest first."""
        with self._lock:
            actor = self.current_actor
            if actor is None:
                return ()
            return tuple(
                estimate
                for estimate in self.visible(ResourceKind.PAYROLL)
                if estimate.user_id == actor.actor_id
            )

    def attendance_rows(self) -> tuple[AttendanceRow, ...]:
        with self._lock:
            return attendance_rows(
                self._state, self.visible(ResourceKind.ATTENDANCE),
            )
