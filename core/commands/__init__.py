"""
FOS Command Layer — Operation Governance
===========================================
Every state-changing operation begins as a Command.
Every Command produces exactly one Outcome.
REJECTED commands change nothing and always carry a reason.
"""

from core.commands.base import Command
from core.commands.outcomes import (
    NOTIFICATION_INFO,
    NOTIFICATION_SUCCESS,
    CommandOutcome,
    CommandStatus,
    Mutation,
)
from core.commands.rejection import (
    ErrorKind,
    ReasonCode,
    RejectionReason,
)
from core.commands.errors import (
    AlreadyCompleted,
    AttendanceAlreadyClosed,
    Conflict,
    DomainError,
    DuplicateCustomer,
    DuplicateInvoice,
    DuplicateItem,
    DuplicateUser,
    DuplicateWarehouse,
    FulfillmentBlocked,
    InsufficientResource,
    InsufficientStock,
    InvoiceNotFound,
    ItemNotFound,
    NoActiveActor,
    NotFound,
    OpenAttendanceExists,
    OrderCancelled,
    OrderNotFound,
    OwnerProtected,
    PermissionDenied,
    Unauthorized,
    UserNotFound,
    ValidationFailure,
    WarehouseDisabled,
    WarehouseNotFound,
)
from core.commands.dispatcher import (
    AuthorizerProtocol,
    CommandDispatcher,
    PolicyEvaluator,
)
from core.commands.bus import (
    CommandBus,
    CommandBusError,
    CommandResult,
    EngineHandlerProtocol,
    NoHandlerRegistered,
)

__all__ = [
    # ── Base ──────────────────────────────────────────────────
    "Command",
    # ── Outcomes ──────────────────────────────────────────────
    "CommandOutcome",
    "CommandStatus",
    "Mutation",
    "NOTIFICATION_INFO",
    "NOTIFICATION_SUCCESS",
    # ── Rejection ─────────────────────────────────────────────
    "ErrorKind",
    "RejectionReason",
    "ReasonCode",
    # ── Errors ────────────────────────────────────────────────
    "DomainError",
    "NotFound",
    "Conflict",
    "InsufficientResource",
    "ValidationFailure",
    "Unauthorized",
    "OrderNotFound",
    "ItemNotFound",
    "InvoiceNotFound",
    "UserNotFound",
    "WarehouseNotFound",
    "AlreadyCompleted",
    "OrderCancelled",
    "DuplicateInvoice",
    "DuplicateItem",
    "DuplicateCustomer",
    "DuplicateWarehouse",
    "DuplicateUser",
    "OwnerProtected",
    "OpenAttendanceExists",
    "AttendanceAlreadyClosed",
    "WarehouseDisabled",
    "InsufficientStock",
    "FulfillmentBlocked",
    "NoActiveActor",
    "PermissionDenied",
    # ── Dispatcher ────────────────────────────────────────────
    "AuthorizerProtocol",
    "CommandDispatcher",
    "PolicyEvaluator",
    # ── Bus ────────────────────────────────────────────────────
    "CommandBus",
    "CommandBusError",
    "CommandResult",
    "EngineHandlerProtocol",
    "NoHandlerRegistered",
]
