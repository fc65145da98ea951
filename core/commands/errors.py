"""
FOS Command Layer — Domain Errors
====================================
Typed failures raised by engines.

Engines raise these; the CommandBus catches every DomainError and turns
it into a REJECTED outcome. A DomainError never escapes to the host.

Hierarchy:
    DomainError
    ├── NotFound               (entity id does not resolve)
    ├── Conflict               (duplicate / already in target state)
    ├── InsufficientResource   (stock shortfall)
    ├── ValidationFailure      (malformed request)
    └── Unauthorized           (actor lacks scope)
"""

from __future__ import annotations

from typing import Iterable, Tuple

from core.commands.rejection import ErrorKind, ReasonCode, RejectionReason


class DomainError(Exception):
    """Base error for all business-rule failures."""

    kind: ErrorKind = ErrorKind.VALIDATION_FAILURE
    code: str = ReasonCode.INVALID_REQUEST

    def __init__(self, message: str, *, details: Iterable[str] = ()):
        self.message = message
        self.details: Tuple[str, ...] = tuple(details)
        super().__init__(message)

    def to_rejection(self, policy_name: str) -> RejectionReason:
        return RejectionReason(
            code=self.code,
            message=self.message,
            policy_name=policy_name,
            kind=self.kind,
            details=self.details,
        )


# ══════════════════════════════════════════════════════════════
# CATEGORIES
# ══════════════════════════════════════════════════════════════

class NotFound(DomainError):
    kind = ErrorKind.NOT_FOUND


class Conflict(DomainError):
    kind = ErrorKind.CONFLICT


class InsufficientResource(DomainError):
    kind = ErrorKind.INSUFFICIENT_RESOURCE


class ValidationFailure(DomainError):
    kind = ErrorKind.VALIDATION_FAILURE
    code = ReasonCode.INVALID_REQUEST


class Unauthorized(DomainError):
    kind = ErrorKind.UNAUTHORIZED
    code = ReasonCode.PERMISSION_DENIED


# ══════════════════════════════════════════════════════════════
# NOT FOUND
# ══════════════════════════════════════════════════════════════

class OrderNotFound(NotFound):
    code = ReasonCode.ORDER_NOT_FOUND

    def __init__(self, order_id: str):
        self.order_id = order_id
        super().__init__(f"Order '{order_id}' not found.")


class ItemNotFound(NotFound):
    code = ReasonCode.ITEM_NOT_FOUND

    def __init__(self, item_id: str, warehouse_id: str | None = None):
        self.item_id = item_id
        self.warehouse_id = warehouse_id
        where = f" in warehouse '{warehouse_id}'" if warehouse_id else ""
        super().__init__(f"Item ID {item_id} not found{where}.")


class InvoiceNotFound(NotFound):
    code = ReasonCode.INVOICE_NOT_FOUND

    def __init__(self, invoice_id: str):
        self.invoice_id = invoice_id
        super().__init__(f"Invoice '{invoice_id}' not found.")


class UserNotFound(NotFound):
    code = ReasonCode.USER_NOT_FOUND

    def __init__(self, user_ref: str):
        self.user_ref = user_ref
        super().__init__(f"User '{user_ref}' not found.")


class WarehouseNotFound(NotFound):
    code = ReasonCode.WAREHOUSE_NOT_FOUND

    def __init__(self, warehouse_id: str):
        self.warehouse_id = warehouse_id
        super().__init__(f"Warehouse '{warehouse_id}' not found.")


# ══════════════════════════════════════════════════════════════
# CONFLICT
# ══════════════════════════════════════════════════════════════

class AlreadyCompleted(Conflict):
    code = ReasonCode.ALREADY_COMPLETED

    def __init__(self, order_id: str):
        self.order_id = order_id
        super().__init__("Order is already completed")


class OrderCancelled(Conflict):
    code = ReasonCode.ORDER_CANCELLED

    def __init__(self, order_id: str):
        self.order_id = order_id
        super().__init__(f"Order #{order_id} is cancelled and cannot be fulfilled")


class DuplicateInvoice(Conflict):
    code = ReasonCode.DUPLICATE_INVOICE

    def __init__(self, order_id: str):
        self.order_id = order_id
        super().__init__("Invoice already exists for this order")


class DuplicateItem(Conflict):
    code = ReasonCode.DUPLICATE_ITEM

    def __init__(self, item_id: str, warehouse_id: str):
        self.item_id = item_id
        super().__init__(
            f"Item '{item_id}' already exists in warehouse '{warehouse_id}'."
        )


class DuplicateCustomer(Conflict):
    code = ReasonCode.DUPLICATE_CUSTOMER

    def __init__(self, customer_id: str):
        self.customer_id = customer_id
        super().__init__(f"Customer '{customer_id}' already exists.")


class DuplicateWarehouse(Conflict):
    code = ReasonCode.DUPLICATE_WAREHOUSE

    def __init__(self, warehouse_id: str):
        self.warehouse_id = warehouse_id
        super().__init__(f"Warehouse '{warehouse_id}' already exists.")


class DuplicateUser(Conflict):
    code = ReasonCode.DUPLICATE_USER

    def __init__(self, user_id: str):
        self.user_id = user_id
        super().__init__(f"User '{user_id}' already exists.")


class OwnerProtected(Conflict):
    code = ReasonCode.OWNER_PROTECTED

    def __init__(self, message: str = "The owner account cannot be deleted or demoted."):
        super().__init__(message)


class OpenAttendanceExists(Conflict):
    code = ReasonCode.OPEN_ATTENDANCE_EXISTS

    def __init__(self, user_id: str, record_id: str):
        self.user_id = user_id
        self.record_id = record_id
        super().__init__(
            f"User '{user_id}' is already checked in today (record {record_id})."
        )


class AttendanceAlreadyClosed(Conflict):
    code = ReasonCode.ATTENDANCE_ALREADY_CLOSED

    def __init__(self, record_id: str):
        self.record_id = record_id
        super().__init__(f"Attendance record '{record_id}' is already checked out.")


class WarehouseDisabled(Conflict):
    code = ReasonCode.WAREHOUSE_DISABLED

    def __init__(self, warehouse_id: str):
        self.warehouse_id = warehouse_id
        super().__init__(f"Warehouse '{warehouse_id}' is disabled.")


# ══════════════════════════════════════════════════════════════
# INSUFFICIENT RESOURCE
# ══════════════════════════════════════════════════════════════

class InsufficientStock(InsufficientResource):
    code = ReasonCode.INSUFFICIENT_STOCK

    def __init__(self, item_id: str, item_name: str, available: int, requested: int):
        self.item_id = item_id
        self.item_name = item_name
        self.available = available
        self.requested = requested
        super().__init__(
            f"{item_name} (Insufficient Stock: {available} available, "
            f"{requested} requested)"
        )


class FulfillmentBlocked(InsufficientResource):
    """Every line-level failure collected during the fulfillment pre-check."""

    code = ReasonCode.FULFILLMENT_BLOCKED

    def __init__(self, order_id: str, reasons: Iterable[str]):
        self.order_id = order_id
        self.reasons: Tuple[str, ...] = tuple(reasons)
        super().__init__(
            f"Cannot fulfill: {', '.join(self.reasons)}",
            details=self.reasons,
        )


# ══════════════════════════════════════════════════════════════
# UNAUTHORIZED
# ══════════════════════════════════════════════════════════════

class NoActiveActor(Unauthorized):
    code = ReasonCode.NO_ACTIVE_ACTOR

    def __init__(self):
        super().__init__("No user is logged in.")


class PermissionDenied(Unauthorized):
    code = ReasonCode.PERMISSION_DENIED

    def __init__(self, message: str, *, code: str = ReasonCode.PERMISSION_DENIED):
        self.code = code
        super().__init__(message)
