"""
FOS Command Layer — Rejection Model
======================================
Structured rejection reasons for denied commands.

Every rejection must be:
- Deterministic (same input → same rejection)
- Machine-readable (code + kind)
- Human-readable (message, mirrored into the notification log)
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


# ══════════════════════════════════════════════════════════════
# ERROR KIND (taxonomy)
# ══════════════════════════════════════════════════════════════

class ErrorKind(Enum):
    """Failure category. Hosts map these onto transport status codes."""
    NOT_FOUND = "NOT_FOUND"
    CONFLICT = "CONFLICT"
    INSUFFICIENT_RESOURCE = "INSUFFICIENT_RESOURCE"
    VALIDATION_FAILURE = "VALIDATION_FAILURE"
    UNAUTHORIZED = "UNAUTHORIZED"


# ══════════════════════════════════════════════════════════════
# REJECTION REASON (frozen explanation structure)
# ══════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class RejectionReason:
    """
    Structured reason for command rejection.

    Fields:
        code:        Machine-readable rejection code (e.g. 'DUPLICATE_INVOICE').
        message:     Human-readable explanation.
        policy_name: Policy or engine that produced the rejection.
        kind:        ErrorKind category.
        details:     Individual causes when several were collected
                     (e.g. every blocked order line).
    """

    code: str
    message: str
    policy_name: str
    kind: ErrorKind = ErrorKind.VALIDATION_FAILURE
    details: Tuple[str, ...] = ()

    def __post_init__(self):
        if not self.code or not isinstance(self.code, str):
            raise ValueError("code must be a non-empty string.")

        if not self.message or not isinstance(self.message, str):
            raise ValueError("message must be a non-empty string.")

        if not self.policy_name or not isinstance(self.policy_name, str):
            raise ValueError("policy_name must be a non-empty string.")

        if not isinstance(self.kind, ErrorKind):
            raise ValueError("kind must be ErrorKind enum.")

        if not isinstance(self.details, tuple):
            raise ValueError("details must be a tuple.")

    def to_dict(self) -> dict:
        return {
            "code": self.code,
            "message": self.message,
            "policy_name": self.policy_name,
            "kind": self.kind.value,
            "details": list(self.details),
        }


# ══════════════════════════════════════════════════════════════
# STANDARD REJECTION CODES
# ══════════════════════════════════════════════════════════════

class ReasonCode:
    """
    Known rejection codes.

    Convention: SCREAMING_SNAKE_CASE.
    """

    # ── Not found ─────────────────────────────────────────────
    ORDER_NOT_FOUND = "ORDER_NOT_FOUND"
    ITEM_NOT_FOUND = "ITEM_NOT_FOUND"
    INVOICE_NOT_FOUND = "INVOICE_NOT_FOUND"
    USER_NOT_FOUND = "USER_NOT_FOUND"
    WAREHOUSE_NOT_FOUND = "WAREHOUSE_NOT_FOUND"

    # ── Conflict ──────────────────────────────────────────────
    ALREADY_COMPLETED = "ALREADY_COMPLETED"
    ORDER_CANCELLED = "ORDER_CANCELLED"
    DUPLICATE_INVOICE = "DUPLICATE_INVOICE"
    DUPLICATE_ITEM = "DUPLICATE_ITEM"
    DUPLICATE_CUSTOMER = "DUPLICATE_CUSTOMER"
    DUPLICATE_WAREHOUSE = "DUPLICATE_WAREHOUSE"
    DUPLICATE_USER = "DUPLICATE_USER"
    OWNER_PROTECTED = "OWNER_PROTECTED"
    OPEN_ATTENDANCE_EXISTS = "OPEN_ATTENDANCE_EXISTS"
    ATTENDANCE_ALREADY_CLOSED = "ATTENDANCE_ALREADY_CLOSED"
    WAREHOUSE_DISABLED = "WAREHOUSE_DISABLED"

    # ── Insufficient resource ─────────────────────────────────
    INSUFFICIENT_STOCK = "INSUFFICIENT_STOCK"
    FULFILLMENT_BLOCKED = "FULFILLMENT_BLOCKED"

    # ── Validation ────────────────────────────────────────────
    INVALID_REQUEST = "INVALID_REQUEST"

    # ── Authorization ─────────────────────────────────────────
    NO_ACTIVE_ACTOR = "NO_ACTIVE_ACTOR"
    PERMISSION_DENIED = "PERMISSION_DENIED"
    PERMISSION_MAPPING_MISSING = "PERMISSION_MAPPING_MISSING"
