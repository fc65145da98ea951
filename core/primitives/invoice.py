"""
FOS Invoice Primitive — Receivable and Payment History
========================================================
Engine: Core Primitives
Used by: Invoicing & Payments, Reporting

An Invoice is derived from exactly one Order. Payments accumulate into
paid_amount; the status is a pure function of paid vs total.

RULES (NON-NEGOTIABLE):
- At most one invoice per order_id (enforced by the invoicing engine)
- paid_amount >= 0
- Overpayment (paid > total) is stored as-is; balance_due goes negative
- OVERDUE is never derived automatically

This file contains NO persistence logic.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum


# ══════════════════════════════════════════════════════════════
# ENUMS
# ══════════════════════════════════════════════════════════════

class InvoiceStatus(Enum):
    PENDING = "PENDING"
    PARTIALLY_PAID = "PARTIALLY_PAID"
    PAID = "PAID"
    OVERDUE = "OVERDUE"


class PaymentMethod(Enum):
    CASH = "CASH"
    BANK_TRANSFER = "BANK_TRANSFER"
    CHECK = "CHECK"


# ══════════════════════════════════════════════════════════════
# INVOICE
# ══════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class Invoice:
    """
    Receivable raised against a completed order.

    Fields:
        invoice_id:   Identifier
        order_id:     Source order (unique across invoices)
        customer_id:  Billed customer (copied from the order)
        total_amount: Copied from order.total_amount
        paid_amount:  Sum of recorded payments
        status:       InvoiceStatus
        created_at:   Issue date
        due_date:     created_at + configured due days
    """
    invoice_id: str
    order_id: str
    customer_id: str
    total_amount: Decimal
    paid_amount: Decimal
    status: InvoiceStatus
    created_at: date
    due_date: date

    def __post_init__(self):
        if not self.invoice_id:
            raise ValueError("invoice_id must be non-empty.")
        if not self.order_id:
            raise ValueError("order_id must be non-empty.")
        if not isinstance(self.total_amount, Decimal):
            raise ValueError("total_amount must be Decimal.")
        if not isinstance(self.paid_amount, Decimal):
            raise ValueError("paid_amount must be Decimal.")
        if self.paid_amount < 0:
            raise ValueError("paid_amount must be >= 0.")
        if not isinstance(self.status, InvoiceStatus):
            raise ValueError("status must be InvoiceStatus enum.")

    @property
    def balance_due(self) -> Decimal:
        """Outstanding amount. Negative when the invoice is overpaid."""
        return self.total_amount - self.paid_amount

    @property
    def is_overpaid(self) -> bool:
        return self.paid_amount > self.total_amount

    def to_dict(self) -> dict:
        return {
            "invoice_id": self.invoice_id,
            "order_id": self.order_id,
            "customer_id": self.customer_id,
            "total_amount": str(self.total_amount),
            "paid_amount": str(self.paid_amount),
            "balance_due": str(self.balance_due),
            "is_overpaid": self.is_overpaid,
            "status": self.status.value,
            "created_at": self.created_at.isoformat(),
            "due_date": self.due_date.isoformat(),
        }


# ══════════════════════════════════════════════════════════════
# PAYMENT
# ══════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class Payment:
    """One recorded payment against an invoice (append-only)."""
    payment_id: str
    invoice_id: str
    amount: Decimal
    method: PaymentMethod
    paid_on: date

    def __post_init__(self):
        if not self.payment_id:
            raise ValueError("payment_id must be non-empty.")
        if not self.invoice_id:
            raise ValueError("invoice_id must be non-empty.")
        if not isinstance(self.amount, Decimal):
            raise ValueError("amount must be Decimal.")
        if not isinstance(self.method, PaymentMethod):
            raise ValueError("method must be PaymentMethod enum.")

    def to_dict(self) -> dict:
        return {
            "payment_id": self.payment_id,
            "invoice_id": self.invoice_id,
            "amount": str(self.amount),
            "method": self.method.value,
            "paid_on": self.paid_on.isoformat(),
        }
