"""
FOS Invoicing Engine — Request Commands
=========================================
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional

from core.commands.base import Command
from core.context.actor_context import ActorContext
from core.primitives.invoice import PaymentMethod

INVOICING_INVOICE_GENERATE_REQUEST = "invoicing.invoice.generate.request"
INVOICING_PAYMENT_RECORD_REQUEST = "invoicing.payment.record.request"

INVOICING_COMMAND_TYPES = frozenset({
    INVOICING_INVOICE_GENERATE_REQUEST,
    INVOICING_PAYMENT_RECORD_REQUEST,
})


@dataclass(frozen=True)
class GenerateInvoiceRequest:
    """Raise the (single) invoice for an order."""
    order_id: str

    def __post_init__(self):
        if not self.order_id or not isinstance(self.order_id, str):
            raise ValueError("order_id must be non-empty.")

    def to_command(
        self,
        *,
        command_id: uuid.UUID,
        actor: Optional[ActorContext],
        issued_at: datetime,
    ) -> Command:
        return Command(
            command_id=command_id,
            command_type=INVOICING_INVOICE_GENERATE_REQUEST,
            actor=actor,
            request=self,
            issued_at=issued_at,
            source_engine="invoicing",
        )


@dataclass(frozen=True)
class RecordPaymentRequest:
    """
    Apply a payment to an invoice.

    amount must be positive. There is no upper bound: paying more than
    the balance is accepted and shows up as a negative balance_due.
    """
    invoice_id: str
    amount: Decimal
    method: PaymentMethod

    def __post_init__(self):
        if not self.invoice_id or not isinstance(self.invoice_id, str):
            raise ValueError("invoice_id must be non-empty.")
        if not isinstance(self.amount, Decimal):
            raise ValueError("amount must be Decimal.")
        if not self.amount.is_finite() or self.amount <= 0:
            raise ValueError("amount must be positive.")
        if not isinstance(self.method, PaymentMethod):
            raise ValueError("method must be PaymentMethod enum.")

    def to_command(
        self,
        *,
        command_id: uuid.UUID,
        actor: Optional[ActorContext],
        issued_at: datetime,
    ) -> Command:
        return Command(
            command_id=command_id,
            command_type=INVOICING_PAYMENT_RECORD_REQUEST,
            actor=actor,
            request=self,
            issued_at=issued_at,
            source_engine="invoicing",
        )
