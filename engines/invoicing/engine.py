"""
FOS Invoicing Engine — Invoices & Payments
=============================================
Invoice generation (at most one per order), payment application and
status derivation.

Status is a pure function of paid vs total:
    paid >= total      → PAID
    0 < paid < total   → PARTIALLY_PAID
    paid == 0          → unchanged
OVERDUE is never derived here; no time-based transition exists.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date
from decimal import Decimal

from core.commands.errors import DuplicateInvoice, InvoiceNotFound, OrderNotFound
from core.primitives.invoice import Invoice, InvoiceStatus, Payment, PaymentMethod
from core.state.snapshot import AppState, replace_entry
from core.time.clock import add_calendar_days

logger = logging.getLogger("fos.invoicing")

PAYMENT_METHOD_LABELS = {
    PaymentMethod.CASH: "Cash",
    PaymentMethod.BANK_TRANSFER: "Bank Transfer",
    PaymentMethod.CHECK: "Check",
}


def derive_invoice_status(
    paid: Decimal,
    total: Decimal,
    current: InvoiceStatus,
) -> InvoiceStatus:
    if paid >= total:
        return InvoiceStatus.PAID
    if paid > 0:
        return InvoiceStatus.PARTIALLY_PAID
    return current


def generate_invoice(
    state: AppState,
    order_id: str,
    invoice_id: str,
    today: date,
    due_days: int,
) -> tuple[AppState, Invoice]:
    order = state.find_order(order_id)
    if order is None:
        raise OrderNotFound(order_id)

    if state.find_invoice_for_order(order_id) is not None:
        raise DuplicateInvoice(order_id)

    invoice = Invoice(
        invoice_id=invoice_id,
        order_id=order.order_id,
        customer_id=order.customer_id,
        total_amount=order.total_amount,
        paid_amount=Decimal("0"),
        status=InvoiceStatus.PENDING,
        created_at=today,
        due_date=add_calendar_days(today, due_days),
    )
    logger.info(f"Invoice {invoice_id} raised for order {order_id}")
    return state.with_changes(invoices=state.invoices + (invoice,)), invoice


def record_payment(
    state: AppState,
    invoice_id: str,
    amount: Decimal,
    method: PaymentMethod,
    payment_id: str,
    today: date,
) -> tuple[AppState, Invoice, Payment]:
    invoice = state.find_invoice(invoice_id)
    if invoice is None:
        raise InvoiceNotFound(invoice_id)

    new_paid = invoice.paid_amount + amount
    updated = replace(
        invoice,
        paid_amount=new_paid,
        status=derive_invoice_status(new_paid, invoice.total_amount, invoice.status),
    )
    payment = Payment(
        payment_id=payment_id,
        invoice_id=invoice_id,
        amount=amount,
        method=method,
        paid_on=today,
    )

    if updated.is_overpaid:
        logger.warning(
            f"Invoice {invoice_id} overpaid by {-updated.balance_due}"
        )

    invoices = replace_entry(
        state.invoices, lambda i: i.invoice_id == invoice_id, updated,
    )
    new_state = state.with_changes(
        invoices=invoices,
        payments=state.payments + (payment,),
    )
    return new_state, updated, payment
