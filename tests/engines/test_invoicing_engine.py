"""
FOS Invoicing Engine — Tests
===============================
Invoice uniqueness per order, due dates and paid-vs-total status derivation.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from core.commands.errors import DuplicateInvoice, InvoiceNotFound, OrderNotFound
from core.primitives.invoice import InvoiceStatus, PaymentMethod
from core.state.seed import build_seed_state
from engines.invoicing.commands import RecordPaymentRequest
from engines.invoicing.engine import (
    derive_invoice_status,
    generate_invoice,
    record_payment,
)

TODAY = date(2026, 3, 2)


def _invoiced_state():
    state, invoice = generate_invoice(build_seed_state(), "o2", "inv-1", TODAY, 30)
    return state, invoice


class TestDeriveInvoiceStatus:
    @pytest.mark.parametrize(
        "paid, expected",
        [
            ("0", InvoiceStatus.PENDING),
            ("500", InvoiceStatus.PARTIALLY_PAID),
            ("1000", InvoiceStatus.PAID),
            ("1200", InvoiceStatus.PAID),
        ],
    )
    def test_status_from_paid_vs_total(self, paid, expected):
        status = derive_invoice_status(Decimal(paid), Decimal("1000"), InvoiceStatus.PENDING)
        assert status == expected

    def test_zero_paid_keeps_current_status(self):
        status = derive_invoice_status(Decimal("0"), Decimal("1000"), InvoiceStatus.OVERDUE)
        assert status == InvoiceStatus.OVERDUE


class TestGenerateInvoice:
    def test_copies_order_values(self):
        state, invoice = _invoiced_state()
        assert invoice.order_id == "o2"
        assert invoice.customer_id == "c2"
        assert invoice.total_amount == Decimal("500")
        assert invoice.paid_amount == Decimal("0")
        assert invoice.status == InvoiceStatus.PENDING
        assert state.find_invoice_for_order("o2") == invoice

    def test_due_date_offset(self):
        _, invoice = _invoiced_state()
        assert invoice.created_at == TODAY
        assert invoice.due_date == date(2026, 4, 1)

    def test_configurable_due_days(self):
        _, invoice = generate_invoice(build_seed_state(), "o2", "inv-1", TODAY, 0)
        assert invoice.due_date == TODAY

    def test_one_invoice_per_order(self):
        with pytest.raises(DuplicateInvoice, match="already exists"):
            generate_invoice(build_seed_state(), "o1", "inv-1", TODAY, 30)

    def test_unknown_order(self):
        with pytest.raises(OrderNotFound):
            generate_invoice(build_seed_state(), "o404", "inv-1", TODAY, 30)

    def test_order_need_not_be_completed(self):
        state, _ = _invoiced_state()
        assert state.find_order("o2").status.value == "PROCESSING"


class TestRecordPayment:
    def test_partial_then_full(self):
        state, _ = _invoiced_state()
        state, invoice, payment = record_payment(
            state, "inv-1", Decimal("200"), PaymentMethod.CASH, "p-1", TODAY,
        )
        assert invoice.status == InvoiceStatus.PARTIALLY_PAID
        assert invoice.balance_due == Decimal("300")
        assert payment.paid_on == TODAY

        state, invoice, _ = record_payment(
            state, "inv-1", Decimal("300"), PaymentMethod.BANK_TRANSFER, "p-2", TODAY,
        )
        assert invoice.status == InvoiceStatus.PAID
        assert [p.payment_id for p in state.payments_for("inv-1")] == ["p-1", "p-2"]

    def test_overpayment_is_stored(self):
        state, _ = _invoiced_state()
        _, invoice, _ = record_payment(
            state, "inv-1", Decimal("600"), PaymentMethod.CHECK, "p-1", TODAY,
        )
        assert invoice.status == InvoiceStatus.PAID
        assert invoice.is_overpaid
        assert invoice.balance_due == Decimal("-100")

    def test_unknown_invoice(self):
        with pytest.raises(InvoiceNotFound):
            record_payment(
                build_seed_state(), "inv404", Decimal("1"), PaymentMethod.CASH, "p-1", TODAY,
            )

    def test_request_rejects_non_positive_amount(self):
        with pytest.raises(ValueError, match="amount must be positive"):
            RecordPaymentRequest(
                invoice_id="inv1", amount=Decimal("0"), method=PaymentMethod.CASH,
            )

    def test_request_requires_decimal(self):
        with pytest.raises(ValueError, match="amount must be Decimal"):
            RecordPaymentRequest(invoice_id="inv1", amount=100, method=PaymentMethod.CASH)
