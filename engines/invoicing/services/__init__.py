"""
FOS Invoicing Engine — Application Service
=============================================
"""

from __future__ import annotations

from core.commands.base import Command
from core.commands.outcomes import Mutation
from core.config.rules import OperationsConfig
from core.identity.ids import IdProvider
from core.permissions.models import AccessScope
from core.state.snapshot import AppState
from engines.invoicing.commands import (
    INVOICING_COMMAND_TYPES,
    INVOICING_INVOICE_GENERATE_REQUEST,
    INVOICING_PAYMENT_RECORD_REQUEST,
)
from engines.invoicing.engine import (
    PAYMENT_METHOD_LABELS,
    generate_invoice,
    record_payment,
)


class _InvoicingCommandHandler:
    def __init__(self, service: "InvoicingService"):
        self._service = service

    def resolve_scope(self, command: Command, state: AppState) -> AccessScope:
        # An invoice belongs to its order's warehouse.
        if command.command_type == INVOICING_INVOICE_GENERATE_REQUEST:
            order_id = command.request.order_id
        else:
            invoice = state.find_invoice(command.request.invoice_id)
            if invoice is None:
                return AccessScope.unresolved()
            order_id = invoice.order_id

        order = state.find_order(order_id)
        if order is None:
            return AccessScope.unresolved()
        return AccessScope(warehouse_id=order.warehouse_id)

    def execute(self, command: Command, state: AppState) -> Mutation:
        return self._service._execute_command(command, state)


class InvoicingService:
    """
    Invoicing Engine application service.

    Handles:
        invoicing.invoice.generate.request → engine.generate_invoice
        invoicing.payment.record.request   → engine.record_payment
    """

    def __init__(
        self,
        *,
        command_bus,
        id_provider: IdProvider,
        config: OperationsConfig | None = None,
    ):
        self._command_bus = command_bus
        self._id_provider = id_provider
        self._config = config or OperationsConfig()
        handler = _InvoicingCommandHandler(self)
        for command_type in sorted(INVOICING_COMMAND_TYPES):
            self._command_bus.register_handler(command_type, handler)

    def _execute_command(self, command: Command, state: AppState) -> Mutation:
        request = command.request
        today = command.issued_at.date()

        if command.command_type == INVOICING_INVOICE_GENERATE_REQUEST:
            new_state, invoice = generate_invoice(
                state,
                request.order_id,
                self._id_provider.new_id("inv"),
                today,
                self._config.invoice_due_days,
            )
            return Mutation(
                state=new_state,
                value=invoice,
                message=f"Invoice generated for Order #{invoice.order_id}",
            )

        if command.command_type == INVOICING_PAYMENT_RECORD_REQUEST:
            new_state, invoice, payment = record_payment(
                state,
                request.invoice_id,
                request.amount,
                request.method,
                self._id_provider.new_id("pay"),
                today,
            )
            return Mutation(
                state=new_state,
                value=invoice,
                message=(
                    f"Payment of {payment.amount:,} {self._config.currency_label} "
                    f"recorded via {PAYMENT_METHOD_LABELS[payment.method]}"
                ),
            )

        raise ValueError(
            f"Unsupported invoicing command type: {command.command_type}"
        )
