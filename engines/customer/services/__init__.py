"""
FOS Customer Engine — Service
=============================
"""

from __future__ import annotations

from core.commands.base import Command
from core.commands.errors import DuplicateCustomer
from core.commands.outcomes import Mutation
from core.identity.ids import IdProvider
from core.permissions.models import AccessScope
from core.primitives.party import Customer
from core.state.snapshot import AppState
from engines.customer.commands import (
    CUSTOMER_COMMAND_TYPES,
    CUSTOMER_PROFILE_ADD_REQUEST,
    AddCustomerRequest,
)


def add_customer(
    state: AppState,
    request: AddCustomerRequest,
    customer_id: str,
) -> tuple[AppState, Customer]:
    if state.find_customer(customer_id) is not None:
        raise DuplicateCustomer(customer_id)

    customer = Customer(
        customer_id=customer_id,
        name=request.name,
        customer_type=request.customer_type,
        contact_person=request.contact_person,
        email=request.email,
        phone=request.phone,
    )
    return state.with_changes(customers=state.customers + (customer,)), customer


class _CustomerCommandHandler:
    def __init__(self, service: "CustomerService"):
        self._service = service

    def resolve_scope(self, command: Command, state: AppState) -> AccessScope:
        return AccessScope()

    def execute(self, command: Command, state: AppState) -> Mutation:
        return self._service._execute_command(command, state)


class CustomerService:
    def __init__(self, *, command_bus, id_provider: IdProvider):
        self._command_bus = command_bus
        self._id_provider = id_provider
        handler = _CustomerCommandHandler(self)
        for command_type in sorted(CUSTOMER_COMMAND_TYPES):
            self._command_bus.register_handler(command_type, handler)

    def _execute_command(self, command: Command, state: AppState) -> Mutation:
        if command.command_type != CUSTOMER_PROFILE_ADD_REQUEST:
            raise ValueError(
                f"Unsupported customer command type: {command.command_type}"
            )

        request = command.request
        customer_id = request.customer_id or self._id_provider.new_id("c")
        new_state, customer = add_customer(state, request, customer_id)
        return Mutation(
            state=new_state,
            value=customer,
            message=f'Customer "{customer.name}" added',
        )
