"""
FOS Customer Engine — Commands
==============================
Customer registry requests. Customers are added; no update or delete.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from core.commands.base import Command
from core.context.actor_context import ActorContext
from core.primitives.party import CustomerType

CUSTOMER_PROFILE_ADD_REQUEST = "customer.profile.add.request"

CUSTOMER_COMMAND_TYPES = frozenset({
    CUSTOMER_PROFILE_ADD_REQUEST,
})


@dataclass(frozen=True)
class AddCustomerRequest:
    """Register a customer. customer_id is generated when omitted."""
    name: str
    customer_type: CustomerType
    contact_person: str = ""
    email: str = ""
    phone: str = ""
    customer_id: Optional[str] = None

    def __post_init__(self):
        if not self.name or not self.name.strip():
            raise ValueError("name must be non-empty.")
        if not isinstance(self.customer_type, CustomerType):
            raise ValueError("customer_type must be CustomerType enum.")
        if self.customer_id is not None and not self.customer_id:
            raise ValueError("customer_id must be non-empty when given.")

    def to_command(
        self,
        *,
        command_id: uuid.UUID,
        actor: Optional[ActorContext],
        issued_at: datetime,
    ) -> Command:
        return Command(
            command_id=command_id,
            command_type=CUSTOMER_PROFILE_ADD_REQUEST,
            actor=actor,
            request=self,
            issued_at=issued_at,
            source_engine="customer",
        )
