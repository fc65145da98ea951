"""
FOS Fulfillment Engine — Request Commands
===========================================
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from core.commands.base import Command
from core.context.actor_context import ActorContext

FULFILLMENT_ORDER_FULFILL_REQUEST = "fulfillment.order.fulfill.request"

FULFILLMENT_COMMAND_TYPES = frozenset({
    FULFILLMENT_ORDER_FULFILL_REQUEST,
})


@dataclass(frozen=True)
class FulfillOrderRequest:
    """Ship an order: deduct every line from stock and complete it."""
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
            command_type=FULFILLMENT_ORDER_FULFILL_REQUEST,
            actor=actor,
            request=self,
            issued_at=issued_at,
            source_engine="fulfillment",
        )
