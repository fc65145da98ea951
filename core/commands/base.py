"""
FOS Command Layer — Command Base Contract
============================================
Every state-changing operation in FOS begins as a Command.

A Command is a frozen declaration of intent. It carries identity,
actor, and the typed request, nothing else.

Rules:
- Immutable once created (frozen dataclass)
- No business logic inside
- command_type must end with '.request'
- command_type follows engine.domain.action.request format
- The request is a frozen request dataclass that already validated
  itself in __post_init__

A Command is NOT a mutation. It is intent awaiting judgment.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional

from core.context.actor_context import ActorContext


# ══════════════════════════════════════════════════════════════
# CANONICAL COMMAND
# ══════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class Command:
    """
    Canonical FOS Command.

    Fields:
        command_id:     Unique identifier (UUID).
        command_type:   Namespaced type ending in '.request'
                        (e.g. 'fulfillment.order.fulfill.request').
        actor:          ActorContext of the logged-in user, or None.
        request:        Typed request dataclass.
        issued_at:      When the command was issued (timezone-aware).
                        Engines use it as "now" for every stamp.
        source_engine:  Engine that owns this command.

    Example:
        Command(
            command_id=uuid.uuid4(),
            command_type="fulfillment.order.fulfill.request",
            actor=ActorContext(actor_id="u1", role=UserRole.OWNER),
            request=FulfillOrderRequest(order_id="o2"),
            issued_at=datetime.now(timezone.utc),
            source_engine="fulfillment",
        )
    """

    command_id: uuid.UUID
    command_type: str
    actor: Optional[ActorContext]
    request: Any
    issued_at: datetime
    source_engine: str

    def __post_init__(self):
        # ── command_id must be UUID ───────────────────────────
        if not isinstance(self.command_id, uuid.UUID):
            raise ValueError(
                f"command_id must be UUID, got {type(self.command_id).__name__}"
            )

        # ── command_type must end with .request ───────────────
        if not self.command_type or not isinstance(self.command_type, str):
            raise ValueError("command_type must be a non-empty string.")

        if not self.command_type.endswith(".request"):
            raise ValueError(
                f"command_type '{self.command_type}' must end with "
                f"'.request' (e.g. 'inventory.item.add.request')."
            )

        # ── command_type minimum 4 segments ───────────────────
        parts = self.command_type.split(".")
        if len(parts) < 4:
            raise ValueError(
                f"command_type '{self.command_type}' must follow "
                f"engine.domain.action.request format (minimum 4 segments)."
            )

        # ── source_engine must match first segment ────────────
        if parts[0] != self.source_engine:
            raise ValueError(
                f"command_type namespace '{parts[0]}' does not match "
                f"source_engine '{self.source_engine}'."
            )

        if self.actor is not None and not isinstance(self.actor, ActorContext):
            raise ValueError("actor must be ActorContext or None.")

        if self.request is None:
            raise ValueError("request must not be None.")

        if not isinstance(self.issued_at, datetime) or self.issued_at.tzinfo is None:
            raise ValueError("issued_at must be a timezone-aware datetime.")

    @property
    def actor_id(self) -> Optional[str]:
        return self.actor.actor_id if self.actor is not None else None
