"""
FOS Context - ActorContext
==========================
Immutable identity of the actor performing an operation.

Built from the logged-in User at the start of every operation. The
permission layer only ever sees this context, never the User itself.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from core.primitives.user import User, UserRole


@dataclass(frozen=True)
class ActorContext:
    """
    Canonical actor identity context.

    Fields:
        actor_id:              User id of the actor
        role:                  UserRole
        assigned_warehouse_id: Scope for warehouse-bound data (None = unassigned)
        display_name:          Used for generated_by stamps and greetings
    """

    actor_id: str
    role: UserRole
    assigned_warehouse_id: Optional[str] = None
    display_name: str = ""

    def __post_init__(self):
        if not self.actor_id or not isinstance(self.actor_id, str):
            raise ValueError("actor_id must be a non-empty string.")

        if not isinstance(self.role, UserRole):
            raise ValueError("role must be UserRole enum.")

    @classmethod
    def from_user(cls, user: User) -> ActorContext:
        return cls(
            actor_id=user.user_id,
            role=user.role,
            assigned_warehouse_id=user.assigned_warehouse_id or None,
            display_name=user.full_name,
        )
