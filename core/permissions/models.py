"""
FOS Permissions - Immutable Grant/Scope Models
==============================================
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from core.permissions.constants import (
    GRANT_SCOPE_ALL,
    VALID_GRANT_SCOPES,
    Action,
    ResourceKind,
)
from core.primitives.user import UserRole


@dataclass(frozen=True)
class Grant:
    """One (resource kind, actions, scope) capability held by a role."""

    resource_kind: ResourceKind
    actions: tuple[Action, ...]
    scope: str = GRANT_SCOPE_ALL

    def __post_init__(self):
        if not isinstance(self.resource_kind, ResourceKind):
            raise ValueError("resource_kind must be ResourceKind enum.")

        if not isinstance(self.actions, tuple) or not self.actions:
            raise ValueError("actions must be a non-empty tuple.")

        for action in self.actions:
            if not isinstance(action, Action):
                raise ValueError("actions must contain Action enums.")

        if self.scope not in VALID_GRANT_SCOPES:
            raise ValueError(
                f"scope '{self.scope}' not valid. "
                f"Must be one of: {sorted(VALID_GRANT_SCOPES)}"
            )

    def covers(self, resource_kind: ResourceKind, action: Action) -> bool:
        return self.resource_kind == resource_kind and action in self.actions


@dataclass(frozen=True)
class AccessScope:
    """
    What a row or command target is attached to.

    resolved=False marks a target that does not exist (unknown id): only
    the role-level capability is checked, and the engine reports the
    missing entity itself.
    """

    warehouse_id: Optional[str] = None
    user_id: Optional[str] = None
    target_role: Optional[UserRole] = None
    resolved: bool = True

    @classmethod
    def unresolved(cls) -> AccessScope:
        return cls(resolved=False)
