"""
FOS Permissions - Deterministic Permission Evaluator
====================================================
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from core.commands.base import Command
from core.commands.rejection import ReasonCode
from core.context.actor_context import ActorContext
from core.permissions.constants import (
    GRANT_SCOPE_ALL,
    GRANT_SCOPE_SELF,
    GRANT_SCOPE_WAREHOUSE,
    GRANT_SCOPE_WAREHOUSE_WORKERS,
    Action,
    ResourceKind,
)
from core.permissions.models import AccessScope, Grant
from core.permissions.provider import PermissionProvider, StaticPermissionProvider
from core.permissions.registry import resolve_required_permission
from core.primitives.user import UserRole

logger = logging.getLogger("fos.permissions")


@dataclass(frozen=True)
class PermissionEvaluationResult:
    allowed: bool
    rejection_code: Optional[str] = None
    message: str = ""


def grant_matches_scope(
    grant: Grant,
    actor: ActorContext,
    scope: AccessScope,
) -> bool:
    """True if the grant's scope rule admits the target scope."""
    if grant.scope == GRANT_SCOPE_ALL or not scope.resolved:
        return True

    if grant.scope == GRANT_SCOPE_SELF:
        return scope.user_id is not None and scope.user_id == actor.actor_id

    # Warehouse-bound rules: an unassigned actor sees nothing.
    if actor.assigned_warehouse_id is None:
        return False

    if scope.warehouse_id != actor.assigned_warehouse_id:
        return False

    if grant.scope == GRANT_SCOPE_WAREHOUSE_WORKERS:
        return scope.target_role == UserRole.WORKER

    return grant.scope == GRANT_SCOPE_WAREHOUSE


class PermissionEvaluator:
    def __init__(self, provider: PermissionProvider | None = None):
        self._provider = provider or StaticPermissionProvider()

    @property
    def provider(self) -> PermissionProvider:
        return self._provider

    @staticmethod
    def _allow() -> PermissionEvaluationResult:
        return PermissionEvaluationResult(allowed=True)

    @staticmethod
    def _deny(code: str, message: str) -> PermissionEvaluationResult:
        return PermissionEvaluationResult(
            allowed=False,
            rejection_code=code,
            message=message,
        )

    def check(
        self,
        actor: ActorContext,
        resource_kind: ResourceKind,
        action: Action,
        scope: AccessScope | None = None,
    ) -> PermissionEvaluationResult:
        """
        Evaluate one (resource kind, action) against the actor's grants.

        scope=None checks the role-level capability only.
        """
        grants = [
            grant
            for grant in self._provider.get_grants(actor.role)
            if grant.covers(resource_kind, action)
        ]
        if not grants:
            return self._deny(
                ReasonCode.PERMISSION_DENIED,
                (
                    f"Role '{actor.role.value}' cannot "
                    f"{action.value.lower()} {resource_kind.value.lower()}."
                ),
            )

        if scope is None:
            return self._allow()

        for grant in grants:
            if grant_matches_scope(grant, actor, scope):
                return self._allow()

        return self._deny(
            ReasonCode.PERMISSION_DENIED,
            (
                f"Actor '{actor.actor_id}' cannot "
                f"{action.value.lower()} {resource_kind.value.lower()} "
                f"outside its own scope."
            ),
        )

    def evaluate(
        self,
        command: Command,
        scope: AccessScope,
    ) -> PermissionEvaluationResult:
        """
        Evaluate command authorization for the command's actor and the
        target scope resolved by the engine handler.
        """
        if command.actor is None:
            return self._deny(
                ReasonCode.NO_ACTIVE_ACTOR,
                "No user is logged in.",
            )

        required = resolve_required_permission(command.command_type)
        if required is None:
            return self._deny(
                ReasonCode.PERMISSION_MAPPING_MISSING,
                (
                    "No permission mapping for command_type "
                    f"'{command.command_type}'."
                ),
            )

        resource_kind, action = required
        result = self.check(command.actor, resource_kind, action, scope)
        if not result.allowed:
            logger.debug(
                f"Permission denied for {command.actor.actor_id} on "
                f"{command.command_type}: {result.message}"
            )
        return result
