"""
FOS Command Layer — Command Dispatcher
=========================================
Accept Command → Authorize → Evaluate Policies → Produce Outcome.

The Dispatcher is the DECISION MAKER. It decides ACCEPTED or REJECTED
before any engine code runs.

The Dispatcher DOES NOT:
- Touch the state snapshot
- Append notifications
- Execute business logic

Policy evaluation is pluggable. Policies are registered as callables
that return Optional[RejectionReason]. If any policy rejects, the
command is REJECTED with the first rejection reason.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, List, Optional, Protocol

from core.commands.base import Command
from core.commands.outcomes import CommandOutcome
from core.commands.errors import NoActiveActor, PermissionDenied, Unauthorized
from core.commands.rejection import ReasonCode, RejectionReason

logger = logging.getLogger("fos.commands")


# ══════════════════════════════════════════════════════════════
# POLICY TYPE
# ══════════════════════════════════════════════════════════════

# A policy is a callable:
#   (Command, AppState) → Optional[RejectionReason]
#   Returns None if policy passes, RejectionReason if it rejects.
PolicyEvaluator = Callable[[Command, Any], Optional[RejectionReason]]


class AuthorizerProtocol(Protocol):
    """Matches PermissionEvaluator.evaluate()."""

    def evaluate(self, command: Command, scope: Any) -> Any:
        ...


def _authorization_error(result: Any) -> Unauthorized:
    if result.rejection_code == ReasonCode.NO_ACTIVE_ACTOR:
        return NoActiveActor()
    return PermissionDenied(
        result.message or "Permission denied.",
        code=result.rejection_code or ReasonCode.PERMISSION_DENIED,
    )


# ══════════════════════════════════════════════════════════════
# COMMAND DISPATCHER
# ══════════════════════════════════════════════════════════════

class CommandDispatcher:
    """
    Evaluate a command through authorization and policies.

    Lifecycle:
    1. Authorize actor against the target scope (when an authorizer
       is configured)
    2. Evaluate registered policies (in order)
    3. Produce CommandOutcome (ACCEPTED or REJECTED)

    Usage:
        dispatcher = CommandDispatcher(authorizer=PermissionEvaluator())
        dispatcher.register_policy(warehouse_must_be_active_policy)

        outcome = dispatcher.dispatch(command, state, scope)

    Policies are evaluated in registration order.
    First rejection wins, remaining policies are skipped.
    """

    def __init__(self, authorizer: AuthorizerProtocol | None = None):
        self._authorizer = authorizer
        self._policies: List[PolicyEvaluator] = []

    def register_policy(self, policy: PolicyEvaluator) -> None:
        """
        Register a policy evaluator.

        Policies are evaluated in registration order.
        """
        if not callable(policy):
            raise TypeError(
                f"Policy must be callable, got {type(policy).__name__}."
            )
        self._policies.append(policy)

        policy_name = getattr(policy, "__qualname__", str(policy))
        logger.debug(f"Policy registered: {policy_name}")

    # ══════════════════════════════════════════════════════════
    # DISPATCH
    # ══════════════════════════════════════════════════════════

    def dispatch(self, command: Command, state: Any, scope: Any) -> CommandOutcome:
        """
        Evaluate command and produce outcome.

        Args:
            command: Command to evaluate.
            state:   Current AppState snapshot (read-only).
            scope:   AccessScope of the command's target.

        Returns:
            CommandOutcome, never None, never ambiguous.
        """
        now = command.issued_at

        # ── Step 1: Authorization ─────────────────────────────
        if self._authorizer is not None:
            result = self._authorizer.evaluate(command, scope)
            if not result.allowed:
                logger.warning(
                    f"Command {command.command_id} ({command.command_type}) "
                    f"unauthorized: [{result.rejection_code}] {result.message}"
                )
                error = _authorization_error(result)
                return CommandOutcome.rejected(
                    command.command_id,
                    error.to_rejection("permission_evaluator"),
                    now,
                )

        # ── Step 2: Policy evaluation ─────────────────────────
        for policy in self._policies:
            rejection = policy(command, state)
            if rejection is not None:
                if not isinstance(rejection, RejectionReason):
                    raise TypeError(
                        f"Policy must return RejectionReason or None, "
                        f"got {type(rejection).__name__}."
                    )

                logger.warning(
                    f"Command {command.command_id} rejected by "
                    f"policy '{rejection.policy_name}': "
                    f"[{rejection.code}] {rejection.message}"
                )
                return CommandOutcome.rejected(command.command_id, rejection, now)

        # ── Step 3: All clear → ACCEPTED ──────────────────────
        logger.debug(f"Command {command.command_id} cleared dispatch")
        return CommandOutcome.accepted(command.command_id, now)
