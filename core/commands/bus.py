"""
FOS Command Layer — Command Bus
==================================
High-level orchestration of the command lifecycle.

Flow:
    1. Resolve handler and the command's target scope
    2. Dispatch command → get Outcome (authorization + policies)
    3. If ACCEPTED → call engine handler → Mutation (not yet committed)
    4. Engine DomainError → REJECTED outcome with the error's reason

The CommandBus:
- Orchestrates, does not decide
- Never lets a DomainError escape to the caller
- Delegates accepted commands to engine handlers

The CommandBus does NOT:
- Commit snapshots (the state store does that)
- Append notifications
- Contain engine-specific logic
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Protocol

from core.commands.base import Command
from core.commands.dispatcher import CommandDispatcher
from core.commands.errors import DomainError, ValidationFailure
from core.commands.outcomes import CommandOutcome, Mutation
from core.commands.rejection import RejectionReason

logger = logging.getLogger("fos.commands")


# ══════════════════════════════════════════════════════════════
# ENGINE HANDLER PROTOCOL
# ══════════════════════════════════════════════════════════════

class EngineHandlerProtocol(Protocol):
    """
    Protocol for engine command handlers.

    Each engine registers a handler that knows how to:
    - resolve the AccessScope its command targets
    - execute the command against a snapshot, returning a Mutation

    The handler never commits anything.
    """

    def resolve_scope(self, command: Command, state: Any) -> Any:
        ...

    def execute(self, command: Command, state: Any) -> Mutation:
        ...


# ══════════════════════════════════════════════════════════════
# COMMAND BUS ERRORS
# ══════════════════════════════════════════════════════════════

class CommandBusError(Exception):
    """Base error for command bus operations."""
    pass


class NoHandlerRegistered(CommandBusError):
    """No engine handler registered for command type."""

    def __init__(self, command_type: str):
        self.command_type = command_type
        super().__init__(
            f"No engine handler registered for "
            f"command type '{command_type}'."
        )


# ══════════════════════════════════════════════════════════════
# COMMAND BUS RESULT
# ══════════════════════════════════════════════════════════════

class CommandResult:
    """
    Result of an operation: outcome + the handler's mutation.

    snapshot is the AppState after the operation (the committed
    mutation state on ACCEPTED, the untouched state on REJECTED).
    It is filled in by the state store.
    """

    def __init__(
        self,
        outcome: CommandOutcome,
        mutation: Optional[Mutation] = None,
        snapshot: Any = None,
    ):
        self.outcome = outcome
        self.mutation = mutation
        self.snapshot = snapshot

    @property
    def is_accepted(self) -> bool:
        return self.outcome.is_accepted

    @property
    def is_rejected(self) -> bool:
        return self.outcome.is_rejected

    @property
    def reason(self) -> Optional[RejectionReason]:
        return self.outcome.reason

    @property
    def value(self) -> Any:
        return self.mutation.value if self.mutation is not None else None

    def __repr__(self) -> str:
        return (
            f"CommandResult(status={self.outcome.status.value}, "
            f"reason={self.reason.code if self.reason else None})"
        )


def invalid_request(message: str) -> RejectionReason:
    """Rejection for a request that failed construction or validation."""
    error = ValidationFailure(message or "Invalid request.")
    return error.to_rejection("request_validator")


# ══════════════════════════════════════════════════════════════
# COMMAND BUS
# ══════════════════════════════════════════════════════════════

class CommandBus:
    """
    Orchestration layer for command lifecycle.

    Usage:
        bus = CommandBus(dispatcher=dispatcher)

        # Engines register their handlers
        InventoryService(command_bus=bus, config=config)

        # Handle command against the current snapshot
        result = bus.handle(command, state)
    """

    def __init__(self, dispatcher: CommandDispatcher):
        self._dispatcher = dispatcher
        self._handlers: Dict[str, Any] = {}

    @property
    def dispatcher(self) -> CommandDispatcher:
        return self._dispatcher

    # ══════════════════════════════════════════════════════════
    # HANDLER REGISTRATION
    # ══════════════════════════════════════════════════════════

    def register_handler(
        self,
        command_type: str,
        handler: Any,
    ) -> None:
        """
        Register engine handler for a command type.

        Handler must implement EngineHandlerProtocol.
        """
        if not command_type.endswith(".request"):
            raise ValueError(
                f"command_type '{command_type}' must end with '.request'."
            )

        for method in ("execute", "resolve_scope"):
            if not callable(getattr(handler, method, None)):
                raise TypeError(
                    f"Handler must have callable .{method}() method."
                )

        if command_type in self._handlers:
            raise ValueError(
                f"Handler already registered for '{command_type}'."
            )

        self._handlers[command_type] = handler
        logger.debug(f"Handler registered: {command_type}")

    def has_handler(self, command_type: str) -> bool:
        return command_type in self._handlers

    @property
    def registered_command_types(self) -> tuple[str, ...]:
        return tuple(sorted(self._handlers))

    # ══════════════════════════════════════════════════════════
    # HANDLE (main orchestration)
    # ══════════════════════════════════════════════════════════

    def handle(self, command: Command, state: Any) -> CommandResult:
        """
        Full command lifecycle against one snapshot.

        Raises:
            NoHandlerRegistered: wiring error, not a business failure.

        Returns:
            CommandResult with outcome + mutation (mutation is None
            when REJECTED).
        """
        handler = self._handlers.get(command.command_type)
        if handler is None:
            raise NoHandlerRegistered(command.command_type)

        try:
            scope = handler.resolve_scope(command, state)
        except DomainError as exc:
            return self._reject(command, exc)

        # ── Step 1: Dispatch (authorization + policies) ───────
        outcome = self._dispatcher.dispatch(command, state, scope)
        if outcome.is_rejected:
            return CommandResult(outcome=outcome)

        # ── Step 2: Execute ───────────────────────────────────
        try:
            mutation = handler.execute(command, state)
        except DomainError as exc:
            return self._reject(command, exc)
        except ValueError as exc:
            return self._reject_invalid(command, str(exc))

        logger.info(
            f"Command {command.command_id} ({command.command_type}) "
            f"ACCEPTED by {command.actor_id}"
        )
        return CommandResult(
            outcome=CommandOutcome.accepted(command.command_id, command.issued_at),
            mutation=mutation,
        )

    # ══════════════════════════════════════════════════════════
    # REJECTED PATH
    # ══════════════════════════════════════════════════════════

    def _reject(self, command: Command, exc: DomainError) -> CommandResult:
        reason = exc.to_rejection(policy_name=f"{command.source_engine}_engine")
        logger.warning(
            f"Command {command.command_id} ({command.command_type}) "
            f"rejected: [{reason.code}] {reason.message}"
        )
        return CommandResult(
            outcome=CommandOutcome.rejected(
                command.command_id, reason, command.issued_at,
            ),
        )

    def _reject_invalid(self, command: Command, message: str) -> CommandResult:
        reason = invalid_request(message)
        logger.warning(
            f"Command {command.command_id} ({command.command_type}) "
            f"invalid: {reason.message}"
        )
        return CommandResult(
            outcome=CommandOutcome.rejected(
                command.command_id, reason, command.issued_at,
            ),
        )
