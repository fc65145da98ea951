"""
FOS HR Engine — Application Service
=====================================
Attendance, payroll estimates and the user directory.
"""

from __future__ import annotations

from core.commands.base import Command
from core.commands.outcomes import NOTIFICATION_INFO, Mutation
from core.config.rules import OperationsConfig
from core.identity.ids import IdProvider
from core.permissions.models import AccessScope
from core.state.snapshot import AppState
from engines.hr import attendance, directory, payroll
from engines.hr.commands import (
    HR_ATTENDANCE_CHECK_IN_REQUEST,
    HR_ATTENDANCE_CHECK_OUT_REQUEST,
    HR_COMMAND_TYPES,
    HR_PAYROLL_ESTIMATE_REQUEST,
    HR_USER_ADD_REQUEST,
    HR_USER_DELETE_REQUEST,
    HR_USER_UPDATE_REQUEST,
)


def _user_scope(state: AppState, user_id: str) -> AccessScope:
    user = state.find_user(user_id)
    if user is None:
        return AccessScope.unresolved()
    return AccessScope(
        warehouse_id=user.assigned_warehouse_id,
        user_id=user.user_id,
        target_role=user.role,
    )


class _HRCommandHandler:
    def __init__(self, service: "HRService"):
        self._service = service

    def resolve_scope(self, command: Command, state: AppState) -> AccessScope:
        request = command.request
        ct = command.command_type

        if ct == HR_ATTENDANCE_CHECK_IN_REQUEST:
            return AccessScope(
                warehouse_id=request.warehouse_id,
                user_id=request.user_id,
            )

        if ct == HR_ATTENDANCE_CHECK_OUT_REQUEST:
            record = state.find_attendance(request.record_id)
            if record is None:
                return AccessScope.unresolved()
            return AccessScope(
                warehouse_id=record.warehouse_id,
                user_id=record.user_id,
            )

        if ct == HR_USER_ADD_REQUEST:
            return AccessScope.unresolved()

        # payroll estimate, user update, user delete
        return _user_scope(state, request.user_id)

    def execute(self, command: Command, state: AppState) -> Mutation:
        return self._service._execute_command(command, state)


class HRService:
    """
    HR Engine application service.

    Handles:
        hr.attendance.check_in.request  → attendance.check_in
        hr.attendance.check_out.request → attendance.check_out
        hr.payroll.estimate.request     → payroll.estimate
        hr.user.add/update/delete       → directory
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
        handler = _HRCommandHandler(self)
        for command_type in sorted(HR_COMMAND_TYPES):
            self._command_bus.register_handler(command_type, handler)

    def _execute_command(self, command: Command, state: AppState) -> Mutation:
        request = command.request
        ct = command.command_type
        now = command.issued_at

        if ct == HR_ATTENDANCE_CHECK_IN_REQUEST:
            new_state, record = attendance.check_in(
                state,
                request,
                self._id_provider.new_id("a"),
                now,
                self._config.allow_multiple_open_check_ins,
            )
            return Mutation(
                state=new_state,
                value=record,
                message=f"Checked in for {request.shift.value.capitalize()} shift",
            )

        if ct == HR_ATTENDANCE_CHECK_OUT_REQUEST:
            new_state, record = attendance.check_out(state, request.record_id, now)
            return Mutation(
                state=new_state,
                value=record,
                message="Checked out successfully",
                notification_type=NOTIFICATION_INFO,
            )

        if ct == HR_PAYROLL_ESTIMATE_REQUEST:
            new_state, result = payroll.estimate(
                state,
                request,
                self._id_provider.new_id("pe"),
                now,
                command.actor_id or "",
            )
            return Mutation(
                state=new_state,
                value=result,
                message=f"Payroll estimated for user {result.user_id}",
            )

        if ct == HR_USER_ADD_REQUEST:
            user_id = request.user_id or self._id_provider.new_id("u")
            new_state, user = directory.add_user(state, request, user_id)
            return Mutation(
                state=new_state,
                value=user,
                message=f'User "{user.full_name}" added',
            )

        if ct == HR_USER_UPDATE_REQUEST:
            new_state, user = directory.update_user(state, request)
            return Mutation(
                state=new_state,
                value=user,
                message=f'User "{user.full_name}" updated',
            )

        if ct == HR_USER_DELETE_REQUEST:
            new_state, user = directory.delete_user(state, request)
            return Mutation(
                state=new_state,
                value=user,
                message="User deleted",
                notification_type=NOTIFICATION_INFO,
            )

        raise ValueError(f"Unsupported HR command type: {ct}")
