"""
FOS HR Engine — Request Commands
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from core.commands.base import Command
from core.context.actor_context import ActorContext
from core.primitives.attendance import Shift
from core.primitives.user import UserRole

HR_ATTENDANCE_CHECK_IN_REQUEST = "hr.attendance.check_in.request"
HR_ATTENDANCE_CHECK_OUT_REQUEST = "hr.attendance.check_out.request"
HR_PAYROLL_ESTIMATE_REQUEST = "hr.payroll.estimate.request"
HR_USER_ADD_REQUEST = "hr.user.add.request"
HR_USER_UPDATE_REQUEST = "hr.user.update.request"
HR_USER_DELETE_REQUEST = "hr.user.delete.request"

HR_ATTENDANCE_COMMAND_TYPES = frozenset({
    HR_ATTENDANCE_CHECK_IN_REQUEST,
    HR_ATTENDANCE_CHECK_OUT_REQUEST,
})
HR_DIRECTORY_COMMAND_TYPES = frozenset({
    HR_USER_ADD_REQUEST,
    HR_USER_UPDATE_REQUEST,
    HR_USER_DELETE_REQUEST,
})
HR_COMMAND_TYPES = (
    HR_ATTENDANCE_COMMAND_TYPES
    | HR_DIRECTORY_COMMAND_TYPES
    | frozenset({HR_PAYROLL_ESTIMATE_REQUEST})
)


def _cmd(ct, request, *, command_id, actor, issued_at):
    return Command(
        command_id=command_id, command_type=ct,
        actor=actor, request=request,
        issued_at=issued_at, source_engine="hr",
    )


class _HRRequest:
    command_type: str

    def to_command(
        self,
        *,
        command_id: uuid.UUID,
        actor: Optional[ActorContext],
        issued_at: datetime,
    ) -> Command:
        return _cmd(
            self.command_type, self,
            command_id=command_id, actor=actor, issued_at=issued_at,
        )


def _validate_rate(rate) -> None:
    if rate is None:
        return
    if not isinstance(rate, Decimal):
        raise ValueError("hourly_rate must be Decimal or None.")
    if rate < 0:
        raise ValueError("hourly_rate must be >= 0.")


# ── Attendance ────────────────────────────────────────────────

@dataclass(frozen=True)
class CheckInRequest(_HRRequest):
    command_type = HR_ATTENDANCE_CHECK_IN_REQUEST

    user_id: str
    warehouse_id: str
    shift: Shift

    def __post_init__(self):
        if not self.user_id:
            raise ValueError("user_id must be non-empty.")
        if not self.warehouse_id:
            raise ValueError("warehouse_id must be non-empty.")
        if not isinstance(self.shift, Shift):
            raise ValueError("shift must be Shift enum.")


@dataclass(frozen=True)
class CheckOutRequest(_HRRequest):
    command_type = HR_ATTENDANCE_CHECK_OUT_REQUEST

    record_id: str

    def __post_init__(self):
        if not self.record_id:
            raise ValueError("record_id must be non-empty.")


# ── Payroll ───────────────────────────────────────────────────

@dataclass(frozen=True)
class PayrollEstimateRequest(_HRRequest):
    """
    Gross pay estimate for one user.

    hours_worked is trusted as given: no start/end ordering check and
    no cross-check against attendance.
    """
    command_type = HR_PAYROLL_ESTIMATE_REQUEST

    user_id: str
    start_date: date
    end_date: date
    hours_worked: Decimal

    def __post_init__(self):
        if not self.user_id:
            raise ValueError("user_id must be non-empty.")
        if not isinstance(self.start_date, date):
            raise ValueError("start_date must be a date.")
        if not isinstance(self.end_date, date):
            raise ValueError("end_date must be a date.")
        if not isinstance(self.hours_worked, Decimal):
            raise ValueError("hours_worked must be Decimal.")
        if not self.hours_worked.is_finite() or self.hours_worked < 0:
            raise ValueError("hours_worked must be >= 0.")


# ── Directory ─────────────────────────────────────────────────

@dataclass(frozen=True)
class AddUserRequest(_HRRequest):
    """user_id and employee_number are generated when omitted."""
    command_type = HR_USER_ADD_REQUEST

    full_name: str
    email: str
    role: UserRole
    assigned_warehouse_id: Optional[str] = None
    hourly_rate: Optional[Decimal] = None
    employee_number: Optional[str] = None
    user_id: Optional[str] = None

    def __post_init__(self):
        if not self.full_name or not self.full_name.strip():
            raise ValueError("full_name must be non-empty.")
        if not isinstance(self.role, UserRole):
            raise ValueError("role must be UserRole enum.")
        _validate_rate(self.hourly_rate)
        if self.user_id is not None and not self.user_id:
            raise ValueError("user_id must be non-empty when given.")


@dataclass(frozen=True)
class UpdateUserRequest(_HRRequest):
    command_type = HR_USER_UPDATE_REQUEST

    user_id: str
    full_name: str
    email: str
    role: UserRole
    assigned_warehouse_id: Optional[str] = None
    hourly_rate: Optional[Decimal] = None
    employee_number: Optional[str] = None

    def __post_init__(self):
        if not self.user_id:
            raise ValueError("user_id must be non-empty.")
        if not self.full_name or not self.full_name.strip():
            raise ValueError("full_name must be non-empty.")
        if not isinstance(self.role, UserRole):
            raise ValueError("role must be UserRole enum.")
        _validate_rate(self.hourly_rate)


@dataclass(frozen=True)
class DeleteUserRequest(_HRRequest):
    command_type = HR_USER_DELETE_REQUEST

    user_id: str

    def __post_init__(self):
        if not self.user_id:
            raise ValueError("user_id must be non-empty.")
