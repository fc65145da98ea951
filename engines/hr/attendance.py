"""
FOS HR Engine — Attendance
============================
Shift check-in / check-out.

A record is created OPEN on check-in and closed exactly once on
check-out. Records are never deleted. The user's display name is not
stored on the record; attendance_rows() joins it at read time.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from datetime import date, datetime
from typing import Iterable, Optional

from core.commands.errors import (
    AttendanceAlreadyClosed,
    OpenAttendanceExists,
    UserNotFound,
    WarehouseNotFound,
)
from core.primitives.attendance import AttendanceRecord, AttendanceStatus
from core.state.snapshot import AppState, replace_entry
from engines.hr.commands import CheckInRequest

logger = logging.getLogger("fos.hr")


def open_record_for(
    state: AppState,
    user_id: str,
    work_date: date,
) -> Optional[AttendanceRecord]:
    for record in state.attendance:
        if record.user_id == user_id and record.work_date == work_date and record.is_open:
            return record
    return None


def check_in(
    state: AppState,
    request: CheckInRequest,
    record_id: str,
    now: datetime,
    allow_multiple_open: bool = True,
) -> tuple[AppState, AttendanceRecord]:
    if state.find_user(request.user_id) is None:
        raise UserNotFound(request.user_id)

    if state.find_warehouse(request.warehouse_id) is None:
        raise WarehouseNotFound(request.warehouse_id)

    if not allow_multiple_open:
        existing = open_record_for(state, request.user_id, now.date())
        if existing is not None:
            raise OpenAttendanceExists(request.user_id, existing.record_id)

    record = AttendanceRecord(
        record_id=record_id,
        user_id=request.user_id,
        warehouse_id=request.warehouse_id,
        work_date=now.date(),
        check_in=now,
        status=AttendanceStatus.PRESENT,
        shift=request.shift,
    )
    # Newest first.
    return state.with_changes(attendance=(record,) + state.attendance), record


def check_out(
    state: AppState,
    record_id: str,
    now: datetime,
) -> tuple[AppState, Optional[AttendanceRecord]]:
    """
    Close a record. An unknown record_id is a no-op (same state, None).

    No ownership check: whoever may write attendance in the record's
    scope may close it.
    """
    record = state.find_attendance(record_id)
    if record is None:
        logger.info(f"Check-out for unknown attendance record {record_id}; nothing to close")
        return state, None

    if not record.is_open:
        raise AttendanceAlreadyClosed(record_id)

    closed = replace(record, check_out=now)
    attendance = replace_entry(
        state.attendance, lambda a: a.record_id == record_id, closed,
    )
    return state.with_changes(attendance=attendance), closed


# ══════════════════════════════════════════════════════════════
# READ MODEL
# ══════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class AttendanceRow:
    record: AttendanceRecord
    user_name: str
    warehouse_name: str

    def to_dict(self) -> dict:
        data = self.record.to_dict()
        data["user_name"] = self.user_name
        data["warehouse_name"] = self.warehouse_name
        return data


def attendance_rows(
    state: AppState,
    records: Iterable[AttendanceRecord],
) -> tuple[AttendanceRow, ...]:
    rows = []
    for record in records:
        user = state.find_user(record.user_id)
        warehouse = state.find_warehouse(record.warehouse_id)
        rows.append(AttendanceRow(
            record=record,
            user_name=user.full_name if user else "Unknown",
            warehouse_name=warehouse.name if warehouse else "",
        ))
    return tuple(rows)
