"""
FOS Attendance Primitive
==========================
One shift presence record: opened on check-in, closed once on check-out.

The record stores only ids. The worker's display name is looked up at
read time so a rename never leaves stale copies behind.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Optional


class AttendanceStatus(Enum):
    PRESENT = "PRESENT"
    ABSENT = "ABSENT"
    LEAVE = "LEAVE"


class Shift(Enum):
    MORNING = "MORNING"
    AFTERNOON = "AFTERNOON"
    NIGHT = "NIGHT"


@dataclass(frozen=True)
class AttendanceRecord:
    record_id: str
    user_id: str
    warehouse_id: str
    work_date: date
    check_in: datetime
    check_out: Optional[datetime] = None
    status: AttendanceStatus = AttendanceStatus.PRESENT
    shift: Optional[Shift] = None

    def __post_init__(self):
        if not self.record_id:
            raise ValueError("record_id must be non-empty.")
        if not self.user_id:
            raise ValueError("user_id must be non-empty.")
        if not isinstance(self.work_date, date):
            raise ValueError("work_date must be a date.")
        if not isinstance(self.check_in, datetime):
            raise ValueError("check_in must be a datetime.")
        if self.check_out is not None and self.check_out < self.check_in:
            raise ValueError("check_out cannot precede check_in.")
        if self.shift is not None and not isinstance(self.shift, Shift):
            raise ValueError("shift must be Shift enum or None.")

    @property
    def is_open(self) -> bool:
        return self.check_out is None

    def to_dict(self) -> dict:
        return {
            "record_id": self.record_id,
            "user_id": self.user_id,
            "warehouse_id": self.warehouse_id,
            "work_date": self.work_date.isoformat(),
            "check_in": self.check_in.isoformat(),
            "check_out": (
                self.check_out.isoformat() if self.check_out is not None else None
            ),
            "status": self.status.value,
            "shift": self.shift.value if self.shift is not None else None,
        }
