"""
FOS Payroll Primitive — Gross Pay Estimate
============================================
gross_pay is computed once (hours_worked x hourly_rate) and frozen.
A later change to the user's hourly_rate never touches stored estimates.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal


@dataclass(frozen=True)
class PayrollEstimate:
    estimate_id: str
    user_id: str
    warehouse_id: str
    start_date: date
    end_date: date
    hours_worked: Decimal
    hourly_rate: Decimal
    gross_pay: Decimal
    generated_at: datetime
    generated_by: str

    def __post_init__(self):
        if not self.estimate_id:
            raise ValueError("estimate_id must be non-empty.")
        if not self.user_id:
            raise ValueError("user_id must be non-empty.")
        for name in ("hours_worked", "hourly_rate", "gross_pay"):
            value = getattr(self, name)
            if not isinstance(value, Decimal):
                raise ValueError(f"{name} must be Decimal.")
            if value < 0:
                raise ValueError(f"{name} must be >= 0.")
        if self.gross_pay != self.hours_worked * self.hourly_rate:
            raise ValueError("gross_pay must equal hours_worked * hourly_rate.")

    def to_dict(self) -> dict:
        return {
            "estimate_id": self.estimate_id,
            "user_id": self.user_id,
            "warehouse_id": self.warehouse_id,
            "start_date": self.start_date.isoformat(),
            "end_date": self.end_date.isoformat(),
            "hours_worked": str(self.hours_worked),
            "hourly_rate": str(self.hourly_rate),
            "gross_pay": str(self.gross_pay),
            "generated_at": self.generated_at.isoformat(),
            "generated_by": self.generated_by,
        }
