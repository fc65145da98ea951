"""
FOS Core Time — Explicit Clock Protocol
=========================================
Engines never call datetime.now(). The state store reads the injected
Clock once per operation and passes the instant down, so every timestamp
stamped during one operation is identical and tests stay deterministic.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone
from typing import Protocol


# ══════════════════════════════════════════════════════════════
# CLOCK PROTOCOL
# ══════════════════════════════════════════════════════════════

class Clock(Protocol):
    """Injectable time source."""

    def now_utc(self) -> datetime:
        """Return current UTC time."""
        ...  # pragma: no cover


# ══════════════════════════════════════════════════════════════
# IMPLEMENTATIONS
# ══════════════════════════════════════════════════════════════

class SystemClock:
    """Production clock — real system time."""

    def now_utc(self) -> datetime:
        return datetime.now(timezone.utc)


class FixedClock:
    """
    Test clock — returns a fixed timestamp until advanced.

    Usage:
        clock = FixedClock(datetime(2026, 3, 2, 8, 0, tzinfo=timezone.utc))
        clock.advance(hours=9)
    """

    def __init__(self, fixed_dt: datetime) -> None:
        if fixed_dt.tzinfo is None:
            raise ValueError("FixedClock requires timezone-aware datetime.")
        self._fixed_dt = fixed_dt

    def now_utc(self) -> datetime:
        return self._fixed_dt

    def advance(self, **delta) -> None:
        """Advance the fixed time by timedelta keyword arguments."""
        self._fixed_dt = self._fixed_dt + timedelta(**delta)


# ══════════════════════════════════════════════════════════════
# CALENDAR HELPERS
# ══════════════════════════════════════════════════════════════

def add_calendar_days(start: date, days: int) -> date:
    """Fixed calendar-day offset (no business-day logic)."""
    return start + timedelta(days=days)
