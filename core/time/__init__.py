"""
FOS Core Time — Public API
============================
Doctrine: NO datetime.now() in engine logic.
"""

from core.time.clock import (
    Clock,
    FixedClock,
    SystemClock,
    add_calendar_days,
)

__all__ = [
    "Clock",
    "FixedClock",
    "SystemClock",
    "add_calendar_days",
]
