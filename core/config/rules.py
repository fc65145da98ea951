"""
FOS Core Config — Operations Rules
=====================================
Tunable business rules for the operations core.

Engines never read settings directly. The store receives one frozen
OperationsConfig and hands it to every engine call that needs a rule.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Mapping


# ══════════════════════════════════════════════════════════════
# OPERATIONS CONFIG
# ══════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class OperationsConfig:
    """
    Operations rule set.

    Fields:
        invoice_due_days:              Calendar days from creation to due date.
        low_stock_threshold:           Non-waste items below this count as low stock.
        allow_multiple_open_check_ins: Permit a second open record per user per day.
        enforce_authorization:         Run the permission evaluator on commands.
        enforce_warehouse_status:      Reject inventory writes and check-ins
                                       against DISABLED warehouses.
        currency_label:                Label used in payment notifications.
    """

    invoice_due_days: int = 30
    low_stock_threshold: int = 50
    allow_multiple_open_check_ins: bool = True
    enforce_authorization: bool = True
    enforce_warehouse_status: bool = True
    currency_label: str = "ETB"

    def __post_init__(self) -> None:
        if not isinstance(self.invoice_due_days, int) or self.invoice_due_days < 0:
            raise ValueError("invoice_due_days must be a non-negative integer.")

        if not isinstance(self.low_stock_threshold, int) or self.low_stock_threshold < 0:
            raise ValueError("low_stock_threshold must be a non-negative integer.")

        for flag in (
            "allow_multiple_open_check_ins",
            "enforce_authorization",
            "enforce_warehouse_status",
        ):
            if not isinstance(getattr(self, flag), bool):
                raise ValueError(f"{flag} must be a bool.")

        if not self.currency_label or not isinstance(self.currency_label, str):
            raise ValueError("currency_label must be a non-empty string.")

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> OperationsConfig:
        """Build from a settings mapping; unknown keys are rejected."""
        if not data:
            return cls()

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown operations settings: {unknown}")

        return cls(**dict(data))
