"""
FOS Core Config — Public API
===============================
Tunable operations rules (due days, stock thresholds, enforcement).
"""

from core.config.rules import OperationsConfig

__all__ = [
    "OperationsConfig",
]
