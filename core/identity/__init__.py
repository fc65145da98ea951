"""
FOS Identity - Public API
=========================
Identifier providers.
"""

from core.identity.ids import (
    IdProvider,
    SequentialIdProvider,
    UuidIdProvider,
)

__all__ = [
    "IdProvider",
    "SequentialIdProvider",
    "UuidIdProvider",
]
