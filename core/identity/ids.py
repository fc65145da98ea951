"""
FOS Identity - Identifier Providers
===================================
Injected providers for non-deterministic identifiers.

Entity ids are short prefixed strings ('inv-3f9c0a1b2d4e') so they read
well next to seeded ids such as 'o1' or 'inv1'.
"""

from __future__ import annotations

import itertools
import uuid
from typing import Protocol


class IdProvider(Protocol):
    def new_id(self, prefix: str) -> str:
        ...

    def new_command_id(self) -> uuid.UUID:
        ...


class UuidIdProvider:
    def new_id(self, prefix: str) -> str:
        return f"{prefix}-{uuid.uuid4().hex[:12]}"

    def new_command_id(self) -> uuid.UUID:
        return uuid.uuid4()


class SequentialIdProvider:
    """Deterministic ids for tests: 'inv-1', 'inv-2', 'pay-1', ..."""

    def __init__(self):
        self._counters: dict[str, itertools.count] = {}

    def new_id(self, prefix: str) -> str:
        counter = self._counters.setdefault(prefix, itertools.count(1))
        return f"{prefix}-{next(counter)}"

    def new_command_id(self) -> uuid.UUID:
        return uuid.uuid4()
