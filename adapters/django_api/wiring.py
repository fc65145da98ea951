"""
FOS Django Adapter Wiring
=========================
Builds the process-wide ApplicationStateStore for the HTTP host.

This module is adapter-only glue:
- the store is built lazily on first request, seeded from core.state.seed
- OperationsConfig comes from settings.FOS_OPERATIONS
- no core contract changes
"""

from __future__ import annotations

import logging
import threading

from django.conf import settings

from core.config.rules import OperationsConfig
from core.state.store import ApplicationStateStore

logger = logging.getLogger("fos.adapters")

_STORE_LOCK = threading.Lock()
_STORE: ApplicationStateStore | None = None


def _build_config() -> OperationsConfig:
    raw = getattr(settings, "FOS_OPERATIONS", None) or {}
    return OperationsConfig.from_mapping(raw)


def build_store() -> ApplicationStateStore:
    global _STORE
    if _STORE is not None:
        return _STORE

    with _STORE_LOCK:
        if _STORE is None:
            _STORE = ApplicationStateStore(config=_build_config())
            logger.info("Operations store initialized from seed data")
    return _STORE


def reset_store() -> None:
    """Drop the singleton; the next request builds a fresh seeded store."""
    global _STORE
    with _STORE_LOCK:
        _STORE = None
