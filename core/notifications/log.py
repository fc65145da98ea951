"""
FOS Notifications — Notification Log
=======================================
Append-only, newest-first log fed by every operation.

The log is a side channel: listeners are told about each appended
notification, and a failing listener is logged and skipped. Nothing
an operation decides depends on the log.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, List

from core.identity.ids import IdProvider
from core.time.clock import Clock

logger = logging.getLogger("fos.notifications")

NOTIFICATION_TYPE_INFO = "info"
NOTIFICATION_TYPE_SUCCESS = "success"
NOTIFICATION_TYPE_ERROR = "error"

VALID_NOTIFICATION_TYPES = frozenset({
    NOTIFICATION_TYPE_INFO,
    NOTIFICATION_TYPE_SUCCESS,
    NOTIFICATION_TYPE_ERROR,
})


@dataclass(frozen=True)
class Notification:
    notification_id: str
    message: str
    notification_type: str
    timestamp: datetime

    def __post_init__(self):
        if not self.notification_id or not isinstance(self.notification_id, str):
            raise ValueError("notification_id must be a non-empty string.")

        if not self.message or not isinstance(self.message, str):
            raise ValueError("message must be a non-empty string.")

        if self.notification_type not in VALID_NOTIFICATION_TYPES:
            raise ValueError(
                f"notification_type '{self.notification_type}' not valid. "
                f"Must be one of: {sorted(VALID_NOTIFICATION_TYPES)}"
            )

        if not isinstance(self.timestamp, datetime):
            raise ValueError("timestamp must be a datetime.")

    def to_dict(self) -> dict:
        return {
            "id": self.notification_id,
            "message": self.message,
            "type": self.notification_type,
            "timestamp": self.timestamp.isoformat(),
        }


NotificationListener = Callable[[Notification], None]


class NotificationLog:
    """
    In-memory notification log.

    entries() returns newest first. clear() is called on logout.
    """

    def __init__(self, *, clock: Clock, id_provider: IdProvider):
        self._clock = clock
        self._id_provider = id_provider
        self._entries: List[Notification] = []
        self._listeners: List[NotificationListener] = []

    def subscribe(self, listener: NotificationListener) -> None:
        if not callable(listener):
            raise TypeError(
                f"Listener must be callable, got {type(listener).__name__}."
            )
        self._listeners.append(listener)

    def append(self, message: str, notification_type: str) -> Notification:
        notification = Notification(
            notification_id=self._id_provider.new_id("n"),
            message=message,
            notification_type=notification_type,
            timestamp=self._clock.now_utc(),
        )
        self._entries.insert(0, notification)
        logger.debug(f"[{notification_type}] {message}")
        self._notify_listeners(notification)
        return notification

    def _notify_listeners(self, notification: Notification) -> None:
        for listener in self._listeners:
            try:
                listener(notification)
            except Exception as exc:
                listener_name = getattr(listener, "__qualname__", str(listener))
                logger.error(
                    f"Notification listener '{listener_name}' failed: "
                    f"{type(exc).__name__}: {exc}",
                    exc_info=True,
                )

    def entries(self) -> tuple[Notification, ...]:
        return tuple(self._entries)

    def latest(self) -> Notification | None:
        return self._entries[0] if self._entries else None

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)
