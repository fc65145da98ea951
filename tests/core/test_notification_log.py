"""
FOS Notifications — Notification Log Tests
"""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from core.identity.ids import SequentialIdProvider
from core.notifications.log import (
    NOTIFICATION_TYPE_ERROR,
    NOTIFICATION_TYPE_INFO,
    NOTIFICATION_TYPE_SUCCESS,
    NotificationLog,
)
from core.time.clock import FixedClock

NOW = datetime(2026, 3, 2, 9, 0, tzinfo=timezone.utc)


def _log():
    return NotificationLog(clock=FixedClock(NOW), id_provider=SequentialIdProvider())


class TestNotificationLog:
    def test_newest_first(self):
        log = _log()
        log.append("first", NOTIFICATION_TYPE_INFO)
        log.append("second", NOTIFICATION_TYPE_SUCCESS)
        assert [n.message for n in log.entries()] == ["second", "first"]
        assert log.latest().message == "second"

    def test_entry_fields(self):
        log = _log()
        entry = log.append("Stock low", NOTIFICATION_TYPE_ERROR)
        assert entry.notification_id == "n-1"
        assert entry.timestamp == NOW
        assert entry.to_dict() == {
            "id": "n-1",
            "message": "Stock low",
            "type": "error",
            "timestamp": NOW.isoformat(),
        }

    def test_unknown_type_rejected(self):
        with pytest.raises(ValueError, match="not valid"):
            _log().append("x", "warning")

    def test_clear(self):
        log = _log()
        log.append("a", NOTIFICATION_TYPE_INFO)
        log.clear()
        assert len(log) == 0
        assert log.latest() is None


class TestNotificationListeners:
    def test_listener_receives_entries(self):
        log = _log()
        seen = []
        log.subscribe(seen.append)
        log.append("hello", NOTIFICATION_TYPE_INFO)
        assert [n.message for n in seen] == ["hello"]

    def test_failing_listener_does_not_block_append(self):
        log = _log()
        seen = []

        def broken(notification):
            raise RuntimeError("boom")

        log.subscribe(broken)
        log.subscribe(seen.append)
        log.append("still logged", NOTIFICATION_TYPE_SUCCESS)
        assert len(log) == 1
        assert len(seen) == 1

    def test_listener_must_be_callable(self):
        with pytest.raises(TypeError):
            _log().subscribe("not callable")
