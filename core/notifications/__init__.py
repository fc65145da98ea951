"""
FOS Notifications — Public API
=================================
"""

from core.notifications.log import (
    NOTIFICATION_TYPE_ERROR,
    NOTIFICATION_TYPE_INFO,
    NOTIFICATION_TYPE_SUCCESS,
    Notification,
    NotificationListener,
    NotificationLog,
)

__all__ = [
    "NOTIFICATION_TYPE_ERROR",
    "NOTIFICATION_TYPE_INFO",
    "NOTIFICATION_TYPE_SUCCESS",
    "Notification",
    "NotificationListener",
    "NotificationLog",
]
