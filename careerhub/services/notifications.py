"""
Toast notifications - {kind, message} shown for a few seconds.

The notifier builds the payloads and remembers the latest one until it
expires, which is what GET /api/notifications/current reports.
"""

import time
from typing import Callable, Optional

from careerhub.schemas.schemas import Notification, NotificationKind


class Notifier:

    def __init__(self, duration_seconds: int = 3, clock: Callable[[], float] = time.monotonic):
        self.duration_seconds = duration_seconds
        self._clock = clock
        self._current: Optional[Notification] = None
        self._shown_at = 0.0

    def notify(self, kind: NotificationKind, message: str) -> Notification:
        notification = Notification(kind=kind, message=message, duration_seconds=self.duration_seconds)
        self._current = notification
        self._shown_at = self._clock()
        return notification

    def success(self, message: str) -> Notification:
        return self.notify(NotificationKind.success, message)

    def error(self, message: str) -> Notification:
        return self.notify(NotificationKind.error, message)

    def current(self) -> Optional[Notification]:
        """The latest notification, or None once it has auto-dismissed."""
        if self._current is not None and self._clock() - self._shown_at >= self.duration_seconds:
            self._current = None
        return self._current
