"""Auto-clearing success/error notifications."""

import logging
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict

from ..workers.timers import Scheduler, TimerSlot

logger = logging.getLogger(__name__)


class NotificationKind(str, Enum):
    SUCCESS = "success"
    ERROR = "error"


class Notification(BaseModel):
    model_config = ConfigDict(frozen=True)

    message: str
    kind: NotificationKind = NotificationKind.SUCCESS


class Notifier:
    """Holds the visible notification and clears it after a fixed delay."""

    def __init__(self, scheduler: Scheduler, lifetime_seconds: float = 5.0):
        self.lifetime_seconds = lifetime_seconds
        self.current: Optional[Notification] = None
        self._timer = TimerSlot(scheduler, name="notification")

    def notify(self, message: str, kind: NotificationKind = NotificationKind.SUCCESS) -> Notification:
        """Show `message`, replacing any visible notification and its timer."""
        self.current = Notification(message=message, kind=kind)
        self._timer.start(self.lifetime_seconds, self._clear)
        logger.info(message, extra={"notification_kind": kind.value})
        return self.current

    def success(self, message: str) -> Notification:
        return self.notify(message, NotificationKind.SUCCESS)

    def error(self, message: str) -> Notification:
        return self.notify(message, NotificationKind.ERROR)

    def dismiss(self) -> None:
        self._timer.cancel()
        self.current = None

    def _clear(self) -> None:
        self.current = None
