"""Timed, keyed messages shown under the pet's status."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from enum import Enum

from .constants import NOTIFICATION_DURATION

HUNGER_WARNING = "hunger_warning"
EATING_INFO = "eating_info"
PLAYING_INFO = "playing_info"
HEALTH_WARNING = "health_warning"
HAPPINESS_WARNING = "happiness_warning"


class NotificationLevel(Enum):
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


@dataclass
class Notification:
    """A message that expires ``NOTIFICATION_DURATION`` seconds after its timestamp."""

    message: str
    level: NotificationLevel
    timestamp: float = field(default_factory=time.monotonic)
    removable: bool = True
    key: str | None = None

    @classmethod
    def with_key(cls, message: str, level: NotificationLevel, key: str) -> "Notification":
        return cls(message=message, level=level, key=key)

    def refresh(self) -> None:
        """Restart the display period."""
        self.timestamp = time.monotonic()

    def is_active(self, now: float | None = None) -> bool:
        """Whether the notification should still be shown at monotonic time ``now``."""
        if now is None:
            now = time.monotonic()
        return self.removable and now - self.timestamp < NOTIFICATION_DURATION