"""The virtual pet and the rules by which its stats change."""

from __future__ import annotations

from dataclasses import dataclass, field

from . import notification as keys
from .console import Console
from .constants import (
    HAPPINESS_DECREASE,
    HAPPINESS_INCREASE,
    HAPPINESS_WARNING,
    HEALTH_INCREASE,
    HEALTH_WARNING,
    HUNGER_DECREASE_BIG,
    HUNGER_INCREASE_BIG,
    HUNGER_INCREASE_SMALL,
    HUNGER_WARNING,
    INITIAL_HAPPINESS,
    INITIAL_HEALTH,
    INITIAL_HUNGER,
    MAX_HAPPINESS,
    MAX_HEALTH,
    MAX_HUNGER,
)
from .notification import Notification, NotificationLevel

_RULE = "--------------------------------"


def _add(current: int, amount: int, maximum: int) -> int:
    return min(current + amount, maximum)


def _sub(current: int, amount: int) -> int:
    return max(current - amount, 0)


@dataclass
class Tamagotchi:
    """A pet whose health, happiness and hunger change as time passes."""

    name: str
    health: int = INITIAL_HEALTH
    happiness: int = INITIAL_HAPPINESS
    hunger: int = INITIAL_HUNGER
    notifications: list[Notification] = field(default_factory=list)

    def _notify(self, message: str, level: NotificationLevel, key: str) -> None:
        self.add_notification(Notification.with_key(message, level, key))

    def play(self) -> None:
        self._notify(f"{self.name} is playing!", NotificationLevel.INFO, keys.PLAYING_INFO)
        self.happiness = _add(self.happiness, HAPPINESS_INCREASE, MAX_HAPPINESS)
        self.hunger = _add(self.hunger, HUNGER_INCREASE_BIG, MAX_HUNGER)

    def feed(self) -> None:
        self._notify(f"{self.name} is eating!", NotificationLevel.INFO, keys.EATING_INFO)
        self.hunger = _sub(self.hunger, HUNGER_DECREASE_BIG)

    def tick(self) -> None:
        """Advance the pet by one time step."""
        hungry = self.hunger >= HUNGER_WARNING
        sad = self.happiness <= HAPPINESS_WARNING
        sick = self.health <= HEALTH_WARNING

        if hungry:
            self._notify(f"{self.name} is hungry!", NotificationLevel.WARNING, keys.HUNGER_WARNING)
            self.happiness = _sub(self.happiness, HAPPINESS_DECREASE)
            self.health = _sub(self.health, HEALTH_INCREASE)

        if sad:
            self._notify(f"{self.name} is sad!", NotificationLevel.WARNING, keys.HAPPINESS_WARNING)
            self.health = _sub(self.health, HAPPINESS_DECREASE)

        if sick:
            self._notify(f"{self.name} is sick!", NotificationLevel.WARNING, keys.HEALTH_WARNING)
            self.happiness = _sub(self.happiness, HAPPINESS_DECREASE)

        if not hungry and not sad:
            self.health = _add(self.health, HAPPINESS_INCREASE, MAX_HEALTH)

        self.hunger = _add(self.hunger, HUNGER_INCREASE_SMALL, MAX_HUNGER)

    def add_notification(self, notification: Notification) -> None:
        """Add a notification, or refresh the one already held under its key."""
        existing = next((n for n in self.notifications if n.key == notification.key), None)
        if existing is not None:
            existing.refresh()
        else:
            self.notifications.append(notification)

    def prune_notifications(self, now: float | None = None) -> None:
        """Drop notifications that are no longer active."""
        self.notifications = [n for n in self.notifications if n.is_active(now)]

    def print_state(self, console: Console) -> None:
        console.print_line(_RULE)
        console.print_line(f"Status of {self.name}")
        console.print_line(_RULE)
        console.print_line(f"Happiness: {self.happiness}")
        console.print_line(f"Hunger: {self.hunger}")
        console.print_line(f"Health: {self.health}")

    def print_notifications(self, console: Console) -> None:
        """Drop expired notifications and print the rest by level."""
        self.prune_notifications()
        printers = {
            NotificationLevel.INFO: console.print_info,
            NotificationLevel.WARNING: console.print_warning,
            NotificationLevel.ERROR: console.print_error,
        }
        for note in self.notifications:
            printers[note.level](note.message)