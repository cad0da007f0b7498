"""Game tuning values, menu entries and display colours."""

from enum import Enum

INITIAL_HUNGER = 0
HUNGER_DECREASE_BIG = 10
HUNGER_DECREASE_SMALL = 5
HUNGER_INCREASE_BIG = 5
HUNGER_INCREASE_SMALL = 1
HUNGER_WARNING = 80
MAX_HUNGER = 100

INITIAL_HAPPINESS = 100
HAPPINESS_DECREASE = 5
HAPPINESS_INCREASE = 5
PLAY_HAPPINESS_INCREASE = 10
HAPPINESS_WARNING = 20
MAX_HAPPINESS = 100

INITIAL_HEALTH = 100
HEALTH_DECREASE = 5
HEALTH_INCREASE = 10
HEALTH_WARNING = 20
MAX_HEALTH = 100

MAIN_MENU_OPTIONS = ("Play", "Feed", "Exit")

# Seconds a notification stays on screen.
NOTIFICATION_DURATION = 2


class Color(Enum):
    """Terminal foreground colours, valued by their 16-colour palette index."""

    DARK_RED = 1
    GREEN = 10
    YELLOW = 11
    CYAN = 14


DANGER_COLOR = Color.DARK_RED
WARNING_COLOR = Color.YELLOW
INFO_COLOR = Color.CYAN
NORMAL_COLOR = Color.GREEN