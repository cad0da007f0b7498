"""Interactive terminal game loop."""

from __future__ import annotations

import argparse
import time

from blessed import Terminal

from .console import Console
from .constants import MAIN_MENU_OPTIONS, NORMAL_COLOR
from .tamagotchi import Tamagotchi

_TICK_SECONDS = 1.0
_POLL_SECONDS = 0.05
_FRAME_PAUSE = 0.2


def handle_key(tamagotchi: Tamagotchi, key: str) -> bool:
    """Apply the menu action for ``key``; return True when the player exits."""
    if key == "1":
        tamagotchi.play()
    elif key == "2":
        tamagotchi.feed()
    elif key == "3":
        return True
    return False


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="petbox", description="Look after a virtual pet.")
    parser.parse_args(argv)

    term = Terminal()
    console = Console(term)
    pet = Tamagotchi("Tamagotchi")

    console.clear_screen()
    console.change_text_color(NORMAL_COLOR)

    with term.fullscreen(), term.cbreak():
        last_tick = time.monotonic()
        while True:
            if time.monotonic() - last_tick >= _TICK_SECONDS:
                last_tick = time.monotonic()
                pet.tick()

            console.clear_screen()
            pet.print_state(console)
            pet.print_notifications(console)
            console.print_menu(MAIN_MENU_OPTIONS)

            key = term.inkey(timeout=_POLL_SECONDS)
            if handle_key(pet, str(key)):
                break
            time.sleep(_FRAME_PAUSE)

        console.print_error("Game Over!")

    print("Exiting the game...")
    return 0