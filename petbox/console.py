"""Terminal output helpers: lines, menus, colours and prompts."""

from __future__ import annotations

import sys
from typing import Iterable, TextIO

from blessed import Terminal

from .constants import (
    DANGER_COLOR,
    INFO_COLOR,
    NORMAL_COLOR,
    WARNING_COLOR,
    Color,
)

_RULE = "--------------------------------"


class Console:
    """Writes the game's screen to a terminal and reads line input."""

    def __init__(self, terminal: Terminal | None = None, input_stream: TextIO | None = None):
        self.term = terminal if terminal is not None else Terminal()
        self.stream = self.term.stream
        self.input_stream = input_stream if input_stream is not None else sys.stdin

    def _write(self, text: str) -> None:
        self.stream.write(text)
        self.stream.flush()

    def print_line(self, text: str) -> None:
        """Move to the next line, clear it and print ``text``."""
        term = self.term
        self._write(
            term.move_down(1) + term.move_x(0) + term.clear_eol + text + "\n"
        )

    def clear_screen(self) -> None:
        """Clear from the cursor down and return the cursor home."""
        term = self.term
        self._write(term.clear_eos + term.move_yx(0, 0))

    def read_input(self, prompt: str) -> str:
        """Show ``prompt`` and return the next input line, trimmed."""
        self._write(prompt + "\n")
        return self.input_stream.readline().strip()

    def print_menu(self, items: Iterable[str]) -> None:
        """Print a numbered menu framed by rules."""
        self.print_line(_RULE)
        self.print_line("Select an option:")
        self.print_line(_RULE)
        for number, item in enumerate(items, start=1):
            self.print_line(f"{number}. {item}")
        self.print_line(_RULE)

    def change_text_color(self, color: Color) -> None:
        """Switch the foreground colour for subsequent output."""
        self._write(str(self.term.color(color.value)))

    def _print_colored(self, color: Color, text: str) -> None:
        self.change_text_color(color)
        self.print_line(text)
        self.change_text_color(NORMAL_COLOR)

    def print_warning(self, text: str) -> None:
        self._print_colored(WARNING_COLOR, f"⚠️  {text}")

    def print_error(self, text: str) -> None:
        self._print_colored(DANGER_COLOR, f"❌  {text}")

    def print_info(self, text: str) -> None:
        self._print_colored(INFO_COLOR, f"ℹ️  {text}")