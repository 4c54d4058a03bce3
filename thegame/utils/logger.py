"""Logging utilities and game state display."""

import logging
import sys
from typing import TYPE_CHECKING, TextIO

if TYPE_CHECKING:
    from thegame.models.game_state import GameSnapshot


def setup_logging(level: str = "INFO") -> None:
    """Configure logging for the application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
    """
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


class GameDisplay:
    """Display game state to the console."""

    def __init__(self, out: TextIO | None = None):
        """Initialize display.

        Args:
            out: Output stream (stdout if not provided)
        """
        self.out = out if out is not None else sys.stdout

    def _print(self, text: str = "") -> None:
        print(text, file=self.out)

    def print_separator(self) -> None:
        """Print a separator line."""
        self._print("=" * 60)

    def print_banner(self, version: str) -> None:
        """Print the startup banner."""
        self._print(f"Welcome to The Game v{version}")
        self._print("Type `help` for a list of commands.")
        self.print_separator()

    def print_status(self, snapshot: "GameSnapshot") -> None:
        """Print the status line."""
        self._print(f"Status: {snapshot}")

    def print_message(self, text: str) -> None:
        """Print a reply from the game session."""
        if text:
            self._print(text)

    def print_prompt(self) -> None:
        """Print the input prompt."""
        self.out.write("> ")
        self.out.flush()

    def print_goodbye(self) -> None:
        """Print the exit message."""
        self._print("Bye.")
