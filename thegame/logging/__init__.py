"""Game logging module."""

from .formatters import format_cards, format_piles, format_state
from .game_logger import GameLogConfig, GameLogger

__all__ = [
    "GameLogConfig",
    "GameLogger",
    "format_cards",
    "format_piles",
    "format_state",
]
