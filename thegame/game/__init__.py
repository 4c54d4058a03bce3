"""Game logic."""

from .engine import GameEngine
from .validator import MoveValidator, ValidationResult

__all__ = [
    "GameEngine",
    "MoveValidator",
    "ValidationResult",
]
