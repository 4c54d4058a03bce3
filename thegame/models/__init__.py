"""Game models."""

from .card import MAX_CARD, MIN_CARD, Card, Deck, Hand, create_full_deck
from .game_state import GameSnapshot, GameStatus
from .pile import Direction, Pile, PileId, create_piles

__all__ = [
    "Card",
    "Deck",
    "Hand",
    "MIN_CARD",
    "MAX_CARD",
    "create_full_deck",
    "Direction",
    "Pile",
    "PileId",
    "create_piles",
    "GameSnapshot",
    "GameStatus",
]
