"""Game state models."""

from enum import Enum

from pydantic import BaseModel, Field

from .card import Card
from .pile import PileId


class GameStatus(str, Enum):
    """Lifecycle of a single game."""

    FRESH = "fresh"  # New game, nothing drawn yet
    IN_PROGRESS = "in_progress"
    WON = "won"  # Deck and hand empty
    LOST = "lost"  # Required plays cannot be made

    @property
    def is_terminal(self) -> bool:
        """Check if the game has ended."""
        return self in (GameStatus.WON, GameStatus.LOST)


class GameSnapshot(BaseModel):
    """Read-only view of a game for rendering."""

    model_config = {"frozen": True}

    deck_size: int
    hand: list[Card] = Field(default_factory=list)
    piles: dict[PileId, Card | None] = Field(default_factory=dict)
    status: GameStatus = GameStatus.FRESH
    plays_this_turn: int = 0
    required_plays: int = 0
    hand_size: int = 6

    @property
    def over_capacity(self) -> bool:
        """Check if the hand holds more cards than its capacity."""
        return len(self.hand) > self.hand_size

    def top(self, pile_id: PileId) -> Card | None:
        """Get the top card of a pile."""
        return self.piles.get(pile_id)

    def __str__(self) -> str:
        tops = " ".join(
            "X" if self.piles.get(p) is None else str(self.piles[p]) for p in PileId
        )
        hand = "[" + ", ".join(str(c) for c in self.hand) + "]"
        return f"({self.deck_size})|{tops}|{hand}"
