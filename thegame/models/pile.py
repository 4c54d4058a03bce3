"""Pile models."""

from enum import Enum

from pydantic import BaseModel, Field

from thegame.errors import IllegalMove, UnknownPile

from .card import MAX_CARD, Card

JUMP_DISTANCE = 10


class Direction(str, Enum):
    """Direction a pile must move in."""

    ASCENDING = "ascending"
    DESCENDING = "descending"


class PileId(str, Enum):
    """The four piles of the table."""

    UP1 = "up1"
    UP2 = "up2"
    DOWN1 = "down1"
    DOWN2 = "down2"

    @classmethod
    def parse(cls, value: "PileId | str") -> "PileId":
        """Resolve a pile identifier.

        Args:
            value: PileId or its name (case-insensitive).

        Returns:
            Matching PileId.

        Raises:
            UnknownPile: If the name matches none of the four piles.
        """
        if isinstance(value, PileId):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise UnknownPile(f"Pile `{value}` does not exist.") from None

    @property
    def direction(self) -> Direction:
        """Fixed direction of this pile."""
        return PILE_DIRECTIONS[self]


PILE_DIRECTIONS: dict[PileId, Direction] = {
    PileId.UP1: Direction.ASCENDING,
    PileId.UP2: Direction.ASCENDING,
    PileId.DOWN1: Direction.DESCENDING,
    PileId.DOWN2: Direction.DESCENDING,
}


class Pile(BaseModel):
    """Stack of played cards with a fixed direction.

    Only the top card matters for placement. An ascending pile accepts a
    higher card, a descending pile a lower one. Either accepts a card exactly
    `jump_distance` back against its direction once it holds a card.
    """

    direction: Direction
    max_card: int = MAX_CARD
    jump_distance: int = JUMP_DISTANCE
    cards: list[Card] = Field(default_factory=list)

    @property
    def anchor(self) -> int:
        """Logical top of the empty pile."""
        if self.direction == Direction.ASCENDING:
            return 0
        return self.max_card + 1

    def top(self) -> Card | None:
        """Get the top card, or None if nothing has been played."""
        return self.cards[-1] if self.cards else None

    def is_empty(self) -> bool:
        """Check if no card has been played."""
        return not self.cards

    def can_place(self, card: Card) -> bool:
        """Check if card may be placed on this pile."""
        top = self.top()
        if top is None:
            # The back-jump only applies once a card has been placed
            return self._follows_direction(self.anchor, card)
        if self._follows_direction(top, card):
            return True
        if self.direction == Direction.ASCENDING:
            return card == top - self.jump_distance
        return card == top + self.jump_distance

    def place(self, card: Card) -> None:
        """Push card onto the pile.

        Raises:
            IllegalMove: If card breaks the direction-or-jump rule.
        """
        if not self.can_place(card):
            raise IllegalMove(
                f"Card `{card}` cannot be played on {self.direction.value} pile "
                f"with top {self._top_str()}."
            )
        self.cards.append(card)

    def clear(self) -> None:
        """Remove all cards."""
        self.cards = []

    def _follows_direction(self, top: int, card: Card) -> bool:
        if self.direction == Direction.ASCENDING:
            return card > top
        return card < top

    def _top_str(self) -> str:
        top = self.top()
        return "X" if top is None else str(top)

    def __len__(self) -> int:
        return len(self.cards)

    def __str__(self) -> str:
        return self._top_str()


def create_piles(
    max_card: int = MAX_CARD,
    jump_distance: int = JUMP_DISTANCE,
) -> dict[PileId, Pile]:
    """Create the four empty piles in table order."""
    return {
        pile_id: Pile(
            direction=pile_id.direction,
            max_card=max_card,
            jump_distance=jump_distance,
        )
        for pile_id in PileId
    }
