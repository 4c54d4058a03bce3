"""Card, Deck and Hand models."""

from random import Random
from typing import Iterable, Iterator

from thegame.errors import CardNotInHand, InsufficientCards

# Cards are plain integers; the value is the card's identity.
Card = int

# Classic card range (piles are anchored at 1 and 100)
MIN_CARD = 2
MAX_CARD = 99


class Hand:
    """Unordered set of cards held by the player."""

    def __init__(self, cards: Iterable[Card] | None = None):
        """Initialize hand.

        Args:
            cards: Initial cards.
        """
        self._cards: set[Card] = set(cards) if cards else set()

    def add(self, card: Card) -> None:
        """Add a card to the hand."""
        self._cards.add(card)

    def remove(self, card: Card) -> None:
        """Remove a card from the hand.

        Raises:
            CardNotInHand: If the card is not held.
        """
        if card not in self._cards:
            raise CardNotInHand(f"Card `{card}` not available.")
        self._cards.remove(card)

    def contains(self, card: Card) -> bool:
        """Check if card is in the hand."""
        return card in self._cards

    def clear(self) -> None:
        """Remove all cards."""
        self._cards.clear()

    def count(self) -> int:
        """Get number of cards."""
        return len(self._cards)

    def is_empty(self) -> bool:
        """Check if hand is empty."""
        return len(self._cards) == 0

    def to_list(self) -> list[Card]:
        """Get cards as a sorted list."""
        return sorted(self._cards)

    def copy(self) -> "Hand":
        """Create a copy of this hand."""
        return Hand(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __contains__(self, card: object) -> bool:
        return card in self._cards

    def __str__(self) -> str:
        return "[" + ", ".join(str(c) for c in self.to_list()) + "]"

    def __repr__(self) -> str:
        return f"Hand({self.to_list()!r})"


class Deck:
    """Ordered stack of undrawn cards.

    The top of the deck is the end of the internal list. Cards only ever
    leave the deck.
    """

    def __init__(self, cards: Iterable[Card] | None = None):
        self._cards: list[Card] = list(cards) if cards else []

    @classmethod
    def shuffled(
        cls,
        min_card: int = MIN_CARD,
        max_card: int = MAX_CARD,
        rng: Random | None = None,
    ) -> "Deck":
        """Create a full deck and shuffle it.

        Args:
            min_card: Lowest card value dealt.
            max_card: Highest card value dealt.
            rng: Random source (a fresh Random if not provided).

        Returns:
            Shuffled Deck.
        """
        cards = create_full_deck(min_card, max_card)
        (rng or Random()).shuffle(cards)
        return cls(cards)

    def draw(self, amount: int) -> list[Card]:
        """Remove the topmost `amount` cards.

        Args:
            amount: Number of cards to draw.

        Returns:
            Drawn cards, topmost last.

        Raises:
            InsufficientCards: If fewer than `amount` cards remain. The deck
                is left unchanged.
        """
        if amount < 0:
            raise ValueError(f"Cannot draw a negative amount: {amount}")
        if amount > len(self._cards):
            raise InsufficientCards(
                f"Cannot draw {amount} cards, only {len(self._cards)} left in deck."
            )
        if amount == 0:
            return []

        drawn = self._cards[-amount:]
        del self._cards[-amount:]
        return drawn

    def count(self) -> int:
        """Get number of remaining cards."""
        return len(self._cards)

    def is_empty(self) -> bool:
        """Check if deck is empty."""
        return len(self._cards) == 0

    def to_list(self) -> list[Card]:
        """Get remaining cards in deck order (top last)."""
        return list(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __contains__(self, card: object) -> bool:
        return card in self._cards

    def __repr__(self) -> str:
        return f"Deck({len(self._cards)} cards)"


def create_full_deck(min_card: int = MIN_CARD, max_card: int = MAX_CARD) -> list[Card]:
    """Create the ordered list of every card value in range."""
    return list(range(min_card, max_card + 1))
