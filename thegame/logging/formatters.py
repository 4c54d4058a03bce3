"""Formatters for game log output."""

from typing import Iterable

from thegame.models.card import Card
from thegame.models.game_state import GameSnapshot
from thegame.models.pile import PileId


def format_cards(cards: Iterable[Card]) -> str:
    """Format cards to comma-separated string.

    Args:
        cards: Cards to format.

    Returns:
        Comma-separated card values in ascending order (e.g., "3,17,40").
        Empty string if no cards.
    """
    return ",".join(str(c) for c in sorted(cards))


def format_piles(piles: dict[PileId, Card | None]) -> dict[str, Card | None]:
    """Format pile tops keyed by pile name, in table order."""
    return {p.value: piles.get(p) for p in PileId}


def format_state(snapshot: GameSnapshot) -> dict[str, object]:
    """Format the parts of a snapshot needed for replay."""
    return {
        "deck": snapshot.deck_size,
        "hand": format_cards(snapshot.hand),
        "piles": format_piles(snapshot.piles),
    }
