"""Move validation for card plays."""

from dataclasses import dataclass

from thegame.errors import ErrorKind, UnknownPile
from thegame.models.card import Card, Hand
from thegame.models.pile import Pile, PileId


@dataclass
class ValidationResult:
    """Result of move validation."""

    is_valid: bool
    error: ErrorKind = ErrorKind.NONE
    error_message: str = ""
    pile_id: PileId | None = None


class MoveValidator:
    """Validates card plays against the hand and the piles."""

    def validate_play(
        self,
        card: Card,
        pile_id: PileId | str,
        hand: Hand,
        piles: dict[PileId, Pile],
    ) -> ValidationResult:
        """Validate playing a card on a pile.

        Checks are made in order: pile name, hand ownership, placement rule.

        Args:
            card: Card to play
            pile_id: Target pile (PileId or its name)
            hand: Player's current hand
            piles: The four piles

        Returns:
            ValidationResult (pile_id is resolved when the pile exists)
        """
        try:
            resolved = PileId.parse(pile_id)
        except UnknownPile as e:
            return ValidationResult(
                is_valid=False,
                error=ErrorKind.UNKNOWN_PILE,
                error_message=e.message,
            )

        if not hand.contains(card):
            return ValidationResult(
                is_valid=False,
                error=ErrorKind.CARD_NOT_IN_HAND,
                error_message=f"Card `{card}` not available.",
                pile_id=resolved,
            )

        pile = piles[resolved]
        if not pile.can_place(card):
            return ValidationResult(
                is_valid=False,
                error=ErrorKind.ILLEGAL_MOVE,
                error_message=(
                    f"Card `{card}` cannot be played on `{resolved.value}` "
                    f"(top: {pile})."
                ),
                pile_id=resolved,
            )

        return ValidationResult(is_valid=True, pile_id=resolved)

    def legal_placements(
        self,
        hand: Hand,
        piles: dict[PileId, Pile],
    ) -> list[tuple[Card, PileId]]:
        """List every (card, pile) placement currently allowed.

        Args:
            hand: Player's current hand
            piles: The four piles

        Returns:
            Placements ordered by card, then pile
        """
        return [
            (card, pile_id)
            for card in hand.to_list()
            for pile_id, pile in piles.items()
            if pile.can_place(card)
        ]

    def has_legal_placement(self, hand: Hand, piles: dict[PileId, Pile]) -> bool:
        """Check if any card in hand can be played."""
        return any(
            pile.can_place(card) for card in hand for pile in piles.values()
        )
