"""Game engine for The Game."""

import logging
from random import Random
from typing import Sequence

from thegame.config import Config
from thegame.errors import GameOver, error_for
from thegame.logging import GameLogger
from thegame.models.card import Card, Deck, Hand
from thegame.models.game_state import GameSnapshot, GameStatus
from thegame.models.pile import Pile, PileId, create_piles

from .validator import MoveValidator

logger = logging.getLogger(__name__)


class GameEngine:
    """Owns one game: the deck, the hand and the four piles.

    Every mutation of the game goes through this class. Failing operations
    raise a GameError before anything is changed.
    """

    def __init__(
        self,
        config: Config | None = None,
        rng: Random | None = None,
        game_logger: GameLogger | None = None,
    ):
        """Initialize game engine.

        Args:
            config: Configuration (uses defaults if not provided)
            rng: Random source used to shuffle the deck
            game_logger: GameLogger instance for detailed logging
        """
        self.config = config or Config()
        self.rules = self.config.rules
        self.rng = rng or Random()
        self.game_logger = game_logger

        self.validator = MoveValidator()

        self.deck = Deck()
        self.hand = Hand()
        self.piles: dict[PileId, Pile] = self._create_piles()

        self.status = GameStatus.FRESH
        self.game_number = 0
        self.turn_number = 0
        self.plays_this_turn = 0

        self.new_game()

    def _create_piles(self) -> dict[PileId, Pile]:
        return create_piles(self.rules.max_card, self.rules.jump_distance)

    def new_game(
        self,
        deck: Sequence[Card] | None = None,
        deal: bool = False,
    ) -> None:
        """Start a new game, discarding the current one.

        Args:
            deck: Explicit deck order (top card last). If None, the full card
                range is shuffled with the engine's random source.
            deal: If True, draw an opening hand right away.
        """
        if deck is None:
            self.deck = Deck.shuffled(self.rules.min_card, self.rules.max_card, self.rng)
        else:
            if len(set(deck)) != len(deck):
                raise ValueError("Deck must not contain duplicate cards")
            self.deck = Deck(deck)

        self.hand = Hand()
        self.piles = self._create_piles()
        self.status = GameStatus.FRESH
        self.game_number += 1
        self.turn_number = 1
        self.plays_this_turn = 0

        logger.info(f"Game {self.game_number} started with {self.deck.count()} cards")

        if self.game_logger:
            self.game_logger.log_game_start(self.game_number, self.snapshot())

        # An empty deck is already won
        self._update_status()

        if deal and not self.status.is_terminal:
            self.deal()

    def deal(self) -> list[Card]:
        """Draw the opening hand (limited by the deck size)."""
        return self.draw(min(self.rules.hand_size, self.deck.count()))

    def draw(self, amount: int) -> list[Card]:
        """Draw cards from the deck into the hand.

        Args:
            amount: Number of cards to draw

        Returns:
            Cards drawn

        Raises:
            GameOver: If the game has ended
            InsufficientCards: If the deck holds fewer than `amount` cards
        """
        self._check_not_over()

        cards = self.deck.draw(amount)
        for card in cards:
            self.hand.add(card)

        if cards and self.status == GameStatus.FRESH:
            self.status = GameStatus.IN_PROGRESS

        logger.debug(f"Drew {len(cards)} cards, {self.deck.count()} left in deck")

        if self.game_logger:
            self.game_logger.log_draw(
                self.game_number, self.turn_number, cards, self.snapshot()
            )

        self._update_status()
        return cards

    def play(self, card: Card, pile_id: PileId | str) -> None:
        """Play a card from the hand onto a pile.

        Args:
            card: Card to play
            pile_id: Target pile (PileId or its name)

        Raises:
            GameOver: If the game has ended
            UnknownPile: If pile_id is not one of the four piles
            CardNotInHand: If the card is not in the hand
            IllegalMove: If the card breaks the pile's rule
        """
        self._check_not_over()

        validation = self.validator.validate_play(card, pile_id, self.hand, self.piles)
        if not validation.is_valid:
            raise error_for(validation.error, validation.error_message)

        target = PileId.parse(pile_id)

        self.hand.remove(card)
        self.piles[target].place(card)
        self.plays_this_turn += 1

        logger.debug(f"Played {card} on {target.value}")

        if self.game_logger:
            self.game_logger.log_play(
                self.game_number, self.turn_number, card, target, self.snapshot()
            )

        self._update_status()

    def end_turn(self) -> list[Card]:
        """End the turn and refill the hand up to its capacity.

        Drawing fewer cards than needed because the deck runs short is not
        an error.

        Returns:
            Cards drawn

        Raises:
            GameOver: If the game has ended
        """
        self._check_not_over()

        missing = max(self.rules.hand_size - self.hand.count(), 0)
        cards = self.deck.draw(min(missing, self.deck.count()))
        for card in cards:
            self.hand.add(card)

        plays = self.plays_this_turn
        if cards and self.status == GameStatus.FRESH:
            self.status = GameStatus.IN_PROGRESS

        logger.debug(
            f"Turn {self.turn_number} ended after {plays} plays, drew {len(cards)} cards"
        )

        if self.game_logger:
            self.game_logger.log_turn_end(
                self.game_number, self.turn_number, plays, cards, self.snapshot()
            )

        self.turn_number += 1
        self.plays_this_turn = 0
        self._update_status()
        return cards

    def required_plays(self) -> int:
        """Minimum number of cards to play this turn."""
        if self.deck.is_empty():
            return self.rules.min_plays_empty_deck
        return self.rules.min_plays

    def is_won(self) -> bool:
        """Check if every card has been placed."""
        return self.deck.is_empty() and self.hand.is_empty()

    def is_lost(self) -> bool:
        """Check if the required plays for this turn cannot be made.

        The hand must still hold enough cards for the remaining plays and
        none of them may be placeable.
        """
        if self.is_won() or self.hand.is_empty():
            return False
        if self.plays_this_turn >= self.required_plays():
            return False
        if self.hand.count() < self.required_plays() - self.plays_this_turn:
            return False
        return not self.validator.has_legal_placement(self.hand, self.piles)

    def is_over_capacity(self) -> bool:
        """Check if the hand holds more cards than its capacity."""
        return self.hand.count() > self.rules.hand_size

    def snapshot(self) -> GameSnapshot:
        """Get a read-only view of the current game."""
        return GameSnapshot(
            deck_size=self.deck.count(),
            hand=self.hand.to_list(),
            piles={pile_id: pile.top() for pile_id, pile in self.piles.items()},
            status=self.status,
            plays_this_turn=self.plays_this_turn,
            required_plays=self.required_plays(),
            hand_size=self.rules.hand_size,
        )

    def _check_not_over(self) -> None:
        if self.status.is_terminal:
            raise GameOver(f"Game is over ({self.status.value}), start a new game.")

    def _update_status(self) -> None:
        """Move to a terminal state when the game is decided."""
        if self.status.is_terminal:
            return

        if self.is_won():
            self.status = GameStatus.WON
        elif self.status != GameStatus.FRESH and self.is_lost():
            self.status = GameStatus.LOST
        else:
            return

        logger.info(
            f"Game {self.game_number} {self.status.value} with "
            f"{self.deck.count() + self.hand.count()} cards left"
        )

        if self.game_logger:
            self.game_logger.log_game_end(self.game_number, self.snapshot())
