"""Game error taxonomy."""

from enum import Enum


class ErrorKind(str, Enum):
    """Kind of failure reported by the engine or the command parser."""

    NONE = "none"
    INSUFFICIENT_CARDS = "insufficient_cards"
    UNKNOWN_PILE = "unknown_pile"
    CARD_NOT_IN_HAND = "card_not_in_hand"
    ILLEGAL_MOVE = "illegal_move"
    GAME_OVER = "game_over"
    UNPARSABLE_INPUT = "unparsable_input"


class GameError(Exception):
    """Base class for all game errors."""

    kind: ErrorKind = ErrorKind.NONE

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InsufficientCards(GameError):
    """Raised when a draw asks for more cards than the deck holds."""

    kind = ErrorKind.INSUFFICIENT_CARDS


class UnknownPile(GameError):
    """Raised when a pile identifier is not one of the four piles."""

    kind = ErrorKind.UNKNOWN_PILE


class CardNotInHand(GameError):
    """Raised when a card is not held by the player."""

    kind = ErrorKind.CARD_NOT_IN_HAND


class IllegalMove(GameError):
    """Raised when a card breaks the pile's direction-or-jump rule."""

    kind = ErrorKind.ILLEGAL_MOVE


class GameOver(GameError):
    """Raised when an action is attempted after the game has ended."""

    kind = ErrorKind.GAME_OVER


class UnparsableInput(GameError):
    """Raised when command text cannot be parsed."""

    kind = ErrorKind.UNPARSABLE_INPUT


ERROR_TYPES: dict[ErrorKind, type[GameError]] = {
    ErrorKind.INSUFFICIENT_CARDS: InsufficientCards,
    ErrorKind.UNKNOWN_PILE: UnknownPile,
    ErrorKind.CARD_NOT_IN_HAND: CardNotInHand,
    ErrorKind.ILLEGAL_MOVE: IllegalMove,
    ErrorKind.GAME_OVER: GameOver,
    ErrorKind.UNPARSABLE_INPUT: UnparsableInput,
}


def error_for(kind: ErrorKind, message: str) -> GameError:
    """Build the exception matching an error kind.

    Args:
        kind: Error kind (must not be ErrorKind.NONE).
        message: Human-readable message.

    Returns:
        GameError subclass instance.
    """
    return ERROR_TYPES[kind](message)
