"""Command parsing for the interactive loop."""

from dataclasses import dataclass
from enum import Enum

from thegame.errors import UnparsableInput
from thegame.models.card import Card
from thegame.models.pile import PileId


class CommandName(str, Enum):
    """Recognized commands."""

    NEW = "new"
    DRAW = "draw"
    PLAY = "play"
    END = "end"
    STATUS = "status"
    HELP = "help"
    EXIT = "exit"


ALIASES = {
    "quit": CommandName.EXIT,
    "q": CommandName.EXIT,
    "p": CommandName.PLAY,
    "d": CommandName.DRAW,
    "e": CommandName.END,
    "s": CommandName.STATUS,
}

# Number of arguments expected by each command
ARITY = {
    CommandName.NEW: 0,
    CommandName.DRAW: 1,
    CommandName.PLAY: 2,
    CommandName.END: 0,
    CommandName.STATUS: 0,
    CommandName.HELP: 0,
    CommandName.EXIT: 0,
}

USAGE = {
    CommandName.NEW: "new                 start a new game",
    CommandName.DRAW: "draw <n>            draw n cards from the deck",
    CommandName.PLAY: "play <card> <pile>  play a card on up1, up2, down1 or down2",
    CommandName.END: "end                 end the turn and refill the hand",
    CommandName.STATUS: "status              show the table",
    CommandName.HELP: "help                show this help",
    CommandName.EXIT: "exit                leave the game",
}


@dataclass(frozen=True)
class Command:
    """A parsed command."""

    name: CommandName
    amount: int | None = None
    card: Card | None = None
    pile: PileId | None = None


def parse_command(line: str) -> Command:
    """Parse one line of user input.

    Args:
        line: Raw input line

    Returns:
        Parsed Command

    Raises:
        UnparsableInput: If the line is not a valid command
        UnknownPile: If a play names a pile that does not exist
    """
    tokens = line.split()
    if not tokens:
        raise UnparsableInput("Empty command.")

    word = tokens[0].lower()
    args = tokens[1:]
    name = ALIASES.get(word)
    if name is None:
        try:
            name = CommandName(word)
        except ValueError:
            raise UnparsableInput(f"Unknown command `{tokens[0]}`.") from None

    if len(args) != ARITY[name]:
        raise UnparsableInput(f"Usage: {USAGE[name]}")

    if name == CommandName.DRAW:
        return Command(name, amount=_parse_number(args[0]))

    if name == CommandName.PLAY:
        # Unknown pile names are rejected here with UnknownPile
        return Command(name, card=_parse_number(args[0]), pile=PileId.parse(args[1]))

    return Command(name)


def _parse_number(token: str) -> int:
    try:
        value = int(token)
    except ValueError:
        raise UnparsableInput(f"`{token}` is not a number.") from None
    if value < 0:
        raise UnparsableInput(f"`{token}` must not be negative.")
    return value


def help_text() -> str:
    """Get the command summary."""
    return "\n".join(USAGE[name] for name in CommandName)
