"""Command dispatch between the input loop and the engine."""

import logging
from dataclasses import dataclass

from thegame.commands import USAGE, Command, CommandName, help_text, parse_command
from thegame.errors import GameError, UnparsableInput
from thegame.game.engine import GameEngine
from thegame.models.game_state import GameSnapshot, GameStatus

logger = logging.getLogger(__name__)


@dataclass
class SessionReply:
    """Text to show for one handled line."""

    text: str
    should_exit: bool = False
    is_error: bool = False


class GameSession:
    """Maps parsed commands onto calls of a single GameEngine.

    The session is the only holder of its engine.
    """

    def __init__(self, engine: GameEngine):
        self.engine = engine

    def handle_line(self, line: str) -> SessionReply:
        """Parse and execute one line of input.

        Errors from parsing or from the engine are rendered, never raised.

        Args:
            line: Raw input line

        Returns:
            SessionReply
        """
        try:
            command = parse_command(line)
            return self.execute(command)
        except GameError as e:
            logger.debug(f"{e.kind.value}: {e.message}")
            return SessionReply(text=f"Error: {e.message}", is_error=True)

    def execute(self, command: Command) -> SessionReply:
        """Execute a parsed command.

        Raises:
            GameError: If the engine rejects the command
        """
        engine = self.engine
        before = engine.status

        if command.name == CommandName.EXIT:
            return SessionReply(text="", should_exit=True)
        if command.name == CommandName.HELP:
            return SessionReply(text=help_text())
        if command.name == CommandName.STATUS:
            return SessionReply(text=self.render(engine.snapshot()))

        if command.name == CommandName.NEW:
            engine.new_game(deal=True)
            before = GameStatus.FRESH
        elif command.name == CommandName.DRAW:
            if command.amount is None:
                raise UnparsableInput(f"Usage: {USAGE[command.name]}")
            engine.draw(command.amount)
        elif command.name == CommandName.PLAY:
            if command.card is None or command.pile is None:
                raise UnparsableInput(f"Usage: {USAGE[command.name]}")
            engine.play(command.card, command.pile)
        elif command.name == CommandName.END:
            engine.end_turn()

        snapshot = engine.snapshot()
        lines = [self.render(snapshot)]
        if snapshot.status.is_terminal and not before.is_terminal:
            lines.append(self.render_result(snapshot))
        return SessionReply(text="\n".join(lines))

    def render(self, snapshot: GameSnapshot) -> str:
        """Render the status line and turn hints."""
        lines = [f"Status: {snapshot}"]
        if snapshot.status == GameStatus.IN_PROGRESS:
            lines.append(
                f"Played {snapshot.plays_this_turn}/{snapshot.required_plays} this turn."
            )
        if snapshot.over_capacity:
            lines.append(
                f"Warning: holding {len(snapshot.hand)} cards, "
                f"hand capacity is {snapshot.hand_size}."
            )
        return "\n".join(lines)

    def render_result(self, snapshot: GameSnapshot) -> str:
        """Render the end-of-game message."""
        if snapshot.status == GameStatus.WON:
            return "You won! Every card has been placed."
        remaining = snapshot.deck_size + len(snapshot.hand)
        return f"No legal move left. Game lost with {remaining} cards remaining."
