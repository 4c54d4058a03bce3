"""Game logger for detailed game replay."""

import json
from datetime import datetime
from pathlib import Path
from typing import Any, TextIO

from pydantic import BaseModel

from thegame.models.card import Card
from thegame.models.game_state import GameSnapshot
from thegame.models.pile import PileId

from .formatters import format_cards, format_state


class GameLogConfig(BaseModel):
    """Configuration for game logging."""

    enabled: bool = False
    output_path: str = "logs"


class GameLogger:
    """Logger for detailed game events in JSONL format.

    Each line in the output file is a JSON object representing one event.
    This allows step-by-step replay of the game.
    """

    def __init__(self, config: GameLogConfig | None = None):
        """Initialize game logger.

        Args:
            config: Logging configuration. If None, logging is disabled.
        """
        self.config = config or GameLogConfig()
        self._file: TextIO | None = None

    def __enter__(self) -> "GameLogger":
        """Context manager entry."""
        if self.config.enabled and self.config.output_path:
            path = Path(self.config.output_path)
            path.parent.mkdir(parents=True, exist_ok=True)
            self._file = open(path, "a", encoding="utf-8")
        return self

    def __exit__(self, *args: Any) -> None:
        """Context manager exit."""
        self.close()

    def close(self) -> None:
        """Close the log file."""
        if self._file:
            self._file.close()
            self._file = None

    def _write(self, event: dict[str, Any]) -> None:
        """Write an event to the log file.

        Args:
            event: Event dictionary to write as JSON.
        """
        if self._file:
            self._file.write(json.dumps(event, ensure_ascii=False) + "\n")
            self._file.flush()

    def log_game_start(self, game_num: int, snapshot: GameSnapshot) -> None:
        """Log game start with the fresh table.

        Args:
            game_num: Game number.
            snapshot: State right after the deck was shuffled.
        """
        self._write({
            "type": "game_start",
            "timestamp": datetime.now().isoformat(),
            "game": game_num,
            "state": format_state(snapshot),
        })

    def log_draw(
        self,
        game_num: int,
        turn_num: int,
        cards: list[Card],
        snapshot: GameSnapshot,
    ) -> None:
        """Log cards moving from deck to hand.

        Args:
            game_num: Game number.
            turn_num: Turn number within the game.
            cards: Cards drawn.
            snapshot: State after the draw.
        """
        self._write({
            "type": "draw",
            "game": game_num,
            "turn": turn_num,
            "cards": format_cards(cards),
            "state": format_state(snapshot),
        })

    def log_play(
        self,
        game_num: int,
        turn_num: int,
        card: Card,
        pile_id: PileId,
        snapshot: GameSnapshot,
    ) -> None:
        """Log a single card play.

        Args:
            game_num: Game number.
            turn_num: Turn number within the game.
            card: Card played.
            pile_id: Pile the card was placed on.
            snapshot: State after the play.
        """
        self._write({
            "type": "play",
            "game": game_num,
            "turn": turn_num,
            "card": card,
            "pile": pile_id.value,
            "state": format_state(snapshot),
        })

    def log_turn_end(
        self,
        game_num: int,
        turn_num: int,
        plays: int,
        drawn: list[Card],
        snapshot: GameSnapshot,
    ) -> None:
        """Log the end of a turn and the refill draw.

        Args:
            game_num: Game number.
            turn_num: Turn that just ended.
            plays: Cards played during the turn.
            drawn: Cards drawn to refill the hand.
            snapshot: State after the refill.
        """
        self._write({
            "type": "turn_end",
            "game": game_num,
            "turn": turn_num,
            "plays": plays,
            "drawn": format_cards(drawn),
            "state": format_state(snapshot),
        })

    def log_game_end(self, game_num: int, snapshot: GameSnapshot) -> None:
        """Log game end with its result.

        Args:
            game_num: Game number.
            snapshot: Final state.
        """
        self._write({
            "type": "game_end",
            "game": game_num,
            "result": snapshot.status.value,
            "cards_left": snapshot.deck_size + len(snapshot.hand),
            "state": format_state(snapshot),
        })
