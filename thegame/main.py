"""Main entry point for The Game."""

import argparse
import logging
import sys
from datetime import datetime
from pathlib import Path
from random import Random
from typing import TextIO

from pydantic import ValidationError

from thegame import __version__
from thegame.config import RulesConfig, load_config
from thegame.game.engine import GameEngine
from thegame.logging import GameLogConfig, GameLogger
from thegame.session import GameSession
from thegame.utils.logger import GameDisplay, setup_logging

logger = logging.getLogger(__name__)


def generate_log_filename(log_dir: str, seed: int | None = None) -> str:
    """Generate log filename with timestamp.

    Format: {ISO timestamp}[_seed{seed}].jsonl

    Args:
        log_dir: Directory for log files.
        seed: Shuffle seed, if one was given.

    Returns:
        Full path to log file.
    """
    timestamp = datetime.now().strftime("%Y%m%dT%H%M%S")
    suffix = f"_seed{seed}" if seed is not None else ""
    return str(Path(log_dir) / f"{timestamp}{suffix}.jsonl")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="The Game: play cards 2-99 onto two ascending and two descending piles"
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        help="Path to config file (YAML)",
    )
    parser.add_argument(
        "-s",
        "--seed",
        type=int,
        help="Seed for the deck shuffle",
    )
    parser.add_argument(
        "--hand-size",
        type=int,
        help="Hand capacity (overrides config)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output",
    )
    parser.add_argument(
        "--game-log",
        type=Path,
        help="Directory for game log files (filename auto-generated)",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser.parse_args(argv)


def run_loop(session: GameSession, display: GameDisplay, stream: TextIO) -> int:
    """Read commands until exit or end of input.

    Returns:
        Exit code (0 for success)
    """
    while True:
        display.print_prompt()
        try:
            line = stream.readline()
        except OSError as e:
            logger.error(f"Failed to read input: {e}")
            return 1

        if not line:
            # End of input
            display.print_goodbye()
            return 0

        if not line.strip():
            continue

        reply = session.handle_line(line)
        display.print_message(reply.text)
        if reply.should_exit:
            display.print_goodbye()
            return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point.

    Returns:
        Exit code (0 for success)
    """
    args = parse_args(argv)

    # Load config
    config = load_config(args.config)

    # Apply command-line overrides
    if args.hand_size is not None:
        try:
            config.rules = RulesConfig.model_validate(
                {**config.rules.model_dump(), "hand_size": args.hand_size}
            )
        except ValidationError as e:
            message = e.errors()[0]["msg"]
            print(f"Invalid --hand-size {args.hand_size}: {message}", file=sys.stderr)
            return 2
    if args.verbose:
        config.logging.level = "DEBUG"

    # Setup logging
    setup_logging(config.logging.level)

    # Game log: CLI directory overrides the config file directory
    game_log_config = config.game_log
    if args.game_log is not None:
        game_log_config = GameLogConfig(enabled=True, output_path=str(args.game_log))
    if game_log_config.enabled:
        game_log_config = GameLogConfig(
            enabled=True,
            output_path=generate_log_filename(game_log_config.output_path, args.seed),
        )

    display = GameDisplay()
    display.print_banner(__version__)
    if game_log_config.enabled:
        print(f"Game log: {game_log_config.output_path}")

    try:
        with GameLogger(game_log_config) as game_logger:
            engine = GameEngine(config, Random(args.seed), game_logger)
            engine.deal()
            session = GameSession(engine)
            display.print_status(engine.snapshot())

            return run_loop(session, display, sys.stdin)

    except KeyboardInterrupt:
        print("\nInterrupted by user")
        return 1
    except Exception as e:
        logger.exception(f"Game error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
