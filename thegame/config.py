"""Configuration management."""

from pathlib import Path

import yaml
from pydantic import BaseModel, model_validator

from thegame.logging.game_logger import GameLogConfig


class RulesConfig(BaseModel):
    """Rules configuration."""

    # Card range dealt into the deck (classic: 2..99, piles anchored at 1 and 100)
    min_card: int = 2
    max_card: int = 99

    # Turn rules
    hand_size: int = 6
    min_plays: int = 2
    min_plays_empty_deck: int = 1

    # Back-jump distance
    jump_distance: int = 10

    @model_validator(mode="after")
    def check_ranges(self) -> "RulesConfig":
        """Reject rule combinations the engine cannot play."""
        if self.min_card < 1:
            raise ValueError("min_card must be at least 1")
        if self.max_card <= self.min_card:
            raise ValueError("max_card must be greater than min_card")
        if self.hand_size < 1:
            raise ValueError("hand_size must be positive")
        if self.jump_distance < 1:
            raise ValueError("jump_distance must be positive")
        if self.min_plays < 0 or self.min_plays_empty_deck < 0:
            raise ValueError("minimum plays must not be negative")
        if self.min_plays_empty_deck > self.min_plays:
            raise ValueError("min_plays_empty_deck must not exceed min_plays")
        return self

    @property
    def card_count(self) -> int:
        """Number of cards in a full deck."""
        return self.max_card - self.min_card + 1


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"


class Config(BaseModel):
    """Root configuration."""

    rules: RulesConfig = RulesConfig()
    logging: LoggingConfig = LoggingConfig()
    game_log: GameLogConfig = GameLogConfig()


def load_config(path: Path | str | None = None) -> Config:
    """Load configuration from YAML file.

    Args:
        path: Path to config file. If None, uses default config.

    Returns:
        Config object.
    """
    if path is None:
        return Config()

    config_path = Path(path)
    if not config_path.exists():
        return Config()

    with open(config_path) as f:
        data = yaml.safe_load(f)

    return Config(**data) if data else Config()
