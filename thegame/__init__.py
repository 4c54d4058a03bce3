"""Rule engine for The Game, a cooperative pile-placement card game."""

__version__ = "0.1.0"
