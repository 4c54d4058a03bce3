"""Tests for command parsing."""

import pytest

from thegame.commands import Command, CommandName, help_text, parse_command
from thegame.errors import UnknownPile, UnparsableInput
from thegame.models.pile import PileId


class TestParseCommand:
    """Tests for parse_command function."""

    @pytest.mark.parametrize(
        "line,name",
        [
            ("new", CommandName.NEW),
            ("end", CommandName.END),
            ("status", CommandName.STATUS),
            ("help", CommandName.HELP),
            ("exit", CommandName.EXIT),
            ("quit", CommandName.EXIT),
            ("  EXIT \n", CommandName.EXIT),
        ],
    )
    def test_simple_commands(self, line, name):
        """Test commands without arguments."""
        assert parse_command(line) == Command(name)

    def test_draw(self):
        """Test parsing draw."""
        assert parse_command("draw 6\n") == Command(CommandName.DRAW, amount=6)

    def test_play(self):
        """Test parsing play."""
        command = parse_command("play 42 up1")

        assert command.name == CommandName.PLAY
        assert command.card == 42
        assert command.pile == PileId.UP1

    def test_play_alias_and_case(self):
        """Test the short alias and mixed case."""
        command = parse_command("P 7 Down2")
        assert command == Command(CommandName.PLAY, card=7, pile=PileId.DOWN2)

    def test_empty_line(self):
        """Test that an empty line is rejected."""
        with pytest.raises(UnparsableInput):
            parse_command("   ")

    def test_unknown_command(self):
        """Test that unknown commands are rejected."""
        with pytest.raises(UnparsableInput, match="Unknown command"):
            parse_command("jump 5")

    def test_wrong_argument_count(self):
        """Test that missing or extra arguments are rejected."""
        with pytest.raises(UnparsableInput, match="Usage"):
            parse_command("draw")
        with pytest.raises(UnparsableInput):
            parse_command("play 5")
        with pytest.raises(UnparsableInput):
            parse_command("new game")

    def test_not_a_number(self):
        """Test that non-numeric arguments are rejected."""
        with pytest.raises(UnparsableInput, match="not a number"):
            parse_command("draw many")
        with pytest.raises(UnparsableInput):
            parse_command("play five up1")

    def test_negative_number(self):
        """Test that negative numbers are rejected."""
        with pytest.raises(UnparsableInput):
            parse_command("draw -2")

    def test_unknown_pile(self):
        """Test that unknown piles are rejected while parsing."""
        with pytest.raises(UnknownPile):
            parse_command("play 7 nonexistent")


class TestHelpText:
    """Tests for help_text function."""

    def test_lists_every_command(self):
        """Test that help mentions every command."""
        text = help_text()
        for name in CommandName:
            assert name.value in text
