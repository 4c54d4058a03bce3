"""Tests for the game session dispatcher."""

import io
from pathlib import Path
from random import Random

import pytest

from thegame.commands import Command, CommandName
from thegame.errors import UnparsableInput
from thegame.game.engine import GameEngine
from thegame.main import generate_log_filename, main, run_loop
from thegame.models.game_state import GameStatus
from thegame.models.pile import PileId
from thegame.session import GameSession
from thegame.utils.logger import GameDisplay


@pytest.fixture
def session():
    engine = GameEngine(rng=Random(5))
    engine.new_game(deck=[30, 31, 32, 33, 34, 35, 98, 97, 3, 4, 50, 51])
    return GameSession(engine)


class TestHandleLine:
    """Tests for GameSession.handle_line."""

    def test_draw(self, session):
        """Test drawing through the session."""
        reply = session.handle_line("draw 6")

        assert not reply.is_error
        assert reply.text.startswith("Status: (6)|X X X X|[3, 4, 50, 51, 97, 98]")
        assert session.engine.hand.count() == 6

    def test_play(self, session):
        """Test playing through the session."""
        session.handle_line("draw 6")
        reply = session.handle_line("play 98 up1")

        assert not reply.is_error
        assert "|98 X X X|" in reply.text
        assert "Played 1/2 this turn." in reply.text

    def test_engine_error_is_rendered(self, session):
        """Test that engine errors become messages."""
        session.handle_line("draw 6")
        before = session.engine.snapshot()

        reply = session.handle_line("play 42 up1")

        assert reply.is_error
        assert reply.text == "Error: Card `42` not available."
        assert session.engine.snapshot() == before

    def test_parse_error_is_rendered(self, session):
        """Test that parse errors become messages."""
        reply = session.handle_line("fly away")
        assert reply.is_error
        assert reply.text.startswith("Error: Unknown command")

    def test_unknown_pile(self, session):
        """Test that unknown piles become messages."""
        reply = session.handle_line("play 7 nonexistent")
        assert reply.is_error
        assert "nonexistent" in reply.text

    def test_insufficient_cards(self, session):
        """Test drawing more cards than the deck holds."""
        reply = session.handle_line("draw 13")
        assert reply.is_error
        assert session.engine.deck.count() == 12

    def test_over_capacity_warning(self, session):
        """Test the warning for an overfull hand."""
        reply = session.handle_line("draw 8")
        assert "Warning: holding 8 cards" in reply.text

    def test_loss_is_announced(self, session):
        """Test that the end of the game is announced once."""
        session.handle_line("draw 6")
        for line in ("play 98 up1", "play 97 up2", "play 3 down1", "play 4 down2"):
            session.handle_line(line)

        reply = session.handle_line("end")
        assert "Game lost with 8 cards remaining" in reply.text
        assert session.engine.status == GameStatus.LOST

        reply = session.handle_line("draw 1")
        assert reply.is_error
        assert "Game is over" in reply.text

    def test_new_game(self, session):
        """Test starting a new game deals a hand."""
        reply = session.handle_line("new")

        assert not reply.is_error
        assert session.engine.hand.count() == 6
        assert session.engine.deck.count() == 92
        assert session.engine.piles[PileId.UP1].is_empty()
        assert "(92)" in reply.text

    def test_status_and_help(self, session):
        """Test read-only commands."""
        assert session.handle_line("status").text.startswith("Status: (12)")
        assert "play <card> <pile>" in session.handle_line("help").text

    def test_exit(self, session):
        """Test the exit command."""
        assert session.handle_line("exit").should_exit


class TestRunLoop:
    """Tests for the input loop."""

    def test_runs_until_exit(self, session):
        """Test that the loop keeps going after errors and stops on exit."""
        out = io.StringIO()
        stream = io.StringIO("draw 6\nbogus\n\nplay 98 up1\nexit\ndraw 1\n")

        code = run_loop(session, GameDisplay(out), stream)

        assert code == 0
        assert session.engine.piles[PileId.UP1].top() == 98
        # The line after exit was never read
        assert session.engine.hand.count() == 5
        assert "Error: Unknown command `bogus`." in out.getvalue()

    def test_stops_at_end_of_input(self, session):
        """Test that end of input ends the loop."""
        out = io.StringIO()
        code = run_loop(session, GameDisplay(out), io.StringIO("draw 2\n"))

        assert code == 0
        assert out.getvalue().rstrip().endswith("Bye.")

    def test_read_failure(self, session):
        """Test that a failing input stream ends the loop gracefully."""

        class BrokenStream(io.StringIO):
            def readline(self, *args):
                raise OSError("stream closed")

        code = run_loop(session, GameDisplay(io.StringIO()), BrokenStream())
        assert code == 1


class TestExecute:
    """Tests for GameSession.execute with hand-built commands."""

    def test_draw_without_amount(self, session):
        """Test that a draw command without an amount is rejected."""
        with pytest.raises(UnparsableInput):
            session.execute(Command(CommandName.DRAW))
        assert session.engine.hand.is_empty()

    def test_play_without_pile(self, session):
        """Test that a play command without a pile is rejected."""
        session.handle_line("draw 6")
        with pytest.raises(UnparsableInput):
            session.execute(Command(CommandName.PLAY, card=98))
        assert 98 in session.engine.hand


class TestMain:
    """Tests for the main entry point."""

    @pytest.fixture(autouse=True)
    def stdin(self, monkeypatch):
        monkeypatch.setattr("sys.stdin", io.StringIO("exit\n"))

    def test_hand_size_override(self, capsys):
        """Test that --hand-size changes the opening hand."""
        code = main(["--hand-size", "4", "-s", "1"])

        assert code == 0
        assert "(94)|" in capsys.readouterr().out

    @pytest.mark.parametrize("hand_size", ["0", "-3"])
    def test_invalid_hand_size(self, hand_size, capsys):
        """Test that an unusable hand size is refused before the game starts."""
        code = main(["--hand-size", hand_size])

        assert code == 2
        captured = capsys.readouterr()
        assert "Invalid --hand-size" in captured.err
        assert "Welcome" not in captured.out

    def test_game_log_directory_from_config(self, tmp_path):
        """Test that the config's game log path is a directory of generated files."""
        log_dir = tmp_path / "logs"
        config_path = tmp_path / "config.yaml"
        config_path.write_text(f"game_log:\n  enabled: true\n  output_path: {log_dir}\n")

        code = main(["-c", str(config_path), "-s", "7"])

        assert code == 0
        files = list(log_dir.glob("*_seed7.jsonl"))
        assert len(files) == 1
        assert files[0].read_text().count("\n") == 2

    def test_generate_log_filename(self):
        """Test the generated name sits in the log directory."""
        path = Path(generate_log_filename("logs", 3))

        assert path.parent == Path("logs")
        assert path.name.endswith("_seed3.jsonl")
        assert not generate_log_filename("logs").endswith("_seedNone.jsonl")
