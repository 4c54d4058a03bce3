#!/usr/bin/env python3
"""Interactive log viewer for The Game logs.

Usage:
    python scripts/log_viewer.py game_log.jsonl
    python scripts/log_viewer.py --plain game_log.jsonl

Keys:
    n: Next step
    p: Previous step
    c: Continuous playback (1 sec interval), any key to stop
    g: Jump to game number
    t: Jump to turn number
    q: Quit
"""

import argparse
import curses
import json
import sys
from dataclasses import dataclass, field
from pathlib import Path

PILE_NAMES = ["up1", "up2", "down1", "down2"]


@dataclass
class TableState:
    """Current table state for display."""

    game: int = 0
    turn: int = 0
    deck: int = 0
    hand: str = ""
    piles: dict[str, int | None] = field(default_factory=dict)
    last_action: str = ""
    result: str = ""


def load_events(path: Path) -> list[dict]:
    """Load all events from JSONL file."""
    events = []
    with open(path, encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if line:
                events.append(json.loads(line))
    return events


def build_states(events: list[dict]) -> list[TableState]:
    """Build displayable states from events."""
    states: list[TableState] = []
    current = TableState()

    for event in events:
        event_type = event.get("type")
        table = event.get("state", {})

        if event_type == "game_start":
            current = TableState(game=event.get("game", 0), turn=1)
            current.last_action = "Game started"

        elif event_type == "draw":
            current.turn = event.get("turn", current.turn)
            cards = event.get("cards", "")
            current.last_action = f"Drew [{cards}]" if cards else "Drew nothing"

        elif event_type == "play":
            current.turn = event.get("turn", current.turn)
            current.last_action = f"Played {event.get('card')} on {event.get('pile')}"

        elif event_type == "turn_end":
            current.turn = event.get("turn", current.turn)
            drawn = event.get("drawn", "")
            current.last_action = (
                f"Turn {current.turn} ended after {event.get('plays', 0)} plays, "
                f"refilled [{drawn}]"
            )

        elif event_type == "game_end":
            current.result = event.get("result", "")
            current.last_action = (
                f"Game {current.result} with {event.get('cards_left', 0)} cards left"
            )

        else:
            continue

        current.deck = table.get("deck", current.deck)
        current.hand = table.get("hand", current.hand)
        current.piles = table.get("piles", current.piles)
        states.append(_copy_state(current))

    return states


def _copy_state(state: TableState) -> TableState:
    """Create a copy of the table state."""
    return TableState(
        game=state.game,
        turn=state.turn,
        deck=state.deck,
        hand=state.hand,
        piles=dict(state.piles),
        last_action=state.last_action,
        result=state.result,
    )


def render_lines(state: TableState, step: int, total: int) -> list[str]:
    """Render a state to text lines."""
    sep = "=" * 60
    result = f"  [{state.result.upper()}]" if state.result else ""
    header = f"Game {state.game} / Turn {state.turn}{result}"
    step_info = f"Step {step + 1}/{total}"

    tops = []
    for name in PILE_NAMES:
        top = state.piles.get(name)
        tops.append(f"{name}: {'X' if top is None else top}")

    return [
        sep,
        f"{header:<48}{step_info:>12}",
        sep,
        f"Deck: {state.deck} cards",
        "Piles: " + "  ".join(tops),
        f"Hand: [{state.hand}]",
        "",
        f"Last: {state.last_action}",
        sep,
    ]


def draw_screen(stdscr, state: TableState, step: int, total: int) -> None:
    """Draw the current state to the screen."""
    stdscr.clear()
    height, width = stdscr.getmaxyx()

    lines = render_lines(state, step, total)
    lines.append("[n]ext [p]rev [c]ontinuous [g]ame [t]urn [q]uit")
    for row, text in enumerate(lines[: height - 1]):
        stdscr.addnstr(row, 0, text, width - 1)

    stdscr.refresh()


def input_number(stdscr, prompt: str) -> int | None:
    """Get a number from the user."""
    height, width = stdscr.getmaxyx()
    stdscr.addnstr(height - 2, 0, prompt, width - 1)
    stdscr.clrtoeol()
    stdscr.refresh()

    curses.echo()
    curses.curs_set(1)
    try:
        inp = stdscr.getstr(height - 2, len(prompt), 10).decode("utf-8")
        return int(inp) if inp.strip() else None
    except (ValueError, curses.error):
        return None
    finally:
        curses.noecho()
        curses.curs_set(0)


def find_game_start(states: list[TableState], game_num: int) -> int | None:
    """Find the step index for the start of a game."""
    for i, s in enumerate(states):
        if s.game == game_num:
            return i
    return None


def find_turn(states: list[TableState], turn_num: int, current_game: int) -> int | None:
    """Find the step index for a specific turn in the current game."""
    for i, s in enumerate(states):
        if s.game == current_game and s.turn == turn_num:
            return i
    return None


def main_loop(stdscr, states: list[TableState]) -> None:
    """Main event loop."""
    curses.curs_set(0)
    stdscr.nodelay(False)
    stdscr.timeout(-1)

    step = 0
    total = len(states)

    while True:
        draw_screen(stdscr, states[step], step, total)

        try:
            key = stdscr.getch()
        except curses.error:
            continue

        if key == ord("q"):
            break
        elif key == ord("n"):
            if step < total - 1:
                step += 1
        elif key == ord("p"):
            if step > 0:
                step -= 1
        elif key == ord("c"):
            # Continuous playback
            stdscr.nodelay(True)
            stdscr.timeout(1000)
            while step < total - 1:
                step += 1
                draw_screen(stdscr, states[step], step, total)
                try:
                    k = stdscr.getch()
                    if k != -1:
                        break
                except curses.error:
                    pass
            stdscr.nodelay(False)
            stdscr.timeout(-1)
        elif key == ord("g"):
            num = input_number(stdscr, "Jump to game: ")
            if num is not None:
                idx = find_game_start(states, num)
                if idx is not None:
                    step = idx
        elif key == ord("t"):
            num = input_number(stdscr, "Jump to turn: ")
            if num is not None:
                current_game = states[step].game
                idx = find_turn(states, num, current_game)
                if idx is not None:
                    step = idx


def main() -> int:
    """Entry point."""
    parser = argparse.ArgumentParser(
        description="Interactive viewer for The Game logs"
    )
    parser.add_argument("logfile", type=Path, help="Path to game log file (JSONL)")
    parser.add_argument(
        "--plain",
        action="store_true",
        help="Print every step instead of starting the interactive viewer",
    )
    args = parser.parse_args()

    if not args.logfile.exists():
        print(f"Error: File not found: {args.logfile}", file=sys.stderr)
        return 1

    events = load_events(args.logfile)
    states = build_states(events)

    if not states:
        print("Error: No states to display", file=sys.stderr)
        return 1

    if args.plain:
        for step, state in enumerate(states):
            print("\n".join(render_lines(state, step, len(states))))
        return 0

    curses.wrapper(lambda stdscr: main_loop(stdscr, states))
    return 0


if __name__ == "__main__":
    sys.exit(main())
