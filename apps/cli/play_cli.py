"""Console front-end: parse arguments, build a game session and run the command loop. All board logic lives in solver/; this module only parses input and prints results."""

# play_cli.py
# Usage:
#   python -m apps.cli.play_cli --difficulty hard --seed 7
#   python -m apps.cli.play_cli --puzzle "53..7....6..195....98....6.8...6...34..8.3..17...2...6.6....28....419..5....8..79"
#   python -m apps.cli.play_cli --config configs/default.yaml --verbose
from __future__ import annotations

import argparse
import logging
import random
import sys

import yaml

from apps.cli.board_renderer import render
from apps.cli.config import DIFFICULTY_NAMES, GameSettings, load_settings
from apps.cli.overlay_renderer import render_board
from apps.cli.session import GameSession, MoveOutcome
from solver.grid import Grid
from solver.rules import find_conflicts
from types_sudoku import Difficulty

log = logging.getLogger(__name__)

HELP = """Commands:
  show                   show the board
  set r c v              put value v (1-9) at row r, column c
  clear r c              clear a cell (unless it is a given)
  hint                   suggest one safe move
  check                  list duplicates on the board
  solve                  solve the board automatically
  reset                  go back to the initial board
  new [easy|medium|hard] start a new game
  export <file.png> [hint] save the board as an image, optionally with a hint
  help                   show this help
  exit | quit            leave"""

SET_MESSAGES = {
    MoveOutcome.GIVEN_CELL: "Cannot change a given cell.",
    MoveOutcome.OCCUPIED: "Cell already filled; clear it first.",
    MoveOutcome.CONFLICT: "Invalid move: breaks a row, column or box.",
}


class CommandError(ValueError):
    """Bad command usage; the message is shown to the player."""


def require_args(parts: list[str], n: int, usage: str) -> None:
    if len(parts) < n:
        raise CommandError(usage)


def parse_index(s: str) -> int:
    """1-based row/column text to a 0-based index."""
    try:
        x = int(s)
    except ValueError:
        x = 0
    if not 1 <= x <= 9:
        raise CommandError("Invalid index: use numbers 1..9.")
    return x - 1


def parse_value(s: str) -> int:
    try:
        v = int(s)
    except ValueError:
        v = 0
    if not 1 <= v <= 9:
        raise CommandError("Invalid value: use 1..9.")
    return v


def describe_issue(issue: dict) -> str:
    if issue["type"] == "given_overwritten":
        return f"given {issue['given']} at {issue['cell']} was changed to {issue['found']}"
    digits = ", ".join(str(d) for d in issue["digits"])
    return f"duplicate {digits} in {issue['unit']}: {', '.join(issue['cells'])}"


def execute(session: GameSession, line: str, settings: GameSettings, out) -> bool:
    """Run one command line. Returns False when the loop should stop."""
    parts = line.split()
    if not parts:
        return True
    cmd = parts[0].lower()

    if cmd == "set":
        require_args(parts, 4, "Usage: set <row 1-9> <column 1-9> <value 1-9>")
        r, c, v = parse_index(parts[1]), parse_index(parts[2]), parse_value(parts[3])
        outcome = session.place(r, c, v)
        if outcome in SET_MESSAGES:
            print(SET_MESSAGES[outcome], file=out)
            return True
        print(render(session.current, session.original), file=out)
        if outcome is MoveOutcome.COMPLETED:
            print("\nCongratulations! You completed the Sudoku!", file=out)
            return False
    elif cmd == "clear":
        require_args(parts, 3, "Usage: clear <row 1-9> <column 1-9>")
        r, c = parse_index(parts[1]), parse_index(parts[2])
        if session.clear(r, c) is MoveOutcome.GIVEN_CELL:
            print("Cannot clear a given cell.", file=out)
            return True
        print(render(session.current, session.original), file=out)
    elif cmd == "show":
        print(render(session.current, session.original), file=out)
    elif cmd == "hint":
        hint = session.hint()
        if hint is None:
            print("No hint available (the board may be complete or inconsistent).", file=out)
        else:
            print(f"Hint: row {hint.row + 1}, column {hint.col + 1} = {hint.value}", file=out)
    elif cmd == "check":
        report = session.check()
        if report["ok"]:
            print("No problems found.", file=out)
        for issue in report["issues"]:
            print(describe_issue(issue), file=out)
    elif cmd == "solve":
        if session.solve():
            print(render(session.current, session.original), file=out)
            print("Board solved by the solver.", file=out)
        else:
            print("This board has no solution.", file=out)
    elif cmd == "reset":
        session.reset()
        print(render(session.current, session.original), file=out)
    elif cmd == "new":
        difficulty = Difficulty.from_string(parts[1]) if len(parts) >= 2 else Difficulty.MEDIUM
        print(f"Generating a new Sudoku ({difficulty.name.lower()})...", file=out)
        session.new_game(difficulty)
        print(render(session.current, session.original), file=out)
    elif cmd == "export":
        require_args(parts, 2, "Usage: export <file.png> [hint]")
        hint = session.hint() if len(parts) >= 3 and parts[2].lower() == "hint" else None
        path = render_board(session.current, session.original, parts[1], hint=hint, cell_px=settings.cell_px)
        print(f"Saved board image to {path}", file=out)
    elif cmd == "help":
        print(HELP, file=out)
    elif cmd in ("exit", "quit"):
        print("Bye!", file=out)
        return False
    else:
        print("Unknown command. Type 'help' to see the commands.", file=out)
    return True


def run(session: GameSession, settings: GameSettings, stdin=None, out=None) -> None:
    stdin = stdin or sys.stdin
    out = out or sys.stdout
    print(render(session.current, session.original), file=out)
    print(HELP, file=out)
    while True:
        out.write("\n" + settings.prompt)
        out.flush()
        line = stdin.readline()
        if not line:
            log.debug("end of input, leaving")
            break
        try:
            if not execute(session, line, settings, out):
                break
        except CommandError as e:
            print(e, file=out)
        except OSError as e:
            # export to an unwritable path
            print(f"Could not write file: {e}", file=out)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Play Sudoku in the terminal.")
    ap.add_argument("--difficulty", type=str.lower, default=None, choices=list(DIFFICULTY_NAMES))
    ap.add_argument("--seed", type=int, default=None)
    ap.add_argument("--puzzle", type=str, default=None, help="81-char start grid ('.' or '0' for blanks)")
    ap.add_argument("--config", type=str, default=None, help="YAML settings file")
    ap.add_argument("--max_attempts", type=int, default=None)
    ap.add_argument("--verbose", action="store_true")
    return ap


def main(argv=None, stdin=None, out=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    out = out or sys.stdout

    try:
        settings = load_settings(
            args.config,
            difficulty=args.difficulty,
            seed=args.seed,
            max_attempts=args.max_attempts,
        )
    except (OSError, ValueError, yaml.YAMLError) as e:
        print(f"config error: {e}", file=sys.stderr)
        return 2

    rng = random.Random(settings.seed)
    if args.puzzle:
        try:
            puzzle = Grid.from_string(args.puzzle)
        except ValueError as e:
            print(f"bad --puzzle: {e}", file=sys.stderr)
            return 2
        conflicts = find_conflicts(puzzle)
        if conflicts:
            summary = "; ".join(describe_issue(issue) for issue in conflicts)
            print(f"bad --puzzle: givens conflict: {summary}", file=sys.stderr)
            return 2
        session = GameSession(puzzle, rng, settings.max_attempts)
    else:
        print(f"Generating a starting puzzle ({settings.difficulty})...", file=out)
        session = GameSession.generated(settings.level, rng, settings.max_attempts)

    log.info("starting with %d givens", session.original.given_count())
    run(session, settings, stdin=stdin, out=out)
    return 0


if __name__ == "__main__":
    sys.exit(main())
