#!/usr/bin/env python3
"""Klotski Solver.

Usage::

    python main.py                        # solve the default puzzle
    python main.py -p set1-level15        # solve a built-in puzzle
    python main.py -f rich                # Rich terminal output
    python main.py -b "1223/1223/4567/899a/8  a"
    python main.py --list                 # list built-in puzzles
"""

import importlib
import sys
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from klotski.models.board import Board  # noqa: E402
from klotski.models.puzzles import DEFAULT_PUZZLE, PUZZLES, get_puzzle  # noqa: E402


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


_RUNNERS = {
    Frontend.vanilla: "frontend.cli.vanilla.app",
    Frontend.rich: "frontend.cli.rich.app",
}


# -- helpers ------------------------------------------------------------------


def _print_puzzles() -> None:
    print("\n  === PUZZLES ===\n")
    for slug, puzzle in PUZZLES.items():
        marker = "*" if slug == DEFAULT_PUZZLE else " "
        print(f" {marker} {slug:<14} {puzzle.title}")
        for row in puzzle.board.rows():
            print(f"      |{row}|")
        print()


def _resolve_board(puzzle: str, board: Optional[str]) -> Board:
    if board is not None:
        try:
            return Board.from_string(board)
        except ValueError as exc:
            raise typer.BadParameter(str(exc), param_hint="--board") from exc
    try:
        return get_puzzle(puzzle).board
    except KeyError as exc:
        raise typer.BadParameter(exc.args[0], param_hint="--puzzle") from exc


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    frontend: Frontend = typer.Option(
        Frontend.vanilla, "-f", "--frontend",
        help="Output style.",
    ),
    puzzle: str = typer.Option(
        DEFAULT_PUZZLE, "-p", "--puzzle",
        help="Built-in puzzle to solve (see --list).",
    ),
    board: Optional[str] = typer.Option(
        None, "-b", "--board",
        help="Custom layout, 5 rows of 4 characters separated by '/'. "
        "Space is an empty cell. Overrides --puzzle.",
    ),
    list_puzzles: bool = typer.Option(
        False, "--list",
        help="Show built-in puzzles and exit.",
    ),
) -> None:
    """Find an optimal solution to a Klotski puzzle."""
    if list_puzzles:
        _print_puzzles()
        return

    initial = _resolve_board(puzzle, board)
    mod = importlib.import_module(_RUNNERS[frontend])
    mod.run(board=initial)


if __name__ == "__main__":
    app()
