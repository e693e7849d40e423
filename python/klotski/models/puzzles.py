"""Built-in puzzle catalogue."""

from __future__ import annotations

from dataclasses import dataclass

from klotski.models.board import Board

DEFAULT_PUZZLE = "set1-level19"


@dataclass(frozen=True)
class Puzzle:
    slug: str
    title: str
    layout: str

    @property
    def board(self) -> Board:
        return Board.from_string(self.layout)


PUZZLES: dict[str, Puzzle] = {
    p.slug: p
    for p in (
        Puzzle("set1-level15", "Set 1 Level 15", "0112/0113/4567/4867/  99"),
        Puzzle("set1-level18", "Set 1 Level 18", "1223/1224/5678/5679/ aa "),
        Puzzle("set1-level19", "Set 1 Level 19", "1223/1223/4567/899a/8  a"),
    )
}


def get_puzzle(slug: str) -> Puzzle:
    """Look up a built-in puzzle by *slug*."""
    try:
        return PUZZLES[slug]
    except KeyError:
        known = ", ".join(PUZZLES)
        raise KeyError(f"Unknown puzzle {slug!r} (known: {known}).") from None
