"""Board model for the Klotski puzzle.

The board is a fixed 4×5 grid stored row-major as a flat tuple of
single-character labels.  Every block is the set of cells sharing one
label; ``" "`` marks an empty cell.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import StrEnum

COLS = 4
ROWS = 5
CELLS = COLS * ROWS
EMPTY = " "

# Bottom-centre 2×2 region the target block has to reach.
EXIT_CELLS = (13, 14, 17, 18)

State = tuple[str, ...]
Labels = tuple[str, ...]


class Direction(StrEnum):
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"

    def is_edge(self, index: int) -> bool:
        """Is *index* one of the cells on this edge of the board."""
        if self is Direction.LEFT:
            return index % COLS == 0
        if self is Direction.RIGHT:
            return index % COLS == COLS - 1
        if self is Direction.UP:
            return index < COLS
        return index >= CELLS - COLS

    def step(self, index: int) -> int:
        """Return the index of the cell adjacent to *index* in this direction."""
        return index + _OFFSETS[self]

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]


_OFFSETS = {
    Direction.LEFT: -1,
    Direction.RIGHT: 1,
    Direction.UP: -COLS,
    Direction.DOWN: COLS,
}

_OPPOSITES = {
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
}


# -- state helpers ------------------------------------------------------------


def gather_labels(state: Iterable[str]) -> Labels:
    """Return the distinct block labels of *state* in ascending order."""
    return tuple(sorted({c for c in state if c != EMPTY}))


def is_solved(state: State) -> bool:
    """True if one block covers all four exit cells."""
    a, b, c, d = (state[i] for i in EXIT_CELLS)
    return a == b == c == d != EMPTY


def format_state(state: State) -> str:
    """Return *state* as 5 lines of 4 characters."""
    return "\n".join(
        "".join(state[r * COLS : (r + 1) * COLS]) for r in range(ROWS)
    )


@dataclass(frozen=True)
class Board:
    """A Klotski position as handed to and from the solver.

    Block geometry is trusted, not validated: a layout whose labels do not
    form rectangles gives an unspecified state graph.
    """

    cells: State

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_flat(cls, cells: Sequence[str]) -> Board:
        """Create a board from a flat row-major sequence of 20 labels.

        Example::

            Board.from_flat("1223" "1223" "4567" "899a" "8  a")
        """
        if len(cells) != CELLS:
            raise ValueError(
                f"Expected {CELLS} cells for a {COLS}×{ROWS} board, "
                f"got {len(cells)}."
            )
        for c in cells:
            if not isinstance(c, str) or len(c) != 1:
                raise ValueError(f"Cell values must be single characters, got {c!r}.")
        return cls(cells=tuple(cells))

    @classmethod
    def from_string(cls, text: str) -> Board:
        """Create a board from rows separated by ``/`` or newlines.

        Example::

            Board.from_string("1223/1223/4567/899a/8  a")
        """
        rows = text.replace("\n", "/").split("/")
        if len(rows) != ROWS:
            raise ValueError(f"Expected {ROWS} rows, got {len(rows)}.")
        for r, row in enumerate(rows):
            if len(row) != COLS:
                raise ValueError(
                    f"Row {r + 1} must be {COLS} characters wide, got {row!r}."
                )
        return cls.from_flat("".join(rows))

    # -- queries --------------------------------------------------------------

    @property
    def labels(self) -> Labels:
        return gather_labels(self.cells)

    def rows(self) -> list[str]:
        return [
            "".join(self.cells[r * COLS : (r + 1) * COLS]) for r in range(ROWS)
        ]

    def is_solved(self) -> bool:
        return is_solved(self.cells)

    def __str__(self) -> str:
        return format_state(self.cells)
