"""Single-block slides on the 4×5 board."""

from __future__ import annotations

from klotski.engine.normalizer import normalize
from klotski.models.board import EMPTY, Direction, Labels, State


def block_cells(state: State) -> dict[str, list[int]]:
    """Map every block label in *state* to its cell indices."""
    blocks: dict[str, list[int]] = {}
    for i, c in enumerate(state):
        if c != EMPTY:
            blocks.setdefault(c, []).append(i)
    return blocks


def can_slide(
    state: State, label: str, cells: list[int], direction: Direction
) -> bool:
    """Can the block *label* occupying *cells* move one cell in *direction*."""
    for i in cells:
        if direction.is_edge(i):
            return False
        target = state[direction.step(i)]
        if target != EMPTY and target != label:
            return False
    return True


def slide(
    state: State, label: str, cells: list[int], direction: Direction
) -> State:
    """Return *state* with the block shifted; the move must be legal."""
    board = list(state)
    for i in cells:
        board[i] = EMPTY
    for i in cells:
        board[direction.step(i)] = label
    return tuple(board)


def neighbors(state: State, labels: Labels) -> frozenset[State]:
    """All normalized states one legal slide away from *state*."""
    result: set[State] = set()
    for label, cells in block_cells(state).items():
        for direction in Direction:
            if not can_slide(state, label, cells, direction):
                continue
            result.add(normalize(slide(state, label, cells, direction), labels))
    return frozenset(result)
