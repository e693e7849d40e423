"""Label normalization of board states."""

from __future__ import annotations

from collections.abc import Sequence

from klotski.models.board import EMPTY, Labels, State


def normalize(state: Sequence[str], labels: Labels) -> State:
    """Relabel blocks so they are first encountered in ascending label order.

    Congruent blocks in the same orientation are indistinguishable, so two
    boards that differ only in which label each such block carries collapse
    into the same state.  *labels* are the sorted labels of the initial
    board.  Returns a new tuple; normalizing a normalized state is a no-op.
    """
    cells = list(state)
    cursor = 0
    for i, c in enumerate(cells):
        if cursor == len(labels):
            break
        # Cells before i carry labels in increasing order of first
        # appearance; labels[cursor] is the smallest one not yet seen.
        if c == EMPTY:
            continue
        expected = labels[cursor]
        if c < expected:
            continue
        if c != expected:
            # Neither c nor expected occurs before i.
            for j in range(i, len(cells)):
                if cells[j] == c:
                    cells[j] = expected
                elif cells[j] == expected:
                    cells[j] = c
        cursor += 1
    return tuple(cells)
