"""Walking a solution from the initial state to a goal."""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence

from klotski.engine.normalizer import normalize
from klotski.models.board import Labels, State


class SolutionPath:
    """Restartable sequence of states from the start to a solved state.

    Both ends are included; a board that is already solved yields a
    single state.
    """

    def __init__(self, start: State, solution: Mapping[State, State]) -> None:
        self.start = start
        self._solution = solution

    def __iter__(self) -> Iterator[State]:
        state = self.start
        yield state
        while (following := self._solution[state]) != state:
            state = following
            yield state

    def __len__(self) -> int:
        return sum(1 for _ in self)

    @property
    def moves(self) -> int:
        return len(self) - 1


def render_path(
    initial: Sequence[str], solution: Mapping[State, State], labels: Labels
) -> SolutionPath:
    return SolutionPath(normalize(initial, labels), solution)
