"""Shortest-path labelling of the state graph."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator, Mapping

from klotski.engine.errors import InvariantError
from klotski.engine.gamesolver.path import SolutionPath, render_path
from klotski.engine.graphbuilder import Graph, build_graph
from klotski.engine.normalizer import normalize
from klotski.models.board import Board, State, is_solved


class Solution(Mapping[State, State]):
    """Maps every reachable state to a neighbor on a shortest path to a goal.

    Solved states map to themselves.  Iterating ``next`` from any state
    reaches a goal in exactly ``distance(state)`` steps.
    """

    def __init__(self, moves: dict[State, State], distances: dict[State, int]) -> None:
        self._moves = moves
        self._distances = distances

    def __getitem__(self, state: State) -> State:
        return self._moves[state]

    def __iter__(self) -> Iterator[State]:
        return iter(self._moves)

    def __len__(self) -> int:
        return len(self._moves)

    def __contains__(self, state: object) -> bool:
        return state in self._moves

    def next(self, state: State) -> State:
        return self._moves[state]

    def distance(self, state: State) -> int:
        """Number of moves from *state* to the nearest goal."""
        return self._distances[state]

    @property
    def goals(self) -> frozenset[State]:
        return frozenset(s for s, d in self._distances.items() if d == 0)


def solve(graph: Graph) -> Solution:
    """Breadth-first search backwards from all solved states at once."""
    # States are queued in non-decreasing distance from a solved state.
    queue: deque[State] = deque()
    moves: dict[State, State] = {}
    distances: dict[State, int] = {}
    for state in graph:
        if is_solved(state):
            moves[state] = state
            distances[state] = 0
            queue.append(state)

    while queue:
        state = queue.popleft()
        for neighbor in graph[state]:
            if neighbor in moves:
                continue
            moves[neighbor] = state
            distances[neighbor] = distances[state] + 1
            queue.append(neighbor)

    if len(moves) != len(graph):
        raise InvariantError(
            f"{len(graph) - len(moves)} of {len(graph)} states cannot reach a solved state."
        )
    return Solution(moves, distances)


class Solver:
    """Stateless solver — all methods are static."""

    @staticmethod
    def solve(board: Board) -> SolutionPath:
        """Return the optimal sequence of states from *board* to a goal."""
        graph = build_graph(board.cells)
        return render_path(board.cells, solve(graph), graph.labels)

    @staticmethod
    def hint(board: Board) -> Board | None:
        """Return the board after the best next move, or ``None`` if solved."""
        if board.is_solved():
            return None
        graph = build_graph(board.cells)
        solution = solve(graph)
        return Board(solution.next(normalize(board.cells, graph.labels)))

    @staticmethod
    def is_solvable(board: Board) -> bool:
        """Return True if a solved state is reachable from *board*."""
        return any(is_solved(state) for state in build_graph(board.cells))
