"""Exhaustive construction of the reachable state graph."""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence

from klotski.engine.errors import InvariantError
from klotski.engine.movegen import neighbors
from klotski.engine.normalizer import normalize
from klotski.models.board import Labels, State, gather_labels


class Graph(Mapping[State, frozenset[State]]):
    """Read-only undirected graph: every state maps to its neighbor set."""

    def __init__(
        self, adjacency: dict[State, frozenset[State]], labels: Labels
    ) -> None:
        self._adjacency = adjacency
        self.labels = labels

    def __getitem__(self, state: State) -> frozenset[State]:
        return self._adjacency[state]

    def __iter__(self) -> Iterator[State]:
        return iter(self._adjacency)

    def __len__(self) -> int:
        return len(self._adjacency)

    def __contains__(self, state: object) -> bool:
        return state in self._adjacency


class GraphBuilder:
    """Mutable graph used only while the search is running."""

    def __init__(self, labels: Labels) -> None:
        self.labels = labels
        self._adjacency: dict[State, frozenset[State]] = {}

    def __contains__(self, state: object) -> bool:
        return state in self._adjacency

    def __len__(self) -> int:
        return len(self._adjacency)

    def insert(self, state: State, adjacent: frozenset[State]) -> None:
        if state in self._adjacency:
            raise InvariantError(f"State {''.join(state)!r} expanded twice.")
        self._adjacency[state] = adjacent

    def expand(self, frontier: set[State]) -> None:
        """Pop a state off *frontier*, add it with its edges to the graph and
        queue every neighbor that is not a vertex yet."""
        current = frontier.pop()
        adjacent = neighbors(current, self.labels)
        self.insert(current, adjacent)
        for state in adjacent:
            if state not in self._adjacency:
                frontier.add(state)

    def freeze(self) -> Graph:
        return Graph(dict(self._adjacency), self.labels)


def build_graph(initial: Sequence[str]) -> Graph:
    """Explore every state reachable from *initial* breadth-first."""
    labels = gather_labels(initial)
    builder = GraphBuilder(labels)
    frontier = {normalize(initial, labels)}
    while frontier:
        builder.expand(frontier)
    return builder.freeze()
