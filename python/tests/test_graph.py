"""State graph construction."""

from __future__ import annotations

import pytest

from klotski.engine.errors import InvariantError
from klotski.engine.graphbuilder import GraphBuilder, build_graph
from klotski.engine.normalizer import normalize
from klotski.models.board import Board


def test_lone_square_visits_every_position(lone_square: Board) -> None:
    # A 2×2 block fits in 3 columns × 4 rows of positions.
    graph = build_graph(lone_square.cells)
    assert len(graph) == 12
    assert lone_square.cells in graph


def test_two_singles_on_two_cells() -> None:
    # Only the empty-cell pattern matters once the singles are normalized.
    graph = build_graph(Board.from_string("12  /    /    /    /    ").cells)
    assert len(graph) == 20 * 19 // 2


def test_initial_state_is_normalized_first() -> None:
    board = Board.from_string("21  /    /    /    /    ")
    graph = build_graph(board.cells)
    assert normalize(board.cells, graph.labels) in graph
    assert board.cells not in graph


def test_labels_come_from_initial_board(level19_graph) -> None:
    assert level19_graph.labels == tuple("123456789a")


def test_closure(level19_graph) -> None:
    for adjacent in level19_graph.values():
        for state in adjacent:
            assert state in level19_graph


def test_no_self_loops(level19_graph) -> None:
    for state, adjacent in level19_graph.items():
        assert state not in adjacent


def test_contains_start(level19, level19_graph) -> None:
    assert normalize(level19.cells, level19_graph.labels) in level19_graph


def test_graph_is_read_only(lone_square: Board) -> None:
    graph = build_graph(lone_square.cells)
    with pytest.raises(TypeError):
        graph[lone_square.cells] = frozenset()  # type: ignore[index]


def test_builder_rejects_duplicate_vertex(lone_square: Board) -> None:
    builder = GraphBuilder(lone_square.labels)
    builder.insert(lone_square.cells, frozenset())
    with pytest.raises(InvariantError):
        builder.insert(lone_square.cells, frozenset())


def test_builder_expand_skips_known_states(lone_square: Board) -> None:
    builder = GraphBuilder(lone_square.labels)
    frontier = {lone_square.cells}
    builder.expand(frontier)
    assert lone_square.cells in builder
    assert len(frontier) == 2

    while frontier:
        builder.expand(frontier)
    assert len(builder) == 12
    assert len(builder.freeze()) == 12
