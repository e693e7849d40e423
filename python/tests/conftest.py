"""Shared fixtures.

The state graph of a full puzzle takes a few seconds to build, so the
default puzzle's graph and solution are built once per session.
"""

from __future__ import annotations

import pytest

from klotski.engine.gamesolver import Solution, solve
from klotski.engine.graphbuilder import Graph, build_graph
from klotski.models.board import Board
from klotski.models.puzzles import DEFAULT_PUZZLE, get_puzzle


@pytest.fixture(scope="session")
def level19() -> Board:
    return get_puzzle(DEFAULT_PUZZLE).board


@pytest.fixture(scope="session")
def level19_graph(level19: Board) -> Graph:
    return build_graph(level19.cells)


@pytest.fixture(scope="session")
def level19_solution(level19_graph: Graph) -> Solution:
    return solve(level19_graph)


@pytest.fixture
def lone_square() -> Board:
    """A single 2×2 block in the top-left corner of an empty board."""
    return Board.from_string("11  /11  /    /    /    ")
