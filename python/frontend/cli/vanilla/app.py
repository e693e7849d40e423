"""Vanilla terminal frontend — no third-party dependencies.

Prints progress messages and every board of the optimal solution as plain
text: 5 lines of 4 characters per board, each followed by a blank line.
"""

from __future__ import annotations

from klotski.engine.gamesolver import render_path, solve
from klotski.engine.graphbuilder import build_graph
from klotski.models.board import Board, format_state


def run(board: Board) -> None:
    """Solve *board* and print the solution from start to goal."""
    print("Generating graph...")
    graph = build_graph(board.cells)
    print(f"{len(graph)} vertices found.")

    print("Finding solutions...")
    solution = solve(graph)
    print("Done.")

    for state in render_path(board.cells, solution, graph.labels):
        print(format_state(state))
        print()
