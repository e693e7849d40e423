"""Rich terminal frontend — coloured tables and panels.

Uses the ``rich`` library for styled output while sharing the same
engine as the vanilla CLI.
"""

from __future__ import annotations

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from klotski.engine.gamesolver import render_path, solve
from klotski.engine.graphbuilder import build_graph
from klotski.models.board import COLS, EMPTY, ROWS, Board, State, is_solved

console = Console()

_PALETTE = (
    "red",
    "green",
    "yellow",
    "blue",
    "magenta",
    "cyan",
    "bright_red",
    "bright_green",
    "bright_yellow",
    "bright_blue",
    "bright_magenta",
    "bright_cyan",
)


# -- board rendering ----------------------------------------------------------


def _render_board(state: State) -> Table:
    """Return a Rich Table representing the 4×5 grid."""
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(COLS):
        table.add_column(width=1, justify="center")

    solved = is_solved(state)
    for r in range(ROWS):
        cells: list[str] = []
        for c in state[r * COLS : (r + 1) * COLS]:
            if c == EMPTY:
                cells.append("[dim]·[/dim]")
            elif solved:
                cells.append(f"[bold green]{c}[/bold green]")
            else:
                colour = _PALETTE[ord(c) % len(_PALETTE)]
                cells.append(f"[bold {colour}]{c}[/bold {colour}]")
        table.add_row(*cells)

    return table


def _render_step(state: State, step: int, total: int) -> Panel:
    caption = Text()
    caption.append(f"Move {step}/{total}", style="bold cyan")
    if is_solved(state):
        caption.append("  solved", style="bold green")

    return Panel(
        Group(Align.center(_render_board(state)), Align.center(caption)),
        border_style="green" if is_solved(state) else "bright_blue",
        padding=(0, 2),
    )


# -- public entry point -------------------------------------------------------


def run(board: Board) -> None:
    """Solve *board* and print every step of the solution."""
    with console.status("[bold cyan]Generating graph...[/bold cyan]"):
        graph = build_graph(board.cells)
    console.print(f"[cyan]{len(graph)}[/cyan] vertices found.")

    with console.status("[bold cyan]Finding solutions...[/bold cyan]"):
        solution = solve(graph)
    console.print("[green]Done.[/green]")

    path = render_path(board.cells, solution, graph.labels)
    total = path.moves

    console.print()
    console.print(Align.center(Text("Klotski  4\u00d75", style="bold")))
    for step, state in enumerate(path):
        console.print(Align.center(_render_step(state, step, total)))

    console.print(
        Align.center(Text(f"Solved in {total} moves!", style="bold green"))
    )
