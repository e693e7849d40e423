from klotski.models.board import Board, Direction, State, gather_labels, is_solved
from klotski.models.puzzles import PUZZLES, Puzzle, get_puzzle

__all__ = [
    "Board",
    "Direction",
    "PUZZLES",
    "Puzzle",
    "State",
    "gather_labels",
    "get_puzzle",
    "is_solved",
]
