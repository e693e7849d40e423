from klotski.engine.gamesolver.path import SolutionPath, render_path
from klotski.engine.gamesolver.solver import Solution, Solver, solve

__all__ = ["Solution", "SolutionPath", "Solver", "render_path", "solve"]
