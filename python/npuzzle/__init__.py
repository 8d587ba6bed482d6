"""N-puzzle core: board model, solvability, generation and search solvers."""

from npuzzle.engine.generator import PuzzleGenerator
from npuzzle.engine.solvability import Solvability
from npuzzle.engine.solver import Solver, a_star_solve, dfs_solve, manhattan_distance
from npuzzle.models.board import Board, Direction, Tile, TileKind

__all__ = [
    "Board",
    "Direction",
    "PuzzleGenerator",
    "Solvability",
    "Solver",
    "Tile",
    "TileKind",
    "a_star_solve",
    "dfs_solve",
    "manhattan_distance",
]
