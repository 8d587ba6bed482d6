"""Sliding puzzle solver."""

from __future__ import annotations

from npuzzle.engine.solvability import Solvability
from npuzzle.engine.solver.astar import a_star_solve
from npuzzle.engine.solver.dfs import dfs_solve
from npuzzle.models.board import Board
from npuzzle.settings import SEARCH_ORACLE_MAX_SIZE


def _unsolvable(board: Board) -> bool:
    """True when the parity rule rules *board* out before any search.

    Small boards are settled by the search itself, so checking them first
    would only run it twice.
    """
    if board.check_win() or board.size <= SEARCH_ORACLE_MAX_SIZE:
        return False
    return not Solvability.solvable(board)


class Solver:
    """Stateless solver — all methods are static."""

    @staticmethod
    def solve(board: Board, max_expansions: int | None = None) -> list[int] | None:
        """Return a shortest list of swap targets that solves *board*, or ``None``."""
        if board.check_win():
            return []
        if _unsolvable(board):
            return None
        return a_star_solve(board, max_expansions)

    @staticmethod
    def a_star_solve(board: Board, max_expansions: int | None = None) -> list[int] | None:
        if _unsolvable(board):
            return None
        return a_star_solve(board, max_expansions)

    @staticmethod
    def dfs_solve(board: Board, max_expansions: int | None = None) -> list[Board] | None:
        if _unsolvable(board):
            return None
        return dfs_solve(board, max_expansions)

    @staticmethod
    def hint(board: Board) -> int | None:
        """Return the position to swap next, or ``None`` if solved / unsolvable."""
        if board.check_win():
            return None
        steps = Solver.solve(board)
        return steps[0] if steps else None

    @staticmethod
    def is_solvable(board: Board) -> bool:
        """Return True if *board* can reach the goal state."""
        return Solvability.solvable(board)
