"""Decides whether a board can reach its solved arrangement."""

from __future__ import annotations

from bisect import bisect_left, insort

from npuzzle.models.board import Board
from npuzzle.settings import SEARCH_ORACLE_MAX_SIZE


def _is_even(x: int) -> bool:
    return x % 2 == 0


class Solvability:
    """Permutation-parity solvability, with a search fallback for tiny boards."""

    @staticmethod
    def solvable(board: Board) -> bool:
        """Return True if *board* can reach the goal state.

        Boards up to ``SEARCH_ORACLE_MAX_SIZE`` are settled by A*, larger
        ones by :meth:`parity_solvable`.  The board is not modified.
        """
        if board.check_win():
            return True
        if board.size <= SEARCH_ORACLE_MAX_SIZE:
            # Imported here: the solver package depends on this module.
            from npuzzle.engine.solver.astar import a_star_solve

            return a_star_solve(board) is not None
        return Solvability.parity_solvable(board)

    @staticmethod
    def count_inversions(board: Board) -> int:
        """Count pairs of in-play tiles that appear out of their home order."""
        inv = 0
        seen: list[int] = []
        for tile in board.tiles:
            if tile.is_missing:
                continue
            inv += len(seen) - bisect_left(seen, tile.home_index)
            insort(seen, tile.home_index)
        return inv

    @staticmethod
    def parity_solvable(board: Board) -> bool:
        """Closed-form solvability for any board size.

        Odd n: horizontal moves keep the in-play sequence, vertical moves
        jump a tile over an even number of others, so the inversion count
        must stay even.

        Even n: every vertical move flips both the inversion parity and the
        blank's row, so their parities must agree with the solved state.
        The row term is the blank's row distance from its own home row,
        which for a bottom-right blank is its distance to the bottom edge.
        """
        n = board.size
        inversions = Solvability.count_inversions(board)
        if not _is_even(n):
            return _is_even(inversions)
        blank = board.get_missing_index()
        if blank is None:
            raise ValueError("Board has no missing tile; generate or punch one out first.")
        home = board.index_at(blank)
        row_distance = abs(blank // n - home // n)
        return _is_even(inversions) == _is_even(row_distance)
