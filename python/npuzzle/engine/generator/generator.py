"""Generates solvable puzzles by walking the blank away from the solved state."""

from __future__ import annotations

import logging
import random

from npuzzle.models.board import Board
from npuzzle.settings import SHUFFLE_MOVES

logger = logging.getLogger(__name__)


class PuzzleGenerator:
    """Creates puzzles that are reachable from the solved state by construction.

    Every step of the shuffle is a legal move, so the result never needs a
    solvability check or a retry.
    """

    @staticmethod
    def generate(
        board: Board,
        moves: int = SHUFFLE_MOVES,
        rng: random.Random | None = None,
    ) -> int:
        """Shuffle *board* in place and return its new ``missing_index``.

        The board is reset to the solved template, a uniformly random cell
        becomes the blank, then *moves* random legal swaps are applied.
        """
        if rng is None:
            rng = random
        board.reset()
        board.punch_out(rng.randrange(len(board.tiles)))
        return PuzzleGenerator.random_walk(board, moves, rng)

    @staticmethod
    def new_puzzle(
        size: int,
        moves: int = SHUFFLE_MOVES,
        rng: random.Random | None = None,
    ) -> Board:
        """Return a freshly generated board of the given size."""
        board = Board.solved(size)
        PuzzleGenerator.generate(board, moves, rng)
        return board

    @staticmethod
    def random_walk(board: Board, moves: int, rng: random.Random) -> int:
        """Apply *moves* uniformly chosen legal swaps to *board* in place."""
        start = board.get_missing_index()
        for _ in range(moves):
            board.swap(rng.choice(board.get_swappable()))
        logger.debug(
            "Shuffled %d×%d board with %d moves, blank %s -> %s",
            board.size, board.size, moves, start, board.get_missing_index(),
        )
        return board.get_missing_index()
