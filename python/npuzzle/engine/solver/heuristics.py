"""Admissible cost estimates for the N-puzzle."""

from __future__ import annotations

from npuzzle.models.board import Board


def manhattan_distance(board: Board) -> int:
    """Sum of row and column offsets of every in-play tile from its home cell."""
    n = board.size
    dist = 0
    for idx, tile in enumerate(board.tiles):
        if tile.is_missing:
            continue
        r, c = divmod(idx, n)
        gr, gc = divmod(tile.home_index, n)
        dist += abs(r - gr) + abs(c - gc)
    return dist
