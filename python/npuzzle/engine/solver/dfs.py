"""Exhaustive depth-first search with full state deduplication."""

from __future__ import annotations

import logging
from collections.abc import Iterator

from npuzzle.models.board import Board

logger = logging.getLogger(__name__)


def dfs_solve(board: Board, max_expansions: int | None = None) -> list[Board] | None:
    """Return board snapshots from *board* to the solved board, or ``None``.

    The search keeps an explicit stack and mutates a private copy of the
    board, undoing each swap on backtrack.  States are never revisited, so
    the walk terminates once the reachable component is exhausted.  The
    path is whatever the move order finds first; it is not shortest.
    """
    work = board.copy()
    if work.check_win():
        return [work.copy()]

    visited: set[bytes] = {work.canonical_key()}
    # Each frame pairs the untried moves of a state with the blank position
    # that restores its parent.
    stack: list[tuple[Iterator[int], int | None]] = [(iter(work.get_swappable()), None)]
    trail: list[int] = []
    expanded = 1

    while stack:
        moves, undo = stack[-1]
        target = next(moves, None)
        if target is None:
            stack.pop()
            if undo is not None:
                work.swap(undo)
                trail.pop()
            continue

        came_from = work.get_missing_index()
        work.swap(target)

        if work.check_win():
            trail.append(target)
            logger.debug(
                "DFS solved in %d moves after %d expansions", len(trail), expanded
            )
            return _replay(board, trail)

        key = work.canonical_key()
        if key in visited:
            work.swap(came_from)
            continue
        if max_expansions is not None and expanded >= max_expansions:
            logger.debug("DFS gave up after %d expansions", expanded)
            return None

        visited.add(key)
        expanded += 1
        trail.append(target)
        stack.append((iter(work.get_swappable()), came_from))

    logger.debug("DFS exhausted %d states without reaching the goal", expanded)
    return None


def _replay(board: Board, trail: list[int]) -> list[Board]:
    current = board.copy()
    path = [current.copy()]
    for target in trail:
        current.swap(target)
        path.append(current.copy())
    return path
