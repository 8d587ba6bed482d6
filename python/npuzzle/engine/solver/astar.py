"""A* search guided by Manhattan distance."""

from __future__ import annotations

import heapq
import itertools
import logging

from npuzzle.engine.solver.heuristics import manhattan_distance
from npuzzle.models.board import Board

logger = logging.getLogger(__name__)

# (g + h, insertion order, board snapshot, swap targets taken so far)
SearchState = tuple[int, int, Board, list[int]]


def a_star_solve(board: Board, max_expansions: int | None = None) -> list[int] | None:
    """Return a shortest list of swap targets that solves *board*.

    Returns ``None`` when the reachable states are exhausted without
    reaching the goal, or when *max_expansions* states have been expanded.
    The caller's board is never mutated.

    Ties on cost are broken by insertion order only, so the particular
    optimal path returned among equals is not part of the contract.
    """
    counter = itertools.count()
    start = board.copy()
    h0 = manhattan_distance(start)
    logger.debug("A* start: %d×%d board, h=%d", start.size, start.size, h0)

    open_heap: list[SearchState] = [(h0, next(counter), start, [])]
    visited: set[bytes] = set()
    expanded = 0

    while open_heap:
        _, _, node, steps = heapq.heappop(open_heap)
        if node.check_win():
            logger.debug("A* solved in %d moves after %d expansions", len(steps), expanded)
            return steps

        key = node.canonical_key()
        if key in visited:
            continue
        visited.add(key)

        if max_expansions is not None and expanded >= max_expansions:
            logger.debug("A* gave up after %d expansions", expanded)
            return None
        expanded += 1

        for target in node.get_swappable():
            child = node.copy()
            child.swap(target)
            if child.canonical_key() in visited:
                continue
            child_steps = steps + [target]
            cost = len(child_steps) + manhattan_distance(child)
            heapq.heappush(open_heap, (cost, next(counter), child, child_steps))

    logger.debug("A* exhausted %d states without reaching the goal", expanded)
    return None
