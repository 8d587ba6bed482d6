"""Shared helpers for the test suite: fixture loading and a BFS reference."""

from __future__ import annotations

import json
from collections import deque
from pathlib import Path

from npuzzle.models.board import Board

FIXTURES_DIR = Path(__file__).resolve().parent.parent.parent / "fixtures"


# -- fixture loaders ----------------------------------------------------------


def load_boards(max_size: int | None = None, solvable: bool | None = None) -> list[dict]:
    with open(FIXTURES_DIR / "boards.json") as f:
        boards = json.load(f)
    return [
        b for b in boards
        if (max_size is None or b["size"] <= max_size)
        and (solvable is None or b["solvable"] is solvable)
    ]


def ids(board_data: dict) -> str:
    return board_data["id"]


def board_from_data(data: dict) -> Board:
    """Reconstruct a ``Board`` from its JSON representation."""
    return Board.from_flat(data["size"], data["tiles"], data["missing"])


# -- reference search ---------------------------------------------------------


def bfs_distance(board: Board) -> int | None:
    """Shortest number of moves to the solved board, or ``None`` if unreachable.

    Deliberately written against plain tuples rather than ``Board`` so it
    checks the engine instead of sharing its code.
    """
    n = board.size
    start = tuple(t.home_index for t in board.tiles)
    goal = tuple(range(n * n))
    blank = board.missing_index
    q = deque([(start, blank, 0)])
    seen = {start}
    while q:
        s, z, d = q.popleft()
        if s == goal:
            return d
        r, c = divmod(z, n)
        for dr, dc in ((-1, 0), (1, 0), (0, -1), (0, 1)):
            nr, nc = r + dr, c + dc
            if not (0 <= nr < n and 0 <= nc < n):
                continue
            j = nr * n + nc
            lst = list(s)
            lst[z], lst[j] = lst[j], lst[z]
            s2 = tuple(lst)
            if s2 in seen:
                continue
            seen.add(s2)
            q.append((s2, j, d + 1))
    return None


def replay(board: Board, steps: list[int]) -> Board:
    """Apply *steps* to a copy of *board*, asserting each one is a legal move."""
    current = board.copy()
    for i, target in enumerate(steps):
        assert target in current.get_swappable(), (
            f"Step {i} ({target}) is not adjacent to the blank at "
            f"{current.get_missing_index()}"
        )
        current.swap(target)
    return current
