"""Solvability oracle, pinned against an independent breadth-first search."""

from __future__ import annotations

import itertools
import random

import pytest

from npuzzle.engine.generator import PuzzleGenerator
from npuzzle.engine.solvability import Solvability
from npuzzle.models.board import Board
from support import bfs_distance, board_from_data, ids, load_boards

_BOARDS = load_boards()


# -- helpers ------------------------------------------------------------------


def _swap_two_in_play(board: Board) -> Board:
    """Return a copy with two in-play tiles exchanged (flips solvability)."""
    i, j = [k for k in range(len(board.tiles)) if k != board.missing_index][:2]
    twin = board.copy()
    twin.tiles[i], twin.tiles[j] = twin.tiles[j], twin.tiles[i]
    twin.check_invariants()
    return twin


def _all_2x2_boards() -> list[Board]:
    boards: list[Board] = []
    for perm in itertools.permutations(range(4)):
        for blank_home in range(4):
            boards.append(Board.from_flat(2, list(perm), perm.index(blank_home)))
    return boards


# -- fixtures -----------------------------------------------------------------


@pytest.mark.parametrize("board_data", _BOARDS, ids=ids)
def test_parity_rule_on_fixtures(board_data: dict) -> None:
    board = board_from_data(board_data)
    assert Solvability.parity_solvable(board) is board_data["solvable"]


@pytest.mark.parametrize("board_data", _BOARDS, ids=ids)
def test_solvable_on_fixtures(board_data: dict) -> None:
    board = board_from_data(board_data)
    before = board.copy()
    assert Solvability.solvable(board) is board_data["solvable"]
    assert board == before


def test_count_inversions() -> None:
    board = Board.from_flat(3, [3, 0, 2, 6, 1, 4, 7, 8, 5], missing=7)
    assert Solvability.count_inversions(board) == 8
    assert Solvability.count_inversions(Board.solved(4, missing=0)) == 0


# -- agreement with brute force -----------------------------------------------


def test_every_2x2_board_matches_reachability() -> None:
    boards = _all_2x2_boards()
    assert len(boards) == 96
    reachable = 0
    for board in boards:
        expected = bfs_distance(board) is not None
        reachable += expected
        assert Solvability.parity_solvable(board) is expected, str(board)
        assert Solvability.solvable(board) is expected, str(board)
    assert reachable == 48


def test_sampled_3x3_boards_match_reachability() -> None:
    rng = random.Random(2024)
    for sample in range(5):
        flat = list(range(9))
        rng.shuffle(flat)
        board = Board.from_flat(3, flat, rng.randrange(9))
        twin = _swap_two_in_play(board)
        expected = bfs_distance(board) is not None
        assert (bfs_distance(twin) is not None) is not expected
        assert Solvability.parity_solvable(board) is expected
        assert Solvability.parity_solvable(twin) is not expected
        if sample == 0:
            assert Solvability.solvable(board) is expected
            assert Solvability.solvable(twin) is not expected


@pytest.mark.parametrize("blank_home", [0, 5, 10, 15])
@pytest.mark.parametrize("size", [4, 6])
def test_even_board_row_convention(size: int, blank_home: int) -> None:
    """One vertical move away from solved is solvable wherever the blank lives."""
    board = Board.solved(size, missing=blank_home)
    board.swap(blank_home + size if blank_home < size * (size - 1) else blank_home - size)
    assert Solvability.parity_solvable(board)
    assert not Solvability.parity_solvable(_swap_two_in_play(board))


@pytest.mark.parametrize("size", [4, 5, 6])
def test_swapping_two_tiles_flips_large_boards(size: int) -> None:
    rng = random.Random(size)
    for _ in range(10):
        board = PuzzleGenerator.new_puzzle(size, rng=rng)
        assert Solvability.solvable(board)
        assert not Solvability.solvable(_swap_two_in_play(board))


def test_parity_requires_blank() -> None:
    board = Board.solved(4)
    board.tiles[0], board.tiles[1] = board.tiles[1], board.tiles[0]
    with pytest.raises(ValueError):
        Solvability.parity_solvable(board)
