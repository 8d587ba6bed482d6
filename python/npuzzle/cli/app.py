"""Command-line front end: generate, check and solve puzzles.

Usage::

    npuzzle generate -s 4 --seed 7
    npuzzle check -s 2 --tiles "0 1 3 2" --missing 2
    npuzzle solve -s 3 --seed 1 -a dfs
"""

from __future__ import annotations

import logging
import random
import re
from enum import StrEnum
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from npuzzle.cli.render import render_board, render_moves
from npuzzle.engine.generator import PuzzleGenerator
from npuzzle.engine.solvability import Solvability
from npuzzle.engine.solver import Solver
from npuzzle.models.board import Board
from npuzzle.settings import DEFAULT_SIZE, MAX_SIZE, MIN_SIZE, SHUFFLE_MOVES

console = Console()

app = typer.Typer(add_completion=False, help="N-puzzle generator and solver.")


class Algorithm(StrEnum):
    astar = "astar"
    dfs = "dfs"


# -- helpers ------------------------------------------------------------------


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _parse_tiles(raw: str) -> list[int]:
    try:
        return [int(v) for v in re.split(r"[\s,]+", raw.strip()) if v]
    except ValueError as exc:
        raise typer.BadParameter(
            f"Tiles must be integers separated by spaces or commas, got {raw!r}."
        ) from exc


def _load_board(
    size: int,
    tiles: str | None,
    missing: int | None,
    moves: int,
    seed: int | None,
) -> Board:
    """Build the board from ``--tiles``/``--missing`` or generate one."""
    if tiles is None:
        return PuzzleGenerator.new_puzzle(size, moves, random.Random(seed))
    if missing is None:
        raise typer.BadParameter("--missing is required together with --tiles.")
    try:
        return Board.from_flat(size, _parse_tiles(tiles), missing)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc


# -- commands -----------------------------------------------------------------


@app.callback()
def main(
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log search progress.",
    ),
) -> None:
    """N-puzzle generator and solver."""
    _configure_logging(verbose)


@app.command()
def generate(
    size: int = typer.Option(
        DEFAULT_SIZE, "-s", "--size",
        min=MIN_SIZE, max=MAX_SIZE,
        help=f"Grid size ({MIN_SIZE}-{MAX_SIZE}).",
    ),
    moves: int = typer.Option(
        SHUFFLE_MOVES, "--moves", min=0,
        help="Random moves applied from the solved state.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed for a reproducible shuffle.",
    ),
) -> None:
    """Print a freshly shuffled, always solvable board."""
    board = PuzzleGenerator.new_puzzle(size, moves, random.Random(seed))
    console.print(render_board(board))
    console.print(f"Missing index: [bold]{board.get_missing_index()}[/bold]")
    console.print("Tiles: " + " ".join(str(t.home_index) for t in board.tiles))


@app.command()
def check(
    size: int = typer.Option(
        ..., "-s", "--size",
        min=MIN_SIZE, max=MAX_SIZE,
        help=f"Grid size ({MIN_SIZE}-{MAX_SIZE}).",
    ),
    tiles: str = typer.Option(
        ..., "--tiles",
        help="Row-major home indices, e.g. \"0 1 3 2\".",
    ),
    missing: int = typer.Option(
        ..., "--missing",
        help="Position of the blank within --tiles.",
    ),
) -> None:
    """Report whether an assembled board can be solved."""
    board = _load_board(size, tiles, missing, 0, None)
    console.print(render_board(board))
    if not Solvability.solvable(board):
        console.print("[red]Unsolvable[/red]")
        raise typer.Exit(code=1)
    console.print("[green]Solvable[/green]")


@app.command()
def solve(
    size: int = typer.Option(
        DEFAULT_SIZE, "-s", "--size",
        min=MIN_SIZE, max=MAX_SIZE,
        help=f"Grid size ({MIN_SIZE}-{MAX_SIZE}).",
    ),
    tiles: Optional[str] = typer.Option(
        None, "--tiles",
        help="Row-major home indices. Omit to solve a generated board.",
    ),
    missing: Optional[int] = typer.Option(
        None, "--missing",
        help="Position of the blank within --tiles.",
    ),
    moves: int = typer.Option(
        SHUFFLE_MOVES, "--moves", min=0,
        help="Shuffle length when generating.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed for a reproducible shuffle.",
    ),
    algorithm: Algorithm = typer.Option(
        Algorithm.astar, "-a", "--algorithm",
        help="Search strategy.",
    ),
    max_expansions: Optional[int] = typer.Option(
        None, "--max-expansions", min=1,
        help="Give up after expanding this many states.",
    ),
) -> None:
    """Solve a board and print the moves."""
    board = _load_board(size, tiles, missing, moves, seed)
    console.print(render_board(board))

    if algorithm is Algorithm.dfs:
        path = Solver.dfs_solve(board, max_expansions)
        steps = None if path is None else [b.get_missing_index() for b in path[1:]]
    else:
        steps = Solver.a_star_solve(board, max_expansions)

    if steps is None:
        console.print("[red]No solution found.[/red]")
        raise typer.Exit(code=1)

    console.print(f"[bold green]Solved in {len(steps)} moves ({algorithm.value}).[/bold green]")
    if steps:
        console.print(render_moves(board, steps))
