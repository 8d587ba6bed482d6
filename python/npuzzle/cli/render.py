"""Rich renderables for boards and solution paths."""

from __future__ import annotations

import rich.box
from rich.table import Table

from npuzzle.models.board import Board

# Longer solutions are summarised after this many rows.
MAX_MOVE_ROWS = 50


def render_board(board: Board) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    width = len(str(board.size * board.size - 1))
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(board.size):
        table.add_column(width=width + 1, justify="center")

    for r in range(board.size):
        cells: list[str] = []
        for i in range(r * board.size, (r + 1) * board.size):
            tile = board.tiles[i]
            if tile.is_missing:
                cells.append("[dim]·[/dim]")
            elif board.is_tile_correct(i):
                cells.append(f"[bold green]{tile.home_index:>{width}}[/bold green]")
            else:
                cells.append(f"[bold white]{tile.home_index:>{width}}[/bold white]")
        table.add_row(*cells)

    return table


def render_moves(board: Board, steps: list[int]) -> Table:
    """Tabulate swap targets with the direction each tile slides."""
    table = Table(box=rich.box.ROUNDED, border_style="dim")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Swap", justify="right", style="yellow")
    table.add_column("Tile", justify="right")
    table.add_column("Slides", style="cyan")

    replay = board.copy()
    for i, target in enumerate(steps, 1):
        direction = replay.direction_to(target)
        tile = replay.index_at(target)
        replay.swap(target)
        if i <= MAX_MOVE_ROWS:
            table.add_row(str(i), str(target), str(tile), direction.value)
    if len(steps) > MAX_MOVE_ROWS:
        table.add_row("…", "", "", f"{len(steps) - MAX_MOVE_ROWS} more")
    return table
