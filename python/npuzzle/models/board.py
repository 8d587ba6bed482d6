"""Board model for the N-puzzle."""

from __future__ import annotations

from array import array
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import StrEnum

from npuzzle.settings import MIN_SIZE


class TileKind(StrEnum):
    IN_PLAY = "in_play"
    MISSING = "missing"


class Direction(StrEnum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class Tile:
    """A single tile, identified by the cell it occupies when solved.

    Tiles compare and hash by ``home_index`` only.
    """

    home_index: int
    kind: TileKind = field(default=TileKind.IN_PLAY, compare=False)

    @property
    def is_missing(self) -> bool:
        return self.kind is TileKind.MISSING


@dataclass
class Board:
    """Represents an n×n sliding puzzle board.

    Tiles are stored flat in row-major order.  ``missing_index`` is the
    position of the blank, or ``None`` until one has been punched out.
    """

    size: int
    tiles: list[Tile]
    missing_index: int | None = None

    # -- construction helpers -------------------------------------------------

    @classmethod
    def solved(cls, size: int, missing: int | None = None) -> Board:
        """Return the solved board, optionally with the tile at *missing* blanked.

        Example::

            Board.solved(3, missing=8)
        """
        if size < MIN_SIZE:
            raise ValueError(
                f"Board size must be at least {MIN_SIZE}, got {size}."
            )
        board = cls(size=size, tiles=[Tile(i) for i in range(size * size)])
        if missing is not None:
            board.punch_out(missing)
        return board

    @classmethod
    def from_tiles(cls, size: int, tiles: Iterable[Tile]) -> Board:
        """Create a board from an externally assembled tile sequence."""
        tiles = list(tiles)
        blanks = [i for i, tile in enumerate(tiles) if tile.is_missing]
        if len(blanks) != 1:
            raise ValueError(
                f"Expected exactly one missing tile, found {len(blanks)}."
            )
        board = cls(size=size, tiles=tiles, missing_index=blanks[0])
        board.check_invariants()
        return board

    @classmethod
    def from_flat(cls, size: int, flat: list[int], missing: int) -> Board:
        """Create a board from a flat row-major list of home indices.

        The tile at position *missing* becomes the blank.

        Example::

            Board.from_flat(2, [0, 1, 3, 2], missing=2)
        """
        if len(flat) != size * size:
            raise ValueError(
                f"Expected {size * size} tiles for a {size}×{size} board, "
                f"got {len(flat)}."
            )
        if not 0 <= missing < len(flat):
            raise ValueError(
                f"Missing position {missing} is outside the {size}×{size} board."
            )
        return cls.from_tiles(
            size,
            (
                Tile(home, TileKind.MISSING if i == missing else TileKind.IN_PLAY)
                for i, home in enumerate(flat)
            ),
        )

    @property
    def initial_board(self) -> list[Tile]:
        """The solved template: the tile at position ``i`` has home ``i``."""
        return [Tile(i) for i in range(self.size * self.size)]

    def reset(self) -> None:
        """Restore the solved template and forget the blank."""
        self.tiles = self.initial_board
        self.missing_index = None

    def punch_out(self, index: int) -> int:
        """Turn the tile at *index* into the blank and return *index*."""
        if self.missing_index is not None:
            raise ValueError(
                f"Board already has a missing tile at {self.missing_index}."
            )
        home = self.index_at(index)
        self.tiles[index] = Tile(home, TileKind.MISSING)
        self.missing_index = index
        return index

    def copy(self) -> Board:
        return Board(
            size=self.size,
            tiles=self.tiles[:],
            missing_index=self.missing_index,
        )

    # -- queries --------------------------------------------------------------

    def index_at(self, i: int) -> int:
        """Return the home index of the tile currently at position *i*."""
        if not 0 <= i < len(self.tiles):
            raise IndexError(
                f"index_at: position {i} is out of range for a "
                f"{self.size}×{self.size} board."
            )
        return self.tiles[i].home_index

    def get_missing_index(self) -> int | None:
        return self.missing_index

    def check_win(self) -> bool:
        """Check if every tile sits on its home cell."""
        return all(tile.home_index == i for i, tile in enumerate(self.tiles))

    def is_tile_correct(self, i: int) -> bool:
        return self.index_at(i) == i

    def get_swappable(self) -> list[int]:
        """Positions orthogonally adjacent to the blank (left, right, up, down)."""
        blank = self._require_blank()
        n = self.size
        row, col = divmod(blank, n)
        swappable: list[int] = []
        if col > 0:
            swappable.append(blank - 1)
        if col < n - 1:
            swappable.append(blank + 1)
        if row > 0:
            swappable.append(blank - n)
        if row < n - 1:
            swappable.append(blank + n)
        return swappable

    def canonical_key(self) -> bytes:
        """Fixed-width encoding of the tile order, for visited sets."""
        homes = [tile.home_index for tile in self.tiles]
        if len(homes) <= 256:
            return bytes(homes)
        return array("H", homes).tobytes()

    def direction_to(self, target: int) -> Direction:
        """Return the direction the tile at *target* slides to fill the blank."""
        blank = self._require_blank()
        n = self.size
        if target == blank + n:
            return Direction.UP
        if target == blank - n:
            return Direction.DOWN
        if target == blank + 1 and target % n != 0:
            return Direction.LEFT
        if target == blank - 1 and blank % n != 0:
            return Direction.RIGHT
        raise ValueError(f"Position {target} is not adjacent to the blank at {blank}.")

    # -- mutation -------------------------------------------------------------

    def swap(self, target: int) -> int:
        """Exchange the blank with the tile at *target*; return the new blank.

        Adjacency is the caller's responsibility.
        """
        blank = self._require_blank()
        if not 0 <= target < len(self.tiles):
            raise IndexError(
                f"swap: position {target} is out of range for a "
                f"{self.size}×{self.size} board."
            )
        self.tiles[blank], self.tiles[target] = self.tiles[target], self.tiles[blank]
        self.missing_index = target
        return target

    # -- validation -----------------------------------------------------------

    def check_invariants(self) -> None:
        """Raise ``ValueError`` if the board is malformed."""
        n = self.size
        if n < MIN_SIZE:
            raise ValueError(f"Board size must be at least {MIN_SIZE}, got {n}.")
        if len(self.tiles) != n * n:
            raise ValueError(
                f"Expected {n * n} tiles for a {n}×{n} board, got {len(self.tiles)}."
            )
        if sorted(tile.home_index for tile in self.tiles) != list(range(n * n)):
            raise ValueError("Tile home indices must be a permutation of 0..n²-1.")
        blanks = [i for i, tile in enumerate(self.tiles) if tile.is_missing]
        expected = [] if self.missing_index is None else [self.missing_index]
        if blanks != expected:
            raise ValueError(
                f"Missing tiles at {blanks} disagree with "
                f"missing_index={self.missing_index}."
            )

    def _require_blank(self) -> int:
        if self.missing_index is None:
            raise ValueError("Board has no missing tile; generate or punch one out first.")
        return self.missing_index

    def __str__(self) -> str:
        width = len(str(self.size * self.size - 1))
        lines: list[str] = []
        for r in range(self.size):
            row = self.tiles[r * self.size : (r + 1) * self.size]
            lines.append(
                " ".join(
                    f"{'.':>{width}}" if tile.is_missing else f"{tile.home_index:>{width}}"
                    for tile in row
                )
            )
        return "\n".join(lines)
