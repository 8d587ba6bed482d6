from npuzzle.models.board import Board, Direction, Tile, TileKind

__all__ = ["Board", "Direction", "Tile", "TileKind"]
