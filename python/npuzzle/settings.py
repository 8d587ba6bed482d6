"""Default knobs shared by the engine and the command line."""

from __future__ import annotations

# Smallest board the model accepts.
MIN_SIZE = 2

# Largest board the CLI offers; search beyond 4-5 is impractical anyway.
MAX_SIZE = 8

DEFAULT_SIZE = 3

# Length of the random walk used to shuffle a fresh board.
SHUFFLE_MOVES = 100

# Boards up to this size are checked for solvability by search, larger ones
# by the inversion-parity rule.
SEARCH_ORACLE_MAX_SIZE = 3
