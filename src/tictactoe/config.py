"""Configuration constants used across the tic-tac-toe project."""

DEFAULT_WIDTH: int = 3
DEFAULT_HEIGHT: int = 3
DEFAULT_WIN_LENGTH: int = 3

# The command line refuses anything smaller than this.
MIN_SIZE: int = 3
MIN_WIN_LENGTH: int = 3

PLAYER_ONE_SYMBOL: str = "X"
PLAYER_TWO_SYMBOL: str = "O"
EMPTY_SYMBOL: str = " "

# Rendered width of one cell, border included.
CELL_WIDTH: int = 4
CELL_HEIGHT: int = 2

ACTION_LOG_CAPACITY: int = 8
