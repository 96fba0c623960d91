"""Board model for tic-tac-toe on an arbitrary rectangular grid."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Tuple

from .config import EMPTY_SYMBOL, PLAYER_ONE_SYMBOL, PLAYER_TWO_SYMBOL
from .errors import CellOccupied, OutOfBounds

# (column, row), zero based
Coordinate = Tuple[int, int]


class Cell(Enum):
    EMPTY = "empty"
    PLAYER_ONE = "player_one"
    PLAYER_TWO = "player_two"

    @property
    def symbol(self) -> str:
        if self is Cell.PLAYER_ONE:
            return PLAYER_ONE_SYMBOL
        if self is Cell.PLAYER_TWO:
            return PLAYER_TWO_SYMBOL
        return EMPTY_SYMBOL

    @property
    def opponent(self) -> "Cell":
        if self is Cell.EMPTY:
            raise ValueError("an empty cell has no opponent")
        return Cell.PLAYER_TWO if self is Cell.PLAYER_ONE else Cell.PLAYER_ONE


PLAYERS: Tuple[Cell, Cell] = (Cell.PLAYER_ONE, Cell.PLAYER_TWO)


@dataclass
class Board:
    """A ``width`` x ``height`` grid of cells addressed by ``(column, row)``.

    The board only stores marks; win detection lives in :mod:`tictactoe.win`.
    When either dimension is below one both are stored as zero, which
    yields a board with no cells that is full from the start.
    """

    width: int
    height: int
    grid: List[List[Cell]] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            self.width = self.height = 0
        self.grid = [[Cell.EMPTY for _ in range(self.width)] for _ in range(self.height)]

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def dimensions(self) -> Tuple[int, int]:
        return self.width, self.height

    def is_within_bounds(self, coord: Coordinate) -> bool:
        """Return ``True`` if the coordinate lies inside the board."""

        x, y = coord
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, coord: Coordinate) -> Cell:
        """Return the cell at ``coord``.

        Raises :class:`OutOfBounds` when the coordinate is outside the grid.
        """

        if not self.is_within_bounds(coord):
            raise OutOfBounds(coord)
        x, y = coord
        return self.grid[y][x]

    def is_full(self) -> bool:
        """Return ``True`` when no empty cells remain on the board."""

        return all(cell is not Cell.EMPTY for row in self.grid for cell in row)

    def rows(self) -> Tuple[Tuple[Cell, ...], ...]:
        """Return an immutable copy of the grid, one tuple per row."""

        return tuple(tuple(row) for row in self.grid)

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------
    def place(self, coord: Coordinate, player: Cell) -> None:
        """Write ``player``'s mark at ``coord``.

        Raises :class:`OutOfBounds` for coordinates outside the grid and
        :class:`CellOccupied` when the cell already holds a mark. The board
        is left untouched on failure.
        """

        if player is Cell.EMPTY:
            raise ValueError("cannot place an empty mark")
        if self.get(coord) is not Cell.EMPTY:
            raise CellOccupied(coord)
        x, y = coord
        self.grid[y][x] = player

    def clear(self) -> None:
        """Reset every cell to empty."""

        for row in self.grid:
            for x in range(self.width):
                row[x] = Cell.EMPTY
