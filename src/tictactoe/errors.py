"""Error types raised by the board."""

from __future__ import annotations

from typing import Tuple


class BoardError(ValueError):
    """Base class for rejected board operations."""

    def __init__(self, coord: Tuple[int, int], message: str) -> None:
        super().__init__(message)
        self.coord = coord


class OutOfBounds(BoardError):
    def __init__(self, coord: Tuple[int, int]) -> None:
        super().__init__(coord, f"coordinate {coord} lies outside the board")


class CellOccupied(BoardError):
    def __init__(self, coord: Tuple[int, int]) -> None:
        super().__init__(coord, f"cell {coord} is not empty")
