"""Win detection around the most recently played cell."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional, Tuple

from .board import Board, Cell, Coordinate


class Direction(Enum):
    """Axis vectors, in the order they are scanned."""

    HORIZONTAL = (1, 0)
    VERTICAL = (0, 1)
    DIAGONAL_DOWN_RIGHT = (1, 1)
    DIAGONAL_DOWN_LEFT = (-1, 1)

    @property
    def delta(self) -> Tuple[int, int]:
        return self.value


@dataclass(frozen=True)
class WinSequence:
    """Contiguous run of one player's marks along ``direction``.

    ``cells`` starts at the end reached by stepping against the direction
    vector and finishes at the end reached by stepping along it.
    """

    player: Cell
    direction: Direction
    cells: Tuple[Coordinate, ...]

    def __len__(self) -> int:
        return len(self.cells)

    def __iter__(self) -> Iterator[Coordinate]:
        return iter(self.cells)

    def __getitem__(self, index: int) -> Coordinate:
        return self.cells[index]

    def __contains__(self, coord: object) -> bool:
        return coord in self.cells


def check_win(
    board: Board, last_move: Coordinate, player: Cell, win_length: int
) -> Optional[WinSequence]:
    """Return the winning run through ``last_move`` or ``None``.

    Only cells on the four axes through ``last_move`` are inspected. When
    the run is longer than ``win_length`` the whole run is reported. When
    several axes win at once the first one in :class:`Direction` order is
    returned. A ``win_length`` below one can never be satisfied.
    """

    if win_length < 1 or player is Cell.EMPTY:
        return None
    if not board.is_within_bounds(last_move) or board.get(last_move) is not player:
        return None

    for direction in Direction:
        dx, dy = direction.delta
        backward = _count_in_direction(board, last_move, player, (-dx, -dy))
        forward = _count_in_direction(board, last_move, player, (dx, dy))
        if backward + forward + 1 < win_length:
            continue
        x, y = last_move
        start = (x - dx * backward, y - dy * backward)
        cells = tuple(
            (start[0] + dx * step, start[1] + dy * step)
            for step in range(backward + forward + 1)
        )
        return WinSequence(player=player, direction=direction, cells=cells)
    return None


def _count_in_direction(
    board: Board, coord: Coordinate, player: Cell, delta: Tuple[int, int]
) -> int:
    count = 0
    x, y = coord
    d_x, d_y = delta
    while True:
        x += d_x
        y += d_y
        if not board.is_within_bounds((x, y)):
            break
        if board.get((x, y)) is not player:
            break
        count += 1
    return count
