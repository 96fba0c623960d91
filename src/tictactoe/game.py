"""Game engine for turn management, scoring and restarts."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple, Union

from .board import PLAYERS, Board, Cell, Coordinate
from .config import (
    ACTION_LOG_CAPACITY,
    DEFAULT_HEIGHT,
    DEFAULT_WIDTH,
    DEFAULT_WIN_LENGTH,
)
from .errors import CellOccupied
from .win import WinSequence, check_win

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InProgress:
    pass


@dataclass(frozen=True)
class Won:
    player: Cell
    sequence: WinSequence


@dataclass(frozen=True)
class Draw:
    pass


Phase = Union[InProgress, Won, Draw]


class CursorMove(Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)


class MoveOutcome(Enum):
    PLACED = "placed"
    WON = "won"
    DRAW = "draw"
    OCCUPIED = "occupied"
    GAME_OVER = "game_over"

    @property
    def accepted(self) -> bool:
        return self in (MoveOutcome.PLACED, MoveOutcome.WON, MoveOutcome.DRAW)


@dataclass(frozen=True)
class GameSnapshot:
    """Read-only view of a game, valid independently of later mutations."""

    width: int
    height: int
    win_length: int
    cells: Tuple[Tuple[Cell, ...], ...]
    phase: Phase
    turn: Cell
    cursor: Coordinate
    scores: Mapping[Cell, int]
    last_move: Optional[Coordinate] = None
    action_log: Tuple[str, ...] = ()

    def cell(self, coord: Coordinate) -> Cell:
        x, y = coord
        return self.cells[y][x]

    def score(self, player: Cell) -> int:
        return self.scores.get(player, 0)

    @property
    def is_finished(self) -> bool:
        return not isinstance(self.phase, InProgress)

    @property
    def winning_cells(self) -> Tuple[Coordinate, ...]:
        if isinstance(self.phase, Won):
            return self.phase.sequence.cells
        return ()


@dataclass
class Game:
    """State manager for a two-player match on a configurable board."""

    board: Board = field(default_factory=lambda: Board(DEFAULT_WIDTH, DEFAULT_HEIGHT))
    win_length: int = DEFAULT_WIN_LENGTH
    current_player: Cell = Cell.PLAYER_ONE
    cursor: Coordinate = (0, 0)
    phase: Phase = field(default_factory=InProgress)
    scores: Dict[Cell, int] = field(default_factory=lambda: {player: 0 for player in PLAYERS})
    last_move: Optional[Coordinate] = None
    action_log: List[str] = field(default_factory=list)

    @classmethod
    def new(
        cls,
        width: int = DEFAULT_WIDTH,
        height: int = DEFAULT_HEIGHT,
        win_length: int = DEFAULT_WIN_LENGTH,
    ) -> "Game":
        return cls(board=Board(width, height), win_length=win_length)

    def __post_init__(self) -> None:
        # A board without cells can never take a move.
        if isinstance(self.phase, InProgress) and self.board.is_full():
            self.phase = Draw()

    # ------------------------------------------------------------------
    # Move application
    # ------------------------------------------------------------------
    def commit_move(self) -> MoveOutcome:
        """Place the current player's mark at the cursor."""

        if self.is_finished:
            logger.debug("move at %s rejected: game is over", self.cursor)
            return MoveOutcome.GAME_OVER

        player = self.current_player
        coord = self.cursor
        try:
            self.board.place(coord, player)
        except CellOccupied:
            logger.debug("move at %s rejected: cell occupied", coord)
            return MoveOutcome.OCCUPIED

        self.last_move = coord
        self._log_action(f"{player.symbol} played {_coord_label(coord)}")
        logger.debug("%s placed at %s", player.name, coord)

        sequence = check_win(self.board, coord, player, self.win_length)
        if sequence is not None:
            self.phase = Won(player=player, sequence=sequence)
            self.scores[player] += 1
            self._log_action(f"{player.symbol} wins")
            logger.debug("%s wins along %s: %s", player.name, sequence.direction.name, sequence.cells)
            return MoveOutcome.WON

        if self.board.is_full():
            self.phase = Draw()
            self._log_action("draw")
            logger.debug("board full, game drawn")
            return MoveOutcome.DRAW

        self.current_player = player.opponent
        return MoveOutcome.PLACED

    # ------------------------------------------------------------------
    # Cursor management
    # ------------------------------------------------------------------
    def move_cursor(self, move: CursorMove) -> Coordinate:
        """Shift the cursor one cell, saturating at the board edges."""

        d_x, d_y = move.value
        x, y = self.cursor
        max_x = max(self.board.width - 1, 0)
        max_y = max(self.board.height - 1, 0)
        self.cursor = (min(max(x + d_x, 0), max_x), min(max(y + d_y, 0), max_y))
        return self.cursor

    # ------------------------------------------------------------------
    # Resets
    # ------------------------------------------------------------------
    def restart(self) -> None:
        """Start a fresh round. Scores carry over."""

        self.board.clear()
        self.current_player = Cell.PLAYER_ONE
        self.cursor = (0, 0)
        self.last_move = None
        self.phase = Draw() if self.board.is_full() else InProgress()
        self.action_log.clear()
        self._log_action("game restarted")
        logger.debug("game restarted")

    def reset_score(self) -> None:
        for player in PLAYERS:
            self.scores[player] = 0
        self._log_action("score reset")
        logger.debug("score reset")

    # ------------------------------------------------------------------
    # Status helpers
    # ------------------------------------------------------------------
    @property
    def is_finished(self) -> bool:
        return not isinstance(self.phase, InProgress)

    def snapshot(self) -> GameSnapshot:
        return GameSnapshot(
            width=self.board.width,
            height=self.board.height,
            win_length=self.win_length,
            cells=self.board.rows(),
            phase=self.phase,
            turn=self.current_player,
            cursor=self.cursor,
            scores=MappingProxyType(dict(self.scores)),
            last_move=self.last_move,
            action_log=tuple(self.action_log),
        )

    def _log_action(self, message: str) -> None:
        self.action_log.append(message)
        if len(self.action_log) > ACTION_LOG_CAPACITY:
            del self.action_log[0 : len(self.action_log) - ACTION_LOG_CAPACITY]


def _coord_label(coord: Coordinate) -> str:
    x, y = coord
    return f"({x}, {y})"
