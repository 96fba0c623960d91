"""Controller responsible for interpreting abstract commands."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Optional

from .game import CursorMove, Game, MoveOutcome


class Command(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    COMMIT = "commit"
    RESTART = "restart"
    RESET_SCORE = "reset-score"
    QUIT = "quit"


class QuitRequested(Exception):
    """Raised when the player asks to leave the game."""


@dataclass
class Controller:
    """Translate symbolic commands into game actions."""

    game: Game

    def __post_init__(self) -> None:
        self._handlers: Dict[Command, Callable[[], object]] = {
            Command.UP: lambda: self.game.move_cursor(CursorMove.UP),
            Command.DOWN: lambda: self.game.move_cursor(CursorMove.DOWN),
            Command.LEFT: lambda: self.game.move_cursor(CursorMove.LEFT),
            Command.RIGHT: lambda: self.game.move_cursor(CursorMove.RIGHT),
            Command.COMMIT: self.game.commit_move,
            Command.RESTART: self.game.restart,
            Command.RESET_SCORE: self.game.reset_score,
        }

    def handle_input(self, command: Command) -> Optional[MoveOutcome]:
        """Apply ``command``; commits report their :class:`MoveOutcome`."""

        if command is Command.QUIT:
            raise QuitRequested()

        handler = self._handlers.get(command)
        if handler is None:
            raise ValueError(f"unknown command: {command!r}")
        result = handler()
        if command is Command.COMMIT:
            return result  # type: ignore[return-value]
        return None
