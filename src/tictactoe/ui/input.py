"""Keyboard input for the terminal UI."""

from __future__ import annotations

from typing import Dict, Optional

import readchar

from ..controller import Command

KEY_BINDINGS: Dict[str, Command] = {
    readchar.key.UP: Command.UP,
    readchar.key.DOWN: Command.DOWN,
    readchar.key.LEFT: Command.LEFT,
    readchar.key.RIGHT: Command.RIGHT,
    "k": Command.UP,
    "j": Command.DOWN,
    "h": Command.LEFT,
    "l": Command.RIGHT,
    "w": Command.UP,
    "s": Command.DOWN,
    "a": Command.LEFT,
    "d": Command.RIGHT,
    readchar.key.ENTER: Command.COMMIT,
    "\n": Command.COMMIT,
    "\r": Command.COMMIT,
    " ": Command.COMMIT,
    "r": Command.RESTART,
    "c": Command.RESET_SCORE,
    "q": Command.QUIT,
    readchar.key.ESC: Command.QUIT,
}


def get_key() -> str:
    """Block until the next key press and return it."""

    return readchar.readkey()


def map_key(key: Optional[str]) -> Optional[Command]:
    """Return the command bound to ``key``, or ``None`` when unbound."""

    if not key:
        return None
    command = KEY_BINDINGS.get(key)
    if command is None and len(key) == 1:
        command = KEY_BINDINGS.get(key.lower())
    return command
