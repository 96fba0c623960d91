"""Rendering helpers for the terminal UI."""

from __future__ import annotations

from typing import Dict, List

from ..board import Cell, Coordinate
from ..config import CELL_HEIGHT, CELL_WIDTH
from ..game import Draw, GameSnapshot, Won
from ..win import Direction
from .text_utils import center_to_width, display_width

RESET = "\033[0m"
BOLD = "\033[1m"
DIM = "\033[2m"
UNDERLINE = "\033[4m"
FG_GRAY = "\033[90m"
FG_GREEN = "\033[32m"
FG_RED = "\033[31m"
FG_CYAN = "\033[36m"
FG_YELLOW = "\033[33m"

PLAYER_COLORS: Dict[Cell, str] = {
    Cell.PLAYER_ONE: FG_GREEN,
    Cell.PLAYER_TWO: FG_RED,
}

STROKES: Dict[Direction, str] = {
    Direction.HORIZONTAL: "───",
    Direction.VERTICAL: " │ ",
    Direction.DIAGONAL_DOWN_RIGHT: " ╲ ",
    Direction.DIAGONAL_DOWN_LEFT: " ╱ ",
}

CONTROLS = "←↑↓→/hjkl move | Enter place | R restart | C clear score | Q quit"

# banner, score, status, last action, blank, controls
_CHROME_LINES = 6


def render(snapshot: GameSnapshot) -> str:
    board_lines = _render_board(snapshot)
    width = max(
        [display_width(CONTROLS)] + [display_width(line) for line in board_lines]
    )
    lines: List[str] = [
        _color(center_to_width("TIC TAC TOE", width), BOLD),
        center_to_width(_render_scores(snapshot), width),
    ]
    lines.extend(center_to_width(line, width) for line in board_lines)
    lines.append(center_to_width(_render_status(snapshot), width))
    lines.append(_color(center_to_width(_render_last_action(snapshot), width), DIM))
    lines.append("")
    lines.append(_color(center_to_width(CONTROLS, width), DIM))
    return "\n".join(line.rstrip() for line in lines)


def required_size(snapshot: GameSnapshot) -> tuple[int, int]:
    """Return the ``(columns, lines)`` a full frame needs."""

    columns = max(snapshot.width * CELL_WIDTH + 1, display_width(CONTROLS))
    lines = snapshot.height * CELL_HEIGHT + 1 + _CHROME_LINES
    return columns, lines


def fits_terminal(snapshot: GameSnapshot, columns: int, lines: int) -> bool:
    need_columns, need_lines = required_size(snapshot)
    return columns >= need_columns and lines >= need_lines


def render_too_small(columns: int) -> str:
    return "\n".join(
        [
            _color(center_to_width("Terminal too small!", columns), BOLD),
            center_to_width("You have to increase terminal size", columns),
        ]
    )


def board_size_for_terminal(columns: int, lines: int, win_length: int) -> tuple[int, int]:
    """Largest board that fits the terminal, never smaller than ``win_length``."""

    width = (columns - 1) // CELL_WIDTH
    height = (lines - 1 - _CHROME_LINES) // CELL_HEIGHT
    return max(width, win_length), max(height, win_length)


def _render_board(snapshot: GameSnapshot) -> List[str]:
    if snapshot.width == 0 or snapshot.height == 0:
        return [_color("(empty board)", DIM)]

    strokes = _winning_strokes(snapshot)
    rows: List[str] = [_border("┌", "┬", "┐", snapshot.width)]
    for y in range(snapshot.height):
        parts = [_color("│", FG_GRAY)]
        for x in range(snapshot.width):
            parts.append(_render_cell(snapshot, (x, y), strokes))
            parts.append(_color("│", FG_GRAY))
        rows.append("".join(parts))
        if y + 1 < snapshot.height:
            rows.append(_border("├", "┼", "┤", snapshot.width))
    rows.append(_border("└", "┴", "┘", snapshot.width))
    return rows


def _border(left: str, middle: str, right: str, count: int) -> str:
    segment = "─" * (CELL_WIDTH - 1)
    return _color(left + middle.join([segment] * count) + right, FG_GRAY)


def _winning_strokes(snapshot: GameSnapshot) -> Dict[Coordinate, str]:
    phase = snapshot.phase
    if not isinstance(phase, Won):
        return {}
    stroke = STROKES[phase.sequence.direction]
    return {coord: stroke for coord in phase.sequence}


def _render_cell(snapshot: GameSnapshot, coord: Coordinate, strokes: Dict[Coordinate, str]) -> str:
    stroke = strokes.get(coord)
    if stroke is not None:
        # winning cells always hold the winner's mark
        color = PLAYER_COLORS[snapshot.cell(coord)]
        if coord == snapshot.cursor:
            return _bracket(_color(stroke[1], BOLD, color))
        return _color(stroke, BOLD, color)

    cell = snapshot.cell(coord)
    if cell is Cell.EMPTY:
        mark = " "
    elif coord == snapshot.last_move:
        mark = _color(cell.symbol, UNDERLINE, PLAYER_COLORS[cell])
    else:
        mark = _color(cell.symbol, PLAYER_COLORS[cell])
    if coord == snapshot.cursor:
        return _bracket(mark)
    return f" {mark} "


def _bracket(mark: str) -> str:
    return _color("[", BOLD, FG_CYAN) + mark + _color("]", BOLD, FG_CYAN)


def _render_scores(snapshot: GameSnapshot) -> str:
    one, two = Cell.PLAYER_ONE, Cell.PLAYER_TWO
    return (
        f"{_color(one.symbol, PLAYER_COLORS[one])} {snapshot.score(one)}"
        f" : {snapshot.score(two)} {_color(two.symbol, PLAYER_COLORS[two])}"
        f"   ({snapshot.win_length} in a row)"
    )


def _render_status(snapshot: GameSnapshot) -> str:
    phase = snapshot.phase
    if isinstance(phase, Won):
        return f"{_color(phase.player.symbol, PLAYER_COLORS[phase.player])} wins!"
    if isinstance(phase, Draw):
        return _color("Draw!", FG_YELLOW)
    return f"{_color(snapshot.turn.symbol, PLAYER_COLORS[snapshot.turn])} turn."


def _render_last_action(snapshot: GameSnapshot) -> str:
    if not snapshot.action_log:
        return ""
    return snapshot.action_log[-1]


def _color(text: str, *codes: str) -> str:
    if not codes:
        return text
    prefix = "".join(codes)
    return f"{prefix}{text}{RESET}"
