"""Command-line entry point for the terminal tic-tac-toe game."""

from __future__ import annotations

import argparse
import logging
import shutil
import sys
from typing import List, Optional

from .config import (
    DEFAULT_HEIGHT,
    DEFAULT_WIDTH,
    DEFAULT_WIN_LENGTH,
    MIN_SIZE,
    MIN_WIN_LENGTH,
)
from .controller import Controller, QuitRequested
from .game import Game
from .ui import input as input_mod
from .ui.renderer import board_size_for_terminal, fits_terminal, render, render_too_small

logger = logging.getLogger(__name__)

ENTER_ALT_SCREEN = "\x1b[?1049h\x1b[2J\x1b[?25l"
LEAVE_ALT_SCREEN = "\x1b[?1049l\x1b[?25h"
CLEAR_SCREEN = "\x1b[H\x1b[J"
BELL = "\a"


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="tictactoe",
        description="Two-player tic-tac-toe on a board of any size.",
    )
    ap.add_argument(
        "-s",
        "--size",
        type=int,
        nargs=2,
        metavar=("WIDTH", "HEIGHT"),
        default=None,
        help=f"Board size (default {DEFAULT_WIDTH} {DEFAULT_HEIGHT})",
    )
    ap.add_argument(
        "-w",
        "--win",
        type=int,
        default=DEFAULT_WIN_LENGTH,
        help=f"Marks in a row needed to win (default {DEFAULT_WIN_LENGTH})",
    )
    ap.add_argument(
        "-f",
        "--fit",
        action="store_true",
        help="Size the board to fill the terminal; ignored when --size is given",
    )
    ap.add_argument("--log-file", type=str, default=None, help="Write debug logs to this file")
    ap.add_argument("--log-level", type=str, default="DEBUG", help="Level used with --log-file")
    return ap


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    ap = build_argparser()
    args = ap.parse_args(argv)
    if args.size is not None and min(args.size) < MIN_SIZE:
        ap.error(f"minimum supported size is {MIN_SIZE}")
    if args.win < MIN_WIN_LENGTH:
        ap.error(f"minimum supported win length is {MIN_WIN_LENGTH}")
    return args


def game_from_args(args: argparse.Namespace) -> Game:
    if args.size is not None:
        width, height = args.size
    elif args.fit:
        columns, lines = shutil.get_terminal_size()
        width, height = board_size_for_terminal(columns, lines, args.win)
    else:
        width, height = DEFAULT_WIDTH, DEFAULT_HEIGHT
    return Game.new(width, height, args.win)


def configure_logging(log_file: Optional[str], level: str) -> None:
    if log_file is None:
        logging.getLogger("tictactoe").addHandler(logging.NullHandler())
        return
    logging.basicConfig(
        filename=log_file,
        level=getattr(logging, level.upper(), logging.DEBUG),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main(argv: Optional[List[str]] = None) -> int:  # pragma: no cover - interactive loop
    """Launch the interactive game."""

    args = parse_args(argv)
    configure_logging(args.log_file, args.log_level)

    game = game_from_args(args)
    controller = Controller(game)
    logger.info(
        "starting %dx%d game, %d in a row", game.board.width, game.board.height, game.win_length
    )

    sys.stdout.write(ENTER_ALT_SCREEN)
    sys.stdout.flush()
    try:
        while True:
            _draw(game)
            command = input_mod.map_key(input_mod.get_key())
            if command is None:
                continue
            try:
                outcome = controller.handle_input(command)
            except QuitRequested:
                break
            if outcome is not None and not outcome.accepted:
                sys.stdout.write(BELL)
    except KeyboardInterrupt:
        logger.info("interrupted")
    finally:
        sys.stdout.write(LEAVE_ALT_SCREEN)
        sys.stdout.flush()
    logger.info("exiting")
    return 0


def _draw(game: Game) -> None:  # pragma: no cover - terminal output
    snapshot = game.snapshot()
    columns, lines = shutil.get_terminal_size()
    if fits_terminal(snapshot, columns, lines):
        frame = render(snapshot)
    else:
        frame = render_too_small(columns)
    sys.stdout.write(CLEAR_SCREEN + frame)
    sys.stdout.flush()


__all__ = ["main", "parse_args", "game_from_args", "build_argparser"]


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
