import pytest

from tictactoe.game import Game


def play(game, *coords):
    """Move the cursor to each coordinate in turn and commit there."""

    outcomes = []
    for coord in coords:
        game.cursor = coord
        outcomes.append(game.commit_move())
    return outcomes


@pytest.fixture
def game():
    return Game.new(3, 3, 3)


@pytest.fixture
def walk():
    def _walk(game, move, times):
        for _ in range(times):
            game.move_cursor(move)
        return game.cursor

    return _walk
