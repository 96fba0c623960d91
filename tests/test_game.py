import pytest

from conftest import play
from tictactoe.board import Cell
from tictactoe.game import CursorMove, Draw, Game, InProgress, MoveOutcome, Won
from tictactoe.win import Direction

P1 = Cell.PLAYER_ONE
P2 = Cell.PLAYER_TWO

DRAWN_3X3 = [(0, 0), (1, 0), (2, 0), (1, 1), (0, 1), (0, 2), (2, 1), (2, 2), (1, 2)]


def test_initial_state(game):
    snapshot = game.snapshot()
    assert snapshot.phase == InProgress()
    assert snapshot.turn is P1
    assert snapshot.cursor == (0, 0)
    assert snapshot.score(P1) == snapshot.score(P2) == 0
    assert all(cell is Cell.EMPTY for row in snapshot.cells for cell in row)


def test_turns_alternate(game):
    assert play(game, (1, 1)) == [MoveOutcome.PLACED]
    assert game.current_player is P2
    play(game, (0, 0))
    assert game.current_player is P1
    assert game.board.get((1, 1)) is P1
    assert game.board.get((0, 0)) is P2


def test_column_win_scenario(game):
    outcomes = play(game, (0, 0), (1, 0), (0, 1), (1, 1), (0, 2))
    assert outcomes[-1] is MoveOutcome.WON
    phase = game.phase
    assert isinstance(phase, Won)
    assert phase.player is P1
    assert list(phase.sequence) == [(0, 0), (0, 1), (0, 2)]
    assert phase.sequence.direction is Direction.VERTICAL
    assert game.scores[P1] == 1
    assert game.scores[P2] == 0


def test_drawn_grid(game):
    outcomes = play(game, *DRAWN_3X3)
    assert outcomes[-1] is MoveOutcome.DRAW
    assert MoveOutcome.WON not in outcomes
    assert game.phase == Draw()
    assert game.scores == {P1: 0, P2: 0}


def test_diagonal_win_on_5x5():
    game = Game.new(5, 5, 5)
    moves = []
    for i in range(5):
        moves.append((i, i))
        if i < 4:
            moves.append((i + 1, i))
    outcomes = play(game, *moves)
    assert outcomes[-1] is MoveOutcome.WON
    assert list(game.phase.sequence) == [(0, 0), (1, 1), (2, 2), (3, 3), (4, 4)]


def test_occupied_cell_is_rejected_without_changing_turn(game):
    play(game, (1, 1))
    assert play(game, (1, 1)) == [MoveOutcome.OCCUPIED]
    assert not MoveOutcome.OCCUPIED.accepted
    assert game.current_player is P2
    assert game.board.get((1, 1)) is P1
    assert isinstance(game.phase, InProgress)


def test_no_moves_after_game_over(game):
    play(game, (0, 0), (1, 0), (0, 1), (1, 1), (0, 2))
    before = game.board.rows()
    assert play(game, (2, 2)) == [MoveOutcome.GAME_OVER]
    assert game.board.rows() == before
    assert game.scores[P1] == 1


def test_cursor_saturates_at_edges(game, walk):
    assert game.move_cursor(CursorMove.LEFT) == (0, 0)
    assert game.move_cursor(CursorMove.UP) == (0, 0)
    assert walk(game, CursorMove.RIGHT, 10) == (2, 0)
    assert walk(game, CursorMove.DOWN, 10) == (2, 2)
    assert game.move_cursor(CursorMove.LEFT) == (1, 2)


def test_cursor_moves_after_game_over(game):
    play(game, (0, 0), (1, 0), (0, 1), (1, 1), (0, 2))
    game.cursor = (1, 1)
    assert game.move_cursor(CursorMove.RIGHT) == (2, 1)


@pytest.mark.parametrize("finish", ["won", "draw", "in_progress"])
def test_restart_keeps_scores(game, finish):
    if finish == "won":
        play(game, (0, 0), (1, 0), (0, 1), (1, 1), (0, 2))
    elif finish == "draw":
        play(game, *DRAWN_3X3)
    else:
        play(game, (2, 2), (1, 1))
    scores = dict(game.scores)
    game.cursor = (2, 1)

    game.restart()

    assert game.phase == InProgress()
    assert game.current_player is P1
    assert game.cursor == (0, 0)
    assert all(cell is Cell.EMPTY for row in game.board.rows() for cell in row)
    assert game.scores == scores


def test_scores_accumulate_across_rounds(game):
    play(game, (0, 0), (1, 0), (0, 1), (1, 1), (0, 2))
    game.restart()
    play(game, (0, 0), (1, 0), (2, 2), (1, 1), (2, 0), (1, 2))
    assert isinstance(game.phase, Won)
    assert game.phase.player is P2
    assert game.scores == {P1: 1, P2: 1}


@pytest.mark.parametrize("finish", ["won", "in_progress"])
def test_reset_score_leaves_board_alone(game, finish):
    if finish == "won":
        play(game, (0, 0), (1, 0), (0, 1), (1, 1), (0, 2))
    else:
        play(game, (1, 1))
    rows, phase, turn = game.board.rows(), game.phase, game.current_player

    game.reset_score()

    assert game.scores == {P1: 0, P2: 0}
    assert game.board.rows() == rows
    assert game.phase == phase
    assert game.current_player is turn


def test_snapshot_is_detached(game):
    snapshot = game.snapshot()
    play(game, (0, 0))
    game.reset_score()
    assert snapshot.cell((0, 0)) is Cell.EMPTY
    assert snapshot.last_move is None
    with pytest.raises(TypeError):
        snapshot.scores[P1] = 5
    with pytest.raises(AttributeError):
        snapshot.turn = P2


def test_snapshot_reports_win(game):
    play(game, (0, 0), (1, 0), (0, 1), (1, 1), (0, 2))
    snapshot = game.snapshot()
    assert snapshot.is_finished
    assert snapshot.winning_cells == ((0, 0), (0, 1), (0, 2))
    assert snapshot.last_move == (0, 2)
    assert snapshot.action_log[-1] == "X wins"


def test_unwinnable_configuration_ends_in_draw():
    game = Game.new(3, 3, 4)
    outcomes = play(game, *[(x, y) for y in range(3) for x in range(3)])
    assert MoveOutcome.WON not in outcomes
    assert outcomes[-1] is MoveOutcome.DRAW


def test_zero_win_length_ends_in_draw():
    game = Game.new(2, 1, 0)
    assert play(game, (0, 0), (1, 0)) == [MoveOutcome.PLACED, MoveOutcome.DRAW]


@pytest.mark.parametrize("width,height", [(0, 0), (0, 3), (3, 0), (-1, 2)])
def test_empty_board_starts_drawn(width, height):
    game = Game.new(width, height, 3)
    assert game.phase == Draw()
    assert game.move_cursor(CursorMove.RIGHT) == (0, 0)
    assert game.commit_move() is MoveOutcome.GAME_OVER
    game.restart()
    assert game.phase == Draw()


def test_action_log_is_bounded(game):
    for _ in range(20):
        game.reset_score()
    assert len(game.action_log) == 8
