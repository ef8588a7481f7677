import copy
import logging

import pytest

from wuziqi.engine import (BOARD_SIZE, EventType, GameStatus, GomokuGame, InvalidMove,
                           InvalidMoveReason, StoneColor)

B = StoneColor.BLACK
W = StoneColor.WHITE

# White stones scattered on row 0 never line up five
WHITE_FILLERS = [(0, 0), (0, 2), (0, 4), (0, 6), (0, 8), (0, 10)]


def play_black_line(game, black_moves):
    """Alternate the given black moves with harmless white moves, return last status."""
    status = None
    for i, (row, col) in enumerate(black_moves):
        status = game.play(row, col)
        if status is not GameStatus.IN_PROGRESS:
            return status
        game.play(*WHITE_FILLERS[i])
    return status


def pattern_color(row, col):
    # Pairs of columns alternate and every row shifts by one: no run longer than two
    return B if ((col // 2) + row) % 2 == 0 else W


def fill_board(game, skip):
    for row in range(BOARD_SIZE):
        for col in range(BOARD_SIZE):
            if (row, col) != skip:
                game.place(row, col, pattern_color(row, col))


def test_initial_state():
    game = GomokuGame()
    assert game.status is GameStatus.IN_PROGRESS
    assert game.current_player is B
    assert game.game_over is False
    assert game.winner is None
    assert game.state.stone_count() == 0
    assert game.state.size == BOARD_SIZE


def test_place_sets_cell_and_does_not_switch_player():
    game = GomokuGame()
    game.place(3, 4, W)
    assert game.board[3][4] is W
    assert game.state.last_move == (3, 4)
    assert game.current_player is B


def test_place_on_occupied_cell_is_rejected_without_mutation():
    game = GomokuGame()
    game.play(7, 7)
    before = copy.deepcopy(game.board)
    with pytest.raises(InvalidMove) as excinfo:
        game.place(7, 7, W)
    assert excinfo.value.reason is InvalidMoveReason.OCCUPIED
    assert game.board == before
    assert game.current_player is W


def test_play_on_occupied_cell_keeps_turn():
    game = GomokuGame()
    game.play(7, 7)
    with pytest.raises(InvalidMove):
        game.play(7, 7)
    assert game.current_player is W
    assert game.state.stone_count() == 1


@pytest.mark.parametrize("row, col", [(-1, 0), (0, -1), (BOARD_SIZE, 0), (0, BOARD_SIZE), (99, 99)])
def test_out_of_bounds(row, col):
    game = GomokuGame()
    with pytest.raises(InvalidMove) as excinfo:
        game.play(row, col)
    assert excinfo.value.reason is InvalidMoveReason.OUT_OF_BOUNDS
    assert game.state.stone_count() == 0


@pytest.mark.parametrize("row, col", [("3", 4), (1.5, 2), (None, 0), (True, 3), (2, [1])])
def test_malformed_coordinates(row, col):
    game = GomokuGame()
    with pytest.raises(InvalidMove) as excinfo:
        game.play(row, col)
    assert excinfo.value.reason is InvalidMoveReason.MALFORMED
    assert game.current_player is B


@pytest.mark.parametrize("player", [StoneColor.EMPTY, 1, "black", None])
def test_place_rejects_non_stone_player(player):
    game = GomokuGame()
    with pytest.raises(InvalidMove) as excinfo:
        game.place(0, 0, player)
    assert excinfo.value.reason is InvalidMoveReason.BAD_PLAYER
    assert game.board[0][0] is StoneColor.EMPTY


def test_invalid_move_is_a_value_error():
    assert issubclass(InvalidMove, ValueError)


def test_play_alternates_players():
    game = GomokuGame()
    assert game.play(7, 7) is GameStatus.IN_PROGRESS
    assert game.current_player is W
    assert game.play(7, 8) is GameStatus.IN_PROGRESS
    assert game.current_player is B
    assert game.board[7][7] is B
    assert game.board[7][8] is W


def test_horizontal_five_wins_for_black():
    game = GomokuGame()
    status = play_black_line(game, [(7, 5), (7, 6), (7, 7), (7, 8), (7, 9)])
    assert status is GameStatus.WON
    assert game.winner is B
    assert game.game_over is True
    # The winner keeps the turn
    assert game.current_player is B
    assert game.state.winning_line == [(7, 5), (7, 6), (7, 7), (7, 8), (7, 9)]


def test_vertical_five_wins():
    game = GomokuGame()
    status = play_black_line(game, [(3, 7), (4, 7), (5, 7), (6, 7), (7, 7)])
    assert status is GameStatus.WON
    assert game.winner is B


def test_diagonal_five_wins():
    game = GomokuGame()
    status = play_black_line(game, [(2, 2), (3, 3), (4, 4), (5, 5), (6, 6)])
    assert status is GameStatus.WON
    assert game.state.winning_line[0] == (2, 2)
    assert game.state.winning_line[-1] == (6, 6)


def test_anti_diagonal_five_wins():
    game = GomokuGame()
    status = play_black_line(game, [(2, 10), (3, 9), (4, 8), (5, 7), (6, 6)])
    assert status is GameStatus.WON
    assert set(game.state.winning_line) == {(2, 10), (3, 9), (4, 8), (5, 7), (6, 6)}


def test_filling_the_gap_in_the_middle_wins():
    game = GomokuGame()
    status = play_black_line(game, [(7, 5), (7, 6), (7, 8), (7, 9), (7, 7)])
    assert status is GameStatus.WON


def test_white_can_win():
    game = GomokuGame()
    game.play(0, 0)
    for i, col in enumerate(range(5, 10)):
        status = game.play(10, col)
        if status is GameStatus.WON:
            break
        game.play(0, 2 + 2 * i)
    assert game.winner is W
    assert game.status is GameStatus.WON


def test_four_in_a_row_is_not_a_win():
    game = GomokuGame()
    status = play_black_line(game, [(7, 5), (7, 6), (7, 7), (7, 8)])
    assert status is GameStatus.IN_PROGRESS
    assert not game.check_win(7, 8, B)


def test_blocked_line_does_not_win():
    game = GomokuGame()
    for col in (5, 6, 8, 9):
        game.place(7, col, B)
    game.place(7, 7, W)
    assert not game.check_win(7, 9, B)


def test_six_in_a_row_still_wins():
    game = GomokuGame()
    status = play_black_line(game, [(7, 3), (7, 4), (7, 5), (7, 7), (7, 8), (7, 6)])
    assert status is GameStatus.WON
    assert len(game.state.winning_line) == 6


def test_check_win_counts_runs_at_the_edge():
    game = GomokuGame()
    for col in range(BOARD_SIZE - 5, BOARD_SIZE):
        game.place(14, col, W)
    assert game.check_win(14, BOARD_SIZE - 1, W)
    assert not game.check_win(14, BOARD_SIZE - 1, B)


def test_full_board_without_five_is_a_draw():
    game = GomokuGame()
    last = (14, 13)
    assert pattern_color(*last) is B
    fill_board(game, skip=last)
    assert not game.check_draw()
    status = game.play(*last)
    assert status is GameStatus.DRAWN
    assert game.game_over is True
    assert game.winner is None
    assert game.check_draw()


def test_final_move_completing_five_is_a_win_not_a_draw():
    game = GomokuGame()
    last = (0, 4)
    fill_board(game, skip=last)
    for col in range(4):
        game.board[0][col] = B
    status = game.play(*last)
    assert status is GameStatus.WON
    assert game.winner is B


def test_no_placement_after_win():
    game = GomokuGame()
    play_black_line(game, [(7, 5), (7, 6), (7, 7), (7, 8), (7, 9)])
    before = copy.deepcopy(game.board)
    with pytest.raises(InvalidMove) as excinfo:
        game.play(10, 10)
    assert excinfo.value.reason is InvalidMoveReason.GAME_OVER
    with pytest.raises(InvalidMove):
        game.place(10, 10, W)
    assert game.board == before


def _assert_fresh(game):
    assert game.state.stone_count() == 0
    assert game.current_player is B
    assert game.game_over is False
    assert game.winner is None
    assert game.status is GameStatus.IN_PROGRESS
    assert game.state.last_move is None
    assert game.state.winning_line == []


def test_reset_after_win():
    game = GomokuGame()
    play_black_line(game, [(7, 5), (7, 6), (7, 7), (7, 8), (7, 9)])
    old_state = game.state
    game.reset()
    _assert_fresh(game)
    assert game.state is not old_state
    game.play(7, 7)
    assert game.board[7][7] is B


def test_reset_after_draw():
    game = GomokuGame()
    fill_board(game, skip=(14, 13))
    game.play(14, 13)
    game.reset()
    _assert_fresh(game)


def test_reset_mid_game():
    game = GomokuGame()
    game.play(7, 7)
    game.play(8, 8)
    game.play(9, 9)
    game.reset()
    _assert_fresh(game)


def test_listeners_receive_events_in_order():
    game = GomokuGame()
    events = []
    game.add_listener(lambda e: events.append((e.kind, e.position, e.player)))
    game.play(7, 7)
    assert events == [
        (EventType.STONE_PLACED, (7, 7), B),
        (EventType.PLAYER_CHANGED, (7, 7), W),
    ]
    events.clear()
    game.reset()
    assert events == [(EventType.GAME_RESET, None, B)]


def test_listener_receives_win_and_draw():
    game = GomokuGame()
    kinds = []
    game.add_listener(lambda e: kinds.append(e.kind))
    play_black_line(game, [(7, 5), (7, 6), (7, 7), (7, 8), (7, 9)])
    assert kinds[-1] is EventType.GAME_WON
    game.reset()
    fill_board(game, skip=(14, 13))
    game.play(14, 13)
    assert kinds[-1] is EventType.GAME_DRAWN


def test_rejected_move_notifies_nobody():
    game = GomokuGame()
    game.play(7, 7)
    events = []
    game.add_listener(events.append)
    with pytest.raises(InvalidMove):
        game.play(7, 7)
    assert events == []


def test_failing_listener_is_logged_and_others_still_run(caplog):
    game = GomokuGame()
    seen = []

    def broken(event):
        raise RuntimeError("boom")

    game.add_listener(broken)
    game.add_listener(seen.append)
    with caplog.at_level(logging.ERROR):
        assert game.play(7, 7) is GameStatus.IN_PROGRESS
    assert len(seen) == 2
    assert game.current_player is W
    assert any("STONE_PLACED" in record.getMessage() for record in caplog.records)


def test_remove_listener():
    game = GomokuGame()
    events = []
    game.add_listener(events.append)
    game.add_listener(events.append)
    game.remove_listener(events.append)
    game.play(7, 7)
    assert events == []


def test_opponent():
    assert B.opponent is W
    assert W.opponent is B
    with pytest.raises(ValueError):
        StoneColor.EMPTY.opponent
