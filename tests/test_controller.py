from wuziqi.engine import (GameController, GameStatus, GomokuGame, InvalidMoveReason,
                           MessageKind, StoneColor)


def make_controller():
    controller = GameController(GomokuGame())
    messages = []
    controller.add_message_listener(messages.append)
    return controller, messages


def test_starts_with_prompt():
    controller, _ = make_controller()
    assert controller.last_message.kind is MessageKind.PROMPT


def test_valid_move_reports_next_player():
    controller, messages = make_controller()
    assert controller.onCellActivated(7, 7) is True
    assert messages[-1].kind is MessageKind.TURN
    assert messages[-1].player is StoneColor.WHITE
    assert controller.game.board[7][7] is StoneColor.BLACK


def test_occupied_cell_reports_invalid_move():
    controller, messages = make_controller()
    controller.onCellActivated(7, 7)
    assert controller.onCellActivated(7, 7) is False
    assert messages[-1].kind is MessageKind.INVALID_MOVE
    assert messages[-1].reason is InvalidMoveReason.OCCUPIED
    assert controller.game.current_player is StoneColor.WHITE


def test_out_of_bounds_click_is_recovered():
    controller, messages = make_controller()
    assert controller.onCellActivated(-1, 20) is False
    assert messages[-1].reason is InvalidMoveReason.OUT_OF_BOUNDS
    assert controller.game.state.stone_count() == 0


def test_malformed_coordinates_do_not_raise():
    controller, messages = make_controller()
    assert controller.onCellActivated("a", None) is False
    assert messages[-1].kind is MessageKind.INVALID_MOVE
    assert messages[-1].reason is InvalidMoveReason.MALFORMED


def test_win_message_and_clicks_after_game_over():
    controller, messages = make_controller()
    for col in range(4):
        controller.onCellActivated(7, col)
        controller.onCellActivated(9, col)
    controller.onCellActivated(7, 4)
    assert controller.game.status is GameStatus.WON
    assert messages[-1].kind is MessageKind.WIN
    assert messages[-1].player is StoneColor.BLACK

    assert controller.onCellActivated(12, 12) is False
    assert messages[-1].reason is InvalidMoveReason.GAME_OVER
    assert controller.game.board[12][12] is StoneColor.EMPTY


def test_draw_message():
    controller, messages = make_controller()
    game = controller.game
    for row in range(15):
        for col in range(15):
            if (row, col) != (14, 13):
                color = StoneColor.BLACK if ((col // 2) + row) % 2 == 0 else StoneColor.WHITE
                game.place(row, col, color)
    assert controller.onCellActivated(14, 13) is True
    assert messages[-1].kind is MessageKind.DRAW


def test_reset_request_posts_prompt_and_clears_board():
    controller, messages = make_controller()
    game = controller.game
    controller.onCellActivated(7, 7)
    controller.onCellActivated(7, 8)
    controller.onResetRequested()
    assert messages[-1].kind is MessageKind.PROMPT
    assert controller.game is game
    assert game.state.stone_count() == 0
    assert game.current_player is StoneColor.BLACK
    assert game.game_over is False
