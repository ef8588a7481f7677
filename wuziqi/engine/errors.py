# coding:utf-8
from enum import Enum


class InvalidMoveReason(Enum):
    """落子无效的原因"""
    OCCUPIED = "occupied"
    OUT_OF_BOUNDS = "out_of_bounds"
    MALFORMED = "malformed"
    GAME_OVER = "game_over"
    BAD_PLAYER = "bad_player"


class InvalidMove(ValueError):
    """无效落子

    只会由引擎抛出，由控制器在本地处理并转换为提示消息，
    抛出时棋盘状态保持不变。
    """

    def __init__(self, reason, row=None, col=None):
        self.reason = reason
        self.row = row
        self.col = col
        super().__init__(f"Invalid move ({reason.value}) at ({row!r}, {col!r})")
