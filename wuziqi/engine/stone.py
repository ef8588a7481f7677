# coding:utf-8
from enum import Enum

BOARD_SIZE = 15  # 棋盘大小 15x15
WIN_LENGTH = 5  # 连成五子即获胜


class StoneColor(Enum):
    """棋子颜色枚举，EMPTY 表示空位"""
    EMPTY = 0
    BLACK = 1
    WHITE = 2

    @property
    def opponent(self):
        """对手的颜色，空位没有对手"""
        if self is StoneColor.BLACK:
            return StoneColor.WHITE
        if self is StoneColor.WHITE:
            return StoneColor.BLACK
        raise ValueError("空位没有对手")

    @property
    def is_stone(self):
        return self is not StoneColor.EMPTY

    def __str__(self):
        return {"EMPTY": "空", "BLACK": "黑棋", "WHITE": "白棋"}[self.name]
