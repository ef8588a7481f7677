# coding:utf-8
import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, List, Optional

from .errors import InvalidMove, InvalidMoveReason
from .game_state import GameStatus, GomokuGame
from .stone import StoneColor

logger = logging.getLogger(__name__)


class MessageKind(Enum):
    PROMPT = auto()        # 点击棋盘开始游戏
    TURN = auto()          # 轮到某一方
    INVALID_MOVE = auto()  # 落子无效
    WIN = auto()           # 某一方获胜
    DRAW = auto()          # 平局


@dataclass
class StatusMessage:
    kind: MessageKind
    player: Optional[StoneColor] = None
    reason: Optional[InvalidMoveReason] = None


class GameController:
    """界面层与引擎之间的命令分发

    界面只需要调用 onCellActivated 和 onResetRequested 两个入口，
    无效落子在这里被捕获并转换为提示消息，不会抛到事件循环中。
    """

    def __init__(self, game: GomokuGame):
        self.game = game
        self._message_listeners: List[Callable[[StatusMessage], None]] = []
        self.last_message = StatusMessage(MessageKind.PROMPT)

    def add_message_listener(self, listener):
        self._message_listeners.append(listener)

    def _post(self, message: StatusMessage):
        self.last_message = message
        for listener in list(self._message_listeners):
            listener(message)

    def onCellActivated(self, row, col):
        """处理棋盘格子点击，返回落子是否成功"""
        mover = self.game.current_player
        try:
            status = self.game.play(row, col)
        except InvalidMove as e:
            logger.debug("拒绝落子: %s", e)
            self._post(StatusMessage(MessageKind.INVALID_MOVE, mover, e.reason))
            return False

        if status is GameStatus.WON:
            self._post(StatusMessage(MessageKind.WIN, self.game.winner))
        elif status is GameStatus.DRAWN:
            self._post(StatusMessage(MessageKind.DRAW))
        else:
            self._post(StatusMessage(MessageKind.TURN, self.game.current_player))
        return True

    def onResetRequested(self):
        self.game.reset()
        self._post(StatusMessage(MessageKind.PROMPT))
