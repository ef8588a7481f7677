# coding:utf-8
import logging
import numbers
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Callable, List, Optional, Tuple

from . import win_checker
from .errors import InvalidMove, InvalidMoveReason
from .stone import BOARD_SIZE, StoneColor

logger = logging.getLogger(__name__)

Position = Tuple[int, int]


class GameStatus(Enum):
    """对局状态，WON 和 DRAWN 为终局"""
    IN_PROGRESS = auto()
    WON = auto()
    DRAWN = auto()


class EventType(Enum):
    """引擎通知的事件类型"""
    STONE_PLACED = auto()
    PLAYER_CHANGED = auto()
    GAME_WON = auto()
    GAME_DRAWN = auto()
    GAME_RESET = auto()


def _empty_board(size=BOARD_SIZE):
    return [[StoneColor.EMPTY for _ in range(size)] for _ in range(size)]


@dataclass
class GameState:
    """一局棋的完整状态，重新开始时整体替换"""
    board: List[List[StoneColor]] = field(default_factory=_empty_board)
    current_player: StoneColor = StoneColor.BLACK  # 黑棋先行
    game_over: bool = False
    winner: Optional[StoneColor] = None
    last_move: Optional[Position] = None
    winning_line: List[Position] = field(default_factory=list)

    @property
    def status(self) -> GameStatus:
        if not self.game_over:
            return GameStatus.IN_PROGRESS
        return GameStatus.WON if self.winner is not None else GameStatus.DRAWN

    @property
    def size(self):
        return len(self.board)

    def cell(self, row, col) -> StoneColor:
        return self.board[row][col]

    def stone_count(self):
        return sum(1 for line in self.board for cell in line if cell.is_stone)


@dataclass
class GameEvent:
    kind: EventType
    state: GameState
    position: Optional[Position] = None
    player: Optional[StoneColor] = None


Listener = Callable[[GameEvent], None]


class GomokuGame:
    """五子棋引擎

    持有棋盘、当前玩家和终局标志。界面层通过 add_listener 订阅状态变化，
    引擎本身不依赖任何绘制接口。
    """

    def __init__(self):
        self._state = GameState()
        self._listeners: List[Listener] = []

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def board(self):
        return self._state.board

    @property
    def current_player(self) -> StoneColor:
        return self._state.current_player

    @property
    def game_over(self) -> bool:
        return self._state.game_over

    @property
    def winner(self) -> Optional[StoneColor]:
        return self._state.winner

    @property
    def status(self) -> GameStatus:
        return self._state.status

    # ------------------------------------------------------------------
    # 订阅
    # ------------------------------------------------------------------
    def add_listener(self, listener: Listener):
        if listener not in self._listeners:
            self._listeners.append(listener)

    def remove_listener(self, listener: Listener):
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify(self, kind, position=None, player=None):
        event = GameEvent(kind, self._state, position, player)
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception:
                logger.exception("事件监听器处理 %s 时出错", kind.name)

    # ------------------------------------------------------------------
    # 落子与判定
    # ------------------------------------------------------------------
    def _validate(self, row, col, player):
        if self._state.game_over:
            raise InvalidMove(InvalidMoveReason.GAME_OVER, row, col)
        for value in (row, col):
            if isinstance(value, bool) or not isinstance(value, numbers.Integral):
                raise InvalidMove(InvalidMoveReason.MALFORMED, row, col)
        if not win_checker.in_bounds(row, col, self._state.size):
            raise InvalidMove(InvalidMoveReason.OUT_OF_BOUNDS, row, col)
        if not isinstance(player, StoneColor) or not player.is_stone:
            raise InvalidMove(InvalidMoveReason.BAD_PLAYER, row, col)
        if self._state.board[row][col] is not StoneColor.EMPTY:
            raise InvalidMove(InvalidMoveReason.OCCUPIED, row, col)

    def place(self, row, col, player):
        """在 (row, col) 放置 player 的棋子

        位置越界、已有棋子、坐标非整数或对局已结束时抛出 InvalidMove，
        此时棋盘不做任何修改。不切换玩家，也不判定胜负。
        """
        self._validate(row, col, player)
        row, col = int(row), int(col)
        self._state.board[row][col] = player
        self._state.last_move = (row, col)
        logger.debug("%s 落子 (%d, %d)", player.name, row, col)
        self._notify(EventType.STONE_PLACED, (row, col), player)

    def check_win(self, row, col, player):
        return win_checker.check_win(self._state.board, row, col, player)

    def check_draw(self):
        """棋盘已满即为平局，须在 check_win 返回 False 之后调用"""
        return win_checker.is_board_full(self._state.board)

    def play(self, row, col) -> GameStatus:
        """当前玩家在 (row, col) 落子并推进回合"""
        player = self._state.current_player
        self.place(row, col, player)
        row, col = int(row), int(col)

        if self.check_win(row, col, player):
            self._state.game_over = True
            self._state.winner = player
            self._state.winning_line = win_checker.winning_line(self._state.board, row, col, player)
            logger.info("%s 获胜，最后一手 (%d, %d)", player.name, row, col)
            self._notify(EventType.GAME_WON, (row, col), player)
            return GameStatus.WON

        if self.check_draw():
            self._state.game_over = True
            logger.info("棋盘已满，平局")
            self._notify(EventType.GAME_DRAWN, (row, col), player)
            return GameStatus.DRAWN

        self._state.current_player = player.opponent
        self._notify(EventType.PLAYER_CHANGED, (row, col), self._state.current_player)
        return GameStatus.IN_PROGRESS

    def reset(self):
        """整体替换为新的对局状态：空棋盘，黑棋先行"""
        self._state = GameState()
        logger.info("对局已重置")
        self._notify(EventType.GAME_RESET, player=self._state.current_player)
