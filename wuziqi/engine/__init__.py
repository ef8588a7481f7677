from .stone import BOARD_SIZE, WIN_LENGTH, StoneColor
from .errors import InvalidMove, InvalidMoveReason
from .game_state import EventType, GameEvent, GameState, GameStatus, GomokuGame
from .controller import GameController, MessageKind, StatusMessage

__all__ = [
    'BOARD_SIZE', 'WIN_LENGTH', 'StoneColor',
    'InvalidMove', 'InvalidMoveReason',
    'EventType', 'GameEvent', 'GameState', 'GameStatus', 'GomokuGame',
    'GameController', 'MessageKind', 'StatusMessage',
]
