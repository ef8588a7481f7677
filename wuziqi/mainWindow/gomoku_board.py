# coding:utf-8
import logging

from PyQt5.QtCore import Qt, QRectF, pyqtSignal
from PyQt5.QtGui import QPainter, QPen, QBrush, QColor, QPaintEvent, QMouseEvent
from PyQt5.QtWidgets import QWidget, QSizePolicy

from ..engine import EventType, GameController, StoneColor

logger = logging.getLogger(__name__)


class GoBoardWidget(QWidget):
    """15x15的五子棋棋盘组件

    只负责绘制和把鼠标点击转换为 (row, col)，所有规则判断都交给控制器。
    """

    playerChanged = pyqtSignal(int)  # 当前玩家变更信号，参数为玩家ID(1为黑棋，2为白棋)
    gameStatusChanged = pyqtSignal(bool, int)  # 游戏状态变更信号(是否结束，胜者ID，0表示平局)

    # 棋盘样式 - 背景颜色
    BOARD_STYLES = {
        "经典木色": {"background": QColor("#E8B473"), "line": QColor("#000000")},
        "淡雅青色": {"background": QColor("#B5D8CC"), "line": QColor("#000000")},
        "复古黄褐": {"background": QColor("#D4B483"), "line": QColor("#000000")},
        "冷酷灰色": {"background": QColor("#CCCCCC"), "line": QColor("#000000")},
        "暗黑模式": {"background": QColor("#2D2D2D"), "line": QColor("#FFFFFF")}
    }

    STAR_POINTS = [(3, 3), (3, 11), (7, 7), (11, 3), (11, 11)]

    def __init__(self, controller: GameController, parent=None, style_index=0):
        super().__init__(parent)
        self.controller = controller
        self.board_size = controller.game.state.size
        self.base_cell_size = 40  # 基础格子大小，实际大小会根据组件尺寸自动计算
        self.base_padding = 25  # 基础边距
        self.show_last_move = True

        style_names = self.get_style_names()
        self.current_style = style_names[min(max(style_index, 0), len(style_names) - 1)]

        min_board_width = self.board_size * self.base_cell_size + 2 * self.base_padding
        self.setMinimumSize(min_board_width, min_board_width)
        self.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)

        controller.game.add_listener(self._on_game_event)

    @property
    def state(self):
        return self.controller.game.state

    def set_style(self, style_index):
        """设置棋盘风格"""
        style_names = self.get_style_names()
        if 0 <= style_index < len(style_names):
            self.current_style = style_names[style_index]
            self.update()
            return True
        return False

    def get_style_names(self):
        """获取所有棋盘风格名称"""
        return list(self.BOARD_STYLES.keys())

    def set_show_last_move(self, enabled):
        self.show_last_move = bool(enabled)
        self.update()

    def _on_game_event(self, event):
        """引擎事件 -> Qt 信号"""
        if event.kind is EventType.PLAYER_CHANGED:
            self.playerChanged.emit(event.player.value)
        elif event.kind is EventType.GAME_WON:
            self.gameStatusChanged.emit(True, event.player.value)
        elif event.kind is EventType.GAME_DRAWN:
            self.gameStatusChanged.emit(True, 0)
        elif event.kind is EventType.GAME_RESET:
            self.playerChanged.emit(event.player.value)
            self.gameStatusChanged.emit(False, 0)
        self.update()

    def _geometry(self):
        """计算格子大小和居中后的边距"""
        size = min(self.width(), self.height())
        cell_size = (size - 2 * self.base_padding) / (self.board_size - 1)
        padding_x = (self.width() - (self.board_size - 1) * cell_size) / 2
        padding_y = (self.height() - (self.board_size - 1) * cell_size) / 2
        return cell_size, padding_x, padding_y

    def paintEvent(self, event: QPaintEvent):
        """绘制棋盘和棋子"""
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing)

        cell_size, padding_x, padding_y = self._geometry()
        stone_size = cell_size * 0.9
        style = self.BOARD_STYLES[self.current_style]
        grid_size = (self.board_size - 1) * cell_size

        # 背景只覆盖棋盘线条区域
        painter.fillRect(QRectF(padding_x, padding_y, grid_size, grid_size), QBrush(style["background"]))

        line_width = max(1, int(cell_size / 15))
        painter.setPen(QPen(style["line"], line_width))
        for i in range(self.board_size):
            y = int(padding_y + i * cell_size)
            painter.drawLine(int(padding_x), y, int(padding_x + grid_size), y)
        for i in range(self.board_size):
            x = int(padding_x + i * cell_size)
            painter.drawLine(x, int(padding_y), x, int(padding_y + grid_size))

        # 天元和星位
        star_size = max(4, int(cell_size / 8))
        painter.setBrush(QBrush(style["line"]))
        for x, y in self.STAR_POINTS:
            painter.drawEllipse(
                int(padding_x + x * cell_size - star_size / 2),
                int(padding_y + y * cell_size - star_size / 2),
                star_size, star_size
            )

        state = self.state
        for row in range(self.board_size):
            for col in range(self.board_size):
                stone = state.cell(row, col)
                if stone is StoneColor.EMPTY:
                    continue
                x = int(padding_x + col * cell_size - stone_size / 2)
                y = int(padding_y + row * cell_size - stone_size / 2)
                if stone is StoneColor.BLACK:
                    painter.setBrush(QBrush(Qt.black))
                    painter.setPen(QPen(Qt.gray, line_width))
                else:
                    painter.setBrush(QBrush(Qt.white))
                    painter.setPen(QPen(Qt.black, line_width))
                painter.drawEllipse(x, y, int(stone_size), int(stone_size))

        # 最后一手标记
        if self.show_last_move and state.last_move is not None and not state.winning_line:
            row, col = state.last_move
            marker = max(3, int(cell_size / 6))
            painter.setPen(Qt.NoPen)
            painter.setBrush(QBrush(QColor(255, 0, 0)))
            painter.drawEllipse(
                int(padding_x + col * cell_size - marker / 2),
                int(padding_y + row * cell_size - marker / 2),
                marker, marker
            )

        # 获胜连线高亮
        if state.winning_line:
            (start_row, start_col), (end_row, end_col) = state.winning_line[0], state.winning_line[-1]
            painter.setPen(QPen(QColor(255, 0, 0, 200), max(3, int(cell_size / 8)), Qt.SolidLine, Qt.RoundCap))
            painter.drawLine(
                int(padding_x + start_col * cell_size), int(padding_y + start_row * cell_size),
                int(padding_x + end_col * cell_size), int(padding_y + end_row * cell_size)
            )

    def mousePressEvent(self, event: QMouseEvent):
        """把左键点击映射到最近的交叉点并交给控制器"""
        if event.button() != Qt.LeftButton:
            return

        cell_size, padding_x, padding_y = self._geometry()
        col = round((event.x() - padding_x) / cell_size)
        row = round((event.y() - padding_y) / cell_size)
        logger.debug("棋盘点击 (%d, %d)", row, col)

        # 越界和已有棋子都由控制器转换为提示消息
        self.controller.onCellActivated(row, col)
