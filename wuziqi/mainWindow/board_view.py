# coding:utf-8
import logging

from PyQt5.QtCore import Qt, QTimer
from PyQt5.QtWidgets import QWidget, QVBoxLayout, QHBoxLayout, QLabel, QSizePolicy, QFrame

from qfluentwidgets import FluentIcon as FIF, PushButton, ComboBox, InfoBar, InfoBarPosition, MessageBox

from ..engine import GameController, InvalidMoveReason, MessageKind, StatusMessage, StoneColor
from .config import cfg
from .gomoku_board import GoBoardWidget
from .language import tr

logger = logging.getLogger(__name__)

INVALID_MOVE_TEXTS = {
    InvalidMoveReason.OCCUPIED: "该位置已有棋子！",
    InvalidMoveReason.OUT_OF_BOUNDS: "超出棋盘范围！",
    InvalidMoveReason.MALFORMED: "无效的落子坐标！",
    InvalidMoveReason.GAME_OVER: "游戏已结束，请重新开始",
    InvalidMoveReason.BAD_PLAYER: "无效的棋子颜色！",
}


def player_name(player):
    return tr("黑棋") if player is StoneColor.BLACK else tr("白棋")


def status_text(message: StatusMessage):
    """把控制器的状态消息转换为界面文本"""
    if message.kind is MessageKind.PROMPT:
        return tr("点击棋盘开始游戏")
    if message.kind is MessageKind.TURN:
        return tr("轮到{0}落子", player_name(message.player))
    if message.kind is MessageKind.INVALID_MOVE:
        return tr(INVALID_MOVE_TEXTS[message.reason])
    if message.kind is MessageKind.WIN:
        return tr("🎉 {0}获胜！", player_name(message.player))
    return tr("🤝 平局！")


class BoardWidget(QWidget):
    """五子棋游戏页面：左侧棋盘，右侧信息面板"""

    def __init__(self, controller: GameController, parent=None):
        super().__init__(parent)
        self.controller = controller
        self._init_ui_components()
        self._init_signals()
        self.update_player_info()
        self.show_status(controller.last_message)

    def _init_ui_components(self):
        """初始化UI组件"""
        self.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)

        self.main_layout = QHBoxLayout(self)
        self.main_layout.setContentsMargins(20, 20, 20, 20)
        self.main_layout.setSpacing(20)

        self.board = GoBoardWidget(self.controller, self, cfg.get(cfg.boardStyle))
        self.board.set_show_last_move(cfg.get(cfg.showLastMove))

        self.right_panel = QWidget()
        self.right_layout = QVBoxLayout(self.right_panel)
        self.right_layout.setContentsMargins(10, 10, 10, 10)
        self.right_layout.setSpacing(15)
        self.right_panel.setSizePolicy(QSizePolicy.Fixed, QSizePolicy.Preferred)
        self.right_panel.setFixedWidth(320)

        self.main_layout.addWidget(self.board, 3)
        self.main_layout.addWidget(self.right_panel, 0)

        self._create_right_panel_ui()
        self.setObjectName('App-Interface')

    def _create_right_panel_ui(self):
        """创建右侧面板上的UI元素"""
        self.title_label = QLabel(tr("五子棋游戏"))
        self.title_label.setAlignment(Qt.AlignCenter)
        title_font = self.title_label.font()
        title_font.setPointSize(24)
        title_font.setBold(True)
        self.title_label.setFont(title_font)

        self.style_label = QLabel(tr("棋盘风格："))
        self.style_combo = ComboBox(self)
        self.style_combo.addItems([tr(name) for name in self.board.get_style_names()])
        self.style_combo.setCurrentIndex(cfg.get(cfg.boardStyle))
        self.style_layout = QHBoxLayout()
        self.style_layout.addWidget(self.style_label)
        self.style_layout.addWidget(self.style_combo)
        self.style_layout.addStretch(1)

        self.separator = QFrame()
        self.separator.setFrameShape(QFrame.HLine)
        self.separator.setFrameShadow(QFrame.Sunken)

        self.player_info = QLabel()
        self.player_info.setAlignment(Qt.AlignCenter)
        info_font = self.player_info.font()
        info_font.setPointSize(16)
        info_font.setBold(True)
        self.player_info.setFont(info_font)

        self.status_label = QLabel()
        self.status_label.setAlignment(Qt.AlignCenter)
        self.status_label.setWordWrap(True)
        status_font = self.status_label.font()
        status_font.setPointSize(13)
        self.status_label.setFont(status_font)

        self.game_instructions = self._create_game_instructions()

        self.restart_button = PushButton(tr("重新开始"), self, FIF.SYNC)
        self.restart_button.setFixedHeight(40)

        self.right_layout.addWidget(self.title_label)
        self.right_layout.addSpacing(10)
        self.right_layout.addLayout(self.style_layout)
        self.right_layout.addWidget(self.separator)
        self.right_layout.addWidget(self.player_info)
        self.right_layout.addWidget(self.status_label)
        self.right_layout.addSpacing(20)
        self.right_layout.addWidget(self.game_instructions)
        self.right_layout.addSpacing(20)
        self.right_layout.addWidget(self.restart_button)
        self.right_layout.addStretch(1)

    def _create_game_instructions(self):
        """创建游戏说明标签"""
        instructions = QLabel(
            tr("游戏说明：") + "\n"
            "1. " + tr("黑棋先行，双方轮流点击棋盘落子") + "\n"
            "2. " + tr("横、竖、斜任一方向连成五子或以上即获胜") + "\n"
            "3. " + tr("棋盘下满仍无人连成五子则为平局") + "\n"
            "4. " + tr("点击「重新开始」可随时开始新的一局")
        )
        instructions.setWordWrap(True)
        instructions.setAlignment(Qt.AlignLeft)
        return instructions

    def _init_signals(self):
        """初始化信号连接"""
        self.restart_button.clicked.connect(self.onRestart)
        self.style_combo.currentIndexChanged.connect(self.change_board_style)
        cfg.showLastMove.valueChanged.connect(self.board.set_show_last_move)
        cfg.boardStyle.valueChanged.connect(self._on_board_style_config_changed)

        self.board.playerChanged.connect(self.on_player_changed)
        self.board.gameStatusChanged.connect(self.on_game_status_changed)
        self.controller.add_message_listener(self.on_status_message)

    def change_board_style(self, index):
        """更改棋盘风格"""
        if self.board.set_style(index):
            cfg.set(cfg.boardStyle, index)
            logger.debug("棋盘风格切换为 %s", self.board.get_style_names()[index])

    def _on_board_style_config_changed(self, index):
        if self.style_combo.currentIndex() != index:
            self.style_combo.setCurrentIndex(index)

    def onRestart(self):
        self.controller.onResetRequested()

    def on_player_changed(self, player_id):
        self.update_player_info()

    def on_game_status_changed(self, is_game_over, winner_id):
        """游戏状态变更处理"""
        self.update_player_info()
        if not is_game_over:
            return
        if winner_id:
            winner = StoneColor(winner_id)
            title = tr("🎉 {0}获胜！", player_name(winner))
            content = tr("{0}连成五子，赢得本局", player_name(winner))
        else:
            title = tr("🤝 平局！")
            content = tr("棋盘已满，双方平局")
        # 先让棋盘重绘出最后一手再弹窗
        QTimer.singleShot(300, lambda: self.show_result_dialog(title, content))

    def show_result_dialog(self, title, content):
        """显示终局弹窗"""
        msg_box = MessageBox(title, content, self.window())
        msg_box.yesButton.setText(tr("再来一局"))
        msg_box.cancelButton.setText(tr("继续观看棋盘"))
        if msg_box.exec():
            self.controller.onResetRequested()

    def on_status_message(self, message: StatusMessage):
        self.show_status(message)
        if message.kind is MessageKind.INVALID_MOVE:
            InfoBar.warning(
                title=tr("落子无效"),
                content=status_text(message),
                orient=Qt.Horizontal,
                isClosable=True,
                position=InfoBarPosition.TOP,
                duration=2000,
                parent=self
            )

    def show_status(self, message: StatusMessage):
        self.status_label.setText(status_text(message))

    def update_player_info(self):
        """更新当前玩家显示"""
        game = self.controller.game
        if game.game_over:
            self.player_info.setText(tr("游戏结束"))
            self.player_info.setStyleSheet("")
            return
        player = game.current_player
        self.player_info.setText(tr("当前玩家：{0}", player_name(player)))
        self.player_info.setStyleSheet("color: #000;" if player is StoneColor.BLACK else "color: #666;")
