# coding:utf-8
from PyQt5.QtCore import Qt
from PyQt5.QtWidgets import QLabel, QHBoxLayout, QVBoxLayout, QWidget, QGridLayout

from qfluentwidgets import isDarkTheme, CardWidget, ScrollArea, FluentIcon as FIF, IconWidget

from .config import AUTHOR, VERSION, YEAR
from .language import tr


class HomeInterface(ScrollArea):
    """ 主页界面 - 包含游戏介绍 """

    def __init__(self, parent=None):
        super().__init__(parent=parent)
        self.setObjectName('Home-Interface')

        self.scrollWidget = QWidget()
        self.setWidget(self.scrollWidget)
        self.setWidgetResizable(True)
        self.setHorizontalScrollBarPolicy(Qt.ScrollBarAlwaysOff)

        self.mainLayout = QVBoxLayout(self.scrollWidget)
        self.mainLayout.setContentsMargins(40, 40, 40, 40)
        self.mainLayout.setSpacing(30)

        self.setupTitleArea()
        self.setupCardLayout()
        self.setupFooterArea()
        self.updateStyle()

    def setupTitleArea(self):
        """设置标题区域"""
        titleContainer = QWidget()
        titleLayout = QHBoxLayout(titleContainer)

        # IconWidget 不接受 size 参数，需要先创建再设置大小
        iconLabel = IconWidget(FIF.GAME)
        iconLabel.setFixedSize(72, 72)

        titleTextWidget = QWidget()
        titleTextLayout = QVBoxLayout(titleTextWidget)
        titleTextLayout.setContentsMargins(0, 0, 0, 0)

        self.titleLabel = QLabel(tr("五子棋游戏"))
        titleFont = self.titleLabel.font()
        titleFont.setPointSize(28)
        titleFont.setBold(True)
        self.titleLabel.setFont(titleFont)

        self.subtitleLabel = QLabel(tr("自由规则 · 双人对弈"))
        subtitleFont = self.subtitleLabel.font()
        subtitleFont.setPointSize(14)
        self.subtitleLabel.setFont(subtitleFont)
        self.subtitleLabel.setObjectName("subtitleLabel")

        titleTextLayout.addWidget(self.titleLabel)
        titleTextLayout.addWidget(self.subtitleLabel)

        titleLayout.addWidget(iconLabel)
        titleLayout.addWidget(titleTextWidget, 1)
        titleLayout.addStretch(2)

        self.mainLayout.addWidget(titleContainer)

    def setupCardLayout(self):
        """设置卡片布局"""
        gridLayout = QGridLayout()
        gridLayout.setSpacing(20)

        introCard = self.createCard(
            "游戏简介",
            FIF.INFO,
            "经典的 15×15 五子棋，两名玩家在同一台电脑上轮流落子。"
            "采用自由规则：黑棋先行，没有禁手，连成五子或更多即获胜。",
        )
        guideCard = self.createCard(
            "使用指南",
            FIF.HELP,
            "<b>1. 开始游戏</b> — 点击左侧导航栏的\"五子棋游戏\"，直接点击棋盘落子<br>"
            "<b>2. 判定胜负</b> — 横、竖、斜任一方向连成五子即获胜，棋盘下满则平局<br>"
            "<b>3. 重新开始</b> — 点击\"重新开始\"按钮可随时开始新的一局<br>"
            "<b>4. 个性设置</b> — 在\"设置\"页面调整棋盘风格、主题和语言<br>",
        )

        gridLayout.addWidget(introCard, 0, 0)
        gridLayout.addWidget(guideCard, 0, 1)
        self.mainLayout.addLayout(gridLayout)

    def setupFooterArea(self):
        """设置底部信息区域"""
        self.footerLabel = QLabel(f"© {YEAR} {AUTHOR} - 版本 {VERSION}")
        self.footerLabel.setAlignment(Qt.AlignCenter)
        footerFont = self.footerLabel.font()
        footerFont.setPointSize(9)
        self.footerLabel.setFont(footerFont)
        self.footerLabel.setObjectName("footerLabel")

        self.mainLayout.addStretch(1)
        self.mainLayout.addWidget(self.footerLabel)

    def createCard(self, title, icon, content):
        """创建信息卡片"""
        card = CardWidget()
        cardLayout = QVBoxLayout(card)

        titleWidget = QWidget()
        titleLayout = QHBoxLayout(titleWidget)
        titleLayout.setContentsMargins(0, 0, 0, 0)

        iconWidget = IconWidget(icon)
        iconWidget.setFixedSize(24, 24)

        titleLabel = QLabel(title)
        titleFont = titleLabel.font()
        titleFont.setPointSize(14)
        titleFont.setBold(True)
        titleLabel.setFont(titleFont)

        titleLayout.addWidget(iconWidget)
        titleLayout.addWidget(titleLabel)
        titleLayout.addStretch(1)

        contentLabel = QLabel(content)
        contentLabel.setWordWrap(True)
        contentLabel.setTextFormat(Qt.RichText)
        contentFont = contentLabel.font()
        contentFont.setPointSize(11)
        contentLabel.setFont(contentFont)

        cardLayout.addWidget(titleWidget)
        cardLayout.addWidget(contentLabel, 1)
        return card

    def updateStyle(self):
        """更新界面样式以适应主题变化"""
        styleSheet = """
            QLabel#subtitleLabel, QLabel#footerLabel {
                color: gray;
            }
            QLabel {
                background-color: transparent;
            }
        """
        if isDarkTheme():
            styleSheet += """
                CardWidget {
                    background-color: #3c3c3c;
                    border: 1px solid #505050;
                    border-radius: 8px;
                }
                QLabel {
                    color: white;
                }
            """
        else:
            styleSheet += """
                CardWidget {
                    background-color: white;
                    border: 1px solid #e0e0e0;
                    border-radius: 8px;
                }
                QLabel {
                    color: black;
                }
            """
        self.setStyleSheet(styleSheet)
