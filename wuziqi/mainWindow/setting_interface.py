# coding:utf-8
from qfluentwidgets import (SettingCardGroup, SwitchSettingCard, OptionsSettingCard,
                            ScrollArea, ComboBoxSettingCard, ExpandLayout, Theme, InfoBar,
                            setTheme, CustomColorSettingCard, HyperlinkCard, setThemeColor)
from qfluentwidgets import FluentIcon as FIF
from PyQt5.QtCore import Qt
from PyQt5.QtWidgets import QWidget

from .config import cfg, HELP_URL, AUTHOR, VERSION, YEAR
from .gomoku_board import GoBoardWidget
from .language import tr


class SettingInterface(ScrollArea):
    """ 设置界面 """

    def __init__(self, parent=None):
        super().__init__(parent=parent)
        self.scrollWidget = QWidget()
        self.expandLayout = ExpandLayout(self.scrollWidget)

        # 游戏设置组
        self.gameSettingsGroup = SettingCardGroup("游戏设置", self.scrollWidget)
        self.boardStyleCard = ComboBoxSettingCard(
            cfg.boardStyle,
            FIF.PALETTE,
            "棋盘风格",
            "选择棋盘的背景和线条颜色",
            texts=[tr(name) for name in GoBoardWidget.BOARD_STYLES],
            parent=self.gameSettingsGroup
        )
        self.showLastMoveCard = SwitchSettingCard(
            FIF.PIN,
            "标记最后一手",
            "在最近一次落子的棋子上显示红点",
            configItem=cfg.showLastMove,
            parent=self.gameSettingsGroup
        )

        # 个性化组
        self.personalGroup = SettingCardGroup("个性化", self.scrollWidget)
        self.themeCard = OptionsSettingCard(
            cfg.themeMode,
            FIF.BRUSH,
            "应用主题",
            "调整你的应用外观",
            texts=[
                "浅色", "深色", "跟随系统设置"
            ],
            parent=self.personalGroup
        )
        self.themeColorCard = CustomColorSettingCard(
            cfg.themeColor,
            FIF.PALETTE,
            "主题颜色",
            "改变应用的主题颜色",
            self.personalGroup
        )
        self.zoomCard = OptionsSettingCard(
            cfg.dpiScale,
            FIF.ZOOM,
            "界面缩放",
            "调整组件和字体的大小",
            texts=[
                "100%", "125%", "150%", "175%", "200%", "跟随系统设置"
            ],
            parent=self.personalGroup
        )
        self.languageCard = ComboBoxSettingCard(
            cfg.language,
            FIF.LANGUAGE,
            "语言",
            "设置界面的首选语言",
            texts=["简体中文", "English"],
            parent=self.personalGroup
        )

        # 关于组
        self.aboutGroup = SettingCardGroup("关于", self.scrollWidget)
        self.helpCard = HyperlinkCard(
            HELP_URL,
            "打开帮助页面",
            FIF.HELP,
            "帮助",
            "了解五子棋的规则",
            self.aboutGroup
        )
        self.aboutCard = HyperlinkCard(
            HELP_URL,
            "关于",
            FIF.INFO,
            "关于",
            '© ' + "版权所有" + f" {YEAR}, {AUTHOR}. " + "当前版本" + f" {VERSION}",
            self.aboutGroup
        )

        self.__initWidget()

    def __initWidget(self):
        self.resize(1000, 800)
        self.setHorizontalScrollBarPolicy(Qt.ScrollBarAlwaysOff)
        self.setViewportMargins(0, 0, 0, 20)
        self.setWidget(self.scrollWidget)
        self.setWidgetResizable(True)
        self.setObjectName('Setting-Interface')
        self.scrollWidget.setObjectName('scrollWidget')

        self.__initLayout()
        self.__connectSignalToSlot()

    def __initLayout(self):
        self.gameSettingsGroup.addSettingCard(self.boardStyleCard)
        self.gameSettingsGroup.addSettingCard(self.showLastMoveCard)

        self.personalGroup.addSettingCard(self.themeCard)
        self.personalGroup.addSettingCard(self.themeColorCard)
        self.personalGroup.addSettingCard(self.zoomCard)
        self.personalGroup.addSettingCard(self.languageCard)

        self.aboutGroup.addSettingCard(self.helpCard)
        self.aboutGroup.addSettingCard(self.aboutCard)

        self.expandLayout.setSpacing(28)
        self.expandLayout.setContentsMargins(60, 10, 60, 0)
        self.expandLayout.addWidget(self.gameSettingsGroup)
        self.expandLayout.addWidget(self.personalGroup)
        self.expandLayout.addWidget(self.aboutGroup)

    def __showRestartTooltip(self):
        """ 显示重启提示 """
        InfoBar.warning(
            '',
            '配置将在重启后生效',
            parent=self.window()
        )

    def __onThemeChanged(self, theme: Theme):
        setTheme(theme)

    def __connectSignalToSlot(self):
        """ 连接信号和槽 """
        cfg.appRestartSig.connect(self.__showRestartTooltip)
        cfg.themeChanged.connect(self.__onThemeChanged)
        self.themeColorCard.colorChanged.connect(setThemeColor)
