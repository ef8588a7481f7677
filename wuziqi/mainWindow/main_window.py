# coding:utf-8
from PyQt5.QtCore import Qt
from PyQt5.QtGui import QIcon
from PyQt5.QtWidgets import QLabel, QHBoxLayout, QApplication, QStackedWidget

from qfluentwidgets import (NavigationBar, NavigationItemPosition, isDarkTheme,
                            FluentIcon as FIF, setTheme, setThemeColor)
from qframelesswindow import FramelessWindow, TitleBar

from ..engine import GameController
from .board_view import BoardWidget
from .config import cfg, HELP_URL
from .home_interface import HomeInterface
from .language import tr
from .setting_interface import SettingInterface


class CustomTitleBar(TitleBar):
    """ Title bar with icon and title """

    def __init__(self, parent):
        super().__init__(parent)
        self.setFixedHeight(48)
        self.hBoxLayout.removeWidget(self.minBtn)
        self.hBoxLayout.removeWidget(self.maxBtn)
        self.hBoxLayout.removeWidget(self.closeBtn)

        # add window icon
        self.iconLabel = QLabel(self)
        self.iconLabel.setFixedSize(18, 18)
        self.hBoxLayout.insertSpacing(0, 20)
        self.hBoxLayout.insertWidget(
            1, self.iconLabel, 0, Qt.AlignLeft | Qt.AlignVCenter)
        self.window().windowIconChanged.connect(self.setIcon)

        # add title label
        self.titleLabel = QLabel(self)
        self.hBoxLayout.insertWidget(
            2, self.titleLabel, 0, Qt.AlignLeft | Qt.AlignVCenter)
        self.titleLabel.setObjectName('titleLabel')
        self.window().windowTitleChanged.connect(self.setTitle)

        # 窗口控制按钮放到右侧
        self.hBoxLayout.addStretch(1)
        self.buttonLayout = QHBoxLayout()
        self.buttonLayout.setSpacing(0)
        self.buttonLayout.setContentsMargins(0, 0, 0, 0)
        self.buttonLayout.setAlignment(Qt.AlignTop)
        self.buttonLayout.addWidget(self.minBtn)
        self.buttonLayout.addWidget(self.maxBtn)
        self.buttonLayout.addWidget(self.closeBtn)
        self.hBoxLayout.addLayout(self.buttonLayout)

    def setTitle(self, title):
        self.titleLabel.setText(title)
        self.titleLabel.adjustSize()

    def setIcon(self, icon):
        self.iconLabel.setPixmap(QIcon(icon).pixmap(18, 18))


class Window(FramelessWindow):
    """主窗口，对局由调用方创建并传入"""

    def __init__(self, controller: GameController):
        super().__init__()
        self.controller = controller
        self.setTitleBar(CustomTitleBar(self))

        self._init_ui_components()
        self._init_navigation()
        self._init_window_properties()
        cfg.themeChanged.connect(self.onThemeChanged)

    def _init_ui_components(self):
        """初始化UI组件"""
        self.hBoxLayout = QHBoxLayout(self)
        self.navigationBar = NavigationBar(self)
        self.stackWidget = QStackedWidget(self)

        self.homeInterface = HomeInterface(self)
        self.appInterface = BoardWidget(self.controller, self)
        self.settingInterface = SettingInterface(self)

        self.hBoxLayout.setSpacing(0)
        self.hBoxLayout.setContentsMargins(0, 48, 0, 0)
        self.hBoxLayout.addWidget(self.navigationBar)
        self.hBoxLayout.addWidget(self.stackWidget)
        self.hBoxLayout.setStretchFactor(self.stackWidget, 1)

    def _init_navigation(self):
        """初始化导航栏"""
        self.addSubInterface(self.homeInterface, FIF.HOME, tr('主页'), selectedIcon=FIF.HOME_FILL)
        self.addSubInterface(self.appInterface, FIF.GAME, tr('五子棋游戏'))
        self.addSubInterface(self.settingInterface, FIF.SETTING, tr('设置'), NavigationItemPosition.BOTTOM)

        self.navigationBar.addItem(
            routeKey='Help',
            icon=FIF.HELP,
            text=tr('帮助'),
            onClick=self.showHelp,
            selectable=False,
            position=NavigationItemPosition.BOTTOM,
        )

        self.stackWidget.currentChanged.connect(self.onCurrentInterfaceChanged)
        self.navigationBar.setCurrentItem(self.homeInterface.objectName())

    def _init_window_properties(self):
        """初始化窗口属性"""
        self.resize(1000, 800)
        self.setWindowIcon(FIF.GAME.icon())
        self.setWindowTitle(tr('五子棋游戏'))
        self.titleBar.setAttribute(Qt.WA_StyledBackground)

        desktop = QApplication.desktop().availableGeometry()
        w, h = desktop.width(), desktop.height()
        self.move(w//2 - self.width()//2, h//2 - self.height()//2)

        setTheme(cfg.get(cfg.themeMode))
        setThemeColor(cfg.get(cfg.themeColor))
        self.updateBackground()

    def addSubInterface(self, interface, icon, text: str, position=NavigationItemPosition.TOP, selectedIcon=None):
        self.stackWidget.addWidget(interface)
        self.navigationBar.addItem(
            routeKey=interface.objectName(),
            icon=icon,
            text=text,
            onClick=lambda: self.switchTo(interface),
            selectedIcon=selectedIcon,
            position=position,
        )

    def switchTo(self, widget):
        self.stackWidget.setCurrentWidget(widget)

    def onCurrentInterfaceChanged(self, index):
        widget = self.stackWidget.widget(index)
        self.navigationBar.setCurrentItem(widget.objectName())

    def showHelp(self):
        from PyQt5.QtCore import QUrl
        from PyQt5.QtGui import QDesktopServices
        QDesktopServices.openUrl(QUrl(HELP_URL))

    def updateBackground(self):
        color = "rgb(32, 32, 32)" if isDarkTheme() else "rgb(243, 243, 243)"
        self.setStyleSheet(f"Window {{ background-color: {color}; }}")

    def onThemeChanged(self, theme):
        """响应主题变更，更新所有界面样式"""
        setTheme(theme)
        self.updateBackground()
        self.homeInterface.updateStyle()
        self.update()
