# coding:utf-8
from PyQt5.QtCore import QLocale
from qfluentwidgets import (qconfig, QConfig, ConfigItem, OptionsConfigItem, BoolValidator,
                            ColorConfigItem, OptionsValidator,
                            ConfigSerializer, Theme)

from .language import Language


class LanguageSerializer(ConfigSerializer):
    """ 语言序列化器 """
    def serialize(self, language):
        return language.value.name()

    def deserialize(self, value: str):
        try:
            return Language(QLocale(value))
        except ValueError:
            return Language.CHINESE_SIMPLIFIED


class ThemeSerializer(ConfigSerializer):
    """ 主题序列化器 """
    def serialize(self, theme):
        """将Theme枚举序列化为字符串"""
        if theme == Theme.AUTO:
            return "Auto"
        elif theme == Theme.DARK:
            return "Dark"
        else:
            return "Light"

    def deserialize(self, value: str):
        """将字符串反序列化为Theme枚举"""
        if value == "Auto":
            return Theme.AUTO
        elif value == "Dark":
            return Theme.DARK
        else:
            return Theme.LIGHT


class Config(QConfig):
    """ 应用程序配置 """

    # 主窗口
    dpiScale = OptionsConfigItem(
        "MainWindow", "DpiScale", "Auto", OptionsValidator([1, 1.25, 1.5, 1.75, 2, "Auto"]), restart=True)
    language = OptionsConfigItem(
        "MainWindow", "Language", Language.CHINESE_SIMPLIFIED, OptionsValidator(Language), LanguageSerializer(), restart=True
    )

    # 主题
    themeMode = OptionsConfigItem(
        "Theme", "ThemeMode", Theme.LIGHT,
        OptionsValidator([Theme.LIGHT, Theme.DARK, Theme.AUTO]),
        ThemeSerializer()
    )
    themeColor = ColorConfigItem(
        "Theme", "ThemeColor", "#0078d4"
    )

    # 游戏设置，棋盘风格为 GoBoardWidget.BOARD_STYLES 的下标
    boardStyle = OptionsConfigItem(
        "Game", "BoardStyle", 0, OptionsValidator([0, 1, 2, 3, 4]))
    showLastMove = ConfigItem(
        "Game", "ShowLastMove", True, BoolValidator())


# 应用元数据
YEAR = 2025
AUTHOR = "五子棋小组"
VERSION = "1.0.0"
HELP_URL = "https://en.wikipedia.org/wiki/Gomoku"

# 加载配置
cfg = Config()
qconfig.load('config/config.json', cfg)
