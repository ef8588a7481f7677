# coding:utf-8
from enum import Enum
from PyQt5.QtCore import QObject, QLocale


class Language(Enum):
    """语言枚举"""
    CHINESE_SIMPLIFIED = QLocale(QLocale.Chinese, QLocale.SimplifiedChineseScript, QLocale.China)
    ENGLISH = QLocale(QLocale.English, QLocale.AnyScript, QLocale.UnitedStates)

    @classmethod
    def getLanguages(cls):
        """获取所有支持的语言"""
        return [cls.CHINESE_SIMPLIFIED, cls.ENGLISH]

    def __str__(self):
        if self == Language.CHINESE_SIMPLIFIED:
            return "简体中文"
        return "English"


class Translator(QObject):
    """翻译器单例，源文本为简体中文"""
    _instance = None

    @classmethod
    def instance(cls) -> "Translator":
        """获取翻译器单例"""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def __init__(self):
        super().__init__()
        self._translations = {
            # 黑白棋
            "黑棋": {"en_US": "Black"},
            "白棋": {"en_US": "White"},

            # 状态消息
            "点击棋盘开始游戏": {"en_US": "Click the board to start"},
            "该位置已有棋子！": {"en_US": "This position is already occupied!"},
            "超出棋盘范围！": {"en_US": "Out of the board!"},
            "无效的落子坐标！": {"en_US": "Invalid move coordinates!"},
            "游戏已结束，请重新开始": {"en_US": "Game over, please restart"},
            "无效的棋子颜色！": {"en_US": "Invalid stone color!"},
            "🎉 {0}获胜！": {"en_US": "🎉 {0} wins!"},
            "🤝 平局！": {"en_US": "🤝 Draw!"},
            "轮到{0}落子": {"en_US": "{0} to move"},
            "当前玩家：{0}": {"en_US": "Current player: {0}"},
            "落子无效": {"en_US": "Invalid move"},
            "游戏结束": {"en_US": "Game over"},
            "棋盘已满，双方平局": {"en_US": "The board is full, the game is a draw"},
            "{0}连成五子，赢得本局": {"en_US": "{0} made five in a row and won the game"},
            "再来一局": {"en_US": "Play again"},
            "继续观看棋盘": {"en_US": "Keep viewing"},

            # 界面文本
            "五子棋游戏": {"en_US": "Gomoku Game"},
            "自由规则 · 双人对弈": {"en_US": "Freestyle rules · Two players"},
            "主页": {"en_US": "Home"},
            "设置": {"en_US": "Settings"},
            "帮助": {"en_US": "Help"},
            "重新开始": {"en_US": "Restart"},
            "棋盘风格：": {"en_US": "Board Style:"},
            "游戏说明：": {"en_US": "How to play:"},
            "黑棋先行，双方轮流点击棋盘落子": {"en_US": "Black plays first, players take turns clicking the board"},
            "横、竖、斜任一方向连成五子或以上即获胜": {"en_US": "Five or more in a row in any direction wins"},
            "棋盘下满仍无人连成五子则为平局": {"en_US": "A full board without five in a row is a draw"},
            "点击「重新开始」可随时开始新的一局": {"en_US": "Click 'Restart' at any time to start a new game"},

            # 棋盘风格
            "经典木色": {"en_US": "Classic Wood"},
            "淡雅青色": {"en_US": "Elegant Cyan"},
            "复古黄褐": {"en_US": "Vintage Brown"},
            "冷酷灰色": {"en_US": "Cool Gray"},
            "暗黑模式": {"en_US": "Dark Mode"},
        }
        self.current_locale = Language.CHINESE_SIMPLIFIED.value

    def setLanguage(self, language: Language):
        """设置当前语言"""
        self.current_locale = language.value

    def translate(self, source: str, *args) -> str:
        """翻译文本，args 用于填充 {0} 等占位符"""
        text = source
        if not self.current_locale.name().startswith("zh_"):
            translations = self._translations.get(source, {})
            locale_name = self.current_locale.name()
            if locale_name in translations:
                text = translations[locale_name]
            else:
                # 没有精确匹配时按语言代码匹配
                lang_code = locale_name.split('_')[0]
                for key, value in translations.items():
                    if key.startswith(f"{lang_code}_"):
                        text = value
                        break

        return text.format(*args) if args else text


def tr(source: str, *args) -> str:
    return Translator.instance().translate(source, *args)
