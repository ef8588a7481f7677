"""双人五子棋（自由规则，15x15 棋盘）"""

__version__ = "1.0.0"
