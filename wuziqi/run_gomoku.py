# coding:utf-8
import logging
import os
import signal
import sys

logger = logging.getLogger("wuziqi")

# 全局变量，用于在信号处理器中访问应用实例
app = None


def setup_logging():
    """配置日志，级别可通过 WUZIQI_LOG_LEVEL 环境变量调整"""
    level = os.environ.get("WUZIQI_LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def signal_handler(sig, frame):
    """处理中断信号（Ctrl+C）"""
    logger.info("程序接收到中断信号，正在退出...")
    if app:
        from PyQt5.QtCore import QTimer
        QTimer.singleShot(0, app.quit)
    else:
        sys.exit(0)


def setup_signal_handling():
    """设置信号处理"""
    signal.signal(signal.SIGINT, signal_handler)

    # 在Windows上，增加SIGBREAK(Ctrl+Break)信号处理
    if hasattr(signal, 'SIGBREAK'):
        signal.signal(signal.SIGBREAK, signal_handler)


def setup_high_dpi(cfg):
    """设置高DPI支持"""
    from PyQt5.QtCore import Qt
    from PyQt5.QtWidgets import QApplication

    if cfg.get(cfg.dpiScale) != "Auto":
        os.environ["QT_ENABLE_HIGHDPI_SCALING"] = "0"
        os.environ["QT_SCALE_FACTOR"] = str(cfg.get(cfg.dpiScale))

    QApplication.setHighDpiScaleFactorRoundingPolicy(
        Qt.HighDpiScaleFactorRoundingPolicy.PassThrough)
    QApplication.setAttribute(Qt.AA_EnableHighDpiScaling)
    QApplication.setAttribute(Qt.AA_UseHighDpiPixmaps)


def main():
    """程序主入口"""
    global app

    setup_logging()
    setup_signal_handling()

    try:
        from PyQt5.QtCore import QTimer
        from PyQt5.QtWidgets import QApplication

        from wuziqi.engine import GameController, GomokuGame
        from wuziqi.mainWindow.config import cfg
        from wuziqi.mainWindow.language import Translator

        setup_high_dpi(cfg)
        Translator.instance().setLanguage(cfg.get(cfg.language))

        app = QApplication(sys.argv)
        app.setApplicationName("五子棋")

        # 对局对象由这里创建并显式传给界面
        game = GomokuGame()
        controller = GameController(game)

        from wuziqi.mainWindow.main_window import Window
        w = Window(controller)
        w.show()

        # 定时唤醒解释器，使 Ctrl+C 能在Qt事件循环中被处理
        signal_timer = QTimer()
        signal_timer.setInterval(500)
        signal_timer.timeout.connect(lambda: None)
        signal_timer.start()
        app.aboutToQuit.connect(signal_timer.stop)

        return app.exec_()
    except Exception:
        logger.exception("程序启动失败")
        return 1


if __name__ == '__main__':
    sys.exit(main())
