"""Application factory — QApplication creation, logging, font setup."""

import logging
import sys

from PyQt6.QtCore import qInstallMessageHandler, QtMsgType
from PyQt6.QtWidgets import QApplication
from PyQt6.QtGui import QFont

from rutherford.constants import APP_NAME, APP_ORGANIZATION
from rutherford.main_window import MainWindow
from rutherford.ui.styles.colors import BACKGROUND, TEXT_PRIMARY

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: int = logging.INFO) -> None:
    """Route application logging to stderr."""
    logging.basicConfig(level=level, format=_LOG_FORMAT, stream=sys.stderr)


def _qt_message_handler(msg_type, context, message):
    """Filter Qt debug/warning messages.

    Suppresses harmless QPainter warnings emitted before widgets have a
    valid size.
    """
    if "QPainter" in message:
        return

    if msg_type in (QtMsgType.QtWarningMsg, QtMsgType.QtCriticalMsg, QtMsgType.QtFatalMsg):
        print(message, file=sys.stderr)


def create_application(argv: list[str]) -> QApplication:
    """Create and configure the QApplication instance."""
    qInstallMessageHandler(_qt_message_handler)

    app = QApplication(argv)
    app.setApplicationName(APP_NAME)
    app.setOrganizationName(APP_ORGANIZATION)

    font = QFont("Segoe UI", 10)
    font.setStyleHint(QFont.StyleHint.SansSerif)
    app.setFont(font)

    app.setStyleSheet(
        f"QWidget {{ background-color: {BACKGROUND}; color: {TEXT_PRIMARY}; }}"
    )

    return app


def main() -> None:
    """Launch the simulator window."""
    configure_logging()
    app = create_application(sys.argv)
    window = MainWindow()
    window.show()
    sys.exit(app.exec())
