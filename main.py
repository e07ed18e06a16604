"""
Catalog Scope launcher.

Parses the command line, configures logging and the global exception
hook, then opens the catalog viewer over the bundled catalog.
"""

from __future__ import annotations

import argparse
import faulthandler
import logging
import signal
import sys
import traceback
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Optional, List

from PyQt6.QtCore import Qt, QTimer
from PyQt6.QtGui import QColor, QPalette
from PyQt6.QtWidgets import QApplication, QMessageBox, QStyleFactory

from catalogscope import __version__
from catalogscope.core.models import Catalog
from catalogscope.resources import CATALOG_TEXT
from catalogscope.services.settings import Theme, ViewerSettings


# =============================================================================
# Constants
# =============================================================================

APP_NAME = "CatalogScope"
APP_DISPLAY_NAME = "Catalog Scope"
APP_VERSION = __version__

APP_DIR = Path(__file__).parent
LOGS_DIR = APP_DIR / "logs"

THEME_CHOICES = [theme.value for theme in Theme]
LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']


@dataclass
class CommandLineArgs:
    """Options taken from the command line."""
    theme: Optional[Theme] = None
    log_level: str = "INFO"
    animate_scroll: bool = True
    debug: bool = False


# =============================================================================
# Logging
# =============================================================================

class LogFormatter(logging.Formatter):
    """Pipe-separated formatter; colours the line by level on a terminal."""

    LEVEL_COLORS = {
        logging.DEBUG: '\033[36m',
        logging.WARNING: '\033[33m',
        logging.ERROR: '\033[31m',
        logging.CRITICAL: '\033[1;31m',
    }
    RESET = '\033[0m'

    def __init__(self, use_colors: bool = True):
        super().__init__(
            fmt='%(asctime)s | %(levelname)-8s | %(name)s | %(message)s',
            datefmt='%H:%M:%S'
        )
        self.use_colors = use_colors and sys.stdout.isatty()

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        color = self.LEVEL_COLORS.get(record.levelno) if self.use_colors else None
        return f"{color}{line}{self.RESET}" if color else line


def setup_logging(level: str = "INFO", log_file: Optional[Path] = None) -> logging.Logger:
    """
    Route all logging to stdout, and to log_file when one is given.

    Any handlers already on the root logger are replaced.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(LogFormatter(use_colors=True))
    handlers: List[logging.Handler] = [console_handler]

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setFormatter(LogFormatter(use_colors=False))
        handlers.append(file_handler)

    for handler in handlers:
        handler.setLevel(numeric_level)
        root_logger.addHandler(handler)

    return root_logger


# =============================================================================
# Exception Hook
# =============================================================================

class ExceptionHandler:
    """
    Replacement for sys.excepthook.

    Logs every unhandled exception at CRITICAL and, once the application
    is running, reports it in a critical message box.
    """

    def __init__(self, logger: logging.Logger):
        self.logger = logger
        self._app: Optional[QApplication] = None

    def set_application(self, app: QApplication) -> None:
        self._app = app

    def handle_exception(
        self,
        exc_type: type,
        exc_value: BaseException,
        exc_tb
    ) -> None:
        if issubclass(exc_type, KeyboardInterrupt):
            sys.__excepthook__(exc_type, exc_value, exc_tb)
            return

        self.logger.critical(
            "Unhandled exception",
            exc_info=(exc_type, exc_value, exc_tb)
        )

        if self._app is None or QApplication.instance() is None:
            return

        dialog = QMessageBox(
            QMessageBox.Icon.Critical,
            "Catalog Scope Error",
            f"{exc_type.__name__}: {exc_value}"
        )
        dialog.setDetailedText(''.join(traceback.format_exception(exc_type, exc_value, exc_tb)))
        dialog.exec()


# =============================================================================
# Command Line
# =============================================================================

def parse_arguments(args: Optional[List[str]] = None) -> CommandLineArgs:
    """Parse args (sys.argv when None) into CommandLineArgs."""
    parser = argparse.ArgumentParser(
        prog=APP_NAME,
        description="Search, highlight and lock identifiers in the bundled catalog",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                       Open the catalog viewer
  %(prog)s --theme dark          Start with dark theme
  %(prog)s --no-animation        Jump to matches without smooth scrolling
        """
    )

    display = parser.add_argument_group('display')
    display.add_argument('--theme', choices=THEME_CHOICES, help='Application theme')
    display.add_argument(
        '--no-animation',
        action='store_true',
        help='Disable smooth scrolling to the first match'
    )

    logs = parser.add_argument_group('logging')
    logs.add_argument('-v', '--verbose', action='store_true', help='Same as --log-level DEBUG')
    logs.add_argument(
        '--debug',
        action='store_true',
        help='Log at DEBUG and also write a dated file under logs/'
    )
    logs.add_argument('--log-level', choices=LOG_LEVELS, default='INFO', help='Log level')

    parser.add_argument('--version', action='version', version=f'{APP_NAME} {APP_VERSION}')

    parsed = parser.parse_args(args)

    return CommandLineArgs(
        theme=Theme.from_string(parsed.theme) if parsed.theme else None,
        log_level='DEBUG' if parsed.debug or parsed.verbose else parsed.log_level,
        animate_scroll=not parsed.no_animation,
        debug=parsed.debug,
    )


def build_settings(args: CommandLineArgs) -> ViewerSettings:
    """Build viewer settings from defaults and command line options."""
    settings = ViewerSettings()
    if args.theme is not None:
        settings.ui.theme = args.theme
    settings.scroll.animate = args.animate_scroll
    return settings


# =============================================================================
# Application
# =============================================================================

DARK_PALETTE = {
    QPalette.ColorRole.Window: QColor(45, 45, 45),
    QPalette.ColorRole.WindowText: QColor(212, 212, 212),
    QPalette.ColorRole.Base: QColor(35, 35, 35),
    QPalette.ColorRole.AlternateBase: QColor(45, 45, 45),
    QPalette.ColorRole.ToolTipBase: QColor(45, 45, 45),
    QPalette.ColorRole.ToolTipText: QColor(212, 212, 212),
    QPalette.ColorRole.Text: QColor(212, 212, 212),
    QPalette.ColorRole.Button: QColor(45, 45, 45),
    QPalette.ColorRole.ButtonText: QColor(212, 212, 212),
    QPalette.ColorRole.Highlight: QColor(42, 130, 218),
    QPalette.ColorRole.HighlightedText: QColor(Qt.GlobalColor.black),
}

DARK_DISABLED_ROLES = (
    QPalette.ColorRole.WindowText,
    QPalette.ColorRole.Text,
    QPalette.ColorRole.ButtonText,
)


def setup_application(args: CommandLineArgs) -> QApplication:
    """Create the QApplication and set its identity."""
    app = QApplication(sys.argv)
    app.setApplicationName(APP_NAME)
    app.setApplicationDisplayName(APP_DISPLAY_NAME)
    app.setApplicationVersion(APP_VERSION)
    app.setQuitOnLastWindowClosed(True)
    return app


def setup_theme(app: QApplication, theme: Theme) -> None:
    """Use the Fusion style, with a dark palette for Theme.DARK."""
    logging.info(f"Setting up theme: {theme.value}")

    app.setStyle(QStyleFactory.create("Fusion"))

    if theme == Theme.DARK:
        _apply_dark_theme(app)


def _apply_dark_theme(app: QApplication) -> None:
    palette = QPalette()
    for role, color in DARK_PALETTE.items():
        palette.setColor(role, color)
    for role in DARK_DISABLED_ROLES:
        palette.setColor(QPalette.ColorGroup.Disabled, role, QColor(127, 127, 127))
    app.setPalette(palette)


def create_main_window(settings: ViewerSettings):
    """Open the main window over the bundled catalog."""
    from catalogscope.ui.main_window import MainWindow

    catalog = Catalog.from_text(CATALOG_TEXT)
    logging.info(f"Loaded catalog with {len(catalog)} entries")
    return MainWindow(catalog, settings)


def setup_signal_handlers() -> Optional[QTimer]:
    """
    Quit on SIGINT and SIGTERM.

    Returns the keep-alive timer that lets Python run its signal handlers
    while Qt owns the event loop, or None on Windows.
    """
    if sys.platform == 'win32':
        return None

    for signum in (signal.SIGINT, signal.SIGTERM):
        signal.signal(signum, _signal_handler)

    timer = QTimer()
    timer.timeout.connect(lambda: None)
    timer.start(500)
    return timer


def _signal_handler(signum, frame) -> None:
    logging.info(f"Received signal {signum}, quitting")
    QApplication.quit()


# =============================================================================
# Main
# =============================================================================

def main() -> int:
    """Run the viewer and return the process exit code."""
    faulthandler.enable()

    args = parse_arguments()

    log_file = LOGS_DIR / f"{APP_NAME}_{datetime.now():%Y%m%d}.log" if args.debug else None
    logger = setup_logging(args.log_level, log_file)
    logger.info(f"Starting {APP_NAME} v{APP_VERSION}")

    exception_handler = ExceptionHandler(logger)
    sys.excepthook = exception_handler.handle_exception

    try:
        app = setup_application(args)
        exception_handler.set_application(app)

        settings = build_settings(args)
        setup_theme(app, settings.ui.theme)
        signal_timer = setup_signal_handlers()

        main_window = create_main_window(settings)
        main_window.show()

        exit_code = app.exec()

        if signal_timer:
            signal_timer.stop()

        logger.info(f"Exiting with code {exit_code}")
        return exit_code

    except Exception as e:
        logger.critical(f"Fatal error during startup: {e}", exc_info=True)

        if QApplication.instance():
            QMessageBox.critical(
                None,
                "Fatal Error",
                f"Catalog Scope failed to start:\n\n{e}\n\n"
                "See the log output for details."
            )

        return 1


if __name__ == '__main__':
    sys.exit(main())
