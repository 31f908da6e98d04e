"""Qt application bootstrap helpers."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

from chessgrid.ui.settings import AppSettings

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QApplication

_LOGGER = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """Route library logging to stderr at *level*."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _configure_application(app: QApplication) -> None:
    """Apply app-wide settings and theme."""
    from chessgrid.ui.styles.theme import APP_STYLE

    app.setApplicationName("Chessgrid")
    app.setStyle("Fusion")
    app.setStyleSheet(APP_STYLE)


def run_application(
    settings: AppSettings | None = None, argv: list[str] | None = None
) -> int:
    """Create and run the main Qt application."""
    from PyQt6.QtWidgets import QApplication

    from chessgrid.ui.main_window import MainWindow

    settings = settings if settings is not None else AppSettings()
    app = QApplication(sys.argv if argv is None else argv)
    _configure_application(app)

    window = MainWindow(settings)
    window.show()
    _LOGGER.info("Board ready (%s)", settings.start_fen)

    return app.exec()
