"""Visual theme constants and QSS styles for Chessgrid."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the chessboard."""

    light_square: QColor
    dark_square: QColor
    highlight_from: QColor  # selected piece origin
    move_dot: QColor  # empty destination marker
    glyph_white: QColor
    glyph_black: QColor
    coord_light: QColor  # coordinate text on dark squares
    coord_dark: QColor  # coordinate text on light squares

    @classmethod
    def default(cls) -> BoardTheme:
        return cls(
            light_square=QColor(204, 183, 174),  # rose grey
            dark_square=QColor(112, 102, 119),  # slate violet
            highlight_from=QColor(255, 255, 0, 90),
            move_dot=QColor(255, 255, 255, 128),
            glyph_white=QColor(250, 250, 250),
            glyph_black=QColor(20, 20, 20),
            coord_light=QColor(204, 183, 174),
            coord_dark=QColor(112, 102, 119),
        )

    @classmethod
    def tan(cls) -> BoardTheme:
        return cls(
            light_square=QColor(240, 217, 181),
            dark_square=QColor(181, 136, 99),
            highlight_from=QColor(255, 255, 0, 100),
            move_dot=QColor(0, 0, 0, 60),
            glyph_white=QColor(255, 255, 255),
            glyph_black=QColor(0, 0, 0),
            coord_light=QColor(240, 217, 181),
            coord_dark=QColor(181, 136, 99),
        )

    @classmethod
    def blue(cls) -> BoardTheme:
        return cls(
            light_square=QColor(222, 227, 230),
            dark_square=QColor(140, 162, 173),
            highlight_from=QColor(255, 255, 0, 100),
            move_dot=QColor(0, 0, 0, 60),
            glyph_white=QColor(255, 255, 255),
            glyph_black=QColor(0, 0, 0),
            coord_light=QColor(222, 227, 230),
            coord_dark=QColor(140, 162, 173),
        )

    @classmethod
    def named(cls, name: str) -> BoardTheme | None:
        """Preset by display name, or None if unknown."""
        factory = _PRESETS.get(name)
        return factory() if factory is not None else None


_PRESETS = {
    "Classic": BoardTheme.default,
    "Tan": BoardTheme.tan,
    "Blue": BoardTheme.blue,
}

THEME_NAMES: tuple[str, ...] = tuple(_PRESETS)


# ── Application-wide QSS ────────────────────────────────────────────────────

APP_STYLE = """
QMainWindow {
    background: #2b2b2b;
}

QStatusBar {
    background: #2b2b2b;
    color: #e0e0e0;
}

QStatusBar QLabel {
    color: #e0e0e0;
    font-family: "Adwaita Sans", "Helvetica Neue", sans-serif;
    font-size: 13px;
    padding: 2px 8px;
}

QMenuBar {
    background: #2b2b2b;
    color: #e0e0e0;
}
QMenuBar::item:selected {
    background: #3c3c3c;
}
QMenu {
    background: #2b2b2b;
    color: #e0e0e0;
    border: 1px solid #3c3c3c;
}
QMenu::item:selected {
    background: #264f78;
}
"""
