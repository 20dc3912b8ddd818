"""Visual theme constants and QSS styles for Kingfall."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the board."""

    light_square: QColor
    dark_square: QColor
    highlight_selected: QColor  # selected piece origin
    highlight_target: QColor  # legal move targets
    highlight_check: QColor  # king in check
    highlight_last_move: QColor  # origin and destination of last move
    piece_white: QColor
    piece_black: QColor
    coord_light: QColor  # coordinate text on light squares
    coord_dark: QColor  # coordinate text on dark squares

    @classmethod
    def default(cls) -> BoardTheme:
        return cls(
            light_square=QColor(240, 217, 181),  # tan
            dark_square=QColor(181, 136, 99),  # brown
            highlight_selected=QColor(255, 255, 0, 100),
            highlight_target=QColor(0, 0, 0, 40),
            highlight_check=QColor(255, 0, 0, 120),
            highlight_last_move=QColor(155, 199, 0, 105),
            piece_white=QColor(255, 255, 255),
            piece_black=QColor(20, 20, 20),
            coord_light=QColor(181, 136, 99),
            coord_dark=QColor(240, 217, 181),
        )

    @classmethod
    def green(cls) -> BoardTheme:
        return cls(
            light_square=QColor(236, 238, 220),
            dark_square=QColor(112, 149, 120),
            highlight_selected=QColor(255, 255, 0, 100),
            highlight_target=QColor(0, 0, 0, 40),
            highlight_check=QColor(255, 0, 0, 120),
            highlight_last_move=QColor(155, 199, 0, 105),
            piece_white=QColor(255, 255, 255),
            piece_black=QColor(20, 20, 20),
            coord_light=QColor(112, 149, 120),
            coord_dark=QColor(236, 238, 220),
        )

    @classmethod
    def named(cls, name: str) -> BoardTheme:
        """Theme by settings name; unknown names fall back to the default."""
        themes = {"Classic": cls.default, "Green": cls.green}
        return themes.get(name, cls.default)()


# ── Application-wide QSS ────────────────────────────────────────────────────

APP_STYLE = """
QMainWindow {
    background: #2b2b2b;
}

QLabel {
    color: #e0e0e0;
    font-family: "Helvetica Neue", sans-serif;
}

QLabel#capturedRow {
    font-size: 22px;
    min-height: 30px;
}

QLabel#winnerBanner {
    font-size: 20px;
    font-weight: bold;
    color: #f0c040;
}

QPushButton {
    background: #3c3c3c;
    color: #e0e0e0;
    border: 1px solid #555;
    border-radius: 8px;
    padding: 10px 20px;
    font-size: 16px;
}
QPushButton:hover {
    background: #505050;
}
QPushButton:pressed {
    background: #264f78;
}
"""
