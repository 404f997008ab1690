"""Visual theme constants and QSS styles for Knightly."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the chessboard."""

    light_square: QColor
    dark_square: QColor
    border: QColor  # frame around the board
    highlight_from: QColor  # selected piece origin
    highlight_to: QColor  # legal move targets
    highlight_check: QColor  # king in check
    white_piece: QColor
    black_piece: QColor

    @classmethod
    def default(cls) -> BoardTheme:
        return cls(
            light_square=QColor("#FFFACD"),  # lemon chiffon
            dark_square=QColor("#593E1A"),  # walnut
            border=QColor("#8B4726"),
            highlight_from=QColor(0, 255, 255, 90),  # cyan transparent
            highlight_to=QColor(0, 160, 0, 140),  # green dot
            highlight_check=QColor(255, 0, 0, 120),  # red transparent
            white_piece=QColor(250, 250, 250),
            black_piece=QColor(20, 20, 20),
        )


# ── Application-wide QSS ────────────────────────────────────────────────────

APP_STYLE = """
QMainWindow {
    background: #2b2b2b;
}

QLabel {
    color: #e0e0e0;
    font-family: "Helvetica Neue", sans-serif;
}

QTableWidget {
    background: #1e1e1e;
    color: #d4d4d4;
    border: 1px solid #3c3c3c;
    gridline-color: #3c3c3c;
    font-size: 13px;
}

QHeaderView::section {
    background: #2b2b2b;
    color: #e0e0e0;
    border: 1px solid #3c3c3c;
    padding: 2px;
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

QStatusBar {
    color: #e0e0e0;
}
"""
