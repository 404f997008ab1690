"""TakenPiecesPanel — captured pieces of each colour."""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import QLabel, QVBoxLayout, QWidget

from knightly.core.piece import Piece
from knightly.game.session import TakenPieces


def _glyphs(pieces: tuple[Piece, ...]) -> str:
    return "".join(piece.glyph for piece in pieces)


class TakenPiecesPanel(QWidget):
    """Shows Black's captures on top and White's captures at the bottom."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        layout = QVBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)

        font = QFont("DejaVu Sans", 18)
        # Black took the white pieces, so they sit on Black's side of the board.
        self._white_taken = QLabel()
        self._black_taken = QLabel()
        for label in (self._white_taken, self._black_taken):
            label.setFont(font)
            label.setWordWrap(True)
            label.setAlignment(Qt.AlignmentFlag.AlignHCenter)

        layout.addWidget(self._white_taken)
        layout.addStretch(1)
        layout.addWidget(self._black_taken)
        self.setFixedWidth(70)

    def set_taken(self, taken: TakenPieces) -> None:
        self._white_taken.setText(_glyphs(taken.white))
        self._black_taken.setText(_glyphs(taken.black))

    def white_text(self) -> str:
        return self._white_taken.text()

    def black_text(self) -> str:
        return self._black_taken.text()
