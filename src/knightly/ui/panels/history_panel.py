"""GameHistoryPanel — two-column table of the moves played so far."""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import (
    QAbstractItemView,
    QHeaderView,
    QLabel,
    QTableWidget,
    QTableWidgetItem,
    QVBoxLayout,
    QWidget,
)

from knightly.game.session import HistoryRow

_HEADERS = ("White", "Black")


class GameHistoryPanel(QWidget):
    """Displays White's and Black's moves side by side, one row per full move."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._rows: list[HistoryRow] = []
        self._setup_ui()

    def _setup_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)

        header = QLabel("Moves")
        header.setFont(QFont("Helvetica Neue", 12, QFont.Weight.Bold))
        header.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(header)

        self._table = QTableWidget(0, len(_HEADERS))
        self._table.setHorizontalHeaderLabels(list(_HEADERS))
        self._table.setEditTriggers(QAbstractItemView.EditTrigger.NoEditTriggers)
        self._table.setSelectionMode(QAbstractItemView.SelectionMode.NoSelection)
        horizontal = self._table.horizontalHeader()
        if horizontal is not None:
            horizontal.setSectionResizeMode(QHeaderView.ResizeMode.Stretch)
        layout.addWidget(self._table)

    def set_history(self, rows: list[HistoryRow]) -> None:
        """Rebuild the table from *rows*."""
        self._rows = list(rows)
        self._table.setRowCount(len(self._rows))
        for index, row in enumerate(self._rows):
            self._table.setItem(index, 0, QTableWidgetItem(row.white))
            self._table.setItem(index, 1, QTableWidgetItem(row.black))
        self._table.scrollToBottom()

    def row_count(self) -> int:
        return self._table.rowCount()

    def cell_text(self, row: int, column: int) -> str:
        item = self._table.item(row, column)
        return item.text() if item is not None else ""
