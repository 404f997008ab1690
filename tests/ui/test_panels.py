"""Tests for the history and captured-pieces panels."""

from __future__ import annotations

from knightly.core.enums import Alliance
from knightly.core.piece import Pawn, Queen
from knightly.game.session import HistoryRow, TakenPieces
from knightly.ui.panels.history_panel import GameHistoryPanel
from knightly.ui.panels.taken_pieces_panel import TakenPiecesPanel


class TestGameHistoryPanel:
    def test_starts_empty(self) -> None:
        panel = GameHistoryPanel()
        assert panel.row_count() == 0

    def test_rows_and_cells(self) -> None:
        panel = GameHistoryPanel()
        panel.set_history([HistoryRow("e4", "e5"), HistoryRow("Qh5")])
        assert panel.row_count() == 2
        assert panel.cell_text(0, 0) == "e4"
        assert panel.cell_text(0, 1) == "e5"
        assert panel.cell_text(1, 0) == "Qh5"
        assert panel.cell_text(1, 1) == ""

    def test_set_history_replaces_rows(self) -> None:
        panel = GameHistoryPanel()
        panel.set_history([HistoryRow("e4", "e5"), HistoryRow("Nf3")])
        panel.set_history([HistoryRow("d4")])
        assert panel.row_count() == 1
        assert panel.cell_text(0, 0) == "d4"


class TestTakenPiecesPanel:
    def test_glyphs_per_colour(self) -> None:
        panel = TakenPiecesPanel()
        panel.set_taken(
            TakenPieces(
                white=(Pawn(Alliance.WHITE, 36, False),),
                black=(Pawn(Alliance.BLACK, 27, False), Queen(Alliance.BLACK, 48, False)),
            )
        )
        assert panel.white_text() == "♙"
        assert panel.black_text() == "♟♛"

    def test_empty(self) -> None:
        panel = TakenPiecesPanel()
        panel.set_taken(TakenPieces())
        assert panel.white_text() == ""
        assert panel.black_text() == ""
