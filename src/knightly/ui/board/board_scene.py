"""BoardScene — QGraphicsScene that draws the chessboard and pieces."""

from __future__ import annotations

from typing import TYPE_CHECKING

from PyQt6.QtCore import QObject, QPointF, Qt, pyqtSignal
from PyQt6.QtGui import QBrush, QColor, QFont, QPen
from PyQt6.QtWidgets import (
    QGraphicsEllipseItem,
    QGraphicsRectItem,
    QGraphicsScene,
    QGraphicsSceneMouseEvent,
    QGraphicsSimpleTextItem,
)

from knightly.core.enums import PieceType
from knightly.core.geometry import NUM_SQUARES, SQUARES_PER_ROW, Square, column_of, row_of
from knightly.ui.styles.theme import BoardTheme

if TYPE_CHECKING:
    from knightly.core.piece import Piece
    from knightly.game.session import GameSession

# Filled figurines for both sides; the brush carries the colour.
_SOLID_GLYPHS: dict[PieceType, str] = {
    PieceType.PAWN: "♟",
    PieceType.KNIGHT: "♞",
    PieceType.BISHOP: "♝",
    PieceType.ROOK: "♜",
    PieceType.QUEEN: "♛",
    PieceType.KING: "♚",
}


class BoardScene(QGraphicsScene):
    """Renders the board, pieces, selection and legal-move dots.

    Left click selects a piece of the side to move, a second left click asks
    for the move; right click drops the selection.

    Signals:
        move_requested(int, int): origin and destination squares of a
            user-completed click pair.  Legality is decided by the receiver.
    """

    move_requested = pyqtSignal(int, int)

    TILE = 64  # px per square

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._theme = BoardTheme.default()
        self._session: GameSession | None = None
        self._flipped = False
        self._show_legal_moves = False

        # Interaction state
        self._selected_sq: Square | None = None

        # Visual layers
        self._square_items: dict[Square, QGraphicsRectItem] = {}
        self._piece_items: dict[Square, QGraphicsSimpleTextItem] = {}
        self._highlight_items: list[QGraphicsRectItem] = []
        self._legal_dot_items: list[QGraphicsEllipseItem] = []

        self._draw_board()

    # ── Public API ───────────────────────────────────────────────────────

    def set_session(self, session: GameSession) -> None:
        """Display *session*'s board from now on."""
        self._session = session
        self.refresh()

    def refresh(self) -> None:
        """Redraw pieces from the session's current board."""
        self._sync_pieces()
        self._clear_selection()

    def set_flipped(self, flipped: bool) -> None:
        """Flip the board orientation."""
        self._flipped = flipped
        self._draw_board()
        self.refresh()

    def is_flipped(self) -> bool:
        return self._flipped

    def set_show_legal_moves(self, visible: bool) -> None:
        """Show or hide legal-move dots for the selected piece."""
        self._show_legal_moves = visible
        self._clear_items(self._legal_dot_items)
        if visible and self._selected_sq is not None:
            self._draw_legal_dots(self._selected_sq)

    def shows_legal_moves(self) -> bool:
        return self._show_legal_moves

    @property
    def selected_square(self) -> Square | None:
        return self._selected_sq

    # ── Board drawing ────────────────────────────────────────────────────

    def _draw_board(self) -> None:
        """Draw or redraw the 64 squares."""
        for sq_item in self._square_items.values():
            self.removeItem(sq_item)
        self._square_items.clear()

        t = self.TILE
        border = QPen(self._theme.border)
        for sq in range(NUM_SQUARES):
            col, row = self._visual_coords(sq)
            is_light = (column_of(sq) + row_of(sq)) % 2 == 0
            color = self._theme.light_square if is_light else self._theme.dark_square
            rect = QGraphicsRectItem(col * t, row * t, t, t)
            rect.setBrush(QBrush(color))
            rect.setPen(border)
            rect.setZValue(0)
            self.addItem(rect)
            self._square_items[sq] = rect

        self.setSceneRect(0, 0, SQUARES_PER_ROW * t, SQUARES_PER_ROW * t)

    def _sync_pieces(self) -> None:
        """Re-create all piece items from the current board."""
        for item in self._piece_items.values():
            self.removeItem(item)
        self._piece_items.clear()

        if self._session is None:
            return

        for piece in self._session.board.all_pieces:
            item = self._make_piece_item(piece)
            self.addItem(item)
            self._piece_items[piece.square] = item

    def _make_piece_item(self, piece: Piece) -> QGraphicsSimpleTextItem:
        t = self.TILE
        item = QGraphicsSimpleTextItem(_SOLID_GLYPHS[piece.piece_type])
        item.setFont(QFont("DejaVu Sans", int(t * 0.6)))
        fill = self._theme.white_piece if piece.alliance.is_white else self._theme.black_piece
        outline = self._theme.black_piece if piece.alliance.is_white else self._theme.white_piece
        item.setBrush(QBrush(fill))
        item.setPen(QPen(outline))
        item.setToolTip(f"{piece.alliance} {piece.piece_type.name.lower()}")

        col, row = self._visual_coords(piece.square)
        bounds = item.boundingRect()
        item.setPos(
            col * t + (t - bounds.width()) / 2,
            row * t + (t - bounds.height()) / 2,
        )
        item.setZValue(1)
        return item

    # ── Mouse interaction ────────────────────────────────────────────────

    def mousePressEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if self._session is None or event is None:
            return super().mousePressEvent(event)

        if event.button() == Qt.MouseButton.RightButton:
            self._clear_selection()
            return

        sq = self._pos_to_square(event.scenePos())
        if sq is None:
            self._clear_selection()
            return super().mousePressEvent(event)
        self.click_square(sq)

    def click_square(self, sq: Square) -> None:
        """Handle a left click on *sq* as the board would."""
        if self._session is None:
            return
        board = self._session.board
        piece = board.get_piece(sq)
        own_piece = piece is not None and piece.alliance is board.next_move_maker

        if self._selected_sq is None or (own_piece and sq != self._selected_sq):
            if own_piece:
                self._select_square(sq)
            return

        origin = self._selected_sq
        self._clear_selection()
        if sq != origin:
            self.move_requested.emit(origin, sq)

    # ── Selection / highlights ───────────────────────────────────────────

    def _select_square(self, sq: Square) -> None:
        self._clear_selection()
        self._selected_sq = sq
        rect = self._make_highlight(sq, self._theme.highlight_from)
        self._highlight_items.append(rect)
        if self._show_legal_moves:
            self._draw_legal_dots(sq)

    def _draw_legal_dots(self, origin: Square) -> None:
        if self._session is None:
            return
        t = self.TILE
        diameter = t / 3
        for destination in self._session.legal_destinations(origin):
            col, row = self._visual_coords(destination)
            dot = QGraphicsEllipseItem(
                col * t + (t - diameter) / 2,
                row * t + (t - diameter) / 2,
                diameter,
                diameter,
            )
            dot.setBrush(QBrush(self._theme.highlight_to))
            dot.setPen(QPen(Qt.PenStyle.NoPen))
            dot.setZValue(2)
            self.addItem(dot)
            self._legal_dot_items.append(dot)

    def _highlight_check(self) -> None:
        if self._session is None:
            return
        player = self._session.board.current_player
        if player.is_in_check():
            rect = self._make_highlight(player.king.square, self._theme.highlight_check)
            self._highlight_items.append(rect)

    def _clear_selection(self) -> None:
        self._selected_sq = None
        self._clear_items(self._highlight_items)
        self._clear_items(self._legal_dot_items)
        self._highlight_check()

    def _clear_items(self, items: list) -> None:
        for item in items:
            self.removeItem(item)
        items.clear()

    # ── Coordinate helpers ───────────────────────────────────────────────

    def _visual_coords(self, sq: Square) -> tuple[int, int]:
        """Board square → visual column/row."""
        col, row = column_of(sq), row_of(sq)
        if self._flipped:
            return 7 - col, 7 - row
        return col, row

    def _pos_to_square(self, pos: QPointF) -> Square | None:
        """Scene position → board square."""
        t = self.TILE
        col = int(pos.x() // t)
        row = int(pos.y() // t)
        if not (0 <= col < SQUARES_PER_ROW and 0 <= row < SQUARES_PER_ROW):
            return None
        if self._flipped:
            col, row = 7 - col, 7 - row
        return row * SQUARES_PER_ROW + col

    def _make_highlight(self, sq: Square, color: QColor) -> QGraphicsRectItem:
        """Create a coloured overlay rectangle on a square."""
        t = self.TILE
        col, row = self._visual_coords(sq)
        rect = QGraphicsRectItem(col * t, row * t, t, t)
        rect.setBrush(QBrush(color))
        rect.setPen(QPen(Qt.PenStyle.NoPen))
        rect.setZValue(0.8)
        self.addItem(rect)
        return rect
