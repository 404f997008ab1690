"""MainWindow — top-level window assembling all UI components."""

from __future__ import annotations

import logging

from PyQt6.QtGui import QAction
from PyQt6.QtWidgets import QHBoxLayout, QLabel, QMainWindow, QStatusBar, QWidget

from knightly.core.board import Board
from knightly.core.move import Move
from knightly.core.transition import MoveTransition
from knightly.game.session import GameSession, GameStatus
from knightly.ui.board.board_view import BoardView
from knightly.ui.panels.history_panel import GameHistoryPanel
from knightly.ui.panels.taken_pieces_panel import TakenPiecesPanel

_LOGGER = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Main application window for Knightly."""

    def __init__(self, session: GameSession | None = None) -> None:
        super().__init__()
        self.setWindowTitle("Knightly")
        self.resize(600, 600)

        self._session = session if session is not None else GameSession()

        self._setup_ui()
        self._setup_menu()
        self._connect_signals()
        self._board_view.board_scene.set_session(self._session)
        self._refresh_panels()

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        central = QWidget()
        self.setCentralWidget(central)
        root = QHBoxLayout(central)
        root.setContentsMargins(6, 6, 6, 6)
        root.setSpacing(6)

        # Captured pieces (left)
        self._taken_panel = TakenPiecesPanel()
        root.addWidget(self._taken_panel)

        # Board (center)
        self._board_view = BoardView()
        root.addWidget(self._board_view, stretch=3)

        # Move history (right)
        self._history_panel = GameHistoryPanel()
        self._history_panel.setFixedWidth(200)
        root.addWidget(self._history_panel)

        # Status bar
        self._status = QStatusBar()
        self.setStatusBar(self._status)
        self._status_label = QLabel()
        self._status.addWidget(self._status_label)

    def _setup_menu(self) -> None:
        menu_bar = self.menuBar()
        assert menu_bar is not None

        # File menu
        self._menu_file = menu_bar.addMenu("File")
        assert self._menu_file is not None
        self._act_exit = QAction("Exit", self)
        self._act_exit.setShortcut("Ctrl+Q")
        self._act_exit.triggered.connect(self.close)
        self._menu_file.addAction(self._act_exit)

        # Preferences menu
        self._menu_prefs = menu_bar.addMenu("Preferences")
        assert self._menu_prefs is not None
        self._act_flip = QAction("Flip board", self)
        self._act_flip.setShortcut("F")
        self._act_flip.triggered.connect(self._on_flip)
        self._menu_prefs.addAction(self._act_flip)

        self._menu_prefs.addSeparator()

        self._act_highlight = QAction("Highlight Legal Moves", self)
        self._act_highlight.setCheckable(True)
        self._act_highlight.setChecked(False)
        self._act_highlight.toggled.connect(self._on_highlight_toggled)
        self._menu_prefs.addAction(self._act_highlight)

        # Options menu
        self._menu_options = menu_bar.addMenu("Options")
        assert self._menu_options is not None
        self._act_new_game = QAction("New Game", self)
        self._act_new_game.setShortcut("Ctrl+N")
        self._act_new_game.triggered.connect(self._on_new_game)
        self._menu_options.addAction(self._act_new_game)

        self._act_undo = QAction("Undo last move", self)
        self._act_undo.setShortcut("Ctrl+Z")
        self._act_undo.triggered.connect(self._on_undo)
        self._menu_options.addAction(self._act_undo)

    def _connect_signals(self) -> None:
        self._board_view.move_requested.connect(self._on_move_requested)

        events = self._session.events
        events.on_move.append(self._on_session_move)
        events.on_undo.append(self._on_session_move)
        events.on_new_game.append(self._on_session_reset)

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def session(self) -> GameSession:
        return self._session

    @property
    def board_view(self) -> BoardView:
        return self._board_view

    @property
    def history_panel(self) -> GameHistoryPanel:
        return self._history_panel

    @property
    def taken_panel(self) -> TakenPiecesPanel:
        return self._taken_panel

    def status_text(self) -> str:
        return self._status_label.text()

    # ── Slots ────────────────────────────────────────────────────────────

    def _on_move_requested(self, origin: int, destination: int) -> MoveTransition:
        transition = self._session.try_move(origin, destination)
        if not transition.status.is_done:
            self._board_view.board_scene.refresh()
        return transition

    def _on_undo(self) -> None:
        if self._session.undo_last_move() is None:
            _LOGGER.debug("Nothing to undo")

    def _on_new_game(self) -> None:
        self._session.new_game()

    def _on_flip(self) -> None:
        scene = self._board_view.board_scene
        scene.set_flipped(not scene.is_flipped())

    def _on_highlight_toggled(self, checked: bool) -> None:
        self._board_view.board_scene.set_show_legal_moves(checked)

    # ── Session events ───────────────────────────────────────────────────

    def _on_session_move(self, _move: Move, _board: Board) -> None:
        self._board_view.board_scene.refresh()
        self._refresh_panels()

    def _on_session_reset(self, _board: Board) -> None:
        self._board_view.board_scene.refresh()
        self._refresh_panels()

    def _refresh_panels(self) -> None:
        self._history_panel.set_history(self._session.history_rows())
        self._taken_panel.set_taken(self._session.taken_pieces())
        self._status_label.setText(self._status_message())

    def _status_message(self) -> str:
        side = self._session.side_to_move
        status = self._session.status()
        if status is GameStatus.CHECKMATE:
            return f"Checkmate. {side.opposite} wins"
        if status is GameStatus.STALEMATE:
            return "Stalemate"
        if status is GameStatus.CHECK:
            return f"{side} to move (check)"
        return f"{side} to move"
