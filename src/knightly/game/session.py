"""GameSession — one game driven by square selections.

Owns the current board and the move log, applies moves through the side to
move, and derives what a presenter shows: status, history rows and captured
pieces.  Emits events via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum, auto

from knightly.core.board import Board
from knightly.core.enums import Alliance
from knightly.core.geometry import Square
from knightly.core.move import Move, MoveFactory
from knightly.core.piece import Piece
from knightly.core.transition import MoveTransition
from knightly.game.move_log import MoveLog

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[Move, Board], None]  # move, board after it
BoardCallback = Callable[[Board], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_undo: list[MoveCallback] = field(default_factory=list)
    on_new_game: list[BoardCallback] = field(default_factory=list)


class GameStatus(Enum):
    """Situation of the side to move."""

    IN_PROGRESS = auto()
    CHECK = auto()
    CHECKMATE = auto()
    STALEMATE = auto()

    @property
    def is_game_over(self) -> bool:
        return self in (GameStatus.CHECKMATE, GameStatus.STALEMATE)


@dataclass(frozen=True, slots=True)
class HistoryRow:
    """One full move: White's notation and, once played, Black's."""

    white: str
    black: str = ""


@dataclass(frozen=True, slots=True)
class TakenPieces:
    """Captured pieces per colour, cheapest first."""

    white: tuple[Piece, ...] = ()
    black: tuple[Piece, ...] = ()


# ── Session ──────────────────────────────────────────────────────────────────


class GameSession:
    """Applies moves to a board and keeps the log needed to take them back.

    Methods are meant to be called from a single thread (the UI thread).
    """

    __slots__ = ("_board", "_move_log", "events")

    def __init__(self, board: Board | None = None) -> None:
        self._board = board if board is not None else Board.standard()
        self._move_log = MoveLog()
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def board(self) -> Board:
        return self._board

    @property
    def move_log(self) -> MoveLog:
        return self._move_log

    @property
    def side_to_move(self) -> Alliance:
        return self._board.next_move_maker

    # ── Commands ─────────────────────────────────────────────────────────

    def try_move(self, origin: Square, destination: Square) -> MoveTransition:
        """Play the move from *origin* to *destination* if it is legal.

        The board only advances when the returned transition is ``DONE``.
        """
        move = MoveFactory.create_move(self._board, origin, destination)
        transition = self._board.current_player.make_move(move)
        if not transition.status.is_done:
            _LOGGER.debug("Rejected %s: %s", move, transition.status.name)
            return transition

        _LOGGER.debug("%s plays %s", self._board.next_move_maker, move)
        self._board = transition.to_board
        self._move_log.add_move(move)
        for cb in self.events.on_move:
            cb(move, self._board)
        return transition

    def undo_last_move(self) -> Move | None:
        """Take back the last move; ``None`` when nothing has been played."""
        last = self._move_log.remove_last()
        if last is None:
            return None
        self._board = self._board.current_player.unmake_move(last).to_board
        _LOGGER.debug("Undid %s", last)
        for cb in self.events.on_undo:
            cb(last, self._board)
        return last

    def new_game(self) -> None:
        """Take back every move, returning to the position the game began in."""
        for last in reversed(self._move_log.moves):
            self._board = self._board.current_player.unmake_move(last).to_board
        self._move_log.clear()
        _LOGGER.info("New game")
        for cb in self.events.on_new_game:
            cb(self._board)

    # ── Queries ──────────────────────────────────────────────────────────

    def status(self) -> GameStatus:
        player = self._board.current_player
        if player.is_in_checkmate():
            return GameStatus.CHECKMATE
        if player.is_in_stalemate():
            return GameStatus.STALEMATE
        if player.is_in_check():
            return GameStatus.CHECK
        return GameStatus.IN_PROGRESS

    def legal_destinations(self, origin: Square) -> list[Square]:
        """Squares the piece on *origin* can legally move to."""
        player = self._board.current_player
        return [
            move.destination
            for move in player.legal_moves
            if move.origin == origin and player.make_move(move).status.is_done
        ]

    def history_rows(self) -> list[HistoryRow]:
        """Logged moves paired per full move, with ``+`` / ``#`` suffixes."""
        notations = [
            f"{move}{_check_suffix(board_after)}"
            for move, board_after in zip(self._move_log, self._boards_after_moves())
        ]
        rows: list[HistoryRow] = []
        for i in range(0, len(notations), 2):
            black = notations[i + 1] if i + 1 < len(notations) else ""
            rows.append(HistoryRow(notations[i], black))
        return rows

    def taken_pieces(self) -> TakenPieces:
        captured = [
            move.attacked_piece
            for move in self._move_log
            if move.is_attack and move.attacked_piece is not None
        ]
        by_value = sorted(captured, key=lambda piece: piece.piece_value)
        return TakenPieces(
            white=tuple(p for p in by_value if p.alliance.is_white),
            black=tuple(p for p in by_value if p.alliance.is_black),
        )

    # ── Internals ────────────────────────────────────────────────────────

    def _boards_after_moves(self) -> list[Board]:
        # Each move was generated on the board its predecessor produced.
        moves = self._move_log.moves
        if not moves:
            return []
        return [move.board for move in moves[1:]] + [self._board]


def _check_suffix(board: Board) -> str:
    player = board.current_player
    if not player.is_in_check():
        return ""
    return "#" if player.is_in_checkmate() else "+"
