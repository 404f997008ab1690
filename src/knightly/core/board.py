"""Board - immutable piece placement plus side to move, built by ``Builder``."""

from __future__ import annotations

from functools import lru_cache
from types import MappingProxyType
from typing import TYPE_CHECKING

from knightly.core.enums import Alliance
from knightly.core.geometry import NUM_SQUARES, SQUARES_PER_ROW, Square
from knightly.core.piece import Bishop, King, Knight, Pawn, Piece, Queen, Rook
from knightly.core.player import BlackPlayer, Player, WhitePlayer

if TYPE_CHECKING:
    from collections.abc import Mapping

    from knightly.core.move import Move

_BACK_ROW: tuple[type[Piece], ...] = (Rook, Knight, Bishop, Queen, King, Bishop, Knight, Rook)


class Board:
    """Immutable snapshot of a position.

    Player views are materialized on access from the board's own move lists,
    so a board never holds a reference back to itself through its players.
    """

    __slots__ = (
        "_config",
        "_white_pieces",
        "_black_pieces",
        "_next_move_maker",
        "_en_passant_pawn",
        "_transition_move",
        "_white_standard_moves",
        "_black_standard_moves",
    )

    def __init__(self, builder: Builder) -> None:
        self._config: Mapping[Square, Piece] = MappingProxyType(dict(builder.board_config))
        self._next_move_maker = builder.next_move_maker
        self._en_passant_pawn = builder.en_passant_pawn
        self._transition_move = builder.transition_move
        self._white_pieces = self._active_pieces(Alliance.WHITE)
        self._black_pieces = self._active_pieces(Alliance.BLACK)
        self._white_standard_moves = self._standard_moves(self._white_pieces)
        self._black_standard_moves = self._standard_moves(self._black_pieces)

    # -- Element access -------------------------------------------------------

    def get_piece(self, square: Square) -> Piece | None:
        return self._config.get(square)

    @property
    def all_pieces(self) -> tuple[Piece, ...]:
        return self._white_pieces + self._black_pieces

    @property
    def white_pieces(self) -> tuple[Piece, ...]:
        return self._white_pieces

    @property
    def black_pieces(self) -> tuple[Piece, ...]:
        return self._black_pieces

    @property
    def en_passant_pawn(self) -> Pawn | None:
        return self._en_passant_pawn

    @property
    def transition_move(self) -> Move | None:
        """Move that produced this board, if any."""
        return self._transition_move

    @property
    def next_move_maker(self) -> Alliance:
        return self._next_move_maker

    # -- Players --------------------------------------------------------------

    @property
    def white_player(self) -> WhitePlayer:
        return WhitePlayer(self, self._white_standard_moves, self._black_standard_moves)

    @property
    def black_player(self) -> BlackPlayer:
        return BlackPlayer(self, self._black_standard_moves, self._white_standard_moves)

    @property
    def current_player(self) -> Player:
        if self._next_move_maker.is_white:
            return self.white_player
        return self.black_player

    @property
    def all_legal_moves(self) -> tuple[Move, ...]:
        """Legal moves of both sides, castles included."""
        return self.white_player.legal_moves + self.black_player.legal_moves

    # -- Construction helpers -------------------------------------------------

    def _active_pieces(self, alliance: Alliance) -> tuple[Piece, ...]:
        return tuple(
            piece for piece in self._config.values() if piece.alliance is alliance
        )

    def _standard_moves(self, pieces: tuple[Piece, ...]) -> tuple[Move, ...]:
        moves: list[Move] = []
        for piece in pieces:
            moves.extend(piece.calculate_legal_moves(self))
        return tuple(moves)

    @classmethod
    def standard(cls) -> Board:
        """Shared standard starting position, White to move."""
        return _create_standard_board()

    # -- Dunder helpers -------------------------------------------------------

    def __str__(self) -> str:
        rows: list[str] = []
        for row_start in range(0, NUM_SQUARES, SQUARES_PER_ROW):
            cells = []
            for sq in range(row_start, row_start + SQUARES_PER_ROW):
                piece = self._config.get(sq)
                if piece is None:
                    cells.append("-")
                elif piece.alliance.is_black:
                    cells.append(str(piece).lower())
                else:
                    cells.append(str(piece))
            rows.append("".join(f"{cell:>3}" for cell in cells))
        return "\n".join(rows) + "\n"

    def __repr__(self) -> str:
        return f"Board(pieces={len(self._config)}, to_move={self._next_move_maker})"


class Builder:
    """Mutable staging area for a :class:`Board`; discard it after ``build``."""

    __slots__ = ("board_config", "next_move_maker", "en_passant_pawn", "transition_move")

    def __init__(self) -> None:
        self.board_config: dict[Square, Piece] = {}
        self.next_move_maker: Alliance = Alliance.WHITE
        self.en_passant_pawn: Pawn | None = None
        self.transition_move: Move | None = None

    def set_piece(self, piece: Piece) -> Builder:
        self.board_config[piece.square] = piece
        return self

    def set_move_maker(self, alliance: Alliance) -> Builder:
        self.next_move_maker = alliance
        return self

    def set_en_passant_pawn(self, pawn: Pawn | None) -> Builder:
        self.en_passant_pawn = pawn
        return self

    def set_move_transition(self, move: Move | None) -> Builder:
        self.transition_move = move
        return self

    def build(self) -> Board:
        return Board(self)


@lru_cache(maxsize=1)
def _create_standard_board() -> Board:
    builder = Builder()
    for alliance, back_row, pawn_row in (
        (Alliance.BLACK, 0, 8),
        (Alliance.WHITE, 56, 48),
    ):
        for offset, piece_cls in enumerate(_BACK_ROW):
            builder.set_piece(piece_cls(alliance, back_row + offset))
        for offset in range(SQUARES_PER_ROW):
            builder.set_piece(Pawn(alliance, pawn_row + offset))
    return builder.set_move_maker(Alliance.WHITE).build()
