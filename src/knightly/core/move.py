"""Move variants: each one knows how to produce the board that follows it.

Moves never mutate the board they were generated on.  ``execute`` builds a
fresh successor through :class:`~knightly.core.board.Builder` and ``undo``
rebuilds the board the move started from.
"""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING

from knightly.core.errors import NullMoveError
from knightly.core.geometry import Square, algebraic

if TYPE_CHECKING:
    from knightly.core.board import Board, Builder
    from knightly.core.piece import Piece, Rook


def _new_builder() -> Builder:
    # board -> piece -> move import chain: resolve the builder at call time.
    from knightly.core.board import Builder

    return Builder()


class Move:
    """A candidate transition of *moved_piece* to *destination* on *board*.

    Equality is by variant, origin, destination and moved piece; attack,
    castle and promotion variants add their extra state.
    """

    __slots__ = ("_board", "_moved_piece", "_destination", "_is_first_move")

    def __init__(self, board: Board, moved_piece: Piece, destination: Square) -> None:
        self._board = board
        self._moved_piece = moved_piece
        self._destination = destination
        self._is_first_move = moved_piece.is_first_move

    # -- Accessors ------------------------------------------------------------

    @property
    def board(self) -> Board:
        return self._board

    @property
    def moved_piece(self) -> Piece:
        return self._moved_piece

    @property
    def origin(self) -> Square:
        return self._moved_piece.square

    @property
    def destination(self) -> Square:
        return self._destination

    @property
    def is_first_move(self) -> bool:
        return self._is_first_move

    @property
    def is_attack(self) -> bool:
        return False

    @property
    def is_castling_move(self) -> bool:
        return False

    @property
    def attacked_piece(self) -> Piece | None:
        return None

    # -- Board transitions ----------------------------------------------------

    def execute(self) -> Board:
        """Board after this move, with the opponent to move."""
        builder, _ = self._advance()
        return builder.build()

    def undo(self) -> Board:
        """Rebuild the board this move was generated on.

        The en-passant pawn of that board is restored too, so undoing an
        en-passant capture makes the captured pawn capturable again.
        """
        board = self._board
        builder = _new_builder()
        for piece in board.all_pieces:
            builder.set_piece(piece)
        builder.set_en_passant_pawn(board.en_passant_pawn)
        builder.set_move_maker(board.next_move_maker)
        builder.set_move_transition(board.transition_move)
        return builder.build()

    def _advance(self) -> tuple[Builder, Piece]:
        """Builder with the moved piece on its destination and the turn passed."""
        builder = _new_builder()
        captured = self.attacked_piece
        for piece in self._board.all_pieces:
            if piece != self._moved_piece and piece != captured:
                builder.set_piece(piece)
        moved = self._moved_piece.move_piece(self)
        builder.set_piece(moved)
        builder.set_move_maker(self._moved_piece.alliance.opposite)
        builder.set_move_transition(self)
        return builder, moved

    # -- Notation -------------------------------------------------------------

    def _disambiguation_file(self) -> str:
        """Origin file when a same-kind piece can also reach the destination."""
        piece = self._moved_piece
        player = piece.alliance.choose_player(
            self._board.white_player, self._board.black_player
        )
        for move in player.legal_moves:
            if (
                move.destination == self._destination
                and move != self
                and move.moved_piece.piece_type == piece.piece_type
            ):
                return algebraic(self.origin)[0]
        return ""

    # -- Dunder helpers -------------------------------------------------------

    def _key(self) -> tuple[object, ...]:
        return (self.origin, self._destination, self._moved_piece)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Move):
            return NotImplemented
        return type(self) is type(other) and self._key() == other._key()

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._key()))

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}"
            f"({algebraic(self.origin)}->{algebraic(self._destination)})"
        )


# -- Non-pawn moves ----------------------------------------------------------


class MajorMove(Move):
    """Quiet move of a knight, bishop, rook, queen or king."""

    __slots__ = ()

    def __str__(self) -> str:
        return (
            f"{self._moved_piece.piece_type.symbol}{self._disambiguation_file()}"
            f"{algebraic(self._destination)}"
        )


class AttackMove(Move):
    """Move that captures *attacked_piece*."""

    __slots__ = ("_attacked_piece",)

    def __init__(
        self,
        board: Board,
        moved_piece: Piece,
        destination: Square,
        attacked_piece: Piece,
    ) -> None:
        Move.__init__(self, board, moved_piece, destination)
        self._attacked_piece = attacked_piece

    @property
    def is_attack(self) -> bool:
        return True

    @property
    def attacked_piece(self) -> Piece:
        return self._attacked_piece

    def _key(self) -> tuple[object, ...]:
        return (*Move._key(self), self._attacked_piece)


class MajorAttackMove(AttackMove):
    __slots__ = ()

    def __str__(self) -> str:
        return (
            f"{self._moved_piece.piece_type.symbol}{self._disambiguation_file()}"
            f"x{algebraic(self._destination)}"
        )


# -- Pawn moves --------------------------------------------------------------


class PawnMove(Move):
    """Single-square pawn push."""

    __slots__ = ()

    def __str__(self) -> str:
        return algebraic(self._destination)


class PawnAttackMove(AttackMove):
    __slots__ = ()

    def __str__(self) -> str:
        return f"{algebraic(self.origin)[0]}x{algebraic(self._destination)}"


class PawnEnPassantAttack(PawnAttackMove):
    """Diagonal capture of the pawn that just jumped past.

    The captured pawn stands beside the origin, not on the destination.
    """

    __slots__ = ()


class PawnJump(Move):
    """Two-square advance from the starting row; marks the en-passant pawn."""

    __slots__ = ()

    def execute(self) -> Board:
        builder, moved = self._advance()
        builder.set_en_passant_pawn(moved)
        return builder.build()

    def __str__(self) -> str:
        return algebraic(self._destination)


class PawnPromotion(PawnMove):
    """Decorates a pawn push or capture that reaches the last row."""

    __slots__ = ("_decorated_move", "_promotion_piece")

    def __init__(self, decorated_move: Move, promotion_piece: Piece) -> None:
        PawnMove.__init__(
            self,
            decorated_move.board,
            decorated_move.moved_piece,
            decorated_move.destination,
        )
        self._decorated_move = decorated_move
        self._promotion_piece = promotion_piece

    @property
    def decorated_move(self) -> Move:
        return self._decorated_move

    @property
    def promotion_piece(self) -> Piece:
        return self._promotion_piece

    @property
    def is_attack(self) -> bool:
        return self._decorated_move.is_attack

    @property
    def attacked_piece(self) -> Piece | None:
        return self._decorated_move.attacked_piece

    def execute(self) -> Board:
        pawn_moved_board = self._decorated_move.execute()
        builder = _new_builder()
        for piece in pawn_moved_board.all_pieces:
            if piece.square != self._destination:
                builder.set_piece(piece)
        builder.set_piece(self._promotion_piece.move_piece(self))
        builder.set_move_maker(pawn_moved_board.next_move_maker)
        builder.set_move_transition(self)
        return builder.build()

    def _key(self) -> tuple[object, ...]:
        return (
            *self._decorated_move._key(),
            self._promotion_piece.piece_type,
        )

    def __str__(self) -> str:
        return (
            f"{algebraic(self.origin)}-{algebraic(self._destination)}"
            f"={self._promotion_piece.piece_type.symbol}"
        )


# -- Castling ----------------------------------------------------------------


class CastleMove(Move):
    """King move of two files that also relocates *castle_rook*."""

    __slots__ = ("_castle_rook", "_castle_rook_start", "_castle_rook_destination")

    def __init__(
        self,
        board: Board,
        moved_piece: Piece,
        destination: Square,
        castle_rook: Rook,
        castle_rook_start: Square,
        castle_rook_destination: Square,
    ) -> None:
        Move.__init__(self, board, moved_piece, destination)
        self._castle_rook = castle_rook
        self._castle_rook_start = castle_rook_start
        self._castle_rook_destination = castle_rook_destination

    @property
    def castle_rook(self) -> Rook:
        return self._castle_rook

    @property
    def castle_rook_start(self) -> Square:
        return self._castle_rook_start

    @property
    def castle_rook_destination(self) -> Square:
        return self._castle_rook_destination

    @property
    def is_castling_move(self) -> bool:
        return True

    def execute(self) -> Board:
        builder = _new_builder()
        for piece in self._board.all_pieces:
            if piece != self._moved_piece and piece != self._castle_rook:
                builder.set_piece(piece)
        builder.set_piece(self._moved_piece.move_piece(self))
        builder.set_piece(
            replace(
                self._castle_rook,
                square=self._castle_rook_destination,
                is_first_move=False,
            )
        )
        builder.set_move_maker(self._moved_piece.alliance.opposite)
        builder.set_move_transition(self)
        return builder.build()

    def _key(self) -> tuple[object, ...]:
        return (*Move._key(self), self._castle_rook, self._castle_rook_destination)


class KingSideCastleMove(CastleMove):
    __slots__ = ()

    def __str__(self) -> str:
        return "O-O"


class QueenSideCastleMove(CastleMove):
    __slots__ = ()

    def __str__(self) -> str:
        return "O-O-O"


# -- Sentinel ----------------------------------------------------------------


class NullMove(Move):
    """Placeholder returned when no legal move matches a selection."""

    __slots__ = ()

    def __init__(self) -> None:
        self._board = None  # type: ignore[assignment]
        self._moved_piece = None  # type: ignore[assignment]
        self._destination = -1
        self._is_first_move = False

    @property
    def origin(self) -> Square:
        return -1

    def execute(self) -> Board:
        raise NullMoveError("cannot execute the null move")

    def undo(self) -> Board:
        raise NullMoveError("cannot undo the null move")

    def __str__(self) -> str:
        return "Null Move"

    def __repr__(self) -> str:
        return "NullMove()"


NULL_MOVE = NullMove()


class MoveFactory:
    """Resolves an (origin, destination) pair into one of the board's moves."""

    @staticmethod
    def null_move() -> Move:
        return NULL_MOVE

    @staticmethod
    def create_move(board: Board, origin: Square, destination: Square) -> Move:
        """The legal move from *origin* to *destination*, or the null move."""
        for move in board.all_legal_moves:
            if move.origin == origin and move.destination == destination:
                return move
        return NULL_MOVE
