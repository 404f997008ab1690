"""Per-side views of a board: legal moves, castling, check and mate."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import TYPE_CHECKING, ClassVar

from knightly.core.enums import Alliance, MoveStatus
from knightly.core.errors import MissingKingError
from knightly.core.geometry import Square, is_king_pawn_trap
from knightly.core.move import KingSideCastleMove, Move, QueenSideCastleMove
from knightly.core.transition import MoveTransition

if TYPE_CHECKING:
    from knightly.core.board import Board
    from knightly.core.piece import King, Piece, Rook


def calculate_attacks_on_square(square: Square, moves: Iterable[Move]) -> list[Move]:
    """Moves among *moves* that land on *square*."""
    return [move for move in moves if move.destination == square]


class Player(ABC):
    """One side's view of a board.

    ``legal_moves`` is the pseudo-legal set plus any castles; whether a move
    exposes the mover's king is decided by :meth:`make_move`.
    """

    __slots__ = ("_board", "_king", "_is_in_check", "_legal_moves")

    # Side-specific castling geometry, filled in by the subclasses.
    KING_START: ClassVar[Square]
    KING_SIDE_ROOK: ClassVar[Square]
    KING_SIDE_PATH: ClassVar[tuple[Square, ...]]
    QUEEN_SIDE_ROOK: ClassVar[Square]
    QUEEN_SIDE_PATH: ClassVar[tuple[Square, ...]]
    QUEEN_SIDE_TRAVERSAL: ClassVar[tuple[Square, ...]]

    def __init__(
        self,
        board: Board,
        own_standard_moves: Iterable[Move],
        opponent_standard_moves: Iterable[Move],
    ) -> None:
        own = tuple(own_standard_moves)
        opponent = tuple(opponent_standard_moves)
        self._board = board
        self._king = self._establish_king()
        self._is_in_check = bool(calculate_attacks_on_square(self._king.square, opponent))
        self._legal_moves = own + tuple(self._calculate_king_castles(opponent))

    # -- Side identity --------------------------------------------------------

    @property
    @abstractmethod
    def alliance(self) -> Alliance: ...

    @property
    @abstractmethod
    def active_pieces(self) -> tuple[Piece, ...]: ...

    @property
    @abstractmethod
    def opponent(self) -> Player: ...

    # -- Accessors ------------------------------------------------------------

    @property
    def board(self) -> Board:
        return self._board

    @property
    def king(self) -> King:
        return self._king

    @property
    def legal_moves(self) -> tuple[Move, ...]:
        return self._legal_moves

    # -- Predicates -----------------------------------------------------------

    def is_in_check(self) -> bool:
        return self._is_in_check

    def is_in_checkmate(self) -> bool:
        return self._is_in_check and not self._has_escape_moves()

    def is_in_stalemate(self) -> bool:
        return not self._is_in_check and not self._has_escape_moves()

    def is_castled(self) -> bool:
        return self._king.is_castled

    def is_king_side_castle_capable(self) -> bool:
        return self._king.king_side_castle_capable

    def is_queen_side_castle_capable(self) -> bool:
        return self._king.queen_side_castle_capable

    # -- Move application -----------------------------------------------------

    def make_move(self, move: Move) -> MoveTransition:
        """Try *move*; the transition's status says whether it went through."""
        board = self._board
        if move not in self._legal_moves:
            return MoveTransition(board, board, move, MoveStatus.ILLEGAL_MOVE)
        transitioned = move.execute()
        if transitioned.current_player.opponent.is_in_check():
            return MoveTransition(
                board, board, move, MoveStatus.LEAVES_PLAYER_IN_CHECK
            )
        return MoveTransition(board, transitioned, move, MoveStatus.DONE)

    def unmake_move(self, move: Move) -> MoveTransition:
        return MoveTransition(self._board, move.undo(), move, MoveStatus.DONE)

    # -- Internals ------------------------------------------------------------

    def _establish_king(self) -> King:
        for piece in self.active_pieces:
            if piece.piece_type.is_king:
                return piece  # type: ignore[return-value]
        raise MissingKingError(f"{self.alliance} has no king on the board")

    def _has_escape_moves(self) -> bool:
        return any(self.make_move(move).is_done for move in self._legal_moves)

    def _castle_rook(self, square: Square) -> Rook | None:
        piece = self._board.get_piece(square)
        if (
            piece is None
            or not piece.piece_type.is_rook
            or not piece.is_first_move
            or piece.alliance != self.alliance
        ):
            return None
        return piece  # type: ignore[return-value]

    def _path_is_clear(self, path: tuple[Square, ...]) -> bool:
        return all(self._board.get_piece(sq) is None for sq in path)

    def _is_attacked(self, squares: tuple[Square, ...], opponent: tuple[Move, ...]) -> bool:
        return any(calculate_attacks_on_square(sq, opponent) for sq in squares)

    def _calculate_king_castles(self, opponent: tuple[Move, ...]) -> list[Move]:
        king = self._king
        if (
            self._is_in_check
            or king.is_castled
            or not (king.king_side_castle_capable or king.queen_side_castle_capable)
        ):
            return []
        if not king.is_first_move or king.square != self.KING_START:
            return []

        board = self._board
        # A pawn right in front of the king's start square blocks both castles.
        if is_king_pawn_trap(board, king, self.KING_START + self.alliance.direction):
            return []

        castles: list[Move] = []
        king_side_rook = self._castle_rook(self.KING_SIDE_ROOK)
        if (
            king_side_rook is not None
            and self._path_is_clear(self.KING_SIDE_PATH)
            and not self._is_attacked(self.KING_SIDE_PATH, opponent)
        ):
            castles.append(
                KingSideCastleMove(
                    board,
                    king,
                    self.KING_START + 2,
                    king_side_rook,
                    self.KING_SIDE_ROOK,
                    self.KING_START + 1,
                )
            )

        queen_side_rook = self._castle_rook(self.QUEEN_SIDE_ROOK)
        if (
            queen_side_rook is not None
            and self._path_is_clear(self.QUEEN_SIDE_PATH)
            and not self._is_attacked(self.QUEEN_SIDE_TRAVERSAL, opponent)
        ):
            castles.append(
                QueenSideCastleMove(
                    board,
                    king,
                    self.KING_START - 2,
                    queen_side_rook,
                    self.QUEEN_SIDE_ROOK,
                    self.KING_START - 1,
                )
            )
        return castles

    def __str__(self) -> str:
        return str(self.alliance)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(in_check={self._is_in_check})"


class WhitePlayer(Player):
    __slots__ = ()

    KING_START = 60
    KING_SIDE_ROOK = 63
    KING_SIDE_PATH = (61, 62)
    QUEEN_SIDE_ROOK = 56
    QUEEN_SIDE_PATH = (57, 58, 59)
    QUEEN_SIDE_TRAVERSAL = (58, 59)

    @property
    def alliance(self) -> Alliance:
        return Alliance.WHITE

    @property
    def active_pieces(self) -> tuple[Piece, ...]:
        return self._board.white_pieces

    @property
    def opponent(self) -> Player:
        return self._board.black_player


class BlackPlayer(Player):
    __slots__ = ()

    KING_START = 4
    KING_SIDE_ROOK = 7
    KING_SIDE_PATH = (5, 6)
    QUEEN_SIDE_ROOK = 0
    QUEEN_SIDE_PATH = (1, 2, 3)
    QUEEN_SIDE_TRAVERSAL = (2, 3)

    @property
    def alliance(self) -> Alliance:
        return Alliance.BLACK

    @property
    def active_pieces(self) -> tuple[Piece, ...]:
        return self._board.black_pieces

    @property
    def opponent(self) -> Player:
        return self._board.white_player
