"""Piece value objects and their pseudo-legal move generators.

Each piece enumerates the moves it could make from its own square on a given
board.  Those moves ignore whether the mover's king is left in check; the
player filters them when a move is actually made.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, ClassVar

from knightly.core.enums import Alliance, PieceType
from knightly.core.geometry import (
    EIGHTH_COLUMN,
    FIRST_COLUMN,
    SECOND_COLUMN,
    SECOND_ROW,
    SEVENTH_COLUMN,
    SEVENTH_ROW,
    Square,
    is_valid_square,
)
from knightly.core.move import (
    MajorAttackMove,
    MajorMove,
    Move,
    PawnAttackMove,
    PawnEnPassantAttack,
    PawnJump,
    PawnMove,
    PawnPromotion,
)

if TYPE_CHECKING:
    from knightly.core.board import Board

KNIGHT_OFFSETS: tuple[int, ...] = (-17, -15, -10, -6, 6, 10, 15, 17)
BISHOP_OFFSETS: tuple[int, ...] = (-9, -7, 7, 9)
ROOK_OFFSETS: tuple[int, ...] = (-8, -1, 1, 8)
QUEEN_OFFSETS: tuple[int, ...] = BISHOP_OFFSETS + ROOK_OFFSETS
KING_OFFSETS: tuple[int, ...] = (-9, -8, -7, -1, 1, 7, 8, 9)

# offset -> columns from which that offset would wrap around the board edge
_KNIGHT_EXCLUSIONS: dict[int, tuple[tuple[bool, ...], ...]] = {
    -17: (FIRST_COLUMN,),
    -15: (EIGHTH_COLUMN,),
    -10: (FIRST_COLUMN, SECOND_COLUMN),
    -6: (SEVENTH_COLUMN, EIGHTH_COLUMN),
    6: (FIRST_COLUMN, SECOND_COLUMN),
    10: (SEVENTH_COLUMN, EIGHTH_COLUMN),
    15: (FIRST_COLUMN,),
    17: (EIGHTH_COLUMN,),
}
_STEP_EXCLUSIONS: dict[int, tuple[tuple[bool, ...], ...]] = {
    -9: (FIRST_COLUMN,),
    -1: (FIRST_COLUMN,),
    7: (FIRST_COLUMN,),
    -7: (EIGHTH_COLUMN,),
    1: (EIGHTH_COLUMN,),
    9: (EIGHTH_COLUMN,),
}

_GLYPHS: dict[tuple[Alliance, PieceType], str] = {
    (Alliance.WHITE, PieceType.PAWN): "♙",
    (Alliance.WHITE, PieceType.KNIGHT): "♘",
    (Alliance.WHITE, PieceType.BISHOP): "♗",
    (Alliance.WHITE, PieceType.ROOK): "♖",
    (Alliance.WHITE, PieceType.QUEEN): "♕",
    (Alliance.WHITE, PieceType.KING): "♔",
    (Alliance.BLACK, PieceType.PAWN): "♟",
    (Alliance.BLACK, PieceType.KNIGHT): "♞",
    (Alliance.BLACK, PieceType.BISHOP): "♝",
    (Alliance.BLACK, PieceType.ROOK): "♜",
    (Alliance.BLACK, PieceType.QUEEN): "♛",
    (Alliance.BLACK, PieceType.KING): "♚",
}


def _wraps(
    sq: Square, offset: int, exclusions: dict[int, tuple[tuple[bool, ...], ...]]
) -> bool:
    return any(column[sq] for column in exclusions.get(offset, ()))


@dataclass(frozen=True, slots=True)
class Piece(ABC):
    """Immutable piece standing on a square.

    Two pieces are equal when kind, alliance, square and first-move flag agree.
    """

    piece_type: ClassVar[PieceType]

    alliance: Alliance
    square: Square
    is_first_move: bool = True

    @property
    def piece_value(self) -> int:
        return self.piece_type.piece_value

    @property
    def glyph(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        return _GLYPHS[(self.alliance, self.piece_type)]

    @abstractmethod
    def calculate_legal_moves(self, board: Board) -> list[Move]:
        """Pseudo-legal moves of this piece on *board*."""

    def move_piece(self, move: Move) -> Piece:
        """The same piece standing on *move*'s destination."""
        return type(self)(self.alliance, move.destination, False)

    def __str__(self) -> str:
        return self.piece_type.symbol

    # -- Shared generators ----------------------------------------------------

    def _target_move(self, board: Board, destination: Square) -> Move | None:
        target = board.get_piece(destination)
        if target is None:
            return MajorMove(board, self, destination)
        if target.alliance != self.alliance:
            return MajorAttackMove(board, self, destination, target)
        return None

    def _step_moves(
        self,
        board: Board,
        offsets: tuple[int, ...],
        exclusions: dict[int, tuple[tuple[bool, ...], ...]],
    ) -> list[Move]:
        moves: list[Move] = []
        for offset in offsets:
            if _wraps(self.square, offset, exclusions):
                continue
            destination = self.square + offset
            if not is_valid_square(destination):
                continue
            move = self._target_move(board, destination)
            if move is not None:
                moves.append(move)
        return moves

    def _slide_moves(self, board: Board, offsets: tuple[int, ...]) -> list[Move]:
        moves: list[Move] = []
        for offset in offsets:
            sq = self.square
            while not _wraps(sq, offset, _STEP_EXCLUSIONS):
                sq += offset
                if not is_valid_square(sq):
                    break
                target = board.get_piece(sq)
                if target is None:
                    moves.append(MajorMove(board, self, sq))
                    continue
                if target.alliance != self.alliance:
                    moves.append(MajorAttackMove(board, self, sq, target))
                break
        return moves


@dataclass(frozen=True, slots=True)
class Pawn(Piece):
    piece_type: ClassVar[PieceType] = PieceType.PAWN

    def calculate_legal_moves(self, board: Board) -> list[Move]:
        moves: list[Move] = []
        origin = self.square
        direction = self.alliance.direction

        one_step = origin + direction
        if is_valid_square(one_step) and board.get_piece(one_step) is None:
            moves.append(self._promote_if_due(PawnMove(board, self, one_step)))
            two_step = one_step + direction
            if (
                self.is_first_move
                and self._on_starting_row()
                and is_valid_square(two_step)
                and board.get_piece(two_step) is None
            ):
                moves.append(PawnJump(board, self, two_step))

        for side, edge in ((-1, FIRST_COLUMN), (1, EIGHTH_COLUMN)):
            if edge[origin]:
                continue
            destination = one_step + side
            if not is_valid_square(destination):
                continue
            target = board.get_piece(destination)
            if target is not None:
                if target.alliance != self.alliance:
                    moves.append(
                        self._promote_if_due(
                            PawnAttackMove(board, self, destination, target)
                        )
                    )
                continue
            en_passant_pawn = board.en_passant_pawn
            if (
                en_passant_pawn is not None
                and en_passant_pawn.alliance != self.alliance
                and en_passant_pawn.square == origin + side
            ):
                moves.append(
                    PawnEnPassantAttack(board, self, destination, en_passant_pawn)
                )
        return moves

    def promotion_piece(self) -> Piece:
        """Piece a promoting pawn turns into."""
        return Queen(self.alliance, self.square, False)

    def _on_starting_row(self) -> bool:
        rows = SEVENTH_ROW if self.alliance.is_white else SECOND_ROW
        return rows[self.square]

    def _promote_if_due(self, move: Move) -> Move:
        if self.alliance.is_pawn_promotion_square(move.destination):
            return PawnPromotion(move, self.promotion_piece())
        return move


@dataclass(frozen=True, slots=True)
class Knight(Piece):
    piece_type: ClassVar[PieceType] = PieceType.KNIGHT

    def calculate_legal_moves(self, board: Board) -> list[Move]:
        return self._step_moves(board, KNIGHT_OFFSETS, _KNIGHT_EXCLUSIONS)


@dataclass(frozen=True, slots=True)
class Bishop(Piece):
    piece_type: ClassVar[PieceType] = PieceType.BISHOP

    def calculate_legal_moves(self, board: Board) -> list[Move]:
        return self._slide_moves(board, BISHOP_OFFSETS)


@dataclass(frozen=True, slots=True)
class Rook(Piece):
    piece_type: ClassVar[PieceType] = PieceType.ROOK

    def calculate_legal_moves(self, board: Board) -> list[Move]:
        return self._slide_moves(board, ROOK_OFFSETS)


@dataclass(frozen=True, slots=True)
class Queen(Piece):
    piece_type: ClassVar[PieceType] = PieceType.QUEEN

    def calculate_legal_moves(self, board: Board) -> list[Move]:
        return self._slide_moves(board, QUEEN_OFFSETS)


@dataclass(frozen=True, slots=True)
class King(Piece):
    """King with its castling bookkeeping.

    The castling flags travel with the piece but take no part in equality.
    """

    piece_type: ClassVar[PieceType] = PieceType.KING

    is_castled: bool = field(default=False, compare=False)
    king_side_castle_capable: bool = field(default=True, compare=False)
    queen_side_castle_capable: bool = field(default=True, compare=False)

    def calculate_legal_moves(self, board: Board) -> list[Move]:
        # Castles are added by the player, which knows the opponent's attacks.
        return self._step_moves(board, KING_OFFSETS, _STEP_EXCLUSIONS)

    def move_piece(self, move: Move) -> Piece:
        return King(
            self.alliance,
            move.destination,
            False,
            is_castled=move.is_castling_move,
            king_side_castle_capable=False,
            queen_side_castle_capable=False,
        )
