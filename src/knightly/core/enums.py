"""Core enumerations: sides, piece kinds and move outcomes."""

from __future__ import annotations

from enum import Enum, IntEnum, auto
from typing import TypeVar

from knightly.core.geometry import EIGHTH_ROW, FIRST_ROW, Square

_P = TypeVar("_P")

# Squares are numbered from a8 (0) to h1 (63), so White advances towards 0.
_UP = -8
_DOWN = 8


class Alliance(Enum):
    """Side colour."""

    WHITE = auto()
    BLACK = auto()

    @property
    def is_white(self) -> bool:
        return self is Alliance.WHITE

    @property
    def is_black(self) -> bool:
        return self is Alliance.BLACK

    @property
    def direction(self) -> int:
        """Square delta of a one-step pawn advance."""
        return _UP if self is Alliance.WHITE else _DOWN

    @property
    def opposite_direction(self) -> int:
        return _DOWN if self is Alliance.WHITE else _UP

    @property
    def opposite(self) -> Alliance:
        return Alliance.BLACK if self is Alliance.WHITE else Alliance.WHITE

    def is_pawn_promotion_square(self, square: Square) -> bool:
        """White promotes on the first row (rank 8), Black on the eighth (rank 1)."""
        rows = FIRST_ROW if self is Alliance.WHITE else EIGHTH_ROW
        return rows[square]

    def choose_player(self, white_player: _P, black_player: _P) -> _P:
        """Pick whichever of the two players belongs to this side."""
        return white_player if self is Alliance.WHITE else black_player

    def __str__(self) -> str:
        return self.name.capitalize()


class PieceType(IntEnum):
    """Chess piece kinds."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6

    @property
    def piece_value(self) -> int:
        """Material value in centipawns."""
        return _PIECE_VALUES[self]

    @property
    def symbol(self) -> str:
        return _PIECE_SYMBOLS[self]

    @property
    def is_pawn(self) -> bool:
        return self is PieceType.PAWN

    @property
    def is_bishop(self) -> bool:
        return self is PieceType.BISHOP

    @property
    def is_rook(self) -> bool:
        return self is PieceType.ROOK

    @property
    def is_king(self) -> bool:
        return self is PieceType.KING

    def __str__(self) -> str:
        return self.symbol


_PIECE_VALUES: dict[PieceType, int] = {
    PieceType.PAWN: 100,
    PieceType.KNIGHT: 320,
    PieceType.BISHOP: 350,
    PieceType.ROOK: 500,
    PieceType.QUEEN: 900,
    PieceType.KING: 20000,
}

_PIECE_SYMBOLS: dict[PieceType, str] = {
    PieceType.PAWN: "P",
    PieceType.KNIGHT: "N",
    PieceType.BISHOP: "B",
    PieceType.ROOK: "R",
    PieceType.QUEEN: "Q",
    PieceType.KING: "K",
}


class MoveStatus(IntEnum):
    """Outcome of asking a player to make a move."""

    DONE = auto()
    ILLEGAL_MOVE = auto()
    LEAVES_PLAYER_IN_CHECK = auto()

    @property
    def is_done(self) -> bool:
        return self is MoveStatus.DONE
