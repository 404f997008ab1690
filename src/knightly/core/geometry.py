"""Square type alias, membership tables and coordinate helpers.

Board layout (top-left from White's point of view is square 0):
    a8=0,  b8=1,  ..., h8=7
    a7=8,  b7=9,  ..., h7=15
    ...
    a1=56, b1=57, ..., h1=63

Offset-based move generation adds a fixed delta to a square, which silently
wraps from the a-file to the h-file (and back).  The column tables below are
used to veto those deltas before they are applied.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeAlias

if TYPE_CHECKING:
    from knightly.core.board import Board
    from knightly.core.piece import King

Square: TypeAlias = int  # 0–63

NUM_SQUARES = 64
SQUARES_PER_ROW = 8


def _column(column_number: int) -> tuple[bool, ...]:
    return tuple(sq % SQUARES_PER_ROW == column_number for sq in range(NUM_SQUARES))


def _row(row_number: int) -> tuple[bool, ...]:
    return tuple(sq // SQUARES_PER_ROW == row_number for sq in range(NUM_SQUARES))


FIRST_COLUMN = _column(0)
SECOND_COLUMN = _column(1)
SEVENTH_COLUMN = _column(6)
EIGHTH_COLUMN = _column(7)

FIRST_ROW = _row(0)
SECOND_ROW = _row(1)
THIRD_ROW = _row(2)
FOURTH_ROW = _row(3)
FIFTH_ROW = _row(4)
SIXTH_ROW = _row(5)
SEVENTH_ROW = _row(6)
EIGHTH_ROW = _row(7)

ALGEBRAIC_NOTATION: tuple[str, ...] = tuple(
    f"{file}{rank}" for rank in "87654321" for file in "abcdefgh"
)
_SQUARE_BY_NAME: dict[str, Square] = {
    name: sq for sq, name in enumerate(ALGEBRAIC_NOTATION)
}


def is_valid_square(sq: int) -> bool:
    """Check whether integer is a valid square index."""
    return 0 <= sq < NUM_SQUARES


def column_of(sq: Square) -> int:
    """Column index 0–7 (a–h)."""
    return sq % SQUARES_PER_ROW


def row_of(sq: Square) -> int:
    """Row index 0–7, counted from the top (rank 8) down."""
    return sq // SQUARES_PER_ROW


def algebraic(sq: Square) -> str:
    """Human-readable name, e.g. 0 → 'a8', 63 → 'h1'."""
    return ALGEBRAIC_NOTATION[sq]


def square_of(name: str) -> Square:
    """Parse square name, e.g. 'e4' → 36."""
    try:
        return _SQUARE_BY_NAME[name]
    except KeyError:
        raise ValueError(f"Invalid square name: {name!r}") from None


def is_king_pawn_trap(board: Board, king: King, front_square: Square) -> bool:
    """Whether an enemy pawn stands on *front_square*."""
    piece = board.get_piece(front_square)
    return (
        piece is not None
        and piece.piece_type.is_pawn
        and piece.alliance != king.alliance
    )
