"""Core domain layer — pure chess rules with zero external dependencies.

Quick start::

    from knightly.core import Board, MoveFactory

    board = Board.standard()
    move = MoveFactory.create_move(board, 52, 36)  # e2-e4
    transition = board.current_player.make_move(move)
    if transition.status.is_done:
        board = transition.to_board
"""

from knightly.core.board import Board, Builder
from knightly.core.enums import Alliance, MoveStatus, PieceType
from knightly.core.errors import ChessError, MissingKingError, NullMoveError
from knightly.core.geometry import (
    Square,
    algebraic,
    column_of,
    is_king_pawn_trap,
    is_valid_square,
    row_of,
    square_of,
)
from knightly.core.move import (
    NULL_MOVE,
    AttackMove,
    CastleMove,
    KingSideCastleMove,
    MajorAttackMove,
    MajorMove,
    Move,
    MoveFactory,
    NullMove,
    PawnAttackMove,
    PawnEnPassantAttack,
    PawnJump,
    PawnMove,
    PawnPromotion,
    QueenSideCastleMove,
)
from knightly.core.piece import Bishop, King, Knight, Pawn, Piece, Queen, Rook
from knightly.core.player import BlackPlayer, Player, WhitePlayer
from knightly.core.transition import MoveTransition

__all__ = [
    # Enums
    "Alliance",
    "MoveStatus",
    "PieceType",
    # Errors
    "ChessError",
    "MissingKingError",
    "NullMoveError",
    # Geometry
    "Square",
    "algebraic",
    "column_of",
    "is_king_pawn_trap",
    "is_valid_square",
    "row_of",
    "square_of",
    # Pieces
    "Bishop",
    "King",
    "Knight",
    "Pawn",
    "Piece",
    "Queen",
    "Rook",
    # Moves
    "NULL_MOVE",
    "AttackMove",
    "CastleMove",
    "KingSideCastleMove",
    "MajorAttackMove",
    "MajorMove",
    "Move",
    "MoveFactory",
    "NullMove",
    "PawnAttackMove",
    "PawnEnPassantAttack",
    "PawnJump",
    "PawnMove",
    "PawnPromotion",
    "QueenSideCastleMove",
    # Board / players
    "Board",
    "Builder",
    "BlackPlayer",
    "MoveTransition",
    "Player",
    "WhitePlayer",
]
