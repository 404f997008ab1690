"""End-to-end games exercising check, mate and the three special moves."""

from __future__ import annotations

from knightly.core.board import Board, Builder
from knightly.core.enums import Alliance, MoveStatus, PieceType
from knightly.core.move import (
    KingSideCastleMove,
    MoveFactory,
    PawnEnPassantAttack,
    PawnJump,
    PawnPromotion,
)
from knightly.core.piece import King, Pawn, Queen, Rook

W = Alliance.WHITE
B = Alliance.BLACK


def _play(board: Board, *squares: tuple[int, int]) -> Board:
    for origin, destination in squares:
        move = MoveFactory.create_move(board, origin, destination)
        transition = board.current_player.make_move(move)
        assert transition.status is MoveStatus.DONE, (origin, destination, transition.status)
        board = transition.to_board
    return board


class TestOpening:
    def test_e4(self) -> None:
        board = Board.standard()
        move = MoveFactory.create_move(board, 52, 36)
        assert str(move) == "e4"
        assert isinstance(move, PawnJump)

        after = board.current_player.make_move(move).to_board
        assert after.current_player.alliance is B
        pawn = after.get_piece(36)
        assert pawn == Pawn(W, 36, False)
        assert after.en_passant_pawn == pawn
        assert after.get_piece(52) is None


class TestMates:
    def test_fools_mate(self) -> None:
        board = _play(Board.standard(), (53, 37), (12, 28), (54, 38), (3, 39))
        white = board.white_player
        assert white.is_in_check()
        assert white.is_in_checkmate()
        assert not white.is_in_stalemate()

    def test_scholars_mate(self) -> None:
        board = _play(
            Board.standard(),
            (52, 36),
            (12, 28),
            (61, 34),
            (1, 18),
            (59, 31),
            (6, 21),
            (31, 13),
        )
        assert board.transition_move is not None
        assert board.transition_move.is_attack
        assert board.transition_move.attacked_piece == Pawn(B, 13)
        assert board.black_player.is_in_checkmate()
        assert str(board.transition_move) == "Qxf7"


class TestCastle:
    def test_white_king_side(self) -> None:
        board = (
            Builder()
            .set_piece(King(W, 60))
            .set_piece(Rook(W, 63))
            .set_piece(King(B, 4))
            .set_piece(Pawn(B, 12))
            .build()
        )
        castles = [m for m in board.white_player.legal_moves if isinstance(m, KingSideCastleMove)]
        assert len(castles) == 1

        after = board.current_player.make_move(castles[0]).to_board
        king = after.get_piece(62)
        assert isinstance(king, King)
        assert king.is_castled
        assert after.get_piece(61) == Rook(W, 61, False)
        assert after.white_player.is_castled()


class TestEnPassant:
    def _start(self) -> Board:
        return (
            Builder()
            .set_piece(King(W, 60))
            .set_piece(King(B, 4))
            .set_piece(Pawn(W, 52))
            .set_piece(Pawn(B, 35, False))
            .build()
        )

    def test_capture(self) -> None:
        board = _play(self._start(), (52, 36))
        capture = MoveFactory.create_move(board, 35, 44)
        assert isinstance(capture, PawnEnPassantAttack)
        assert capture.attacked_piece == Pawn(W, 36, False)
        assert str(capture) == "dxe3"

        after = board.current_player.make_move(capture).to_board
        assert after.get_piece(36) is None
        assert after.get_piece(44) == Pawn(B, 44, False)
        assert after.en_passant_pawn is None
        assert len(after.white_pieces) == 1

    def test_undo_restores_capturable_pawn(self) -> None:
        board = _play(self._start(), (52, 36))
        capture = MoveFactory.create_move(board, 35, 44)
        after = board.current_player.make_move(capture).to_board

        restored = after.current_player.unmake_move(capture).to_board
        assert restored.get_piece(36) == Pawn(W, 36, False)
        assert restored.get_piece(35) == Pawn(B, 35, False)
        assert restored.en_passant_pawn == Pawn(W, 36, False)
        assert restored.next_move_maker is B

    def test_right_expires_after_one_turn(self) -> None:
        board = _play(self._start(), (52, 36), (4, 5), (60, 61))
        move = MoveFactory.create_move(board, 35, 44)
        assert not isinstance(move, PawnEnPassantAttack)
        assert board.en_passant_pawn is None

    def test_single_step_does_not_enable_capture(self) -> None:
        board = (
            Builder()
            .set_piece(King(W, 60))
            .set_piece(King(B, 4))
            .set_piece(Pawn(W, 44, False))
            .set_piece(Pawn(B, 35, False))
            .build()
        )
        board = _play(board, (44, 36))
        assert board.en_passant_pawn is None
        assert MoveFactory.create_move(board, 35, 44).is_attack is False


class TestPromotion:
    def test_push_promotes_to_queen(self) -> None:
        board = (
            Builder()
            .set_piece(King(W, 63))
            .set_piece(King(B, 39))
            .set_piece(Pawn(W, 8, False))
            .build()
        )
        move = MoveFactory.create_move(board, 8, 0)
        assert isinstance(move, PawnPromotion)
        assert str(move) == "a7-a8=Q"

        after = board.current_player.make_move(move).to_board
        assert after.get_piece(0) == Queen(W, 0, False)
        assert after.get_piece(8) is None
        assert not any(p.piece_type is PieceType.PAWN for p in after.all_pieces)
        assert after.next_move_maker is B
        assert after.transition_move == move

    def test_capture_promotes_and_removes_victim(self) -> None:
        board = (
            Builder()
            .set_piece(King(W, 63))
            .set_piece(King(B, 39))
            .set_piece(Pawn(W, 9, False))
            .set_piece(Rook(B, 0, False))
            .set_piece(Rook(B, 1, False))
            .build()
        )
        move = MoveFactory.create_move(board, 9, 0)
        assert isinstance(move, PawnPromotion)
        assert move.is_attack
        assert str(move) == "b7-a8=Q"

        after = board.current_player.make_move(move).to_board
        assert after.get_piece(0) == Queen(W, 0, False)
        assert Rook(B, 0, False) not in after.black_pieces
        assert len(after.black_pieces) == 2
