"""Tests for the per-side player view: castling, legality filter, mate."""

from __future__ import annotations

from knightly.core.board import Board, Builder
from knightly.core.enums import Alliance, MoveStatus
from knightly.core.geometry import square_of
from knightly.core.move import KingSideCastleMove, MoveFactory, QueenSideCastleMove
from knightly.core.piece import Bishop, King, Knight, Pawn, Piece, Queen, Rook

W = Alliance.WHITE
B = Alliance.BLACK


def _board(*pieces: Piece, to_move: Alliance = W) -> Board:
    builder = Builder().set_move_maker(to_move)
    for piece in pieces:
        builder.set_piece(piece)
    return builder.build()


def _castles(board: Board, alliance: Alliance = W) -> list[type]:
    player = board.white_player if alliance is W else board.black_player
    return [type(m) for m in player.legal_moves if m.is_castling_move]


def _white_castle_setup(*extra: Piece) -> Board:
    return _board(
        King(W, square_of("e1")),
        Rook(W, square_of("h1")),
        Rook(W, square_of("a1")),
        King(B, square_of("e8")),
        *extra,
    )


class TestCastlingAvailability:
    def test_both_sides_available(self) -> None:
        board = _white_castle_setup()
        assert sorted(_castles(board), key=lambda t: t.__name__) == [
            KingSideCastleMove,
            QueenSideCastleMove,
        ]

    def test_black_mirror(self) -> None:
        board = _board(
            King(B, square_of("e8")),
            Rook(B, square_of("h8")),
            Rook(B, square_of("a8")),
            King(W, square_of("e1")),
            to_move=B,
        )
        moves = [m for m in board.black_player.legal_moves if m.is_castling_move]
        assert {m.destination for m in moves} == {square_of("g8"), square_of("c8")}

    def test_not_in_standard_position(self) -> None:
        assert _castles(Board.standard()) == []

    def test_blocked_path(self) -> None:
        board = _white_castle_setup(Knight(W, square_of("g1")))
        assert _castles(board) == [QueenSideCastleMove]

    def test_queen_side_needs_b_file_empty(self) -> None:
        board = _white_castle_setup(Knight(W, square_of("b1")))
        assert _castles(board) == [KingSideCastleMove]

    def test_king_has_moved(self) -> None:
        board = _board(
            King(W, square_of("e1"), False),
            Rook(W, square_of("h1")),
            King(B, square_of("e8")),
        )
        assert _castles(board) == []

    def test_rook_has_moved(self) -> None:
        board = _board(
            King(W, square_of("e1")),
            Rook(W, square_of("h1"), False),
            King(B, square_of("e8")),
        )
        assert _castles(board) == []

    def test_traversal_square_attacked(self) -> None:
        board = _white_castle_setup(Rook(B, square_of("f8")))
        assert _castles(board) == [QueenSideCastleMove]

    def test_in_check(self) -> None:
        board = _white_castle_setup(Rook(B, square_of("e5"), False))
        assert board.white_player.is_in_check()
        assert _castles(board) == []

    def test_enemy_pawn_in_front_of_king(self) -> None:
        board = _white_castle_setup(Pawn(B, square_of("e2"), False))
        assert _castles(board) == []

    def test_own_pawn_in_front_of_king(self) -> None:
        board = _white_castle_setup(Pawn(W, square_of("e2")))
        assert len(_castles(board)) == 2

    def test_capability_flags(self) -> None:
        player = Board.standard().white_player
        assert player.is_king_side_castle_capable()
        assert player.is_queen_side_castle_capable()
        assert not player.is_castled()


class TestCastleExecution:
    def test_king_side(self) -> None:
        board = _white_castle_setup()
        move = MoveFactory.create_move(board, square_of("e1"), square_of("g1"))
        assert isinstance(move, KingSideCastleMove)
        assert str(move) == "O-O"

        transition = board.current_player.make_move(move)
        assert transition.status is MoveStatus.DONE
        after = transition.to_board
        king = after.get_piece(square_of("g1"))
        rook = after.get_piece(square_of("f1"))
        assert isinstance(king, King) and king.is_castled
        assert rook == Rook(W, square_of("f1"), False)
        assert after.get_piece(square_of("e1")) is None
        assert after.get_piece(square_of("h1")) is None
        assert after.white_player.is_castled()
        assert not after.white_player.is_king_side_castle_capable()
        assert after.next_move_maker is B

    def test_queen_side(self) -> None:
        board = _white_castle_setup()
        move = MoveFactory.create_move(board, square_of("e1"), square_of("c1"))
        assert isinstance(move, QueenSideCastleMove)
        assert str(move) == "O-O-O"
        assert move.castle_rook_start == square_of("a1")
        assert move.castle_rook_destination == square_of("d1")

        after = board.current_player.make_move(move).to_board
        assert isinstance(after.get_piece(square_of("c1")), King)
        assert after.get_piece(square_of("d1")) == Rook(W, square_of("d1"), False)
        assert after.get_piece(square_of("a1")) is None
        assert after.get_piece(square_of("h1")) == Rook(W, square_of("h1"))

    def test_no_castling_after_king_returns(self) -> None:
        board = _white_castle_setup()
        for origin, destination in (("e1", "f1"), ("e8", "d8"), ("f1", "e1"), ("d8", "e8")):
            move = MoveFactory.create_move(board, square_of(origin), square_of(destination))
            board = board.current_player.make_move(move).to_board
        assert _castles(board) == []


class TestMakeMove:
    def test_opponent_move_is_illegal(self) -> None:
        board = Board.standard()
        move = MoveFactory.create_move(board, square_of("e7"), square_of("e5"))
        transition = board.current_player.make_move(move)
        assert transition.status is MoveStatus.ILLEGAL_MOVE
        assert transition.to_board is board
        assert transition.from_board is board
        assert transition.move is move

    def test_pinned_piece_cannot_leave_the_line(self) -> None:
        board = _board(
            King(W, square_of("e1")),
            Bishop(W, square_of("e2")),
            Rook(B, square_of("e8")),
            King(B, square_of("a8")),
        )
        move = MoveFactory.create_move(board, square_of("e2"), square_of("d3"))
        transition = board.current_player.make_move(move)
        assert transition.status is MoveStatus.LEAVES_PLAYER_IN_CHECK
        assert transition.to_board is board

    def test_king_cannot_step_into_attack(self) -> None:
        board = _board(
            King(W, square_of("e1")),
            Rook(B, square_of("d8")),
            King(B, square_of("a8")),
        )
        move = MoveFactory.create_move(board, square_of("e1"), square_of("d1"))
        assert board.current_player.make_move(move).status is MoveStatus.LEAVES_PLAYER_IN_CHECK

    def test_unmake_move_restores_position(self) -> None:
        board = Board.standard()
        move = MoveFactory.create_move(board, square_of("g1"), square_of("f3"))
        after = board.current_player.make_move(move).to_board
        transition = after.current_player.unmake_move(move)
        assert transition.status is MoveStatus.DONE
        assert transition.from_board is after
        assert set(transition.to_board.all_pieces) == set(board.all_pieces)
        assert transition.to_board.next_move_maker is W


class TestMatePredicates:
    def test_standard_position(self) -> None:
        player = Board.standard().current_player
        assert not player.is_in_check()
        assert not player.is_in_checkmate()
        assert not player.is_in_stalemate()

    def test_stalemate(self) -> None:
        board = _board(
            King(B, square_of("a8")),
            Queen(W, square_of("c7"), False),
            King(W, square_of("h1")),
            to_move=B,
        )
        player = board.current_player
        assert not player.is_in_check()
        assert player.is_in_stalemate()
        assert not player.is_in_checkmate()

    def test_back_rank_mate(self) -> None:
        board = _board(
            King(B, square_of("g8")),
            Pawn(B, square_of("f7")),
            Pawn(B, square_of("g7")),
            Pawn(B, square_of("h7")),
            Rook(W, square_of("e8"), False),
            King(W, square_of("g1")),
            to_move=B,
        )
        player = board.current_player
        assert player.is_in_check()
        assert player.is_in_checkmate()
        assert not player.is_in_stalemate()

    def test_check_with_escape(self) -> None:
        board = _board(
            King(B, square_of("e8")),
            Rook(W, square_of("e1"), False),
            King(W, square_of("a1")),
            to_move=B,
        )
        player = board.current_player
        assert player.is_in_check()
        assert not player.is_in_checkmate()

    def test_opponent_view(self) -> None:
        board = Board.standard()
        assert board.white_player.opponent.alliance is B
        assert board.black_player.opponent.alliance is W
        assert str(board.white_player) == "White"
        assert len(board.white_player.active_pieces) == 16
