"""Leaf counts of the legal move tree from the starting position."""

from __future__ import annotations

import pytest

from knightly.core.board import Board


def _perft(board: Board, depth: int) -> int:
    if depth == 0:
        return 1
    player = board.current_player
    total = 0
    for move in player.legal_moves:
        transition = player.make_move(move)
        if transition.is_done:
            total += _perft(transition.to_board, depth - 1)
    return total


class TestPerft:
    @pytest.mark.parametrize(("depth", "expected"), [(1, 20), (2, 400)])
    def test_shallow(self, depth: int, expected: int) -> None:
        assert _perft(Board.standard(), depth) == expected

    @pytest.mark.slow
    def test_depth_three(self) -> None:
        assert _perft(Board.standard(), 3) == 8902
