"""MoveTransition: the outcome of asking a player to make a move."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from knightly.core.enums import MoveStatus

if TYPE_CHECKING:
    from knightly.core.board import Board
    from knightly.core.move import Move


@dataclass(frozen=True, slots=True)
class MoveTransition:
    """Boards before and after *move*, plus whether the move went through.

    Unless *status* is ``DONE``, ``to_board`` is the unchanged ``from_board``.
    """

    from_board: Board
    to_board: Board
    move: Move
    status: MoveStatus

    @property
    def is_done(self) -> bool:
        return self.status.is_done
