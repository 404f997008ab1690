"""Game management layer — session, move log and presenter-facing views.

Quick start::

    from knightly.game import GameSession

    session = GameSession()
    session.try_move(52, 36)  # e2-e4
    session.undo_last_move()
"""

from knightly.game.move_log import MoveLog
from knightly.game.session import (
    GameEvents,
    GameSession,
    GameStatus,
    HistoryRow,
    TakenPieces,
)

__all__ = [
    "GameEvents",
    "GameSession",
    "GameStatus",
    "HistoryRow",
    "MoveLog",
    "TakenPieces",
]
