"""MoveLog - ordered record of the moves applied in a game."""

from __future__ import annotations

from collections.abc import Iterator

from knightly.core.move import Move


class MoveLog:
    """Append-only list of applied moves, trimmed from the end on undo."""

    __slots__ = ("_moves",)

    def __init__(self) -> None:
        self._moves: list[Move] = []

    @property
    def moves(self) -> tuple[Move, ...]:
        return tuple(self._moves)

    @property
    def last_move(self) -> Move | None:
        return self._moves[-1] if self._moves else None

    def add_move(self, move: Move) -> None:
        self._moves.append(move)

    def remove_last(self) -> Move | None:
        """Pop the most recent move; ``None`` when the log is empty."""
        if not self._moves:
            return None
        return self._moves.pop()

    def clear(self) -> None:
        self._moves.clear()

    def __len__(self) -> int:
        return len(self._moves)

    def __iter__(self) -> Iterator[Move]:
        return iter(self._moves)

    def __getitem__(self, index: int) -> Move:
        return self._moves[index]
