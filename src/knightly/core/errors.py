"""Exceptions raised when the engine is used outside its contract."""

from __future__ import annotations


class ChessError(Exception):
    """Base class for engine misuse."""


class MissingKingError(ChessError, ValueError):
    """A player view was requested for a side that has no king."""


class NullMoveError(ChessError, RuntimeError):
    """The null move cannot be executed or undone."""
