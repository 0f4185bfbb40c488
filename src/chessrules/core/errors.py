"""Exceptions raised by the rules engine.

Every error is a rejected operation: the board and the controller are left
exactly as they were before the failing call.
"""

from __future__ import annotations


class ChessError(Exception):
    """Base class for all rules-engine errors."""


class LocationFormatError(ChessError, ValueError):
    """Malformed or out-of-range coordinate text."""


class InvalidMoveError(ChessError):
    """Destination is not a legal move from the origin, or it is not that side's turn."""


class PromotionRequiredButMissingError(ChessError):
    """A promoting move was committed before a promotion choice was set."""


class PromotionChoiceError(ChessError, ValueError):
    """The promotion choice is not one of Queen, Rook, Bishop or Knight."""
