"""Core enumerations for the chess domain."""

from __future__ import annotations

from enum import IntEnum, auto


class PieceColor(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    def opponent(self) -> PieceColor:
        return PieceColor(1 - self.value)

    def __str__(self) -> str:
        return self.name.lower()

    def __format__(self, format_spec: str) -> str:
        return format(str(self), format_spec)


class PieceType(IntEnum):
    """Chess piece kinds ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6

    @property
    def display_name(self) -> str:
        return self.name.capitalize()


class MoveSpecial(IntEnum):
    """Special move classification attached to a destination."""

    NONE = 0
    DOUBLE_PUSH = 1
    EN_PASSANT = 2
    CASTLE_KINGSIDE = 3
    CASTLE_QUEENSIDE = 4
    PROMOTION = 5


class GameState(IntEnum):
    """Outcome of a game as seen by collaborators."""

    PLAYING = 0
    WHITE_WIN = 1
    BLACK_WIN = 2
    DRAW = 3

    @property
    def is_terminal(self) -> bool:
        return self != GameState.PLAYING


class StatusKind(IntEnum):
    """Detailed states of the game-outcome state machine."""

    PLAYING = auto()
    CHECK = auto()
    CHECKMATE = auto()
    STALEMATE = auto()
    DRAW = auto()
