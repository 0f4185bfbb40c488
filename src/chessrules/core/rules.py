"""High-level chess rules: check, checkmate, stalemate, draw detection."""

from __future__ import annotations

from dataclasses import dataclass

from chessrules.core.board import Chessboard
from chessrules.core.check import CheckDetector
from chessrules.core.enums import GameState, PieceColor, PieceType, StatusKind
from chessrules.core.legality import has_legal_move

_MINOR_PIECES = (PieceType.KNIGHT, PieceType.BISHOP)


@dataclass(frozen=True, slots=True)
class GameStatus:
    """Detailed game status derived for the side to move.

    ``side`` is the side to move when the status was derived: the side in
    check, checkmated or stalemated.
    """

    kind: StatusKind
    side: PieceColor

    @property
    def state(self) -> GameState:
        if self.kind == StatusKind.CHECKMATE:
            return (
                GameState.BLACK_WIN if self.side == PieceColor.WHITE else GameState.WHITE_WIN
            )
        if self.kind in (StatusKind.STALEMATE, StatusKind.DRAW):
            return GameState.DRAW
        return GameState.PLAYING

    @property
    def is_check(self) -> bool:
        return self.kind in (StatusKind.CHECK, StatusKind.CHECKMATE)

    @property
    def winner(self) -> PieceColor | None:
        return self.side.opponent() if self.kind == StatusKind.CHECKMATE else None

    def __str__(self) -> str:
        if self.kind in (StatusKind.CHECK, StatusKind.CHECKMATE):
            return f"{self.kind.name.lower()} ({self.side} king)"
        return self.kind.name.lower()


class Rules:
    """Static rule-checker that operates on a :class:`Chessboard`."""

    @staticmethod
    def is_in_check(board: Chessboard) -> bool:
        return CheckDetector.is_in_check(board, board.to_move)

    @staticmethod
    def is_checkmate(board: Chessboard) -> bool:
        if not Rules.is_in_check(board):
            return False
        return not has_legal_move(board, board.to_move)

    @staticmethod
    def is_stalemate(board: Chessboard) -> bool:
        if Rules.is_in_check(board):
            return False
        return not has_legal_move(board, board.to_move)

    @staticmethod
    def is_insufficient_material(board: Chessboard) -> bool:
        """K vs K, K+B vs K, K+N vs K, K+B vs K+B (same-color bishops)."""
        others = [
            (location, piece)
            for location, piece in board.pieces()
            if piece.piece_type != PieceType.KING
        ]

        # K vs K
        if not others:
            return True

        # K+minor vs K
        if len(others) == 1:
            return others[0][1].piece_type in _MINOR_PIECES

        # K+B vs K+B with same-colored bishops
        if len(others) == 2:
            (loc_a, a), (loc_b, b) = others
            if (
                a.piece_type == b.piece_type == PieceType.BISHOP
                and a.color != b.color
            ):
                return (loc_a.column + loc_a.row) % 2 == (loc_b.column + loc_b.row) % 2

        return False

    @staticmethod
    def status(board: Chessboard, insufficient_material_draw: bool = False) -> GameStatus:
        """Derive the status of the side to move."""
        side = board.to_move
        in_check = CheckDetector.is_in_check(board, side)

        if not has_legal_move(board, side):
            kind = StatusKind.CHECKMATE if in_check else StatusKind.STALEMATE
            return GameStatus(kind, side)

        if insufficient_material_draw and Rules.is_insufficient_material(board):
            return GameStatus(StatusKind.DRAW, side)

        return GameStatus(StatusKind.CHECK if in_check else StatusKind.PLAYING, side)

    @staticmethod
    def game_state(board: Chessboard, insufficient_material_draw: bool = False) -> GameState:
        """Collapse :meth:`status` to the collaborator-facing outcome."""
        return Rules.status(board, insufficient_material_draw).state
