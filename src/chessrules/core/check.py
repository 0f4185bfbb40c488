"""Attack detection over raw move patterns."""

from __future__ import annotations

from chessrules.core.board import Chessboard
from chessrules.core.enums import PieceColor, PieceType
from chessrules.core.location import Location
from chessrules.core.move_generator import unvalidated_move_pattern
from chessrules.core.piece import Piece


class CheckDetector:
    """Static attack queries.

    Only the unvalidated generators are consulted. Asking the legality layer
    here would recurse forever, since legality itself is decided with
    :meth:`is_attacked`.
    """

    @staticmethod
    def is_attacked(
        board: Chessboard, location: Location, defending_color: PieceColor
    ) -> bool:
        """Is *location* reachable by any piece opposing *defending_color*?

        An empty *location* is tested on a clone holding a placeholder of
        *defending_color*, so pawn diagonals count and pawn pushes do not.
        """
        if board.is_empty(location):
            board = board.clone()
            board.place(Piece(defending_color, PieceType.PAWN), location)

        attacker = defending_color.opponent()
        for origin, _ in board.pieces(attacker):
            if location in unvalidated_move_pattern(board, origin):
                return True
        return False

    @staticmethod
    def is_in_check(board: Chessboard, color: PieceColor) -> bool:
        """Is *color*'s king attacked by the opponent? A side without a king is not."""
        if not board.has_king(color):
            return False
        return CheckDetector.is_attacked(board, board.king_location(color), color)
