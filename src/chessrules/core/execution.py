"""Committing a move onto a board.

The same routine runs on disposable clones while filtering legal moves and on
the live board once a move has been accepted, so simulation and play can
never disagree about side effects.
"""

from __future__ import annotations

from chessrules.core.board import Chessboard, LastMove
from chessrules.core.enums import MoveSpecial, PieceType
from chessrules.core.location import Location
from chessrules.core.move_pattern import MoveInfo
from chessrules.core.piece import Piece

# special → (rook from column, rook to column)
_CASTLE_ROOK_COLUMNS: dict[MoveSpecial, tuple[int, int]] = {
    MoveSpecial.CASTLE_KINGSIDE: (7, 5),
    MoveSpecial.CASTLE_QUEENSIDE: (0, 3),
}


def execute_move(
    board: Chessboard,
    origin: Location,
    target: Location,
    info: MoveInfo,
    promotion: PieceType | None = None,
) -> Piece | None:
    """Apply a move that is already known to be valid and return the captured piece.

    Side effects: en passant removes the passed pawn, castling relocates the
    corner rook, promotion substitutes a new piece of type *promotion*.
    Afterwards ``last_move`` is recorded and the turn passes to the opponent.
    """
    piece = board.remove(origin)
    if piece is None:
        raise ValueError(f"No piece on {origin}")

    captured = board.remove(target)
    if info.special == MoveSpecial.EN_PASSANT:
        captured = board.remove(Location(target.column, origin.row))

    rook_columns = _CASTLE_ROOK_COLUMNS.get(info.special)
    if rook_columns is not None:
        rook_from, rook_to = rook_columns
        rook = board.remove(Location(rook_from, origin.row))
        if rook is None:
            raise ValueError(f"No rook to castle with on {Location(rook_from, origin.row)}")
        rook.has_moved = True
        board.place(rook, Location(rook_to, origin.row))

    moved_type = piece.piece_type
    if info.special == MoveSpecial.PROMOTION:
        if promotion is None:
            raise ValueError(f"Promotion type required for {origin}{target}")
        piece = Piece(piece.color, promotion)

    piece.has_moved = True
    board.place(piece, target)

    board.last_move = LastMove(origin, target, moved_type, info.special)
    board.to_move = piece.color.opponent()
    return captured
