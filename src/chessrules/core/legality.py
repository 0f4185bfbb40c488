"""King-safety legality: castling injection and simulate-then-discard filtering."""

from __future__ import annotations

from dataclasses import dataclass

from chessrules.core.board import Chessboard
from chessrules.core.check import CheckDetector
from chessrules.core.enums import MoveSpecial, PieceColor, PieceType
from chessrules.core.execution import execute_move
from chessrules.core.location import Location
from chessrules.core.move_generator import unvalidated_move_pattern
from chessrules.core.move_pattern import MoveInfo, MoveList, MovePattern
from chessrules.core.piece import parse_promotion

_HOME_ROW: dict[PieceColor, int] = {PieceColor.WHITE: 0, PieceColor.BLACK: 7}
_KING_HOME_COLUMN = 4


@dataclass(frozen=True, slots=True)
class _CastleRule:
    rook_column: int
    between: tuple[int, ...]  # must be empty
    king_path: tuple[int, ...]  # must not be attacked
    king_target: int


_CASTLE_RULES: dict[MoveSpecial, _CastleRule] = {
    MoveSpecial.CASTLE_KINGSIDE: _CastleRule(
        rook_column=7, between=(5, 6), king_path=(5, 6), king_target=6
    ),
    MoveSpecial.CASTLE_QUEENSIDE: _CastleRule(
        rook_column=0, between=(1, 2, 3), king_path=(3, 2), king_target=2
    ),
}


# -- Castling -------------------------------------------------------------------


def can_castle(board: Chessboard, king_location: Location, side: MoveSpecial) -> bool:
    """Whether the king on *king_location* may castle towards *side* right now.

    *side* is ``CASTLE_KINGSIDE`` or ``CASTLE_QUEENSIDE``.
    """
    rule = _CASTLE_RULES.get(side)
    if rule is None:
        raise ValueError(f"Not a castling side: {side!r}")

    king = board.piece_at(king_location)
    if king is None or king.piece_type != PieceType.KING or king.has_moved:
        return False
    row = _HOME_ROW[king.color]
    if king_location != Location(_KING_HOME_COLUMN, row):
        return False

    rook = board.piece_at(Location(rule.rook_column, row))
    if (
        rook is None
        or rook.piece_type != PieceType.ROOK
        or rook.color != king.color
        or rook.has_moved
    ):
        return False

    if any(not board.is_empty(Location(c, row)) for c in rule.between):
        return False

    if CheckDetector.is_attacked(board, king_location, king.color):
        return False
    return not any(
        CheckDetector.is_attacked(board, Location(c, row), king.color)
        for c in rule.king_path
    )


def castling_moves(board: Chessboard, king_location: Location) -> MovePattern:
    """Castling destinations currently open to the king on *king_location*."""
    pattern = MovePattern()
    for side, rule in _CASTLE_RULES.items():
        if can_castle(board, king_location, side):
            pattern.add(
                Location(rule.king_target, king_location.row), MoveInfo(special=side)
            )
    return pattern


# -- Legal move filtering -------------------------------------------------------


def legal_moves(
    board: Chessboard,
    location: Location,
    promotion: PieceType = PieceType.QUEEN,
) -> MoveList:
    """Moves of the occupant of *location* that leave its own king safe.

    Each candidate is played on a clone of *board*; the live board is never
    touched. *promotion* is the piece substituted while simulating
    promoting moves; anything but Queen, Rook, Bishop or Knight raises
    :class:`PromotionChoiceError`.
    """
    promotion = parse_promotion(promotion)
    result = MoveList()
    piece = board.piece_at(location)
    if piece is None:
        return result

    pattern = unvalidated_move_pattern(board, location)
    is_king = piece.piece_type == PieceType.KING
    opposing_king: Location | None = None
    if is_king:
        pattern.update(castling_moves(board, location))
        if board.has_king(piece.color.opponent()):
            opposing_king = board.king_location(piece.color.opponent())

    for target, info in pattern.items():
        if opposing_king is not None and target.distance(opposing_king) <= 1:
            continue
        trial = board.clone()
        execute_move(trial, location, target, info, promotion)
        if CheckDetector.is_in_check(trial, piece.color):
            continue
        result[target] = info
    return result


def all_legal_moves(
    board: Chessboard,
    color: PieceColor,
    promotion: PieceType = PieceType.QUEEN,
) -> dict[Location, MoveList]:
    """Every origin of *color* that has at least one legal move."""
    moves: dict[Location, MoveList] = {}
    for origin, _ in board.pieces(color):
        found = legal_moves(board, origin, promotion)
        if found:
            moves[origin] = found
    return moves


def has_legal_move(board: Chessboard, color: PieceColor) -> bool:
    """Whether *color* has any legal move; stops at the first one found."""
    return any(legal_moves(board, origin) for origin, _ in board.pieces(color))
