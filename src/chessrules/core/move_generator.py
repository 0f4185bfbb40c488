"""Raw (unvalidated) move patterns for every piece kind.

Nothing here looks at the safety of the mover's own king; that is the job of
:mod:`chessrules.core.legality`. The attack test in :mod:`chessrules.core.check`
relies on these generators staying unfiltered.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from chessrules.core.enums import MoveSpecial, PieceColor, PieceType
from chessrules.core.location import Location
from chessrules.core.move_pattern import CAPTURE, QUIET, MoveInfo, MovePattern

if TYPE_CHECKING:
    from chessrules.core.board import Chessboard
    from chessrules.core.piece import Piece


KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS

_PAWN_DIRECTION: dict[PieceColor, int] = {PieceColor.WHITE: 1, PieceColor.BLACK: -1}
_PAWN_START_ROW: dict[PieceColor, int] = {PieceColor.WHITE: 1, PieceColor.BLACK: 6}
_LAST_ROW: dict[PieceColor, int] = {PieceColor.WHITE: 7, PieceColor.BLACK: 0}

_PROMOTION = MoveInfo(special=MoveSpecial.PROMOTION)
_PROMOTION_CAPTURE = MoveInfo(is_capture=True, special=MoveSpecial.PROMOTION)
_DOUBLE_PUSH = MoveInfo(special=MoveSpecial.DOUBLE_PUSH)
_EN_PASSANT = MoveInfo(is_capture=True, special=MoveSpecial.EN_PASSANT)


def last_row(color: PieceColor) -> int:
    """Promotion row for pawns of *color*."""
    return _LAST_ROW[color]


# -- Piece-specific generators -------------------------------------------------


def _pawn(board: Chessboard, position: Location, piece: Piece) -> MovePattern:
    pattern = MovePattern()
    color = piece.color
    step = _PAWN_DIRECTION[color]
    promotes = position.row + step == _LAST_ROW[color]

    one_step = position.offset(0, step)
    if one_step is not None and board.is_empty(one_step):
        pattern.add(one_step, _PROMOTION if promotes else QUIET)
        if not piece.has_moved and position.row == _PAWN_START_ROW[color]:
            two_step = position.offset(0, 2 * step)
            if two_step is not None and board.is_empty(two_step):
                pattern.add(two_step, _DOUBLE_PUSH)

    for d_column in (-1, 1):
        target = position.offset(d_column, step)
        if target is None:
            continue
        occupant = board.piece_at(target)
        if occupant is not None:
            if occupant.color != color:
                pattern.add(target, _PROMOTION_CAPTURE if promotes else CAPTURE)
        elif _is_en_passant_target(board, position, target, color):
            pattern.add(target, _EN_PASSANT)
    return pattern


def _is_en_passant_target(
    board: Chessboard, position: Location, target: Location, color: PieceColor
) -> bool:
    last = board.last_move
    if last is None or not last.is_double_push:
        return False
    passed = Location(target.column, position.row)
    if last.target != passed or last.origin.column != target.column:
        return False
    victim = board.piece_at(passed)
    return (
        victim is not None
        and victim.color != color
        and victim.piece_type == PieceType.PAWN
    )


def _jumps(
    offsets: tuple[tuple[int, int], ...],
) -> Callable[[Chessboard, Location, Piece], MovePattern]:
    def generate(board: Chessboard, position: Location, piece: Piece) -> MovePattern:
        pattern = MovePattern()
        for d_column, d_row in offsets:
            target = position.offset(d_column, d_row)
            if target is None:
                continue
            occupant = board.piece_at(target)
            if occupant is None:
                pattern.add(target)
            elif occupant.color != piece.color:
                pattern.add(target, CAPTURE)
        return pattern

    return generate


def _sliding(
    directions: tuple[tuple[int, int], ...],
) -> Callable[[Chessboard, Location, Piece], MovePattern]:
    def generate(board: Chessboard, position: Location, piece: Piece) -> MovePattern:
        pattern = MovePattern()
        for d_column, d_row in directions:
            target = position.offset(d_column, d_row)
            while target is not None:
                occupant = board.piece_at(target)
                if occupant is None:
                    pattern.add(target)
                    target = target.offset(d_column, d_row)
                    continue
                if occupant.color != piece.color:
                    pattern.add(target, CAPTURE)
                break
        return pattern

    return generate


_GENERATORS: dict[PieceType, Callable[[Chessboard, Location, Piece], MovePattern]] = {
    PieceType.PAWN: _pawn,
    PieceType.KNIGHT: _jumps(KNIGHT_OFFSETS),
    PieceType.BISHOP: _sliding(BISHOP_DIRS),
    PieceType.ROOK: _sliding(ROOK_DIRS),
    PieceType.QUEEN: _sliding(QUEEN_DIRS),
    PieceType.KING: _jumps(KING_OFFSETS),
}


# -- Public API -----------------------------------------------------------------


def unvalidated_move_pattern(board: Chessboard, position: Location) -> MovePattern:
    """Destinations reachable by the occupant of *position* by geometry alone.

    Returns an empty pattern for an empty cell. Castling is never included.
    """
    piece = board.piece_at(position)
    if piece is None:
        return MovePattern()
    return _GENERATORS[piece.piece_type](board, position, piece)
