"""Core domain layer: pure chess rules with zero external dependencies.

Quick start::

    from chessrules.core import Chessboard, E2, legal_moves

    board = Chessboard.initial()
    for target, info in legal_moves(board, E2).items():
        print(target, info)
"""

from chessrules.core.board import Chessboard, LastMove
from chessrules.core.check import CheckDetector
from chessrules.core.enums import (
    GameState,
    MoveSpecial,
    PieceColor,
    PieceType,
    StatusKind,
)
from chessrules.core.errors import (
    ChessError,
    InvalidMoveError,
    LocationFormatError,
    PromotionChoiceError,
    PromotionRequiredButMissingError,
)
from chessrules.core.execution import execute_move
from chessrules.core.legality import (
    all_legal_moves,
    can_castle,
    castling_moves,
    has_legal_move,
    legal_moves,
)
from chessrules.core.location import (
    A1, A2, A3, A4, A5, A6, A7, A8,
    B1, B2, B3, B4, B5, B6, B7, B8,
    C1, C2, C3, C4, C5, C6, C7, C8,
    D1, D2, D3, D4, D5, D6, D7, D8,
    E1, E2, E3, E4, E5, E6, E7, E8,
    F1, F2, F3, F4, F5, F6, F7, F8,
    G1, G2, G3, G4, G5, G6, G7, G8,
    H1, H2, H3, H4, H5, H6, H7, H8,
    Location,
    parse_extended_move,
    parse_location,
)
from chessrules.core.move_generator import unvalidated_move_pattern
from chessrules.core.move_pattern import MoveInfo, MoveList, MovePattern
from chessrules.core.piece import PROMOTION_TYPES, Piece, parse_promotion
from chessrules.core.rules import GameStatus, Rules

__all__ = [
    # Enums
    "GameState",
    "MoveSpecial",
    "PieceColor",
    "PieceType",
    "StatusKind",
    # Errors
    "ChessError",
    "InvalidMoveError",
    "LocationFormatError",
    "PromotionChoiceError",
    "PromotionRequiredButMissingError",
    # Locations
    "Location",
    "parse_extended_move",
    "parse_location",
    "A1", "A2", "A3", "A4", "A5", "A6", "A7", "A8",
    "B1", "B2", "B3", "B4", "B5", "B6", "B7", "B8",
    "C1", "C2", "C3", "C4", "C5", "C6", "C7", "C8",
    "D1", "D2", "D3", "D4", "D5", "D6", "D7", "D8",
    "E1", "E2", "E3", "E4", "E5", "E6", "E7", "E8",
    "F1", "F2", "F3", "F4", "F5", "F6", "F7", "F8",
    "G1", "G2", "G3", "G4", "G5", "G6", "G7", "G8",
    "H1", "H2", "H3", "H4", "H5", "H6", "H7", "H8",
    # Domain objects
    "CheckDetector",
    "Chessboard",
    "GameStatus",
    "LastMove",
    "MoveInfo",
    "MoveList",
    "MovePattern",
    "PROMOTION_TYPES",
    "Piece",
    "Rules",
    # Move generation
    "all_legal_moves",
    "can_castle",
    "castling_moves",
    "execute_move",
    "has_legal_move",
    "legal_moves",
    "parse_promotion",
    "unvalidated_move_pattern",
]
