"""Move history records."""

from __future__ import annotations

from dataclasses import dataclass

from chessrules.core.enums import MoveSpecial, PieceColor, PieceType
from chessrules.core.location import Location
from chessrules.core.piece import promotion_letter
from chessrules.core.rules import GameStatus


@dataclass(frozen=True, slots=True)
class MoveRecord:
    """A single committed half-move."""

    origin: Location
    target: Location
    color: PieceColor
    piece_type: PieceType
    special: MoveSpecial
    status_after: GameStatus
    captured: PieceType | None = None
    promotion: PieceType | None = None

    @property
    def notation(self) -> str:
        """Extended from-to form, e.g. ``E2E4`` or ``A7A8Q``."""
        base = f"{self.origin}{self.target}"
        if self.promotion is not None:
            base += promotion_letter(self.promotion)
        return base

    @property
    def was_capture(self) -> bool:
        return self.captured is not None

    @property
    def was_check(self) -> bool:
        return self.status_after.is_check

    def __str__(self) -> str:
        return self.notation
