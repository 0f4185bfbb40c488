"""Piece entity and promotion-choice parsing."""

from __future__ import annotations

from chessrules.core.enums import PieceColor, PieceType
from chessrules.core.errors import PromotionChoiceError

# Letter ↔ (PieceColor, PieceType)
_CHAR_MAP: dict[str, tuple[PieceColor, PieceType]] = {
    "P": (PieceColor.WHITE, PieceType.PAWN),
    "N": (PieceColor.WHITE, PieceType.KNIGHT),
    "B": (PieceColor.WHITE, PieceType.BISHOP),
    "R": (PieceColor.WHITE, PieceType.ROOK),
    "Q": (PieceColor.WHITE, PieceType.QUEEN),
    "K": (PieceColor.WHITE, PieceType.KING),
    "p": (PieceColor.BLACK, PieceType.PAWN),
    "n": (PieceColor.BLACK, PieceType.KNIGHT),
    "b": (PieceColor.BLACK, PieceType.BISHOP),
    "r": (PieceColor.BLACK, PieceType.ROOK),
    "q": (PieceColor.BLACK, PieceType.QUEEN),
    "k": (PieceColor.BLACK, PieceType.KING),
}

_UNICODE: dict[tuple[PieceColor, PieceType], str] = {
    (PieceColor.WHITE, PieceType.PAWN): "♙",
    (PieceColor.WHITE, PieceType.KNIGHT): "♘",
    (PieceColor.WHITE, PieceType.BISHOP): "♗",
    (PieceColor.WHITE, PieceType.ROOK): "♖",
    (PieceColor.WHITE, PieceType.QUEEN): "♕",
    (PieceColor.WHITE, PieceType.KING): "♔",
    (PieceColor.BLACK, PieceType.PAWN): "♟",
    (PieceColor.BLACK, PieceType.KNIGHT): "♞",
    (PieceColor.BLACK, PieceType.BISHOP): "♝",
    (PieceColor.BLACK, PieceType.ROOK): "♜",
    (PieceColor.BLACK, PieceType.QUEEN): "♛",
    (PieceColor.BLACK, PieceType.KING): "♚",
}

_LETTERS: dict[tuple[PieceColor, PieceType], str] = {v: k for k, v in _CHAR_MAP.items()}

_MATERIAL: dict[PieceType, int] = {
    PieceType.PAWN: 1,
    PieceType.KNIGHT: 3,
    PieceType.BISHOP: 3,
    PieceType.ROOK: 5,
    PieceType.QUEEN: 9,
    PieceType.KING: 0,
}

PROMOTION_TYPES: tuple[PieceType, ...] = (
    PieceType.QUEEN,
    PieceType.ROOK,
    PieceType.BISHOP,
    PieceType.KNIGHT,
)


class Piece:
    """A chess piece with identity.

    Two pieces are equal only if they are the same object: the board moves
    pieces between cells and the ``has_moved`` flag belongs to one instance.
    """

    __slots__ = ("color", "piece_type", "has_moved")

    def __init__(
        self,
        color: PieceColor,
        piece_type: PieceType,
        has_moved: bool = False,
    ) -> None:
        self.color = color
        self.piece_type = piece_type
        self.has_moved = has_moved

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create piece from its letter, e.g. 'N' → white knight."""
        try:
            color, ptype = _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(color, ptype)

    def clone(self) -> Piece:
        """New identity with the same color, type and ``has_moved``."""
        return Piece(self.color, self.piece_type, self.has_moved)

    # ── Display ──────────────────────────────────────────────────────────

    @property
    def name(self) -> str:
        return self.piece_type.display_name

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        return _UNICODE[(self.color, self.piece_type)]

    @property
    def value(self) -> int:
        """Conventional material value (the king counts as 0)."""
        return _MATERIAL[self.piece_type]

    def __str__(self) -> str:
        """Letter form (uppercase = white, lowercase = black)."""
        return _LETTERS[(self.color, self.piece_type)]

    def __repr__(self) -> str:
        moved = ", moved" if self.has_moved else ""
        return f"Piece({self.color}, {self.name}{moved})"


# ── Promotion choices ────────────────────────────────────────────────────────

_PROMOTION_TAGS: dict[str, PieceType] = {
    "q": PieceType.QUEEN,
    "r": PieceType.ROOK,
    "b": PieceType.BISHOP,
    "n": PieceType.KNIGHT,
    "queen": PieceType.QUEEN,
    "rook": PieceType.ROOK,
    "bishop": PieceType.BISHOP,
    "knight": PieceType.KNIGHT,
}
_PROMOTION_TAGS.update(
    {glyph: ptype for (_, ptype), glyph in _UNICODE.items() if ptype in PROMOTION_TYPES}
)


def parse_promotion(choice: PieceType | str) -> PieceType:
    """Resolve a promotion choice given as a type, letter, name or symbol."""
    if isinstance(choice, PieceType):
        if choice not in PROMOTION_TYPES:
            raise PromotionChoiceError(f"Cannot promote to {choice.display_name}")
        return choice
    if isinstance(choice, str):
        ptype = _PROMOTION_TAGS.get(choice.strip().lower())
        if ptype is not None:
            return ptype
    raise PromotionChoiceError(f"Invalid promotion choice: {choice!r}")


def promotion_letter(piece_type: PieceType) -> str:
    """Uppercase letter for a promotion type, e.g. QUEEN → 'Q'."""
    return _LETTERS[(PieceColor.WHITE, piece_type)]
