"""Chessboard - piece placement, side to move and last-move memory."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass

from chessrules.core.enums import MoveSpecial, PieceColor, PieceType
from chessrules.core.location import Location, as_location
from chessrules.core.piece import Piece

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


@dataclass(frozen=True, slots=True)
class LastMove:
    """The previous half-move, kept only to allow en passant right after it."""

    origin: Location
    target: Location
    piece_type: PieceType
    special: MoveSpecial = MoveSpecial.NONE

    @property
    def is_double_push(self) -> bool:
        return (
            self.piece_type == PieceType.PAWN
            and abs(self.target.row - self.origin.row) == 2
        )


class Chessboard:
    """Mutable 64-cell board.

    Each cell holds at most one :class:`Piece`. The per-color king cache
    always mirrors the grid.
    """

    __slots__ = ("_cells", "_king_locations", "to_move", "last_move")

    def __init__(self, to_move: PieceColor = PieceColor.WHITE) -> None:
        self._cells: list[Piece | None] = [None] * 64
        self._king_locations: list[Location | None] = [None, None]
        self.to_move = to_move
        self.last_move: LastMove | None = None

    # -- Element access -----------------------------------------------------

    def piece_at(self, location: Location) -> Piece | None:
        return self._cells[location.index]

    def is_empty(self, location: Location) -> bool:
        return self._cells[location.index] is None

    def place(self, piece: Piece, location: Location) -> Piece | None:
        """Put *piece* on *location*; returns the piece it displaced, if any."""
        previous = self.remove(location)
        self._cells[location.index] = piece
        if piece.piece_type == PieceType.KING:
            self._king_locations[int(piece.color)] = location
        return previous

    def remove(self, location: Location) -> Piece | None:
        """Empty *location* and return its former occupant."""
        piece = self._cells[location.index]
        if piece is None:
            return None
        self._cells[location.index] = None
        color_idx = int(piece.color)
        if (
            piece.piece_type == PieceType.KING
            and self._king_locations[color_idx] == location
        ):
            self._king_locations[color_idx] = None
        return piece

    # -- Query helpers ------------------------------------------------------

    def king_location(self, color: PieceColor) -> Location:
        """Return the cached king location for *color*."""
        location = self._king_locations[int(color)]
        if location is None:
            raise ValueError(f"No {color.name} king on board")
        return location

    def has_king(self, color: PieceColor) -> bool:
        return self._king_locations[int(color)] is not None

    def pieces(self, color: PieceColor | None = None) -> Iterator[tuple[Location, Piece]]:
        """Occupied cells, optionally restricted to *color*, in A1..H8 order."""
        for index, piece in enumerate(self._cells):
            if piece is not None and (color is None or piece.color == color):
                yield Location.from_index(index), piece

    def all_pieces_grouped_by_type_and_color(
        self,
    ) -> dict[PieceType, dict[PieceColor, dict[Location, Piece]]]:
        """Every piece on the board, grouped by kind and then by color."""
        grouped: dict[PieceType, dict[PieceColor, dict[Location, Piece]]] = {
            ptype: {PieceColor.WHITE: {}, PieceColor.BLACK: {}} for ptype in PieceType
        }
        for location, piece in self.pieces():
            grouped[piece.piece_type][piece.color][location] = piece
        return grouped

    def count(self, color: PieceColor | None = None) -> int:
        return sum(1 for _ in self.pieces(color))

    # -- Copying ------------------------------------------------------------

    def clone(self) -> Chessboard:
        """Fully independent copy: piece identities are duplicated."""
        b = Chessboard(self.to_move)
        b._cells = [p.clone() if p is not None else None for p in self._cells]
        b._king_locations = self._king_locations.copy()
        b.last_move = self.last_move
        return b

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Chessboard:
        """Standard starting position."""
        b = cls()
        for column in range(8):
            b.place(Piece(PieceColor.WHITE, PieceType.PAWN), Location(column, 1))
            b.place(Piece(PieceColor.BLACK, PieceType.PAWN), Location(column, 6))
        for column, ptype in enumerate(_BACK_RANK):
            b.place(Piece(PieceColor.WHITE, ptype), Location(column, 0))
            b.place(Piece(PieceColor.BLACK, ptype), Location(column, 7))
        return b

    @classmethod
    def from_placement(
        cls,
        placement: Mapping[Location | str, str],
        to_move: PieceColor = PieceColor.WHITE,
    ) -> Chessboard:
        """Build a board from ``{"E1": "K", "E8": "k", ...}``; all pieces unmoved."""
        b = cls(to_move)
        for where, char in placement.items():
            b.place(Piece.from_char(char), as_location(where))
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(7, -1, -1):
            cells = []
            for column in range(8):
                p = self._cells[row * 8 + column]
                cells.append(str(p) if p else ".")
            rows.append(f"{row + 1} {' '.join(cells)}")
        rows.append("  A B C D E F G H")
        return "\n".join(rows)
