"""Location value object and algebraic coordinate helpers.

Board layout (column, row), both zero-based:
    A1 = (0, 0), B1 = (1, 0), ..., H1 = (7, 0)
    ...
    A8 = (0, 7), ..., H8 = (7, 7)
"""

from __future__ import annotations

from dataclasses import dataclass

from chessrules.core.errors import LocationFormatError

_FILES = "ABCDEFGH"
_RANKS = "12345678"


@dataclass(frozen=True, slots=True)
class Location:
    """Immutable board coordinate.

    The constructor does not validate; use :func:`parse_location` for
    untrusted text.
    """

    column: int
    row: int

    # ── Conversions ──────────────────────────────────────────────────────

    @classmethod
    def parse(cls, text: str) -> Location:
        """Parse algebraic notation, e.g. ``'c5'`` → ``Location(2, 4)``."""
        upper = text.upper() if isinstance(text, str) else ""
        if len(upper) != 2 or len(text) != 2:
            raise LocationFormatError(f"Invalid location: {text!r}")
        file_char, rank_char = upper
        if file_char not in _FILES or rank_char not in _RANKS:
            raise LocationFormatError(f"Location out of the board: {text!r}")
        return cls(_FILES.index(file_char), _RANKS.index(rank_char))

    def coordinates(self) -> tuple[int, int]:
        """Row first, then column."""
        return (self.row, self.column)

    @property
    def index(self) -> int:
        """Flat cell index 0–63 (A1=0, H8=63)."""
        return self.row * 8 + self.column

    @classmethod
    def from_index(cls, index: int) -> Location:
        return cls(index & 7, index >> 3)

    # ── Geometry ─────────────────────────────────────────────────────────

    @property
    def is_on_board(self) -> bool:
        return 0 <= self.column < 8 and 0 <= self.row < 8

    def offset(self, d_column: int, d_row: int) -> Location | None:
        """Shifted location, or ``None`` when it falls off the board."""
        column = self.column + d_column
        row = self.row + d_row
        if 0 <= column < 8 and 0 <= row < 8:
            return Location(column, row)
        return None

    def distance(self, other: Location) -> int:
        """Chebyshev (king-step) distance."""
        return max(abs(self.column - other.column), abs(self.row - other.row))

    def __str__(self) -> str:
        return chr(ord("A") + self.column) + str(self.row + 1)


def parse_location(text: str) -> Location:
    """Parse a two-character location such as ``'E4'`` (case-insensitive)."""
    return Location.parse(text)


def parse_extended_move(text: str) -> tuple[Location, Location]:
    """Split a four-character move such as ``'A4C6'`` into its two locations."""
    if not isinstance(text, str) or len(text) != 4:
        raise LocationFormatError(f"Invalid extended move: {text!r}")
    return Location.parse(text[:2]), Location.parse(text[2:])


def as_location(value: Location | str) -> Location:
    """Accept either a :class:`Location` or its text form.

    Raises :class:`LocationFormatError` for text that does not parse and for a
    :class:`Location` that lies off the board.
    """
    if isinstance(value, Location):
        if not value.is_on_board:
            raise LocationFormatError(f"Location out of the board: {value!r}")
        return value
    return Location.parse(value)


# ── Named location constants ────────────────────────────────────────────────

A1, B1, C1, D1, E1, F1, G1, H1 = (Location(c, 0) for c in range(8))
A2, B2, C2, D2, E2, F2, G2, H2 = (Location(c, 1) for c in range(8))
A3, B3, C3, D3, E3, F3, G3, H3 = (Location(c, 2) for c in range(8))
A4, B4, C4, D4, E4, F4, G4, H4 = (Location(c, 3) for c in range(8))
A5, B5, C5, D5, E5, F5, G5, H5 = (Location(c, 4) for c in range(8))
A6, B6, C6, D6, E6, F6, G6, H6 = (Location(c, 5) for c in range(8))
A7, B7, C7, D7, E7, F7, G7, H7 = (Location(c, 6) for c in range(8))
A8, B8, C8, D8, E8, F8, G8, H8 = (Location(c, 7) for c in range(8))

ALL_LOCATIONS: tuple[Location, ...] = tuple(Location.from_index(i) for i in range(64))
