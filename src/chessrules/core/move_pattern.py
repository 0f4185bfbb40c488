"""Destination → move metadata mappings."""

from __future__ import annotations

from dataclasses import dataclass

from chessrules.core.enums import MoveSpecial
from chessrules.core.location import Location


@dataclass(frozen=True, slots=True)
class MoveInfo:
    """Metadata for a single reachable destination."""

    is_capture: bool = False
    special: MoveSpecial = MoveSpecial.NONE


QUIET = MoveInfo()
CAPTURE = MoveInfo(is_capture=True)


class MovePattern(dict[Location, MoveInfo]):
    """Raw destinations of a piece, ignoring the safety of its own king."""

    __slots__ = ()

    def add(self, target: Location, info: MoveInfo = QUIET) -> None:
        self[target] = info

    def captures(self) -> list[Location]:
        return [loc for loc, info in self.items() if info.is_capture]

    def names(self) -> list[str]:
        """Sorted text forms of the destinations (handy for display and tests)."""
        return sorted(str(loc) for loc in self)


class MoveList(MovePattern):
    """Destinations that are legal for the mover at the time of generation."""

    __slots__ = ()
