"""Abstract interfaces for the game layer.

Follows Dependency Inversion: the GameController depends on these ABCs, not
on concrete move sources (interactive input, scripts, external engines).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum, auto
from typing import TYPE_CHECKING, TypeAlias

from chessrules.core.enums import PieceColor, PieceType
from chessrules.core.location import Location

if TYPE_CHECKING:
    from chessrules.game.controller import GameController
    from chessrules.game.handoff import Handoff


MoveChoice: TypeAlias = tuple[Location, Location]
PromotionChoice: TypeAlias = PieceType | str


# ── Game phase FSM states ────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """What the controller is waiting for."""

    AWAITING_MOVE = auto()
    AWAITING_PROMOTION = auto()
    GAME_OVER = auto()


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IPlayer(ABC):
    """Interface for a game participant that supplies moves."""

    @property
    @abstractmethod
    def color(self) -> PieceColor: ...

    @property
    @abstractmethod
    def name(self) -> str: ...

    @property
    @abstractmethod
    def is_human(self) -> bool: ...

    @abstractmethod
    def request_move(self, controller: GameController) -> Handoff[MoveChoice]:
        """Start choosing a move; the returned handoff resolves with ``(from, to)``."""

    @abstractmethod
    def request_promotion(
        self, controller: GameController, origin: Location, target: Location
    ) -> Handoff[PromotionChoice]:
        """Start choosing the promotion piece for the pending pawn move."""

    @abstractmethod
    def cancel(self) -> None:
        """Cancel any outstanding request."""
