"""Concrete player implementations."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from chessrules.core.enums import PieceColor, PieceType
from chessrules.core.location import Location, as_location
from chessrules.game.handoff import Handoff
from chessrules.game.interfaces import IPlayer, MoveChoice, PromotionChoice

if TYPE_CHECKING:
    from chessrules.game.controller import GameController


class HumanPlayer(IPlayer):
    """A human participant whose moves arrive from an interactive surface.

    ``request_move`` opens a handoff and notifies ``on_move_requested``; the
    input surface later calls :meth:`submit_move` (possibly from another
    thread) to resolve it.

    Args:
        color: Side the player plays.
        name: Display name.
        on_move_requested: ``(PieceColor) -> None``, called when a move is
            wanted.
        on_promotion_requested: ``(PieceColor) -> None``, called when the
            promotion piece is wanted.
    """

    __slots__ = (
        "_color",
        "_name",
        "_pending_move",
        "_pending_promotion",
        "on_move_requested",
        "on_promotion_requested",
    )

    def __init__(
        self,
        color: PieceColor,
        name: str = "",
        on_move_requested: Callable[[PieceColor], None] | None = None,
        on_promotion_requested: Callable[[PieceColor], None] | None = None,
    ) -> None:
        self._color = color
        self._name = name or f"Player ({color})"
        self._pending_move: Handoff[MoveChoice] | None = None
        self._pending_promotion: Handoff[PromotionChoice] | None = None
        self.on_move_requested = on_move_requested
        self.on_promotion_requested = on_promotion_requested

    @property
    def color(self) -> PieceColor:
        return self._color

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_human(self) -> bool:
        return True

    @property
    def is_waiting(self) -> bool:
        pending = self._pending_move
        return pending is not None and not pending.done

    def request_move(self, controller: GameController) -> Handoff[MoveChoice]:
        handoff: Handoff[MoveChoice] = Handoff(f"{self._color} move")
        self._pending_move = handoff
        if self.on_move_requested is not None:
            self.on_move_requested(self._color)
        return handoff

    def request_promotion(
        self, controller: GameController, origin: Location, target: Location
    ) -> Handoff[PromotionChoice]:
        handoff: Handoff[PromotionChoice] = Handoff(f"{self._color} promotion")
        self._pending_promotion = handoff
        if self.on_promotion_requested is not None:
            self.on_promotion_requested(self._color)
        return handoff

    def submit_move(self, origin: Location | str, target: Location | str) -> bool:
        """Answer the outstanding move request. Returns ``False`` if none is open."""
        pending = self._pending_move
        if pending is None:
            return False
        return pending.deliver((as_location(origin), as_location(target)))

    def submit_promotion(self, choice: PromotionChoice) -> bool:
        """Answer the outstanding promotion request."""
        pending = self._pending_promotion
        if pending is None:
            return False
        return pending.deliver(choice)

    def cancel(self) -> None:
        for pending in (self._pending_move, self._pending_promotion):
            if pending is not None:
                pending.cancel()


class CallbackPlayer(IPlayer):
    """A participant whose choices come from plain callables.

    Suitable for scripted games and for plugging in an external engine.
    Returning ``None`` from *choose_move* cancels the request.

    Args:
        color: Side the player plays.
        name: Display name.
        choose_move: ``(GameController) -> (from, to) | None``.
        choose_promotion: ``(GameController, from, to) -> choice``; defaults
            to always choosing a queen.
    """

    __slots__ = ("_color", "_name", "_choose_move", "_choose_promotion")

    def __init__(
        self,
        color: PieceColor,
        choose_move: Callable[[GameController], MoveChoice | None],
        name: str = "Script",
        choose_promotion: Callable[[GameController, Location, Location], PromotionChoice]
        | None = None,
    ) -> None:
        self._color = color
        self._name = name
        self._choose_move = choose_move
        self._choose_promotion = choose_promotion

    @property
    def color(self) -> PieceColor:
        return self._color

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_human(self) -> bool:
        return False

    def request_move(self, controller: GameController) -> Handoff[MoveChoice]:
        choice = self._choose_move(controller)
        if choice is None:
            handoff: Handoff[MoveChoice] = Handoff(f"{self._color} move")
            handoff.cancel()
            return handoff
        return Handoff.resolved(choice, f"{self._color} move")

    def request_promotion(
        self, controller: GameController, origin: Location, target: Location
    ) -> Handoff[PromotionChoice]:
        if self._choose_promotion is None:
            choice: PromotionChoice = PieceType.QUEEN
        else:
            choice = self._choose_promotion(controller, origin, target)
        return Handoff.resolved(choice, f"{self._color} promotion")

    def cancel(self) -> None:
        pass  # choices are made synchronously
