"""Qt bridge feeding an interactive board's input into a :class:`HumanPlayer`.

The controller typically runs :meth:`GameController.play` on a worker thread
and blocks inside a handoff; the GUI thread answers through this object's
slots. Signals emitted from the worker thread reach GUI-thread receivers
through Qt's queued connections.
"""

from __future__ import annotations

import logging

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from chessrules.core.enums import PieceColor
from chessrules.core.errors import LocationFormatError, PromotionChoiceError
from chessrules.core.location import parse_extended_move
from chessrules.core.piece import parse_promotion
from chessrules.game.player import HumanPlayer

_LOGGER = logging.getLogger(__name__)


class MoveInputBridge(QObject):
    """Signal/slot adapter around one human player's move requests."""

    move_requested = pyqtSignal(object)  # PieceColor
    promotion_requested = pyqtSignal(object)  # PieceColor
    input_rejected = pyqtSignal(str)  # message

    def __init__(self, player: HumanPlayer, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._player = player
        player.on_move_requested = self._on_move_requested
        player.on_promotion_requested = self._on_promotion_requested

    @property
    def player(self) -> HumanPlayer:
        return self._player

    @pyqtSlot(str)
    def submit_move(self, text: str) -> None:
        """Answer the pending request with a from-to move such as ``'E2E4'``."""
        try:
            origin, target = parse_extended_move(text)
        except LocationFormatError as exc:
            _LOGGER.warning("Ignoring move input %r: %s", text, exc)
            self.input_rejected.emit(str(exc))
            return
        if not self._player.submit_move(origin, target):
            self.input_rejected.emit(f"No move was requested from {self._player.name}")

    @pyqtSlot(str)
    def submit_promotion(self, tag: str) -> None:
        """Answer the pending promotion request with ``'q'``, ``'knight'``, ``'♖'``..."""
        try:
            choice = parse_promotion(tag)
        except PromotionChoiceError as exc:
            _LOGGER.warning("Ignoring promotion input %r: %s", tag, exc)
            self.input_rejected.emit(str(exc))
            return
        if not self._player.submit_promotion(choice):
            self.input_rejected.emit(
                f"No promotion was requested from {self._player.name}"
            )

    @pyqtSlot()
    def cancel(self) -> None:
        """Abort the pending request; the controller applies nothing."""
        self._player.cancel()

    def _on_move_requested(self, color: PieceColor) -> None:
        self.move_requested.emit(color)

    def _on_promotion_requested(self, color: PieceColor) -> None:
        self.promotion_requested.emit(color)
