"""Game management layer: controller, players, handoffs and history.

Quick start::

    from chessrules.core import PieceColor
    from chessrules.game import GameController, HumanPlayer

    ctrl = GameController()
    ctrl.new_game(
        white=HumanPlayer(PieceColor.WHITE, "Alice"),
        black=HumanPlayer(PieceColor.BLACK, "Bob"),
    )
    ctrl.apply_move("E2", "E4")

The Qt adapter lives in :mod:`chessrules.game.qt_bridge` and is imported
separately so the rest of the layer does not load PyQt6.
"""

from chessrules.game.controller import GameController, GameEvents
from chessrules.game.handoff import Handoff, HandoffCancelled
from chessrules.game.history import MoveRecord
from chessrules.game.interfaces import GamePhase, IPlayer, MoveChoice, PromotionChoice
from chessrules.game.player import CallbackPlayer, HumanPlayer

__all__ = [
    # Interfaces
    "GamePhase",
    "IPlayer",
    "MoveChoice",
    "PromotionChoice",
    # Concrete
    "CallbackPlayer",
    "GameController",
    "GameEvents",
    "Handoff",
    "HandoffCancelled",
    "HumanPlayer",
    "MoveRecord",
]
