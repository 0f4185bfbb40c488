"""Tests for the Qt input bridge around HumanPlayer."""

import threading

import pytest
from PyQt6.QtCore import Qt

from chessrules.core.enums import PieceColor, PieceType
from chessrules.core.location import A7, A8, E2, E4
from chessrules.game.controller import GameController
from chessrules.game.handoff import HandoffCancelled
from chessrules.game.player import HumanPlayer
from chessrules.game.qt_bridge import MoveInputBridge

pytestmark = pytest.mark.usefixtures("qapp")


@pytest.fixture
def bridge() -> MoveInputBridge:
    return MoveInputBridge(HumanPlayer(PieceColor.WHITE, "W"))


class TestSignals:
    def test_move_requested(self, bridge: MoveInputBridge) -> None:
        seen: list[object] = []
        bridge.move_requested.connect(seen.append)
        bridge.player.request_move(GameController())
        assert seen == [PieceColor.WHITE]

    def test_promotion_requested(self, bridge: MoveInputBridge) -> None:
        seen: list[object] = []
        bridge.promotion_requested.connect(seen.append)
        bridge.player.request_promotion(GameController(), A7, A8)
        assert seen == [PieceColor.WHITE]


class TestSlots:
    def test_submit_move(self, bridge: MoveInputBridge) -> None:
        handoff = bridge.player.request_move(GameController())
        bridge.submit_move("e2e4")
        assert handoff.wait(0) == (E2, E4)

    def test_bad_text_is_rejected(self, bridge: MoveInputBridge) -> None:
        rejected: list[str] = []
        bridge.input_rejected.connect(rejected.append)
        handoff = bridge.player.request_move(GameController())
        bridge.submit_move("e9e4")
        assert len(rejected) == 1
        assert not handoff.done

    def test_submit_without_request(self, bridge: MoveInputBridge) -> None:
        rejected: list[str] = []
        bridge.input_rejected.connect(rejected.append)
        bridge.submit_move("e2e4")
        assert rejected and "No move was requested" in rejected[0]

    def test_submit_promotion(self, bridge: MoveInputBridge) -> None:
        handoff = bridge.player.request_promotion(GameController(), A7, A8)
        bridge.submit_promotion("Knight")
        assert handoff.wait(0) == PieceType.KNIGHT

    def test_bad_promotion(self, bridge: MoveInputBridge) -> None:
        rejected: list[str] = []
        bridge.input_rejected.connect(rejected.append)
        handoff = bridge.player.request_promotion(GameController(), A7, A8)
        bridge.submit_promotion("pawn")
        assert len(rejected) == 1
        assert not handoff.done

    def test_cancel(self, bridge: MoveInputBridge) -> None:
        handoff = bridge.player.request_move(GameController())
        bridge.cancel()
        with pytest.raises(HandoffCancelled):
            handoff.wait(0)


class TestWithController:
    def test_worker_thread_game(self, bridge: MoveInputBridge) -> None:
        ctrl = GameController()
        ctrl.new_game(bridge.player, HumanPlayer(PieceColor.BLACK))
        asked = threading.Event()
        # Emitted from the worker thread; no event loop runs here.
        bridge.move_requested.connect(
            lambda color: asked.set(), Qt.ConnectionType.DirectConnection
        )
        result: list[object] = []
        worker = threading.Thread(target=lambda: result.append(ctrl.play_turn(5)))
        worker.start()
        assert asked.wait(5)
        bridge.submit_move("E2E4")
        worker.join(5)
        assert result and result[0] is not None
        assert ctrl.to_move == PieceColor.BLACK
