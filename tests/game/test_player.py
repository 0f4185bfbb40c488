"""Tests for Player implementations."""

import pytest

from chessrules.core.enums import PieceColor, PieceType
from chessrules.core.location import A7, A8, E2, E4
from chessrules.game.controller import GameController
from chessrules.game.handoff import HandoffCancelled
from chessrules.game.player import CallbackPlayer, HumanPlayer


class TestHumanPlayer:
    def test_properties(self) -> None:
        p = HumanPlayer(PieceColor.WHITE, "Alice")
        assert p.color == PieceColor.WHITE
        assert p.name == "Alice"
        assert p.is_human is True

    def test_default_name(self) -> None:
        p = HumanPlayer(PieceColor.BLACK)
        assert "black" in p.name.lower()

    def test_submit_resolves_request(self) -> None:
        p = HumanPlayer(PieceColor.WHITE)
        handoff = p.request_move(GameController())
        assert p.is_waiting
        assert p.submit_move("e2", "e4")
        assert handoff.wait(0) == (E2, E4)
        assert not p.is_waiting

    def test_submit_without_request(self) -> None:
        p = HumanPlayer(PieceColor.WHITE)
        assert not p.submit_move(E2, E4)
        assert not p.submit_promotion("q")

    def test_request_notifies(self) -> None:
        asked: list[PieceColor] = []
        p = HumanPlayer(
            PieceColor.BLACK,
            on_move_requested=asked.append,
            on_promotion_requested=asked.append,
        )
        ctrl = GameController()
        p.request_move(ctrl)
        p.request_promotion(ctrl, A7, A8)
        assert asked == [PieceColor.BLACK, PieceColor.BLACK]

    def test_promotion_answer(self) -> None:
        p = HumanPlayer(PieceColor.WHITE)
        handoff = p.request_promotion(GameController(), A7, A8)
        assert p.submit_promotion(PieceType.KNIGHT)
        assert handoff.wait(0) == PieceType.KNIGHT

    def test_cancel(self) -> None:
        p = HumanPlayer(PieceColor.WHITE)
        handoff = p.request_move(GameController())
        p.cancel()
        with pytest.raises(HandoffCancelled):
            handoff.wait(0)
        assert not p.submit_move(E2, E4)

    def test_cancel_noop(self) -> None:
        p = HumanPlayer(PieceColor.WHITE)
        p.cancel()  # should not raise


class TestCallbackPlayer:
    def test_properties(self) -> None:
        p = CallbackPlayer(PieceColor.BLACK, lambda ctrl: None, name="Script")
        assert p.color == PieceColor.BLACK
        assert p.name == "Script"
        assert p.is_human is False

    def test_request_move_calls_callback(self) -> None:
        called_with: list[GameController] = []

        def choose(ctrl: GameController) -> tuple:
            called_with.append(ctrl)
            return (E2, E4)

        p = CallbackPlayer(PieceColor.WHITE, choose)
        ctrl = GameController()
        handoff = p.request_move(ctrl)
        assert called_with == [ctrl]
        assert handoff.wait(0) == (E2, E4)

    def test_none_cancels(self) -> None:
        p = CallbackPlayer(PieceColor.WHITE, lambda ctrl: None)
        with pytest.raises(HandoffCancelled):
            p.request_move(GameController()).wait(0)

    def test_default_promotion_is_queen(self) -> None:
        p = CallbackPlayer(PieceColor.WHITE, lambda ctrl: None)
        assert p.request_promotion(GameController(), A7, A8).wait(0) == PieceType.QUEEN

    def test_custom_promotion(self) -> None:
        p = CallbackPlayer(
            PieceColor.WHITE,
            lambda ctrl: None,
            choose_promotion=lambda ctrl, origin, target: "rook",
        )
        assert p.request_promotion(GameController(), A7, A8).wait(0) == "rook"
