"""Tests for check, checkmate, stalemate and draw detection."""

from collections.abc import Callable

import pytest

from chessrules.core.board import Chessboard
from chessrules.core.enums import GameState, PieceColor, StatusKind
from chessrules.core.rules import GameStatus, Rules

BoardFactory = Callable[..., Chessboard]


class TestStatus:
    def test_initial_playing(self) -> None:
        board = Chessboard.initial()
        status = Rules.status(board)
        assert status == GameStatus(StatusKind.PLAYING, PieceColor.WHITE)
        assert Rules.game_state(board) == GameState.PLAYING

    def test_check(self, make_board: BoardFactory) -> None:
        board = make_board({"E1": "K", "E7": "r", "A8": "k"})
        status = Rules.status(board)
        assert status.kind == StatusKind.CHECK
        assert status.is_check
        assert status.state == GameState.PLAYING
        assert Rules.is_in_check(board)

    def test_back_rank_mate(self, make_board: BoardFactory) -> None:
        board = make_board(
            {"H8": "k", "G7": "p", "H7": "p", "A8": "R", "G1": "K"}, PieceColor.BLACK
        )
        assert Rules.is_checkmate(board)
        assert not Rules.is_stalemate(board)
        status = Rules.status(board)
        assert status.kind == StatusKind.CHECKMATE
        assert status.winner == PieceColor.WHITE
        assert status.state == GameState.WHITE_WIN

    def test_check_with_escape_is_not_mate(self, make_board: BoardFactory) -> None:
        board = make_board({"H8": "k", "G7": "p", "A8": "R", "G1": "K"}, PieceColor.BLACK)
        assert Rules.is_in_check(board)
        assert not Rules.is_checkmate(board)

    def test_stalemate(self, make_board: BoardFactory) -> None:
        board = make_board({"H8": "k", "F7": "K", "G6": "Q"}, PieceColor.BLACK)
        assert Rules.is_stalemate(board)
        assert not Rules.is_checkmate(board)
        status = Rules.status(board)
        assert status.kind == StatusKind.STALEMATE
        assert status.state == GameState.DRAW
        assert status.winner is None


class TestGameStatus:
    @pytest.mark.parametrize(
        ("kind", "side", "state"),
        [
            (StatusKind.PLAYING, PieceColor.WHITE, GameState.PLAYING),
            (StatusKind.CHECK, PieceColor.BLACK, GameState.PLAYING),
            (StatusKind.CHECKMATE, PieceColor.WHITE, GameState.BLACK_WIN),
            (StatusKind.CHECKMATE, PieceColor.BLACK, GameState.WHITE_WIN),
            (StatusKind.STALEMATE, PieceColor.WHITE, GameState.DRAW),
            (StatusKind.DRAW, PieceColor.BLACK, GameState.DRAW),
        ],
    )
    def test_state_mapping(
        self, kind: StatusKind, side: PieceColor, state: GameState
    ) -> None:
        assert GameStatus(kind, side).state == state

    def test_text(self) -> None:
        assert str(GameStatus(StatusKind.CHECK, PieceColor.BLACK)) == "check (black king)"
        assert str(GameStatus(StatusKind.STALEMATE, PieceColor.WHITE)) == "stalemate"


class TestInsufficientMaterial:
    @pytest.mark.parametrize(
        "placement",
        [
            {"E1": "K", "E8": "k"},
            {"E1": "K", "E8": "k", "C1": "B"},
            {"E1": "K", "E8": "k", "B8": "n"},
            {"E1": "K", "E8": "k", "C1": "B", "F8": "b"},
        ],
    )
    def test_drawn(self, make_board: BoardFactory, placement: dict[str, str]) -> None:
        assert Rules.is_insufficient_material(make_board(placement))

    @pytest.mark.parametrize(
        "placement",
        [
            {"E1": "K", "E8": "k", "A2": "P"},
            {"E1": "K", "E8": "k", "A1": "R"},
            {"E1": "K", "E8": "k", "C1": "B", "C8": "b"},
            {"E1": "K", "E8": "k", "B1": "N", "G1": "N"},
        ],
    )
    def test_not_drawn(self, make_board: BoardFactory, placement: dict[str, str]) -> None:
        assert not Rules.is_insufficient_material(make_board(placement))

    def test_auto_draw_is_opt_in(self, make_board: BoardFactory) -> None:
        board = make_board({"E1": "K", "E8": "k"})
        assert Rules.status(board).kind == StatusKind.PLAYING
        drawn = Rules.status(board, insufficient_material_draw=True)
        assert drawn.kind == StatusKind.DRAW
        assert Rules.game_state(board, insufficient_material_draw=True) == GameState.DRAW
