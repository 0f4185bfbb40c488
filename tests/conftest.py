"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import os
import sys
from collections.abc import Callable, Iterator, Mapping

import pytest

from chessrules.core.board import Chessboard
from chessrules.core.enums import PieceColor

# Linux CI runners are often headless. Force an offscreen backend only there.
if (
    sys.platform.startswith("linux")
    and "QT_QPA_PLATFORM" not in os.environ
    and "DISPLAY" not in os.environ
    and "WAYLAND_DISPLAY" not in os.environ
):
    os.environ["QT_QPA_PLATFORM"] = "offscreen"


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    """Provide a singleton QCoreApplication for Qt bridge tests."""
    from PyQt6.QtCore import QCoreApplication

    app = QCoreApplication.instance()
    if app is None:
        app = QCoreApplication([])
    yield app


@pytest.fixture
def make_board() -> Callable[..., Chessboard]:
    """Factory: ``make_board({"E1": "K", "E8": "k"}, PieceColor.BLACK)``."""

    def _make(
        placement: Mapping[str, str],
        to_move: PieceColor = PieceColor.WHITE,
    ) -> Chessboard:
        return Chessboard.from_placement(placement, to_move)

    return _make
